"""Substitution templates.

A template is an ordered list of line segments that replaces every segment
of a curve during expansion. The template's net endpoint, span and rotation
are derived once at construction and never recomputed.
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from spacefill.domain.line import Line
from spacefill.exceptions import InvalidTemplate

# Span below this fraction of the summed segment length counts as zero
SPAN_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Template:
    """An immutable substitution rule.

    Attributes:
        lines: Template segments, rotations and lengths relative to the template
        name: Optional display name
        endpoint: Where the template path ends when walked from the origin
        span: Euclidean norm of endpoint (net scale of one substitution)
        net_rotation: Angle of endpoint in degrees (net turn of one substitution)

    Raises:
        InvalidTemplate: If the template is empty or its span is zero
    """

    lines: tuple[Line, ...]
    name: str = ""
    endpoint: tuple[float, float] = field(init=False, compare=False)
    span: float = field(init=False, compare=False)
    net_rotation: float = field(init=False, compare=False)

    def __post_init__(self) -> None:
        lines = tuple(self.lines)
        if not lines:
            raise InvalidTemplate("template has no segments")

        x = 0.0
        y = 0.0
        for line in lines:
            dx, dy = line.displacement()
            x += dx
            y += dy
        span = math.hypot(x, y)

        total_length = sum(line.length for line in lines)
        if span <= SPAN_TOLERANCE * total_length:
            raise InvalidTemplate(
                f"segments cancel to zero net displacement (span={span:.3g})"
            )

        object.__setattr__(self, "lines", lines)
        object.__setattr__(self, "endpoint", (x, y))
        object.__setattr__(self, "span", span)
        object.__setattr__(self, "net_rotation", math.degrees(math.atan2(y, x)))

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)


def make_template(lines: Iterable[Line], name: str = "") -> Template:
    """Create a template from a sequence of lines.

    Args:
        lines: Template segments in drawing order
        name: Optional display name

    Returns:
        Template with derived geometry cached

    Raises:
        InvalidTemplate: If the segments cancel to a zero net span
    """
    return Template(lines=tuple(lines), name=name)
