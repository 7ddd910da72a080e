"""Line segment value type.

This module defines the fundamental building block of every curve:
- Line: a directed segment with a rotation, a length and two mirror flags
- make_line: builder using the reverse/twist vocabulary of curve templates
"""

import math
from dataclasses import dataclass, replace

from spacefill.exceptions import InvalidSegment


@dataclass(frozen=True, slots=True)
class Line:
    """A directed straight segment of a curve.

    Inside a Template the rotation and length are relative to the template.
    In an expanded curve they are absolute: each segment starts where the
    previous one ended.

    Immutable and hashable, so expansion never disturbs template definitions.

    Attributes:
        rotation: Direction in degrees, counter-clockwise from the x axis
        length: Non-negative segment length
        mirror_reverse: Traverse the template backwards when substituting
        mirror_flip: Reflect substituted children (invert rotation sign)
    """

    rotation: float
    length: float
    mirror_reverse: bool = False
    mirror_flip: bool = False

    def __post_init__(self) -> None:
        if not math.isfinite(self.rotation):
            raise InvalidSegment(self.length, f"rotation must be finite, got {self.rotation}")
        if not math.isfinite(self.length):
            raise InvalidSegment(self.length, "length must be finite")
        if self.length < 0:
            raise InvalidSegment(self.length, "length must be >= 0")

    def displacement(self) -> tuple[float, float]:
        """Vector from the start of this segment to its end.

        Returns:
            Tuple of (dx, dy)
        """
        theta = math.radians(self.rotation)
        return (self.length * math.cos(theta), self.length * math.sin(theta))

    def scaled(self, factor: float) -> "Line":
        """Return a copy with the length multiplied by factor."""
        return replace(self, length=self.length * factor)

    @property
    def flags(self) -> str:
        """Mirror flags in template notation (e.g. "reverse twist")."""
        names = []
        if self.mirror_reverse:
            names.append("reverse")
        if self.mirror_flip:
            names.append("twist")
        return " ".join(names)


def make_line(
    rotation: float,
    length: float,
    reverse: bool = False,
    twist: bool = False,
) -> Line:
    """Build a Line using template notation.

    Args:
        rotation: Direction in degrees
        length: Segment length
        reverse: Set mirror_reverse
        twist: Set mirror_flip

    Returns:
        Line instance

    Examples:
        >>> make_line(0, 1, twist=True)
        Line(rotation=0.0, length=1.0, mirror_reverse=False, mirror_flip=True)
    """
    return Line(
        rotation=float(rotation),
        length=float(length),
        mirror_reverse=reverse,
        mirror_flip=twist,
    )
