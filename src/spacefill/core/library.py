"""Library of named example curves and seeds.

Templates follow the notation of Ventrella's "Brainfilling Curves": a
"reverse" segment walks the template backwards when substituted and a
"twist" segment is reflected.

Key functions:
- get_curve / get_template: Look up a named curve
- get_seed: Look up a named seed
- list_curves / list_seeds: Enumerate the library
"""

import math
from dataclasses import dataclass

from spacefill.domain import Line, Template, make_line, make_template
from spacefill.exceptions import TemplateNotFoundError


@dataclass(frozen=True)
class CurveDefinition:
    """A named template with its recommended orders.

    Attributes:
        name: Library key
        template: Substitution rule
        description: One-line description
        default_order: Iterations used when none is given
        max_order: Highest order worth drawing
    """

    name: str
    template: Template
    description: str
    default_order: int
    max_order: int


@dataclass(frozen=True)
class SeedDefinition:
    """A named starting shape."""

    name: str
    lines: tuple[Line, ...]
    description: str


_SQRT3 = math.sqrt(3)

_CURVES: dict[str, CurveDefinition] = {
    definition.name: definition
    for definition in (
        CurveDefinition(
            name="right_angle",
            template=make_template(
                [make_line(0, 1, twist=True), make_line(90, 1)],
                name="right_angle",
            ),
            description="Two unit segments at 90 degrees, the first twisted",
            default_order=9,
            max_order=10,
        ),
        CurveDefinition(
            name="koch",
            template=make_template(
                [make_line(0, 1), make_line(60, 1), make_line(-60, 1), make_line(0, 1)],
                name="koch",
            ),
            description="Classic Koch curve",
            default_order=4,
            max_order=5,
        ),
        CurveDefinition(
            name="holiday_tree",
            template=make_template(
                [
                    make_line(30, _SQRT3, twist=True),
                    make_line(120, 1),
                    make_line(0, 1),
                    make_line(-120, 1),
                    make_line(-30, _SQRT3, twist=True),
                ],
                name="holiday_tree",
            ),
            description="Holiday tree by Jeffrey Ventrella",
            default_order=4,
            max_order=5,
        ),
    )
}

_SEEDS: dict[str, SeedDefinition] = {
    "square": SeedDefinition(
        name="square",
        lines=(make_line(0, 1), make_line(90, 1), make_line(180, 1), make_line(270, 1)),
        description="Unit square traced counter-clockwise",
    ),
}


def list_curves() -> list[CurveDefinition]:
    """Get all library curves in definition order."""
    return list(_CURVES.values())


def list_seeds() -> list[SeedDefinition]:
    """Get all library seeds in definition order."""
    return list(_SEEDS.values())


def get_curve(name: str) -> CurveDefinition:
    """Look up a curve by name.

    Args:
        name: Library key; dashes are accepted in place of underscores

    Returns:
        CurveDefinition for the name

    Raises:
        TemplateNotFoundError: If no curve has that name
    """
    key = name.strip().lower().replace("-", "_")
    try:
        return _CURVES[key]
    except KeyError:
        raise TemplateNotFoundError(name, sorted(_CURVES)) from None


def get_template(name: str) -> Template:
    """Look up a library template by name."""
    return get_curve(name).template


def get_seed(name: str) -> tuple[Line, ...]:
    """Look up seed segments by name.

    The name of a library curve is also accepted and yields that curve's
    own template segments.

    Raises:
        TemplateNotFoundError: If no seed or curve has that name
    """
    key = name.strip().lower().replace("-", "_")
    if key in _SEEDS:
        return _SEEDS[key].lines
    if key in _CURVES:
        return _CURVES[key].template.lines
    raise TemplateNotFoundError(name, sorted(_SEEDS) + sorted(_CURVES))
