"""SVG rendering of expanded curves.

This module turns a finished chain of segments into an SVG drawing. Every
segment is drawn as an instance of one unit glyph (a line from 0 to 1 along
the x axis with a barb at its head) that is rotated, scaled by the segment
length and mirrored by the segment flags, so the mirroring chosen in the
template stays visible in the output.

Key components:
- build_drawing: Create the svgwrite Drawing for a chain of segments
- render_svg: Render a chain of segments to an SVG string
- SvgWriter: Save rendered curves to disk
"""

import math
from collections.abc import Sequence
from pathlib import Path

import svgwrite

from spacefill.config import RenderConfig
from spacefill.core.geometry import compute_bounding_box, walk_points
from spacefill.domain import Line
from spacefill.exceptions import SvgSaveError

GLYPH_ID = "curve-line"
ORIGIN_RADIUS = 0.03
PIVOT_RADIUS_FACTOR = 1 / 40


def _num(value: float, precision: int) -> float:
    # + 0.0 turns -0.0 into 0.0
    return round(value, precision) + 0.0


def _decimals(lines: Sequence[Line], precision: int) -> int:
    """Decimal places that keep `precision` significant digits on the shortest segment."""
    shortest = min((line.length for line in lines if line.length > 0), default=0.0)
    if shortest == 0.0:
        return precision
    return max(precision, precision - 1 - math.floor(math.log10(shortest)))


def _add_glyph(dwg: svgwrite.Drawing, config: RenderConfig) -> None:
    """Define the unit segment glyph in the drawing's defs."""
    stroke = f"#{config.line_color}"
    glyph = dwg.g(id=GLYPH_ID)
    glyph.add(
        dwg.line(
            start=(0.08, 0),
            end=(0.92, 0),
            stroke=stroke,
            stroke_width=config.stroke_width,
            stroke_linecap="round",
        )
    )
    if config.arrow_heads:
        glyph.add(
            dwg.line(
                start=(0.8, 0.2),
                end=(0.92, 0),
                stroke=stroke,
                stroke_width=config.stroke_width,
                stroke_linecap="round",
            )
        )
    dwg.defs.add(glyph)


def build_drawing(
    lines: Sequence[Line],
    config: RenderConfig | None = None,
    filename: str = "noname.svg",
) -> svgwrite.Drawing:
    """Create an SVG drawing of a chain of segments.

    The viewBox is the curve's bounding box padded by config.margin. With
    flip_y the curve is drawn in a group mirrored vertically, so positive
    rotations turn counter-clockwise as in the usual math convention.
    Numbers are rounded to config.precision decimal places, or more when the
    shortest segment needs them to keep that many significant digits.

    Args:
        lines: Expanded segments in drawing order
        config: Render settings (defaults if None)
        filename: Filename recorded in the drawing, used by save()

    Returns:
        svgwrite Drawing ready to serialize
    """
    config = config or RenderConfig()
    p = _decimals(lines, config.precision)

    min_x, min_y, width, height = compute_bounding_box(lines)
    view_x = min_x - config.margin
    view_y = (-(min_y + height) if config.flip_y else min_y) - config.margin
    view_w = width + 2 * config.margin
    view_h = height + 2 * config.margin

    dwg = svgwrite.Drawing(filename, profile="full", size=("100%", "100%"))
    dwg.viewbox(_num(view_x, p), _num(view_y, p), _num(view_w, p), _num(view_h, p))

    dwg.add(
        dwg.rect(
            insert=(_num(view_x, p), _num(view_y, p)),
            size=(_num(view_w, p), _num(view_h, p)),
            fill=f"#{config.background_color}",
        )
    )
    _add_glyph(dwg, config)

    curve = dwg.g(id="curve")
    if config.flip_y:
        curve.scale(1, -1)

    if config.show_origin:
        curve.add(dwg.circle(center=(0, 0), r=ORIGIN_RADIUS, fill="black", opacity=0.3))

    pivots = dwg.g(id="pivots", fill=f"#{config.pivot_color}")

    for line, (x, y) in zip(lines, walk_points(lines)):
        length = _num(line.length, p)
        scale_x = -length if line.mirror_reverse else length
        scale_y = -length if line.mirror_flip else length

        use = dwg.use(f"#{GLYPH_ID}")
        use.translate(_num(x, p), _num(y, p))
        use.rotate(_num(line.rotation, p))
        if line.mirror_reverse:
            # Mirrored glyph spans [-length, 0]; shift it back onto the segment
            use.translate(length, 0)
        use.scale(scale_x + 0.0, scale_y + 0.0)
        curve.add(use)

        if config.show_pivots:
            pivots.add(
                dwg.circle(
                    center=(_num(x, p), _num(y, p)),
                    r=_num(line.length * PIVOT_RADIUS_FACTOR, p + 2),
                )
            )

    if config.show_pivots:
        curve.add(pivots)
    dwg.add(curve)
    return dwg


def render_svg(lines: Sequence[Line], config: RenderConfig | None = None) -> str:
    """Render a chain of segments to an SVG document string.

    Args:
        lines: Expanded segments in drawing order
        config: Render settings (defaults if None)

    Returns:
        SVG document as a string
    """
    return build_drawing(lines, config).tostring()


class SvgWriter:
    """Writes rendered curves to SVG files."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize writer.

        Args:
            config: Render settings (defaults if None)
        """
        self.config = config or RenderConfig()

    def save(self, lines: Sequence[Line], output_path: Path) -> Path:
        """Render and save a curve.

        Args:
            lines: Expanded segments in drawing order
            output_path: Destination file

        Returns:
            The path written

        Raises:
            SvgSaveError: If the file cannot be written
        """
        dwg = build_drawing(lines, self.config, filename=str(output_path))
        try:
            dwg.save()
        except OSError as e:
            raise SvgSaveError(str(output_path), str(e)) from e
        return output_path

    @staticmethod
    def get_output_path(name: str, order: int, directory: Path | None = None) -> Path:
        """Generate the default output path for a curve.

        Args:
            name: Template name
            order: Number of iterations
            directory: Target directory (current directory if None)

        Returns:
            Path like "koch-4.svg"
        """
        filename = f"{name.replace('_', '-')}-{order}.svg"
        return (directory or Path(".")) / filename
