"""Unit tests for the SVG rendering adapter."""

import re
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
from pydantic import ValidationError

from spacefill.config import RenderConfig
from spacefill.core import expand, get_template
from spacefill.domain import make_line
from spacefill.exceptions import RenderError, SvgSaveError
from spacefill.io import SvgWriter, render_svg

SVG_NS = "{http://www.w3.org/2000/svg}"


def _parse(svg: str) -> ET.Element:
    return ET.fromstring(svg)


def _uses(root: ET.Element) -> list[ET.Element]:
    return list(root.iter(f"{SVG_NS}use"))


def _transform(element: ET.Element) -> str:
    return element.get("transform", "")


def _viewbox(root: ET.Element) -> list[float]:
    return [float(v) for v in re.split(r"[\s,]+", root.get("viewBox", "").strip())]


class TestRenderSvg:
    """Tests for render_svg."""

    def test_one_use_per_segment(self):
        """Test every segment is drawn with the shared glyph."""
        koch = get_template("koch")
        lines = expand(koch.lines, koch, 2)
        root = _parse(render_svg(lines))
        assert len(_uses(root)) == 64

    def test_glyph_defined(self):
        """Test the unit glyph lives in defs."""
        root = _parse(render_svg([make_line(0, 1)]))
        glyphs = [g for g in root.iter(f"{SVG_NS}g") if g.get("id") == "curve-line"]
        assert len(glyphs) == 1
        assert len(list(glyphs[0].iter(f"{SVG_NS}line"))) == 2

    def test_no_arrow_heads(self):
        """Test plain glyph without the barb."""
        root = _parse(render_svg([make_line(0, 1)], RenderConfig(arrow_heads=False)))
        glyph = next(g for g in root.iter(f"{SVG_NS}g") if g.get("id") == "curve-line")
        assert len(list(glyph.iter(f"{SVG_NS}line"))) == 1

    def test_pivots(self):
        """Test one pivot marker per segment plus the origin marker."""
        lines = [make_line(0, 1), make_line(90, 1), make_line(180, 1)]
        root = _parse(render_svg(lines))
        assert len(list(root.iter(f"{SVG_NS}circle"))) == 4

    def test_without_pivots_or_origin(self):
        """Test markers can be switched off."""
        config = RenderConfig(show_pivots=False, show_origin=False)
        root = _parse(render_svg([make_line(0, 1), make_line(90, 1)], config))
        assert list(root.iter(f"{SVG_NS}circle")) == []

    def test_empty_curve(self):
        """Test empty input renders only the origin."""
        root = _parse(render_svg([]))
        assert _uses(root) == []
        assert len(list(root.iter(f"{SVG_NS}circle"))) == 1

    def test_viewbox_padded(self):
        """Test viewBox is the bounding box plus the margin."""
        root = _parse(render_svg([make_line(0, 1)], RenderConfig(margin=0.5)))
        assert _viewbox(root) == pytest.approx([-0.5, -0.5, 2.0, 1.0])

    def test_viewbox_flipped(self):
        """Test the y range is mirrored when flip_y is set."""
        lines = [make_line(90, 2)]
        flipped = _viewbox(_parse(render_svg(lines, RenderConfig(margin=0.0))))
        plain = _viewbox(_parse(render_svg(lines, RenderConfig(margin=0.0, flip_y=False))))
        assert flipped == pytest.approx([0.0, -2.0, 0.0, 2.0])
        assert plain == pytest.approx([0.0, 0.0, 0.0, 2.0])

    def test_flip_group(self):
        """Test the curve group is mirrored vertically."""
        root = _parse(render_svg([make_line(0, 1)]))
        curve = next(g for g in root.iter(f"{SVG_NS}g") if g.get("id") == "curve")
        assert "scale(1,-1)" in _transform(curve).replace(" ", "")

    def test_segment_transform(self):
        """Test a plain segment is translated, rotated and scaled."""
        root = _parse(render_svg([make_line(0, 1), make_line(90, 2)]))
        second = _transform(_uses(root)[1])
        assert second.startswith("translate(1")
        assert "rotate(90" in second
        assert "scale(2.0,2.0)" in second

    def test_reverse_mirrors_x(self):
        """Test reversed segments mirror the glyph along its length."""
        root = _parse(render_svg([make_line(0, 1, reverse=True)]))
        transform = _transform(_uses(root)[0])
        assert "scale(-1.0,1.0)" in transform
        assert transform.count("translate(") == 2

    def test_twist_mirrors_y(self):
        """Test twisted segments mirror the glyph across its length."""
        root = _parse(render_svg([make_line(0, 1, twist=True)]))
        assert "scale(1.0,-1.0)" in _transform(_uses(root)[0])

    def test_colors(self):
        """Test configured colours appear in the output."""
        config = RenderConfig(line_color="#ff0000", pivot_color="00ff00", background_color="123")
        svg = render_svg([make_line(0, 1)], config)
        assert "#ff0000" in svg
        assert "#00ff00" in svg
        assert "#123" in svg

    def test_invalid_color(self):
        """Test colours must be hex RGB."""
        with pytest.raises(ValidationError):
            RenderConfig(line_color="green")

    def test_precision(self):
        """Test coordinates are rounded."""
        svg = render_svg([make_line(0, 1 / 3)], RenderConfig(precision=3))
        assert "0.333" in svg
        assert "0.3333" not in svg

    @pytest.mark.parametrize("order", [8, 10, 12])
    def test_short_segments_keep_length(self, order):
        """Test deep-order segment lengths survive rounding."""
        length = (1 / 3) ** order
        root = _parse(render_svg([make_line(0, length), make_line(60, length)]))

        for use in _uses(root):
            match = re.search(r"scale\(([^,]+),([^)]+)\)", _transform(use))
            assert match is not None
            assert float(match.group(1)) == pytest.approx(length, rel=1e-3)
            assert float(match.group(2)) == pytest.approx(length, rel=1e-3)

    def test_short_segments_keep_pivots(self):
        """Test pivot radii of tiny segments do not round to zero."""
        length = (1 / 3) ** 10
        root = _parse(render_svg([make_line(0, length)], RenderConfig(show_origin=False)))
        radius = float(next(root.iter(f"{SVG_NS}circle")).get("r"))
        assert radius == pytest.approx(length / 40, rel=1e-2)

    def test_short_segments_keep_positions(self):
        """Test pivot positions stay distinct at deep orders."""
        length = (1 / 3) ** 10
        lines = [make_line(0, length), make_line(0, length)]
        root = _parse(render_svg(lines, RenderConfig(show_origin=False)))
        centers = [float(c.get("cx")) for c in root.iter(f"{SVG_NS}circle")]
        assert centers == pytest.approx([0.0, length], rel=1e-3, abs=1e-12)


class TestSvgWriter:
    """Tests for SvgWriter."""

    def test_save(self, tmp_path):
        """Test saving writes a parseable SVG file."""
        output = tmp_path / "curve.svg"
        written = SvgWriter().save([make_line(0, 1), make_line(60, 1)], output)

        assert written == output
        assert output.exists()
        root = ET.parse(output).getroot()
        assert len(_uses(root)) == 2

    def test_save_uses_config(self, tmp_path):
        """Test writer applies its render config."""
        output = tmp_path / "curve.svg"
        SvgWriter(RenderConfig(show_pivots=False, show_origin=False)).save(
            [make_line(0, 1)], output
        )
        root = ET.parse(output).getroot()
        assert list(root.iter(f"{SVG_NS}circle")) == []

    def test_save_missing_directory(self, tmp_path):
        """Test unwritable paths raise SvgSaveError."""
        output = tmp_path / "missing" / "curve.svg"
        with pytest.raises(SvgSaveError) as exc_info:
            SvgWriter().save([make_line(0, 1)], output)
        assert exc_info.value.path == str(output)
        assert isinstance(exc_info.value, RenderError)

    def test_get_output_path(self):
        """Test default output naming."""
        assert SvgWriter.get_output_path("koch", 4) == Path("koch-4.svg")
        assert SvgWriter.get_output_path("holiday_tree", 2, Path("out")) == Path(
            "out/holiday-tree-2.svg"
        )
