"""Rendering adapters for spacefill.

This module turns expanded curves into visual artifacts. The core never
depends on it; it only consumes the segments the expander produces.

Key components:
- render_svg: Render segments to an SVG string
- SvgWriter: Save segments as an SVG file
"""

from spacefill.io.svg import SvgWriter, build_drawing, render_svg

__all__ = [
    "SvgWriter",
    "build_drawing",
    "render_svg",
]
