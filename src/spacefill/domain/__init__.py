"""Domain models for spacefill.

This module contains the value types curves are built from. All models are:

- Immutable (frozen dataclasses), so templates can be shared freely
- Validated on construction
- Independent of rendering and CLI concerns

Key classes:
- Line: A directed segment with rotation, length and mirror flags
- Template: An ordered list of lines plus cached net geometry
"""

from spacefill.domain.line import Line, make_line
from spacefill.domain.template import SPAN_TOLERANCE, Template, make_template

__all__: list[str] = [
    # Constants
    "SPAN_TOLERANCE",
    # Core types
    "Line",
    "Template",
    # Builders
    "make_line",
    "make_template",
]
