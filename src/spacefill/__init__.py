"""Spacefill - Generate self-similar space-filling curves.

Spacefill builds curves such as the Koch curve, the right-angle curve and
Ventrella's holiday tree by recursively replacing every segment of a seed
with a scaled, rotated and possibly mirrored copy of a template of line
segments. Finished curves can be exported as SVG.

Example:
    $ spacefill draw koch --order 4

This will create koch-4.svg containing 1,024 segments.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
