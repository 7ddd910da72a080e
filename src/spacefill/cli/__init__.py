"""Command-line interface for spacefill.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Library listing and template inspection
- SVG export of expanded curves
- Verbose/quiet output modes
- Detailed error reporting
"""

from spacefill.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
