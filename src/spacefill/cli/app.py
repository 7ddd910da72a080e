"""CLI application entry point for spacefill.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from spacefill import __version__
from spacefill.cli.output import (
    console,
    print_curve_summary,
    print_error,
    print_header,
    print_library,
    print_step,
    print_success,
    print_template_info,
)
from spacefill.config import (
    ExpansionConfig,
    LoggingConfig,
    RenderConfig,
    SpaceFillSettings,
)
from spacefill.core.generator import CurveGenerator
from spacefill.core.library import get_curve, list_curves, list_seeds
from spacefill.exceptions import SpaceFillError, SvgSaveError
from spacefill.io import SvgWriter

# Create the Typer app
app = typer.Typer(
    name="spacefill",
    help="Generate self-similar space-filling curves and export them as SVG.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Spacefill[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate self-similar space-filling curves by recursive substitution."""


@app.command("list")
def list_command() -> None:
    """List the named curves and seeds in the library."""
    print_library(list_curves(), list_seeds())


@app.command("info")
def info_command(
    name: Annotated[str, typer.Argument(help="Library curve name", show_default=False)],
) -> None:
    """Show a curve template's segments and derived geometry."""
    try:
        curve = get_curve(name)
    except SpaceFillError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    console.print(f"\n[bold]{curve.name}[/bold] {curve.description}\n")
    print_template_info(curve.template)


@app.command("draw")
def draw_command(
    name: Annotated[
        str,
        typer.Argument(help="Library curve name (see 'spacefill list')", show_default=False),
    ],
    order: Annotated[
        int | None,
        typer.Option(
            "--order",
            "-n",
            help="Number of substitution rounds (default: the curve's default order)",
            min=0,
        ),
    ] = None,
    seed: Annotated[
        str | None,
        typer.Option(
            "--seed",
            "-s",
            help="Seed shape name (default: the template itself)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-{order}.svg)",
        ),
    ] = None,
    max_segments: Annotated[
        int | None,
        typer.Option(
            "--max-segments",
            help="Refuse curves with more segments than this",
            min=1,
        ),
    ] = None,
    no_pivots: Annotated[
        bool,
        typer.Option("--no-pivots", help="Do not mark segment start points"),
    ] = False,
    no_arrows: Annotated[
        bool,
        typer.Option("--no-arrows", help="Draw plain segments without direction barbs"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Expand a library curve and write it as an SVG file.

    Example:
        spacefill draw koch --order 4

    This will create koch-4.svg with 1,024 segments.
    """
    try:
        curve = get_curve(name)
    except SpaceFillError as e:
        print_error(str(e), details="Run 'spacefill list' to see available curves.")
        raise typer.Exit(code=1)

    iterations = curve.default_order if order is None else order

    expansion = ExpansionConfig()
    if max_segments is not None:
        expansion = ExpansionConfig(max_segments=max_segments)

    try:
        logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
    except ValidationError as e:
        print_error(f"Invalid --log-level: {log_level}", details=e.errors()[0]["msg"])
        raise typer.Exit(code=1)

    settings = SpaceFillSettings(
        expansion=expansion,
        render=RenderConfig(show_pivots=not no_pivots, arrow_heads=not no_arrows),
        logging=logging_config,
    )

    if not quiet:
        print_header(__version__)
        print_step(f"Expanding {curve.name} (order {iterations})")
        if iterations > curve.max_order:
            console.print(
                f"  [yellow]Order {iterations} is above the recommended "
                f"maximum of {curve.max_order}[/yellow]"
            )

    output_path = output or SvgWriter.get_output_path(curve.name, iterations)

    try:
        generator = CurveGenerator(settings, quiet=quiet)
        result = generator.generate(curve.template, iterations, seed=seed)

        if not quiet:
            print_curve_summary(generator.stats, result.bounding_box)
            print_step("Rendering SVG")

        generator.save(result, output_path)
    except SvgSaveError as e:
        print_error(f"Could not save SVG: {e.reason}")
        raise typer.Exit(code=1)
    except SpaceFillError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_success(str(output_path), _format_file_size(output_path))


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
