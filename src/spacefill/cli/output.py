"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from spacefill.core.library import CurveDefinition, SeedDefinition
from spacefill.domain import Template
from spacefill.utils import GenerationStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Spacefill[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_library(curves: Sequence[CurveDefinition], seeds: Sequence[SeedDefinition]) -> None:
    """Print the curve and seed library as tables."""
    table = Table(title="Curves", title_justify="left", show_edge=False)
    table.add_column("Name", style="bold")
    table.add_column("Segments", justify="right")
    table.add_column("Order", justify="right")
    table.add_column("Description")
    for curve in curves:
        table.add_row(
            curve.name,
            str(len(curve.template.lines)),
            f"{curve.default_order} (max {curve.max_order})",
            curve.description,
        )
    console.print(table)

    seed_table = Table(title="Seeds", title_justify="left", show_edge=False)
    seed_table.add_column("Name", style="bold")
    seed_table.add_column("Segments", justify="right")
    seed_table.add_column("Description")
    for seed in seeds:
        seed_table.add_row(seed.name, str(len(seed.lines)), seed.description)
    console.print()
    console.print(seed_table)


def print_template_info(template: Template) -> None:
    """Print a template's segments and derived geometry."""
    table = Table(show_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Rotation", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Flags")
    for idx, line in enumerate(template.lines):
        table.add_row(str(idx), f"{line.rotation:g}°", f"{line.length:.4g}", line.flags)
    console.print(table)

    x, y = template.endpoint
    console.print(f"\n  Endpoint       ({x:.4f}, {y:.4f})")
    console.print(f"  Span           {template.span:.4f}")
    console.print(f"  Net rotation   {template.net_rotation:.2f}°")


def _format_time(milliseconds: float) -> str:
    """Format milliseconds into human-readable time string."""
    if milliseconds < 1000:
        return f"{milliseconds:.0f}ms"
    seconds = milliseconds / 1000
    if seconds < 60:
        return f"{seconds:.1f}s"
    mins = int(seconds // 60)
    secs = seconds % 60
    return f"{mins}m {secs:.1f}s"


def print_curve_summary(stats: GenerationStats, bbox: tuple[float, float, float, float]) -> None:
    """Print segment count, extent and timing of the generated curves.

    Args:
        stats: Generation statistics collected so far
        bbox: (min_x, min_y, width, height) of the latest curve
    """
    _, _, width, height = bbox
    console.print(
        f"  [green]{stats.segments_generated:,}[/green] segments {SYM_DOT} "
        f"{width:.3f} × {height:.3f} {SYM_DOT} {_format_time(stats.total_expansion_ms)}"
    )


def print_success(output_path: str, file_size: str) -> None:
    """Print success message.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
