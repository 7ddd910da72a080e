"""Curve generation orchestration.

This module wires the pure expander to configuration, logging and the SVG
renderer. It resolves library names, enforces the configured iteration and
segment limits before any recursion starts, and records statistics.

Key components:
- CurveResult: An expanded curve with its derived geometry
- CurveGenerator: Main orchestrator used by the CLI
"""

import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from spacefill.config import SpaceFillSettings
from spacefill.core.expander import check_iterations, expand, expected_segment_count
from spacefill.core.geometry import compute_bounding_box, compute_endpoint
from spacefill.core.library import get_seed, get_template
from spacefill.domain import Line, Template
from spacefill.exceptions import InvalidIterationCount, SegmentLimitExceeded, SpaceFillError
from spacefill.io import SvgWriter, render_svg
from spacefill.utils import CurveLogger, GenerationStats, configure_logging


@dataclass(frozen=True)
class CurveResult:
    """An expanded curve.

    Attributes:
        lines: Expanded segments in drawing order
        template: Template used for substitution
        iterations: Number of substitution rounds
        bounding_box: (min_x, min_y, width, height) of the traced path
        endpoint: Where the curve ends
        duration_ms: Expansion time in milliseconds
    """

    lines: tuple[Line, ...]
    template: Template
    iterations: int
    bounding_box: tuple[float, float, float, float]
    endpoint: tuple[float, float]
    duration_ms: float

    @property
    def segment_count(self) -> int:
        """Number of segments in the curve."""
        return len(self.lines)


class CurveGenerator:
    """Generates and renders curves under the configured limits.

    Example:
        settings = SpaceFillSettings()
        generator = CurveGenerator(settings)
        result = generator.generate("koch", iterations=4)
        generator.save(result, Path("koch-4.svg"))
    """

    def __init__(self, config: SpaceFillSettings | None = None, quiet: bool = False) -> None:
        """Initialize generator with configuration.

        Args:
            config: Spacefill settings (defaults if None)
            quiet: Suppress console log output
        """
        self.config = config or SpaceFillSettings()
        self.logger = configure_logging(
            log_file=self.config.logging.log_file,
            console_level=self.config.logging.log_level,
            file_level=self.config.logging.file_log_level,
            quiet=quiet,
        )
        self.curve_logger = CurveLogger(self.logger)
        self.writer = SvgWriter(self.config.render)

    @property
    def stats(self) -> GenerationStats:
        """Statistics for all curves generated so far."""
        return self.curve_logger.stats

    def resolve_template(self, template: Template | str) -> Template:
        """Get a Template, looking up library names."""
        if isinstance(template, Template):
            return template
        return get_template(template)

    def resolve_seed(self, seed: Sequence[Line] | str | None, template: Template) -> tuple[Line, ...]:
        """Get seed segments; None means the template's own segments."""
        if seed is None:
            return template.lines
        if isinstance(seed, str):
            return get_seed(seed)
        return tuple(seed)

    def check_limits(self, seed_size: int, template: Template, iterations: int) -> int:
        """Validate an expansion against the configured limits.

        Args:
            seed_size: Number of seed segments
            template: Substitution rule
            iterations: Requested substitution rounds

        Returns:
            Expected number of output segments

        Raises:
            InvalidIterationCount: If iterations is not an int in 0..max_iterations
            SegmentLimitExceeded: If the output would exceed max_segments
        """
        limits = self.config.expansion
        check_iterations(iterations)
        if iterations > limits.max_iterations:
            raise InvalidIterationCount(
                iterations, f"must be <= {limits.max_iterations}"
            )

        expected = expected_segment_count(seed_size, len(template.lines), iterations)
        if limits.max_segments is not None and expected > limits.max_segments:
            raise SegmentLimitExceeded(expected, limits.max_segments)
        if expected > limits.warn_segments:
            self.curve_logger.log_large_expansion(
                template.name or "custom", expected, limits.warn_segments
            )
        return expected

    def generate(
        self,
        template: Template | str,
        iterations: int,
        seed: Sequence[Line] | str | None = None,
    ) -> CurveResult:
        """Expand a curve.

        Args:
            template: Template or library curve name
            iterations: Number of substitution rounds
            seed: Seed segments, library seed name, or None for the template itself

        Returns:
            CurveResult with the expanded segments and their geometry

        Raises:
            TemplateNotFoundError: If a library name is unknown
            InvalidIterationCount: If iterations is out of range
            SegmentLimitExceeded: If the output would exceed max_segments
        """
        label = template if isinstance(template, str) else (template.name or "custom")
        try:
            resolved = self.resolve_template(template)
            seed_lines = self.resolve_seed(seed, resolved)
            expected = self.check_limits(len(seed_lines), resolved, iterations)
        except SpaceFillError as e:
            self.curve_logger.log_expansion_error(label, e)
            raise

        self.curve_logger.log_expansion_start(label, iterations, expected)
        start_time = time.perf_counter()
        lines = tuple(expand(seed_lines, resolved, iterations))
        duration_ms = (time.perf_counter() - start_time) * 1000

        self.curve_logger.log_expansion_complete(label, iterations, len(lines), duration_ms)

        return CurveResult(
            lines=lines,
            template=resolved,
            iterations=iterations,
            bounding_box=compute_bounding_box(lines),
            endpoint=compute_endpoint(lines),
            duration_ms=duration_ms,
        )

    def render(self, result: CurveResult) -> str:
        """Render a curve to an SVG string."""
        return render_svg(result.lines, self.config.render)

    def save(self, result: CurveResult, output_path: Path) -> Path:
        """Render a curve and write it to an SVG file.

        Raises:
            SvgSaveError: If the file cannot be written
        """
        path = self.writer.save(result.lines, output_path)
        self.curve_logger.log_render_complete(str(path), result.segment_count)
        return path
