"""Logging utilities for Spacefill."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from spacefill.exceptions import ConfigError, LogFileError


@dataclass
class GenerationStats:
    """Statistics from curve generation runs."""

    curves_generated: int = 0
    segments_generated: int = 0
    files_written: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    expansion_timings_ms: list[float] = field(default_factory=list)

    @property
    def total_expansion_ms(self) -> float:
        """Total time spent expanding curves."""
        return sum(self.expansion_timings_ms)


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level '{name}'")
    return level


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger

    Raises:
        ConfigError: If a level name is unknown
        LogFileError: If the log file cannot be opened
    """
    console_threshold = _resolve_level(console_level)
    file_threshold = _resolve_level(file_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces handlers from an earlier call
    for handler in list(root_logger.handlers):
        if getattr(handler, "_spacefill", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            raise LogFileError(str(log_file), e.strerror or str(e)) from e
        file_handler.setLevel(file_threshold)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._spacefill = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_threshold)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        console_handler._spacefill = True  # type: ignore[attr-defined]
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("spacefill")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class CurveLogger:
    """Logger for tracking curve generation and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = GenerationStats()

    def log_expansion_start(self, template: str, iterations: int, expected_segments: int) -> None:
        """Log start of a curve expansion."""
        self._logger.debug(
            "Expanding curve",
            template=template,
            iterations=iterations,
            expected_segments=expected_segments,
        )

    def log_expansion_complete(
        self,
        template: str,
        iterations: int,
        segments: int,
        duration_ms: float,
    ) -> None:
        """Log successful expansion."""
        self._logger.info(
            "Curve expanded",
            template=template,
            iterations=iterations,
            segments=segments,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.curves_generated += 1
        self._stats.segments_generated += segments
        self._stats.expansion_timings_ms.append(duration_ms)

    def log_large_expansion(self, template: str, expected_segments: int, threshold: int) -> None:
        """Warn about an expansion above the configured segment threshold."""
        self._logger.warning(
            "Large expansion requested",
            template=template,
            expected_segments=expected_segments,
            threshold=threshold,
        )

    def log_expansion_error(self, template: str, error: Exception) -> None:
        """Log a rejected or failed expansion."""
        self._logger.error(
            "Curve expansion failed",
            template=template,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((template, str(error)))

    def log_render_complete(self, output: str, segments: int) -> None:
        """Log a written SVG file."""
        self._logger.info("SVG written", output=output, segments=segments)
        self._stats.files_written += 1

    @property
    def stats(self) -> GenerationStats:
        """Get current generation statistics."""
        return self._stats
