"""Exception hierarchy for Spacefill."""


class SpaceFillError(Exception):
    """Base exception for all Spacefill errors."""

    pass


class CurveError(SpaceFillError):
    """Errors related to curve expansion."""

    pass


class InvalidIterationCount(CurveError, ValueError):
    """Iteration count is negative or above the configured maximum."""

    def __init__(self, iterations: int, reason: str = "must be >= 0") -> None:
        self.iterations = iterations
        self.reason = reason
        super().__init__(f"Invalid iteration count {iterations}: {reason}")


class SegmentLimitExceeded(CurveError):
    """Expansion would produce more segments than allowed."""

    def __init__(self, expected: int, limit: int) -> None:
        self.expected = expected
        self.limit = limit
        super().__init__(
            f"Expansion would produce {expected:,} segments (limit {limit:,})"
        )


class GeometryError(SpaceFillError):
    """Errors in segment or template geometry."""

    pass


class InvalidSegment(GeometryError, ValueError):
    """A line segment with an unusable length or rotation."""

    def __init__(self, length: float, reason: str) -> None:
        self.length = length
        self.reason = reason
        super().__init__(f"Invalid segment (length={length}): {reason}")


class InvalidTemplate(GeometryError, ValueError):
    """Template cannot be used for substitution."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid template: {reason}")


class TemplateNotFoundError(SpaceFillError, LookupError):
    """Requested template or seed is not in the library."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available or []
        message = f"Template '{name}' not found"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ConfigError(SpaceFillError):
    """Errors applying runtime configuration."""

    pass


class LogFileError(ConfigError):
    """Log file cannot be opened."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open log file '{path}': {reason}")


class RenderError(SpaceFillError):
    """Errors related to rendering a curve."""

    pass


class SvgSaveError(RenderError):
    """Error writing an SVG file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save SVG '{path}': {reason}")
