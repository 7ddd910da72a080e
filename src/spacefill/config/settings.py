"""Configuration settings for Spacefill."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ExpansionConfig(BaseModel):
    """Configuration for curve expansion limits.

    Output grows as |seed| * |template| ** iterations, so orders only a little
    above the library defaults produce millions of segments.
    """

    max_iterations: int = Field(
        default=12,
        ge=0,
        le=30,
        description="Highest accepted number of substitution rounds",
    )
    max_segments: int | None = Field(
        default=2_000_000,
        ge=1,
        description="Refuse expansions producing more segments (None = no limit)",
    )
    warn_segments: int = Field(
        default=100_000,
        ge=1,
        description="Log a warning for expansions producing more segments",
    )


class RenderConfig(BaseModel):
    """Configuration for SVG rendering.

    Colours are hex RGB strings without the leading '#'.
    """

    line_color: str = Field(default="5CDB95", description="Segment glyph colour")
    pivot_color: str = Field(default="05386B", description="Pivot marker colour")
    background_color: str = Field(default="EDF5E1", description="Canvas background")
    margin: float = Field(
        default=0.3,
        ge=0.0,
        le=10.0,
        description="Padding around the curve bounding box",
    )
    stroke_width: float = Field(
        default=0.1,
        gt=0.0,
        le=1.0,
        description="Stroke width of the unit segment glyph",
    )
    show_pivots: bool = Field(
        default=True,
        description="Mark the start of every segment",
    )
    show_origin: bool = Field(
        default=True,
        description="Mark the origin",
    )
    arrow_heads: bool = Field(
        default=True,
        description="Draw a barb showing segment direction and mirroring",
    )
    flip_y: bool = Field(
        default=True,
        description="Flip the y axis so positive angles turn counter-clockwise",
    )
    precision: int = Field(
        default=4,
        ge=1,
        le=12,
        description=(
            "Decimal places in the output, raised so the shortest segment "
            "keeps this many significant digits"
        ),
    )

    @field_validator("line_color", "pivot_color", "background_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        color = value.lstrip("#")
        if len(color) not in (3, 6) or any(c not in "0123456789abcdefABCDEF" for c in color):
            raise ValueError(f"not a hex colour: {value!r}")
        return color


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r} (use one of: {', '.join(LOG_LEVELS)})")
        return level


class SpaceFillSettings(BaseModel):
    """Main application settings."""

    expansion: ExpansionConfig = Field(default_factory=ExpansionConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SpaceFillSettings:
    """Get default application settings."""
    return SpaceFillSettings()
