"""Configuration management for spacefill.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ExpansionConfig: Iteration and segment-count limits
- RenderConfig: SVG colours and styling
- LoggingConfig: Logging settings
- SpaceFillSettings: Main application settings
"""

from spacefill.config.settings import (
    LOG_LEVELS,
    ExpansionConfig,
    LoggingConfig,
    RenderConfig,
    SpaceFillSettings,
    get_default_settings,
)

__all__ = [
    "LOG_LEVELS",
    "ExpansionConfig",
    "LoggingConfig",
    "RenderConfig",
    "SpaceFillSettings",
    "get_default_settings",
]
