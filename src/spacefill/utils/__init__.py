"""Utility functions for spacefill.

This module provides utility functions including:

- Logging setup and configuration
- Generation statistics tracking
"""

from spacefill.utils.logging import (
    CurveLogger,
    GenerationStats,
    configure_logging,
)

__all__ = [
    "CurveLogger",
    "GenerationStats",
    "configure_logging",
]
