"""Utility functions for bitfont.

This module provides utility functions including:

- Logging setup and configuration
- Progress and statistics tracking for glyph generation
"""

from bitfont.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
