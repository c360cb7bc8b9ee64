"""Configuration management for bitfont.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontConfig: Units per em, pixel scale and provider heights
- PathsConfig: Asset and output directories
- ProcessingConfig: Worker count, charset and variant
- LoggingConfig: Logging settings
- BitFontSettings: Main application settings
"""

from bitfont.config.settings import (
    CHARSETS,
    BitFontSettings,
    Charset,
    FontConfig,
    LoggingConfig,
    PathsConfig,
    ProcessingConfig,
)

__all__ = [
    "CHARSETS",
    "BitFontSettings",
    "Charset",
    "FontConfig",
    "LoggingConfig",
    "PathsConfig",
    "ProcessingConfig",
]
