"""Configuration management for strokefont.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Outline generation tolerances and join/cap settings
- FontConfig: Font constants (UPM, vertical metrics, advance) and naming
- LoggingConfig: Logging settings
- StrokeFontSettings: Main application settings
"""

from strokefont.config.settings import (
    ClosedStrokeMode,
    FontConfig,
    GeometryConfig,
    LoggingConfig,
    StrokeFontSettings,
    get_default_settings,
)

__all__ = [
    "ClosedStrokeMode",
    "FontConfig",
    "GeometryConfig",
    "LoggingConfig",
    "StrokeFontSettings",
    "get_default_settings",
]
