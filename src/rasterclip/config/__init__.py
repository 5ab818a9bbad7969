"""Configuration management for rasterclip.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CanvasConfig: Raster canvas extent
- ClipWindowConfig: Default clipping rectangle
- LineConfig: Line width and endpoint clamping
- ProcessingConfig: Batch clipping settings
- LoggingConfig: Logging settings
- RasterClipSettings: Main application settings
"""

from rasterclip.config.settings import (
    CanvasConfig,
    ClipWindowConfig,
    LineConfig,
    LoggingConfig,
    OutputFormat,
    ProcessingConfig,
    RasterClipSettings,
    get_default_settings,
)

__all__ = [
    "CanvasConfig",
    "ClipWindowConfig",
    "LineConfig",
    "LoggingConfig",
    "OutputFormat",
    "ProcessingConfig",
    "RasterClipSettings",
    "get_default_settings",
]
