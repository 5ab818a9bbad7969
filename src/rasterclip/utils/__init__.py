"""Utility functions for rasterclip.

This module provides:

- Logging setup and configuration
- Batch clipping statistics
"""

from rasterclip.utils.logging import (
    ClipLogger,
    ClipStats,
    configure_logging,
)

__all__ = [
    "ClipLogger",
    "ClipStats",
    "configure_logging",
]
