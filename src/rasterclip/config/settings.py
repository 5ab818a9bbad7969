"""Configuration settings for Rasterclip."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from rasterclip.domain import CanvasBounds, ClipWindow


class OutputFormat(str, Enum):
    """Output file format."""

    TEXT = "text"
    JSON = "json"
    PBM = "pbm"


class CanvasConfig(BaseModel):
    """Raster canvas extent.

    Rasterizer output outside [0, width) x [0, height) is dropped.
    """

    width: int = Field(
        default=900,
        ge=1,
        le=65536,
        description="Canvas width in pixels",
    )
    height: int = Field(
        default=600,
        ge=1,
        le=65536,
        description="Canvas height in pixels",
    )

    def to_bounds(self) -> CanvasBounds:
        """Get the canvas as a domain value."""
        return CanvasBounds(width=self.width, height=self.height)


class ClipWindowConfig(BaseModel):
    """Default clipping rectangle.

    Bounds may be given in any order; to_window() swaps inverted pairs.
    """

    xmin: float = Field(default=-50.0, description="Left edge")
    ymin: float = Field(default=-50.0, description="Bottom edge")
    xmax: float = Field(default=50.0, description="Right edge")
    ymax: float = Field(default=50.0, description="Top edge")

    def to_window(self) -> ClipWindow:
        """Get the normalized clip window."""
        return ClipWindow.from_corners(self.xmin, self.ymin, self.xmax, self.ymax)


class LineConfig(BaseModel):
    """Configuration for line rasterization."""

    width: int = Field(
        default=1,
        ge=1,
        le=255,
        description="Thick line width in pixels",
    )
    clamp_to_canvas: bool = Field(
        default=True,
        description="Clamp line endpoints onto the canvas before rasterizing",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch clipping."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto, 1 = in-process)",
    )
    chunk_size: int = Field(
        default=512,
        ge=1,
        le=1_000_000,
        description="Segments per worker task",
    )


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


class RasterClipSettings(BaseModel):
    """Main application settings."""

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    window: ClipWindowConfig = Field(default_factory=ClipWindowConfig)
    line: LineConfig = Field(default_factory=LineConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RasterClipSettings:
    """Get default application settings."""
    return RasterClipSettings()
