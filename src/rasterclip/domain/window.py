"""Rectangular regions: the clip window and the raster canvas."""

from dataclasses import dataclass
from typing import Any

from rasterclip.domain.primitives import Point
from rasterclip.exceptions import WindowError


@dataclass(frozen=True, slots=True)
class ClipWindow:
    """Axis-aligned clipping rectangle.

    The bounds must satisfy xmin <= xmax and ymin <= ymax. Use
    from_corners() when the corners come from user input in arbitrary order.

    Attributes:
        xmin: Left edge
        ymin: Bottom edge
        xmax: Right edge
        ymax: Top edge

    Raises:
        WindowError: If the bounds are inverted
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self) -> None:
        if self.xmin > self.xmax or self.ymin > self.ymax:
            raise WindowError(
                f"Inverted clip window ({self.xmin}, {self.ymin}, {self.xmax}, {self.ymax}); "
                "expected xmin <= xmax and ymin <= ymax"
            )

    @classmethod
    def from_corners(cls, x0: float, y0: float, x1: float, y1: float) -> "ClipWindow":
        """Build a window from two opposite corners, swapping inverted bounds.

        Args:
            x0: X of the first corner
            y0: Y of the first corner
            x1: X of the opposite corner
            y1: Y of the opposite corner

        Returns:
            Normalized ClipWindow
        """
        return cls(
            xmin=float(min(x0, x1)),
            ymin=float(min(y0, y1)),
            xmax=float(max(x0, x1)),
            ymax=float(max(y0, y1)),
        )

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def contains(self, point: Point) -> bool:
        """Check if point lies inside the window or on its boundary."""
        return self.xmin <= point.x <= self.xmax and self.ymin <= point.y <= self.ymax

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.xmin, self.ymin, self.xmax, self.ymax)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "xmin": self.xmin,
            "ymin": self.ymin,
            "xmax": self.xmax,
            "ymax": self.ymax,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClipWindow":
        """Deserialize from dictionary."""
        return cls(
            xmin=float(data["xmin"]),
            ymin=float(data["ymin"]),
            xmax=float(data["xmax"]),
            ymax=float(data["ymax"]),
        )


@dataclass(frozen=True, slots=True)
class CanvasBounds:
    """Raster canvas extent used to clip rasterizer output.

    Valid pixel columns are [0, width) and valid rows are [0, height).

    Attributes:
        width: Canvas width in pixels
        height: Canvas height in pixels
    """

    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        """Check if pixel (x, y) lies on the canvas."""
        return 0 <= x < self.width and 0 <= y < self.height

    def clamp(self, x: int, y: int) -> tuple[int, int]:
        """Clamp a coordinate pair onto the canvas.

        Args:
            x: Column, possibly off-canvas
            y: Row, possibly off-canvas

        Returns:
            Tuple (x, y) with each component clamped to the valid range
        """
        return (
            min(max(x, 0), self.width - 1),
            min(max(y, 0), self.height - 1),
        )
