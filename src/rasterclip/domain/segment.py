"""Line segments and clip results.

This module defines the segment types used by the clipper and the batch
processor:
- Segment: An ordered pair of real-valued points
- ClipResult: The outcome of clipping one segment of a batch
"""

import math
from dataclasses import dataclass
from typing import Any

from rasterclip.domain.primitives import Point


@dataclass(frozen=True, slots=True)
class Segment:
    """An ordered pair of points from a to b.

    Zero-length segments (a == b) are legal and are treated as single points
    by the clipper.

    Attributes:
        a: Start point
        b: End point
    """

    a: Point
    b: Point

    @classmethod
    def from_coords(cls, x0: float, y0: float, x1: float, y1: float) -> "Segment":
        """Build a segment from raw endpoint coordinates."""
        return cls(Point(float(x0), float(y0)), Point(float(x1), float(y1)))

    @property
    def is_degenerate(self) -> bool:
        """True if both endpoints coincide."""
        return self.a == self.b

    @property
    def length(self) -> float:
        """Euclidean length of the segment."""
        return math.hypot(self.b.x - self.a.x, self.b.y - self.a.y)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to flat (x0, y0, x1, y1) tuple."""
        return (self.a.x, self.a.y, self.b.x, self.b.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with a and b point dictionaries
        """
        return {"a": self.a.to_dict(), "b": self.b.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with a and b point dictionaries

        Returns:
            Segment instance
        """
        return cls(a=Point.from_dict(data["a"]), b=Point.from_dict(data["b"]))


@dataclass(frozen=True, slots=True)
class ClipResult:
    """Outcome of clipping one segment of a batch.

    Attributes:
        index: Position of the source segment in the batch
        source: The segment as supplied
        clipped: Visible part of the segment, or None if not visible
    """

    index: int
    source: Segment
    clipped: Segment | None

    @property
    def visible(self) -> bool:
        return self.clipped is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "index": self.index,
            "source": self.source.to_dict(),
            "clipped": self.clipped.to_dict() if self.clipped is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClipResult":
        """Deserialize from dictionary."""
        clipped = (
            Segment.from_dict(data["clipped"])
            if data["clipped"] is not None
            else None
        )
        return cls(
            index=data["index"],
            source=Segment.from_dict(data["source"]),
            clipped=clipped,
        )
