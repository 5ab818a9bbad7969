"""Point types for geometric and pixel space.

This module defines the two coordinate types used throughout rasterclip:
- Point: A real-valued point in geometric space (clipping input and output)
- Pixel: An integer coordinate in pixel space (rasterizer output)
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D geometric space.

    Immutable and hashable; two points are equal when both coordinates are.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True, order=True)
class Pixel:
    """An integer pixel coordinate.

    Equality is component-wise and instances hash by value, so pixels can be
    collected into sets for deduplication. Pixels are ordered by (x, y),
    column first, which gives a canonical order when writing pixel sets out.

    Attributes:
        x: Column
        y: Row
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)
