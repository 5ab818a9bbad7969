"""Domain models for rasterclip.

This module contains the value types passed into and out of the kernel. All
models are designed to be:

- Immutable (frozen dataclasses)
- Hashable, so pixels and points can be deduplicated through sets
- Serializable for inter-process communication (batch clipping)

Key classes:
- Point: A real-valued 2D point
- Pixel: An integer pixel coordinate
- Segment: An ordered pair of points
- ClipWindow: Axis-aligned clipping rectangle
- CanvasBounds: Raster canvas extent
- ClipResult: Outcome of clipping one segment of a batch
"""

from rasterclip.domain.primitives import Pixel, Point
from rasterclip.domain.segment import ClipResult, Segment
from rasterclip.domain.window import CanvasBounds, ClipWindow

__all__: list[str] = [
    # Coordinates
    "Point",
    "Pixel",
    # Shapes
    "Segment",
    "ClipWindow",
    "CanvasBounds",
    # Results
    "ClipResult",
]
