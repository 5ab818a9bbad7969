"""Thick line construction by disk stamping.

A line of width W is built by stamping a filled disk of radius W // 2 at
every pixel of its Bresenham centerline. Stamps overlap heavily, so the
result is gathered in a set. The cost is O(N * r^2) for N centerline
pixels; rasterizing the capsule outline directly would be cheaper but
produces a different pixel footprint.
"""

from rasterclip.core.circle import stamp_disk
from rasterclip.core.line import bresenham_line
from rasterclip.core.sinks import PixelSet
from rasterclip.domain import CanvasBounds, Pixel


class ThickLineBuilder:
    """Builds thick lines on a fixed canvas.

    The builder keeps only the canvas; every build() call starts from a
    fresh collector, so one builder can be shared between threads.

    Example:
        builder = ThickLineBuilder(CanvasBounds(900, 600))
        pixels = builder.build(50, 50, 700, 500, width=7)
    """

    def __init__(self, canvas: CanvasBounds) -> None:
        """Initialize builder.

        Args:
            canvas: Canvas extent that stamped disks are clipped to
        """
        self.canvas = canvas

    @staticmethod
    def stamp_radius(width: int) -> int:
        """Disk radius used for a requested line width."""
        return max(0, width // 2)

    def build(self, x0: int, y0: int, x1: int, y1: int, width: int) -> set[Pixel]:
        """Rasterize a line of the given width.

        Args:
            x0: Start column
            y0: Start row
            x1: End column
            y1: End row
            width: Requested line width in pixels (callers normalize to >= 1)

        Returns:
            Set of covered pixels with no duplicates; no ordering is implied
        """
        radius = self.stamp_radius(width)
        collector = PixelSet()

        for center in bresenham_line(x0, y0, x1, y1):
            stamp_disk(center.x, center.y, radius, self.canvas, collector)

        return collector.pixels


def thick_line(
    x0: int, y0: int, x1: int, y1: int, width: int, canvas: CanvasBounds
) -> set[Pixel]:
    """Functional form of ThickLineBuilder.build()."""
    return ThickLineBuilder(canvas).build(x0, y0, x1, y1, width)
