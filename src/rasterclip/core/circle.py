"""Filled disk rasterization (midpoint circle with span fill).

The midpoint walker visits one octant of the circle boundary. For each
boundary point (x, y) the disk is filled by the horizontal spans that
connect its mirror images, so every row of the disk is covered without a
separate scanline pass.
"""

from rasterclip.core.sinks import ClippedSpanWriter, PixelSet, PixelSink, SpanSink
from rasterclip.domain import CanvasBounds, Pixel


def fill_disk(cx: int, cy: int, radius: int, spans: SpanSink) -> int:
    """Emit the horizontal spans of a solid disk.

    Rows near the 45 degree diagonal may receive more than one span; sinks
    that need a strict pixel set must deduplicate. A radius of zero or less
    emits only the centre.

    Args:
        cx: Centre column
        cy: Centre row
        radius: Disk radius in pixels
        spans: Receives span(y, x_start, x_end) calls

    Returns:
        Number of spans emitted
    """
    if radius <= 0:
        spans.span(cy, cx, cx)
        return 1

    x = radius
    y = 0
    d = 1 - radius
    emitted = 0

    while x >= y:
        spans.span(cy + y, cx - x, cx + x)
        emitted += 1
        if y != 0:
            spans.span(cy - y, cx - x, cx + x)
            emitted += 1

        if x != y:
            spans.span(cy + x, cx - y, cx + y)
            emitted += 1
            if x != 0:
                spans.span(cy - x, cx - y, cx + y)
                emitted += 1

        y += 1
        if d < 0:
            d += 2 * y + 1
        else:
            x -= 1
            d += 2 * (y - x) + 1

    return emitted


def stamp_disk(cx: int, cy: int, radius: int, canvas: CanvasBounds, target: PixelSink) -> None:
    """Fill a disk into an existing pixel collector, clipped to the canvas."""
    fill_disk(cx, cy, radius, ClippedSpanWriter(canvas, target))


def filled_disk(cx: int, cy: int, radius: int, canvas: CanvasBounds) -> set[Pixel]:
    """Rasterize a solid disk clipped to the canvas.

    Args:
        cx: Centre column
        cy: Centre row
        radius: Disk radius in pixels
        canvas: Canvas extent; pixels outside it are dropped

    Returns:
        Set of covered pixels. Empty if the disk lies wholly off-canvas.

    Examples:
        >>> canvas = CanvasBounds(20, 20)
        >>> sorted(p.to_tuple() for p in filled_disk(5, 5, 1, canvas))
        [(4, 5), (5, 4), (5, 5), (5, 6), (6, 5)]
    """
    collector = PixelSet()
    stamp_disk(cx, cy, radius, canvas, collector)
    return collector.pixels
