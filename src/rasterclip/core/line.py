"""Integer line rasterization (Bresenham).

The stepping loop uses only integer addition and comparison. Steep lines are
handled by transposing x and y for the duration of the walk, and right-to-left
lines by walking from the other endpoint; the emitted sequence is put back in
caller order before it is returned.
"""

from rasterclip.core.sinks import PixelSink
from rasterclip.domain import Pixel


def bresenham_line(x0: int, y0: int, x1: int, y1: int) -> list[Pixel]:
    """Rasterize the segment (x0, y0)-(x1, y1) into 8-connected pixels.

    The error accumulator starts at dx // 2 and y advances only when it drops
    strictly below zero, which fixes the exact pixel sequence for every
    slope.

    Args:
        x0: Start column
        y0: Start row
        x1: End column
        y1: End row

    Returns:
        Pixels from (x0, y0) to (x1, y1) inclusive; the list has
        max(|x1 - x0|, |y1 - y0|) + 1 entries

    Examples:
        >>> [p.to_tuple() for p in bresenham_line(0, 0, 4, 2)]
        [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2)]
        >>> [p.to_tuple() for p in bresenham_line(5, 5, 5, 5)]
        [(5, 5)]
    """
    if x0 == x1 and y0 == y1:
        return [Pixel(x0, y0)]

    steep = abs(y1 - y0) > abs(x1 - x0)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1

    reversed_walk = x0 > x1
    if reversed_walk:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    dy = abs(y1 - y0)
    error = dx // 2
    ystep = 1 if y0 < y1 else -1
    y = y0

    pixels: list[Pixel] = []
    for x in range(x0, x1 + 1):
        if steep:
            pixels.append(Pixel(y, x))
        else:
            pixels.append(Pixel(x, y))

        error -= dy
        if error < 0:
            y += ystep
            error += dx

    if reversed_walk:
        pixels.reverse()

    return pixels


def rasterize_line(x0: int, y0: int, x1: int, y1: int, sink: PixelSink) -> int:
    """Plot the Bresenham pixels of a segment into a sink, in traversal order.

    Args:
        x0: Start column
        y0: Start row
        x1: End column
        y1: End row
        sink: Receives each pixel via plot(x, y)

    Returns:
        Number of pixels plotted
    """
    pixels = bresenham_line(x0, y0, x1, y1)
    for pixel in pixels:
        sink.plot(pixel.x, pixel.y)
    return len(pixels)

