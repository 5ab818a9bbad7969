"""Output sinks for the rasterizers.

Rasterizers do not own an output buffer. They push what they produce into a
sink supplied by the caller:
- PixelSink: accepts single pixels (line traversal)
- SpanSink: accepts horizontal runs of pixels (disk filling)

Concrete sinks:
- PixelList: ordered collector, keeps duplicates
- PixelSet: deduplicating collector
- ClippedSpanWriter: applies the canvas span policy and forwards pixels
"""

from typing import Protocol

from rasterclip.domain import CanvasBounds, Pixel


class PixelSink(Protocol):
    """Anything that can plot a single pixel."""

    def plot(self, x: int, y: int) -> None: ...


class SpanSink(Protocol):
    """Anything that can draw a horizontal run [x_start, x_end] on row y."""

    def span(self, y: int, x_start: int, x_end: int) -> None: ...


class PixelList:
    """Collects pixels in emission order, duplicates included."""

    def __init__(self) -> None:
        self.pixels: list[Pixel] = []

    def plot(self, x: int, y: int) -> None:
        self.pixels.append(Pixel(x, y))

    def __len__(self) -> int:
        return len(self.pixels)


class PixelSet:
    """Collects pixels into a set keyed by coordinate equality."""

    def __init__(self) -> None:
        self.pixels: set[Pixel] = set()

    def plot(self, x: int, y: int) -> None:
        self.pixels.add(Pixel(x, y))

    def __len__(self) -> int:
        return len(self.pixels)


class ClippedSpanWriter:
    """Span sink that clips spans to a canvas and plots the surviving pixels.

    Policy:
    - a span on a row outside [0, height) is skipped
    - a span lying entirely left of column 0 or right of column width-1 is skipped
    - otherwise its extent is clamped to [0, width) and every pixel is plotted

    Nothing is ever reported as an error; off-canvas output simply vanishes.

    Example:
        pixels = PixelSet()
        writer = ClippedSpanWriter(CanvasBounds(800, 600), pixels)
        writer.span(10, -5, 5)  # plots (0, 10) .. (5, 10)
    """

    def __init__(self, canvas: CanvasBounds, target: PixelSink) -> None:
        """Initialize the writer.

        Args:
            canvas: Canvas extent to clip against
            target: Sink receiving the clipped pixels
        """
        self.canvas = canvas
        self.target = target

    def span(self, y: int, x_start: int, x_end: int) -> None:
        if y < 0 or y >= self.canvas.height:
            return
        if x_end < 0 or x_start > self.canvas.width - 1:
            return

        start = max(x_start, 0)
        end = min(x_end, self.canvas.width - 1)
        for x in range(start, end + 1):
            self.target.plot(x, y)
