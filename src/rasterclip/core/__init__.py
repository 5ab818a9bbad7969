"""Core rasterization and clipping algorithms for rasterclip.

This module contains the kernel:

- Line rasterization (Bresenham, integer-only stepping)
- Filled disk rasterization (midpoint circle with span fill)
- Thick lines (disk stamping along a Bresenham centerline)
- Segment clipping (Liang-Barsky against an axis-aligned window)
- Batch clipping across worker processes

All kernel functions are:
- Stateless (every call owns its output)
- Pure (no I/O, no logging)
- Safe to call concurrently

Key functions:
- bresenham_line: Ordered pixels of a line
- rasterize_line: Plot a line into a PixelSink
- fill_disk: Emit the spans of a disk into a SpanSink
- filled_disk: Pixel set of a disk clipped to a canvas
- thick_line: Pixel set of a thick line
- liang_barsky: Visible parameter range of a segment
- clip_segment: Visible part of a segment
- clip_segments: Clip a sequence of segments

Key classes:
- ThickLineBuilder: Thick lines on a fixed canvas
- BatchClipper: Parallel batch clipping
- PixelList, PixelSet, ClippedSpanWriter: Output sinks
"""

from rasterclip.core.circle import fill_disk, filled_disk, stamp_disk
from rasterclip.core.clipping import clip_segment, clip_segments, liang_barsky
from rasterclip.core.line import bresenham_line, rasterize_line
from rasterclip.core.processor import BatchClipper, BatchResult, clip_chunk
from rasterclip.core.sinks import (
    ClippedSpanWriter,
    PixelList,
    PixelSet,
    PixelSink,
    SpanSink,
)
from rasterclip.core.thick import ThickLineBuilder, thick_line

__all__ = [
    # Processor classes
    "BatchClipper",
    "BatchResult",
    # Sinks
    "ClippedSpanWriter",
    "PixelList",
    "PixelSet",
    "PixelSink",
    "SpanSink",
    # Thick lines
    "ThickLineBuilder",
    # Kernel functions
    "bresenham_line",
    "clip_chunk",
    "clip_segment",
    "clip_segments",
    "fill_disk",
    "filled_disk",
    "liang_barsky",
    "rasterize_line",
    "stamp_disk",
    "thick_line",
]
