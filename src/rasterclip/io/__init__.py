"""I/O layer for rasterclip.

This module handles getting numbers into the kernel and results out of it.
It sits outside the kernel: nothing under rasterclip.core reads or writes
files.

Key responsibilities:
- Parse clip window and segment lists
- Write pixel output as text, JSON or PBM bitmaps
- Write clip results as text or JSON

Key classes:
- SegmentReader: Load a clipping job from a file
- ResultWriter: Save results
"""

from rasterclip.io.reader import ClipRequest, SegmentReader, parse_clip_request
from rasterclip.io.writer import ResultWriter, render_pbm

__all__ = [
    "ClipRequest",
    "ResultWriter",
    "SegmentReader",
    "parse_clip_request",
    "render_pbm",
]
