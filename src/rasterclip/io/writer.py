"""Result writer for rasterization and clipping output.

This module writes kernel results to disk:
- pixels as plain text, JSON, or a plain PBM (P1) bitmap of the canvas
- clip results as plain text or JSON
"""

import json
from collections.abc import Collection
from pathlib import Path
from typing import Any

from rasterclip.config import OutputFormat
from rasterclip.domain import CanvasBounds, ClipResult, ClipWindow, Pixel
from rasterclip.exceptions import OutputWriteError, UnsupportedFormatError

# Plain PBM readers may reject raster lines longer than this.
PBM_MAX_LINE = 70

FILE_EXTENSIONS = {
    OutputFormat.TEXT: "txt",
    OutputFormat.JSON: "json",
    OutputFormat.PBM: "pbm",
}


def _ordered(pixels: Collection[Pixel]) -> list[Pixel]:
    # Sets have no meaningful order; sequences keep traversal order.
    if isinstance(pixels, (set, frozenset)):
        return sorted(pixels)
    return list(pixels)


def render_pbm(pixels: Collection[Pixel], canvas: CanvasBounds) -> str:
    """Render pixels as a plain PBM bitmap.

    Row 0 of the canvas is the bottom row of the image, the same orientation
    as a y-up orthographic projection. Off-canvas pixels are ignored.

    Args:
        pixels: Pixels to set
        canvas: Image extent

    Returns:
        PBM file content
    """
    lit = {p.to_tuple() for p in pixels if canvas.contains(p.x, p.y)}
    lines = ["P1", f"{canvas.width} {canvas.height}"]

    for y in range(canvas.height - 1, -1, -1):
        row = "".join("1" if (x, y) in lit else "0" for x in range(canvas.width))
        lines.extend(row[i : i + PBM_MAX_LINE] for i in range(0, len(row), PBM_MAX_LINE))

    return "\n".join(lines) + "\n"


def render_pixels_text(pixels: Collection[Pixel]) -> str:
    """Render pixels as "x y" lines."""
    return "".join(f"{p.x} {p.y}\n" for p in _ordered(pixels))


def render_pixels_json(pixels: Collection[Pixel], canvas: CanvasBounds) -> str:
    """Render pixels as a JSON document."""
    document: dict[str, Any] = {
        "canvas": {"width": canvas.width, "height": canvas.height},
        "count": len(pixels),
        "pixels": [list(p.to_tuple()) for p in _ordered(pixels)],
    }
    return json.dumps(document, indent=2) + "\n"


def render_clip_text(results: list[ClipResult]) -> str:
    """Render visible clipped segments as "x0 y0 x1 y1" lines."""
    lines = []
    for result in results:
        if result.clipped is not None:
            x0, y0, x1, y1 = result.clipped.to_tuple()
            lines.append(f"{x0:g} {y0:g} {x1:g} {y1:g}\n")
    return "".join(lines)


def render_clip_json(results: list[ClipResult], window: ClipWindow) -> str:
    """Render every clip result, visible or not, as a JSON document."""
    document: dict[str, Any] = {
        "window": window.to_dict(),
        "count": len(results),
        "visible": sum(1 for r in results if r.visible),
        "results": [r.to_dict() for r in results],
    }
    return json.dumps(document, indent=2) + "\n"


class ResultWriter:
    """Writes kernel results to a file.

    Example:
        writer = ResultWriter(Path("line.pbm"))
        writer.write_pixels(pixels, OutputFormat.PBM, canvas)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the result writer.

        Args:
            output_path: Path where results will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def write_pixels(
        self,
        pixels: Collection[Pixel],
        fmt: OutputFormat,
        canvas: CanvasBounds,
    ) -> None:
        """Write a pixel sequence or pixel set.

        Args:
            pixels: Ordered pixels (written in order) or a set (written sorted)
            fmt: Output format
            canvas: Canvas extent, used for PBM size and JSON metadata

        Raises:
            OutputWriteError: If file cannot be written
        """
        if fmt == OutputFormat.PBM:
            content = render_pbm(pixels, canvas)
        elif fmt == OutputFormat.JSON:
            content = render_pixels_json(pixels, canvas)
        else:
            content = render_pixels_text(pixels)
        self._write(content)

    def write_clip_results(
        self,
        results: list[ClipResult],
        window: ClipWindow,
        fmt: OutputFormat,
    ) -> None:
        """Write batch clipping results.

        Args:
            results: Clip results in input order
            window: Window the results were clipped against
            fmt: Output format (text or json)

        Raises:
            UnsupportedFormatError: If fmt is PBM
            OutputWriteError: If file cannot be written
        """
        if fmt == OutputFormat.PBM:
            raise UnsupportedFormatError(
                fmt.value, [OutputFormat.TEXT.value, OutputFormat.JSON.value]
            )
        if fmt == OutputFormat.JSON:
            content = render_clip_json(results, window)
        else:
            content = render_clip_text(results)
        self._write(content)

    def _write(self, content: str) -> None:
        try:
            self._output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(self._output_path), str(e)) from e

    @staticmethod
    def default_path(stem: str, fmt: OutputFormat, directory: Path | None = None) -> Path:
        """Generate an output path for a result.

        Converts: ("thick", PBM) -> thick.pbm
                  ("segments-clipped", TEXT) -> segments-clipped.txt

        Args:
            stem: File name without extension
            fmt: Output format
            directory: Parent directory (current directory if None)

        Returns:
            Path with the extension for fmt
        """
        name = f"{stem}.{FILE_EXTENSIONS[fmt]}"
        return (directory or Path(".")) / name
