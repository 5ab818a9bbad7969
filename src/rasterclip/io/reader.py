"""Segment reader for batch clipping input.

Input is a whitespace-separated stream of numbers, the same sequence an
interactive session would be prompted for:

    xmin ymin xmax ymax      clip window, corners in any order
    n                        number of segments
    x0 y0 x1 y1              one line per segment, n times

Line breaks carry no meaning and '#' starts a comment that runs to the end
of the line. Anything after the last segment is ignored.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from rasterclip.domain import ClipWindow, Segment
from rasterclip.exceptions import InputFileError, InputFormatError


@dataclass
class ClipRequest:
    """A parsed clipping job.

    Attributes:
        window: Normalized clip window
        segments: Segments in input order
    """

    window: ClipWindow
    segments: list[Segment]


def _tokenize(text: str) -> list[str]:
    tokens: list[str] = []
    for line in text.splitlines():
        tokens.extend(line.split("#", 1)[0].split())
    return tokens


def _parse_number(token: str) -> float | None:
    try:
        value = float(token)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _take_numbers(tokens: list[str], pos: int, count: int) -> list[float] | None:
    chunk = tokens[pos : pos + count]
    if len(chunk) < count:
        return None
    values = [_parse_number(token) for token in chunk]
    if any(value is None for value in values):
        return None
    return [value for value in values if value is not None]


def parse_clip_request(text: str, source: str = "<input>") -> ClipRequest:
    """Parse a clip window and segment list.

    Args:
        text: Input text
        source: Name used in error messages (usually the file path)

    Returns:
        ClipRequest with a normalized window

    Raises:
        InputFormatError: If the window, the count or any segment is malformed
    """
    tokens = _tokenize(text)

    window_values = _take_numbers(tokens, 0, 4)
    if window_values is None:
        raise InputFormatError(source, "invalid clipping window; expected 4 numbers")
    window = ClipWindow.from_corners(*window_values)

    if len(tokens) < 5:
        raise InputFormatError(source, "missing number of line segments")
    try:
        count = int(tokens[4])
    except ValueError:
        raise InputFormatError(
            source, f"invalid number of segments '{tokens[4]}'"
        ) from None
    if count < 0:
        raise InputFormatError(source, f"invalid number of segments '{count}'")

    segments: list[Segment] = []
    pos = 5
    for i in range(count):
        values = _take_numbers(tokens, pos, 4)
        if values is None:
            raise InputFormatError(
                source, f"invalid segment {i + 1} of {count}; expected 4 numbers"
            )
        segments.append(Segment.from_coords(*values))
        pos += 4

    return ClipRequest(window=window, segments=segments)


class SegmentReader:
    """Loads a clipping job from a text file.

    Example:
        reader = SegmentReader(Path("segments.txt"))
        reader.load()
        for segment in reader.iter_segments():
            print(segment.to_tuple())
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the input file
        """
        self._path = path
        self._request: ClipRequest | None = None

    def load(self) -> None:
        """Read and parse the input file.

        Raises:
            InputFileError: If the file does not exist or cannot be read
            InputFormatError: If the content is malformed
        """
        if not self._path.exists():
            raise InputFileError(str(self._path), "file not found")

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputFileError(str(self._path), str(e)) from e

        self._request = parse_clip_request(text, source=str(self._path))

    def _loaded(self) -> ClipRequest:
        if self._request is None:
            raise RuntimeError("Input not loaded. Call load() first.")
        return self._request

    @property
    def window(self) -> ClipWindow:
        """Return the normalized clip window.

        Raises:
            RuntimeError: If input has not been loaded yet
        """
        return self._loaded().window

    @property
    def segment_count(self) -> int:
        """Return the number of segments.

        Raises:
            RuntimeError: If input has not been loaded yet
        """
        return len(self._loaded().segments)

    def iter_segments(self) -> Iterator[Segment]:
        """Iterate over segments in file order.

        Raises:
            RuntimeError: If input has not been loaded yet
        """
        yield from self._loaded().segments

    def __enter__(self) -> "SegmentReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self._request = None
