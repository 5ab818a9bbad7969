"""Exception hierarchy for Rasterclip."""


class RasterClipError(Exception):
    """Base exception for all Rasterclip errors."""

    pass


class InputError(RasterClipError):
    """Errors related to reading caller-supplied input."""

    pass


class InputFileError(InputError):
    """Error opening or reading an input file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read input '{path}': {reason}")


class InputFormatError(InputError):
    """Malformed window or segment data."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid input in '{path}': {details}")


class OutputError(RasterClipError):
    """Errors related to writing results."""

    pass


class OutputWriteError(OutputError):
    """Error writing an output file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write output '{path}': {reason}")


class UnsupportedFormatError(OutputError):
    """Requested output format is not available for this kind of result."""

    def __init__(self, fmt: str, supported: list[str] | None = None) -> None:
        self.fmt = fmt
        self.supported = supported or []
        message = f"Unsupported output format '{fmt}'"
        if self.supported:
            message += f" (expected one of: {', '.join(self.supported)})"
        super().__init__(message)


class GeometryError(RasterClipError):
    """Errors in geometric data."""

    pass


class WindowError(GeometryError):
    """Clip window bounds violate xmin <= xmax, ymin <= ymax."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ProcessingCancelledError(RasterClipError):
    """Batch clipping was cancelled by user."""

    def __init__(self, processed_count: int, pending_count: int) -> None:
        self.processed_count = processed_count
        self.pending_count = pending_count
        super().__init__(
            f"Processing cancelled: {processed_count} chunks completed, {pending_count} pending"
        )
