"""Logging utilities for Rasterclip."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_NAME_PREFIX = "rasterclip."


@dataclass
class ClipStats:
    """Statistics from a batch clipping run."""

    segment_count: int = 0
    visible_count: int = 0
    rejected_count: int = 0
    chunk_count: int = 0
    error_count: int = 0
    errors: list[tuple[int, str]] = field(default_factory=list)
    chunk_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    was_cancelled: bool = False
    cancelled_count: int = 0

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_chunk_time_ms(self) -> float | None:
        """Average worker time per chunk, None before any chunk finished."""
        if not self.chunk_timings_ms:
            return None
        return sum(self.chunk_timings_ms) / len(self.chunk_timings_ms)


def _install_handler(root_logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    # Replace a handler installed by an earlier call instead of stacking them.
    handler.set_name(_HANDLER_NAME_PREFIX + name)
    for existing in list(root_logger.handlers):
        if existing.get_name() == handler.get_name():
            root_logger.removeHandler(existing)
            existing.close()
    root_logger.addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _install_handler(root_logger, file_handler, "file")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _install_handler(root_logger, console_handler, "console")

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("rasterclip")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ClipLogger:
    """Logger for tracking batch clipping progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, stats: ClipStats | None = None) -> None:
        self._logger = logger
        self._stats = stats if stats is not None else ClipStats()

    def log_chunk_start(self, start_index: int, size: int) -> None:
        """Log submission of a chunk."""
        self._logger.debug("Clipping chunk", start_index=start_index, size=size)

    def log_chunk_complete(
        self,
        start_index: int,
        visible: int,
        rejected: int,
        duration_ms: float,
    ) -> None:
        """Log a successfully clipped chunk."""
        self._logger.info(
            "Chunk clipped",
            start_index=start_index,
            visible=visible,
            rejected=rejected,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.chunk_count += 1
        self._stats.visible_count += visible
        self._stats.rejected_count += rejected
        self._stats.chunk_timings_ms.append(duration_ms)

    def log_chunk_error(
        self,
        start_index: int,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log chunk clipping error."""
        self._logger.error(
            "Chunk clipping failed",
            start_index=start_index,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((start_index, str(error)))

    @property
    def stats(self) -> ClipStats:
        """Get current clipping statistics."""
        return self._stats
