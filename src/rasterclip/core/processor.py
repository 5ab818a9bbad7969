"""Parallel batch clipping.

This module clips large segment batches against one window, splitting the
batch into chunks that are clipped in worker processes with
ProcessPoolExecutor. The clipper itself is pure, so chunks never need to
coordinate.

Key components:
- clip_chunk: Top-level picklable function for parallel execution
- BatchClipper: Orchestrator class for batch clipping
- BatchResult: Ordered results plus run statistics
"""

import time
import traceback
from collections.abc import Callable, Iterable
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

from rasterclip.config import RasterClipSettings
from rasterclip.core.clipping import clip_segments
from rasterclip.domain import ClipResult, ClipWindow, Segment
from rasterclip.exceptions import ProcessingCancelledError
from rasterclip.utils import ClipLogger, ClipStats, configure_logging


def clip_chunk(
    segment_dicts: list[dict[str, Any]],
    window_dict: dict[str, Any],
    start_index: int,
) -> dict[str, Any]:
    """Clip one chunk of a batch.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Deserializes the segments and window, clips, and returns serialized results.

    Args:
        segment_dicts: Serialized segments (from Segment.to_dict())
        window_dict: Serialized clip window (from ClipWindow.to_dict())
        start_index: Batch index of the first segment in the chunk

    Returns:
        Dictionary containing either:
        - Success: {"results": [ClipResult dicts], "start_index": int, "duration_ms": float}
        - Error: {"error": str, "start_index": int, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        window = ClipWindow.from_dict(window_dict)
        segments = [Segment.from_dict(data) for data in segment_dicts]
        results = clip_segments(segments, window, start_index=start_index)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "results": [result.to_dict() for result in results],
            "start_index": start_index,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "start_index": start_index,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


@dataclass
class BatchResult:
    """Results of a batch clipping run.

    Attributes:
        window: Window the batch was clipped against
        results: One ClipResult per segment of every successful chunk, in
            input order
        stats: Counts and timings for the run
    """

    window: ClipWindow
    results: list[ClipResult] = field(default_factory=list)
    stats: ClipStats = field(default_factory=ClipStats)

    def visible_segments(self) -> list[Segment]:
        """Get the clipped parts of all visible segments, in input order."""
        return [result.clipped for result in self.results if result.clipped is not None]


class BatchClipper:
    """Orchestrates parallel batch clipping.

    Manages the workflow:
    1. Split the batch into chunks
    2. Clip chunks in-process (max_workers == 1) or in worker processes
    3. Collect results and update statistics
    4. Reassemble results in input order

    Example:
        clipper = BatchClipper(RasterClipSettings())
        batch = clipper.clip(segments, window=ClipWindow(-50, -50, 50, 50))
        for segment in batch.visible_segments():
            draw(segment)
    """

    def __init__(self, config: RasterClipSettings, quiet: bool = False) -> None:
        """Initialize batch clipper with configuration.

        Args:
            config: Rasterclip settings containing window and processing config
            quiet: Suppress console log output except errors
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )

    def _make_chunks(self, segments: list[Segment]) -> list[tuple[int, list[Segment]]]:
        size = self.config.processing.chunk_size
        return [
            (start, segments[start : start + size])
            for start in range(0, len(segments), size)
        ]

    def clip(
        self,
        segments: Iterable[Segment],
        window: ClipWindow | None = None,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> BatchResult:
        """Clip a batch of segments against one window.

        Args:
            segments: Segments to clip
            window: Clip rectangle (config default if None)
            max_workers: Maximum worker processes (None = config value, then auto;
                1 = clip in the calling process)
            progress_callback: Optional callback(completed_chunks, total_chunks)

        Returns:
            BatchResult with ordered results and statistics. Segments of a chunk
            that failed are absent from the results and counted in stats.errors.

        Raises:
            ProcessingCancelledError: If clipping is interrupted by the user
        """
        stats = ClipStats()
        stats.start_time = time.time()
        clip_logger = ClipLogger(self.logger, stats)

        if window is None:
            window = self.config.window.to_window()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        batch = list(segments)
        stats.segment_count = len(batch)
        chunks = self._make_chunks(batch)

        self.logger.info(
            "Starting batch clipping",
            segments=len(batch),
            chunks=len(chunks),
            window=window.to_tuple(),
            max_workers=max_workers,
        )

        if not chunks:
            chunk_results: dict[int, list[ClipResult]] = {}
        elif max_workers == 1:
            chunk_results = self._clip_serial(chunks, window, clip_logger, progress_callback)
        else:
            chunk_results = self._clip_parallel(
                chunks, window, max_workers, clip_logger, progress_callback
            )

        results: list[ClipResult] = []
        for start_index in sorted(chunk_results):
            results.extend(chunk_results[start_index])

        stats.end_time = time.time()

        self.logger.info(
            "Batch clipping complete",
            visible=stats.visible_count,
            rejected=stats.rejected_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return BatchResult(window=window, results=results, stats=stats)

    def _record(
        self,
        outcome: dict[str, Any],
        clip_logger: ClipLogger,
        chunk_results: dict[int, list[ClipResult]],
    ) -> None:
        start_index = outcome["start_index"]
        if "error" in outcome:
            clip_logger.log_chunk_error(
                start_index=start_index,
                error=Exception(outcome["error"]),
                traceback=outcome.get("traceback"),
            )
            return

        results = [ClipResult.from_dict(data) for data in outcome["results"]]
        visible = sum(1 for result in results if result.visible)
        chunk_results[start_index] = results
        clip_logger.log_chunk_complete(
            start_index=start_index,
            visible=visible,
            rejected=len(results) - visible,
            duration_ms=outcome.get("duration_ms", 0.0),
        )

    def _clip_serial(
        self,
        chunks: list[tuple[int, list[Segment]]],
        window: ClipWindow,
        clip_logger: ClipLogger,
        progress_callback: Callable[[int, int], None] | None,
    ) -> dict[int, list[ClipResult]]:
        """Clip chunks one after another in the calling process."""
        chunk_results: dict[int, list[ClipResult]] = {}
        window_dict = window.to_dict()
        total = len(chunks)

        for completed, (start_index, chunk) in enumerate(chunks, start=1):
            clip_logger.log_chunk_start(start_index, len(chunk))
            try:
                outcome = clip_chunk([s.to_dict() for s in chunk], window_dict, start_index)
            except KeyboardInterrupt:
                clip_logger.stats.was_cancelled = True
                clip_logger.stats.cancelled_count = total - completed + 1
                raise ProcessingCancelledError(completed - 1, total - completed + 1) from None

            self._record(outcome, clip_logger, chunk_results)
            if progress_callback is not None:
                progress_callback(completed, total)

        return chunk_results

    def _clip_parallel(
        self,
        chunks: list[tuple[int, list[Segment]]],
        window: ClipWindow,
        max_workers: int | None,
        clip_logger: ClipLogger,
        progress_callback: Callable[[int, int], None] | None,
    ) -> dict[int, list[ClipResult]]:
        """Clip chunks in parallel using ProcessPoolExecutor.

        Args:
            chunks: (start_index, segments) pairs
            window: Clip rectangle
            max_workers: Maximum worker processes
            clip_logger: Logger updating the run statistics
            progress_callback: Optional callback(completed, total)

        Returns:
            Dictionary mapping chunk start index to its clip results
        """
        chunk_results: dict[int, list[ClipResult]] = {}
        window_dict = window.to_dict()
        total = len(chunks)
        completed = 0
        pending_futures: dict[Future[dict[str, Any]], int] = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for start_index, chunk in chunks:
                clip_logger.log_chunk_start(start_index, len(chunk))
                future = executor.submit(
                    clip_chunk,
                    [s.to_dict() for s in chunk],
                    window_dict,
                    start_index,
                )
                pending_futures[future] = start_index

            try:
                for future in as_completed(list(pending_futures)):
                    start_index = pending_futures.pop(future)

                    try:
                        outcome = future.result()
                    except Exception as e:
                        # Executor-level error (e.g. a worker died)
                        clip_logger.log_chunk_error(
                            start_index=start_index,
                            error=e,
                            traceback=traceback.format_exc(),
                        )
                    else:
                        self._record(outcome, clip_logger, chunk_results)

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                clip_logger.stats.was_cancelled = True
                clip_logger.stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise ProcessingCancelledError(completed, len(pending_futures)) from None

        return chunk_results
