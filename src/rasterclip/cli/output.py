"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from collections.abc import Collection

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from rasterclip.domain import CanvasBounds, ClipResult, ClipWindow, Pixel
from rasterclip.utils import ClipStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

# Rows shown before output is truncated (unless verbose)
PREVIEW_LIMIT = 20


def create_progress() -> Progress:
    """Create a rich progress bar for batch clipping.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Rasterclip[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_canvas_info(canvas: CanvasBounds, clamped: bool) -> None:
    """Print canvas extent and clamping mode."""
    clamp_str = "endpoints clamped" if clamped else "no clamping"
    console.print(f"  canvas {canvas.width}×{canvas.height} {SYM_DOT} {clamp_str}")


def print_window_info(window: ClipWindow, segment_count: int, source: str) -> None:
    """Print clip job information.

    Args:
        window: Normalized clip window
        segment_count: Number of segments read
        source: Input file path
    """
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(
        f"  {segment_count:,} segments {SYM_DOT} window "
        f"[{window.xmin:g}, {window.ymin:g}] – [{window.xmax:g}, {window.ymax:g}]"
    )


def _bbox(pixels: Collection[Pixel]) -> tuple[int, int, int, int]:
    xs = [p.x for p in pixels]
    ys = [p.y for p in pixels]
    return (min(xs), min(ys), max(xs), max(ys))


def print_pixel_summary(kind: str, pixels: Collection[Pixel], verbose: bool) -> None:
    """Print rasterization result.

    Args:
        kind: What was rasterized ("line", "disk", "thick line")
        pixels: Ordered pixels or pixel set
        verbose: Whether to list every pixel
    """
    if not pixels:
        console.print(f"  [yellow]0[/yellow] pixels {SYM_DOT} {kind} is off-canvas")
        return

    x0, y0, x1, y1 = _bbox(pixels)
    console.print(
        f"  [green]{len(pixels):,}[/green] pixels {SYM_DOT} {kind} "
        f"{SYM_DOT} bbox ({x0}, {y0}) – ({x1}, {y1})"
    )

    ordered = sorted(pixels) if isinstance(pixels, (set, frozenset)) else list(pixels)
    shown = ordered if verbose else ordered[:PREVIEW_LIMIT]
    console.print("  " + " ".join(f"({p.x},{p.y})" for p in shown), soft_wrap=True)
    if len(ordered) > len(shown):
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(ordered) - len(shown)} more)")


def print_clip_table(results: list[ClipResult], verbose: bool) -> None:
    """Print clip results as a table.

    Args:
        results: Clip results in input order
        verbose: Whether to show every row
    """
    table = Table(show_edge=False, pad_edge=False, box=None)
    table.add_column("#", justify="right")
    table.add_column("segment")
    table.add_column("clipped")

    shown = results if verbose else results[:PREVIEW_LIMIT]
    for result in shown:
        source = "({:g}, {:g}) – ({:g}, {:g})".format(*result.source.to_tuple())
        if result.clipped is None:
            clipped = "[dim]not visible[/dim]"
        else:
            clipped = "({:g}, {:g}) – ({:g}, {:g})".format(*result.clipped.to_tuple())
        table.add_row(str(result.index + 1), source, clipped)

    console.print(table)
    if len(results) > len(shown):
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(results) - len(shown)} more)")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_processing_info(workers: int, is_auto: bool = False) -> None:
    """Print processing configuration.

    Args:
        workers: Number of parallel workers
        is_auto: Whether the count was auto-detected
    """
    auto_suffix = " (auto)" if is_auto else ""
    console.print(f"  {workers} workers{auto_suffix} {SYM_DOT} Ctrl+C to cancel")


def print_clip_summary(stats: ClipStats) -> None:
    """Print batch clipping summary.

    Args:
        stats: Statistics of the finished run
    """
    time_str = _format_time(stats.duration_seconds)
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    error_style = "red" if stats.error_count > 0 else "green"
    console.print(
        f"  {stats.visible_count} visible {SYM_DOT} {stats.rejected_count} rejected {SYM_DOT} "
        f"[{error_style}]{stats.error_count} errors[/{error_style}]"
    )

    avg = stats.avg_chunk_time_ms
    if avg is not None:
        console.print(f"  {stats.chunk_count} chunks {SYM_DOT} {avg:.1f}ms avg")


def print_written(output_path: str) -> None:
    """Print the output file location."""
    line = Text(f"\n{SYM_OK} Wrote ", style="green")
    line.append(output_path, style="bold")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of chunks clipped before cancellation
        cancelled: Number of pending chunks that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} chunks completed {SYM_DOT} {cancelled} chunks cancelled")
    console.print("  No output file created")
