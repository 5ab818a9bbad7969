"""CLI application entry point for rasterclip.

This module provides the main CLI interface using Typer.

Coordinates are positional arguments; put "--" before them when the first
one is negative (e.g. rasterclip circle -- -5 10 20).
"""

from collections.abc import Collection, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer

from rasterclip import __version__
from rasterclip.cli.output import (
    console,
    create_progress,
    print_canvas_info,
    print_cancellation_summary,
    print_clip_summary,
    print_clip_table,
    print_error,
    print_header,
    print_pixel_summary,
    print_processing_info,
    print_step,
    print_window_info,
    print_written,
)
from rasterclip.config import (
    CanvasConfig,
    LineConfig,
    LoggingConfig,
    OutputFormat,
    ProcessingConfig,
    RasterClipSettings,
)
from rasterclip.core import BatchClipper, ThickLineBuilder, bresenham_line, filled_disk
from rasterclip.domain import ClipWindow, Pixel
from rasterclip.exceptions import (
    InputFileError,
    InputFormatError,
    ProcessingCancelledError,
    RasterClipError,
)
from rasterclip.io import ResultWriter, SegmentReader
from rasterclip.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="rasterclip",
    help="Rasterize lines, disks and thick lines, and clip segments to a window.",
    add_completion=False,
    no_args_is_help=True,
)

# Options shared by every command
OutputOpt = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Write results to this file"),
]
FormatOpt = Annotated[
    str | None,
    typer.Option(
        "--format",
        "-f",
        help=(
            "Output format (text|json|pbm); default: from --output suffix, else text. "
            "Without --output, writes <command>.<ext> (clip: <input>-clipped.<ext>)"
        ),
    ),
]
CanvasWidthOpt = Annotated[
    int,
    typer.Option("--canvas-width", help="Canvas width in pixels", min=1, max=65536),
]
CanvasHeightOpt = Annotated[
    int,
    typer.Option("--canvas-height", help="Canvas height in pixels", min=1, max=65536),
]
LogFileOpt = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOpt = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
VerboseOpt = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Verbose console output"),
]
QuietOpt = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Minimal console output"),
]
NoClampOpt = Annotated[
    bool,
    typer.Option("--no-clamp", help="Do not clamp endpoints onto the canvas"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Rasterclip[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Integer rasterization and Liang-Barsky clipping."""


@contextmanager
def _cli_errors() -> Iterator[None]:
    """Map package errors onto console messages and exit codes."""
    try:
        yield
    except typer.Exit:
        raise
    except ProcessingCancelledError as e:
        print_cancellation_summary(processed=e.processed_count, cancelled=e.pending_count)
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except InputFileError as e:
        print_error(f"Could not read input: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except InputFormatError as e:
        print_error(f"Invalid input: {e.details}", details=e.path)
        raise typer.Exit(code=1)
    except RasterClipError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _build_settings(
    canvas_width: int,
    canvas_height: int,
    log_file: Path | None,
    log_level: str,
    verbose: bool,
    quiet: bool,
    clamp: bool = True,
    width: int = 1,
) -> RasterClipSettings:
    """Validate shared options and build settings from them."""
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    return RasterClipSettings(
        canvas=CanvasConfig(width=canvas_width, height=canvas_height),
        line=LineConfig(width=max(1, width), clamp_to_canvas=clamp),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )


def _resolve_format(fmt: str | None, output: Path | None) -> OutputFormat:
    """Pick the output format from --format or the output file suffix."""
    if fmt is not None:
        try:
            return OutputFormat(fmt.lower())
        except ValueError:
            print_error(
                f"Invalid format: {fmt}",
                details="Valid values: text, json, pbm",
            )
            raise typer.Exit(code=1)

    if output is not None:
        suffix = output.suffix.lower().lstrip(".")
        if suffix == "json":
            return OutputFormat.JSON
        if suffix == "pbm":
            return OutputFormat.PBM
    return OutputFormat.TEXT


def _resolve_output(
    output: Path | None,
    fmt: str | None,
    output_format: OutputFormat,
    stem: str,
    directory: Path | None = None,
) -> Path | None:
    """Pick the output file; --format without --output writes to a default name."""
    if output is None and fmt is not None:
        return ResultWriter.default_path(stem, output_format, directory)
    return output


def _parse_window(value: str) -> ClipWindow:
    """Parse "XMIN,YMIN,XMAX,YMAX" into a normalized window."""
    parts = [part.strip() for part in value.split(",")]
    if len(parts) != 4:
        raise InputFormatError("--window", "expected XMIN,YMIN,XMAX,YMAX")
    try:
        xmin, ymin, xmax, ymax = (float(part) for part in parts)
    except ValueError:
        raise InputFormatError("--window", f"non-numeric bound in '{value}'") from None
    return ClipWindow.from_corners(xmin, ymin, xmax, ymax)


def _emit_pixels(
    kind: str,
    pixels: Collection[Pixel],
    settings: RasterClipSettings,
    output: Path | None,
    fmt: OutputFormat,
    verbose: bool,
    quiet: bool,
) -> None:
    """Show rasterizer output and optionally write it to a file."""
    if not quiet:
        print_pixel_summary(kind, pixels, verbose)

    if output is not None:
        ResultWriter(output).write_pixels(pixels, fmt, settings.canvas.to_bounds())
        if not quiet:
            print_written(str(output))


@app.command()
def line(
    x0: Annotated[int, typer.Argument(help="Start column", show_default=False)],
    y0: Annotated[int, typer.Argument(help="Start row", show_default=False)],
    x1: Annotated[int, typer.Argument(help="End column", show_default=False)],
    y1: Annotated[int, typer.Argument(help="End row", show_default=False)],
    output: OutputOpt = None,
    fmt: FormatOpt = None,
    canvas_width: CanvasWidthOpt = 900,
    canvas_height: CanvasHeightOpt = 600,
    no_clamp: NoClampOpt = False,
    log_file: LogFileOpt = None,
    log_level: LogLevelOpt = "WARNING",
    verbose: VerboseOpt = False,
    quiet: QuietOpt = False,
) -> None:
    """Rasterize a one pixel wide line with Bresenham's algorithm.

    Pixels are listed in traversal order from (X0, Y0) to (X1, Y1).

    Example:
        rasterclip line 0 0 4 2
    """
    settings = _build_settings(
        canvas_width, canvas_height, log_file, log_level, verbose, quiet, clamp=not no_clamp
    )
    output_format = _resolve_format(fmt, output)
    output = _resolve_output(output, fmt, output_format, "line")

    with _cli_errors():
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        canvas = settings.canvas.to_bounds()
        if settings.line.clamp_to_canvas:
            x0, y0 = canvas.clamp(x0, y0)
            x1, y1 = canvas.clamp(x1, y1)

        if not quiet:
            print_header(__version__)
            print_step(f"Line ({x0}, {y0}) → ({x1}, {y1})")
            print_canvas_info(canvas, settings.line.clamp_to_canvas)

        pixels = bresenham_line(x0, y0, x1, y1)
        logger.debug("Line rasterized", start=(x0, y0), end=(x1, y1), pixels=len(pixels))

        _emit_pixels("line", pixels, settings, output, output_format, verbose, quiet)


@app.command()
def circle(
    cx: Annotated[int, typer.Argument(help="Centre column", show_default=False)],
    cy: Annotated[int, typer.Argument(help="Centre row", show_default=False)],
    radius: Annotated[int, typer.Argument(help="Radius in pixels", show_default=False)],
    output: OutputOpt = None,
    fmt: FormatOpt = None,
    canvas_width: CanvasWidthOpt = 900,
    canvas_height: CanvasHeightOpt = 600,
    log_file: LogFileOpt = None,
    log_level: LogLevelOpt = "WARNING",
    verbose: VerboseOpt = False,
    quiet: QuietOpt = False,
) -> None:
    """Rasterize a filled disk with the midpoint circle algorithm.

    The disk is clipped to the canvas; a negative radius is treated as 0.

    Example:
        rasterclip circle 450 300 120 -o disk.pbm
    """
    settings = _build_settings(canvas_width, canvas_height, log_file, log_level, verbose, quiet)
    output_format = _resolve_format(fmt, output)
    output = _resolve_output(output, fmt, output_format, "circle")

    with _cli_errors():
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        canvas = settings.canvas.to_bounds()
        radius = max(0, radius)

        if not quiet:
            print_header(__version__)
            print_step(f"Disk centre ({cx}, {cy}) radius {radius}")
            print_canvas_info(canvas, clamped=False)

        pixels = filled_disk(cx, cy, radius, canvas)
        logger.debug("Disk rasterized", center=(cx, cy), radius=radius, pixels=len(pixels))

        _emit_pixels("disk", pixels, settings, output, output_format, verbose, quiet)


@app.command()
def thick(
    x0: Annotated[int, typer.Argument(help="Start column", show_default=False)],
    y0: Annotated[int, typer.Argument(help="Start row", show_default=False)],
    x1: Annotated[int, typer.Argument(help="End column", show_default=False)],
    y1: Annotated[int, typer.Argument(help="End row", show_default=False)],
    width: Annotated[
        int,
        typer.Option(
            "--width",
            "-w",
            help="Line width in pixels (values below 1 are raised to 1)",
            max=255,
        ),
    ] = 1,
    output: OutputOpt = None,
    fmt: FormatOpt = None,
    canvas_width: CanvasWidthOpt = 900,
    canvas_height: CanvasHeightOpt = 600,
    no_clamp: NoClampOpt = False,
    log_file: LogFileOpt = None,
    log_level: LogLevelOpt = "WARNING",
    verbose: VerboseOpt = False,
    quiet: QuietOpt = False,
) -> None:
    """Rasterize a thick line by stamping disks along its centerline.

    Example:
        rasterclip thick 50 50 700 500 --width 7 -o line.pbm
    """
    settings = _build_settings(
        canvas_width,
        canvas_height,
        log_file,
        log_level,
        verbose,
        quiet,
        clamp=not no_clamp,
        width=width,
    )
    output_format = _resolve_format(fmt, output)
    output = _resolve_output(output, fmt, output_format, "thick")

    with _cli_errors():
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        canvas = settings.canvas.to_bounds()
        if settings.line.clamp_to_canvas:
            x0, y0 = canvas.clamp(x0, y0)
            x1, y1 = canvas.clamp(x1, y1)
        line_width = settings.line.width

        if not quiet:
            print_header(__version__)
            print_step(f"Thick line ({x0}, {y0}) → ({x1}, {y1}) width {line_width}")
            print_canvas_info(canvas, settings.line.clamp_to_canvas)

        builder = ThickLineBuilder(canvas)
        pixels = builder.build(x0, y0, x1, y1, line_width)
        logger.debug(
            "Thick line rasterized",
            start=(x0, y0),
            end=(x1, y1),
            width=line_width,
            radius=builder.stamp_radius(line_width),
            pixels=len(pixels),
        )

        _emit_pixels("thick line", pixels, settings, output, output_format, verbose, quiet)


@app.command()
def clip(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Segment file: xmin ymin xmax ymax, n, then n lines of x0 y0 x1 y1",
            show_default=False,
        ),
    ],
    window: Annotated[
        str | None,
        typer.Option(
            "--window",
            help="Override the file's window, as XMIN,YMIN,XMAX,YMAX",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto, 1 = no worker processes)",
            min=1,
        ),
    ] = None,
    chunk_size: Annotated[
        int,
        typer.Option("--chunk-size", help="Segments per worker task", min=1),
    ] = 512,
    output: OutputOpt = None,
    fmt: FormatOpt = None,
    log_file: LogFileOpt = None,
    log_level: LogLevelOpt = "WARNING",
    verbose: VerboseOpt = False,
    quiet: QuietOpt = False,
) -> None:
    """Clip line segments to a rectangular window (Liang-Barsky).

    Example:
        rasterclip clip segments.txt --window=-50,-50,50,50 -o visible.txt
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    output_format = _resolve_format(fmt, output)
    output = _resolve_output(
        output, fmt, output_format, f"{input_file.stem}-clipped", input_file.parent
    )

    settings = RasterClipSettings(
        processing=ProcessingConfig(max_workers=workers, chunk_size=chunk_size),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    with _cli_errors():
        if not quiet:
            print_header(__version__)
            print_step("Reading segments")

        reader = SegmentReader(input_file)
        reader.load()
        clip_window = _parse_window(window) if window is not None else reader.window
        segments = list(reader.iter_segments())

        if not quiet:
            print_window_info(clip_window, len(segments), str(input_file))

        clipper = BatchClipper(settings, quiet=quiet)

        if not quiet:
            import os

            actual_workers = workers if workers else os.cpu_count() or 1
            print_step("Clipping")
            print_processing_info(actual_workers, is_auto=(workers is None))

            with create_progress() as progress:
                task_id = progress.add_task("Clipping", total=None)

                def update_progress(completed: int, total: int) -> None:
                    progress.update(task_id, completed=completed, total=total)

                batch = clipper.clip(
                    segments,
                    window=clip_window,
                    max_workers=workers,
                    progress_callback=update_progress,
                )

            print_clip_summary(batch.stats)
            print_step("Results")
            print_clip_table(batch.results, verbose)
        else:
            batch = clipper.clip(segments, window=clip_window, max_workers=workers)

        if output is not None:
            ResultWriter(output).write_clip_results(batch.results, batch.window, output_format)
            if not quiet:
                print_written(str(output))

        if batch.stats.error_count:
            raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
