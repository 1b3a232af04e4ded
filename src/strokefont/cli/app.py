"""CLI application entry point for strokefont.

This module provides the main CLI interface using Typer.
"""

import signal
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from strokefont import __version__
from strokefont.cli.output import (
    PHASE_LABELS,
    console,
    create_progress,
    print_cancellation_summary,
    print_error,
    print_header,
    print_snapshot_info,
    print_step,
    print_success,
)
from strokefont.config import (
    ClosedStrokeMode,
    FontConfig,
    GeometryConfig,
    LoggingConfig,
    StrokeFontSettings,
)
from strokefont.core import CancellationToken, ExportPhase, FontExporter
from strokefont.domain import FontSnapshot, Linecap, hangul_characters
from strokefont.exceptions import SnapshotError, StrokeFontError
from strokefont.io import FontFileWriter, SnapshotReader
from strokefont.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="strokefont",
    help="Build a TrueType font from a stroke snapshot.",
    add_completion=False,
    no_args_is_help=True,
)

CHARSETS = ("snapshot", "hangul")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]StrokeFont[/bold blue] v{__version__}")
        raise typer.Exit()


def _select_characters(snapshot: FontSnapshot, chars: str | None, charset: str) -> list[str] | None:
    """Characters requested on the command line (None = whole snapshot).

    The hangul charset keeps only the characters the snapshot has strokes for,
    in code point order.
    """
    if chars:
        return list(chars)
    if charset == "hangul":
        return [c for c in hangul_characters() if c in snapshot]
    return None


@contextmanager
def cancel_on_interrupt(token: CancellationToken) -> Iterator[CancellationToken]:
    """Cancel the token on Ctrl+C instead of raising KeyboardInterrupt.

    The previous SIGINT handler is restored on exit.
    """

    def signal_handler(signum, frame):
        token.cancel()

    previous = signal.getsignal(signal.SIGINT)
    signal.signal(signal.SIGINT, signal_handler)
    try:
        yield token
    finally:
        signal.signal(signal.SIGINT, previous)


@app.command()
def export(
    snapshot_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the JSON stroke snapshot",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output .ttf path or directory (default: {family}-{style}.ttf next to the snapshot)",
        ),
    ] = None,
    chars: Annotated[
        str | None,
        typer.Option(
            "--chars",
            "-c",
            help="Only export these characters",
        ),
    ] = None,
    charset: Annotated[
        str,
        typer.Option(
            "--charset",
            help="Character set when --chars is not given (snapshot|hangul)",
        ),
    ] = "snapshot",
    weight: Annotated[
        float | None,
        typer.Option(
            "--weight",
            "-w",
            help="Override the snapshot's weight multiplier",
            min=0.05,
            max=10.0,
        ),
    ] = None,
    slant: Annotated[
        float | None,
        typer.Option(
            "--slant",
            help="Override the snapshot's slant angle in degrees",
            min=-45.0,
            max=45.0,
        ),
    ] = None,
    linecap: Annotated[
        str | None,
        typer.Option(
            "--linecap",
            help="Override the default linecap (round|butt|square)",
        ),
    ] = None,
    family: Annotated[
        str,
        typer.Option(
            "--family",
            help="Font family name",
        ),
    ] = "StrokeFont",
    style_name: Annotated[
        str,
        typer.Option(
            "--style",
            help="Font style name",
        ),
    ] = "Regular",
    ring: Annotated[
        bool,
        typer.Option(
            "--ring",
            help="Outline closed strokes with their thickness instead of filling them",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
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
    """Build a TrueType font from a stroke snapshot.

    Every character in the snapshot is outlined (centerline strokes become
    ribbons, closed strokes become fills) and compiled into one font.

    Example:
        strokefont strokes.json -o MyFont.ttf

    This will create MyFont.ttf containing every character of strokes.json.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if charset not in CHARSETS:
        print_error(f"Invalid charset: {charset}", details="Valid values: snapshot, hangul")
        raise typer.Exit(code=1)

    try:
        linecap_override = Linecap(linecap.lower()) if linecap is not None else None
    except ValueError:
        print_error(f"Invalid linecap: {linecap}", details="Valid values: round, butt, square")
        raise typer.Exit(code=1)

    if not snapshot_path.is_file():
        print_error(
            f"Snapshot file not found: {snapshot_path}",
            details=f"The file '{snapshot_path}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    try:
        settings = StrokeFontSettings(
            geometry=GeometryConfig(
                closed_stroke_mode=ClosedStrokeMode.RING if ring else ClosedStrokeMode.FILL,
            ),
            font=FontConfig(family_name=family, style_name=style_name),
            logging=LoggingConfig(
                log_file=log_file,
                log_level="DEBUG" if verbose else log_level,
            ),
        )
    except ValueError as e:
        print_error("Invalid option", details=str(e))
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)
        print_step("Loading snapshot")

    try:
        snapshot = SnapshotReader(snapshot_path).load()
    except SnapshotError as e:
        print_error("Could not load snapshot", details=str(e))
        raise typer.Exit(code=1)

    style = snapshot.style
    if weight is not None:
        style = replace(style, weight_multiplier=weight)
    if slant is not None:
        style = replace(style, slant_degrees=slant)
    if linecap_override is not None:
        style = replace(style, default_linecap=linecap_override)
    snapshot = snapshot.with_style(style)

    selected = _select_characters(snapshot, chars, charset)
    if not quiet:
        print_snapshot_info(
            str(snapshot_path),
            character_count=len(snapshot),
            selected_count=len(selected) if selected is not None else len(snapshot),
        )

    output_path = output or FontFileWriter.get_output_path(snapshot_path, family, style_name)
    writer = FontFileWriter(output_path)
    exporter = FontExporter(settings, logger=logger)

    if not quiet:
        print_step("Exporting")

    try:
        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task(PHASE_LABELS["collecting"], total=1)

                def update_progress(completed: int, total: int, phase: ExportPhase) -> None:
                    progress.update(
                        task_id,
                        description=PHASE_LABELS[phase.value],
                        completed=completed,
                        total=total,
                    )

                with cancel_on_interrupt(CancellationToken()) as token:
                    result = exporter.export(
                        snapshot,
                        characters=selected,
                        progress_callback=update_progress,
                        cancel_token=token,
                        delivery=writer,
                    )
        else:
            with cancel_on_interrupt(CancellationToken()) as token:
                result = exporter.export(
                    snapshot,
                    characters=selected,
                    cancel_token=token,
                    delivery=writer,
                )
    except KeyboardInterrupt:
        if not quiet:
            print_cancellation_summary("Interrupted before the font was written")
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except StrokeFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if result.cancelled:
        if not quiet:
            print_cancellation_summary(result.error or "Export cancelled")
        raise typer.Exit(code=130)

    if not result.success:
        print_error("Export failed", details=result.error)
        raise typer.Exit(code=1)

    if not quiet:
        stats = result.stats
        print_success(
            output_path=str(writer.written_path or output_path),
            file_size=result.file_size,
            total_time_s=stats.duration_seconds,
            glyphs=result.glyph_count,
            empty=stats.empty_glyph_count,
            skipped_strokes=stats.skipped_stroke_count,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
