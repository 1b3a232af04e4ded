"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

PHASE_LABELS = {
    "collecting": "Collecting characters",
    "outlines": "Building outlines",
    "compiling": "Compiling font",
    "encoding": "Encoding",
}


def create_progress() -> Progress:
    """Create a rich progress bar for the export.

    The bar is transient so it disappears once the export ends, whether it
    succeeded or not.
    """
    return Progress(
        TextColumn("  {task.description:<22}"),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def print_header(version: str) -> None:
    console.print(f"\n[bold]StrokeFont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_snapshot_info(snapshot_path: str, character_count: int, selected_count: int) -> None:
    """Print snapshot information.

    Args:
        snapshot_path: Path to the snapshot file
        character_count: Characters with strokes in the snapshot
        selected_count: Characters that will be exported
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(snapshot_path)
    console.print(line)
    console.print(f"  {character_count:,} characters {SYM_DOT} {selected_count:,} to export")


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


def format_file_size(size_bytes: int) -> str:
    """Format a byte count in human-readable form (e.g. "428 KB")."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def print_success(
    output_path: str,
    file_size: int,
    total_time_s: float,
    glyphs: int,
    empty: int,
    skipped_strokes: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Size of the font in bytes
        total_time_s: Total export time in seconds
        glyphs: Number of glyphs in the font
        empty: Number of blank character glyphs
        skipped_strokes: Number of strokes that produced no geometry
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({format_file_size(file_size)})")
    console.print(line)

    skipped_style = "yellow" if skipped_strokes > 0 else "green"
    console.print(
        f"  {glyphs} glyphs {SYM_DOT} {empty} empty {SYM_DOT} "
        f"[{skipped_style}]{skipped_strokes} strokes skipped[/{skipped_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(message: str) -> None:
    """Print cancellation summary."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {message}")
    console.print("  No output file created")
