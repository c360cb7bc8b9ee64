"""Rich console output helpers for the CLI.

This module provides console output using the Rich library with progress
bars and formatted build summaries.
"""


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

console = Console()

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def create_progress() -> Progress:
    """Create a rich progress bar for glyph tracing.

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
    console.print(f"\n[bold]BitFont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    console.print(f"\n{SYM_STEP} {message}")


def print_build_info(
    font_dir: str,
    texture_dir: str,
    charset: str,
    style: str,
    glyph_count: int,
) -> None:
    """Print what is about to be built.

    Args:
        font_dir: Directory holding provider definitions
        texture_dir: Directory holding texture sheets
        charset: Selected charset name
        style: Regular or Bold
        glyph_count: Number of loaded characters
    """
    line = Text("  ")
    line.append(font_dir)
    line.append(f" {SYM_DOT} ")
    line.append(texture_dir)
    console.print(line)
    console.print(
        f"  {glyph_count:,} characters {SYM_DOT} charset {charset} {SYM_DOT} {style}"
    )


def print_glyph_table(rows: list[tuple[str, str, str, int, int, int]]) -> None:
    """Print one row per loaded character.

    Args:
        rows: (code point, char, kind, advance, contours, holes) tuples
    """
    table = Table(show_edge=False, pad_edge=False, box=None)
    table.add_column("Code", style="bold")
    table.add_column("Char")
    table.add_column("Kind")
    table.add_column("Advance", justify="right")
    table.add_column("Contours", justify="right")
    table.add_column("Holes", justify="right")
    for code, char, kind, advance, contours, holes in rows:
        table.add_row(code, Text(char), kind, str(advance), str(contours), str(holes))
    console.print(table)


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


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    processed: int,
    contours: int,
    abandoned: int,
    skipped: int,
    errors: int,
    avg_time_ms: float | None = None,
    min_time_ms: float | None = None,
    max_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total tracing time in seconds
        processed: Number of glyphs traced
        contours: Total number of contours written
        abandoned: Loops the tracer could not close
        skipped: Bitmap glyphs that traced to nothing
        errors: Number of errors encountered
        avg_time_ms: Average tracing time per glyph in milliseconds
        min_time_ms: Fastest glyph in milliseconds
        max_time_ms: Slowest glyph in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} glyphs {SYM_DOT} {contours} contours {SYM_DOT} "
        f"{skipped} skipped {SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )
    if abandoned:
        console.print(f"  [yellow]{abandoned} unclosed loops dropped[/yellow]")

    if avg_time_ms is not None:
        timing_str = f"{avg_time_ms:.2f}ms avg"
        if min_time_ms is not None and max_time_ms is not None:
            timing_str += f" ({min_time_ms:.2f}-{max_time_ms:.2f}ms range)"
        console.print(f"  {timing_str}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice() -> None:
    console.print(f"\n{SYM_DOT} Cancelling... waiting for in-progress glyphs")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of glyphs traced before cancellation
        cancelled: Number of pending tasks that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} glyphs completed {SYM_DOT} {cancelled} tasks cancelled")
    console.print("  No output file created")
