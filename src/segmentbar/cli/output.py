"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from segmentbar.core import SegmentGeometryEngine
from segmentbar.domain import CoordinateSet, FramePlan

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for frame export.

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
    console.print(f"\n[bold]Segmentbar[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_layout_info(
    segment_count: int,
    spacing: float,
    angle: float,
    width: float,
    height: float,
    unit_width: float,
) -> None:
    """Print the bar layout.

    Args:
        segment_count: Number of segments
        spacing: Gap between segments
        angle: Skew in degrees
        width: Drawable width
        height: Drawable height
        unit_width: Computed width of one segment
    """
    console.print(
        f"  {segment_count} segments {SYM_DOT} spacing {spacing:g} {SYM_DOT} angle {angle:g}°"
    )
    console.print(f"  {width:g} × {height:g} {SYM_DOT} segment width {unit_width:.2f}")
    if unit_width < 0:
        console.print("  [yellow]Spacing exceeds the available width; segments are inverted[/yellow]")


def _coordinate_cells(coordinates: CoordinateSet) -> list[str]:
    return [
        f"{coordinates.top_left_x:.2f}",
        f"{coordinates.top_right_x:.2f}",
        f"{coordinates.bottom_left_x:.2f}",
        f"{coordinates.bottom_right_x:.2f}",
    ]


def print_coordinates(engine: SegmentGeometryEngine, plan: FramePlan) -> None:
    """Print the coordinates of every segment and the overlay.

    Args:
        engine: Geometry engine the plan was computed with
        plan: Planned frame (decides which segments are hidden)
    """
    table = Table(show_edge=False, pad_edge=False, box=None)
    table.add_column("Shape")
    for label in ("Top left", "Top right", "Bottom left", "Bottom right"):
        table.add_column(label, justify="right")
    table.add_column("")

    for position, coordinates in enumerate(engine.segments()):
        status = "[dim]hidden[/dim]" if position in plan.skipped else "drawn"
        table.add_row(f"Segment {position}", *_coordinate_cells(coordinates), status)

    table.add_row(
        f"[green]Progress {plan.progress:g}[/green]",
        *_coordinate_cells(plan.overlay.coordinates),
        "drawn",
    )
    console.print(table)


def print_preview(preview: Text) -> None:
    """Print a terminal preview line of the bar."""
    line = Text("  ")
    line.append_text(preview)
    console.print(line)


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


def print_success(
    output_path: str,
    total_time_s: float,
    frames: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file or directory
        total_time_s: Total rendering time in seconds
        frames: Number of frames written
        avg_time_ms: Average rendering time per frame in milliseconds
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    plural = "frame" if frames == 1 else "frames"
    stats = f"  {frames} {plural}"
    if avg_time_ms is not None:
        stats += f" {SYM_DOT} {avg_time_ms:.2f}ms avg"
    console.print(stats)


def print_warning(message: str) -> None:
    """Print a non-fatal warning."""
    console.print(f"  [yellow]{SYM_DOT} {message}[/yellow]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")


def print_cancellation_summary(frames: int, progress: float) -> None:
    """Print cancellation summary.

    Args:
        frames: Number of frames rendered before cancellation
        progress: Animated progress when cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {frames} frames rendered {SYM_DOT} progress at {progress:.2f}")
