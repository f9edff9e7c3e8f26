"""CLI application entry point for segmentbar.

This module provides the main CLI interface using Typer.
"""

import time
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any

import typer

from segmentbar import __version__
from segmentbar.cli.output import (
    console,
    create_progress,
    print_cancellation_summary,
    print_coordinates,
    print_error,
    print_header,
    print_layout_info,
    print_preview,
    print_step,
    print_success,
    print_warning,
)
from segmentbar.config import RenderConfig, SegmentBarSettings, build_settings
from segmentbar.core import (
    ManualClock,
    ProgressController,
    SegmentGeometryEngine,
    clamp_progress,
    plan_frame,
)
from segmentbar.domain import FramePlan
from segmentbar.exceptions import AnimationCancelledError, SegmentBarError
from segmentbar.io import TextRenderer, render_frame, write_svg
from segmentbar.utils import RenderLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="segmentbar",
    help="Compute and render segmented, skewed progress bars.",
    add_completion=False,
    no_args_is_help=True,
)

SegmentsOption = Annotated[
    int, typer.Option("--segments", "-n", help="Number of segments (>= 1)")
]
SpacingOption = Annotated[
    float, typer.Option("--spacing", "-s", help="Gap between adjacent segments")
]
AngleOption = Annotated[
    float, typer.Option("--angle", "-a", help="Skew of the top edge in degrees (-60..60)")
]
WidthOption = Annotated[float, typer.Option("--width", help="Drawable width")]
HeightOption = Annotated[float, typer.Option("--height", help="Drawable height")]
SegmentColorOption = Annotated[
    str, typer.Option("--segment-color", help="Segment fill as #RRGGBB")
]
ProgressColorOption = Annotated[
    str, typer.Option("--progress-color", help="Progress fill as #RRGGBB")
]
SegmentAlphaOption = Annotated[
    float, typer.Option("--segment-alpha", help="Segment opacity (0..1)")
]
ProgressAlphaOption = Annotated[
    float, typer.Option("--progress-alpha", help="Progress opacity (0..1)")
]
BackgroundOption = Annotated[
    str | None, typer.Option("--background", help="Background fill as #RRGGBB")
]
DrawAllOption = Annotated[
    bool,
    typer.Option(
        "--draw-all",
        help="Draw every segment, including those under the progress overlay",
    ),
]
ColumnsOption = Annotated[
    int, typer.Option("--columns", help="Width of the terminal preview in characters", min=1)
]
LogFileOption = Annotated[
    Path | None, typer.Option("--log-file", help="Write detailed logs to file")
]
LogLevelOption = Annotated[
    str, typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)")
]
QuietOption = Annotated[bool, typer.Option("--quiet", "-q", help="Minimal console output")]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Segmentbar[/bold blue] v{__version__}")
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
    """Compute and render segmented, skewed progress bars."""


def _settings_or_exit(**sections: Any) -> SegmentBarSettings:
    """Validate CLI values into settings, exiting with code 1 on error."""
    try:
        return build_settings(**sections)
    except SegmentBarError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


def _preview(plan: FramePlan, columns: int, background: str | None) -> None:
    renderer = TextRenderer(columns=columns, background=background or "#000000")
    print_preview(render_frame(plan, renderer))


@app.command()
def render(
    progress: Annotated[
        float,
        typer.Option("--progress", "-p", help="Completed segments, fractions allowed"),
    ] = 0.0,
    segments: SegmentsOption = 3,
    spacing: SpacingOption = 10.0,
    angle: AngleOption = 0.0,
    width: WidthOption = 300.0,
    height: HeightOption = 16.0,
    segment_color: SegmentColorOption = "#D3D3D3",
    progress_color: ProgressColorOption = "#A5D6A7",
    segment_alpha: SegmentAlphaOption = 1.0,
    progress_alpha: ProgressAlphaOption = 1.0,
    background: BackgroundOption = None,
    draw_all: DrawAllOption = False,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write an SVG file instead of a terminal preview"),
    ] = None,
    columns: ColumnsOption = 60,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Render a single frame of a segmented progress bar.

    Prints the corner coordinates of every segment and of the progress
    overlay, then either previews the bar in the terminal or writes it to
    an SVG file.

    Example:
        segmentbar render -n 5 -p 2.5 -a 20 -o bar.svg
    """
    settings = _settings_or_exit(
        layout={
            "segment_count": segments,
            "spacing": spacing,
            "angle": angle,
            "draw_all_segments": draw_all,
        },
        render={
            "width": width,
            "height": height,
            "segment_colors": {"color": segment_color, "alpha": segment_alpha},
            "progress_colors": {"color": progress_color, "alpha": progress_alpha},
            "background": background,
        },
        logging={"log_file": log_file, "log_level": log_level},
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    layout = settings.layout
    surface = settings.render
    clamped = clamp_progress(progress, layout.segment_count)

    if not quiet:
        print_header(__version__)
        if clamped != progress:
            print_warning(f"Progress {progress:g} clamped to {clamped:g}")

    plan = plan_frame(
        layout,
        clamped,
        surface.width,
        surface.height,
        surface.segment_colors,
        surface.progress_colors,
    )

    if not quiet:
        engine = SegmentGeometryEngine(layout, surface.width, surface.height)
        print_step("Layout")
        print_layout_info(
            segment_count=layout.segment_count,
            spacing=layout.spacing,
            angle=layout.angle,
            width=surface.width,
            height=surface.height,
            unit_width=engine.unit_width,
        )
        print_step("Coordinates")
        print_coordinates(engine, plan)

    if output is None:
        if not quiet:
            print_step("Preview")
        _preview(plan, columns, surface.background)
        return

    start = time.time()
    try:
        write_svg(plan, output, background=surface.background)
    except SegmentBarError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if not quiet:
        print_success(output_path=str(output), total_time_s=time.time() - start, frames=1)


@app.command()
def animate(
    progress: Annotated[
        float,
        typer.Option("--progress", "-p", help="Target progress"),
    ] = 1.0,
    start: Annotated[
        float,
        typer.Option("--start", help="Progress at the first frame"),
    ] = 0.0,
    duration: Annotated[
        float,
        typer.Option("--duration", "-d", help="Tween duration in milliseconds"),
    ] = 1000.0,
    fps: Annotated[
        int,
        typer.Option("--fps", help="Frames per second", min=1, max=240),
    ] = 30,
    easing: Annotated[
        str,
        typer.Option("--easing", "-e", help="Easing curve (linear|ease_in|ease_out|ease_in_out)"),
    ] = "linear",
    segments: SegmentsOption = 3,
    spacing: SpacingOption = 10.0,
    angle: AngleOption = 0.0,
    width: WidthOption = 300.0,
    height: HeightOption = 16.0,
    segment_color: SegmentColorOption = "#D3D3D3",
    progress_color: ProgressColorOption = "#A5D6A7",
    segment_alpha: SegmentAlphaOption = 1.0,
    progress_alpha: ProgressAlphaOption = 1.0,
    background: BackgroundOption = None,
    draw_all: DrawAllOption = False,
    breath: Annotated[
        bool,
        typer.Option(
            "--breath",
            help="Pulse the overlay once it settles on the last step (progress = segments - 1)",
        ),
    ] = False,
    breath_duration: Annotated[
        float,
        typer.Option("--breath-duration", help="Length of one breathing cycle in milliseconds"),
    ] = 1800.0,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Write one SVG per frame into this directory instead of previewing",
        ),
    ] = None,
    columns: ColumnsOption = 60,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Animate the progress overlay from --start to --progress.

    Frames are sampled at a fixed rate from a simulated clock, so the output
    is the same on every run. With --breath, one breathing cycle is appended
    when the bar comes to rest on its last step.

    Example:
        segmentbar animate -n 4 --start 1 -p 3 --fps 12 -o frames/
    """
    settings = _settings_or_exit(
        layout={
            "segment_count": segments,
            "spacing": spacing,
            "angle": angle,
            "draw_all_segments": draw_all,
        },
        animation={
            "duration_ms": duration,
            "easing": easing.lower(),
            "breath_effect": breath,
            "breath_duration_ms": breath_duration,
        },
        render={
            "width": width,
            "height": height,
            "segment_colors": {"color": segment_color, "alpha": segment_alpha},
            "progress_colors": {"color": progress_color, "alpha": progress_alpha},
            "background": background,
        },
        logging={"log_file": log_file, "log_level": log_level},
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    render_logger = RenderLogger(logger)
    surface = settings.render

    if output_dir is not None:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            print_error(f"Could not create output directory: {e}")
            raise typer.Exit(code=1) from None

    clock = ManualClock()
    controller = ProgressController(
        settings.layout,
        settings.animation,
        clock=clock,
        on_progress_finished=render_logger.log_animation_finished,
    )
    controller.snap_to(start)
    controller.set_target(progress)

    interval = 1.0 / fps
    breath_frames = int(settings.animation.breath_duration_ms / 1000.0 * fps)
    expected_frames = int(settings.animation.duration_ms / 1000.0 * fps) + 1
    if breath and controller.target == settings.layout.segment_count - 1:
        expected_frames += breath_frames

    if not quiet:
        print_header(__version__)
        print_step(
            f"Animating {controller.progress:g} → {controller.target:g} "
            f"over {settings.animation.duration_ms:g}ms at {fps} fps"
        )

    def emit(frame_idx: int, plan: FramePlan) -> None:
        if output_dir is None:
            _preview(plan, columns, surface.background)
        else:
            write_svg(plan, output_dir / f"frame_{frame_idx:04d}.svg", surface.background)

    stats = render_logger.stats
    stats.start_time = time.time()
    frame_idx = 0
    try:
        if output_dir is not None and not quiet:
            with create_progress() as progress_bar:
                task_id = progress_bar.add_task("Rendering frames", total=expected_frames)
                frame_idx = _run_frames(
                    controller, clock, interval, surface, render_logger, emit, breath_frames
                )
                progress_bar.update(task_id, completed=expected_frames)
        else:
            frame_idx = _run_frames(
                controller, clock, interval, surface, render_logger, emit, breath_frames
            )
    except KeyboardInterrupt:
        cancelled = AnimationCancelledError(stats.frames_rendered, controller.progress)
        render_logger.log_animation_cancelled(cancelled)
        if not quiet:
            print_cancellation_summary(cancelled.frames_rendered, cancelled.progress)
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except SegmentBarError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    stats.end_time = time.time()

    if not quiet and output_dir is not None:
        print_success(
            output_path=str(output_dir),
            total_time_s=stats.duration_seconds,
            frames=frame_idx,
            avg_time_ms=stats.avg_frame_time_ms,
        )


def _run_frames(
    controller: ProgressController,
    clock: ManualClock,
    interval: float,
    surface: RenderConfig,
    render_logger: RenderLogger,
    emit: Callable[[int, FramePlan], None],
    breath_frames: int = 0,
) -> int:
    """Render frames until the tween settles.

    If the settled bar is breathing, breath_frames more frames follow so
    the output covers one pulse.

    Returns:
        Number of frames rendered
    """
    frame_idx = 0
    remaining_breath = breath_frames
    while True:
        frame_start = time.perf_counter()
        plan = controller.frame(
            surface.width,
            surface.height,
            surface.segment_colors,
            surface.progress_colors,
        )
        try:
            emit(frame_idx, plan)
        except SegmentBarError as e:
            render_logger.log_render_error(frame_idx, e)
            raise
        render_logger.log_frame(frame_idx, plan, (time.perf_counter() - frame_start) * 1000.0)
        frame_idx += 1

        if not controller.is_animating:
            if not controller.is_breathing or remaining_breath <= 0:
                return frame_idx
            remaining_breath -= 1
        clock.advance(interval)
        controller.step()


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
