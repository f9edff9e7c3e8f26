"""Draw ordering for background segments and the progress overlay.

Background segments that lie entirely under the overlay are skipped unless
the caller asks for every segment. The overlay is always painted last.
Comparisons use the sheared top-edge coordinates so the ordering holds for
any skew angle.
"""

from segmentbar.config import BarLayout, SegmentColors
from segmentbar.core.geometry import SegmentGeometryEngine, clamp_progress
from segmentbar.domain import CoordinateSet, DrawCommand, FramePlan, ShapeKind


def should_draw_segment(
    segment: CoordinateSet,
    progress: CoordinateSet,
    draw_all_segments: bool = False,
) -> bool:
    """Decide whether a background segment is drawn.

    Args:
        segment: Corners of the background segment
        progress: Corners of the progress overlay
        draw_all_segments: Draw regardless of the overlay

    Returns:
        True if the segment's top-right corner lies strictly ahead of the
        overlay's, or if draw_all_segments is set
    """
    return draw_all_segments or segment.top_right_x > progress.top_right_x


def plan_frame(
    layout: BarLayout,
    progress: float,
    width: float,
    height: float,
    segment_colors: SegmentColors,
    progress_colors: SegmentColors,
    draw_all_segments: bool | None = None,
) -> FramePlan:
    """Compute the ordered draw commands for one frame.

    Args:
        layout: Segment count, spacing and skew
        progress: Current progress (clamped into range here)
        width: Drawable width
        height: Drawable height
        segment_colors: Fill of the background segments
        progress_colors: Fill of the overlay
        draw_all_segments: Overrides layout.draw_all_segments when not None

    Returns:
        FramePlan with background segments in index order and the overlay last
    """
    draw_all = layout.draw_all_segments if draw_all_segments is None else draw_all_segments
    progress = clamp_progress(progress, layout.segment_count)
    engine = SegmentGeometryEngine(layout, width, height)
    overlay = engine.progress(progress)

    plan = FramePlan(width=width, height=height, progress=progress)
    for position, segment in enumerate(engine.segments()):
        if should_draw_segment(segment, overlay, draw_all):
            plan.commands.append(
                DrawCommand(
                    kind=ShapeKind.SEGMENT,
                    coordinates=segment,
                    colors=segment_colors,
                    index=position,
                )
            )
        else:
            plan.skipped.append(position)

    plan.commands.append(
        DrawCommand(kind=ShapeKind.PROGRESS, coordinates=overlay, colors=progress_colors)
    )

    return plan
