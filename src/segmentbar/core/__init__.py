"""Core algorithms for segmentbar.

This module contains:

- Geometry (slot width, shear, segment and overlay coordinates)
- Draw ordering (which background segments sit under the overlay)
- Animation (tweened progress, breathing alpha, render queries)

Geometry and draw ordering are:
- Stateless (safe to call from any thread)
- Pure (no side effects)

Key functions:
- unit_width: Width of one segment after reserving the gaps
- shear_offset: Horizontal shift of the top edge for a skew angle
- segment_coordinates: Corners of one background segment
- progress_coordinates: Corners of the progress overlay
- should_draw_segment: Draw-ordering comparison for one segment
- plan_frame: Ordered draw commands for one frame

Key classes:
- SegmentGeometryEngine: Geometry queries bound to a layout and size
- ProgressController: Current/target progress driven by a clock
"""

from segmentbar.core.animation import (
    Clock,
    ManualClock,
    MonotonicClock,
    ProgressController,
    breath_alpha,
    ease,
)
from segmentbar.core.drawing import plan_frame, should_draw_segment
from segmentbar.core.geometry import (
    SegmentGeometryEngine,
    clamp_progress,
    progress_coordinates,
    segment_coordinates,
    shear_offset,
    unit_width,
)

__all__ = [
    # Animation
    "Clock",
    "ManualClock",
    "MonotonicClock",
    "ProgressController",
    # Geometry classes
    "SegmentGeometryEngine",
    "breath_alpha",
    "clamp_progress",
    "ease",
    # Drawing functions
    "plan_frame",
    # Geometry functions
    "progress_coordinates",
    "segment_coordinates",
    "shear_offset",
    "should_draw_segment",
    "unit_width",
]
