"""Coordinate computation for segments and the progress overlay.

This module provides the pure geometry behind the bar:
- Slot width after reserving the gaps between segments
- Horizontal shear of the top edge for a skew angle
- Corner coordinates of a background segment
- Corner coordinates of the progress overlay

Segments and the overlay share the same slot-width formula, so at integer
progress the overlay's right edge equals the trailing edge of the last
completed segment exactly. The draw ordering relies on that equality.

All functions are pure and stateless. Range checks on the inputs are the
caller's job (see clamp_progress and the pydantic layout model); degenerate
inputs yield degenerate coordinate sets rather than errors.
"""

import math

from segmentbar.config import BarLayout
from segmentbar.domain import CoordinateSet


def unit_width(width: float, segment_count: int, spacing: float) -> float:
    """Calculate the width of one segment.

    The drawable width is split into segment_count equal slots after
    reserving spacing between each pair of neighbours (never before the first
    segment or after the last).

    Args:
        width: Drawable width
        segment_count: Number of segments (>= 1)
        spacing: Gap between adjacent segments

    Returns:
        Segment width. Negative when the gaps alone exceed the width.

    Examples:
        >>> round(unit_width(300.0, 3, 10.0), 2)
        93.33
    """
    return (width - spacing * (segment_count - 1)) / segment_count


def shear_offset(height: float, angle: float) -> float:
    """Calculate how far the top edge is shifted from the bottom edge.

    Args:
        height: Drawable height
        angle: Skew in degrees; positive moves the top edge right

    Returns:
        Horizontal offset of the top edge

    Examples:
        >>> round(shear_offset(16.0, 30.0), 2)
        9.24
    """
    return height * math.tan(math.radians(angle))


def clamp_progress(progress: float, segment_count: int) -> float:
    """Clamp a progress value into [0, segment_count].

    NaN is treated as zero progress.
    """
    if math.isnan(progress):
        return 0.0
    return min(max(progress, 0.0), float(segment_count))


def _sheared(bottom_left_x: float, bottom_right_x: float, shear: float) -> CoordinateSet:
    return CoordinateSet(
        top_left_x=bottom_left_x + shear,
        top_right_x=bottom_right_x + shear,
        bottom_left_x=bottom_left_x,
        bottom_right_x=bottom_right_x,
    )


def segment_coordinates(
    position: int,
    segment_count: int,
    width: float,
    height: float,
    spacing: float,
    angle: float,
) -> CoordinateSet:
    """Compute the corners of one background segment.

    Preconditions (not checked): 0 <= position < segment_count and the
    layout ranges of BarLayout.

    Args:
        position: Zero-based segment index
        segment_count: Number of segments
        width: Drawable width
        height: Drawable height
        spacing: Gap between adjacent segments
        angle: Skew in degrees

    Returns:
        CoordinateSet of the segment, top edge sheared by the angle

    Examples:
        >>> c = segment_coordinates(1, 3, 300.0, 16.0, 10.0, 0.0)
        >>> round(c.bottom_left_x, 2), round(c.bottom_right_x, 2)
        (103.33, 196.67)
    """
    segment_width = unit_width(width, segment_count, spacing)
    bottom_left_x = position * (segment_width + spacing)
    bottom_right_x = bottom_left_x + segment_width
    return _sheared(bottom_left_x, bottom_right_x, shear_offset(height, angle))


def progress_coordinates(
    progress: float,
    segment_count: int,
    width: float,
    height: float,
    spacing: float,
    angle: float,
) -> CoordinateSet:
    """Compute the corners of the progress overlay.

    The overlay always starts at x = 0. Within a segment it grows at the
    segment's own rate and never advances through the gap while doing so.
    Once a segment completes, the overlay's right edge steps to the leading
    edge of the next segment.

    Preconditions (not checked): 0 <= progress <= segment_count.

    Args:
        progress: Completed segments, fractional values allowed
        segment_count: Number of segments
        width: Drawable width
        height: Drawable height
        spacing: Gap between adjacent segments
        angle: Skew in degrees

    Returns:
        CoordinateSet of the overlay. Zero progress yields a collapsed set.

    Examples:
        >>> c = progress_coordinates(1.5, 3, 300.0, 16.0, 10.0, 0.0)
        >>> round(c.bottom_right_x, 2)
        150.0
    """
    completed = math.floor(progress)
    fraction = progress - completed

    if completed >= segment_count:
        bottom_right_x = segment_coordinates(
            segment_count - 1, segment_count, width, height, spacing, angle
        ).bottom_right_x
    else:
        segment_width = unit_width(width, segment_count, spacing)
        bottom_right_x = completed * (segment_width + spacing) + fraction * segment_width

    return _sheared(0.0, bottom_right_x, shear_offset(height, angle))


class SegmentGeometryEngine:
    """Geometry queries bound to a layout and a drawable size.

    Convenience wrapper over segment_coordinates and progress_coordinates for
    callers that issue many queries against the same bar. Holds no state
    beyond its inputs and is safe to share between threads.

    Attributes:
        layout: Segment count, spacing and skew
        width: Drawable width
        height: Drawable height
    """

    def __init__(self, layout: BarLayout, width: float, height: float) -> None:
        self.layout = layout
        self.width = width
        self.height = height

    @property
    def unit_width(self) -> float:
        """Width of one segment for this layout."""
        return unit_width(self.width, self.layout.segment_count, self.layout.spacing)

    @property
    def shear_offset(self) -> float:
        """Top edge offset for this layout."""
        return shear_offset(self.height, self.layout.angle)

    def segment(self, position: int) -> CoordinateSet:
        """Get the corners of segment `position`."""
        return segment_coordinates(
            position,
            self.layout.segment_count,
            self.width,
            self.height,
            self.layout.spacing,
            self.layout.angle,
        )

    def segments(self) -> list[CoordinateSet]:
        """Get the corners of every segment in index order."""
        return [self.segment(i) for i in range(self.layout.segment_count)]

    def progress(self, progress: float) -> CoordinateSet:
        """Get the corners of the overlay for `progress` (clamped)."""
        return progress_coordinates(
            clamp_progress(progress, self.layout.segment_count),
            self.layout.segment_count,
            self.width,
            self.height,
            self.layout.spacing,
            self.layout.angle,
        )
