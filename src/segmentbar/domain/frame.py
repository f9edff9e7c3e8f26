"""Draw commands for a single frame of the bar.

A frame is an ordered list of filled shapes. Background segments come first
in index order and the progress overlay is always last.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from segmentbar.config import SegmentColors
from segmentbar.domain.coordinates import CoordinateSet


class ShapeKind(Enum):
    """What a draw command represents."""

    SEGMENT = auto()
    PROGRESS = auto()


@dataclass(frozen=True)
class DrawCommand:
    """A single filled quadrilateral to draw.

    Attributes:
        kind: Background segment or progress overlay
        coordinates: Corner x-coordinates of the shape
        colors: Fill color and opacity
        index: Segment index, None for the overlay
    """

    kind: ShapeKind
    coordinates: CoordinateSet
    colors: SegmentColors
    index: int | None = None


@dataclass
class FramePlan:
    """Everything a renderer needs to draw one frame.

    Attributes:
        width: Drawable width
        height: Drawable height
        progress: Progress value the frame was computed for
        commands: Shapes in paint order
        skipped: Indices of background segments hidden under the overlay
    """

    width: float
    height: float
    progress: float
    commands: list[DrawCommand] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)

    @property
    def overlay(self) -> DrawCommand:
        """The progress overlay command (always the last one)."""
        return self.commands[-1]

    @property
    def segments(self) -> list[DrawCommand]:
        """Background segment commands in paint order."""
        return [c for c in self.commands if c.kind is ShapeKind.SEGMENT]
