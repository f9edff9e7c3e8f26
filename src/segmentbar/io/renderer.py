"""Renderer interface and the frame-driving loop."""

from typing import Protocol, TypeVar

from segmentbar.config import SegmentColors
from segmentbar.domain import CoordinateSet, FramePlan

OutputT = TypeVar("OutputT", covariant=True)


class Renderer(Protocol[OutputT]):
    """Surface that fills quadrilaterals.

    A renderer receives the corners of each shape in paint order. It is
    responsible for clipping to the drawable bounds; coordinates may lie
    outside [0, width] when the bar is skewed.
    """

    def begin(self, width: float, height: float) -> None: ...

    def fill(self, coordinates: CoordinateSet, colors: SegmentColors) -> None: ...

    def finish(self) -> OutputT: ...


def render_frame(plan: FramePlan, renderer: Renderer[OutputT]) -> OutputT:
    """Draw every command of a frame plan in order.

    Args:
        plan: Frame to draw
        renderer: Target surface

    Returns:
        Whatever the renderer produces for a finished frame
    """
    renderer.begin(plan.width, plan.height)
    for command in plan.commands:
        renderer.fill(command.coordinates, command.colors)
    return renderer.finish()
