"""SVG output for frame plans.

Each shape becomes a <polygon> inside a group clipped to the drawable
bounds, so sheared segments never bleed past the bar's edges.
"""

from pathlib import Path

import structlog

from segmentbar.config import SegmentColors
from segmentbar.domain import CoordinateSet, FramePlan
from segmentbar.exceptions import RenderError, RenderOutputError
from segmentbar.io.renderer import render_frame

logger = structlog.get_logger(__name__)

CLIP_ID = "segmentbar-bounds"


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


class SvgRenderer:
    """Renderer that produces a standalone SVG document.

    Args:
        background: Optional #RRGGBB fill drawn behind the bar
        precision: Decimal places for coordinates
    """

    def __init__(self, background: str | None = None, precision: int = 2) -> None:
        self.background = background
        self.precision = precision
        self._lines: list[str] | None = None
        self._height = 0.0

    def begin(self, width: float, height: float) -> None:
        w = _fmt(width, self.precision)
        h = _fmt(height, self.precision)
        self._height = height
        self._lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" '
            f'viewBox="0 0 {w} {h}">',
            f'<defs><clipPath id="{CLIP_ID}">'
            f'<rect x="0" y="0" width="{w}" height="{h}"/></clipPath></defs>',
        ]
        if self.background is not None:
            self._lines.append(
                f'<rect x="0" y="0" width="{w}" height="{h}" fill="{self.background}"/>'
            )
        self._lines.append(f'<g clip-path="url(#{CLIP_ID})">')

    def fill(self, coordinates: CoordinateSet, colors: SegmentColors) -> None:
        if self._lines is None:
            raise RenderError("fill() called before begin()")
        # Inverted sets (spacing wider than the bar) are not drawn
        if coordinates.bottom_width < 0 or coordinates.top_width < 0:
            return
        points = " ".join(
            f"{_fmt(x, self.precision)},{_fmt(y, self.precision)}"
            for x, y in coordinates.polygon(self._height)
        )
        self._lines.append(
            f'<polygon points="{points}" fill="{colors.color}" '
            f'fill-opacity="{_fmt(colors.alpha, 3)}"/>'
        )

    def finish(self) -> str:
        if self._lines is None:
            raise RenderError("finish() called before begin()")
        lines = self._lines + ["</g>", "</svg>"]
        self._lines = None
        return "\n".join(lines) + "\n"


def render_svg(plan: FramePlan, background: str | None = None) -> str:
    """Render a frame plan to an SVG string."""
    return render_frame(plan, SvgRenderer(background=background))


def write_svg(plan: FramePlan, path: Path, background: str | None = None) -> Path:
    """Render a frame plan and write it to disk.

    Args:
        plan: Frame to draw
        path: Output file
        background: Optional #RRGGBB fill behind the bar

    Returns:
        The path written

    Raises:
        RenderOutputError: If the file cannot be written
    """
    document = render_svg(plan, background=background)
    try:
        path.write_text(document, encoding="utf-8")
    except OSError as e:
        raise RenderOutputError(str(path), str(e)) from e

    logger.debug("SVG written", path=str(path), shapes=len(plan.commands))
    return path
