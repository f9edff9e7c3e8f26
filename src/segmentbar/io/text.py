"""Terminal preview of a frame using Rich."""

from rich.text import Text

from segmentbar.config import SegmentColors
from segmentbar.domain import CoordinateSet
from segmentbar.exceptions import RenderError

FULL_BLOCK = "█"


class TextRenderer:
    """Rasterizes a frame into one line of colored character cells.

    Each cell samples the shapes along the bar's middle row at the cell's
    centre. Shapes are alpha-blended over each other in paint order and over
    the background color. Cells no shape covers stay blank.

    Args:
        columns: Number of character cells
        background: #RRGGBB color blended under translucent shapes
    """

    def __init__(self, columns: int = 60, background: str = "#000000") -> None:
        if columns < 1:
            raise RenderError(f"preview needs at least one column, got {columns}")
        self.columns = columns
        self._background = SegmentColors(color=background).rgb()
        self._cells: list[tuple[float, float, float] | None] | None = None
        self._width = 0.0

    def begin(self, width: float, height: float) -> None:
        self._width = width
        self._cells = [None] * self.columns

    def fill(self, coordinates: CoordinateSet, colors: SegmentColors) -> None:
        if self._cells is None:
            raise RenderError("fill() called before begin()")
        if self._width <= 0:
            return

        # Span of the quadrilateral halfway between its top and bottom edges
        left = (coordinates.top_left_x + coordinates.bottom_left_x) / 2.0
        right = (coordinates.top_right_x + coordinates.bottom_right_x) / 2.0
        if right <= left:
            return

        cell_width = self._width / self.columns
        rgb = colors.rgb()
        for i in range(self.columns):
            x = (i + 0.5) * cell_width
            if not left <= x < right:
                continue
            under = self._cells[i] or self._background
            self._cells[i] = tuple(  # type: ignore[assignment]
                u + (c - u) * colors.alpha for u, c in zip(under, rgb, strict=True)
            )

    def finish(self) -> Text:
        if self._cells is None:
            raise RenderError("finish() called before begin()")
        text = Text()
        for cell in self._cells:
            if cell is None:
                text.append(" ")
            else:
                r, g, b = (round(v) for v in cell)
                text.append(FULL_BLOCK, style=f"#{r:02x}{g:02x}{b:02x}")
        self._cells = None
        return text
