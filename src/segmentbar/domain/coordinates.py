"""Quadrilateral coordinates for segments and the progress overlay.

This module defines the value type produced by every geometry query:
- CoordinateSet: top and bottom edge x-coordinates of one filled shape
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CoordinateSet:
    """Four x-coordinates describing one quadrilateral.

    The top edge lies at y = 0 and the bottom edge at y = height of the
    drawable area. Only x varies between shapes, so four numbers are enough
    to describe a sheared segment or the progress overlay.

    Immutable and hashable; built fresh on every geometry query.

    Attributes:
        top_left_x: Left end of the top edge
        top_right_x: Right end of the top edge
        bottom_left_x: Left end of the bottom edge
        bottom_right_x: Right end of the bottom edge
    """

    top_left_x: float
    top_right_x: float
    bottom_left_x: float
    bottom_right_x: float

    @classmethod
    def collapsed(cls, x: float = 0.0, shear: float = 0.0) -> "CoordinateSet":
        """Create a zero-width set at x, with the top edge shifted by shear."""
        return cls(
            top_left_x=x + shear,
            top_right_x=x + shear,
            bottom_left_x=x,
            bottom_right_x=x,
        )

    @property
    def top_width(self) -> float:
        """Width of the top edge (negative when inverted)."""
        return self.top_right_x - self.top_left_x

    @property
    def bottom_width(self) -> float:
        """Width of the bottom edge (negative when inverted)."""
        return self.bottom_right_x - self.bottom_left_x

    def is_degenerate(self) -> bool:
        """Check if the shape has zero or inverted width at either edge.

        Returns:
            True if the shape would fill no area when drawn
        """
        return self.top_width <= 0.0 or self.bottom_width <= 0.0

    def is_finite(self) -> bool:
        """Check that no coordinate is NaN or infinite."""
        return all(
            math.isfinite(v)
            for v in (
                self.top_left_x,
                self.top_right_x,
                self.bottom_left_x,
                self.bottom_right_x,
            )
        )

    def polygon(self, height: float) -> list[tuple[float, float]]:
        """Get the corner points in drawing order.

        The path runs top-left, top-right, bottom-right, bottom-left and is
        closed by the renderer.

        Args:
            height: Height of the drawable area (y of the bottom edge)

        Returns:
            List of four (x, y) tuples
        """
        return [
            (self.top_left_x, 0.0),
            (self.top_right_x, 0.0),
            (self.bottom_right_x, height),
            (self.bottom_left_x, height),
        ]

    def translate(self, dx: float) -> "CoordinateSet":
        """Return a copy shifted horizontally by dx."""
        return CoordinateSet(
            top_left_x=self.top_left_x + dx,
            top_right_x=self.top_right_x + dx,
            bottom_left_x=self.bottom_left_x + dx,
            bottom_right_x=self.bottom_right_x + dx,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the four coordinate fields
        """
        return {
            "top_left_x": self.top_left_x,
            "top_right_x": self.top_right_x,
            "bottom_left_x": self.bottom_left_x,
            "bottom_right_x": self.bottom_right_x,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CoordinateSet":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with the four coordinate fields

        Returns:
            CoordinateSet instance
        """
        return cls(
            top_left_x=float(data["top_left_x"]),
            top_right_x=float(data["top_right_x"]),
            bottom_left_x=float(data["bottom_left_x"]),
            bottom_right_x=float(data["bottom_right_x"]),
        )
