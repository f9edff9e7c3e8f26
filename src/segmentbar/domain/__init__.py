"""Domain models for segmentbar.

This module contains the value types passed between the geometry engine,
the progress controller and the renderers. All models are:

- Immutable where possible (using frozen dataclasses)
- Independent of any drawing backend

Key classes:
- CoordinateSet: Corner x-coordinates of one quadrilateral
- DrawCommand: A shape plus its fill
- FramePlan: Ordered draw commands for one frame
"""

from segmentbar.domain.coordinates import CoordinateSet
from segmentbar.domain.frame import DrawCommand, FramePlan, ShapeKind

__all__: list[str] = [
    # Enums
    "ShapeKind",
    # Core types
    "CoordinateSet",
    "DrawCommand",
    "FramePlan",
]
