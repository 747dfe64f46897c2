"""Domain models for pathutils.

This module contains the value types shared by the curve primitives and
the surfaces around them. All models are:

- Immutable (frozen dataclasses)
- Single precision where they carry coordinates
- Independent of fonttools implementation details

Key classes:
- Point: A float32 2D point
- MoveTo, LineTo, CurveTo, ClosePath: Path command variants
"""

from pathutils.domain.path import ClosePath, CurveTo, LineTo, MoveTo, PathCommand
from pathutils.domain.point import Point

__all__: list[str] = [
    "Point",
    # Path commands
    "PathCommand",
    "MoveTo",
    "LineTo",
    "CurveTo",
    "ClosePath",
]
