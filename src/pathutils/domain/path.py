"""Path commands.

A path is drawn as a sequence of commands against an implicit current
point, following the usual pen convention:

- MoveTo: start a new subpath at a point
- LineTo: straight segment from the current point
- CurveTo: quadratic Bezier segment from the current point
- ClosePath: close the current subpath
"""

from dataclasses import dataclass

from pathutils.domain.point import Point


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Begin a new subpath at ``to``."""

    to: Point


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the current point to ``to``."""

    to: Point


@dataclass(frozen=True, slots=True)
class CurveTo:
    """Quadratic segment from the current point to ``to``.

    Attributes:
        control: Off-curve control point
        to: On-curve end point
    """

    control: Point
    to: Point


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath."""


PathCommand = MoveTo | LineTo | CurveTo | ClosePath
