"""Straight line segment primitive.

A Line is the chord of a curve and the simplest participant in the
intersection capability. Like Curve it is a float32 value type.
"""

from dataclasses import dataclass

import numpy as np

from pathutils.config import IntersectionConfig
from pathutils.core.intersection import Intersect
from pathutils.domain import LineTo, Point


@dataclass(frozen=True, slots=True)
class Line(Intersect):
    """A straight segment between two endpoints.

    Attributes:
        endpoints: (start, end)
    """

    endpoints: tuple[Point, Point]

    @classmethod
    def from_points(cls, start: Point, end: Point) -> "Line":
        """Build a line from its two endpoints."""
        return cls(endpoints=(start, end))

    def sample(self, t: float) -> Point:
        """Point at parameter ``t`` (extrapolates outside [0, 1])."""
        return self.endpoints[0].lerp(self.endpoints[1], t)

    def solve_t_for_x(self, x: float) -> float:
        """Parameter at which the line reaches ``x``.

        Not clamped. A vertical line yields an infinite or NaN parameter.
        """
        x0 = np.float32(self.endpoints[0].x)
        x1 = np.float32(self.endpoints[1].x)
        with np.errstate(divide="ignore", invalid="ignore"):
            return float((np.float32(x) - x0) / (x1 - x0))

    def solve_y_for_x(self, x: float) -> float:
        return self.sample(self.solve_t_for_x(x)).y

    def min_x(self) -> float:
        return min(self.endpoints[0].x, self.endpoints[1].x)

    def max_x(self) -> float:
        return max(self.endpoints[0].x, self.endpoints[1].x)

    def to_path_segment(self) -> LineTo:
        """Convert to a LineTo command (start is the current point)."""
        return LineTo(self.endpoints[1])

    def intersect(
        self,
        other: Intersect,
        config: IntersectionConfig | None = None,
    ) -> Point | None:
        """Find the point where this line meets ``other``.

        Two lines are intersected in closed form; any other primitive goes
        through the generic bisection.

        Args:
            other: Any primitive implementing Intersect
            config: Bisection limits, unused for line-line

        Returns:
            Intersection point, or None
        """
        if isinstance(other, Line):
            return segment_intersection(self, other)
        return Intersect.intersect(self, other, config)


def segment_intersection(first: Line, second: Line) -> Point | None:
    """Find intersection point of two line segments.

    Uses parametric line equations. Returns None if the segments are
    parallel or coincident, or if the intersection lies outside either
    segment.

    Unlike the other primitive operations this is computed in double
    precision; the result is only rounded to float32 when the returned
    Point narrows its coordinates.

    Args:
        first: First segment
        second: Second segment

    Returns:
        Point at intersection if segments intersect, None otherwise

    Examples:
        >>> a = Line.from_points(Point(0.0, 0.0), Point(2.0, 2.0))
        >>> b = Line.from_points(Point(0.0, 2.0), Point(2.0, 0.0))
        >>> segment_intersection(a, b)
        Point(x=1.0, y=1.0)
    """
    (p1, p2), (p3, p4) = first.endpoints, second.endpoints
    x1, y1 = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    x3, y3 = p3.x, p3.y
    x4, y4 = p4.x, p4.y

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)

    # Parallel or coincident
    if abs(denom) < 1e-10:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    if 0 <= t <= 1 and 0 <= u <= 1:
        return Point(x1 + t * (x2 - x1), y1 + t * (y2 - y1))

    return None
