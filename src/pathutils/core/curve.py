"""Quadratic Bezier curve primitive.

A Curve is a single quadratic segment: two endpoints and one control
point, all in float32. It is a plain immutable value; every operation
returns new values and never raises for finite input. Degenerate curves
(collinear or coincident points) are legal and produce NaN, infinite or
clamped results instead of errors.
"""

from dataclasses import dataclass

import numpy as np

from pathutils.core._float32 import APPROX_EPSILON, clamp_unit
from pathutils.core.intersection import Intersect
from pathutils.core.line import Line
from pathutils.domain import CurveTo, PathCommand, Point
from pathutils.exceptions import PathCommandError


@dataclass(frozen=True, slots=True)
class Curve(Intersect):
    """A quadratic Bezier segment.

    Attributes:
        endpoints: (start, end); the curve passes through both
        control_point: Off-curve control point
    """

    endpoints: tuple[Point, Point]
    control_point: Point

    @classmethod
    def from_points(cls, start: Point, control: Point, end: Point) -> "Curve":
        """Build a curve from its start, control and end points.

        No validation is done; any three points are accepted.
        """
        return cls(endpoints=(start, end), control_point=control)

    @classmethod
    def from_path_segment(cls, start: Point, command: PathCommand) -> "Curve":
        """Build a curve from a CurveTo command drawn from ``start``.

        Args:
            start: Current point when the command is drawn
            command: Path command, must be a CurveTo

        Returns:
            Curve from ``start`` through the command's control point

        Raises:
            PathCommandError: If ``command`` is not a CurveTo
        """
        if not isinstance(command, CurveTo):
            raise PathCommandError(type(command).__name__, "expected a CurveTo segment")
        return cls.from_points(start, command.control, command.to)

    def sample(self, t: float) -> Point:
        """Evaluate the curve at parameter ``t``.

        Values outside [0, 1] extrapolate the curve.

        Args:
            t: Curve parameter

        Returns:
            Point on the (possibly extrapolated) curve
        """
        p0, p1, p2 = self.endpoints[0], self.control_point, self.endpoints[1]
        return p0.lerp(p1, t).lerp(p1.lerp(p2, t), t)

    def subdivide(self, t: float) -> tuple["Curve", "Curve"]:
        """Split the curve at ``t`` with one step of de Casteljau's algorithm.

        The first piece runs from the start to ``sample(t)``, the second from
        ``sample(t)`` to the end. Values of ``t`` outside [0, 1] give an
        extrapolated split.

        Args:
            t: Curve parameter to split at

        Returns:
            Tuple of (first piece, second piece)
        """
        p0, p1, p2 = self.endpoints[0], self.control_point, self.endpoints[1]
        ap1, bp1 = p0.lerp(p1, t), p1.lerp(p2, t)
        ap2bp0 = ap1.lerp(bp1, t)
        return Curve.from_points(p0, ap1, ap2bp0), Curve.from_points(ap2bp0, bp1, p2)

    def subdivide_at_x(self, x: float) -> tuple["Curve", "Curve"]:
        """Split the curve where it reaches ``x``.

        The pieces are ordered by x: the first covers the lower x range
        whichever way the curve's endpoints are stored.

        Args:
            x: X coordinate to split at; the curve must be monotonic in x

        Returns:
            Tuple of (left piece, right piece)
        """
        prev_part, next_part = self.subdivide(self.solve_t_for_x(x))
        if self.endpoints[0].x <= self.endpoints[1].x:
            return prev_part, next_part
        return next_part, prev_part

    def to_path_segment(self) -> CurveTo:
        """Convert to a CurveTo command (start is the current point)."""
        return CurveTo(self.control_point, self.endpoints[1])

    def inflection_points(self) -> tuple[float | None, float | None]:
        """Parameters where the x and y channels change direction.

        Each channel is reported independently. A channel whose turning
        parameter is not strictly inside (eps, 1 - eps) reports None,
        including straight channels where the parameter is infinite or NaN.

        Returns:
            Tuple of (x channel parameter, y channel parameter)
        """
        inflection_point_x = _inflection_point(
            self.endpoints[0].x, self.control_point.x, self.endpoints[1].x
        )
        inflection_point_y = _inflection_point(
            self.endpoints[0].y, self.control_point.y, self.endpoints[1].y
        )
        return inflection_point_x, inflection_point_y

    def monotonic_parts(self) -> list["Curve"]:
        """Split the curve at its inflection points.

        Every returned piece is monotonic in both x and y, which is what
        ``solve_t_for_x`` and ``intersect`` expect of their inputs.

        Returns:
            Pieces in curve order; ``[self]`` if there are no inflections
        """
        ts = sorted({t for t in self.inflection_points() if t is not None})

        parts: list[Curve] = []
        remaining = self
        consumed = 0.0
        for t in ts:
            head, remaining = remaining.subdivide((t - consumed) / (1.0 - consumed))
            parts.append(head)
            consumed = t
        parts.append(remaining)
        return parts

    def solve_t_for_x(self, x: float) -> float:
        """Find the parameter at which the curve reaches ``x``.

        Solves ``a*t^2 + b*t + c = 0`` in float64 using the Citardauq form
        ``t = 2c / (-b - sqrt(b^2 - 4ac))``, which keeps its precision when
        ``a`` is small (near-straight curves). The curve must be monotonic
        in x; the root chosen is the one for x increasing with t.

        See https://math.stackexchange.com/a/311397

        Args:
            x: Target x coordinate

        Returns:
            Parameter clamped to [0, 1]
        """
        p0x = np.float64(self.endpoints[0].x)
        p1x = np.float64(self.control_point.x)
        p2x = np.float64(self.endpoints[1].x)
        x = np.float64(np.float32(x))

        a = p0x - 2.0 * p1x + p2x
        b = -2.0 * p0x + 2.0 * p1x
        c = p0x - x

        # a == 0 with b < 0 divides by zero; the clamp absorbs inf and NaN.
        with np.errstate(divide="ignore", invalid="ignore"):
            t = 2.0 * c / (-b - np.sqrt(b * b - 4.0 * a * c))
        return clamp_unit(t)

    def solve_y_for_x(self, x: float) -> float:
        """Y coordinate of the curve where it reaches ``x``."""
        return self.sample(self.solve_t_for_x(x)).y

    def baseline(self) -> Line:
        """Straight chord from the start to the end, ignoring the control point."""
        return Line.from_points(self.endpoints[0], self.endpoints[1])

    def min_x(self) -> float:
        return min(self.endpoints[0].x, self.endpoints[1].x)

    def max_x(self) -> float:
        return max(self.endpoints[0].x, self.endpoints[1].x)


def _inflection_point(endpoint_0: float, control_point: float, endpoint_1: float) -> float | None:
    v0, v1, v2 = np.float32(endpoint_0), np.float32(control_point), np.float32(endpoint_1)
    with np.errstate(divide="ignore", invalid="ignore"):
        num = v0 - v1
        denom = v0 - np.float32(2.0) * v1 + v2
        t = num / denom
    if APPROX_EPSILON < t < np.float32(1.0) - APPROX_EPSILON:
        return float(t)
    return None
