"""Unit tests for the intersection capability.

Tests cover:
- Curve-line and line-curve intersection by bisection
- Curve-curve intersection
- Disjoint ranges, missing sign changes and shared endpoints
- Bisection limits from IntersectionConfig
"""

import pytest

from pathutils.config import IntersectionConfig
from pathutils.core import Curve, Intersect, Line, bisect_intersection
from pathutils.domain import Point

# Root of 3x - 0.2x^2 - 8 = 0 in [0, 10]
CROSSING_X = (3.0 - (9.0 - 6.4) ** 0.5) / 0.4


@pytest.fixture
def arch() -> Curve:
    """Arch y = 2x - 0.2x^2 over x in [0, 10]."""
    return Curve.from_points(Point(0.0, 0.0), Point(5.0, 10.0), Point(10.0, 0.0))


@pytest.fixture
def falling_line() -> Line:
    """Line y = 8 - x over x in [0, 10]."""
    return Line.from_points(Point(0.0, 8.0), Point(10.0, -2.0))


class TestCurveLineIntersection:
    """Tests for intersecting curves with lines."""

    def test_curve_with_line(self, arch: Curve, falling_line: Line) -> None:
        """Test a line crossing the arch once."""
        point = arch.intersect(falling_line)

        assert point is not None
        assert point.x == pytest.approx(CROSSING_X, abs=1e-3)
        assert point.y == pytest.approx(8.0 - CROSSING_X, abs=1e-3)

    def test_point_lies_on_both(self, arch: Curve, falling_line: Line) -> None:
        """Test the intersection is on the curve and on the line."""
        point = arch.intersect(falling_line)

        assert point is not None
        assert arch.solve_y_for_x(point.x) == pytest.approx(point.y, abs=1e-3)
        assert falling_line.solve_y_for_x(point.x) == pytest.approx(point.y, abs=1e-3)

    def test_line_with_curve(self, arch: Curve, falling_line: Line) -> None:
        """Test the capability is symmetric in its participants."""
        from_curve = arch.intersect(falling_line)
        from_line = falling_line.intersect(arch)

        assert from_curve is not None and from_line is not None
        assert from_line.x == pytest.approx(from_curve.x, abs=1e-3)
        assert from_line.y == pytest.approx(from_curve.y, abs=1e-3)

    def test_disjoint_x_ranges(self, arch: Curve) -> None:
        """Test primitives side by side do not intersect."""
        line = Line.from_points(Point(20.0, 0.0), Point(30.0, 10.0))
        assert arch.intersect(line) is None

    def test_line_above_curve(self, arch: Curve) -> None:
        """Test a line that never meets the curve."""
        line = Line.from_points(Point(0.0, 20.0), Point(10.0, 20.0))
        assert arch.intersect(line) is None

    def test_shared_endpoint(self, arch: Curve) -> None:
        """Test primitives touching at a single x meet there."""
        line = Line.from_points(Point(10.0, 0.0), Point(20.0, 5.0))
        assert arch.intersect(line) == Point(10.0, 0.0)


class TestCurveCurveIntersection:
    """Tests for intersecting two curves."""

    def test_curve_with_straight_curve(self, arch: Curve, falling_line: Line) -> None:
        """Test a straight curve behaves like its baseline."""
        straight = Curve.from_points(Point(0.0, 8.0), Point(5.0, 3.0), Point(10.0, -2.0))

        point = arch.intersect(straight)
        expected = arch.intersect(falling_line)

        assert point is not None and expected is not None
        assert point.x == pytest.approx(expected.x, abs=1e-3)
        assert point.y == pytest.approx(expected.y, abs=1e-3)

    def test_crossing_arches(self) -> None:
        """Test a rising and a falling curve meet in the middle."""
        rising = Curve.from_points(Point(0.0, 0.0), Point(5.0, 0.0), Point(10.0, 10.0))
        falling = Curve.from_points(Point(0.0, 10.0), Point(5.0, 0.0), Point(10.0, 0.0))

        point = rising.intersect(falling)

        assert point is not None
        assert point.x == pytest.approx(5.0, abs=1e-3)
        assert point.y == pytest.approx(2.5, abs=1e-3)

    def test_curve_with_itself_shifted(self, arch: Curve) -> None:
        """Test parallel curves do not intersect."""
        shifted = Curve.from_points(Point(0.0, 1.0), Point(5.0, 11.0), Point(10.0, 1.0))
        assert arch.intersect(shifted) is None


class TestBisectionConfig:
    """Tests for IntersectionConfig limits."""

    def test_default_config(self, arch: Curve, falling_line: Line) -> None:
        """Test passing the default config matches passing none."""
        assert arch.intersect(falling_line, IntersectionConfig()) == arch.intersect(
            falling_line
        )

    def test_single_iteration(self, arch: Curve, falling_line: Line) -> None:
        """Test a one-step bisection still returns a point in the shared range."""
        config = IntersectionConfig(max_iterations=1)
        point = bisect_intersection(arch, falling_line, config)

        assert point is not None
        assert 0.0 <= point.x <= 10.0
        assert point.x == pytest.approx(CROSSING_X, abs=2.5)

    def test_loose_tolerance(self, arch: Curve, falling_line: Line) -> None:
        """Test a coarse x tolerance stops early but stays close."""
        config = IntersectionConfig(x_tolerance=0.5)
        point = arch.intersect(falling_line, config)

        assert point is not None
        assert point.x == pytest.approx(CROSSING_X, abs=0.5)

    def test_intersect_is_abstract(self) -> None:
        """Test the capability cannot be instantiated on its own."""
        with pytest.raises(TypeError):
            Intersect()  # type: ignore[abstract]
