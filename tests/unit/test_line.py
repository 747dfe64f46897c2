"""Unit tests for the straight line primitive."""

import math

import numpy as np
import pytest

from pathutils.core import Line, segment_intersection
from pathutils.domain import LineTo, Point


def make_line(start: tuple[float, float], end: tuple[float, float]) -> Line:
    """Build a line from coordinate tuples."""
    return Line.from_points(Point(*start), Point(*end))


class TestLine:
    """Tests for Line sampling and solving."""

    def test_sample(self) -> None:
        """Test sampling along the line."""
        line = make_line((0.0, 0.0), (10.0, 20.0))
        assert line.sample(0.5) == Point(5.0, 10.0)
        assert line.sample(0.0) == line.endpoints[0]
        assert line.sample(1.0) == line.endpoints[1]

    def test_solve_t_for_x(self) -> None:
        """Test the parameter is the fraction of the x span."""
        line = make_line((0.0, 0.0), (10.0, 20.0))
        assert line.solve_t_for_x(2.5) == 0.25

    def test_solve_t_not_clamped(self) -> None:
        """Test x outside the line extrapolates."""
        line = make_line((0.0, 0.0), (10.0, 20.0))
        assert line.solve_t_for_x(20.0) == 2.0

    def test_solve_y_for_x(self) -> None:
        """Test y on the line at a given x."""
        line = make_line((0.0, 0.0), (10.0, 20.0))
        assert line.solve_y_for_x(2.5) == 5.0

    def test_vertical_line_does_not_raise(self) -> None:
        """Test a vertical line gives an infinite parameter instead of an error."""
        line = make_line((5.0, 0.0), (5.0, 10.0))
        assert math.isinf(line.solve_t_for_x(7.0))

    def test_x_extent(self) -> None:
        """Test min_x and max_x for a right-to-left line."""
        line = make_line((9.0, 1.0), (-3.0, 2.0))
        assert line.min_x() == -3.0
        assert line.max_x() == 9.0

    def test_to_path_segment(self) -> None:
        """Test export to a LineTo command."""
        line = make_line((0.0, 0.0), (3.0, 4.0))
        assert line.to_path_segment() == LineTo(Point(3.0, 4.0))


class TestSegmentIntersection:
    """Tests for closed-form line-line intersection."""

    def test_crossing_segments(self) -> None:
        """Test diagonals of a square cross at its centre."""
        a = make_line((0.0, 0.0), (2.0, 2.0))
        b = make_line((0.0, 2.0), (2.0, 0.0))
        assert segment_intersection(a, b) == Point(1.0, 1.0)

    def test_parallel_segments(self) -> None:
        """Test parallel segments do not intersect."""
        a = make_line((0.0, 0.0), (2.0, 0.0))
        b = make_line((0.0, 1.0), (2.0, 1.0))
        assert segment_intersection(a, b) is None

    def test_intersection_outside_segments(self) -> None:
        """Test lines crossing beyond a segment end do not intersect."""
        a = make_line((0.0, 0.0), (1.0, 1.0))
        b = make_line((0.0, 4.0), (4.0, 0.0))
        assert segment_intersection(a, b) is None

    def test_result_narrowed_to_float32(self) -> None:
        """Test a double-precision crossing is rounded when stored in the Point."""
        a = make_line((0.0, 0.0), (3.0, 1.0))
        b = make_line((1.0, 0.0), (1.0, 1.0))

        result = segment_intersection(a, b)

        assert result is not None
        assert result.x == 1.0
        assert result.y == float(np.float32(1.0 / 3.0))
        assert result.y != 1.0 / 3.0

    def test_line_intersect_uses_closed_form(self) -> None:
        """Test Line.intersect with a vertical line, which bisection cannot solve."""
        a = make_line((0.0, 0.0), (10.0, 10.0))
        b = make_line((4.0, -5.0), (4.0, 5.0))
        assert a.intersect(b) == Point(4.0, 4.0)
