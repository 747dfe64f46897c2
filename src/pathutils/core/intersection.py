"""Intersection capability shared by the path primitives.

Every primitive that can take part in an intersection implements
``Intersect``: it reports the x range it covers and answers
``solve_y_for_x``. Two such primitives are intersected by bisecting on x
over their shared range until their y values meet. Both primitives are
assumed to be monotonic in x over that range; a primitive pair with a
closed-form solution (line-line) overrides ``intersect``.
"""

import math
from abc import ABC, abstractmethod

import structlog

from pathutils.config import IntersectionConfig
from pathutils.domain import Point

logger = structlog.get_logger(__name__)


class Intersect(ABC):
    """A primitive that can be intersected with another primitive."""

    __slots__ = ()

    @abstractmethod
    def min_x(self) -> float:
        """Smallest x covered by the primitive."""

    @abstractmethod
    def max_x(self) -> float:
        """Largest x covered by the primitive."""

    @abstractmethod
    def solve_y_for_x(self, x: float) -> float:
        """Y coordinate of the primitive at ``x``."""

    def intersect(
        self,
        other: "Intersect",
        config: IntersectionConfig | None = None,
    ) -> Point | None:
        """Find the point where this primitive meets ``other``.

        Args:
            other: Any primitive implementing Intersect
            config: Bisection limits (defaults to IntersectionConfig())

        Returns:
            The intersection point, or None if the primitives do not meet
            within their shared x range
        """
        return bisect_intersection(self, other, config or IntersectionConfig())


def bisect_intersection(
    first: Intersect,
    second: Intersect,
    config: IntersectionConfig,
) -> Point | None:
    """Intersect two x-monotonic primitives by bisection on x.

    The y value of the returned point is taken from ``first``.

    Args:
        first: Primitive whose y is reported
        second: Primitive to intersect with
        config: Bisection limits and tolerances

    Returns:
        Intersection point, or None when the x ranges do not overlap or the
        y difference does not change sign over the overlap
    """
    min_x = max(first.min_x(), second.min_x())
    max_x = min(first.max_x(), second.max_x())
    if not min_x <= max_x:
        logger.debug("No shared x range", min_x=min_x, max_x=max_x)
        return None

    min_diff = _y_difference(first, second, min_x)
    if abs(min_diff) <= config.y_tolerance:
        return Point(min_x, first.solve_y_for_x(min_x))

    max_diff = _y_difference(first, second, max_x)
    if abs(max_diff) <= config.y_tolerance:
        return Point(max_x, first.solve_y_for_x(max_x))

    if math.isnan(min_diff) or math.isnan(max_diff) or (min_diff > 0) == (max_diff > 0):
        return None

    for _ in range(config.max_iterations):
        if max_x - min_x <= config.x_tolerance:
            break

        mid_x = (min_x + max_x) / 2
        mid_diff = _y_difference(first, second, mid_x)
        if abs(mid_diff) <= config.y_tolerance:
            min_x = max_x = mid_x
            break

        if (mid_diff > 0) == (min_diff > 0):
            min_x, min_diff = mid_x, mid_diff
        else:
            max_x = mid_x
    else:
        logger.debug(
            "Bisection stopped before convergence",
            iterations=config.max_iterations,
            min_x=min_x,
            max_x=max_x,
        )

    x = (min_x + max_x) / 2
    return Point(x, first.solve_y_for_x(x))


def _y_difference(first: Intersect, second: Intersect, x: float) -> float:
    return first.solve_y_for_x(x) - second.solve_y_for_x(x)
