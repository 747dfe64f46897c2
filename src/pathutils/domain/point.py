"""Single-precision 2D point.

Coordinates are narrowed to IEEE float32 on construction so that every
point handled by the curve primitives carries exactly the precision of the
outline data it came from. Arithmetic between points is carried out in
float32 as well, rounding after each operation.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space with float32 coordinates.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate, exactly representable as float32
        y: Y coordinate, exactly representable as float32
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(np.float32(self.x)))
        object.__setattr__(self, "y", float(np.float32(self.y)))

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linearly interpolate towards another point.

        Computes ``(1 - t) * self + t * other`` per channel in float32.
        ``t`` is not restricted to [0, 1]; values outside extrapolate.
        At ``t == 0`` the result is ``self`` and at ``t == 1`` it is
        ``other``, exactly.

        Args:
            other: Point to interpolate towards
            t: Interpolation parameter

        Returns:
            Interpolated point
        """
        t32 = np.float32(t)
        one_t = np.float32(1.0) - t32
        with np.errstate(over="ignore", invalid="ignore"):
            x = one_t * np.float32(self.x) + t32 * np.float32(other.x)
            y = one_t * np.float32(self.y) + t32 * np.float32(other.y)
        return Point(x, y)
