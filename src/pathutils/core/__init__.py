"""Core path primitives for pathutils.

This module contains the geometric primitives used when walking vector
paths:

- Quadratic Bezier curves (sampling, subdivision, root solving, inflections)
- Straight lines (curve baselines)
- The intersection capability shared by both

All primitives are:
- Immutable values (safe to share between threads)
- Pure (no side effects, no I/O)
- Single precision, widening to float64 only where stability needs it

Key classes:
- Curve: Quadratic Bezier segment
- Line: Straight segment
- Intersect: Base class for primitives that can be intersected

Key functions:
- bisect_intersection: Generic intersection of two x-monotonic primitives
- segment_intersection: Closed-form intersection of two lines
"""

from pathutils.core.curve import Curve
from pathutils.core.intersection import Intersect, bisect_intersection
from pathutils.core.line import Line, segment_intersection

__all__ = [
    "Curve",
    "Intersect",
    "Line",
    "bisect_intersection",
    "segment_intersection",
]
