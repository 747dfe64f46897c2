"""pathutils - Quadratic Bezier primitives for vector path processing.

pathutils provides the curve-level geometry used when walking font outlines
and other vector paths: a single-precision quadratic Bezier value type with
sampling, de Casteljau subdivision, root solving for x, inflection detection
and intersection with lines and other curves.

Example:
    >>> from pathutils.core import Curve
    >>> from pathutils.domain import Point
    >>> curve = Curve.from_points(Point(0, 0), Point(5, 10), Point(10, 0))
    >>> curve.sample(0.5)
    Point(x=5.0, y=5.0)
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
