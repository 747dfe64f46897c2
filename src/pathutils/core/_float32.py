"""Internal float32 helpers shared by the primitives.

This is an internal module. Not intended for public use.
"""

import numpy as np

# Approximate-equality epsilon for float32 geometry.
APPROX_EPSILON = np.float32(1e-6)


def clamp_unit(t: np.float64) -> float:
    """Clamp a float64 parameter to [0, 1] and narrow it to float32.

    NaN clamps to 0.0.

    Args:
        t: Unclamped parameter

    Returns:
        Clamped parameter, exactly representable as float32
    """
    return float(np.float32(np.fmin(np.fmax(t, 0.0), 1.0)))
