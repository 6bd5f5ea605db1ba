"""
sunmoon Scalar Helpers

Constants and scalar tests shared by the vector algebra and the extended
math helpers. This module imports nothing from the ephemeris package.
"""

import math

# Full circle, in radians
TAU = 2.0 * math.pi

# Arc-seconds per radian
ARCS = math.degrees(3600.0)

# Absolute values below this are treated as zero
ZERO_EPSILON = 1e-9


def frac(a: float) -> float:
    """Return the fractional part of ``a``, keeping the sign of ``a``.

    ``frac(-0.5)`` is ``-0.5``, not ``0.5``.
    """
    return math.fmod(a, 1.0)


def is_zero(d: float) -> bool:
    """Check if the value is zero. NaN and infinities are never zero."""
    if math.isnan(d) or math.isinf(d):
        return False
    return abs(d) < ZERO_EPSILON
