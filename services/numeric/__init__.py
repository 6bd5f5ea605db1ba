"""
sunmoon Numeric Service

Interpolation and root finding used by the event searches.
"""

from services.numeric import pegasus
from services.numeric.quadratic_interpolation import QuadraticInterpolation

__all__ = [
    "QuadraticInterpolation",
    "pegasus",
]
