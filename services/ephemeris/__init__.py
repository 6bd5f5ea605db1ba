"""
sunmoon Ephemeris Service

Coordinate algebra, astronomical time scales and the low-precision sun
and moon position models.
"""

from services.ephemeris import extended_math, moon, sun
from services.ephemeris.julian_date import JulianDate
from services.ephemeris.matrix import Matrix
from services.ephemeris.vector import Vector

__all__ = [
    "JulianDate",
    "Matrix",
    "Vector",
    "extended_math",
    "moon",
    "sun",
]
