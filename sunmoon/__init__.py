"""
sunmoon - Sun and Moon Ephemeris Library

Positions, rise/set/noon/nadir times, moon phases and illumination of the
sun and the moon for any place on earth, computed from low-precision
closed-form models. No ephemeris files, no network access.

Architecture:
    - sunmoon: exceptions, logging, configuration, parameters, CLI
    - services.ephemeris: vector algebra, time scales, sun and moon models
    - services.numeric: interpolation and root finding
    - services.almanac: event searches and result records
"""

__version__ = "0.1.0"

# Version tuple for programmatic comparison
VERSION_INFO = (0, 1, 0)

# Core exceptions (import base class for convenience)
from sunmoon.exceptions import SunmoonError

# Almanac API lives in services.almanac, not imported here to avoid circular deps
# from services.almanac import compute_sun_times, compute_moon_times, ...

__all__ = [
    "SunmoonError",
    "VERSION_INFO",
    "__version__",
]
