"""
sunmoon Extended Math

Stateless numeric helpers used by the ephemeris models and the event
searches:
- Signed fractional part and zero test
- Degrees/minutes/seconds conversion
- Atmospheric refraction and parallax corrections
- Equatorial to ecliptical and equatorial to horizontal transforms
- Extremum refinement around a coarse estimate

All angles are in radians unless noted otherwise.
"""

import math
from typing import Callable

from services.ephemeris.matrix import Matrix
from services.ephemeris.scalars import ARCS, TAU, ZERO_EPSILON, frac, is_zero
from services.ephemeris.vector import Vector
from sunmoon.types import Degrees, Kilometers, Meters, Radians, ScalarFunction

__all__ = [
    "ARCS",
    "EARTH_EQUATORIAL_RADIUS",
    "TAU",
    "ZERO_EPSILON",
    "apparent_refraction",
    "dms",
    "equatorial_to_ecliptical",
    "equatorial_to_horizontal",
    "frac",
    "is_zero",
    "parallax",
    "readjust_max",
    "readjust_min",
    "refraction",
]

# Earth's equatorial radius, in kilometers
EARTH_EQUATORIAL_RADIUS = 6378.1366

# Frame width below which the extremum refinement stops, in hours
_MIN_FRAME = 1e-9


def dms(d: int, m: int, s: float) -> Degrees:
    """Convert degrees, minutes and seconds to decimal degrees.

    Only the sign of ``d`` determines the sign of the result. Minutes and
    seconds are not range checked; out of range values are simply summed up,
    so ``dms(0, 0, 72.0)`` is ``0.02``.

    Args:
        d: Degrees
        m: Minutes
        s: Seconds

    Returns:
        Angle, in decimal degrees
    """
    sig = -1.0 if d < 0 else 1.0
    return sig * ((abs(s) / 60.0 + abs(m)) / 60.0 + abs(d))


def apparent_refraction(ha: Radians) -> Radians:
    """Atmospheric refraction of an object at the given apparent altitude.

    Bennett's formula, assuming 1010 hPa and 10 °C. Negative altitudes
    return 0.

    Args:
        ha: Apparent altitude, in radians

    Returns:
        Refraction at this altitude, in radians
    """
    if ha < 0.0:
        return 0.0

    ha_deg = math.degrees(ha)
    return math.pi / (math.tan(math.radians(ha_deg + (7.31 / (ha_deg + 4.4)))) * 10800.0)


def refraction(ht: Radians) -> Radians:
    """Atmospheric refraction of an object at the given true altitude.

    Sæmundsson's formula, assuming 1010 hPa and 10 °C. Negative altitudes
    return 0.

    Args:
        ht: True altitude, in radians

    Returns:
        Refraction at this altitude, in radians
    """
    if ht < 0.0:
        return 0.0

    return 0.000296706 / math.tan(ht + 0.00312537 / (ht + 0.0890118))


def parallax(elevation: Meters, distance: Kilometers) -> Radians:
    """Topocentric parallax of a body, minus the dip of the horizon.

    Args:
        elevation: Observer's height above sea level, in meters
        distance: Distance of the body, in kilometers

    Returns:
        Parallax, in radians
    """
    return (
        math.asin(EARTH_EQUATORIAL_RADIUS / distance)
        - math.radians(0.0353 * math.sqrt(elevation))
    )


def equatorial_to_ecliptical(julian_date) -> Matrix:
    """Rotation matrix from the equatorial to the ecliptical frame.

    The obliquity of the ecliptic slowly decreases with the Julian century.

    Args:
        julian_date: JulianDate of the epoch

    Returns:
        Matrix rotating about the X axis by the obliquity
    """
    t = julian_date.julian_century
    eps = math.radians(
        23.43929111 - (46.8150 + (0.00059 - 0.001813 * t) * t) * t / 3600.0
    )
    return Matrix.rotate_x(eps)


def equatorial_to_horizontal(tau: Radians, dec: Radians, dist: Kilometers, lat: Radians) -> Vector:
    """Convert equatorial coordinates to horizontal coordinates.

    The resulting vector's polar form gives the azimuth (south-based) as
    ``phi``, the altitude as ``theta`` and the distance as ``r``.

    Args:
        tau: Hour angle, in radians
        dec: Declination, in radians
        dist: Distance of the object
        lat: Latitude of the observer, in radians

    Returns:
        Vector in the horizontal frame
    """
    return Matrix.rotate_y(math.pi / 2.0 - lat).multiply(Vector.of_polar(tau, dec, dist))


def readjust_max(time: float, frame: float, depth: int, fn: ScalarFunction) -> float:
    """Locate the maximum of ``fn`` near ``time`` more precisely.

    Starting with the interval ``[time - frame, time + frame]``, the interval
    is halved towards its higher end until ``depth`` halvings were done or
    the interval became negligibly small. For a roughly parabolic ``fn`` the
    maximum always lies in the half adjacent to the higher end.

    Args:
        time: Coarse estimate of the maximum
        frame: Half width of the initial interval
        depth: Maximum number of halvings
        fn: Function to be maximized

    Returns:
        Refined position of the maximum
    """
    return _readjust_interval(time - frame, time + frame, depth, fn, lambda yl, yr: yl < yr)


def readjust_min(time: float, frame: float, depth: int, fn: ScalarFunction) -> float:
    """Locate the minimum of ``fn`` near ``time`` more precisely.

    Same as :func:`readjust_max`, but halves towards the lower end.
    """
    return _readjust_interval(time - frame, time + frame, depth, fn, lambda yl, yr: yl > yr)


def _readjust_interval(
    left: float,
    right: float,
    depth: int,
    fn: ScalarFunction,
    towards_right: Callable[[float, float], bool],
) -> float:
    y_left = fn(left)
    y_right = fn(right)

    while depth > 0 and (right - left) > _MIN_FRAME:
        middle = (left + right) / 2.0
        y_middle = fn(middle)
        if towards_right(y_left, y_right):
            left, y_left = middle, y_middle
        else:
            right, y_right = middle, y_middle
        depth -= 1

    return right if towards_right(y_left, y_right) else left
