"""
sunmoon Sun Model

Low-precision position of the sun, based on a short series expansion of
its ecliptic longitude. Good to about an arc-minute over several centuries
around J2000.0, which is sufficient for rise and set times.
"""

import math

from services.ephemeris.extended_math import (
    TAU,
    equatorial_to_ecliptical,
    equatorial_to_horizontal,
    frac,
)
from services.ephemeris.julian_date import JulianDate
from services.ephemeris.vector import Vector
from sunmoon.types import Kilometers, Radians

# Mean distance between earth and sun, in kilometers
SUN_DISTANCE = 149598000.0

# Mean radius of the sun, in kilometers
SUN_MEAN_RADIUS = 695700.0


def position_equatorial(date: JulianDate) -> Vector:
    """Position of the sun in the ecliptic frame.

    Args:
        date: JulianDate to be used

    Returns:
        Vector with the ecliptic longitude as phi and the distance in km as r
    """
    t = date.julian_century
    m = TAU * frac(0.993133 + 99.997361 * t)
    l = TAU * frac(
        0.7859453
        + m / TAU
        + (6893.0 * math.sin(m) + 72.0 * math.sin(2.0 * m) + 6191.2 * t) / 1296.0e3
    )
    d = SUN_DISTANCE * (1 - 0.016718 * math.cos(date.true_anomaly))
    return Vector.of_polar(l, 0.0, d)


def position(date: JulianDate) -> Vector:
    """Geocentric position of the sun in the equatorial frame.

    Args:
        date: JulianDate to be used

    Returns:
        Vector with right ascension as phi and declination as theta
    """
    rotate_matrix = equatorial_to_ecliptical(date).transpose()
    return rotate_matrix.multiply(position_equatorial(date))


def position_horizontal(date: JulianDate, lat: Radians, lng: Radians) -> Vector:
    """Horizontal position of the sun.

    Args:
        date: JulianDate to be used
        lat: Latitude, in radians
        lng: Longitude, in radians

    Returns:
        Vector with azimuth (south-based) as phi and altitude as theta
    """
    mc = position(date)
    h = date.greenwich_mean_sidereal_time + lng - mc.phi
    return equatorial_to_horizontal(h, mc.theta, mc.r, lat)


def angular_radius(distance: Kilometers) -> Radians:
    """Angular radius of the sun at the given distance, in radians."""
    return math.asin(SUN_MEAN_RADIUS / distance)
