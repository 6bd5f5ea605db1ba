"""
sunmoon Moon Model

Low-precision position of the moon, using the principal periodic terms of
its ecliptic longitude, latitude and distance.
"""

import math

from services.ephemeris.extended_math import (
    ARCS,
    TAU,
    equatorial_to_ecliptical,
    equatorial_to_horizontal,
    frac,
)
from services.ephemeris.julian_date import JulianDate
from services.ephemeris.vector import Vector
from sunmoon.types import Kilometers, Radians

# Mean radius of the moon, in kilometers
MOON_MEAN_RADIUS = 1737.1


def position_equatorial(date: JulianDate) -> Vector:
    """Position of the moon in the ecliptic frame.

    Args:
        date: JulianDate to be used

    Returns:
        Vector with ecliptic longitude as phi, ecliptic latitude as theta and
        the distance in km as r
    """
    t = date.julian_century
    l0 = frac(0.606433 + 1336.855225 * t)
    l = TAU * frac(0.374897 + 1325.552410 * t)
    ls = TAU * frac(0.993133 + 99.997361 * t)
    d = TAU * frac(0.827361 + 1236.853086 * t)
    f = TAU * frac(0.259086 + 1342.227825 * t)
    d2 = 2.0 * d
    l2 = 2.0 * l
    f2 = 2.0 * f

    dl = (
        22640.0 * math.sin(l)
        - 4586.0 * math.sin(l - d2)
        + 2370.0 * math.sin(d2)
        + 769.0 * math.sin(l2)
        - 668.0 * math.sin(ls)
        - 412.0 * math.sin(f2)
        - 212.0 * math.sin(l2 - d2)
        - 206.0 * math.sin(l + ls - d2)
        + 192.0 * math.sin(l + d2)
        - 165.0 * math.sin(ls - d2)
        - 125.0 * math.sin(d)
        - 110.0 * math.sin(l + ls)
        + 148.0 * math.sin(l - ls)
        - 55.0 * math.sin(f2 - d2)
    )

    s = f + (dl + 412.0 * math.sin(f2) + 541.0 * math.sin(ls)) / ARCS
    h = f - d2
    n = (
        -526.0 * math.sin(h)
        + 44.0 * math.sin(l + h)
        - 31.0 * math.sin(-l + h)
        - 23.0 * math.sin(ls + h)
        + 11.0 * math.sin(-ls + h)
        - 25.0 * math.sin(-l2 + f)
        + 21.0 * math.sin(-l + f)
    )

    l_moon = TAU * frac(l0 + dl / 1296.0e3)
    b_moon = (18520.0 * math.sin(s) + n) / ARCS

    dt = (
        385000.5584
        - 20905.3550 * math.cos(l)
        - 3699.1109 * math.cos(d2 - l)
        - 2955.9676 * math.cos(d2)
        - 569.9251 * math.cos(l2)
    )

    return Vector.of_polar(l_moon, b_moon, dt)


def position(date: JulianDate) -> Vector:
    """Geocentric position of the moon in the equatorial frame."""
    rotate_matrix = equatorial_to_ecliptical(date).transpose()
    return rotate_matrix.multiply(position_equatorial(date))


def position_horizontal(date: JulianDate, lat: Radians, lng: Radians) -> Vector:
    """Horizontal position of the moon.

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
    """Angular radius of the moon at the given distance, in radians."""
    return math.asin(MOON_MEAN_RADIUS / distance)
