"""
sunmoon Moon Position

Apparent horizontal position of the moon, and its parallactic angle.
"""

import math
from dataclasses import dataclass
from datetime import datetime

from services.almanac.sun_position import HorizontalPosition, north_based_azimuth
from services.ephemeris import moon
from services.ephemeris.extended_math import equatorial_to_horizontal, refraction
from sunmoon.params import Location, julian_date
from sunmoon.types import Degrees


@dataclass(frozen=True)
class MoonPosition(HorizontalPosition):
    """Position of the moon.

    Attributes:
        parallactic_angle: Angle between the zenith and the celestial pole,
            as seen at the moon, in degrees
    """
    parallactic_angle: Degrees = 0.0

    def __str__(self) -> str:
        return (
            f"MoonPosition[azimuth={self.azimuth}°, altitude={self.altitude}°, "
            f"true altitude={self.true_altitude}°, distance={self.distance} km, "
            f"parallactic angle={self.parallactic_angle}°]"
        )


def compute_moon_position(location: Location, when: datetime) -> MoonPosition:
    """
    Compute the position of the moon.

    Args:
        location: Observer location
        when: Date and time (naive means UTC)

    Returns:
        MoonPosition with north-based azimuth and refraction-corrected altitude
    """
    t = julian_date(when)
    phi = location.latitude_rad
    mc = moon.position(t)
    h = t.greenwich_mean_sidereal_time + location.longitude_rad - mc.phi
    horizontal = equatorial_to_horizontal(h, mc.theta, mc.r, phi)
    h_ref = refraction(horizontal.theta)
    pa = math.atan2(
        math.sin(h),
        math.tan(phi) * math.cos(mc.theta) - math.sin(mc.theta) * math.cos(h),
    )

    return MoonPosition(
        azimuth=north_based_azimuth(horizontal.phi),
        altitude=math.degrees(horizontal.theta + h_ref),
        true_altitude=math.degrees(horizontal.theta),
        distance=mc.r,
        parallactic_angle=math.degrees(pa),
    )
