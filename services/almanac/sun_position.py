"""
sunmoon Sun Position

Apparent horizontal position of the sun for a location and time.
"""

import math
from dataclasses import dataclass
from datetime import datetime

from services.ephemeris import sun
from services.ephemeris.extended_math import equatorial_to_horizontal, refraction
from sunmoon.params import Location, julian_date
from sunmoon.types import Degrees, Kilometers, Radians

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]


def north_based_azimuth(phi: Radians) -> Degrees:
    """Convert a south-based azimuth in radians to north-based degrees [0, 360)."""
    return (math.degrees(phi) + 180.0) % 360.0


@dataclass(frozen=True)
class HorizontalPosition:
    """Altitude/Azimuth position of a body."""
    azimuth: Degrees         # Degrees from North (0-360)
    altitude: Degrees        # Apparent altitude, refraction applied
    true_altitude: Degrees   # Geometric altitude
    distance: Kilometers

    @property
    def is_visible(self) -> bool:
        """Check if the body is above the horizon."""
        return self.altitude > 0

    @property
    def compass_direction(self) -> str:
        """Get compass direction string."""
        index = round(self.azimuth / 22.5) % 16
        return COMPASS_POINTS[index]


@dataclass(frozen=True)
class SunPosition(HorizontalPosition):
    """Position of the sun."""

    def __str__(self) -> str:
        return (
            f"SunPosition[azimuth={self.azimuth}°, altitude={self.altitude}°, "
            f"true altitude={self.true_altitude}°, distance={self.distance} km]"
        )


def compute_sun_position(location: Location, when: datetime) -> SunPosition:
    """
    Compute the position of the sun.

    Args:
        location: Observer location
        when: Date and time (naive means UTC)

    Returns:
        SunPosition with north-based azimuth and refraction-corrected altitude
    """
    t = julian_date(when)
    lw = math.radians(-location.longitude)
    c = sun.position(t)
    h = t.greenwich_mean_sidereal_time - lw - c.phi
    horizontal = equatorial_to_horizontal(h, c.theta, c.r, location.latitude_rad)
    h_ref = refraction(horizontal.theta)

    return SunPosition(
        azimuth=north_based_azimuth(horizontal.phi),
        altitude=math.degrees(horizontal.theta + h_ref),
        true_altitude=math.degrees(horizontal.theta),
        distance=horizontal.r,
    )
