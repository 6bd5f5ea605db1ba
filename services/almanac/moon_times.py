"""
sunmoon Moon Times

Moonrise and moonset for a location. Uses the same hourly scan as the sun
times, without noon and nadir.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from services.almanac.crossings import HorizonCrossings, at_hour, format_time
from services.ephemeris import extended_math, moon
from services.ephemeris.julian_date import JulianDate
from services.numeric.quadratic_interpolation import QuadraticInterpolation
from sunmoon.logging_config import get_logger
from sunmoon.params import FULL_CYCLE, Location, check_limit, julian_date, limit_hours
from sunmoon.types import Radians

logger = get_logger(__name__)

# Refraction at the horizon
HORIZON_REFRACTION = extended_math.apparent_refraction(0.0)


@dataclass(frozen=True)
class MoonTimes:
    """Result of a moon times computation.

    Attributes:
        rise: Moonrise, or None if the moon does not rise in the window
        set: Moonset, or None if the moon does not set in the window
        is_always_up: Moon stays above the horizon for the whole window
        is_always_down: Moon stays below the horizon for the whole window
    """
    rise: Optional[datetime]
    set: Optional[datetime]
    is_always_up: bool = False
    is_always_down: bool = False

    def __str__(self) -> str:
        return (
            f"MoonTimes[rise={format_time(self.rise)}, set={format_time(self.set)}, "
            f"alwaysUp={self.is_always_up}, alwaysDown={self.is_always_down}]"
        )


def corrected_moon_height(jd: JulianDate, location: Location) -> Radians:
    """Height of the moon's upper limb above the visible horizon, in radians."""
    pos = moon.position_horizontal(jd, location.latitude_rad, location.longitude_rad)
    hc = (
        extended_math.parallax(location.height, pos.r)
        - HORIZON_REFRACTION
        - moon.angular_radius(pos.r)
    )
    return pos.theta - hc


def compute_moon_times(
    location: Location,
    when: datetime,
    limit: timedelta = FULL_CYCLE,
) -> MoonTimes:
    """
    Compute moonrise and moonset.

    Args:
        location: Observer location
        when: Start of the calculation window (naive means UTC)
        limit: Length of the calculation window

    Returns:
        MoonTimes, with all times in the time zone of ``when``

    Raises:
        ConfigurationError: If limit is negative
    """
    check_limit(limit)
    jd = julian_date(when)

    def height(hour: float) -> float:
        return corrected_moon_height(jd.at_hour(hour), location)

    hours_limit = limit_hours(limit)
    max_hours = math.ceil(hours_limit)

    hour = 0
    y_minus = height(hour - 1.0)
    y_0 = height(hour)
    y_plus = height(hour + 1.0)

    crossings = HorizonCrossings.starting_at(y_0, hours_limit)

    while hour <= max_hours:
        qi = QuadraticInterpolation(y_minus, y_0, y_plus)
        crossings.update(qi, hour, y_minus)

        if crossings.complete:
            break

        hour += 1
        y_minus = y_0
        y_0 = y_plus
        y_plus = height(hour + 1.0)

    logger.debug(
        "Moon times scan stopped at hour %d of %d (rise=%s, set=%s)",
        hour, max_hours, crossings.rise, crossings.set,
    )

    return MoonTimes(
        rise=at_hour(jd, crossings.rise),
        set=at_hour(jd, crossings.set),
        is_always_up=crossings.always_up,
        is_always_down=crossings.always_down,
    )
