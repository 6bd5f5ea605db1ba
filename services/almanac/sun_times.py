"""
sunmoon Sun Times

Rise, set, noon and nadir of the sun for a location, found by scanning the
sun's corrected height hour by hour and fitting a parabola through each
three-sample window.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional, Union

from services.almanac.crossings import HorizonCrossings, at_hour, format_time
from services.ephemeris import extended_math, sun
from services.ephemeris.julian_date import JulianDate
from services.numeric.quadratic_interpolation import QuadraticInterpolation
from sunmoon.logging_config import get_logger
from sunmoon.params import FULL_CYCLE, Location, check_limit, julian_date, limit_hours
from sunmoon.types import Radians

logger = get_logger(__name__)

# Hours around a rough noon/nadir estimate that are searched again
READJUST_FRAME = 2.0
READJUST_DEPTH = 14


class Twilight(Enum):
    """Predefined sun angles for rise and set.

    Twilight angles are geocentric. VISUAL and VISUAL_LOWER are topocentric
    and take the observer's height, atmospheric refraction and the solar
    disc into account.

    Each member carries the sun's angle in degrees and its angular position:
    1.0 is the upper limb, -1.0 the lower limb, None means geocentric.
    """
    VISUAL = (0.0, 1.0)              # Upper limb crosses the horizon
    VISUAL_LOWER = (0.0, -1.0)       # Lower limb crosses the horizon
    HORIZON = (0.0, None)            # Center crosses the horizon
    CIVIL = (-6.0, None)
    NAUTICAL = (-12.0, None)
    ASTRONOMICAL = (-18.0, None)
    GOLDEN_HOUR = (6.0, None)
    BLUE_HOUR = (-4.0, None)
    NIGHT_HOUR = (-8.0, None)        # End of the blue hour

    def __init__(self, angle: float, position: Optional[float]):
        self.angle = angle
        self.position = position

    @property
    def angle_rad(self) -> Radians:
        return math.radians(self.angle)

    @property
    def is_topocentric(self) -> bool:
        """True if parallax and refraction are taken into account."""
        return self.position is not None


@dataclass(frozen=True)
class SunTimes:
    """Result of a sun times computation.

    Attributes:
        rise: Sunrise, or None if the sun does not rise in the window
        set: Sunset, or None if the sun does not set in the window
        noon: Time of the highest sun position
        nadir: Time of the lowest sun position
        is_always_up: Sun stays above the twilight angle for the whole window
        is_always_down: Sun stays below the twilight angle for the whole window
    """
    rise: Optional[datetime]
    set: Optional[datetime]
    noon: Optional[datetime]
    nadir: Optional[datetime]
    is_always_up: bool = False
    is_always_down: bool = False

    def __str__(self) -> str:
        return (
            f"SunTimes[rise={format_time(self.rise)}, set={format_time(self.set)}, "
            f"noon={format_time(self.noon)}, nadir={format_time(self.nadir)}, "
            f"alwaysUp={self.is_always_up}, alwaysDown={self.is_always_down}]"
        )


def _twilight_params(twilight: Union[Twilight, float]) -> tuple[Radians, Optional[float]]:
    if isinstance(twilight, Twilight):
        return twilight.angle_rad, twilight.position
    return math.radians(float(twilight)), None


def corrected_sun_height(
    jd: JulianDate,
    location: Location,
    angle: Radians,
    position: Optional[float],
) -> Radians:
    """Sun height above the twilight angle.

    For topocentric twilights the angle is corrected by refraction, parallax
    and the apparent solar radius.

    Args:
        jd: JulianDate to use
        location: Observer location
        angle: Twilight angle, in radians
        position: Angular position on the solar disc, or None

    Returns:
        Height difference, in radians
    """
    pos = sun.position_horizontal(jd, location.latitude_rad, location.longitude_rad)

    hc = angle
    if position is not None:
        hc -= extended_math.apparent_refraction(hc)
        hc += extended_math.parallax(location.height, pos.r)
        hc -= position * sun.angular_radius(pos.r)

    return pos.theta - hc


def compute_sun_times(
    location: Location,
    when: datetime,
    twilight: Union[Twilight, float] = Twilight.VISUAL,
    limit: timedelta = FULL_CYCLE,
) -> SunTimes:
    """
    Compute sun rise, set, noon and nadir.

    Events are searched in the window starting at ``when``. With the default
    full-cycle limit every event is found unless the sun is circumpolar for
    the whole year.

    Args:
        location: Observer location
        when: Start of the calculation window (naive means UTC)
        twilight: Twilight preset, or a geocentric sun angle in degrees
        limit: Length of the calculation window

    Returns:
        SunTimes, with all times in the time zone of ``when``

    Raises:
        ConfigurationError: If limit is negative
    """
    check_limit(limit)
    jd = julian_date(when)
    angle, position = _twilight_params(twilight)

    def height(hour: float) -> float:
        return corrected_sun_height(jd.at_hour(hour), location, angle, position)

    noon: Optional[float] = None
    nadir: Optional[float] = None

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

        if abs(qi.xe) <= 1.0:
            xe_hour = qi.xe + hour
            if xe_hour >= 0.0:
                if qi.is_maximum:
                    if noon is None:
                        noon = xe_hour
                elif nadir is None:
                    nadir = xe_hour

        if crossings.complete and noon is not None and nadir is not None:
            break

        hour += 1
        y_minus = y_0
        y_0 = y_plus
        y_plus = height(hour + 1.0)

    logger.debug(
        "Sun times scan stopped at hour %d of %d (rise=%s, set=%s)",
        hour, max_hours, crossings.rise, crossings.set,
    )

    if noon is not None:
        noon = extended_math.readjust_max(noon, READJUST_FRAME, READJUST_DEPTH, height)
        if noon < 0.0 or noon >= hours_limit:
            noon = None

    if nadir is not None:
        nadir = extended_math.readjust_min(nadir, READJUST_FRAME, READJUST_DEPTH, height)
        if nadir < 0.0 or nadir >= hours_limit:
            nadir = None

    return SunTimes(
        rise=at_hour(jd, crossings.rise),
        set=at_hour(jd, crossings.set),
        noon=at_hour(jd, noon),
        nadir=at_hour(jd, nadir),
        is_always_up=crossings.always_up,
        is_always_down=crossings.always_down,
    )
