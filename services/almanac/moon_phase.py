"""
sunmoon Moon Phase

Finds the next time the moon reaches a given phase, by stepping forward one
week at a time until the sun/moon longitude difference crosses the target
angle, then refining the crossing with the Pegasus root finder.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Union

from services.ephemeris import moon, sun
from services.ephemeris.extended_math import TAU
from services.ephemeris.julian_date import JulianDate
from services.numeric import pegasus
from sunmoon.logging_config import get_logger
from sunmoon.params import julian_date
from sunmoon.types import Degrees, JulianCenturies, Kilometers, Radians

logger = get_logger(__name__)

# Search step, one week
STEP = 7.0 / 36525.0

# Search accuracy, 30 seconds
ACCURACY = 0.5 / 1440.0 / 36525.0

# Light travel time from the sun, in Julian centuries
SUN_LIGHT_TIME_TAU = 8.32 / (1440.0 * 36525.0)

SUPER_MOON_DISTANCE = 360000.0
MICRO_MOON_DISTANCE = 405000.0


class Phase(Enum):
    """Moon phases, by the angle between sun and moon longitude in degrees."""
    NEW_MOON = 0.0
    WAXING_CRESCENT = 45.0
    FIRST_QUARTER = 90.0
    WAXING_GIBBOUS = 135.0
    FULL_MOON = 180.0
    WANING_GIBBOUS = 225.0
    LAST_QUARTER = 270.0
    WANING_CRESCENT = 315.0

    @property
    def angle(self) -> Degrees:
        return self.value

    @property
    def angle_rad(self) -> Radians:
        return math.radians(self.value)

    @classmethod
    def to_phase(cls, angle: Degrees) -> "Phase":
        """
        Closest phase to the given angle.

        Each phase covers 45 degrees, centered on its own angle.

        Args:
            angle: Phase angle in degrees, any range

        Returns:
            Phase nearest to the angle
        """
        normalized = math.fmod(angle, 360.0)
        if normalized < 0.0:
            normalized += 360.0

        for phase in cls:
            if normalized < phase.angle + 22.5:
                return phase
        return cls.NEW_MOON


@dataclass(frozen=True)
class MoonPhase:
    """Result of a moon phase search.

    Attributes:
        time: Date and time of the phase, in the time zone of the query
        distance: Distance of the moon at that time, in kilometers
    """
    time: datetime
    distance: Kilometers

    @property
    def is_super_moon(self) -> bool:
        """Moon is closer than 360,000 km."""
        return self.distance < SUPER_MOON_DISTANCE

    @property
    def is_micro_moon(self) -> bool:
        """Moon is farther than 405,000 km."""
        return self.distance > MICRO_MOON_DISTANCE

    def __str__(self) -> str:
        return f"MoonPhase[time={self.time.isoformat()}, distance={self.distance} km]"


def moon_phase_difference(jd: JulianDate, t: JulianCenturies, phase: Radians) -> Radians:
    """Difference between the moon's phase angle and ``phase``, in (-π, π]."""
    sun_pos = sun.position_equatorial(jd.at_julian_century(t - SUN_LIGHT_TIME_TAU))
    moon_pos = moon.position_equatorial(jd.at_julian_century(t))
    diff = moon_pos.phi - sun_pos.phi - phase
    while diff < 0.0:
        diff += TAU
    return math.fmod(diff + math.pi, TAU) - math.pi


def compute_moon_phase(
    when: datetime,
    phase: Union[Phase, float] = Phase.NEW_MOON,
) -> MoonPhase:
    """
    Compute the next time the moon reaches a phase.

    Args:
        when: Start of the search (naive means UTC)
        phase: Phase preset, or phase angle in degrees

    Returns:
        MoonPhase, with the time in the time zone of ``when``

    Raises:
        NoRootFoundError: If the crossing cannot be refined
    """
    jd = julian_date(when)
    phase_rad = phase.angle_rad if isinstance(phase, Phase) else math.radians(float(phase))

    def f(t: float) -> float:
        return moon_phase_difference(jd, t, phase_rad)

    t0 = jd.julian_century
    t1 = t0 + STEP
    d0 = f(t0)
    d1 = f(t1)

    weeks = 1
    while d0 * d1 > 0.0 or d1 < d0:
        t0 = t1
        d0 = d1
        t1 += STEP
        d1 = f(t1)
        weeks += 1

    logger.debug("Moon phase bracketed after %d weeks", weeks)

    tphase = pegasus.calculate(t0, t1, ACCURACY, f)
    tjd = jd.at_julian_century(tphase)
    return MoonPhase(tjd.date_time, moon.position_equatorial(tjd).r)
