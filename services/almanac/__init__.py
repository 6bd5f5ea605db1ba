"""
sunmoon Almanac Service

Sun and moon events and positions for an observer: rise, set, noon and
nadir times, moon phases, positions and illumination.
"""

from services.almanac.moon_illumination import MoonIllumination, compute_moon_illumination
from services.almanac.moon_phase import MoonPhase, Phase, compute_moon_phase
from services.almanac.moon_position import MoonPosition, compute_moon_position
from services.almanac.moon_times import MoonTimes, compute_moon_times
from services.almanac.service import AlmanacService, TwilightPhase, get_service
from services.almanac.sun_position import SunPosition, compute_sun_position
from services.almanac.sun_times import SunTimes, Twilight, compute_sun_times

__all__ = [
    "AlmanacService",
    "MoonIllumination",
    "MoonPhase",
    "MoonPosition",
    "MoonTimes",
    "Phase",
    "SunPosition",
    "SunTimes",
    "Twilight",
    "TwilightPhase",
    "compute_moon_illumination",
    "compute_moon_phase",
    "compute_moon_position",
    "compute_moon_times",
    "compute_sun_position",
    "compute_sun_times",
    "get_service",
]
