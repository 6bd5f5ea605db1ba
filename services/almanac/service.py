"""
sunmoon Almanac Service

Location-bound facade over the sun and moon computations:
- Sun and moon positions
- Rise/set/noon/nadir times
- Moon phases and illumination
- Twilight phase of the current sky

All calculations are closed-form, no ephemeris data files are needed.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import Optional, Union

from services.almanac.moon_illumination import MoonIllumination, compute_moon_illumination
from services.almanac.moon_phase import MoonPhase, Phase, compute_moon_phase
from services.almanac.moon_position import MoonPosition, compute_moon_position
from services.almanac.moon_times import MoonTimes, compute_moon_times
from services.almanac.sun_position import SunPosition, compute_sun_position
from services.almanac.sun_times import SunTimes, Twilight, compute_sun_times
from sunmoon.logging_config import get_logger
from sunmoon.params import FULL_CYCLE, Location, at_midnight, ensure_aware, resolve_timezone

logger = get_logger(__name__)


class TwilightPhase(Enum):
    """Twilight phases."""
    DAY = "day"                      # Sun > 0°
    CIVIL = "civil"                  # Sun -6° to 0°
    NAUTICAL = "nautical"            # Sun -12° to -6°
    ASTRONOMICAL = "astronomical"    # Sun -18° to -12°
    NIGHT = "night"                  # Sun < -18°


class AlmanacService:
    """
    Sun and moon almanac for one observer.

    Methods accept an optional ``when``. If it is omitted, the current time
    in the service's time zone is used. Naive datetimes are taken as UTC.
    """

    def __init__(
        self,
        location: Optional[Location] = None,
        tz: Union[str, tzinfo] = timezone.utc,
    ):
        """
        Initialize almanac service.

        Args:
            location: Observer location (defaults to 0°N 0°E at sea level)
            tz: Time zone for default times and day boundaries
        """
        self.location = location or Location()
        self.timezone = resolve_timezone(tz)

    def _get_time(self, when: Optional[datetime] = None) -> datetime:
        if when is None:
            return datetime.now(self.timezone)
        return ensure_aware(when)

    # -------------------------------------------------------------------------
    # Positions
    # -------------------------------------------------------------------------

    def sun_position(self, when: Optional[datetime] = None) -> SunPosition:
        return compute_sun_position(self.location, self._get_time(when))

    def moon_position(self, when: Optional[datetime] = None) -> MoonPosition:
        return compute_moon_position(self.location, self._get_time(when))

    def moon_illumination(self, when: Optional[datetime] = None) -> MoonIllumination:
        return compute_moon_illumination(self._get_time(when))

    def get_sun_altitude(self, when: Optional[datetime] = None) -> float:
        """Get true sun altitude in degrees."""
        return self.sun_position(when).true_altitude

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def sun_times(
        self,
        when: Optional[datetime] = None,
        twilight: Union[Twilight, float] = Twilight.VISUAL,
        limit: timedelta = FULL_CYCLE,
    ) -> SunTimes:
        """
        Get sun rise, set, noon and nadir.

        Args:
            when: Start of the search (defaults to midnight today)
            twilight: Twilight preset or sun angle in degrees
            limit: Length of the calculation window

        Returns:
            SunTimes
        """
        start = self._get_time(when) if when is not None else at_midnight(self._get_time())
        return compute_sun_times(self.location, start, twilight, limit)

    def moon_times(
        self,
        when: Optional[datetime] = None,
        limit: timedelta = FULL_CYCLE,
    ) -> MoonTimes:
        """Get moonrise and moonset, searching from midnight today by default."""
        start = self._get_time(when) if when is not None else at_midnight(self._get_time())
        return compute_moon_times(self.location, start, limit)

    def moon_phase(
        self,
        when: Optional[datetime] = None,
        phase: Union[Phase, float] = Phase.NEW_MOON,
    ) -> MoonPhase:
        """Get the next time the moon reaches ``phase``."""
        return compute_moon_phase(self._get_time(when), phase)

    # -------------------------------------------------------------------------
    # Sky Conditions
    # -------------------------------------------------------------------------

    def get_moon_phase(self, when: Optional[datetime] = None) -> float:
        """
        Get moon phase as illumination fraction.

        Returns:
            Float from 0.0 (new) to 1.0 (full)
        """
        return self.moon_illumination(when).fraction

    def get_twilight_phase(self, when: Optional[datetime] = None) -> TwilightPhase:
        """
        Determine current twilight phase.

        Returns:
            TwilightPhase enum value
        """
        sun_alt = self.get_sun_altitude(when)

        if sun_alt > 0:
            return TwilightPhase.DAY
        elif sun_alt > -6:
            return TwilightPhase.CIVIL
        elif sun_alt > -12:
            return TwilightPhase.NAUTICAL
        elif sun_alt > -18:
            return TwilightPhase.ASTRONOMICAL
        else:
            return TwilightPhase.NIGHT

    def is_astronomical_night(self, when: Optional[datetime] = None) -> bool:
        """Check if it's astronomical night (sun < -18°)."""
        return self.get_twilight_phase(when) == TwilightPhase.NIGHT

    def format_summary(self, when: Optional[datetime] = None) -> str:
        """Format a short sun and moon report for display."""
        now = self._get_time(when)
        sun = self.sun_position(now)
        moon = self.moon_position(now)
        illumination = self.moon_illumination(now)

        lines = [
            f"Location: {self.location.latitude:.4f}°, {self.location.longitude:.4f}°",
            f"Time: {now.isoformat()}",
            f"Twilight: {self.get_twilight_phase(now).value}",
            f"Sun: alt {sun.altitude:+.1f}°, az {sun.azimuth:.1f}° ({sun.compass_direction})",
            f"Moon: alt {moon.altitude:+.1f}°, az {moon.azimuth:.1f}° ({moon.compass_direction})",
            f"Moon illumination: {illumination.fraction * 100:.0f}% "
            f"({illumination.closest_phase.name.replace('_', ' ').lower()})",
        ]
        return "\n".join(lines)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_default_service: Optional[AlmanacService] = None


def get_service(location: Optional[Location] = None) -> AlmanacService:
    """Get the shared almanac service, created on first use."""
    global _default_service
    if _default_service is None:
        _default_service = AlmanacService(location)
    return _default_service


def is_dark(when: Optional[datetime] = None) -> bool:
    """Check if it's astronomical night."""
    return get_service().is_astronomical_night(when)


def sun_altitude(when: Optional[datetime] = None) -> float:
    """Get sun altitude."""
    return get_service().get_sun_altitude(when)
