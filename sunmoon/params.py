"""
sunmoon Computation Parameters

Plain immutable records passed into the almanac computations, replacing a
fluent parameter builder:

- ``Location``: validated observer position
- Time helpers working on timezone-aware datetimes
- Calculation window limits

Usage:
    from sunmoon.params import Location, at_midnight, ONE_DAY

    cologne = Location(50.938056, 6.956944)
    start = at_midnight(datetime(2017, 8, 10, tzinfo=ZoneInfo("Europe/Berlin")))
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Sequence, Union
from zoneinfo import ZoneInfo

from services.ephemeris.extended_math import dms
from services.ephemeris.julian_date import JulianDate
from sunmoon.exceptions import ConfigurationError, RangeError
from sunmoon.logging_config import get_logger
from sunmoon.types import Degrees, DegreesMinutesSeconds, Meters, Radians

logger = get_logger(__name__)

FEET_TO_METERS = 0.3048

# Calculation window presets
ONE_DAY = timedelta(days=1)
FULL_CYCLE = timedelta(days=365)


# =============================================================================
# Location
# =============================================================================

@dataclass(frozen=True)
class Location:
    """Geographic location of the observer.

    Attributes:
        latitude: Latitude in decimal degrees, north positive (-90 to +90)
        longitude: Longitude in decimal degrees, east positive (-180 to +180)
        height: Height above sea level in meters. Negative values are
                clamped to 0.

    Raises:
        RangeError: If latitude or longitude are out of range
    """
    latitude: Degrees = 0.0
    longitude: Degrees = 0.0
    height: Meters = 0.0

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise RangeError(
                f"Latitude out of range, -90.0 <= {self.latitude} <= 90.0",
                parameter="latitude",
                value=self.latitude,
            )
        if not -180.0 <= self.longitude <= 180.0:
            raise RangeError(
                f"Longitude out of range, -180.0 <= {self.longitude} <= 180.0",
                parameter="longitude",
                value=self.longitude,
            )
        object.__setattr__(self, "height", max(float(self.height), 0.0))

    @property
    def latitude_rad(self) -> Radians:
        return math.radians(self.latitude)

    @property
    def longitude_rad(self) -> Radians:
        return math.radians(self.longitude)

    @classmethod
    def of(cls, coordinates: Sequence[float]) -> "Location":
        """Create a location from ``[lat, lng]`` or ``[lat, lng, height]``.

        Raises:
            RangeError: If the sequence does not contain 2 or 3 values
        """
        if len(coordinates) not in (2, 3):
            raise RangeError(
                "Array must contain 2 or 3 doubles",
                parameter="coordinates",
                value=len(coordinates),
            )
        height = coordinates[2] if len(coordinates) == 3 else 0.0
        return cls(float(coordinates[0]), float(coordinates[1]), float(height))

    @classmethod
    def from_dms(
        cls,
        latitude: DegreesMinutesSeconds,
        longitude: DegreesMinutesSeconds,
        height: Meters = 0.0,
    ) -> "Location":
        """Create a location from sexagesimal latitude and longitude."""
        return cls(dms(*latitude), dms(*longitude), height)

    def with_height(self, height: Meters) -> "Location":
        return Location(self.latitude, self.longitude, height)

    def with_height_ft(self, feet: float) -> "Location":
        """Copy of this location with the height given in feet."""
        return self.with_height(feet * FEET_TO_METERS)


# =============================================================================
# Time Helpers
# =============================================================================

def ensure_aware(dt: datetime) -> datetime:
    """Return ``dt`` with a time zone. Naive datetimes are taken as UTC."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        logger.debug("Naive datetime %s, assuming UTC", dt)
        return dt.replace(tzinfo=timezone.utc)
    return dt


def resolve_timezone(tz: Union[str, tzinfo]) -> tzinfo:
    """Resolve an IANA zone name (or pass through a tzinfo)."""
    if isinstance(tz, str):
        if tz.upper() == "UTC":
            return timezone.utc
        return ZoneInfo(tz)
    return tz


def in_timezone(dt: datetime, tz: Union[str, tzinfo]) -> datetime:
    """Keep the wall clock time of ``dt``, but in the given time zone."""
    return ensure_aware(dt).replace(tzinfo=resolve_timezone(tz))


def at_midnight(dt: datetime) -> datetime:
    """Start of the local day of ``dt``, in the same time zone."""
    dt = ensure_aware(dt)
    return datetime.combine(dt.date(), time(0, 0), tzinfo=dt.tzinfo)


def plus_days(dt: datetime, days: int) -> datetime:
    """Same local wall clock time, ``days`` calendar days later."""
    dt = ensure_aware(dt)
    shifted = dt.replace(tzinfo=None) + timedelta(days=days)
    return shifted.replace(tzinfo=dt.tzinfo)


def on_date(day: date, tz: Union[str, tzinfo] = timezone.utc) -> datetime:
    """Midnight of the given calendar date in the given time zone."""
    return datetime.combine(day, time(0, 0), tzinfo=resolve_timezone(tz))


def today(tz: Optional[Union[str, tzinfo]] = None) -> datetime:
    """Midnight of the current day."""
    zone = resolve_timezone(tz) if tz is not None else timezone.utc
    return at_midnight(datetime.now(zone))


def tomorrow(tz: Optional[Union[str, tzinfo]] = None) -> datetime:
    """Midnight of the next day."""
    return plus_days(today(tz), 1)


def julian_date(dt: datetime) -> JulianDate:
    """JulianDate of ``dt``. Naive datetimes are taken as UTC."""
    return JulianDate(ensure_aware(dt))


# =============================================================================
# Calculation Window
# =============================================================================

def check_limit(limit: timedelta) -> timedelta:
    """Validate a calculation window.

    Raises:
        ConfigurationError: If the duration is negative
    """
    if limit < timedelta(0):
        raise ConfigurationError("duration must be positive", config_key="limit")
    return limit


def limit_hours(limit: timedelta) -> float:
    """Length of the calculation window in hours, at millisecond resolution."""
    millis = limit // timedelta(milliseconds=1)
    return millis / (60 * 60 * 1000.0)
