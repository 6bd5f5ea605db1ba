"""
sunmoon Julian Date

Wraps a timezone-aware datetime and derives the astronomical time scales
used by the ephemeris models: Modified Julian Date, Julian centuries since
J2000.0, Greenwich Mean Sidereal Time and a simple approximation of the
earth's true anomaly.
"""

import math
from datetime import datetime, timedelta, timezone

from services.ephemeris.scalars import TAU, frac
from sunmoon.types import Days, Hours, JulianCenturies, Radians

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Modified Julian Date of the Unix epoch
MJD_UNIX_EPOCH = 40587.0

# Modified Julian Date of J2000.0
MJD_J2000 = 51544.5

DAYS_PER_CENTURY = 36525.0
MILLIS_PER_DAY = 86400000.0
SECONDS_PER_DAY = 86400.0


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class JulianDate:
    """A point in time, expressed in astronomical time scales.

    Instances are immutable. ``at_hour``, ``at_modified_julian_date`` and
    ``at_julian_century`` return new instances in the same time zone.

    Args:
        date_time: Timezone-aware datetime
    """

    __slots__ = ("_date_time", "_mjd")

    def __init__(self, date_time: datetime) -> None:
        if date_time.tzinfo is None or date_time.utcoffset() is None:
            raise ValueError("date_time must be timezone aware")
        delta = date_time - UNIX_EPOCH
        millis = (delta.days * 86400 + delta.seconds) * 1000 + delta.microseconds // 1000
        self._date_time = date_time
        self._mjd = millis / MILLIS_PER_DAY + MJD_UNIX_EPOCH

    @property
    def date_time(self) -> datetime:
        return self._date_time

    @property
    def modified_julian_date(self) -> Days:
        """Modified Julian Date, UTC."""
        return self._mjd

    @property
    def julian_century(self) -> JulianCenturies:
        """Julian centuries since the J2000.0 epoch, UTC."""
        return (self._mjd - MJD_J2000) / DAYS_PER_CENTURY

    @property
    def greenwich_mean_sidereal_time(self) -> Radians:
        """Greenwich Mean Sidereal Time, in radians [0, 2π)."""
        mjd0 = math.floor(self._mjd)
        ut = (self._mjd - mjd0) * SECONDS_PER_DAY
        t0 = (mjd0 - MJD_J2000) / DAYS_PER_CENTURY
        t = (self._mjd - MJD_J2000) / DAYS_PER_CENTURY

        gmst = (
            24110.54841
            + 8640184.812866 * t0
            + 1.0027379093 * ut
            + (0.093104 - 6.2e-6 * t) * t * t
        )
        return (TAU / SECONDS_PER_DAY) * math.fmod(gmst, SECONDS_PER_DAY)

    @property
    def true_anomaly(self) -> Radians:
        """Earth's true anomaly, using a linear approximation by day of year."""
        day_of_year = self._date_time.timetuple().tm_yday
        return TAU * frac((day_of_year - 5.0) / 365.256363)

    def at_hour(self, hour: Hours) -> "JulianDate":
        """Julian date of the given number of hours after this date.

        Fractions of hours are rounded to full seconds.
        """
        seconds = _round_half_up(hour * 60.0 * 60.0)
        utc = self._date_time.astimezone(timezone.utc) + timedelta(seconds=seconds)
        return JulianDate(utc.astimezone(self._date_time.tzinfo))

    def at_modified_julian_date(self, mjd: Days) -> "JulianDate":
        """Julian date of the given Modified Julian Date, in this time zone."""
        millis = _round_half_up((mjd - MJD_UNIX_EPOCH) * MILLIS_PER_DAY)
        utc = UNIX_EPOCH + timedelta(milliseconds=millis)
        return JulianDate(utc.astimezone(self._date_time.tzinfo))

    def at_julian_century(self, jc: JulianCenturies) -> "JulianDate":
        """Julian date of the given Julian century, in this time zone."""
        return self.at_modified_julian_date(jc * DAYS_PER_CENTURY + MJD_J2000)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JulianDate):
            return NotImplemented
        return self._date_time == other._date_time

    def __hash__(self) -> int:
        return hash(self._date_time)

    def __repr__(self) -> str:
        return f"JulianDate({self._date_time.isoformat()})"

    def __str__(self) -> str:
        mjd = self._mjd
        return "%dd %02dh %02dm %02ds" % (
            int(mjd),
            int(math.fmod(mjd * 24, 24)),
            int(math.fmod(mjd * 24 * 60, 60)),
            int(math.fmod(mjd * 24 * 60 * 60, 60)),
        )
