"""
sunmoon Horizon Crossings

Bookkeeping shared by the hourly rise/set scans of the sun and the moon.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from services.ephemeris.julian_date import JulianDate
from services.numeric.quadratic_interpolation import QuadraticInterpolation


@dataclass
class HorizonCrossings:
    """Rise and set hours collected while scanning a height function.

    Hours are relative to the start of the scan. Only the first rise and
    the first set inside ``[0, limit_hours)`` are kept.
    """
    limit_hours: float
    rise: Optional[float] = None
    set: Optional[float] = None
    always_up: bool = False
    always_down: bool = False

    @classmethod
    def starting_at(cls, y_0: float, limit_hours: float) -> "HorizonCrossings":
        """Start a scan, with the body above or below the threshold at hour 0."""
        return cls(limit_hours, always_up=y_0 > 0.0, always_down=not y_0 > 0.0)

    @property
    def complete(self) -> bool:
        return self.rise is not None and self.set is not None

    def _in_window(self, hour: float) -> bool:
        return 0.0 <= hour < self.limit_hours

    def _found_rise(self, hour: float) -> None:
        if self.rise is None and self._in_window(hour):
            self.rise = hour
            self.always_down = False

    def _found_set(self, hour: float) -> None:
        if self.set is None and self._in_window(hour):
            self.set = hour
            self.always_up = False

    def update(self, qi: QuadraticInterpolation, hour: int, y_minus: float) -> None:
        """Record the crossings of the parabola centered on ``hour``.

        A single root is a rise if the previous sample was below the
        threshold, otherwise a set. With two roots, the sign of the extremum
        tells which one is the rise.
        """
        if qi.number_of_roots == 1:
            rt = qi.root1 + hour
            if y_minus < 0.0:
                self._found_rise(rt)
            else:
                self._found_set(rt)
        elif qi.number_of_roots == 2:
            below = qi.ye < 0.0
            if self.rise is None:
                self._found_rise(hour + (qi.root2 if below else qi.root1))
            if self.set is None:
                self._found_set(hour + (qi.root1 if below else qi.root2))


def at_hour(jd: JulianDate, hour: Optional[float]) -> Optional[datetime]:
    """Date and time ``hour`` hours after ``jd``, or None."""
    if hour is None:
        return None
    return jd.at_hour(hour).date_time


def format_time(dt: Optional[datetime]) -> str:
    return dt.isoformat() if dt is not None else "None"
