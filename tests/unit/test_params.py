"""
sunmoon Unit Tests - Computation Parameters

Unit tests for sunmoon/params.py.
Tests Location validation, the time helpers and calculation window limits.

Run:
    pytest tests/unit/test_params.py -v
"""

import math
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from sunmoon.exceptions import ConfigurationError, RangeError
from sunmoon.params import (
    FULL_CYCLE,
    ONE_DAY,
    Location,
    at_midnight,
    check_limit,
    ensure_aware,
    in_timezone,
    julian_date,
    limit_hours,
    on_date,
    plus_days,
    resolve_timezone,
    today,
    tomorrow,
)

BERLIN = ZoneInfo("Europe/Berlin")


# =============================================================================
# Test Location
# =============================================================================

class TestLocation:
    """Unit tests for the Location record."""

    def test_defaults(self):
        """Test the default location is on the equator at sea level."""
        location = Location()
        assert location.latitude == 0.0
        assert location.longitude == 0.0
        assert location.height == 0.0

    @pytest.mark.parametrize("latitude", [-90.0, 0.0, 90.0])
    def test_latitude_bounds_accepted(self, latitude):
        """Test that the latitude bounds are inclusive."""
        assert Location(latitude, 0.0).latitude == latitude

    @pytest.mark.parametrize("latitude", [-90.1, 90.1])
    def test_latitude_out_of_range(self, latitude):
        """Test that latitudes beyond the poles are rejected."""
        with pytest.raises(RangeError) as exc_info:
            Location(latitude, 0.0)
        assert "Latitude out of range" in str(exc_info.value)
        assert exc_info.value.parameter == "latitude"

    @pytest.mark.parametrize("longitude", [-180.1, 180.1])
    def test_longitude_out_of_range(self, longitude):
        """Test that longitudes beyond the date line are rejected."""
        with pytest.raises(RangeError) as exc_info:
            Location(0.0, longitude)
        assert "Longitude out of range" in str(exc_info.value)

    def test_range_error_is_value_error(self):
        """Test that callers catching ValueError also catch range errors."""
        with pytest.raises(ValueError):
            Location(100.0, 0.0)

    def test_negative_height_clamped(self):
        """Test that heights below sea level are clamped to zero."""
        assert Location(50.0, 7.0, -10.0).height == 0.0

    def test_radians(self):
        """Test the radian accessors."""
        location = Location(45.0, -90.0)
        assert location.latitude_rad == pytest.approx(math.pi / 4)
        assert location.longitude_rad == pytest.approx(-math.pi / 2)

    def test_of_two_values(self):
        """Test creating a location from latitude and longitude."""
        location = Location.of([50.938056, 6.956944])
        assert location == Location(50.938056, 6.956944, 0.0)

    def test_of_three_values(self):
        """Test creating a location with a height."""
        location = Location.of((50.0, 7.0, 100.0))
        assert location.height == 100.0

    @pytest.mark.parametrize("values", [[], [1.0], [1.0, 2.0, 3.0, 4.0]])
    def test_of_wrong_length(self, values):
        """Test that only 2 or 3 values are accepted."""
        with pytest.raises(RangeError) as exc_info:
            Location.of(values)
        assert "2 or 3" in str(exc_info.value)

    def test_from_dms(self):
        """Test creating a location from sexagesimal coordinates."""
        location = Location.from_dms((51, 28, 38.0), (0, 0, 5.0))
        assert location.latitude == pytest.approx(51.477222, abs=1e-6)
        assert location.longitude == pytest.approx(0.001389, abs=1e-6)

    def test_from_dms_negative(self):
        """Test that a negative degree value makes the whole angle negative."""
        location = Location.from_dms((-33, 52, 0.0), (151, 12, 36.0))
        assert location.latitude == pytest.approx(-33.866667, abs=1e-6)

    def test_with_height_ft(self):
        """Test that heights in feet are converted to meters."""
        location = Location(50.0, 7.0).with_height_ft(1000.0)
        assert location.height == pytest.approx(304.8)
        assert location.latitude == 50.0

    def test_immutable(self):
        """Test that locations cannot be modified."""
        location = Location(50.0, 7.0)
        with pytest.raises(AttributeError):
            location.latitude = 10.0


# =============================================================================
# Test Time Helpers
# =============================================================================

class TestTimeHelpers:
    """Unit tests for the datetime helper functions."""

    def test_ensure_aware_naive_is_utc(self):
        """Test that naive datetimes are taken as UTC."""
        dt = ensure_aware(datetime(2017, 8, 10, 12, 0))
        assert dt.tzinfo == timezone.utc

    def test_ensure_aware_keeps_zone(self):
        """Test that aware datetimes are passed through."""
        dt = datetime(2017, 8, 10, 12, 0, tzinfo=BERLIN)
        assert ensure_aware(dt) is dt

    def test_resolve_timezone(self):
        """Test resolving zone names."""
        assert resolve_timezone("UTC") is timezone.utc
        assert resolve_timezone("Europe/Berlin") == BERLIN
        assert resolve_timezone(timezone.utc) is timezone.utc

    def test_in_timezone_keeps_wall_clock(self):
        """Test that the wall clock time is kept when changing the zone."""
        dt = in_timezone(datetime(2017, 8, 10, 12, 0), "Europe/Berlin")
        assert dt.hour == 12
        assert dt.utcoffset() == timedelta(hours=2)

    def test_at_midnight(self):
        """Test truncating to the start of the local day."""
        dt = at_midnight(datetime(2017, 8, 10, 17, 45, 12, tzinfo=BERLIN))
        assert dt == datetime(2017, 8, 10, 0, 0, tzinfo=BERLIN)

    def test_plus_days_across_dst(self):
        """Test that adding days keeps the wall clock time across DST."""
        start = datetime(2017, 3, 25, 12, 0, tzinfo=BERLIN)
        later = plus_days(start, 1)
        assert later.hour == 12
        assert later.utcoffset() == timedelta(hours=2)
        elapsed = later.astimezone(timezone.utc) - start.astimezone(timezone.utc)
        assert elapsed == timedelta(hours=23)

    def test_on_date(self):
        """Test building midnight of a calendar date."""
        dt = on_date(date(2017, 8, 10), "Europe/Berlin")
        assert dt.isoformat() == "2017-08-10T00:00:00+02:00"

    def test_today_and_tomorrow(self):
        """Test that tomorrow is one calendar day after today."""
        start = today("UTC")
        assert start.hour == 0 and start.minute == 0
        assert tomorrow("UTC") - start == ONE_DAY

    def test_julian_date_of_naive(self):
        """Test that julian_date accepts naive datetimes as UTC."""
        jd = julian_date(datetime(2000, 1, 1, 12, 0))
        assert jd.julian_century == pytest.approx(0.0, abs=1e-12)


# =============================================================================
# Test Calculation Window
# =============================================================================

class TestCalculationWindow:
    """Unit tests for the calculation window helpers."""

    def test_check_limit_accepts_zero(self):
        """Test that an empty window is allowed."""
        assert check_limit(timedelta(0)) == timedelta(0)

    def test_check_limit_rejects_negative(self):
        """Test that negative windows are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            check_limit(timedelta(days=-1))
        assert "duration must be positive" in str(exc_info.value)
        assert exc_info.value.config_key == "limit"

    def test_limit_hours(self):
        """Test converting windows to hours."""
        assert limit_hours(ONE_DAY) == 24.0
        assert limit_hours(FULL_CYCLE) == 365 * 24.0
        assert limit_hours(timedelta(minutes=90)) == 1.5
