"""
Pytest Fixtures for sunmoon Testing.

Provides observer locations and time zones used across unit and
integration tests.

Usage:
    # In test files, fixtures are automatically available:
    def test_sunrise(cologne, berlin):
        times = compute_sun_times(cologne, datetime(2017, 8, 10, tzinfo=berlin))
        assert times.rise is not None
"""

import logging
from datetime import datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

import pytest

from sunmoon.params import Location


# =============================================================================
# Locations
# =============================================================================

COLOGNE = Location(50.938056, 6.956944)
ALERT = Location(82.5, -62.316667)
WELLINGTON = Location(-41.2875, 174.776111)
PUERTO_WILLIAMS = Location(-54.933333, -67.616667)
SINGAPORE = Location(1.283333, 103.833333)
MARTINIQUE = Location(14.640725, -61.0112)
SYDNEY = Location(-33.744272, 151.231291)
SANTA_MONICA = Location(34.0, -118.5)


@pytest.fixture
def cologne() -> Location:
    """Cologne, Germany."""
    return COLOGNE


@pytest.fixture
def alert() -> Location:
    """Alert, Nunavut. Polar day in summer, polar night in winter."""
    return ALERT


@pytest.fixture
def wellington() -> Location:
    """Wellington, New Zealand. Close to the date line."""
    return WELLINGTON


@pytest.fixture
def singapore() -> Location:
    """Singapore, close to the equator."""
    return SINGAPORE


@pytest.fixture
def berlin() -> ZoneInfo:
    return ZoneInfo("Europe/Berlin")


@pytest.fixture
def auckland() -> ZoneInfo:
    return ZoneInfo("Pacific/Auckland")


# =============================================================================
# Helpers
# =============================================================================

def assert_close_to(
    actual: Optional[datetime],
    expected: datetime,
    tolerance: timedelta = timedelta(minutes=2),
) -> None:
    """Assert that a computed time is within ``tolerance`` of ``expected``."""
    assert actual is not None, f"expected {expected.isoformat()}, got None"
    assert abs(actual - expected) <= tolerance, (
        f"{actual.isoformat()} is not within {tolerance} of {expected.isoformat()}"
    )


@pytest.fixture(autouse=True)
def _reset_sunmoon_logging():
    """Remove handlers installed by setup_logging after each test."""
    yield
    root_logger = logging.getLogger("sunmoon")
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.NOTSET)
