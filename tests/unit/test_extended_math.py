"""
sunmoon Unit Tests - Extended Math

Unit tests for services/ephemeris/extended_math.py.

Run:
    pytest tests/unit/test_extended_math.py -v
"""

import math
from datetime import datetime, timezone

import pytest

from services.ephemeris import extended_math, scalars
from services.ephemeris import vector as vector_module
from services.ephemeris.extended_math import (
    apparent_refraction,
    dms,
    equatorial_to_ecliptical,
    equatorial_to_horizontal,
    frac,
    is_zero,
    parallax,
    readjust_max,
    readjust_min,
    refraction,
)
from services.ephemeris.julian_date import JulianDate
from services.ephemeris.matrix import Matrix
from services.ephemeris.vector import Vector

ERROR = 0.001


class TestFrac:
    """Unit tests for the signed fractional part."""

    @pytest.mark.parametrize("value,expected", [
        (1.0, 0.0),
        (0.5, 0.5),
        (123.25, 0.25),
        (0.0, 0.0),
        (-1.0, 0.0),
        (-0.5, -0.5),
        (-123.25, -0.25),
    ])
    def test_frac(self, value, expected):
        """Test that the fraction keeps the sign of the value."""
        assert frac(value) == pytest.approx(expected, abs=ERROR)


class TestIsZero:
    """Unit tests for the zero check."""

    @pytest.mark.parametrize("value", [0.0, -0.0, 1e-12, -1e-12])
    def test_zero(self, value):
        assert is_zero(value)

    @pytest.mark.parametrize("value", [
        1.0, 0.0001, -0.0001, -1.0,
        math.nan, -math.nan, math.inf, -math.inf,
    ])
    def test_not_zero(self, value):
        """Test that non-zero, NaN and infinite values are not zero."""
        assert not is_zero(value)


class TestDms:
    """Unit tests for degrees/minutes/seconds conversion."""

    def test_valid_values(self):
        """Test regular sexagesimal values."""
        assert dms(0, 0, 0.0) == 0.0
        assert dms(13, 27, 4.32) == pytest.approx(13.4512)
        assert dms(-88, 39, 8.28) == pytest.approx(-88.6523)

    def test_sign_only_from_degrees(self):
        """Test that signs of minutes and seconds are ignored."""
        assert dms(14, -14, 2.4) == pytest.approx(14.234)
        assert dms(66, 12, -46.8) == pytest.approx(66.213)

    def test_out_of_range_values_are_summed(self):
        """Test that overflowing minutes and seconds carry over."""
        assert dms(0, 0, 72.0) == pytest.approx(0.02)       # 0°  1' 12.0"
        assert dms(1, 80, 132.0) == pytest.approx(2.37)     # 2° 22' 12.0"


class TestCorrections:
    """Unit tests for refraction and parallax."""

    def test_refraction_at_horizon(self):
        """Test refraction at the horizon is roughly half a degree."""
        assert math.degrees(refraction(0.0)) == pytest.approx(0.48, abs=0.02)
        assert math.degrees(apparent_refraction(0.0)) == pytest.approx(0.575, abs=0.02)

    def test_refraction_decreases_with_altitude(self):
        """Test refraction gets smaller towards the zenith."""
        low = refraction(math.radians(5.0))
        high = refraction(math.radians(45.0))
        assert low > high > 0.0
        assert math.degrees(high) * 60 == pytest.approx(1.0, abs=0.1)

    def test_refraction_below_horizon(self):
        """Test that negative altitudes have no refraction."""
        assert refraction(-0.1) == 0.0
        assert apparent_refraction(-0.1) == 0.0

    def test_parallax_of_moon(self):
        """Test the horizontal parallax of the moon at sea level."""
        p = parallax(0.0, 384400.0)
        assert math.degrees(p) == pytest.approx(0.95, abs=0.01)

    def test_parallax_includes_horizon_dip(self):
        """Test that the observer height lowers the parallax."""
        assert parallax(1000.0, 384400.0) < parallax(0.0, 384400.0)


class TestFrameTransforms:
    """Unit tests for the coordinate frame transformations."""

    def test_obliquity_at_j2000(self):
        """Test the ecliptic rotation uses the obliquity of the epoch."""
        from datetime import datetime, timezone

        jd = JulianDate(datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc))
        mx = equatorial_to_ecliptical(jd)
        eps = math.radians(23.43929111)
        assert mx == Matrix.rotate_x(eps)

    def test_zenith(self):
        """Test an object on the meridian at the observer's latitude."""
        lat = math.radians(50.0)
        horizontal = equatorial_to_horizontal(0.0, lat, 1.0, lat)
        assert horizontal.theta == pytest.approx(math.pi / 2.0, abs=1e-9)

    def test_celestial_equator_on_meridian(self):
        """Test altitude of the celestial equator at the meridian."""
        lat = math.radians(50.0)
        horizontal = equatorial_to_horizontal(0.0, 0.0, 1.0, lat)
        assert math.degrees(horizontal.theta) == pytest.approx(40.0)
        assert horizontal.r == pytest.approx(1.0)


class TestReadjust:
    """Unit tests for the extremum refinement."""

    def test_readjust_max(self):
        """Test refining a maximum from a coarse estimate."""
        result = readjust_max(3.0, 2.0, 14, lambda x: -(x - 3.4) ** 2)
        assert result == pytest.approx(3.4, abs=0.001)

    def test_readjust_min(self):
        """Test refining a minimum from a coarse estimate."""
        result = readjust_min(10.0, 2.0, 14, lambda x: (x - 9.1) ** 2 + 5.0)
        assert result == pytest.approx(9.1, abs=0.001)

    def test_depth_limits_precision(self):
        """Test that zero depth returns an interval end."""
        result = readjust_max(0.0, 2.0, 0, lambda x: -x * x)
        assert result in (-2.0, 2.0)

    def test_constants(self):
        """Test module constants."""
        assert extended_math.TAU == pytest.approx(2 * math.pi)
        assert extended_math.ARCS == pytest.approx(206264.806, abs=0.001)


class TestSharedScalars:
    """The scalar helpers are shared with the vector module."""

    def test_same_objects(self):
        """Test extended_math hands out the scalar helpers of the shared module."""
        assert extended_math.TAU is scalars.TAU
        assert extended_math.ARCS is scalars.ARCS
        assert extended_math.frac is scalars.frac
        assert extended_math.is_zero is scalars.is_zero

    def test_exports(self):
        for name in ("TAU", "ARCS", "ZERO_EPSILON", "frac", "is_zero", "refraction", "readjust_max"):
            assert name in extended_math.__all__

    def test_module_level_imports(self):
        """Test the frame rotations use the imported Matrix and Vector types."""
        assert extended_math.Matrix is Matrix
        assert extended_math.Vector is Vector
        jd = JulianDate(datetime(2017, 8, 10, tzinfo=timezone.utc))
        assert isinstance(equatorial_to_ecliptical(jd), Matrix)

    def test_vector_uses_shared_zero_check(self):
        """Test Vector treats tiny coordinates as zero when computing phi."""
        assert Vector(1e-12, 1e-12, 1.0).phi == 0.0
        assert vector_module.is_zero is scalars.is_zero
