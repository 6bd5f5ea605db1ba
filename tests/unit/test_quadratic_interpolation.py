"""
sunmoon Unit Tests - Quadratic Interpolation

Unit tests for services/numeric/quadratic_interpolation.py.

Run:
    pytest tests/unit/test_quadratic_interpolation.py -v
"""

import math

import pytest

from services.numeric.quadratic_interpolation import QuadraticInterpolation

ERROR = 0.001


class TestQuadraticInterpolation:
    """Unit tests for QuadraticInterpolation."""

    def test_two_roots_and_minimum(self):
        qi = QuadraticInterpolation(1.0, -1.0, 1.0)
        assert qi.number_of_roots == 2
        assert qi.root1 == pytest.approx(-0.707, abs=ERROR)
        assert qi.root2 == pytest.approx(0.707, abs=ERROR)
        assert qi.xe == pytest.approx(0.0, abs=ERROR)
        assert qi.ye == pytest.approx(-1.0, abs=ERROR)
        assert not qi.is_maximum

    def test_two_roots_and_maximum(self):
        qi = QuadraticInterpolation(-1.0, 1.0, -1.0)
        assert qi.number_of_roots == 2
        assert qi.root1 == pytest.approx(-0.707, abs=ERROR)
        assert qi.root2 == pytest.approx(0.707, abs=ERROR)
        assert qi.xe == pytest.approx(0.0, abs=ERROR)
        assert qi.ye == pytest.approx(1.0, abs=ERROR)
        assert qi.is_maximum

    def test_one_root(self):
        """Test a parabola with only one root inside [-1, 1]."""
        qi = QuadraticInterpolation(2.0, 0.0, -1.0)
        assert qi.number_of_roots == 1
        assert qi.root1 == pytest.approx(0.0, abs=ERROR)
        assert qi.xe == pytest.approx(1.5, abs=ERROR)
        assert qi.ye == pytest.approx(-1.125, abs=ERROR)
        assert not qi.is_maximum

    def test_root1_falls_back_to_root2(self):
        """Test that root1 gives the root in range if the first one is left of -1."""
        # y = (x + 1.2)(x - 0.8)
        qi = QuadraticInterpolation(-0.36, -0.96, 0.44)
        assert qi.number_of_roots == 1
        assert qi.root1 == pytest.approx(qi.root2)
        assert qi.root1 == pytest.approx(0.8, abs=ERROR)

    def test_no_root(self):
        """Test collinear samples, which have no roots."""
        qi = QuadraticInterpolation(3.0, 2.0, 1.0)
        assert qi.number_of_roots == 0

    def test_negative_discriminant(self):
        """Test a parabola that does not cross zero at all."""
        qi = QuadraticInterpolation(3.0, 2.0, 3.0)
        assert qi.number_of_roots == 0
        assert math.isnan(qi.root2)
        assert qi.xe == pytest.approx(0.0, abs=ERROR)
        assert qi.ye == pytest.approx(2.0, abs=ERROR)
