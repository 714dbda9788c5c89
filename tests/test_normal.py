"""Tests for the error function approximation and the normal CDF."""

import math

import pytest

from weather_quant.engine import erf, normal_cdf


class TestErf:
    """Abramowitz & Stegun approximation against math.erf."""

    @pytest.mark.parametrize("x", [i / 10 for i in range(-40, 41)])
    def test_matches_math_erf(self, x):
        assert erf(x) == pytest.approx(math.erf(x), abs=2e-7)

    def test_odd_function(self):
        for x in (0.1, 0.7, 1.3, 2.9):
            assert erf(-x) == pytest.approx(-erf(x))

    def test_saturates(self):
        assert erf(10) == 1.0
        assert erf(-10) == -1.0


class TestNormalCdf:
    """Tests for normal_cdf."""

    def test_median(self):
        assert normal_cdf(70, 70, 2) == pytest.approx(0.5, abs=1e-7)

    def test_one_sigma(self):
        assert normal_cdf(72, 70, 2) == pytest.approx(0.8413, abs=1e-4)

    def test_infinite_bounds(self):
        assert normal_cdf(math.inf, 70, 2) == 1.0
        assert normal_cdf(-math.inf, 70, 2) == 0.0

    def test_zero_std_dev_is_step(self):
        assert normal_cdf(69.9, 70, 0) == 0.0
        assert normal_cdf(70, 70, 0) == 1.0

    def test_monotonic(self):
        values = [normal_cdf(x / 2, 70, 1.5) for x in range(120, 160)]
        assert values == sorted(values)
