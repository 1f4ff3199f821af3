"""Tests for the range distribution of k standard normal variates."""

import math

import numpy as np
import pytest

from studentised_range.core.statistics.range_distribution import (
    K_CALIBRATION_MAX,
    range_cdf,
    range_upper_limit,
)


# ---------------------------------------------------------------------------
# Boundaries and closed form
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("k", [2, 3, 10, 11, 50, 1000])
def test_range_cdf_is_zero_at_and_below_zero(k):
    assert range_cdf(0.0, k) == 0.0
    assert range_cdf(-1.0, k) == 0.0


@pytest.mark.parametrize("r", list(np.linspace(0.1, 10.0, 25)))
def test_k2_matches_closed_form(r):
    # P(|Z1 - Z2| <= r) = 2 Phi(r / sqrt 2) - 1 = erf(r / 2)
    assert range_cdf(r, 2) == pytest.approx(math.erf(r / 2.0), abs=1e-12)


@pytest.mark.parametrize("k", [3, 5, 10, 20, 100])
def test_range_cdf_approaches_one(k):
    assert range_cdf(20.0, k) >= 0.999999


def test_k_below_two_is_rejected():
    with pytest.raises(ValueError):
        range_cdf(1.0, 1)


# ---------------------------------------------------------------------------
# Known percentage points (normal range, df = infinity)
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "r, k, expected",
    [
        (2.772, 2, 0.95),
        (3.314, 3, 0.95),
        (3.858, 5, 0.95),
        (4.474, 10, 0.95),
        (4.120, 3, 0.99),
    ],
)
def test_range_cdf_matches_published_points(r, k, expected):
    assert range_cdf(r, k) == pytest.approx(expected, abs=1e-3)


# ---------------------------------------------------------------------------
# Monotonicity
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("k", [2, 3, 7, 10, 11, 25, 40, 200])
def test_range_cdf_is_non_decreasing(k):
    values = [range_cdf(r, k) for r in np.linspace(0.05, 14.0, 120)]
    for lo, hi in zip(values, values[1:]):
        assert hi >= lo - 1e-12
    assert all(0.0 <= v <= 1.0 + 1e-12 for v in values)


def test_range_cdf_decreases_with_k():
    r = 3.0
    values = [range_cdf(r, k) for k in (2, 3, 5, 10, 20)]
    assert values == sorted(values, reverse=True)


# ---------------------------------------------------------------------------
# Upper integration limit
# ---------------------------------------------------------------------------

class TestUpperLimit:
    """Empirical upper limit of Hartley's integral."""

    def test_zero_below_effective_support(self):
        assert range_upper_limit(1e-12, 5) == 0.0

    @pytest.mark.parametrize("k", [3, 10, 11, 29, 30, 40, 500])
    def test_positive_and_bounded(self, k):
        ulim13 = 1.403 * math.sqrt(math.log(k) + 28.127)
        for r in (5.0, 9.0, 13.0):
            u = range_upper_limit(r, k)
            assert 0.0 < u <= ulim13 + 1e-12

    def test_k_is_capped_at_calibration_limit(self):
        assert range_upper_limit(4.0, 5000) == range_upper_limit(4.0, K_CALIBRATION_MAX)

    def test_small_k_fit_reaches_full_limit_at_large_r(self):
        k = 3
        ulim13 = 1.403 * math.sqrt(math.log(k) + 28.127)
        assert range_upper_limit(13.0, k) == pytest.approx(ulim13)


# ---------------------------------------------------------------------------
# Monte-Carlo cross-checks
# ---------------------------------------------------------------------------

def test_k2_matches_simulated_absolute_difference():
    rng = np.random.default_rng(12345)
    n = 200_000
    z = rng.standard_normal((n, 2))
    d = np.abs(z[:, 0] - z[:, 1])
    for r in (0.5, 1.5, 3.0):
        p = range_cdf(r, 2)
        p_hat = float(np.mean(d <= r))
        se = math.sqrt(p * (1.0 - p) / n)
        assert abs(p_hat - p) <= 4.0 * se


def test_k5_matches_simulated_range():
    rng = np.random.default_rng(2021)
    n = 100_000
    z = rng.standard_normal((n, 5))
    ranges = z.max(axis=1) - z.min(axis=1)
    for r in (1.5, 2.5, 4.0):
        p = range_cdf(r, 5)
        p_hat = float(np.mean(ranges <= r))
        se = math.sqrt(p * (1.0 - p) / n)
        assert abs(p_hat - p) <= 4.0 * se
