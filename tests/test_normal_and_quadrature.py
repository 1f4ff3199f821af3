"""Tests for the standard normal helpers and the Gauss-Legendre rules."""

import math
from statistics import NormalDist

import numpy as np
import pytest

from studentised_range.core.statistics.normal import (
    NormalTail,
    TAIL_BORDER,
    normal_interval_p,
    normal_p,
    normal_pdf,
)
from studentised_range.core.statistics.quadrature import (
    GAUSS_LEGENDRE_20,
    GAUSS_LEGENDRE_40,
    GaussLegendreRule,
)


# ---------------------------------------------------------------------------
# Normal probabilities
# ---------------------------------------------------------------------------

class TestNormalProbability:
    """Lower, upper and central probabilities."""

    @pytest.mark.parametrize("u", [-5.0, -1.96, -0.3, 0.0, 0.7, 1.96, 4.2])
    def test_lower_matches_stdlib(self, u):
        assert normal_p(u, NormalTail.LOWER) == pytest.approx(NormalDist().cdf(u), abs=1e-15)

    @pytest.mark.parametrize("u", [-2.0, 0.0, 0.5, 3.0, 8.0])
    def test_lower_plus_upper_is_one(self, u):
        total = normal_p(u, NormalTail.LOWER) + normal_p(u, NormalTail.UPPER)
        assert total == pytest.approx(1.0, abs=1e-15)

    def test_upper_keeps_precision_in_far_tail(self):
        # P(Z > 10) = 7.619853024160527e-24
        assert normal_p(10.0, NormalTail.UPPER) == pytest.approx(7.619853024160527e-24, rel=1e-12)

    def test_central_is_odd_and_relative_to_zero(self):
        assert normal_p(0.0, NormalTail.CENTRAL) == 0.0
        assert normal_p(1.0, NormalTail.CENTRAL) == pytest.approx(-normal_p(-1.0, NormalTail.CENTRAL))
        assert normal_p(1.0, NormalTail.CENTRAL) == pytest.approx(NormalDist().cdf(1.0) - 0.5, abs=1e-15)

    def test_central_near_zero_has_relative_precision(self):
        u = 1e-10
        assert normal_p(u, NormalTail.CENTRAL) == pytest.approx(u / math.sqrt(2.0 * math.pi), rel=1e-12)

    def test_default_tail_is_lower(self):
        assert normal_p(1.0) == normal_p(1.0, NormalTail.LOWER)

    def test_tail_from_string(self):
        assert NormalTail.from_string(" Upper ") is NormalTail.UPPER
        assert normal_p(1.0, "central") == normal_p(1.0, NormalTail.CENTRAL)
        with pytest.raises(ValueError):
            NormalTail.from_string("both")

    def test_pdf_at_zero(self):
        assert normal_pdf(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi))


class TestNormalInterval:
    """Interval probabilities in the three regions."""

    def test_empty_interval(self):
        assert normal_interval_p(1.0, 1.0) == 0.0
        assert normal_interval_p(2.0, 1.0) == 0.0

    def test_interval_spanning_origin(self):
        expected = NormalDist().cdf(1.5) - NormalDist().cdf(-0.5)
        assert normal_interval_p(-0.5, 1.5) == pytest.approx(expected, abs=1e-15)

    def test_right_tail_interval(self):
        a, b = TAIL_BORDER + 2.0, TAIL_BORDER + 3.0
        expected = 0.5 * math.erfc(a / math.sqrt(2.0)) - 0.5 * math.erfc(b / math.sqrt(2.0))
        assert normal_interval_p(a, b) == pytest.approx(expected, rel=1e-13)
        assert normal_interval_p(a, b) > 0.0

    def test_left_tail_mirrors_right_tail(self):
        assert normal_interval_p(-9.0, -8.0) == pytest.approx(normal_interval_p(8.0, 9.0), rel=1e-13)


# ---------------------------------------------------------------------------
# Quadrature
# ---------------------------------------------------------------------------

class TestGaussLegendreRules:
    """Tabulated rules and the integrate() helper."""

    @pytest.mark.parametrize("rule, order", [(GAUSS_LEGENDRE_20, 20), (GAUSS_LEGENDRE_40, 40)])
    def test_rule_invariants(self, rule, order):
        assert rule.order == order
        assert np.all(np.diff(rule.nodes) > 0.0)
        assert np.all((rule.nodes > 0.0) & (rule.nodes < 1.0))
        assert np.all(rule.weights > 0.0)
        # half of the total weight 2 on [-1, 1]
        assert float(np.sum(rule.weights)) == pytest.approx(1.0, abs=1e-15)

    @pytest.mark.parametrize("rule", [GAUSS_LEGENDRE_20, GAUSS_LEGENDRE_40])
    def test_exact_for_high_degree_polynomial(self, rule):
        degree = rule.order - 1
        value = rule.integrate(lambda x: x ** (degree - 1), 0.0, 1.0)
        assert value == pytest.approx(1.0 / degree, rel=1e-13)

    def test_integrates_exponential_on_shifted_interval(self):
        value = GAUSS_LEGENDRE_20.integrate(math.exp, 1.0, 3.0)
        assert value == pytest.approx(math.exp(3.0) - math.exp(1.0), rel=1e-14)

    def test_from_pairs_sorts_nodes(self):
        rule = GaussLegendreRule.from_pairs([0.7745966692414834, 0.0001], [0.5555555555555556, 0.4])
        assert list(rule.nodes) == [0.0001, 0.7745966692414834]
        assert list(rule.weights) == [0.4, 0.5555555555555556]

    def test_invalid_rules_are_rejected(self):
        with pytest.raises(ValueError):
            GaussLegendreRule.from_pairs([0.5, 1.2], [0.5, 0.5])
        with pytest.raises(ValueError):
            GaussLegendreRule.from_pairs([0.3, 0.6], [0.5, -0.1])
        with pytest.raises(ValueError):
            GaussLegendreRule.from_pairs([0.3, 0.3], [0.5, 0.5])
        with pytest.raises(ValueError):
            GaussLegendreRule(nodes=np.array([0.5]), weights=np.array([0.5, 0.5]))
