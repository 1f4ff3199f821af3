"""Probability evaluators for the Studentised maximum range.

This package contains the numerical layers of the distribution:
- Standard normal probabilities (stdlib ``math``)
- Fixed Gauss-Legendre quadrature rules
- Range distribution of k normal variates (Hartley's formula)
- Studentised maximum range distribution

No SciPy dependency is required.
"""

from .normal import NormalTail, normal_p, normal_pdf, normal_interval_p
from .quadrature import GaussLegendreRule, GAUSS_LEGENDRE_20, GAUSS_LEGENDRE_40
from .range_distribution import range_cdf, range_upper_limit
from .max_range_distribution import max_range_cdf, studentised_range_cdf

__all__ = [
    "NormalTail",
    "normal_p",
    "normal_pdf",
    "normal_interval_p",
    "GaussLegendreRule",
    "GAUSS_LEGENDRE_20",
    "GAUSS_LEGENDRE_40",
    "range_cdf",
    "range_upper_limit",
    "max_range_cdf",
    "studentised_range_cdf",
]
