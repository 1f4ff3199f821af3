"""
Studentised maximum range distribution

Lower probabilities and quantiles of the maximum of several independent
Studentised ranges, as used for critical values of Tukey-type multiple
comparison procedures.

Conventions:
- k: number of treatments in each range (k >= 2)
- df: error degrees of freedom; df <= 0 means infinity (known variance)
- nrng: number of independent ranges sharing one variance estimate
- Probabilities are lower probabilities P(X <= x)
- Quantiles for p >= 1 are reported as 1e+99
"""

__version__ = "1.0.0"

from .core.statistics import range_cdf, max_range_cdf, studentised_range_cdf
from .core.models import QuantileOptions
from .core.results import QuantileResult
from .core.solver import (
    max_range_quantile,
    solve_quantile,
    critical_value,
    interpolated_quantile,
)

__all__ = [
    # Version
    "__version__",

    # Probabilities
    "range_cdf",
    "max_range_cdf",
    "studentised_range_cdf",

    # Options / results
    "QuantileOptions",
    "QuantileResult",

    # Quantiles
    "max_range_quantile",
    "solve_quantile",
    "critical_value",
    "interpolated_quantile",
]
