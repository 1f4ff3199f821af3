"""
Core module for the Studentised maximum range distribution.

This module contains pure Python implementations of the probability
evaluators and the quantile search. All functions are stateless and may be
called concurrently.
"""

from .statistics import (
    NormalTail,
    normal_p,
    normal_interval_p,
    range_cdf,
    max_range_cdf,
    studentised_range_cdf,
)

from .models import QuantileOptions

from .results import QuantileResult, INFINITE_QUANTILE

from .solver import (
    max_range_quantile,
    solve_quantile,
    critical_value,
    interpolated_quantile,
)

from .validation import CalibrationReport, check_calibration

__all__ = [
    # Probabilities
    "NormalTail",
    "normal_p",
    "normal_interval_p",
    "range_cdf",
    "max_range_cdf",
    "studentised_range_cdf",

    # Options
    "QuantileOptions",

    # Results
    "QuantileResult",
    "INFINITE_QUANTILE",

    # Solvers
    "max_range_quantile",
    "solve_quantile",
    "critical_value",
    "interpolated_quantile",

    # Validation
    "CalibrationReport",
    "check_calibration",
]
