"""studentised_range.core.solver

Quantile search for the Studentised maximum range distribution.
"""

from .quantile import (
    SearchBracket,
    max_range_quantile,
    solve_quantile,
    critical_value,
    interpolated_quantile,
)

__all__ = [
    "SearchBracket",
    "max_range_quantile",
    "solve_quantile",
    "critical_value",
    "interpolated_quantile",
]
