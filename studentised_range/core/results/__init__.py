"""
Result data structures for quantile computations.
"""

from .quantile_result import QuantileResult, INFINITE_QUANTILE

__all__ = [
    "QuantileResult",
    "INFINITE_QUANTILE",
]
