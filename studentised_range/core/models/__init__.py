"""
Configuration models for the quantile search.
"""

from .options import QuantileOptions, MAX_REFINEMENT_ITERATIONS

__all__ = [
    "QuantileOptions",
    "MAX_REFINEMENT_ITERATIONS",
]
