"""
Solver options for Studentised maximum range quantiles.

This module defines the configuration of the quantile search: convergence
tolerances, the iteration cap and the large-df interpolation point.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

# Hard cap on refinement iterations of the quantile search.
MAX_REFINEMENT_ITERATIONS = 200


@dataclass
class QuantileOptions:
    """
    Configuration options for the quantile search.

    Attributes:
        xeps: Absolute precision for the quantile (default: 1e-8)
        peps: Absolute precision for the probability; None derives it from
            the target probability p as min(p, 1-p) * xeps (default: None)
        max_iterations: Maximum refinement iterations, at most 200 (default: 200)
        interpolation_df: Degrees of freedom above which
            ``interpolated_quantile`` interpolates in 1/df (default: 240)
        check_calibration: Whether to report k and nrng outside the
            calibrated range in the result messages (default: True)
    """

    xeps: float = 1e-8
    peps: Optional[float] = None
    max_iterations: int = MAX_REFINEMENT_ITERATIONS
    interpolation_df: int = 240
    check_calibration: bool = True

    def __post_init__(self):
        """Validate options after initialization."""
        if self.xeps <= 0:
            raise ValueError("xeps must be positive")

        if self.peps is not None and self.peps <= 0:
            raise ValueError("peps must be positive")

        if not 1 <= self.max_iterations <= MAX_REFINEMENT_ITERATIONS:
            raise ValueError(
                f"max_iterations must be between 1 and {MAX_REFINEMENT_ITERATIONS}"
            )

        if self.interpolation_df <= 0:
            raise ValueError("interpolation_df must be positive")

    def resolve_peps(self, p: float) -> float:
        """
        Probability precision to use for target probability p.

        Returns:
            ``peps`` if set, else min(p, 1-p) * xeps
        """
        if self.peps is not None:
            return self.peps
        tail = min(p, 1.0 - p)
        if tail <= 0.0:
            return self.xeps
        return tail * self.xeps

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "xeps": self.xeps,
            "peps": self.peps,
            "max_iterations": self.max_iterations,
            "interpolation_df": self.interpolation_df,
            "check_calibration": self.check_calibration,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QuantileOptions':
        """
        Create QuantileOptions from a dictionary.

        Args:
            data: Dictionary with option values

        Returns:
            New QuantileOptions instance
        """
        return cls(
            xeps=data.get("xeps", 1e-8),
            peps=data.get("peps"),
            max_iterations=data.get("max_iterations", MAX_REFINEMENT_ITERATIONS),
            interpolation_df=data.get("interpolation_df", 240),
            check_calibration=data.get("check_calibration", True),
        )

    @classmethod
    def default(cls) -> 'QuantileOptions':
        """
        Create options with default values.

        Returns:
            QuantileOptions with default settings
        """
        return cls()

    @classmethod
    def high_precision(cls) -> 'QuantileOptions':
        """
        Create options for quantiles close to the accuracy of the
        probability evaluators.

        Returns:
            QuantileOptions configured for high precision work
        """
        return cls(xeps=1e-9)

    def __repr__(self) -> str:
        return (
            f"QuantileOptions("
            f"xeps={self.xeps}, "
            f"peps={self.peps}, "
            f"max_iter={self.max_iterations})"
        )
