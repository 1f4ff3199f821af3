"""
Quantile result classes for the Studentised maximum range distribution.

This module defines the output of the quantile search: the quantile itself,
the parameters it was computed for and the convergence diagnostics.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional

# Returned as the quantile for p >= 1.
INFINITE_QUANTILE = 1.0e+99


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
    return value


@dataclass
class QuantileResult:
    """
    Result of a Studentised maximum range quantile computation.

    Attributes:
        quantile: Quantile value (1e+99 signals an effectively infinite quantile)
        probability: Target lower probability p
        k: Number of treatments in each range
        df: Error degrees of freedom (df <= 0 means infinity)
        nrng: Number of independent ranges
        iterations: Number of probability evaluations performed
        converged: True if both tolerances were met before the iteration cap
        method: "direct", "interpolated" (1/df interpolation) or
            "boundary" (p <= 0 or p >= 1)
        xeps: Quantile precision used
        peps: Probability precision used
        messages: Warnings or informational messages
    """

    quantile: float
    probability: float
    k: int
    df: int
    nrng: int = 1
    iterations: int = 0
    converged: bool = True
    method: str = "direct"
    xeps: Optional[float] = None
    peps: Optional[float] = None
    messages: List[str] = field(default_factory=list)

    @property
    def infinite_df(self) -> bool:
        """True when the error variance is known (df <= 0)."""
        return self.df <= 0

    @property
    def is_sentinel(self) -> bool:
        """True when the quantile is the 'effectively infinite' sentinel."""
        return self.quantile >= INFINITE_QUANTILE

    def summary(self) -> str:
        """One-line human readable summary."""
        df_text = "inf" if self.infinite_df else str(self.df)
        status = "converged" if self.converged else "NOT converged"
        return (
            f"q(p={self.probability:g}; k={self.k}, df={df_text}, nrng={self.nrng}) = "
            f"{self.quantile:.6f} [{self.method}, {self.iterations} evaluations, {status}]"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize quantile result to dictionary."""
        return {
            "quantile": _json_safe_value(self.quantile),
            "probability": self.probability,
            "k": self.k,
            "df": self.df,
            "nrng": self.nrng,
            "iterations": self.iterations,
            "converged": self.converged,
            "method": self.method,
            "xeps": _json_safe_value(self.xeps),
            "peps": _json_safe_value(self.peps),
            "messages": list(self.messages),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QuantileResult':
        """Create QuantileResult from dictionary."""
        quantile = data.get("quantile")
        return cls(
            quantile=INFINITE_QUANTILE if quantile is None else quantile,
            probability=data["probability"],
            k=data["k"],
            df=data["df"],
            nrng=data.get("nrng", 1),
            iterations=data.get("iterations", 0),
            converged=data.get("converged", True),
            method=data.get("method", "direct"),
            xeps=data.get("xeps"),
            peps=data.get("peps"),
            messages=list(data.get("messages", [])),
        )
