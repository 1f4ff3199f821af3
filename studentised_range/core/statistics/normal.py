"""studentised_range.core.statistics.normal

Standard normal probabilities (no SciPy).

Implemented:
- Lower, upper and central probabilities via stdlib ``math.erf``/``math.erfc``
- Normal density
- Probability of an interval, switching formulas by tail region

The central probability P(0 < Z <= u) is computed from ``erf`` directly rather
than as ``Phi(u) - 0.5`` so that it keeps full relative precision near u = 0.
Upper probabilities come from ``erfc`` so that they keep precision far in the
right tail.
"""

from __future__ import annotations

import math
from enum import Enum

_SQRT2 = math.sqrt(2.0)
_INV_SQRT_2PI = 0.398942280401432677939946059934381868  # 1/sqrt(2*pi)

# Beyond this many standard deviations both ends of an interval are taken
# from the same tail.
TAIL_BORDER = 3.7


class NormalTail(Enum):
    """Which probability of the standard normal distribution to return."""
    LOWER = "lower"      # P(Z <= u)
    UPPER = "upper"      # P(Z > u)
    CENTRAL = "central"  # P(0 < Z <= u)

    @classmethod
    def from_string(cls, s: str) -> "NormalTail":
        """Create NormalTail from string (case-insensitive)."""
        s_lower = s.lower().strip()
        for tail in cls:
            if tail.value == s_lower:
                return tail
        raise ValueError(f"Unknown normal tail: {s}")


def normal_p(u: float, tail: NormalTail = NormalTail.LOWER) -> float:
    """Standard normal probability.

    Args:
        u: standardized value
        tail: LOWER for P(Z <= u), UPPER for P(Z > u),
            CENTRAL for P(0 < Z <= u) (negative when u < 0)

    Returns:
        the requested probability
    """
    if isinstance(tail, str):
        tail = NormalTail.from_string(tail)

    if tail is NormalTail.CENTRAL:
        return 0.5 * math.erf(u / _SQRT2)
    if tail is NormalTail.UPPER:
        return 0.5 * math.erfc(u / _SQRT2)
    return 0.5 * math.erfc(-u / _SQRT2)


def normal_pdf(u: float) -> float:
    """Standard normal density."""
    return _INV_SQRT_2PI * math.exp(-0.5 * u * u)


def normal_interval_p(a: float, b: float) -> float:
    """Probability P(a < Z <= b) of the standard normal distribution.

    When the whole interval lies beyond ``TAIL_BORDER`` on one side, the
    difference is taken between tail probabilities of that side; otherwise
    central probabilities are used.

    Returns:
        probability in [0, 1]; 0.0 when a >= b
    """
    if a >= b:
        return 0.0

    if a > TAIL_BORDER:
        return normal_p(a, NormalTail.UPPER) - normal_p(b, NormalTail.UPPER)
    if b < -TAIL_BORDER:
        return normal_p(b, NormalTail.LOWER) - normal_p(a, NormalTail.LOWER)
    return normal_p(b, NormalTail.CENTRAL) - normal_p(a, NormalTail.CENTRAL)
