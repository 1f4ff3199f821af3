"""Quantiles of the Studentised maximum range distribution.

The lower quantile is found by inverting ``max_range_cdf`` with a hybrid
search:

1. Bracketing: x2 = 2, 4, 8, ... until P(x2) >= p.
2. Refinement (at most 200 iterations), keeping a bracket x1 < x2 with
   y1 < p <= y2 plus the most recently discarded endpoint (x3, y3):
   - odd iterations, or a bracket whose probability span is below the
     numerical noise of the evaluator: bisection
   - even iterations: root of the quadratic through the three points
     (Muller's method), falling back to bisection when the quadratic is
     degenerate or its root leaves the bracket
3. A trial point is accepted when the bracket is narrower than ``xeps`` and
   its probability is within ``peps`` of p.

If the cap is reached the last trial point is returned; ``solve_quantile``
reports this as ``converged=False`` instead of raising.

Reference: Muller, D. E. (1956). A method for solving algebraic equations
using an automatic computer. Mathematical Tables and Other Aids to
Computation, 10, 208-215.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..models.options import MAX_REFINEMENT_ITERATIONS, QuantileOptions
from ..results.quantile_result import INFINITE_QUANTILE, QuantileResult
from ..statistics.max_range_distribution import max_range_cdf
from ..validation.calibration import check_calibration

logger = logging.getLogger(__name__)

# Accuracy of the probability evaluator; smaller bracket spans are noise.
YEPS = 1.0e-12


@dataclass(frozen=True)
class SearchBracket:
    """Bracket [x1, x2] with y1 < p <= y2 and a history point (x3, y3).

    x3 lies outside the open bracket (x3 <= x1 or x3 >= x2).
    """

    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    def midpoint(self) -> float:
        return 0.5 * (self.x1 + self.x2)

    def interpolate(self, p: float, xeps: float) -> float:
        """Abscissa where the quadratic through the three points equals p.

        The quadratic is written around x1 as
            y = y1 + b (x - x1) + a (x - x1)^2
        and solved with the form that avoids cancellation for the sign of a.
        Falls back to the midpoint when no root lies inside [x1, x2].
        """
        x1, y1, x2, y2, x3, y3 = self.x1, self.y1, self.x2, self.y2, self.x3, self.y3

        if abs(x1 - x3) < xeps or abs(x2 - x3) < xeps:
            a = 0.0
        else:
            a = ((y3 - y1) / (x3 - x1) - (y2 - y1) / (x2 - x1)) / (x3 - x2)
        b = (y2 - y1) / (x2 - x1) - a * (x2 - x1)

        disc = b * b + 4.0 * a * (p - y1)
        if disc < 0.0:
            return self.midpoint()

        if a > 0.0:
            x = x1 + (-b + math.sqrt(disc)) / (2.0 * a)
        else:
            denom = b + math.sqrt(disc)
            if denom <= 0.0:
                return self.midpoint()
            x = x1 + 2.0 * (p - y1) / denom

        if x < x1 or x > x2:
            return self.midpoint()
        return x

    def update(self, x: float, y: float, p: float) -> "SearchBracket":
        """Replace the endpoint on the same side of p as the trial point."""
        if y >= p:
            return replace(self, x3=self.x2, y3=self.y2, x2=x, y2=y)
        return replace(self, x3=self.x1, y3=self.y1, x1=x, y1=y)


def _validate(k: int, nrng: int) -> None:
    if k < 2:
        raise ValueError("k must be at least 2")
    if nrng < 1:
        raise ValueError("nrng must be at least 1")


def _search(
    p: float,
    k: int,
    df: int,
    nrng: int,
    xeps: float,
    peps: float,
    max_iterations: int = MAX_REFINEMENT_ITERATIONS,
) -> Tuple[float, int, bool]:
    """Run the bracketing and refinement phases for 0 < p < 1.

    Returns:
        (x, number of probability evaluations, converged)
    """
    x2 = 2.0
    y2 = max_range_cdf(x2, k, df, nrng)
    itr = 1
    x1, y1 = 0.0, 0.0
    while y2 < p:
        x1, y1 = x2, y2
        x2 *= 2.0
        y2 = max_range_cdf(x2, k, df, nrng)
        itr += 1

    bracket = SearchBracket(x1=x1, y1=y1, x2=x2, y2=y2, x3=x2, y3=y2)
    logger.debug("bracket [%g, %g] after %d evaluations", x1, x2, itr)

    x = bracket.midpoint()
    for i in range(1, max_iterations + 1):
        if i % 2 == 1 or abs(bracket.y2 - bracket.y1) < YEPS:
            x = bracket.midpoint()
        else:
            x = bracket.interpolate(p, xeps)

        y = max_range_cdf(x, k, df, nrng)
        itr += 1
        if abs(bracket.width) < xeps and abs(y - p) < peps:
            logger.debug("accepted x=%.12g after %d evaluations", x, itr)
            return x, itr, True

        bracket = bracket.update(x, y, p)

    return x, itr, False


def max_range_quantile(
    p: float,
    k: int,
    df: int,
    nrng: int,
    xeps: float,
    peps: float,
) -> Tuple[float, int]:
    """Lower quantile of the Studentised maximum range distribution.

    Args:
        p: lower probability
        k: number of treatments in each range (>= 2)
        df: error degrees of freedom (df <= 0 means infinity)
        nrng: number of independent ranges (>= 1)
        xeps: absolute precision for the quantile
        peps: absolute precision for the probability

    Returns:
        (quantile, number of calls of ``max_range_cdf``); the quantile is 0.0
        for p <= 0 and 1e+99 for p >= 1
    """
    _validate(k, nrng)
    if p <= 0.0:
        return 0.0, 0
    if p >= 1.0:
        return INFINITE_QUANTILE, 0

    x, itr, _ = _search(p, k, df, nrng, xeps, peps)
    return x, itr


def solve_quantile(
    p: float,
    k: int,
    df: int,
    nrng: int = 1,
    options: Optional[QuantileOptions] = None,
) -> QuantileResult:
    """Lower quantile with convergence diagnostics.

    Args:
        p: lower probability
        k: number of treatments in each range (>= 2)
        df: error degrees of freedom (df <= 0 means infinity)
        nrng: number of independent ranges (>= 1)
        options: solver options (defaults when None)

    Returns:
        QuantileResult
    """
    _validate(k, nrng)
    options = options or QuantileOptions.default()
    peps = options.resolve_peps(p)

    result = QuantileResult(
        quantile=0.0,
        probability=p,
        k=k,
        df=df,
        nrng=nrng,
        xeps=options.xeps,
        peps=peps,
    )

    if options.check_calibration:
        report = check_calibration(k, nrng)
        for msg in report.messages:
            logger.warning(msg)
        result.messages.extend(report.messages)

    if p <= 0.0 or p >= 1.0:
        result.quantile = 0.0 if p <= 0.0 else INFINITE_QUANTILE
        result.method = "boundary"
        return result

    x, itr, converged = _search(p, k, df, nrng, options.xeps, peps, options.max_iterations)
    result.quantile = x
    result.iterations = itr
    result.converged = converged

    if not converged:
        msg = (
            f"Quantile search did not meet xeps={options.xeps:g} and peps={peps:g} "
            f"within {options.max_iterations} iterations; returning last trial point"
        )
        logger.warning(msg)
        result.messages.append(msg)

    return result


def critical_value(
    alpha: float,
    k: int,
    df: int,
    nrng: int = 1,
    options: Optional[QuantileOptions] = None,
) -> QuantileResult:
    """Upper alpha critical value q(alpha; k, df, nrng).

    Solves for the lower probability 1 - alpha. Unless ``options.peps`` is set
    the probability precision is alpha * xeps.
    """
    if not (0.0 < alpha < 1.0):
        raise ValueError("alpha must be in (0,1)")
    options = options or QuantileOptions.default()
    if options.peps is None:
        options = replace(options, peps=alpha * options.xeps)
    return solve_quantile(1.0 - alpha, k, df, nrng, options)


def interpolated_quantile(
    p: float,
    k: int,
    df: int,
    nrng: int = 1,
    options: Optional[QuantileOptions] = None,
) -> QuantileResult:
    """Lower quantile with linear interpolation in 1/df for large df.

    For df above ``options.interpolation_df`` (d0) the quantile is
        q = (q(d0) - q(inf)) * d0 / df + q(inf)
    Otherwise this is the same as ``solve_quantile``.
    """
    options = options or QuantileOptions.default()
    d0 = options.interpolation_df
    if df <= 0 or df <= d0 or p <= 0.0 or p >= 1.0:
        return solve_quantile(p, k, df, nrng, options)

    q_inf = solve_quantile(p, k, 0, nrng, options)
    q_d0 = solve_quantile(p, k, d0, nrng, options)

    quantile = (q_d0.quantile - q_inf.quantile) * (d0 / df) + q_inf.quantile
    messages = list(q_inf.messages)
    messages.extend(m for m in q_d0.messages if m not in messages)

    return QuantileResult(
        quantile=quantile,
        probability=p,
        k=k,
        df=df,
        nrng=nrng,
        iterations=q_inf.iterations + q_d0.iterations,
        converged=q_inf.converged and q_d0.converged,
        method="interpolated",
        xeps=q_inf.xeps,
        peps=q_inf.peps,
        messages=messages,
    )
