"""
Student's t distribution.

Density, CDF, survival function and quantiles for real (generally
non-integer) degrees of freedom, as needed by Welch's test. Tail
probabilities are expressed through the regularized incomplete beta
function:

    P(T > t) = 0.5 * I_{df / (df + t^2)}(df / 2, 1 / 2),  t > 0

Quantiles are found by safeguarded Newton iteration on log P(T > t),
bracketed so that every step either improves the Newton iterate or
bisects. df = inf is the standard normal.

All functions are scalar and pure.
"""

from __future__ import annotations

import math
import sys

from statsengine.core.compute.special import betainc, betaincc
from statsengine.core.exceptions import ConvergenceError, InvalidInputError

QUANTILE_MAX_ITERATIONS = 500
_QUANTILE_RTOL = 4.0 * sys.float_info.epsilon
_SQRT2 = math.sqrt(2.0)


def _check_df(df: float) -> float:
    df = float(df)
    if math.isnan(df) or df <= 0.0:
        raise InvalidInputError(f"df must be positive, got {df}")
    return df


def _upper_tail(t: float, df: float) -> float:
    """P(T > t) for t > 0."""
    if math.isinf(t):
        return 0.0
    if math.isinf(df):
        return 0.5 * math.erfc(t / _SQRT2)
    t2 = t * t
    # x = df / (df + t^2) and its complement, formed without cancellation
    x = 1.0 / (1.0 + t2 / df)
    xc = 1.0 / (1.0 + df / t2)
    return 0.5 * betainc(0.5 * df, 0.5, x, xc)


def _central_mass(t: float, df: float) -> float:
    """P(-t < T < t) for t > 0, accurate when the tails are tiny."""
    if math.isinf(t):
        return 1.0
    if math.isinf(df):
        return math.erf(t / _SQRT2)
    t2 = t * t
    x = 1.0 / (1.0 + t2 / df)
    xc = 1.0 / (1.0 + df / t2)
    return betaincc(0.5 * df, 0.5, x, xc)


def t_pdf(t: float, df: float) -> float:
    """Density of the t distribution with df degrees of freedom."""
    df = _check_df(df)
    t = float(t)
    if math.isnan(t):
        return math.nan
    if math.isinf(t):
        return 0.0
    if math.isinf(df):
        return math.exp(-0.5 * t * t) / math.sqrt(2.0 * math.pi)
    log_norm = (
        math.lgamma(0.5 * (df + 1.0))
        - math.lgamma(0.5 * df)
        - 0.5 * math.log(df * math.pi)
    )
    return math.exp(log_norm - 0.5 * (df + 1.0) * math.log1p(t * t / df))


def t_sf(t: float, df: float) -> float:
    """Survival function P(T > t)."""
    df = _check_df(df)
    t = float(t)
    if math.isnan(t):
        return math.nan
    if t == 0.0:
        return 0.5
    if t > 0.0:
        return _upper_tail(t, df)
    return 0.5 + 0.5 * _central_mass(-t, df)


def t_cdf(t: float, df: float) -> float:
    """Cumulative distribution function P(T <= t)."""
    df = _check_df(df)
    t = float(t)
    if math.isnan(t):
        return math.nan
    if t == 0.0:
        return 0.5
    if t < 0.0:
        return _upper_tail(-t, df)
    return 0.5 + 0.5 * _central_mass(t, df)


def t_isf(q: float, df: float) -> float:
    """
    Inverse survival function: the t with P(T > t) = q.

    Args:
        q: Upper-tail probability in (0, 1)
        df: Degrees of freedom (> 0, may be inf)

    Returns:
        The quantile; inf for q = 0 and -inf for q = 1.
    """
    df = _check_df(df)
    q = float(q)
    if math.isnan(q) or not (0.0 <= q <= 1.0):
        raise InvalidInputError(f"probability must be in [0, 1], got {q}")
    if q == 0.0:
        return math.inf
    if q == 1.0:
        return -math.inf
    if q == 0.5:
        return 0.0
    if q > 0.5:
        # Symmetry; 1 - q is exact for q in (0.5, 1)
        return -_upper_quantile(1.0 - q, df)
    return _upper_quantile(q, df)


def t_ppf(p: float, df: float) -> float:
    """Quantile function: the t with P(T <= t) = p."""
    p = float(p)
    if math.isnan(p) or not (0.0 <= p <= 1.0):
        raise InvalidInputError(f"probability must be in [0, 1], got {p}")
    if p < 0.5:
        return -t_isf(p, df)
    return t_isf(1.0 - p, df)


def _upper_quantile(q: float, df: float) -> float:
    """Solve P(T > t) = q for t > 0, given 0 < q < 0.5."""
    lo, hi = 0.0, 1.0
    sf_hi = _upper_tail(hi, df)
    while sf_hi >= q:
        lo = hi
        hi *= 2.0
        if math.isinf(hi):
            return math.inf
        sf_hi = _upper_tail(hi, df)

    log_q = math.log(q)
    t = 0.5 * (lo + hi)
    for _ in range(QUANTILE_MAX_ITERATIONS):
        sf = _upper_tail(t, df)
        if sf == q:
            return t
        if sf > q:
            lo = t
        else:
            hi = t
        if hi - lo <= _QUANTILE_RTOL * hi:
            return 0.5 * (lo + hi)

        # Newton step on g(t) = log P(T > t) - log q, g'(t) = -pdf / sf
        pdf = t_pdf(t, df)
        candidate = math.nan
        if sf > 0.0 and pdf > 0.0:
            candidate = t + (math.log(sf) - log_q) * sf / pdf
        if not (lo < candidate < hi):
            candidate = math.sqrt(lo) * math.sqrt(hi) if lo > 0.0 else 0.5 * hi
        if abs(candidate - t) <= _QUANTILE_RTOL * abs(candidate):
            return candidate
        t = candidate

    raise ConvergenceError(
        f"t quantile did not converge for q={q}, df={df}",
        iterations=QUANTILE_MAX_ITERATIONS,
        final_change=(hi - lo) / hi,
        reason='max_iterations',
        threshold=_QUANTILE_RTOL,
    )
