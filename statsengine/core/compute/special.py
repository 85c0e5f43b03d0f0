"""
Special functions used by the distribution layer.

Provides the regularized incomplete beta function I_x(a, b) and its
complement, evaluated by the modified Lentz algorithm on the standard
continued fraction (Numerical Recipes, 3rd ed., section 6.4). Only the
Python standard library math module is used, so the t distribution does
not depend on any third-party special-function implementation.

Both functions accept an optional exact complement ``xc = 1 - x``. Callers
that can form 1 - x without cancellation (e.g. t**2 / (df + t**2)) should
pass it, since the upper-tail branch is evaluated at xc.
"""

from __future__ import annotations

import math
import sys

from statsengine.core.exceptions import ConvergenceError, InvalidInputError

# Relative change at which the continued fraction is considered converged.
CF_TOLERANCE = 2.0 * sys.float_info.epsilon
# Iteration cap; the fraction needs O(sqrt(max(a, b))) terms near the crossover.
CF_MAX_ITERATIONS = 100_000
_FPMIN = 1e-300


def log_beta(a: float, b: float) -> float:
    """log B(a, b) via log-gamma."""
    return math.lgamma(a) + math.lgamma(b) - math.lgamma(a + b)


def _betacf(a: float, b: float, x: float) -> float:
    """Continued fraction for I_x(a, b), modified Lentz evaluation."""
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0
    c = 1.0
    d = 1.0 - qab * x / qap
    if abs(d) < _FPMIN:
        d = _FPMIN
    d = 1.0 / d
    h = d
    delta = math.inf
    for m in range(1, CF_MAX_ITERATIONS + 1):
        m2 = 2 * m
        # Even step
        aa = m * (b - m) * x / ((qam + m2) * (a + m2))
        d = 1.0 + aa * d
        if abs(d) < _FPMIN:
            d = _FPMIN
        c = 1.0 + aa / c
        if abs(c) < _FPMIN:
            c = _FPMIN
        d = 1.0 / d
        h *= d * c
        # Odd step
        aa = -(a + m) * (qab + m) * x / ((a + m2) * (qap + m2))
        d = 1.0 + aa * d
        if abs(d) < _FPMIN:
            d = _FPMIN
        c = 1.0 + aa / c
        if abs(c) < _FPMIN:
            c = _FPMIN
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) <= CF_TOLERANCE:
            return h
    raise ConvergenceError(
        f"incomplete beta continued fraction did not converge for "
        f"a={a}, b={b}, x={x}",
        iterations=CF_MAX_ITERATIONS,
        final_change=abs(delta - 1.0),
        reason='max_iterations',
        threshold=CF_TOLERANCE,
    )


def _betainc_pair(a: float, b: float, x: float, xc: float | None) -> tuple[float, float]:
    """Return (I_x(a, b), 1 - I_x(a, b)), each computed without cancellation."""
    if not (a > 0.0 and b > 0.0):
        raise InvalidInputError(f"betainc: a and b must be positive, got a={a}, b={b}")
    if xc is None:
        xc = 1.0 - x
    if not (0.0 <= x <= 1.0) or not (0.0 <= xc <= 1.0):
        raise InvalidInputError(f"betainc: x must be in [0, 1], got x={x}, xc={xc}")

    if x == 0.0:
        return 0.0, 1.0
    if xc == 0.0:
        return 1.0, 0.0

    log_front = a * math.log(x) + b * math.log(xc) - log_beta(a, b)
    front = math.exp(log_front)

    if x < (a + 1.0) / (a + b + 2.0):
        lower = front * _betacf(a, b, x) / a
        return lower, 1.0 - lower
    upper = front * _betacf(b, a, xc) / b
    return 1.0 - upper, upper


def betainc(a: float, b: float, x: float, xc: float | None = None) -> float:
    """
    Regularized incomplete beta function I_x(a, b).

    Args:
        a, b: Shape parameters, both > 0
        x: Evaluation point in [0, 1]
        xc: Optional exact value of 1 - x

    Returns:
        I_x(a, b) in [0, 1]
    """
    return _betainc_pair(a, b, x, xc)[0]


def betaincc(a: float, b: float, x: float, xc: float | None = None) -> float:
    """Complement 1 - I_x(a, b), accurate when I_x(a, b) is close to 1."""
    return _betainc_pair(a, b, x, xc)[1]
