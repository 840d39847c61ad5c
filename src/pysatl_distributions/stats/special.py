"""
Special Functions
=================

Scalar special-function evaluators used as numerical primitives by the
distribution families:

- :func:`regularized_incomplete_gamma_lower` — series expansion of ``P(s, z)``;
- :func:`regularized_incomplete_gamma_upper` — continued fraction for ``Q(s, z)``;
- :func:`regularized_gamma_p` / :func:`regularized_gamma_q` — convergence-checked
  dispatch between the two, used by Gamma, Chi-squared and Poisson CDFs;
- :func:`beta_function` / :func:`log_beta_function` — complete (multivariate) beta;
- :func:`regularized_incomplete_beta` / :func:`incomplete_beta` — continued
  fraction evaluation of ``I_x(a, b)``;
- :func:`binomial_coefficient` / :func:`log_binomial_coefficient`.

Notes
-----
- All functions are pure and scalar (``float -> float``).
- Domain edges documented per function return ``nan``; failing to converge
  raises :class:`~pysatl_distributions.errors.NumericalNonConvergenceError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys

from pysatl_distributions.errors import NumericalNonConvergenceError
from pysatl_distributions.stats.limits import DEFAULT_LIMITS, IterationLimits

_FPMIN = sys.float_info.min / sys.float_info.epsilon

GAMMA_SERIES_MAX_TERMS = DEFAULT_LIMITS.gamma_series_max_terms
GAMMA_SERIES_EPSILON = DEFAULT_LIMITS.gamma_series_epsilon
_EXACT_BETA_MAX_SUM = 171


def _lower_gamma_series(s: float, z: float, max_terms: int, epsilon: float) -> tuple[float, bool]:
    term = 1.0
    total = 1.0
    converged = False
    for k in range(1, max_terms):
        term *= z / (s + k)
        total += term
        if term / total < epsilon:
            converged = True
            break
    value = math.exp(s * math.log(z) - z - math.lgamma(s + 1.0) + math.log(total))
    return min(value, 1.0), converged


def _upper_gamma_continued_fraction(
    s: float, z: float, max_iterations: int, epsilon: float
) -> float:
    # Modified Lentz evaluation of the Legendre continued fraction.
    b = z + 1.0 - s
    c = 1.0 / _FPMIN
    d = 1.0 / b
    h = d
    for i in range(1, max_iterations + 1):
        an = -i * (i - s)
        b += 2.0
        d = an * d + b
        if abs(d) < _FPMIN:
            d = _FPMIN
        c = b + an / c
        if abs(c) < _FPMIN:
            c = _FPMIN
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) <= epsilon:
            break
    else:
        raise NumericalNonConvergenceError("incomplete gamma continued fraction", max_iterations)
    return min(math.exp(-z + s * math.log(z) - math.lgamma(s)) * h, 1.0)


def regularized_incomplete_gamma_lower(
    s: float,
    z: float,
    *,
    max_terms: int = GAMMA_SERIES_MAX_TERMS,
    epsilon: float = GAMMA_SERIES_EPSILON,
) -> float:
    """
    Regularized lower incomplete gamma function ``P(s, z) = γ(s, z) / Γ(s)``.

    Evaluated by the series ``Σ z^k / ((s+1)(s+2)...(s+k))`` which is summed
    until the relative contribution of the latest term drops below
    ``epsilon`` or ``max_terms`` terms have been accumulated.

    Parameters
    ----------
    s : float
        Shape, ``s > 0``.
    z : float
        Upper integration limit, ``z >= 0``.
    max_terms : int, default 100
        Term cap of the series.
    epsilon : float, default 1e-14
        Relative term size at which summation stops.

    Returns
    -------
    float
        ``P(s, z)``; ``0`` at ``z = 0``; ``nan`` outside the domain.

    Notes
    -----
    The series converges slowly when ``z`` is much larger than ``s``; use
    :func:`regularized_gamma_p` when a convergence guarantee is needed.
    """
    if math.isnan(s) or math.isnan(z) or s <= 0 or z < 0:
        return math.nan
    if z == 0:
        return 0.0
    if math.isinf(z):
        return 1.0
    value, _ = _lower_gamma_series(s, z, max_terms, epsilon)
    return value


def regularized_incomplete_gamma_upper(
    s: float, z: float, *, limits: IterationLimits = DEFAULT_LIMITS
) -> float:
    """
    Regularized upper incomplete gamma function ``Q(s, z) = 1 - P(s, z)``.

    Evaluated by a modified Lentz continued fraction, accurate for
    ``z >= s + 1``.

    Raises
    ------
    NumericalNonConvergenceError
        If the fraction does not converge within
        ``limits.gamma_max_iterations`` iterations.
    """
    if math.isnan(s) or math.isnan(z) or s <= 0 or z < 0:
        return math.nan
    if z == 0:
        return 1.0
    if math.isinf(z):
        return 0.0
    return _upper_gamma_continued_fraction(
        s, z, limits.gamma_max_iterations, limits.continued_fraction_epsilon
    )


def regularized_gamma_p(s: float, z: float, *, limits: IterationLimits = DEFAULT_LIMITS) -> float:
    """
    Regularized lower incomplete gamma function with a convergence guarantee.

    Uses the series for ``z < s + 1`` and the continued fraction of ``Q``
    otherwise. Arguments ``z <= 0`` yield ``0``.

    Raises
    ------
    NumericalNonConvergenceError
        If the chosen expansion does not converge within
        ``limits.gamma_max_iterations`` iterations.
    """
    if math.isnan(s) or math.isnan(z) or s <= 0:
        return math.nan
    if z <= 0:
        return 0.0
    if math.isinf(z):
        return 1.0
    if z < s + 1.0:
        value, converged = _lower_gamma_series(
            s, z, limits.gamma_max_iterations, limits.gamma_series_epsilon
        )
        if not converged:
            raise NumericalNonConvergenceError(
                "incomplete gamma series", limits.gamma_max_iterations
            )
        return value
    return 1.0 - _upper_gamma_continued_fraction(
        s, z, limits.gamma_max_iterations, limits.continued_fraction_epsilon
    )


def regularized_gamma_q(s: float, z: float, *, limits: IterationLimits = DEFAULT_LIMITS) -> float:
    """Complement ``1 - P(s, z)`` computed without cancellation in the upper tail."""
    if math.isnan(s) or math.isnan(z) or s <= 0:
        return math.nan
    if z <= 0:
        return 1.0
    if math.isinf(z):
        return 0.0
    if z < s + 1.0:
        return 1.0 - regularized_gamma_p(s, z, limits=limits)
    return _upper_gamma_continued_fraction(
        s, z, limits.gamma_max_iterations, limits.continued_fraction_epsilon
    )


def log_beta_function(a: float, b: float, *others: float) -> float:
    """Natural logarithm of :func:`beta_function`."""
    args = (a, b, *others)
    if any(math.isnan(arg) or arg <= 0 for arg in args):
        return math.nan
    return math.fsum(math.lgamma(arg) for arg in args) - math.lgamma(math.fsum(args))


def beta_function(a: float, b: float, *others: float) -> float:
    """
    Complete (multivariate) beta function ``∏Γ(aᵢ) / Γ(Σaᵢ)``.

    Small integral arguments are evaluated exactly from factorials and
    rounded once; everything else in log space so that large arguments do
    not overflow.

    Parameters
    ----------
    a, b, *others : float
        Positive arguments.

    Returns
    -------
    float
        Value of the beta function, ``nan`` if any argument is not positive.

    Examples
    --------
    >>> beta_function(4, 2)
    0.05
    """
    args = (a, b, *others)
    integral = all(arg > 0 and float(arg).is_integer() for arg in args)
    if integral and sum(args) <= _EXACT_BETA_MAX_SUM:
        numerator = math.prod(math.factorial(int(arg) - 1) for arg in args)
        return numerator / math.factorial(int(sum(args)) - 1)
    return math.exp(log_beta_function(a, b, *others))


def _beta_continued_fraction(
    a: float, b: float, x: float, max_iterations: int, epsilon: float
) -> float:
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0
    c = 1.0
    d = 1.0 - qab * x / qap
    if abs(d) < _FPMIN:
        d = _FPMIN
    d = 1.0 / d
    h = d
    for m in range(1, max_iterations + 1):
        m2 = 2 * m
        # even step
        aa = m * (b - m) * x / ((qam + m2) * (a + m2))
        d = 1.0 + aa * d
        if abs(d) < _FPMIN:
            d = _FPMIN
        c = 1.0 + aa / c
        if abs(c) < _FPMIN:
            c = _FPMIN
        d = 1.0 / d
        h *= d * c
        # odd step
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
        if abs(delta - 1.0) <= epsilon:
            return h
    raise NumericalNonConvergenceError("incomplete beta continued fraction", max_iterations)


def regularized_incomplete_beta(
    a: float, b: float, x: float, *, limits: IterationLimits = DEFAULT_LIMITS
) -> float:
    """
    Regularized incomplete beta function ``I_x(a, b)``.

    The continued fraction is evaluated on whichever of ``(a, b, x)`` and
    ``(b, a, 1 - x)`` converges faster (switching at
    ``x < (a + 1) / (a + b + 2)``) and combined with the prefactor
    ``exp(lgamma(a+b) - lgamma(a) - lgamma(b) + a·ln(x) + b·ln(1-x))``.

    Parameters
    ----------
    a, b : float
        Positive shape parameters.
    x : float
        Evaluation point; values ``<= 0`` give ``0`` and values ``>= 1`` give ``1``.
    limits : IterationLimits, optional
        Iteration cap and tolerance of the continued fraction.

    Returns
    -------
    float
        ``I_x(a, b)``, ``nan`` if ``a`` or ``b`` is not positive.

    Raises
    ------
    NumericalNonConvergenceError
        If the continued fraction does not converge.
    """
    if math.isnan(a) or math.isnan(b) or math.isnan(x) or a <= 0 or b <= 0:
        return math.nan
    if x <= 0:
        return 0.0
    if x >= 1:
        return 1.0
    log_front = (
        math.lgamma(a + b)
        - math.lgamma(a)
        - math.lgamma(b)
        + a * math.log(x)
        + b * math.log1p(-x)
    )
    front = math.exp(log_front)
    max_iterations = limits.beta_cf_max_iterations
    epsilon = limits.continued_fraction_epsilon
    if x < (a + 1.0) / (a + b + 2.0):
        return front * _beta_continued_fraction(a, b, x, max_iterations, epsilon) / a
    return 1.0 - front * _beta_continued_fraction(b, a, 1.0 - x, max_iterations, epsilon) / b


def incomplete_beta(
    a: float, b: float, x: float, *, limits: IterationLimits = DEFAULT_LIMITS
) -> float:
    """Unregularized incomplete beta function ``B(x; a, b) = I_x(a, b) · B(a, b)``."""
    return regularized_incomplete_beta(a, b, x, limits=limits) * beta_function(a, b)


def log_binomial_coefficient(n: float, k: float) -> float:
    """Natural logarithm of the (generalized) binomial coefficient, ``nan`` if ``k > n``."""
    if k > n or k < 0:
        return math.nan
    return math.lgamma(n + 1.0) - math.lgamma(k + 1.0) - math.lgamma(n - k + 1.0)


def binomial_coefficient(n: float, k: float) -> float:
    """
    Binomial coefficient ``C(n, k)`` for real ``n``.

    For integral ``k`` the value is built incrementally as
    ``∏_{d=1..k} (n - d + 1) / d`` which keeps intermediate values close to
    the result instead of forming factorials. Non-integral ``k`` falls back
    to the Gamma-function form.

    Returns
    -------
    float
        ``C(n, k)``; ``nan`` if ``k > n``; ``0`` if ``k < 0``.

    Examples
    --------
    >>> binomial_coefficient(10, 2)
    45.0
    """
    if math.isnan(n) or math.isnan(k) or k > n:
        return math.nan
    if k < 0:
        return 0.0
    if not float(k).is_integer():
        return math.exp(log_binomial_coefficient(n, k))
    result = 1.0
    for d in range(1, int(k) + 1):
        result *= n - d + 1
        result /= d
    return result


__all__ = [
    "regularized_incomplete_gamma_lower",
    "regularized_incomplete_gamma_upper",
    "regularized_gamma_p",
    "regularized_gamma_q",
    "beta_function",
    "log_beta_function",
    "regularized_incomplete_beta",
    "incomplete_beta",
    "binomial_coefficient",
    "log_binomial_coefficient",
]
