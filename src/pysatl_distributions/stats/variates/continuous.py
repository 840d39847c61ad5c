"""
Continuous random variates.

Scalar generators drawing from a :class:`~pysatl_distributions.stats.random_source.RandomSource`.
Rejection loops are capped by ``rng.limits.max_rejection_attempts``; reaching
the cap raises :class:`~pysatl_distributions.errors.NumericalNonConvergenceError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

from pysatl_distributions.errors import NumericalNonConvergenceError

if TYPE_CHECKING:
    from pysatl_distributions.stats.random_source import RandomSource

logger = logging.getLogger(__name__)

# students_t rejection needs y1² <= degrees - 2; ratio form at or below this.
_T_REJECTION_MIN_DEGREES = 3.0


def uniform(rng: RandomSource, low: float = 0.0, high: float = 1.0) -> float:
    """Uniform variate on ``[low, high)``."""
    return low + (high - low) * rng.uniform()


def normal(rng: RandomSource, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Normal variate drawn through the session's Box–Muller generator."""
    return rng.normal(mu, sigma)


def exponential(rng: RandomSource, rate: float = 1.0) -> float:
    """Exponential variate with the given rate, ``-ln(1 - u) / rate``."""
    return -math.log1p(-rng.uniform()) / rate


def gamma(rng: RandomSource, shape: float, rate: float = 1.0) -> float:
    """
    Gamma variate with shape ``shape`` and rate ``rate``.

    For ``shape >= 1`` the Marsaglia–Tsang squeeze/rejection method is used:
    with ``d = shape - 1/3`` and ``c = 1/sqrt(9d)``, normal candidates ``x``
    are drawn until ``v = (1 + c·x)³`` is positive and a uniform ``u``
    satisfies ``u < 1 - 0.0331·x⁴`` or
    ``ln(u) < x²/2 + d·(1 - v + ln(v))``; the result is ``d·v / rate``.

    For ``shape < 1`` the draw is boosted: ``Gamma(shape + 1, rate) · u^(1/shape)``.

    Parameters
    ----------
    rng : RandomSource
        Sampling session.
    shape : float
        Shape ``α > 0``.
    rate : float, default 1.0
        Rate ``β > 0``.

    Returns
    -------
    float
        A non-negative variate.

    Raises
    ------
    NumericalNonConvergenceError
        If no candidate is accepted within ``rng.limits.max_rejection_attempts``.
    """
    if shape < 1.0:
        u = rng.uniform()
        return gamma(rng, shape + 1.0, rate) * u ** (1.0 / shape)

    d = shape - 1.0 / 3.0
    c = 1.0 / math.sqrt(9.0 * d)
    max_attempts = rng.limits.max_rejection_attempts
    for _ in range(max_attempts):
        x = rng.normal()
        v = 1.0 + c * x
        while v <= 0.0:
            x = rng.normal()
            v = 1.0 + c * x
        v = v * v * v
        u = rng.uniform()
        x2 = x * x
        if u < 1.0 - 0.0331 * x2 * x2:
            return d * v / rate
        if u > 0.0 and math.log(u) < 0.5 * x2 + d * (1.0 - v + math.log(v)):
            return d * v / rate
    raise NumericalNonConvergenceError("gamma rejection sampler", max_attempts)


def beta(rng: RandomSource, alpha: float, beta_: float) -> float:
    """
    Beta variate as the ratio ``g1 / (g1 + g2)`` of independent gammas.

    ``g1 ~ Gamma(alpha, 1)`` and ``g2 ~ Gamma(beta_, 1)``. When both draws
    underflow to zero the pair is redrawn.
    """
    max_attempts = rng.limits.max_rejection_attempts
    for _ in range(max_attempts):
        g1 = gamma(rng, alpha)
        g2 = gamma(rng, beta_)
        total = g1 + g2
        if total > 0.0:
            return g1 / total
        logger.debug("Both gamma draws underflowed (alpha=%s, beta=%s); redrawing", alpha, beta_)
    raise NumericalNonConvergenceError("beta gamma-ratio sampler", max_attempts)


def chi_squared(rng: RandomSource, degrees: float) -> float:
    """Chi-squared variate, ``2 · Gamma(degrees / 2, 1)``."""
    return 2.0 * gamma(rng, degrees / 2.0)


def students_t(rng: RandomSource, degrees: float) -> float:
    """
    Student's t variate with ``degrees`` degrees of freedom.

    For ``degrees <= 3`` the variate is ``N(0, 1) / sqrt(χ²(degrees) / degrees)``.
    Otherwise a rejection method is used: ``y1 ~ N(0, 1)``,
    ``y2 ~ Exp(rate = degrees/2 - 1)``, ``z = y1² / (degrees - 2)``; the pair is
    accepted when ``1 - z >= 0`` and ``exp(-y2 - z) <= 1 - z`` and yields
    ``y1 / sqrt((1 - 2/degrees)(1 - z))``.

    Raises
    ------
    NumericalNonConvergenceError
        If no pair is accepted within ``rng.limits.max_rejection_attempts``.
    """
    max_attempts = rng.limits.max_rejection_attempts
    if degrees <= _T_REJECTION_MIN_DEGREES:
        for _ in range(max_attempts):
            y1 = rng.normal()
            y2 = chi_squared(rng, degrees)
            if y2 > 0.0:
                return y1 / math.sqrt(y2 / degrees)
        raise NumericalNonConvergenceError("student's t ratio sampler", max_attempts)

    for _ in range(max_attempts):
        y1 = rng.normal()
        y2 = exponential(rng, degrees / 2.0 - 1.0)
        z = y1 * y1 / (degrees - 2.0)
        if 1.0 - z >= 0.0 and math.exp(-y2 - z) <= 1.0 - z:
            return y1 / math.sqrt((1.0 - 2.0 / degrees) * (1.0 - z))
    raise NumericalNonConvergenceError("student's t rejection sampler", max_attempts)


def cauchy(rng: RandomSource, location: float = 0.0, scale: float = 1.0) -> float:
    """Cauchy variate, ``location + scale · tan(π(u - 1/2))``."""
    return location + scale * math.tan(math.pi * (rng.uniform() - 0.5))


def logistic(rng: RandomSource, location: float = 0.0, scale: float = 1.0) -> float:
    """Logistic variate, ``location + scale · ln(u / (1 - u))``."""
    u = rng.uniform()
    while u == 0.0:
        u = rng.uniform()
    return location + scale * math.log(u / (1.0 - u))


def weibull(rng: RandomSource, scale: float, shape: float) -> float:
    """Weibull variate, ``scale · (-ln(1 - u))^(1/shape)``."""
    return scale * (-math.log1p(-rng.uniform())) ** (1.0 / shape)


def pareto(rng: RandomSource, scale: float, shape: float) -> float:
    """Pareto (type I) variate, ``scale / (1 - u)^(1/shape)``."""
    return scale / (1.0 - rng.uniform()) ** (1.0 / shape)


def log_normal(rng: RandomSource, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Log-normal variate, ``exp(N(mu, sigma))``."""
    return math.exp(rng.normal(mu, sigma))


__all__ = [
    "uniform",
    "normal",
    "exponential",
    "gamma",
    "beta",
    "chi_squared",
    "students_t",
    "cauchy",
    "logistic",
    "weibull",
    "pareto",
    "log_normal",
]
