"""
Discrete random variates.

Scalar generators of integer-valued variates (returned as ``int``) drawing
from a :class:`~pysatl_distributions.stats.random_source.RandomSource`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

from pysatl_distributions.errors import NumericalNonConvergenceError
from pysatl_distributions.stats.variates.continuous import gamma

if TYPE_CHECKING:
    from pysatl_distributions.stats.random_source import RandomSource

logger = logging.getLogger(__name__)

SMALL_MEAN = 14
"""Mean below which binomial variates are produced by inversion."""

POISSON_GAMMA_THRESHOLD = 10.0
"""Mean above which the Poisson sampler reduces the mean with gamma draws."""


def _binomial_inversion(rng: RandomSource, n: int, p: float) -> int:
    q = 1.0 - p
    s = p / q
    f0 = q**n
    cutoff = rng.limits.binomial_inversion_cutoff
    for _ in range(rng.limits.max_rejection_attempts):
        f = f0
        u = rng.uniform()
        for ix in range(min(cutoff, n) + 1):
            if u < f:
                return ix
            u -= f
            f *= s * (n - ix) / (ix + 1)
        logger.debug(
            "Binomial inversion walked past index %d (n=%d, p=%s); restarting", cutoff, n, p
        )
    raise NumericalNonConvergenceError("binomial inversion", rng.limits.max_rejection_attempts)


def _binomial_btpe(rng: RandomSource, n: int, p: float) -> int:
    # Kachitvichyanukul & Schmeiser triangle/parallelogram/exponential decomposition.
    q = 1.0 - p
    np_ = n * p
    ffm = np_ + p
    m = int(ffm)
    fm = float(m)
    xm = fm + 0.5
    npq = np_ * q
    p1 = math.floor(2.195 * math.sqrt(npq) - 4.6 * q) + 0.5
    xl = xm - p1
    xr = xm + p1
    c = 0.134 + 20.5 / (15.3 + fm)
    p2 = p1 * (1.0 + c + c)
    al = (ffm - xl) / (ffm - xl * p)
    lambda_l = al * (1.0 + 0.5 * al)
    ar = (xr - ffm) / (xr * q)
    lambda_r = ar * (1.0 + 0.5 * ar)
    p3 = p2 + c / lambda_l
    p4 = p3 + c / lambda_r

    log_mode = math.lgamma(m + 1.0) + math.lgamma(n - m + 1.0)
    log_odds = math.log(p / q)

    max_attempts = rng.limits.max_rejection_attempts
    for _ in range(max_attempts):
        u = rng.uniform() * p4
        v = rng.uniform()

        if u <= p1:
            # triangle: accepted without a test
            return math.floor(xm - p1 * v + u)
        if u <= p2:
            x = xl + (u - p1) / c
            v = v * c + 1.0 - abs(x - xm) / p1
            if v > 1.0 or v <= 0.0:
                continue
            ix = math.floor(x)
        elif u <= p3:
            if v <= 0.0:
                continue
            ix = math.floor(xl + math.log(v) / lambda_l)
            if ix < 0:
                continue
            v *= (u - p2) * lambda_l
        else:
            if v <= 0.0:
                continue
            ix = math.floor(xr - math.log(v) / lambda_r)
            if ix > n:
                continue
            v *= (u - p3) * lambda_r

        if ix < 0 or ix > n or v <= 0.0:
            continue
        log_ratio = (
            log_mode
            - math.lgamma(ix + 1.0)
            - math.lgamma(n - ix + 1.0)
            + (ix - m) * log_odds
        )
        if math.log(v) <= log_ratio:
            return ix
    raise NumericalNonConvergenceError("binomial BTPE sampler", max_attempts)


def binomial(rng: RandomSource, trials: int, prob: float) -> int:
    """
    Binomial variate: number of successes in ``trials`` Bernoulli(``prob``) trials.

    The probability is first flipped to ``p <= 1/2``. When ``trials · p < 14``
    the variate is produced by inversion (walking the pmf recursively up to
    ``rng.limits.binomial_inversion_cutoff`` and restarting with a fresh
    uniform past it); otherwise by the BTPE algorithm with an exact
    log-gamma acceptance test. Flipped draws are mapped back as
    ``trials - k``.

    Parameters
    ----------
    rng : RandomSource
        Sampling session.
    trials : int
        Number of trials, ``>= 0``.
    prob : float
        Success probability in ``[0, 1]``.

    Returns
    -------
    int
        A value in ``[0, trials]``.
    """
    n = int(trials)
    if n <= 0:
        return 0
    flipped = prob > 0.5
    p = 1.0 - prob if flipped else prob
    if p <= 0.0:
        ix = 0
    elif n * p < SMALL_MEAN:
        ix = _binomial_inversion(rng, n, p)
    else:
        ix = _binomial_btpe(rng, n, p)
    return n - ix if flipped else ix


def poisson(rng: RandomSource, mu: float) -> int:
    """
    Poisson variate with mean ``mu``.

    While the remaining mean exceeds 10, a ``Gamma(m, 1)`` draw with
    ``m = floor(7·mu/8)`` either overshoots the mean, in which case the count
    is completed by ``Binomial(m - 1, mu / X)``, or is subtracted from it
    while ``m`` events are accumulated. The small remaining mean is handled
    by multiplying uniforms until the product drops below ``exp(-mu)``.
    """
    if mu <= 0.0:
        return 0
    k = 0
    while mu > POISSON_GAMMA_THRESHOLD:
        m = int(mu * (7.0 / 8.0))
        x = gamma(rng, float(m))
        if x >= mu:
            return k + binomial(rng, m - 1, mu / x)
        k += m
        mu -= x

    emu = math.exp(-mu)
    prod = 1.0
    while True:
        prod *= rng.uniform()
        if prod <= emu:
            return k
        k += 1


def negative_binomial(rng: RandomSource, failures: float, prob: float) -> int:
    """
    Negative binomial variate as a gamma-mixed Poisson.

    ``Poisson(Gamma(failures, 1) · (1 - prob) / prob)``: the number of
    successes before the ``failures``-th failure when each trial stops with
    probability ``prob``.
    """
    if prob >= 1.0:
        return 0
    return poisson(rng, gamma(rng, failures) * (1.0 - prob) / prob)


def geometric(rng: RandomSource, prob: float) -> int:
    """Geometric variate (failures before the first success), ``floor(ln(1-u) / ln(1-p))``."""
    if prob >= 1.0:
        return 0
    return math.floor(math.log1p(-rng.uniform()) / math.log1p(-prob))


__all__ = [
    "binomial",
    "poisson",
    "negative_binomial",
    "geometric",
]
