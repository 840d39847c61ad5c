"""
Random Sources
==============

Entropy plumbing shared by all random-variate generators:

- :class:`UniformSource` — protocol for a uniform ``[0, 1)`` generator.
- :class:`NormalGenerator` — Box–Muller standard-normal generator that caches
  the second deviate of every pair.
- :class:`RandomSource` — sampling session owning one uniform source, one
  normal generator and the iteration limits used by rejection samplers.

Notes
-----
- There is no module-level generator. Every sampling call receives a
  :class:`RandomSource` explicitly.
- A :class:`RandomSource` is mutable and not thread-safe; use
  :meth:`RandomSource.spawn` to obtain independent per-thread sources.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from pysatl_distributions.stats.limits import DEFAULT_LIMITS, IterationLimits

if TYPE_CHECKING:
    from pysatl_distributions.types import Number


@runtime_checkable
class UniformSource(Protocol):
    """Protocol for generators of i.i.d. uniform variates on ``[0, 1)``."""

    def random(self) -> float: ...


class NormalGenerator:
    """
    Standard-normal generator based on the Box–Muller transform.

    Each transform consumes two uniforms ``u1, u2`` and yields two independent
    standard normal deviates ``b·cos(a)`` and ``b·sin(a)`` with
    ``b = sqrt(-2·ln(1 - u1))`` and ``a = 2π·u2``. The first deviate is
    returned immediately, the second is cached and returned by the next call.

    Parameters
    ----------
    uniform_source : UniformSource
        Source of uniform variates.

    Notes
    -----
    The cached value is the *standard* deviate, so successive calls with
    different ``mu``/``sigma`` are each scaled correctly.
    """

    __slots__ = ("_uniform_source", "_cached")

    def __init__(self, uniform_source: UniformSource) -> None:
        self._uniform_source = uniform_source
        self._cached: float | None = None

    @property
    def has_cached(self) -> bool:
        """Whether the next call will return the cached deviate."""
        return self._cached is not None

    def reset(self) -> None:
        """Drop the cached deviate."""
        self._cached = None

    def next(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        """
        Draw a normal deviate with mean ``mu`` and standard deviation ``sigma``.

        Parameters
        ----------
        mu : float, default 0.0
            Mean of the deviate.
        sigma : float, default 1.0
            Standard deviation of the deviate.

        Returns
        -------
        float
            ``mu + sigma · z`` for a standard normal ``z``.
        """
        if self._cached is not None:
            z = self._cached
            self._cached = None
            return mu + sigma * z

        u1 = self._uniform_source.random()
        u2 = self._uniform_source.random()
        b = math.sqrt(-2.0 * math.log(1.0 - u1))
        a = 2.0 * math.pi * u2
        self._cached = math.sin(a) * b
        return mu + sigma * math.cos(a) * b


class RandomSource:
    """
    Sampling session: a uniform source, its normal generator and the limits.

    Parameters
    ----------
    seed : int or numpy.random.SeedSequence, optional
        Seed of the default numpy generator. Ignored when ``uniform_source``
        is given.
    uniform_source : UniformSource, optional
        Custom uniform source. Defaults to ``numpy.random.default_rng(seed)``.
    limits : IterationLimits, optional
        Iteration caps used by the rejection samplers drawing from this source.

    Examples
    --------
    >>> rng = RandomSource(seed=42)
    >>> 0.0 <= rng.uniform() < 1.0
    True
    """

    __slots__ = ("_uniform_source", "_normal_generator", "_limits")

    def __init__(
        self,
        seed: int | np.random.SeedSequence | None = None,
        *,
        uniform_source: UniformSource | None = None,
        limits: IterationLimits = DEFAULT_LIMITS,
    ) -> None:
        if uniform_source is None:
            uniform_source = np.random.default_rng(seed)
        self._uniform_source = uniform_source
        self._normal_generator = NormalGenerator(uniform_source)
        self._limits = limits

    @property
    def uniform_source(self) -> UniformSource:
        """Underlying uniform source."""
        return self._uniform_source

    @property
    def normal_generator(self) -> NormalGenerator:
        """Normal generator bound to this source."""
        return self._normal_generator

    @property
    def limits(self) -> IterationLimits:
        """Iteration limits of the samplers drawing from this source."""
        return self._limits

    def uniform(self) -> float:
        """Draw a uniform variate on ``[0, 1)``."""
        return float(self._uniform_source.random())

    def normal(self, mu: Number = 0.0, sigma: Number = 1.0) -> float:
        """Draw a normal variate through the Box–Muller generator."""
        return self._normal_generator.next(float(mu), float(sigma))

    def spawn(self, n: int) -> list[RandomSource]:
        """
        Derive ``n`` statistically independent child sources.

        Parameters
        ----------
        n : int
            Number of children.

        Returns
        -------
        list[RandomSource]
            Child sources sharing this source's limits.

        Raises
        ------
        TypeError
            If the uniform source is not a ``numpy.random.Generator``.
        """
        if not isinstance(self._uniform_source, np.random.Generator):
            raise TypeError("Only numpy Generator based sources can be spawned.")
        return [
            RandomSource(uniform_source=child, limits=self._limits)
            for child in self._uniform_source.spawn(n)
        ]


def ensure_random_source(rng: RandomSource | None) -> RandomSource:
    """Return ``rng`` or a fresh, independently seeded :class:`RandomSource`."""
    return RandomSource() if rng is None else rng


__all__ = [
    "UniformSource",
    "NormalGenerator",
    "RandomSource",
    "ensure_random_source",
]
