"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy` — resolves characteristic methods.
- :class:`DefaultComputationStrategy` — resolves the analytical
  characteristics a distribution provides.
- :class:`SamplingStrategy` — draws single variates and samples.
- :class:`VariateSamplingStrategy` — draws through a scalar random-variate
  generator bound to the distribution's base parameters.
- :class:`InverseTransformSamplingStrategy` — draws ``ppf(U)`` for uniform ``U``.

Notes
-----
- Strategies are stateless; all entropy comes from the
  :class:`~pysatl_distributions.stats.random_source.RandomSource` passed in.
- Without an explicit source a fresh, independently seeded one is created for
  that call only.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, cast

from pysatl_distributions.distributions.computation import AnalyticalComputation
from pysatl_distributions.stats.random_source import RandomSource, ensure_random_source
from pysatl_distributions.types import (
    CharacteristicName,
    GenericCharacteristicName,
)

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from pysatl_distributions.families.distribution import ParametricFamilyDistribution
    from pysatl_distributions.families.parametrizations import Parametrization

    from .distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out]

type Variate = Callable[["Parametrization", RandomSource], float]
"""Scalar generator taking base parameters and a random source."""


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Returns the analytical implementation of the requested characteristic.

    Raises
    ------
    RuntimeError
        If the distribution provides no analytical implementation of the
        characteristic.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve the analytical method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical characteristics.
        **options
            Unused; accepted for interface compatibility.

        Returns
        -------
        Method
            Analytical callable implementing ``state``.
        """
        computations = distr.analytical_computations
        if state in computations:
            return computations[state]
        raise RuntimeError(
            f"Distribution provides no analytical computation for '{state}'. "
            f"Available: {sorted(computations)}."
        )


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies."""

    def draw(self, distr: "Distribution", rng: RandomSource | None = None) -> float: ...

    def sample(
        self, n: int, distr: "Distribution", rng: RandomSource | None = None, **options: Any
    ) -> Sample: ...


class _SequentialSamplingStrategy:
    """Sample ``n`` sequential i.i.d. draws into an ``(n, 1)`` array sample."""

    def draw(self, distr: "Distribution", rng: RandomSource | None = None) -> float:
        raise NotImplementedError

    def sample(
        self, n: int, distr: "Distribution", rng: RandomSource | None = None, **options: Any
    ) -> ArraySample:
        """
        Draw ``n`` i.i.d. variates.

        Parameters
        ----------
        n : int
            Sample size; ``n <= 0`` yields an empty ``(0, 1)`` sample.
        distr : Distribution
            Distribution to sample from.
        rng : RandomSource, optional
            Sampling session shared by all draws.

        Returns
        -------
        ArraySample
            A 2D sample of shape ``(n, 1)``.
        """
        source = ensure_random_source(rng)
        return ArraySample.from_values(self.draw(distr, source) for _ in range(max(n, 0)))


class VariateSamplingStrategy(_SequentialSamplingStrategy):
    """
    Sampler delegating to a scalar random-variate generator.

    Parameters
    ----------
    variate : Callable[[Parametrization, RandomSource], float]
        Generator receiving the distribution's base parameters.
    """

    def __init__(self, variate: Variate) -> None:
        self.variate = variate

    def draw(self, distr: "Distribution", rng: RandomSource | None = None) -> float:
        """Draw a single variate."""
        parametric = cast("ParametricFamilyDistribution", distr)
        return float(self.variate(parametric.base_parameters, ensure_random_source(rng)))


class InverseTransformSamplingStrategy(_SequentialSamplingStrategy):
    """
    Univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to
    uniforms ``U ~ U(0, 1)`` drawn from the random source.
    """

    def draw(self, distr: "Distribution", rng: RandomSource | None = None) -> float:
        """Draw a single variate."""
        ppf = distr.query_method(CharacteristicName.PPF)
        return float(ppf(ensure_random_source(rng).uniform()))


__all__ = [
    "Method",
    "Variate",
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "VariateSamplingStrategy",
    "InverseTransformSamplingStrategy",
]
