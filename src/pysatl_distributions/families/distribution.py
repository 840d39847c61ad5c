"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_distributions.distributions.distribution import Distribution
from pysatl_distributions.errors import IndeterminateError
from pysatl_distributions.families.registry import ParametricFamilyRegister
from pysatl_distributions.types import CharacteristicName, Kind

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_distributions.distributions.computation import AnalyticalComputation
    from pysatl_distributions.distributions.sampling import Sample
    from pysatl_distributions.distributions.strategies import (
        ComputationStrategy,
        SamplingStrategy,
    )
    from pysatl_distributions.distributions.support import Support
    from pysatl_distributions.families.parametric_family import ParametricFamily
    from pysatl_distributions.families.parametrizations import Parametrization
    from pysatl_distributions.stats.random_source import RandomSource
    from pysatl_distributions.types import (
        DistributionType,
        GenericCharacteristicName,
        Number,
        NumericArray,
    )


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Represents a concrete distribution with specific parameter values,
    providing the distribution contract: moments, density/mass and
    cumulative functions, sampling and serialization.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.

    Notes
    -----
    Every contract method validates the parameters first, so an instance
    wrapping invalid parameters raises
    :class:`~pysatl_distributions.errors.InvalidParameterError` from all of them.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None
    _analytical_cache_key: tuple[int, str] | None = field(default=None, init=False, repr=False)
    _analytical_cache_val: (
        dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None
    ) = field(default=None, init=False, repr=False)

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def base_parameters(self) -> Parametrization:
        """Parameters converted to the family's base parametrization."""
        return self.family.to_base(self.parameters)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Lazily computed and cached per instance. Cache invalidates when
        parametrization object or name changes.
        """
        key = (id(self.parameters), self.parameters.name)
        cache_val = self._analytical_cache_val

        if self._analytical_cache_key != key or cache_val is None:
            cache_val = self.family._build_analytical_computations(self.parameters)
            self._analytical_cache_key = key
            self._analytical_cache_val = cache_val

        return cache_val

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        """Get the computation strategy for this distribution."""
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self._support

    @property
    def is_discrete(self) -> bool:
        return getattr(self._distribution_type, "kind", None) == Kind.DISCRETE

    def validate(self) -> None:
        """
        Check the parameters against the family constraints.

        Raises
        ------
        InvalidParameterError
            If a constraint does not hold.
        """
        self.parameters.validate()

    def _moment(self, characteristic: GenericCharacteristicName, **options: Any) -> float:
        self.validate()
        return float(self.query_method(characteristic)(None, **options))

    def _evaluate(
        self, characteristic: GenericCharacteristicName, x: Number | NumericArray
    ) -> float | NumericArray:
        self.validate()
        method = self.query_method(characteristic)
        arr = np.asarray(x, dtype=np.float64)
        if arr.ndim == 0:
            return float(method(float(arr)))
        evaluate = np.vectorize(lambda value: float(method(float(value))), otypes=[np.float64])
        return cast("NumericArray", evaluate(arr))

    def mean(self) -> float:
        """Expected value."""
        return self._moment(CharacteristicName.MEAN)

    def variance(self) -> float:
        """Variance."""
        return self._moment(CharacteristicName.VAR)

    def skewness(self) -> float:
        """Skewness (third standardized moment)."""
        return self._moment(CharacteristicName.SKEW)

    def kurtosis(self, excess: bool = False) -> float:
        """
        Kurtosis.

        Parameters
        ----------
        excess : bool, default False
            Return the excess kurtosis (raw kurtosis minus 3) instead of the
            raw (Pearson) kurtosis.
        """
        return self._moment(CharacteristicName.KURT, excess=excess)

    def std_dev(self) -> float:
        """Standard deviation, ``sqrt(variance)``."""
        return math.sqrt(self.variance())

    def rel_std_dev(self) -> float:
        """
        Relative standard deviation (coefficient of variation), ``std_dev / mean``.

        Raises
        ------
        IndeterminateError
            If the mean is zero or not finite.
        """
        mean = self.mean()
        if mean == 0 or not math.isfinite(mean):
            raise IndeterminateError("relative standard deviation", f"mean is {mean}")
        return self.std_dev() / mean

    def pdf(self, x: Number | NumericArray) -> float | NumericArray:
        """
        Probability density function (probability mass function for discrete
        families), evaluated element-wise.
        """
        name = CharacteristicName.PMF if self.is_discrete else CharacteristicName.PDF
        return self._evaluate(name, x)

    def pmf(self, x: Number | NumericArray) -> float | NumericArray:
        """Probability mass function, evaluated element-wise."""
        return self._evaluate(CharacteristicName.PMF, x)

    def cdf(self, x: Number | NumericArray) -> float | NumericArray:
        """Cumulative distribution function ``P(X <= x)``, evaluated element-wise."""
        return self._evaluate(CharacteristicName.CDF, x)

    def ppf(self, p: Number | NumericArray) -> float | NumericArray:
        """Percent point function (inverse CDF), where the family provides one."""
        return self._evaluate(CharacteristicName.PPF, p)

    def random(self, rng: RandomSource | None = None) -> float:
        """
        Draw a single variate.

        Parameters
        ----------
        rng : RandomSource, optional
            Sampling session; a fresh independently seeded one is used if omitted.
        """
        self.validate()
        return self.sampling_strategy.draw(self, rng)

    def sample(self, n: int, rng: RandomSource | None = None, **options: Any) -> Sample:
        """
        Generate ``n`` i.i.d. samples from this distribution.

        Parameters
        ----------
        n : int
            Number of samples to generate; ``n <= 0`` gives an empty sample.
        rng : RandomSource, optional
            Sampling session shared by all draws.
        **options : Any
            Additional options for sampling.

        Returns
        -------
        Sample
            Generated samples of shape ``(n, 1)``.
        """
        self.validate()
        return self.sampling_strategy.sample(n, distr=self, rng=rng, **options)

    def to_record(self) -> dict[str, Any]:
        """
        Flat serializable record of the distribution.

        Returns
        -------
        dict[str, Any]
            ``{"family": ..., "parametrization": ..., <parameter>: <value>, ...}``.
        """
        self.validate()
        return {
            "family": str(self.family_name),
            "parametrization": self.parameters.name,
            **self.parameters.parameters,
        }


__all__ = ["ParametricFamilyDistribution"]
