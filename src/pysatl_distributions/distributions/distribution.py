"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol: the contract
every distribution of the library implements.

Notes
-----
- Characteristics are resolved through the distribution's computation
  strategy and evaluated element-wise for array arguments.
- Sampling always goes through an explicit
  :class:`~pysatl_distributions.stats.random_source.RandomSource`; omitting it
  creates a fresh, independently seeded source for that call.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_distributions.distributions.computation import AnalyticalComputation
    from pysatl_distributions.distributions.sampling import Sample
    from pysatl_distributions.distributions.strategies import (
        ComputationStrategy,
        Method,
        SamplingStrategy,
    )
    from pysatl_distributions.distributions.support import Support
    from pysatl_distributions.stats.random_source import RandomSource
    from pysatl_distributions.types import (
        DistributionType,
        GenericCharacteristicName,
        Number,
        NumericArray,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies and callers."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def validate(self) -> None: ...

    def mean(self) -> float: ...
    def variance(self) -> float: ...
    def skewness(self) -> float: ...
    def kurtosis(self, excess: bool = False) -> float: ...
    def std_dev(self) -> float: ...
    def rel_std_dev(self) -> float: ...

    def pdf(self, x: Number | NumericArray) -> float | NumericArray: ...
    def cdf(self, x: Number | NumericArray) -> float | NumericArray: ...

    def random(self, rng: RandomSource | None = None) -> float: ...

    def sample(self, n: int, rng: RandomSource | None = None, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, rng=rng, **options)

    def to_record(self) -> dict[str, Any]: ...


__all__ = ["Distribution"]
