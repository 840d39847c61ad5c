"""
Geometric distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_distributions.distributions.strategies import VariateSamplingStrategy
from pysatl_distributions.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_distributions.errors import IndeterminateError
from pysatl_distributions.families.parametric_family import ParametricFamily
from pysatl_distributions.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distributions.families.registry import ParametricFamilyRegister
from pysatl_distributions.stats import variates
from pysatl_distributions.types import (
    CharacteristicName,
    FamilyName,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distributions.stats.random_source import RandomSource


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return

    GEOMETRIC_DOC = """
    Geometric distribution: number of failures before the first success.

    Probability mass function:
        P(X = k) = p (1-p)^k, k = 0, 1, ...
    """

    def pmf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Prob, parameters)
        p = parameters.prob
        if not float(x).is_integer() or x < 0:
            return 0.0
        return p * (1.0 - p) ** x

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Prob, parameters)
        if math.isnan(x):
            return math.nan
        if x < 0:
            return 0.0
        if math.isinf(x):
            return 1.0
        return 1.0 - (1.0 - parameters.prob) ** (math.floor(x) + 1)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Prob, parameters)
        return (1.0 - parameters.prob) / parameters.prob

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Prob, parameters)
        return (1.0 - parameters.prob) / parameters.prob**2

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Prob, parameters)
        p = parameters.prob
        if p == 1:
            raise IndeterminateError(CharacteristicName.SKEW, "distribution is degenerate")
        return (2.0 - p) / math.sqrt(1.0 - p)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Prob, parameters)
        p = parameters.prob
        if p == 1:
            raise IndeterminateError(CharacteristicName.KURT, "distribution is degenerate")
        excess_kurtosis = 6.0 + p**2 / (1.0 - p)
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0)

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_Prob, parameters)
        return variates.geometric(rng, parameters.prob)

    Geometric = ParametricFamily(
        name=FamilyName.GEOMETRIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["prob"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        sampling_strategy=VariateSamplingStrategy(_variate),
        support_by_parametrization=_support,
    )
    Geometric.__doc__ = GEOMETRIC_DOC

    @parametrization(family=Geometric, name="prob")
    class _Prob(Parametrization):
        """
        Parameters
        ----------
        prob : float
            Success probability of a single trial (p)
        """

        prob: float

        @constraint(description="0 < prob <= 1")
        def check_prob_in_range(self) -> bool:
            return 0 < self.prob <= 1

    ParametricFamilyRegister.register(Geometric)
