"""
Binomial distribution family implementation.
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
from pysatl_distributions.stats.special import (
    log_binomial_coefficient,
    regularized_incomplete_beta,
)
from pysatl_distributions.types import (
    CharacteristicName,
    FamilyName,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distributions.stats.random_source import RandomSource


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution.

    Number of successes in n independent trials with success probability p.

    Probability mass function:
        P(X = k) = C(n, k) p^k (1-p)^(n-k), k = 0, 1, ..., n

    The number of trials is floored to an integer on construction. Variates
    are drawn by inversion for small n·p and by the BTPE algorithm otherwise.
    """

    def pmf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_TrialsProb, parameters)
        n, p = parameters.trials, parameters.prob
        if not float(x).is_integer() or x < 0 or x > n:
            return 0.0
        if p == 1:
            return 1.0 if x == n else 0.0
        return math.exp(
            log_binomial_coefficient(n, x) + x * math.log(p) + (n - x) * math.log1p(-p)
        )

    def cdf(parameters: Parametrization, x: float) -> float:
        """``P(X <= x) = I_{1-p}(n - k, k + 1)`` with ``k = floor(x)``."""
        parameters = cast(_TrialsProb, parameters)
        n, p = parameters.trials, parameters.prob
        if math.isnan(x):
            return math.nan
        if x < 0:
            return 0.0
        if x >= n:
            return 1.0
        k = math.floor(x)
        return regularized_incomplete_beta(n - k, k + 1.0, 1.0 - p)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_TrialsProb, parameters)
        return parameters.trials * parameters.prob

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_TrialsProb, parameters)
        return parameters.trials * parameters.prob * (1.0 - parameters.prob)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_TrialsProb, parameters)
        p = parameters.prob
        npq = parameters.trials * p * (1.0 - p)
        if npq == 0:
            raise IndeterminateError(CharacteristicName.SKEW, "distribution is degenerate")
        return (1.0 - 2.0 * p) / math.sqrt(npq)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_TrialsProb, parameters)
        p = parameters.prob
        pq = p * (1.0 - p)
        if pq == 0:
            raise IndeterminateError(CharacteristicName.KURT, "distribution is degenerate")
        excess_kurtosis = (1.0 - 6.0 * pq) / (parameters.trials * pq)
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(parameters: Parametrization) -> IntegerLatticeDiscreteSupport:
        parameters = cast(_TrialsProb, parameters)
        return IntegerLatticeDiscreteSupport(min_k=0, max_k=int(parameters.trials))

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_TrialsProb, parameters)
        return variates.binomial(rng, int(parameters.trials), parameters.prob)

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["trialsProb"],
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
    Binomial.__doc__ = BINOMIAL_DOC

    @parametrization(family=Binomial, name="trialsProb")
    class _TrialsProb(Parametrization):
        """
        Parameters
        ----------
        trials : int
            Number of trials (n), floored on construction
        prob : float
            Success probability of a single trial (p)
        """

        trials: int
        prob: float

        def __post_init__(self) -> None:
            if isinstance(self.trials, int | float) and math.isfinite(self.trials):
                object.__setattr__(self, "trials", math.floor(self.trials))

        @constraint(description="trials >= 1")
        def check_trials_positive(self) -> bool:
            return 1 <= self.trials < math.inf

        @constraint(description="0 < prob <= 1")
        def check_prob_in_range(self) -> bool:
            return 0 < self.prob <= 1

    ParametricFamilyRegister.register(Binomial)
