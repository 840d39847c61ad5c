"""
Weibull distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_distributions.distributions.strategies import VariateSamplingStrategy
from pysatl_distributions.distributions.support import ContinuousSupport
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
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distributions.stats.random_source import RandomSource


def _log_raw_moments(shape: float, orders: int) -> list[float]:
    """``ln Γ(1 + i/k)`` for ``i = 1..orders``: log raw moments of the unit-scale Weibull."""
    return [math.lgamma(1.0 + i / shape) for i in range(1, orders + 1)]


def _exp_or_inf(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _relative_variance(l1: float, l2: float) -> float:
    """``Var / E[X²] = 1 - Γ(1 + 1/k)² / Γ(1 + 2/k)``."""
    return -math.expm1(2.0 * l1 - l2)


def configure_weibull_family() -> None:
    """
    Configure and register the Weibull distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.WEIBULL):
        return

    WEIBULL_DOC = """
    Weibull distribution with scale λ and shape k.

    Probability density function:
        f(x) = (k/λ) (x/λ)^(k-1) exp(-(x/λ)^k) for x ≥ 0

    Cumulative distribution function:
        F(x) = 1 - exp(-(x/λ)^k)
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_ScaleShape, parameters)
        lam, k = parameters.scale, parameters.shape
        if x < 0 or math.isinf(x):
            return 0.0
        if x == 0:
            if k < 1:
                return math.inf
            return 1.0 / lam if k == 1 else 0.0
        z = x / lam
        return k / lam * z ** (k - 1.0) * math.exp(-(z**k))

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_ScaleShape, parameters)
        if x <= 0:
            return 0.0
        return -math.expm1(-((x / parameters.scale) ** parameters.shape))

    def ppf(parameters: Parametrization, p: float) -> float:
        """
        Percent point function ``λ(-ln(1 - p))^(1/k)``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        if p < 0 or p > 1:
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_ScaleShape, parameters)
        if p == 1:
            return math.inf
        return parameters.scale * (-math.log1p(-p)) ** (1.0 / parameters.shape)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ScaleShape, parameters)
        (l1,) = _log_raw_moments(parameters.shape, 1)
        return _exp_or_inf(math.log(parameters.scale) + l1)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ScaleShape, parameters)
        l1, l2 = _log_raw_moments(parameters.shape, 2)
        second_moment = _exp_or_inf(2.0 * math.log(parameters.scale) + l2)
        return second_moment * _relative_variance(l1, l2)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Third central moment factored as ``E[X³] (1 - 3·g1·g2/g3 + 2·g1³/g3)``."""
        parameters = cast(_ScaleShape, parameters)
        l1, l2, l3 = _log_raw_moments(parameters.shape, 3)
        spread = _exp_or_inf(l3 - 1.5 * l2) / _relative_variance(l1, l2) ** 1.5
        return spread * (1.0 - 3.0 * math.exp(l1 + l2 - l3) + 2.0 * math.exp(3.0 * l1 - l3))

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_ScaleShape, parameters)
        l1, l2, l3, l4 = _log_raw_moments(parameters.shape, 4)
        spread = _exp_or_inf(l4 - 2.0 * l2) / _relative_variance(l1, l2) ** 2
        kurtosis = spread * (
            1.0
            - 4.0 * math.exp(l1 + l3 - l4)
            + 6.0 * math.exp(2.0 * l1 + l2 - l4)
            - 3.0 * math.exp(4.0 * l1 - l4)
        )
        return kurtosis - 3.0 if excess else kurtosis

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _variate(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_ScaleShape, parameters)
        return variates.weibull(rng, parameters.scale, parameters.shape)

    Weibull = ParametricFamily(
        name=FamilyName.WEIBULL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["scaleShape"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        sampling_strategy=VariateSamplingStrategy(_variate),
        support_by_parametrization=_support,
    )
    Weibull.__doc__ = WEIBULL_DOC

    @parametrization(family=Weibull, name="scaleShape")
    class _ScaleShape(Parametrization):
        """
        Parameters
        ----------
        scale : float
            Scale (λ)
        shape : float
            Shape (k)
        """

        scale: float
        shape: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

    ParametricFamilyRegister.register(Weibull)
