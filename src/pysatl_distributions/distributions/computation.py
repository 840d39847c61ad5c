"""
Computation Primitives
======================

This module defines the building blocks used to compute distribution
characteristics:

- :class:`Computation` — callable for a single characteristic.
- :class:`AnalyticalComputation` — an analytical callable provided by a
  distribution family directly.

Notes
-----
- All callables are **scalar** (``float -> float``) in the univariate case.
  Element-wise evaluation over arrays is done by the distribution.
- ``**options`` are free-form and forwarded to the callable (e.g. the
  ``excess`` flag of the kurtosis).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from mypy_extensions import KwArg

from pysatl_distributions.types import (
    GenericCharacteristicName,
)


@runtime_checkable
class Computation[In, Out](Protocol):
    """Callable for a single characteristic.

    Attributes
    ----------
    target : str
        The characteristic name this computation represents.

    Methods
    -------
    __call__(data, **options)
        Evaluate the characteristic at ``data``.
    """

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided by a distribution family.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable, usually a family function with the parameters
        already bound.

    Notes
    -----
    Moments ignore ``data``; they are evaluated as ``computation(None)``.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


__all__ = ["Computation", "AnalyticalComputation"]
