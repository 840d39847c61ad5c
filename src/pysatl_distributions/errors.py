"""
Exceptions
==========

Exception hierarchy shared by parametrizations, special functions and
random-variate generators.

- :class:`InvalidParameterError` — a parametrization constraint does not hold.
- :class:`IndeterminateError` — a characteristic is mathematically undefined
  for otherwise valid parameters (e.g. the mean of a Cauchy distribution).
- :class:`NumericalNonConvergenceError` — an iterative evaluator or a
  rejection loop exceeded its configured limit.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DistributionError(Exception):
    """Base class for all errors raised by the library."""


class InvalidParameterError(DistributionError, ValueError):
    """
    Raised when distribution parameters violate a family constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the violated constraint.
    """

    def __init__(self, description: str) -> None:
        super().__init__(f'Constraint "{description}" does not hold')
        self.description = description


class IndeterminateError(DistributionError, ArithmeticError):
    """
    Raised when a characteristic does not exist for the given parameters.

    Parameters
    ----------
    characteristic : str
        Name of the undefined characteristic (e.g. ``"mean"``).
    reason : str, optional
        Additional explanation.
    """

    def __init__(self, characteristic: str, reason: str | None = None) -> None:
        message = f"{characteristic} is undefined"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.characteristic = characteristic


class NumericalNonConvergenceError(DistributionError, ArithmeticError):
    """
    Raised when an iterative computation does not converge within its limit.

    Parameters
    ----------
    routine : str
        Name of the routine that failed.
    iterations : int
        Number of iterations performed before giving up.
    """

    def __init__(self, routine: str, iterations: int) -> None:
        super().__init__(f"{routine} did not converge after {iterations} iterations")
        self.routine = routine
        self.iterations = iterations


__all__ = [
    "DistributionError",
    "InvalidParameterError",
    "IndeterminateError",
    "NumericalNonConvergenceError",
]
