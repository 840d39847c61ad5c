"""
Supports
========

Sets on which distributions place their probability mass:

- :class:`ContinuousSupport` — a 1D interval.
- :class:`IntegerLatticeDiscreteSupport` — consecutive integers within
  optional bounds (``{0, 1, ..., n}`` for the Binomial,
  ``{0, 1, ...}`` for Poisson-like families).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import itertools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_distributions.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[Number]: ...


@dataclass(slots=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Consecutive integers within optional inclusive bounds ``[min_k, max_k]``.

    Parameters
    ----------
    min_k, max_k : int or None
        Inclusive bounds; ``None`` means unbounded on that side.
    """

    min_k: int | None = None
    max_k: int | None = None

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        finite = np.isfinite(xf)
        v = np.floor(np.where(finite, xf, 0.0))

        mask = finite & (xf == v)
        if self.min_k is not None:
            mask &= v >= self.min_k
        if self.max_k is not None:
            mask &= v <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_empty(self) -> bool:
        return self.min_k is not None and self.max_k is not None and self.min_k > self.max_k

    def first(self) -> int | None:
        """Smallest point, ``None`` when unbounded below or empty."""
        if self.min_k is None or self.is_empty:
            return None
        return self.min_k

    def last(self) -> int | None:
        """Largest point, ``None`` when unbounded above or empty."""
        if self.max_k is None or self.is_empty:
            return None
        return self.max_k

    def iter_points(self) -> Iterator[int]:
        """
        Iterate points in increasing order.

        Raises
        ------
        RuntimeError
            If the lattice has no lower bound.
        """
        if self.min_k is None:
            raise RuntimeError(
                "Cannot iterate points of a left-unbounded IntegerLatticeDiscreteSupport. "
                "Provide min_k to enable enumeration."
            )
        if self.max_k is not None:
            return iter(range(self.min_k, self.max_k + 1))
        return itertools.count(self.min_k)

    @property
    def is_left_bounded(self) -> bool:
        return self.min_k is not None

    @property
    def is_right_bounded(self) -> bool:
        return self.max_k is not None

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
