"""
Distribution Supports
=====================

- :class:`ContinuousSupport` — an interval on the real line.
- :class:`IntegerLatticeDiscreteSupport` — integers ``{residue + n * modulus}``,
  optionally bounded by ``min_k`` and ``max_k``.

Discrete supports provide ordered traversal, used by the discrete families to
enumerate their finite sampling and entropy domains.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_numerics.types import BoolArray, Interval1D, Number, NumericArray

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
    residue: int
    modulus: int
    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError("modulus must be a positive integer.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        finite = np.isfinite(xf)
        v = np.floor(np.where(finite, xf, 0.0)).astype(np.int64)

        mask = finite & (xf == v)
        if self.min_k is not None:
            mask &= v >= self.min_k
        if self.max_k is not None:
            mask &= v <= self.max_k

        mask &= ((v - self.residue) % self.modulus) == 0

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def first(self) -> int | None:
        if self.min_k is None:
            return None
        first = self.min_k
        offset = (first - self.residue) % self.modulus
        if offset != 0:
            first = first + (self.modulus - offset)
        if self.max_k is not None and first > self.max_k:
            return None
        return first

    def last(self) -> int | None:
        if self.max_k is None:
            return None
        last = self.max_k - (self.max_k - self.residue) % self.modulus
        if self.min_k is not None and last < self.min_k:
            return None
        return last

    def iter_points(self) -> Iterator[int]:
        first = self.first()
        if first is None:
            raise RuntimeError(
                "Cannot iterate points for a left-unbounded IntegerLatticeDiscreteSupport. "
                "Provide min_k to enable enumeration."
            )

        def _gen() -> Iterator[int]:
            current = first
            while self.max_k is None or current <= self.max_k:
                yield current
                current += self.modulus

        return _gen()

    def truncated(self, max_k: int) -> IntegerLatticeDiscreteSupport:
        """Return a copy bounded above by ``max_k`` (or the current bound)."""
        upper = max_k if self.max_k is None else min(self.max_k, max_k)
        return IntegerLatticeDiscreteSupport(
            residue=self.residue, modulus=self.modulus, min_k=self.min_k, max_k=upper
        )

    def points(self) -> NumericArray:
        """Enumerate a bounded support as an integer array."""
        if self.max_k is None:
            raise RuntimeError(
                "Cannot enumerate a right-unbounded support; call truncated() first."
            )
        return cast(NumericArray, np.fromiter(self.iter_points(), dtype=np.int64))

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
