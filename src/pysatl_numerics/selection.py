"""
Order-Statistic Selection
=========================

Quickselect over an index permutation:

- :func:`find_kth_largest` — partially orders an index permutation so that
  position ``k`` holds the k-th order statistic;
- :func:`order_statistic` — the k-th smallest value itself;
- :func:`percentile` — linearly interpolated percentile built on the
  partition invariant.

Notes
-----
- The data sequence is never mutated; only the returned permutation is.
  Independent calls over the same data may therefore run concurrently.
- Selection runs in O(N) on average. Median-of-three pivoting does not
  protect against adversarial inputs, which degrade it to O(N^2).

References
----------
W. H. Press et al., *Numerical Recipes*, 3rd ed., 2007, p. 1104 (``selecti``).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_numerics.errors import DomainError, RankOutOfRangeError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_numerics.types import Comparator, IndexArray


def _natural_order(a: Any, b: Any) -> int:
    return int(a > b) - int(a < b)


def find_kth_largest(
    k: int,
    data: Sequence[Any],
    comparator: Comparator | None = None,
) -> IndexArray:
    """
    Partially order an index permutation around rank ``k``.

    Parameters
    ----------
    k : int
        Zero-based rank to place.
    data : Sequence
        Values to rank. Not modified.
    comparator : Callable[[Any, Any], int | float], optional
        Three-way comparator; natural ordering when omitted.

    Returns
    -------
    IndexArray
        Permutation ``index`` of ``0..N-1`` such that for all ``i < k < j``
        ``data[index[i]] <= data[index[k]] <= data[index[j]]`` under the
        comparator. The two sides are not sorted internally.

    Raises
    ------
    RankOutOfRangeError
        If ``k`` is outside ``[0, N-1]``.
    """
    compare = _natural_order if comparator is None else comparator
    num = len(data)
    if not 0 <= k < num:
        raise RankOutOfRangeError(f"k must be in [0, {num - 1}], got {k}")

    indices = list(range(num))

    def swap_if_greater(a: int, b: int) -> None:
        if compare(data[indices[a]], data[indices[b]]) > 0:
            indices[a], indices[b] = indices[b], indices[a]

    left = 0
    right = num - 1
    while True:
        if right <= left + 1:
            if right == left + 1:
                swap_if_greater(left, right)
            return np.asarray(indices, dtype=np.intp)

        # median of three ends up at left + 1, with sentinels at left and right
        mid = (left + right) // 2
        indices[mid], indices[left + 1] = indices[left + 1], indices[mid]
        swap_if_greater(left, right)
        swap_if_greater(left + 1, right)
        swap_if_greater(left, left + 1)

        i = left + 1
        j = right
        pivot_index = indices[i]
        pivot = data[pivot_index]
        while True:
            i += 1
            while compare(data[indices[i]], pivot) < 0:
                i += 1
            j -= 1
            while compare(data[indices[j]], pivot) > 0:
                j -= 1
            if j < i:
                break
            indices[i], indices[j] = indices[j], indices[i]

        indices[left + 1] = indices[j]
        indices[j] = pivot_index

        if j >= k:
            right = j - 1
        if j <= k:
            left = i


def order_statistic(
    data: Sequence[Any],
    k: int,
    comparator: Comparator | None = None,
) -> Any:
    """Return the ``k``-th smallest element of ``data`` (zero-based)."""
    indices = find_kth_largest(k, data, comparator)
    return data[int(indices[k])]


def percentile(data: Sequence[float], fraction: float) -> float:
    """
    Percentile of numeric data with linear interpolation.

    The position ``fraction * (N - 1)`` is split into an integer rank ``k``
    and a remainder. The value at rank ``k + 1`` is the minimum of the right
    partition left by :func:`find_kth_largest`.

    Parameters
    ----------
    data : Sequence[float]
        Non-empty numeric data.
    fraction : float
        Percentile as a fraction in ``[0, 1]``.

    Raises
    ------
    DomainError
        If ``fraction`` is outside ``[0, 1]``.
    RankOutOfRangeError
        If ``data`` is empty.
    """
    if not 0.0 <= fraction <= 1.0:
        raise DomainError(f"fraction must be in [0, 1], got {fraction}")

    num = len(data)
    position = fraction * (num - 1)
    k = max(math.floor(position), 0)
    indices = find_kth_largest(k, data)

    lower = float(data[int(indices[k])])
    remainder = position - k
    if remainder <= 0.0 or k + 1 >= num:
        return lower

    upper = min(float(data[int(index)]) for index in indices[k + 1 :])
    return lower + remainder * (upper - lower)


__all__ = [
    "find_kth_largest",
    "order_statistic",
    "percentile",
]
