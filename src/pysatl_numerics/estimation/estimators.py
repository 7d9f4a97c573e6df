"""
Parameter Estimators
====================

Closed-form estimators that learn a distribution of a built-in family from
observed data:

- :class:`GammaMomentMatchingEstimator` and its weighted variant;
- :class:`LogNormalMaximumLikelihoodEstimator` and its weighted variant;
- :class:`UniformMaximumLikelihoodEstimator`.

Notes
-----
- The unweighted sample variance is unbiased (``ddof=1``).
- The weighted variance is the weight-normalised second central moment.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_numerics.errors import DomainError
from pysatl_numerics.families.configuration import configure_families_register
from pysatl_numerics.families.registry import ParametricFamilyRegister
from pysatl_numerics.types import FamilyName

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_numerics.families.distribution import ParametricFamilyDistribution
    from pysatl_numerics.families.parametric_family import ParametricFamily
    from pysatl_numerics.types import NumericArray

    type Data = Sequence[float] | NumericArray


class DistributionEstimator(Protocol):
    """Learns a distribution from a collection of observations."""

    def learn(self, data: Data) -> ParametricFamilyDistribution: ...


class WeightedDistributionEstimator(Protocol):
    """Learns a distribution from observations paired with non-negative weights."""

    def learn(self, values: Data, weights: Data) -> ParametricFamilyDistribution: ...


def _family(name: FamilyName) -> ParametricFamily:
    configure_families_register()
    return ParametricFamilyRegister.get(name)


def _observations(data: Data, minimum_size: int = 1) -> NumericArray:
    values = np.asarray(data, dtype=np.float64).ravel()
    if values.size < minimum_size:
        raise DomainError(f"At least {minimum_size} observation(s) required, got {values.size}")
    return values


def _weighted_observations(values: Data, weights: Data) -> tuple[NumericArray, NumericArray]:
    values_arr = np.asarray(values, dtype=np.float64).ravel()
    weights_arr = np.asarray(weights, dtype=np.float64).ravel()
    if values_arr.shape != weights_arr.shape:
        raise DomainError(
            f"Values and weights differ in length: {values_arr.size} != {weights_arr.size}"
        )
    if np.any(weights_arr < 0.0):
        raise DomainError("Weights must be non-negative")
    if not np.sum(weights_arr) > 0.0:
        raise DomainError("Weights must have a positive sum")
    return values_arr, weights_arr


def weighted_mean_and_variance(values: Data, weights: Data) -> tuple[float, float]:
    """
    Weighted mean and weight-normalised variance.

    Raises
    ------
    DomainError
        If the lengths differ, a weight is negative or all weights are zero.
    """
    values_arr, weights_arr = _weighted_observations(values, weights)
    # zero-weight entries may hold non-finite values
    used = weights_arr > 0.0
    values_arr, weights_arr = values_arr[used], weights_arr[used]
    mean = float(np.average(values_arr, weights=weights_arr))
    variance = float(np.average((values_arr - mean) ** 2, weights=weights_arr))
    return mean, variance


@dataclass(slots=True, frozen=True)
class GammaMomentMatchingEstimator(DistributionEstimator):
    """
    Gamma estimator matching the sample mean and variance.

    ``scale = variance / mean`` and ``shape = mean^2 / variance``.
    """

    def learn(self, data: Data) -> ParametricFamilyDistribution:
        values = _observations(data, minimum_size=2)
        return self.from_moments(float(np.mean(values)), float(np.var(values, ddof=1)))

    @staticmethod
    def from_moments(mean: float, variance: float) -> ParametricFamilyDistribution:
        """
        Gamma distribution with the given mean and variance.

        Raises
        ------
        DomainError
            If ``mean`` or ``variance`` is not positive.
        """
        if not (mean > 0.0 and variance > 0.0):
            raise DomainError(
                f"Moment matching requires positive mean and variance, got {mean}, {variance}"
            )
        return _family(FamilyName.GAMMA).distribution(
            shape=mean * mean / variance, scale=variance / mean
        )


@dataclass(slots=True, frozen=True)
class GammaWeightedMomentMatchingEstimator(WeightedDistributionEstimator):
    """Gamma estimator matching the weighted mean and variance."""

    def learn(self, values: Data, weights: Data) -> ParametricFamilyDistribution:
        mean, variance = weighted_mean_and_variance(values, weights)
        return GammaMomentMatchingEstimator.from_moments(mean, variance)


@dataclass(slots=True, frozen=True)
class LogNormalMaximumLikelihoodEstimator(DistributionEstimator):
    """LogNormal estimator from the mean and variance of the logarithms."""

    def learn(self, data: Data) -> ParametricFamilyDistribution:
        values = _observations(data, minimum_size=2)
        if np.any(values <= 0.0):
            raise DomainError("LogNormal estimation requires positive observations")
        logs = np.log(values)
        return _family(FamilyName.LOG_NORMAL).distribution(
            log_normal_mean=float(np.mean(logs)),
            log_normal_variance=float(np.var(logs, ddof=1)),
        )


@dataclass(slots=True, frozen=True)
class LogNormalWeightedMaximumLikelihoodEstimator(WeightedDistributionEstimator):
    """
    Weighted LogNormal estimator.

    Non-positive observations get weight zero and do not contribute.
    """

    def learn(self, values: Data, weights: Data) -> ParametricFamilyDistribution:
        values_arr, weights_arr = _weighted_observations(values, weights)
        positive = values_arr > 0.0
        log_values = np.log(np.where(positive, values_arr, 1.0))
        mean, variance = weighted_mean_and_variance(
            log_values, np.where(positive, weights_arr, 0.0)
        )
        return _family(FamilyName.LOG_NORMAL).distribution(
            log_normal_mean=mean, log_normal_variance=variance
        )


@dataclass(slots=True, frozen=True)
class UniformMaximumLikelihoodEstimator(DistributionEstimator):
    """
    Uniform estimator widening the sample range.

    With ``k`` observations the bounds are ``min - |min / k|`` and
    ``max + |max / k|``.
    """

    def learn(self, data: Data) -> ParametricFamilyDistribution:
        values = _observations(data)
        k = values.size
        minimum = float(np.min(values))
        maximum = float(np.max(values))
        return _family(FamilyName.CONTINUOUS_UNIFORM).distribution(
            lower_bound=minimum - abs(minimum / k), upper_bound=maximum + abs(maximum / k)
        )
