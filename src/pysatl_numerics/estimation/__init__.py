"""
Estimation subpackage

Closed-form estimators learning built-in family distributions from data.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .estimators import (
    DistributionEstimator,
    GammaMomentMatchingEstimator,
    GammaWeightedMomentMatchingEstimator,
    LogNormalMaximumLikelihoodEstimator,
    LogNormalWeightedMaximumLikelihoodEstimator,
    UniformMaximumLikelihoodEstimator,
    WeightedDistributionEstimator,
    weighted_mean_and_variance,
)

__all__ = [
    "DistributionEstimator",
    "WeightedDistributionEstimator",
    "GammaMomentMatchingEstimator",
    "GammaWeightedMomentMatchingEstimator",
    "LogNormalMaximumLikelihoodEstimator",
    "LogNormalWeightedMaximumLikelihoodEstimator",
    "UniformMaximumLikelihoodEstimator",
    "weighted_mean_and_variance",
]
