"""
Tests for Parameter Estimators
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_numerics.errors import DomainError
from pysatl_numerics.estimation import (
    GammaMomentMatchingEstimator,
    GammaWeightedMomentMatchingEstimator,
    LogNormalMaximumLikelihoodEstimator,
    LogNormalWeightedMaximumLikelihoodEstimator,
    UniformMaximumLikelihoodEstimator,
    weighted_mean_and_variance,
)
from pysatl_numerics.types import FamilyName


class TestWeightedMoments:
    def test_uniform_weights(self):
        mean, variance = weighted_mean_and_variance([1.0, 2.0, 3.0], [1.0, 1.0, 1.0])

        assert mean == pytest.approx(2.0)
        assert variance == pytest.approx(2.0 / 3.0)

    def test_zero_weights_are_ignored(self):
        mean, variance = weighted_mean_and_variance([1.0, 3.0, np.nan], [1.0, 1.0, 0.0])

        assert mean == pytest.approx(2.0)
        assert variance == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "values, weights",
        [
            ([1.0, 2.0], [1.0]),
            ([1.0, 2.0], [1.0, -1.0]),
            ([1.0, 2.0], [0.0, 0.0]),
        ],
    )
    def test_invalid_weights(self, values, weights):
        with pytest.raises(DomainError):
            weighted_mean_and_variance(values, weights)


class TestGammaEstimators:
    def test_from_moments(self):
        dist = GammaMomentMatchingEstimator.from_moments(4.0, 8.0)

        assert dist.family_name == FamilyName.GAMMA
        assert dist.parameters.parameters == {"shape": 2.0, "scale": 2.0}

    @pytest.mark.parametrize("mean, variance", [(0.0, 1.0), (1.0, 0.0), (-1.0, 2.0)])
    def test_from_moments_requires_positive_moments(self, mean, variance):
        with pytest.raises(DomainError):
            GammaMomentMatchingEstimator.from_moments(mean, variance)

    def test_learn_uses_unbiased_variance(self):
        data = [1.0, 2.0, 3.0, 6.0]
        dist = GammaMomentMatchingEstimator().learn(data)

        assert dist.mean() == pytest.approx(np.mean(data))
        assert dist.variance() == pytest.approx(np.var(data, ddof=1))

    def test_learn_recovers_parameters(self, rng):
        data = rng.gamma(3.0, 2.0, size=50000)
        params = GammaMomentMatchingEstimator().learn(data).parameters

        assert params.shape == pytest.approx(3.0, rel=0.05)
        assert params.scale == pytest.approx(2.0, rel=0.05)

    def test_learn_requires_two_observations(self):
        with pytest.raises(DomainError):
            GammaMomentMatchingEstimator().learn([1.0])

    def test_weighted_learn(self):
        values = [1.0, 2.0, 3.0, 6.0]
        weights = [1.0, 2.0, 1.0, 0.5]
        mean, variance = weighted_mean_and_variance(values, weights)
        dist = GammaWeightedMomentMatchingEstimator().learn(values, weights)

        assert dist.mean() == pytest.approx(mean)
        assert dist.variance() == pytest.approx(variance)


class TestLogNormalEstimators:
    def test_learn(self):
        data = np.exp([0.0, 1.0, 2.0])
        params = LogNormalMaximumLikelihoodEstimator().learn(data).parameters

        assert params.log_normal_mean == pytest.approx(1.0)
        assert params.log_normal_variance == pytest.approx(1.0)

    def test_learn_rejects_non_positive_values(self):
        with pytest.raises(DomainError):
            LogNormalMaximumLikelihoodEstimator().learn([1.0, 0.0, 2.0])

    def test_weighted_learn_drops_non_positive_values(self):
        values = [np.e, -5.0, np.e**3, 0.0]
        weights = [1.0, 10.0, 1.0, 3.0]
        params = LogNormalWeightedMaximumLikelihoodEstimator().learn(values, weights).parameters

        assert params.log_normal_mean == pytest.approx(2.0)
        assert params.log_normal_variance == pytest.approx(1.0)


class TestUniformEstimator:
    def test_learn_widens_range(self):
        dist = UniformMaximumLikelihoodEstimator().learn([-2.0, 1.0, 4.0, 0.0])

        assert dist.family_name == FamilyName.CONTINUOUS_UNIFORM
        assert dist.parameters.lower_bound == pytest.approx(-2.5)
        assert dist.parameters.upper_bound == pytest.approx(5.0)

    def test_single_observation(self):
        dist = UniformMaximumLikelihoodEstimator().learn([2.0])

        assert dist.parameters.lower_bound == pytest.approx(0.0)
        assert dist.parameters.upper_bound == pytest.approx(4.0)

    def test_empty_data(self):
        with pytest.raises(DomainError):
            UniformMaximumLikelihoodEstimator().learn([])
