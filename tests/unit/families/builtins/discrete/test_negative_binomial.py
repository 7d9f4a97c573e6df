"""
Tests for NegativeBinomial Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import nbinom

from pysatl_numerics.errors import DomainError
from pysatl_numerics.families.builtins.discrete.negative_binomial import (
    negative_binomial_domain,
)
from pysatl_numerics.types import CharacteristicName, FamilyName, UnivariateDiscrete

from ..base import BaseDistributionTest


def _scipy_nbinom(r: float, p: float):
    # scipy counts failures before the n-th success, with success probability 1 - p here
    return nbinom(n=r, p=1.0 - p)


class TestNegativeBinomialFamily(BaseDistributionTest):
    """Test suite for NegativeBinomial distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.nb_family = self.family(FamilyName.NEGATIVE_BINOMIAL)
        self.dist_example = self.nb_family(r=3.0, p=0.4)

    def test_family_properties(self):
        """Test basic properties of NegativeBinomial family."""
        assert self.nb_family.name == FamilyName.NEGATIVE_BINOMIAL
        assert self.dist_example.distribution_type == UnivariateDiscrete

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"r": 0.0, "p": 0.5}, "r > 0"),
            ({"r": 2.0, "p": 1.5}, "0 <= p <= 1"),
            ({"r": 2.0, "p": -0.5}, "0 <= p <= 1"),
        ],
    )
    def test_parametrization_constraints(self, params, message):
        """Test parameter constraints validation."""
        with pytest.raises(DomainError, match=message):
            self.nb_family(**params)

    def test_moments(self):
        """Mean r p / (1 - p) and variance r p / (1 - p)^2."""
        assert self.dist_example.mean() == pytest.approx(2.0)
        assert self.dist_example.variance() == pytest.approx(10.0 / 3.0)

        reference = _scipy_nbinom(3.0, 0.4)
        assert self.dist_example.mean() == pytest.approx(reference.mean())
        assert self.dist_example.variance() == pytest.approx(reference.var())

    @pytest.mark.parametrize("r, p", [(1.0, 0.5), (3.0, 0.4), (2.5, 0.8), (10.0, 0.1)])
    def test_pmf_and_log_pmf_match_scipy(self, r, p):
        """Test mass function against scipy.stats.nbinom."""
        dist = self.nb_family(r=r, p=p)
        k = np.arange(0, 25, dtype=np.float64)
        reference = _scipy_nbinom(r, p)

        np.testing.assert_allclose(dist.probability_function(k), reference.pmf(k), rtol=1e-8)
        np.testing.assert_allclose(
            dist.probability_function.log_evaluate(k), reference.logpmf(k), rtol=1e-8
        )

    @pytest.mark.parametrize("r, p", [(1.0, 0.5), (3.0, 0.4), (2.5, 0.8), (10.0, 0.1)])
    def test_cdf_matches_scipy(self, r, p):
        """The incomplete-Beta CDF agrees with scipy.stats.nbinom."""
        dist = self.nb_family(r=r, p=p)
        k = np.array([0.0, 1.0, 2.5, 4.0, 10.0, 30.0])

        self.assert_arrays_almost_equal(
            dist.cdf(k), _scipy_nbinom(r, p).cdf(k), self.SPECIAL_FUNCTION_PRECISION
        )

    def test_values_outside_support(self):
        """Mass is zero for negative and non-integer values; the CDF is zero below 0."""
        x = np.array([-1.0, 0.5, 2.5])

        np.testing.assert_array_equal(self.dist_example.probability_function(x), [0.0, 0.0, 0.0])
        assert float(self.dist_example.cdf(-0.5)) == 0.0
        assert float(self.dist_example.cdf(np.inf)) == 1.0

    def test_pmf_sums_to_cdf(self):
        """Cumulative sums of the mass function reproduce the CDF."""
        k = np.arange(0, 15, dtype=np.float64)
        cumulative = np.cumsum(self.dist_example.probability_function(k))
        self.assert_arrays_almost_equal(
            self.dist_example.cdf(k), cumulative, self.SPECIAL_FUNCTION_PRECISION
        )

    def test_degenerate_p_zero(self):
        """p = 0 puts all mass at zero."""
        dist = self.nb_family(r=2.0, p=0.0)

        np.testing.assert_array_equal(dist.probability_function(np.array([0.0, 1.0])), [1.0, 0.0])
        assert dist.mean() == 0.0
        assert float(dist.cdf(0.0)) == 1.0

    def test_p_one_has_infinite_moments(self):
        """p = 1 never stops: infinite mean, no finite sampling domain."""
        dist = self.nb_family(r=2.0, p=1.0)

        assert math.isinf(dist.mean())
        assert math.isinf(dist.variance())
        with pytest.raises(DomainError):
            dist.sample(3)

    def test_domain(self):
        """The finite domain runs from 0 to ceil(10 * mean + 10)."""
        domain = negative_binomial_domain(3.0, 0.4)
        assert domain[0] == 0
        assert domain[-1] == 30
        assert domain.size == 31

    def test_entropy(self):
        """Entropy in bits over the finite domain."""
        entropy = self.dist_example.calculate_characteristic(CharacteristicName.ENTROPY, None)
        assert entropy == pytest.approx(_scipy_nbinom(3.0, 0.4).entropy() / np.log(2.0), rel=1e-4)

    def test_sampling(self, rng):
        """Draws are non-negative integers matching the mean and variance."""
        sample = self.dist_example.sample(self.SAMPLE_SIZE, rng=rng)

        assert sample.shape == (self.SAMPLE_SIZE, 1)
        assert sample.array.dtype == np.int64
        values = sample.array[:, 0]
        assert np.all(values >= 0)
        assert values.mean() == pytest.approx(2.0, rel=0.05)
        assert values.var() == pytest.approx(10.0 / 3.0, rel=0.1)

    def test_vector_round_trip(self):
        """Test conversion to and from parameter vectors."""
        np.testing.assert_array_equal(self.dist_example.convert_to_vector(), [3.0, 0.4])
        restored = self.dist_example.convert_from_vector([1.5, 0.25])
        assert restored.parameters.parameters == {"r": 1.5, "p": 0.25}

    def test_log_likelihood(self):
        """Log-likelihood matches scipy and is -inf for impossible counts."""
        data = [0, 1, 2, 5, 3]
        expected = _scipy_nbinom(3.0, 0.4).logpmf(data).sum()

        assert self.dist_example.log_likelihood(data) == pytest.approx(expected, rel=1e-8)
        assert self.dist_example.log_likelihood([1, -1]) == -np.inf
