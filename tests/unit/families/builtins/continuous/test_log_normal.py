"""
Tests for LogNormal Distribution Family

This module tests the functionality of the LogNormal distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import lognorm

from pysatl_numerics.errors import DomainError
from pysatl_numerics.types import CharacteristicName, FamilyName

from ..base import BaseDistributionTest


def _scipy_lognorm(mu: float, variance: float):
    return lognorm(s=math.sqrt(variance), scale=math.exp(mu))


class TestLogNormalFamily(BaseDistributionTest):
    """Test suite for LogNormal distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.log_normal_family = self.family(FamilyName.LOG_NORMAL)
        self.dist_example = self.log_normal_family(log_normal_mean=0.5, log_normal_variance=0.25)

    def test_family_properties(self):
        """Test basic properties of LogNormal family."""
        assert self.log_normal_family.name == FamilyName.LOG_NORMAL
        assert self.log_normal_family.parametrization_names == ["standard", "logMeanStd"]

    def test_log_mean_std_parametrization(self):
        """The standard deviation is squared into the variance."""
        dist = self.log_normal_family(
            log_normal_mean=0.5, log_normal_std=0.5, parametrization_name="logMeanStd"
        )
        assert dist.base_parameters.parameters == {
            "log_normal_mean": 0.5,
            "log_normal_variance": 0.25,
        }
        assert dist.mean() == pytest.approx(self.dist_example.mean())

    @pytest.mark.parametrize(
        "params",
        [
            {"log_normal_mean": 0.0, "log_normal_variance": 0.0},
            {"log_normal_mean": 0.0, "log_normal_variance": -1.0},
        ],
    )
    def test_parametrization_constraints(self, params):
        """Test parameter constraints validation."""
        with pytest.raises(DomainError, match="log_normal_variance > 0"):
            self.log_normal_family(**params)

    def test_moments(self):
        """Mean exp(mu + var/2) and variance (exp(var) - 1) exp(2 mu + var)."""
        reference = _scipy_lognorm(0.5, 0.25)
        assert self.dist_example.mean() == pytest.approx(reference.mean())
        assert self.dist_example.variance() == pytest.approx(reference.var())

    @pytest.mark.parametrize("mu, variance", [(0.0, 1.0), (0.5, 0.25), (-1.0, 2.0)])
    def test_pdf_and_log_pdf_match_scipy(self, mu, variance):
        """Test density against scipy.stats.lognorm."""
        dist = self.log_normal_family(log_normal_mean=mu, log_normal_variance=variance)
        reference = _scipy_lognorm(mu, variance)
        x = np.array([0.05, 0.5, 1.0, 2.0, 7.5])

        np.testing.assert_allclose(
            dist.query_method(CharacteristicName.PDF)(x), reference.pdf(x), rtol=1e-10
        )
        np.testing.assert_allclose(
            dist.query_method(CharacteristicName.LOG_PDF)(x), reference.logpdf(x), rtol=1e-10
        )

    @pytest.mark.parametrize("mu, variance", [(0.0, 1.0), (0.5, 0.25), (-1.0, 2.0)])
    def test_cdf_matches_scipy(self, mu, variance):
        """The error-function CDF agrees with scipy.stats.lognorm."""
        dist = self.log_normal_family(log_normal_mean=mu, log_normal_variance=variance)
        x = np.array([0.05, 0.5, 1.0, 2.0, 7.5, 1e6])

        self.assert_arrays_almost_equal(
            dist.cdf(x), _scipy_lognorm(mu, variance).cdf(x), self.SPECIAL_FUNCTION_PRECISION
        )

    def test_non_positive_values(self):
        """Density zero, log-density -inf and CDF zero for x <= 0."""
        x = np.array([-2.0, 0.0])

        np.testing.assert_array_equal(self.dist_example.probability_function(x), [0.0, 0.0])
        np.testing.assert_array_equal(
            self.dist_example.probability_function.log_evaluate(x), [-np.inf, -np.inf]
        )
        np.testing.assert_array_equal(self.dist_example.cdf(x), [0.0, 0.0])

    def test_cdf_at_median(self):
        """The median of a LogNormal is exp(mu)."""
        assert float(self.dist_example.cdf(math.exp(0.5))) == pytest.approx(0.5, abs=1e-7)

    def test_sampling_moments(self, rng):
        """Logarithms of the draws are Gaussian with the given mean and variance."""
        sample = self.dist_example.sample(self.SAMPLE_SIZE, rng=rng)

        assert sample.shape == (self.SAMPLE_SIZE, 1)
        logs = np.log(sample.array[:, 0])
        assert logs.mean() == pytest.approx(0.5, abs=0.02)
        assert logs.var() == pytest.approx(0.25, rel=0.05)

    def test_vector_round_trip(self):
        """Test conversion to and from parameter vectors."""
        np.testing.assert_array_equal(self.dist_example.convert_to_vector(), [0.5, 0.25])

        restored = self.dist_example.convert_from_vector(np.array([1.0, 4.0]))
        assert restored.parameters.parameters == {
            "log_normal_mean": 1.0,
            "log_normal_variance": 4.0,
        }
        with pytest.raises(DomainError):
            self.dist_example.convert_from_vector([1.0, -4.0])

    def test_non_finite_inputs(self):
        """+inf has density 0 and probability 1, -inf probability 0; NaN propagates."""
        x = np.array([np.inf, -np.inf, np.nan])

        dist = self.dist_example

        np.testing.assert_array_equal(dist.probability_function(x), [0.0, 0.0, np.nan])
        np.testing.assert_array_equal(dist.cdf(x), [1.0, 0.0, np.nan])
