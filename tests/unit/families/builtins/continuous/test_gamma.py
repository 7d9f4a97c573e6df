"""
Tests for Gamma Distribution Family

This module tests the functionality of the Gamma distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import gamma

from pysatl_numerics.errors import DomainError, NonConvergenceError
from pysatl_numerics.families.builtins.continuous.gamma import sample_gamma
from pysatl_numerics.types import (
    CharacteristicName,
    ContinuousSupportShape1D,
    FamilyName,
    UnivariateContinuous,
)

from ..base import BaseDistributionTest


class TestGammaFamily(BaseDistributionTest):
    """Test suite for Gamma distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.gamma_family = self.family(FamilyName.GAMMA)
        self.gamma_dist_example = self.gamma_family(shape=2.0, scale=2.0)

    def test_family_properties(self):
        """Test basic properties of Gamma family."""
        assert self.gamma_family.name == FamilyName.GAMMA
        assert self.gamma_family.parametrization_names == ["standard", "shapeRate"]
        assert self.gamma_family.base_parametrization_name == "standard"

    def test_standard_parametrization_creation(self):
        """Test creation of distribution with standard parametrization."""
        dist = self.gamma_family(shape=2.0, scale=3.0)

        assert dist.family_name == FamilyName.GAMMA
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters.parameters == {"shape": 2.0, "scale": 3.0}
        assert dist.parametrization_name == "standard"

    def test_shape_rate_parametrization_converts_to_scale(self):
        """Test that the rate is the inverse of the scale."""
        dist = self.gamma_family(shape=3.0, rate=4.0, parametrization_name="shapeRate")

        assert dist.base_parameters.parameters == {"shape": 3.0, "scale": 0.25}
        assert dist.mean() == pytest.approx(0.75)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"shape": 0.0, "scale": 1.0}, "shape > 0"),
            ({"shape": 1.0, "scale": -1.0}, "scale > 0"),
            ({"shape": float("nan"), "scale": 1.0}, "shape > 0"),
        ],
    )
    def test_parametrization_constraints(self, params, message):
        """Test parameter constraints validation."""
        with pytest.raises(DomainError, match=message):
            self.gamma_family(**params)

    def test_moments(self):
        """Gamma(shape=2, scale=2) has mean 4 and variance 8."""
        assert self.gamma_dist_example.mean() == pytest.approx(4.0)
        assert self.gamma_dist_example.variance() == pytest.approx(8.0)

    def test_analytical_computations_availability(self):
        """Test that analytical computations are available for Gamma distribution."""
        comp = self.gamma_dist_example.analytical_computations

        assert set(comp.keys()) == {
            CharacteristicName.PDF,
            CharacteristicName.LOG_PDF,
            CharacteristicName.CDF,
            CharacteristicName.MEAN,
            CharacteristicName.VAR,
        }

    @pytest.mark.parametrize("shape, scale", [(0.5, 1.0), (1.0, 2.0), (2.0, 2.0), (7.5, 0.3)])
    def test_pdf_and_log_pdf_match_scipy(self, shape, scale):
        """Test density against scipy.stats.gamma."""
        dist = self.gamma_family(shape=shape, scale=scale)
        x = np.array([0.01, 0.5, 1.0, 2.5, 4.0, 10.0])

        pdf = dist.query_method(CharacteristicName.PDF)(x)
        log_pdf = dist.query_method(CharacteristicName.LOG_PDF)(x)

        np.testing.assert_allclose(pdf, gamma.pdf(x, a=shape, scale=scale), rtol=1e-8)
        np.testing.assert_allclose(log_pdf, gamma.logpdf(x, a=shape, scale=scale), rtol=1e-8)

    @pytest.mark.parametrize("shape, scale", [(0.5, 1.0), (1.0, 2.0), (2.0, 2.0), (7.5, 0.3)])
    def test_cdf_matches_scipy(self, shape, scale):
        """Test the incomplete-Gamma CDF against scipy.stats.gamma."""
        dist = self.gamma_family(shape=shape, scale=scale)
        x = np.array([0.01, 0.5, 1.0, 2.5, 4.0, 10.0])

        self.assert_arrays_almost_equal(
            dist.cdf(x), gamma.cdf(x, a=shape, scale=scale), self.SPECIAL_FUNCTION_PRECISION
        )

    def test_values_outside_support(self):
        """Density is zero, log-density -inf and CDF zero for x <= 0."""
        x = np.array([-1.0, 0.0])

        np.testing.assert_array_equal(self.gamma_dist_example.probability_function(x), [0.0, 0.0])
        np.testing.assert_array_equal(
            self.gamma_dist_example.probability_function.log_evaluate(x), [-np.inf, -np.inf]
        )
        np.testing.assert_array_equal(self.gamma_dist_example.cdf(x), [0.0, 0.0])

    def test_scalar_input(self):
        """Characteristics accept scalars."""
        value = self.gamma_dist_example.probability_function(1.0)
        assert float(value) == pytest.approx(gamma.pdf(1.0, a=2.0, scale=2.0))

    def test_cdf_derivative_is_pdf(self):
        """The CDF view differentiates to the density view."""
        x = np.array([0.5, 3.0])
        np.testing.assert_allclose(
            self.gamma_dist_example.cdf.differentiate(x),
            self.gamma_dist_example.probability_function(x),
        )

    def test_support(self):
        """Test support of Gamma distribution."""
        support = self.gamma_dist_example.support
        assert support.shape == ContinuousSupportShape1D.RAY_RIGHT
        assert 0.0 not in support
        assert 1e-9 in support

    @pytest.mark.parametrize("shape, scale", [(0.4, 1.5), (1.0, 1.0), (2.0, 2.0), (3.7, 0.5)])
    def test_sampling_moments(self, shape, scale, rng):
        """Sample mean and variance approach shape*scale and shape*scale^2."""
        dist = self.gamma_family(shape=shape, scale=scale)
        sample = dist.sample(self.SAMPLE_SIZE, rng=rng)

        assert sample.shape == (self.SAMPLE_SIZE, 1)
        values = sample.array[:, 0]
        assert np.all(values > 0.0)
        assert values.mean() == pytest.approx(shape * scale, rel=0.05)
        assert values.var() == pytest.approx(shape * scale**2, rel=0.15)

    def test_sampling_is_reproducible(self):
        """Equal seeds give equal draws."""
        first = self.gamma_dist_example.sample(10, rng=np.random.default_rng(3)).array
        second = self.gamma_dist_example.sample(10, rng=np.random.default_rng(3)).array
        np.testing.assert_array_equal(first, second)

    def test_sampler_iteration_cap(self, rng):
        """The rejection step raises once it runs out of attempts."""
        with pytest.raises(NonConvergenceError) as info:
            sample_gamma(0.5, 1.0, rng, 5, max_iterations=0)
        assert info.value.context["max_iterations"] == 0

    def test_vector_round_trip(self):
        """Test conversion to and from parameter vectors."""
        vector = self.gamma_dist_example.convert_to_vector()
        np.testing.assert_array_equal(vector, [2.0, 2.0])

        restored = self.gamma_dist_example.convert_from_vector([3.0, 0.5])
        assert restored.parameters.parameters == {"shape": 3.0, "scale": 0.5}

        with pytest.raises(DomainError):
            self.gamma_dist_example.convert_from_vector([3.0])

    def test_log_likelihood(self):
        """Log-likelihood sums log-densities and is -inf off the support."""
        data = [0.5, 1.5, 4.0]
        expected = gamma.logpdf(data, a=2.0, scale=2.0).sum()

        assert self.gamma_dist_example.log_likelihood(data) == pytest.approx(expected)
        assert self.gamma_dist_example.log_likelihood([]) == 0.0
        assert self.gamma_dist_example.log_likelihood([1.0, -1.0]) == -np.inf

    def test_with_parameters_validates(self):
        """Replacing parameters builds a new validated instance."""
        changed = self.gamma_dist_example.with_parameters(scale=5.0)
        assert changed.parameters.parameters == {"shape": 2.0, "scale": 5.0}
        assert self.gamma_dist_example.parameters.parameters == {"shape": 2.0, "scale": 2.0}

        with pytest.raises(DomainError):
            self.gamma_dist_example.with_parameters(shape=-1.0)

    def test_non_finite_inputs(self):
        """+inf has density 0 and probability 1, -inf probability 0; NaN propagates."""
        x = np.array([np.inf, -np.inf, np.nan])

        dist = self.gamma_dist_example

        np.testing.assert_array_equal(dist.probability_function(x), [0.0, 0.0, np.nan])
        np.testing.assert_array_equal(dist.cdf(x), [1.0, 0.0, np.nan])
        log_density = dist.probability_function.log_evaluate(x)
        np.testing.assert_array_equal(log_density, [-np.inf, -np.inf, np.nan])

    def test_out_of_domain_parameters_cannot_be_constructed(self):
        """Parametrization objects reject invalid values at construction."""
        with pytest.raises(DomainError, match="shape > 0"):
            self.gamma_family.parametrizations["standard"](shape=-1.0, scale=2.0)
        with pytest.raises(DomainError):
            self.gamma_family.parametrizations["shapeRate"](shape=2.0, rate=0.0)
