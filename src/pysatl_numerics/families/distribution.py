"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families, together with the statistics that every
scalar distribution exposes: moments, probability and cumulative views,
log-likelihood and conversion to and from parameter vectors.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from pysatl_numerics.distributions.characteristics import (
    CumulativeDistributionView,
    ProbabilityFunctionView,
)
from pysatl_numerics.distributions.distribution import Distribution
from pysatl_numerics.families.registry import ParametricFamilyRegister
from pysatl_numerics.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from typing import Any

    from pysatl_numerics.distributions.computation import AnalyticalComputation
    from pysatl_numerics.distributions.sampling import Sample
    from pysatl_numerics.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_numerics.distributions.support import Support
    from pysatl_numerics.families.parametric_family import ParametricFamily
    from pysatl_numerics.families.parametrizations import Parametrization
    from pysatl_numerics.types import (
        DistributionType,
        GenericCharacteristicName,
        NumericArray,
    )


@dataclass(slots=True, frozen=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Represents a concrete distribution with specific parameter values,
    providing methods for computation and sampling.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None
    _analytical_cache: (
        dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None
    ) = field(default=None, init=False, repr=False, compare=False)

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the parameters are expressed in."""
        return self.parameters.name

    @property
    def base_parameters(self) -> Parametrization:
        """Parameters converted to the family's base parametrization."""
        return self.family.to_base(self.parameters)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Lazily computed and cached per instance; parameters are immutable,
        so the cache never goes stale.
        """
        cache = self._analytical_cache
        if cache is None:
            cache = self.family._build_analytical_computations(self.parameters)
            object.__setattr__(self, "_analytical_cache", cache)
        return cache

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        """Get the computation strategy for this distribution."""
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self._support

    def mean(self) -> float:
        """Expected value of the distribution."""
        return float(self.calculate_characteristic(CharacteristicName.MEAN, None))

    def variance(self) -> float:
        """Variance of the distribution."""
        return float(self.calculate_characteristic(CharacteristicName.VAR, None))

    @property
    def probability_function(self) -> ProbabilityFunctionView:
        """Density (continuous) or mass (discrete) function view."""
        return ProbabilityFunctionView(self)

    @property
    def cdf(self) -> CumulativeDistributionView:
        """Cumulative distribution function view."""
        return CumulativeDistributionView(self)

    def log_likelihood(self, data: Sequence[float] | NumericArray) -> float:
        """
        Sum of the log probability function over ``data``.

        Parameters
        ----------
        data : Sequence[float] or NumericArray
            Observations; an empty collection has log-likelihood 0.

        Returns
        -------
        float
            ``-inf`` if any observation lies outside the support.
        """
        values = np.asarray(data, dtype=np.float64).ravel()
        if values.size == 0:
            return 0.0
        return float(np.sum(self.probability_function.log_evaluate(values)))

    def convert_to_vector(self) -> NumericArray:
        """Flatten the parameters into a vector (see :meth:`Parametrization.to_vector`)."""
        return self.parameters.to_vector()

    def convert_from_vector(
        self, vector: Sequence[float] | NumericArray
    ) -> ParametricFamilyDistribution:
        """
        Build a distribution of the same family and parametrization from ``vector``.

        Raises
        ------
        DomainError
            If the vector has the wrong dimension or violates a constraint.
        """
        return self.family.from_vector(vector, self.parametrization_name)

    def with_parameters(self, **parameters_values: Any) -> ParametricFamilyDistribution:
        """
        Return a validated copy with some parameters replaced.

        Parameters
        ----------
        **parameters_values
            New values for fields of the current parametrization.

        Raises
        ------
        DomainError
            If the resulting parameters violate a constraint.
        """
        values = {**self.parameters.parameters, **parameters_values}
        return self.family.distribution(self.parametrization_name, **values)

    def sample(self, n: int, **options: Any) -> Sample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        **options : Any
            Additional options for sampling, e.g. ``rng``.

        Returns
        -------
        Sample
            Generated samples.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)
