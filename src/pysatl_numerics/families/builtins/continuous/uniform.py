"""
Uniform distribution family implementation.

Contains the Uniform family with multiple parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_numerics.distributions.strategies import DefaultSamplingUnivariateStrategy
from pysatl_numerics.distributions.support import ContinuousSupport
from pysatl_numerics.errors import DomainError
from pysatl_numerics.families.parametric_family import ParametricFamily
from pysatl_numerics.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_numerics.families.registry import ParametricFamilyRegister
from pysatl_numerics.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Uniform (continuous) distribution.

    The uniform distribution is a continuous probability distribution where
    all intervals of the same length are equally probable. It is defined by
    two parameters: lower bound and upper bound.

    Probability density function:
        f(x) = 1/(upper_bound - lower_bound) for x in [lower_bound, upper_bound], 0 otherwise

    A zero-width distribution is a point mass whose density is +inf at the
    single support point.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for uniform distribution.
            - For x < lower_bound: returns 0
            - For x > upper_bound: returns 0
            - Otherwise: returns (1 / (upper_bound - lower_bound)), or +inf
              when the bounds coincide

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lower_bound: float (lower bound)
            - upper_bound: float (upper bound)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_Standard, parameters)

        lower_bound = parameters.lower_bound
        upper_bound = parameters.upper_bound
        width = upper_bound - lower_bound
        density = math.inf if width == 0 else 1.0 / width

        x_arr = np.asarray(x, dtype=np.float64)
        return cast(
            NumericArray, np.where((x_arr >= lower_bound) & (x_arr <= upper_bound), density, 0.0)
        )

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for uniform distribution.
        Uses np.clip for vectorized computation:
            - For x < lower_bound: returns 0
            - For x > upper_bound: returns 1

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lower_bound: float (lower bound)
            - upper_bound: float (upper bound)
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_Standard, parameters)

        lower_bound = parameters.lower_bound
        upper_bound = parameters.upper_bound
        x_arr = np.asarray(x, dtype=np.float64)

        if upper_bound == lower_bound:
            return cast(NumericArray, np.where(x_arr >= lower_bound, 1.0, 0.0))
        return cast(
            NumericArray, np.clip((x_arr - lower_bound) / (upper_bound - lower_bound), 0.0, 1.0)
        )

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for uniform distribution.

        For uniform distribution on [lower_bound, upper_bound]:
        - For p = 0: returns lower_bound
        - For p = 1: returns upper_bound
        - For p in (0, 1): returns lower_bound + p × (upper_bound - lower_bound)

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lower_bound: float (lower bound)
            - upper_bound: float (upper bound)
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p

        Raises
        ------
        DomainError
            If probability is outside [0, 1]
        """
        p_arr = np.asarray(p, dtype=np.float64)
        if np.any((p_arr < 0) | (p_arr > 1)):
            raise DomainError("Probability must be in [0, 1]")

        parameters = cast(_Standard, parameters)
        lower_bound = parameters.lower_bound
        upper_bound = parameters.upper_bound

        return cast(NumericArray, lower_bound + p_arr * (upper_bound - lower_bound))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of uniform distribution."""
        parameters = cast(_Standard, parameters)
        return (parameters.lower_bound + parameters.upper_bound) / 2

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of uniform distribution."""
        parameters = cast(_Standard, parameters)
        width = parameters.upper_bound - parameters.lower_bound
        return width**2 / 12

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of uniform distribution"""
        parameters = cast(_Standard, parameters.transform_to_base_parametrization())
        return ContinuousSupport(
            left=parameters.lower_bound,
            right=parameters.upper_bound,
            left_closed=True,
            right_closed=True,
        )

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth", "minRange"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=DefaultSamplingUnivariateStrategy(),
        support_by_parametrization=_support,
    )
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of uniform distribution.

        Parameters
        ----------
        lower_bound : float
            Lower bound of the distribution
        upper_bound : float
            Upper bound of the distribution
        """

        lower_bound: float
        upper_bound: float

        @constraint(description="lower_bound <= upper_bound")
        def check_lower_not_above_upper(self) -> bool:
            """Check that lower bound does not exceed upper bound."""
            return self.lower_bound <= self.upper_bound

        @classmethod
        def _normalize_vector(cls, values: NumericArray) -> NumericArray:
            """Take the smaller value as the lower bound."""
            return cast(NumericArray, np.sort(values))

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization of uniform distribution.

        Parameters
        ----------
        mean : float
            Mean (center) of the distribution
        width : float
            Width of the distribution (upper_bound - lower_bound)
        """

        mean: float
        width: float

        @constraint(description="width >= 0")
        def check_width_non_negative(self) -> bool:
            """Check that width is non-negative."""
            return self.width >= 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            half_width = self.width / 2
            return _Standard(lower_bound=self.mean - half_width, upper_bound=self.mean + half_width)

    @parametrization(family=Uniform, name="minRange")
    class _MinRange(Parametrization):
        """
        Minimum-range parametrization of uniform distribution.

        Parameters
        ----------
        minimum : float
            Minimum value (lower bound)
        range_val : float
            Range of the distribution (upper_bound - lower_bound)
        """

        minimum: float
        range_val: float

        @constraint(description="range_val >= 0")
        def check_range_non_negative(self) -> bool:
            """Check that range is non-negative."""
            return self.range_val >= 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            return _Standard(lower_bound=self.minimum, upper_bound=self.minimum + self.range_val)

    ParametricFamilyRegister.register(Uniform)
