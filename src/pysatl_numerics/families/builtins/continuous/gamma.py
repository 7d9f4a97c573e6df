"""
Gamma distribution family implementation.

Contains the Gamma family with shape-scale and shape-rate parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_numerics.distributions.support import ContinuousSupport
from pysatl_numerics.errors import NonConvergenceError
from pysatl_numerics.families.parametric_family import ParametricFamily
from pysatl_numerics.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_numerics.families.registry import ParametricFamilyRegister
from pysatl_numerics.families.strategies import ParametrizedSamplingStrategy
from pysatl_numerics.special import log_gamma, lower_incomplete_gamma
from pysatl_numerics.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

GAMMA_SAMPLER_MAX_ITERATIONS = 100
"""Rejection attempts allowed per draw for the fractional part of the shape."""

_lower_incomplete_gamma = np.vectorize(lower_incomplete_gamma, otypes=[np.float64])


def sample_gamma(
    shape: float,
    scale: float,
    rng: np.random.Generator,
    n: int,
    *,
    max_iterations: int = GAMMA_SAMPLER_MAX_ITERATIONS,
) -> NumericArray:
    """
    Draw ``n`` Gamma variates.

    The integer part of ``shape`` is sampled as a sum of ``-log(U)`` terms, and
    the fractional part ``delta`` by the Ahrens-Dieter rejection scheme with
    ``v0 = e / (e + delta)``.

    Parameters
    ----------
    shape, scale : float
        Positive parameters of the distribution.
    rng : numpy.random.Generator
        Source of uniform variates.
    n : int
        Number of draws.
    max_iterations : int, default 100
        Rejection attempts allowed per draw.

    Raises
    ------
    NonConvergenceError
        If a draw is not accepted within ``max_iterations`` attempts.
    """
    whole = math.floor(shape)
    delta = shape - whole
    v0 = math.e / (math.e + delta) if delta > 0.0 else 0.0

    # 1 - U lies in (0, 1], so the logarithm stays finite
    log_sum = np.log1p(-rng.random((n, whole))).sum(axis=1)

    fractional = np.zeros(n)
    if delta > 0.0:
        for index in range(n):
            for _ in range(max_iterations):
                vm2, vm1, vm0 = rng.random(3)
                if vm2 < v0:
                    xi = (1.0 - vm1) ** (1.0 / delta)
                    nu = vm0 * xi ** (delta - 1.0)
                else:
                    xi = 1.0 - math.log1p(-vm1)
                    nu = vm0 * math.exp(-xi)
                if nu <= xi ** (delta - 1.0) * math.exp(-xi):
                    fractional[index] = xi
                    break
            else:
                raise NonConvergenceError(
                    "Gamma sampler exceeded the rejection iteration limit",
                    context={"shape": shape, "max_iterations": max_iterations},
                )

    return cast(NumericArray, scale * (fractional - log_sum))


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma (continuous) distribution.

    A two-parameter family on the positive half-line, defined by a shape
    ``k > 0`` and a scale ``theta > 0``. It models waiting times for ``k``
    events of a Poisson process and is conjugate to Poisson rates.

    Probability density function:
        f(x) = x^(k-1) * exp(-x / theta) / (Gamma(k) * theta^k) for x > 0, 0 otherwise

    Cumulative distribution function:
        F(x) = P(k, x / theta), the regularized lower incomplete Gamma function.
    """

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Natural logarithm of the Gamma density.

        Returns ``-inf`` for ``x <= 0`` and ``x = +inf``; NaN stays NaN.
        """
        parameters = cast(_Standard, parameters)
        shape = parameters.shape
        scale = parameters.scale

        x_arr = np.asarray(x, dtype=np.float64)
        inside = np.isfinite(x_arr) & (x_arr > 0.0)
        safe_x = np.where(inside, x_arr, 1.0)
        normalizer = log_gamma(shape) + shape * math.log(scale)
        values = (shape - 1.0) * np.log(safe_x) - safe_x / scale - normalizer
        outside = np.where(np.isnan(x_arr), np.nan, -np.inf)
        return cast(NumericArray, np.where(inside, values, outside))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: float
            - scale: float
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Density values at points x, zero for x <= 0
        """
        return cast(NumericArray, np.exp(log_pdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function, ``P(shape, x / scale)``; NaN stays NaN."""
        parameters = cast(_Standard, parameters)
        x_arr = np.asarray(x, dtype=np.float64)
        finite = np.isfinite(x_arr)
        values = _lower_incomplete_gamma(
            parameters.shape, np.where(finite, x_arr, 0.0) / parameters.scale
        )
        outside = np.where(np.isnan(x_arr), np.nan, np.where(x_arr > 0.0, 1.0, 0.0))
        return cast(NumericArray, np.where(finite, values, outside))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Gamma distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.shape * parameters.scale

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Gamma distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.shape * parameters.scale**2

    def sampler(parameters: Parametrization, rng: np.random.Generator, n: int) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return sample_gamma(parameters.shape, parameters.scale, rng, n)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Gamma distribution"""
        return ContinuousSupport(left=0.0, left_closed=False)

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "shapeRate"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOG_PDF: log_pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=ParametrizedSamplingStrategy(sampler),
        support_by_parametrization=_support,
    )
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="standard")
    class _Standard(Parametrization):
        """
        Shape-scale parametrization of Gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        scale : float
            Scale parameter theta
        """

        shape: float
        scale: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of Gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        rate : float
            Rate parameter beta, the inverse of the scale
        """

        shape: float
        rate: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            return _Standard(shape=self.shape, scale=1.0 / self.rate)

    ParametricFamilyRegister.register(Gamma)
