"""
LogNormal distribution family implementation.

Contains the LogNormal family, parameterized by the mean and variance (or
standard deviation) of the underlying Gaussian.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_numerics.distributions.support import ContinuousSupport
from pysatl_numerics.families.parametric_family import ParametricFamily
from pysatl_numerics.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_numerics.families.registry import ParametricFamilyRegister
from pysatl_numerics.families.strategies import ParametrizedSamplingStrategy
from pysatl_numerics.special import error_function
from pysatl_numerics.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

_error_function = np.vectorize(error_function, otypes=[np.float64])


def configure_log_normal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.LOG_NORMAL):
        return

    LOG_NORMAL_DOC = """
    LogNormal (continuous) distribution.

    The distribution of ``exp(Y)`` where ``Y`` is Gaussian with mean ``mu``
    and variance ``sigma^2``. Parameters always refer to the underlying
    Gaussian, not to the moments of the LogNormal variable itself.

    Probability density function:
        f(x) = exp(-(ln x - mu)^2 / (2 sigma^2)) / (x * sqrt(2 pi sigma^2)) for x > 0

    Cumulative distribution function:
        F(x) = (1 + erf((ln x - mu) / sqrt(2 sigma^2))) / 2
    """

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Natural logarithm of the LogNormal density.

        Returns ``-inf`` for ``x <= 0`` and ``x = +inf``; NaN stays NaN.
        """
        parameters = cast(_Standard, parameters)
        mu = parameters.log_normal_mean
        variance = parameters.log_normal_variance

        x_arr = np.asarray(x, dtype=np.float64)
        inside = np.isfinite(x_arr) & (x_arr > 0.0)
        log_x = np.log(np.where(inside, x_arr, 1.0))
        values = -((log_x - mu) ** 2) / (2.0 * variance) - log_x - 0.5 * math.log(
            2.0 * math.pi * variance
        )
        outside = np.where(np.isnan(x_arr), np.nan, -np.inf)
        return cast(NumericArray, np.where(inside, values, outside))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for LogNormal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - log_normal_mean: float (mean of the underlying Gaussian)
            - log_normal_variance: float (variance of the underlying Gaussian)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Density values at points x, zero for x <= 0
        """
        return cast(NumericArray, np.exp(log_pdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for LogNormal distribution.

        The error function is evaluated through the incomplete Gamma function.
        NaN stays NaN.
        """
        parameters = cast(_Standard, parameters)
        mu = parameters.log_normal_mean
        variance = parameters.log_normal_variance

        x_arr = np.asarray(x, dtype=np.float64)
        inside = np.isfinite(x_arr) & (x_arr > 0.0)
        z = (np.log(np.where(inside, x_arr, 1.0)) - mu) / math.sqrt(2.0 * variance)
        outside = np.where(np.isnan(x_arr), np.nan, np.where(x_arr > 0.0, 1.0, 0.0))
        return cast(NumericArray, np.where(inside, 0.5 * (1.0 + _error_function(z)), outside))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of LogNormal distribution, ``exp(mu + sigma^2 / 2)``."""
        parameters = cast(_Standard, parameters)
        return math.exp(parameters.log_normal_mean + parameters.log_normal_variance / 2.0)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of LogNormal distribution, ``(exp(sigma^2) - 1) exp(2 mu + sigma^2)``."""
        parameters = cast(_Standard, parameters)
        mu = parameters.log_normal_mean
        variance = parameters.log_normal_variance
        return math.expm1(variance) * math.exp(2.0 * mu + variance)

    def sampler(parameters: Parametrization, rng: np.random.Generator, n: int) -> NumericArray:
        parameters = cast(_Standard, parameters)
        std = math.sqrt(parameters.log_normal_variance)
        return cast(NumericArray, np.exp(parameters.log_normal_mean + std * rng.standard_normal(n)))

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of LogNormal distribution"""
        return ContinuousSupport(left=0.0, left_closed=False)

    LogNormal = ParametricFamily(
        name=FamilyName.LOG_NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "logMeanStd"],
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
    LogNormal.__doc__ = LOG_NORMAL_DOC

    @parametrization(family=LogNormal, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of LogNormal distribution.

        Parameters
        ----------
        log_normal_mean : float
            Mean of the underlying Gaussian
        log_normal_variance : float
            Variance of the underlying Gaussian
        """

        log_normal_mean: float
        log_normal_variance: float

        @constraint(description="log_normal_variance > 0")
        def check_variance_positive(self) -> bool:
            return self.log_normal_variance > 0

    @parametrization(family=LogNormal, name="logMeanStd")
    class _LogMeanStd(Parametrization):
        """
        Parametrization by the mean and standard deviation of the underlying Gaussian.

        Parameters
        ----------
        log_normal_mean : float
            Mean of the underlying Gaussian
        log_normal_std : float
            Standard deviation of the underlying Gaussian
        """

        log_normal_mean: float
        log_normal_std: float

        @constraint(description="log_normal_std > 0")
        def check_std_positive(self) -> bool:
            return self.log_normal_std > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Standard(
                log_normal_mean=self.log_normal_mean,
                log_normal_variance=self.log_normal_std**2,
            )

    ParametricFamilyRegister.register(LogNormal)
