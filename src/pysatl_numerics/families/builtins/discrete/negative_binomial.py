"""
Negative binomial distribution family implementation.

Contains the NegativeBinomial (Polya) family counting successes before the
``r``-th failure.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import entr, xlog1py, xlogy

from pysatl_numerics.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_numerics.errors import DomainError
from pysatl_numerics.families.parametric_family import ParametricFamily
from pysatl_numerics.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_numerics.families.registry import ParametricFamilyRegister
from pysatl_numerics.families.strategies import ParametrizedSamplingStrategy
from pysatl_numerics.special import (
    log_factorial,
    log_gamma,
    regularized_incomplete_beta,
)
from pysatl_numerics.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

_SUPPORT = IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0)

_log_gamma = np.vectorize(log_gamma, otypes=[np.float64])
_log_factorial = np.vectorize(log_factorial, otypes=[np.float64])
_regularized_incomplete_beta = np.vectorize(regularized_incomplete_beta, otypes=[np.float64])


def negative_binomial_mean(r: float, p: float) -> float:
    """Mean ``r p / (1 - p)``, infinite when ``p == 1``."""
    return math.inf if p == 1.0 else r * p / (1.0 - p)


def negative_binomial_domain(r: float, p: float) -> NumericArray:
    """
    Finite domain ``[0, ceil(10 * mean + 10)]`` used for sampling and entropy.

    Raises
    ------
    DomainError
        If the mean is infinite.
    """
    mean = negative_binomial_mean(r, p)
    if not math.isfinite(mean):
        raise DomainError(f"NegativeBinomial with p={p} has no finite domain")
    return _SUPPORT.truncated(math.ceil(10.0 * mean + 10.0)).points()


def configure_negative_binomial_family() -> None:
    """
    Configure and register the NegativeBinomial distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.NEGATIVE_BINOMIAL):
        return

    NEGATIVE_BINOMIAL_DOC = """
    NegativeBinomial (discrete) distribution.

    The number of successes, each with probability ``p``, observed before
    ``r`` failures occur. ``r`` may be any positive real.

    Probability mass function:
        f(k) = Gamma(k + r) / (k! Gamma(r)) * (1 - p)^r * p^k for k = 0, 1, 2, ...

    Cumulative distribution function:
        F(k) = I_{1-p}(r, k + 1), the regularized incomplete Beta function.
    """

    def log_pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Natural logarithm of the probability mass.

        Returns ``-inf`` outside the non-negative integers.
        """
        parameters = cast(_Standard, parameters)
        r = parameters.r
        p = parameters.p

        x_arr = np.asarray(x, dtype=np.float64)
        in_support = _SUPPORT.contains(x_arr)
        k = np.where(in_support, x_arr, 0.0)
        values = (
            _log_gamma(k + r)
            - _log_factorial(k)
            - log_gamma(r)
            + xlog1py(r, -p)
            + xlogy(k, p)
        )
        return cast(NumericArray, np.where(in_support, values, -np.inf))

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for NegativeBinomial distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - r: float (number of failures)
            - p: float (success probability)
        x : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probability mass at points x, zero off the non-negative integers
        """
        return cast(NumericArray, np.exp(log_pmf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function, ``I_{1-p}(r, floor(x) + 1)``."""
        parameters = cast(_Standard, parameters)
        r = parameters.r
        p = parameters.p

        x_arr = np.asarray(x, dtype=np.float64)
        inside = np.isfinite(x_arr) & (x_arr >= 0.0)
        k = np.floor(np.where(inside, x_arr, 0.0))
        values = _regularized_incomplete_beta(r, k + 1.0, 1.0 - p)
        return cast(
            NumericArray,
            np.where(inside, values, np.where(x_arr == np.inf, 1.0, 0.0)),
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of NegativeBinomial distribution."""
        parameters = cast(_Standard, parameters)
        return negative_binomial_mean(parameters.r, parameters.p)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of NegativeBinomial distribution, ``r p / (1 - p)^2``."""
        parameters = cast(_Standard, parameters)
        p = parameters.p
        return math.inf if p == 1.0 else parameters.r * p / (1.0 - p) ** 2

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Entropy in bits, summed over the finite domain."""
        standard = cast(_Standard, parameters)
        domain = negative_binomial_domain(standard.r, standard.p)
        return float(np.sum(entr(pmf(parameters, domain))) / math.log(2.0))

    def sampler(parameters: Parametrization, rng: np.random.Generator, n: int) -> NumericArray:
        """Inverse-CDF draws over the finite domain."""
        parameters = cast(_Standard, parameters)
        domain = negative_binomial_domain(parameters.r, parameters.p)
        cumulative = np.cumsum(pmf(parameters, domain))
        positions = np.searchsorted(cumulative, rng.random(n) * cumulative[-1], side="right")
        return cast(NumericArray, domain[np.minimum(positions, domain.size - 1)])

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of NegativeBinomial distribution"""
        return _SUPPORT

    NegativeBinomial = ParametricFamily(
        name=FamilyName.NEGATIVE_BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.LOG_PMF: log_pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.ENTROPY: entropy_func,
        },
        sampling_strategy=ParametrizedSamplingStrategy(sampler, dtype=np.int64),
        support_by_parametrization=_support,
    )
    NegativeBinomial.__doc__ = NEGATIVE_BINOMIAL_DOC

    @parametrization(family=NegativeBinomial, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of NegativeBinomial distribution.

        Parameters
        ----------
        r : float
            Number of failures until the experiment stops
        p : float
            Probability of success of each trial
        """

        r: float
        p: float

        @constraint(description="r > 0")
        def check_r_positive(self) -> bool:
            return self.r > 0

        @constraint(description="0 <= p <= 1")
        def check_p_is_probability(self) -> bool:
            return 0.0 <= self.p <= 1.0

    ParametricFamilyRegister.register(NegativeBinomial)
