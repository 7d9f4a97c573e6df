"""
Bernoulli distribution family implementation.

Contains the Bernoulli family over the outcomes ``{0, 1}``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import entr

from pysatl_numerics.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_numerics.families.parametric_family import ParametricFamily
from pysatl_numerics.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_numerics.families.registry import ParametricFamilyRegister
from pysatl_numerics.families.strategies import ParametrizedSamplingStrategy
from pysatl_numerics.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    BERNOULLI_DOC = """
    Bernoulli (discrete) distribution.

    A single trial that yields 1 with probability ``p`` and 0 with
    probability ``1 - p``.

    Probability mass function:
        f(1) = p, f(0) = 1 - p, 0 elsewhere
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for Bernoulli distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field:
            - p: float (probability of the outcome 1)
        x : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            ``p`` at 1, ``1 - p`` at 0 and zero anywhere else
        """
        p = cast(_Standard, parameters).p
        x_arr = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, np.where(x_arr == 1.0, p, np.where(x_arr == 0.0, 1.0 - p, 0.0)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function: 0 below 0, ``1 - p`` on [0, 1) and 1 from 1 on."""
        p = cast(_Standard, parameters).p
        x_arr = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, np.where(x_arr < 0.0, 0.0, np.where(x_arr < 1.0, 1.0 - p, 1.0)))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Bernoulli distribution."""
        return cast(_Standard, parameters).p

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Bernoulli distribution."""
        p = cast(_Standard, parameters).p
        return p * (1.0 - p)

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Entropy in bits."""
        p = cast(_Standard, parameters).p
        return float((entr(p) + entr(1.0 - p)) / math.log(2.0))

    def sampler(parameters: Parametrization, rng: np.random.Generator, n: int) -> NumericArray:
        p = cast(_Standard, parameters).p
        return cast(NumericArray, (rng.random(n) < p).astype(np.int64))

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of Bernoulli distribution"""
        return IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0, max_k=1)

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.ENTROPY: entropy_func,
        },
        sampling_strategy=ParametrizedSamplingStrategy(sampler, dtype=np.int64),
        support_by_parametrization=_support,
    )
    Bernoulli.__doc__ = BERNOULLI_DOC

    @parametrization(family=Bernoulli, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Bernoulli distribution.

        Parameters
        ----------
        p : float
            Probability of the outcome 1
        """

        p: float

        @constraint(description="0 <= p <= 1")
        def check_p_is_probability(self) -> bool:
            return 0.0 <= self.p <= 1.0

    ParametricFamilyRegister.register(Bernoulli)
