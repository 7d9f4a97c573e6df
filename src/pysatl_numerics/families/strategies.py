"""
Family-level sampling strategies.

Families whose draws are not obtained by inverting a closed-form ``ppf``
provide a dedicated sampler working directly on their base parameters.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_numerics.distributions.sampling import ArraySample
from pysatl_numerics.distributions.strategies import SamplingStrategy, resolve_rng

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_numerics.distributions.distribution import Distribution
    from pysatl_numerics.families.distribution import ParametricFamilyDistribution
    from pysatl_numerics.families.parametrizations import Parametrization
    from pysatl_numerics.types import NumericArray

    type ParametrizedSampler = Callable[[Parametrization, np.random.Generator, int], NumericArray]


class ParametrizedSamplingStrategy(SamplingStrategy):
    """
    Sampling strategy delegating to a family sampler.

    Parameters
    ----------
    sampler : Callable[[Parametrization, numpy.random.Generator, int], NumericArray]
        Draws ``n`` values given the base parameters and a generator.
    dtype : numpy dtype, default float64
        Element type of the produced sample.
    """

    __slots__ = ("_sampler", "_dtype")

    def __init__(self, sampler: ParametrizedSampler, dtype: Any = np.float64) -> None:
        self._sampler = sampler
        self._dtype = dtype

    def sample(self, n: int, distr: Distribution, **options: Any) -> ArraySample:
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        rng = resolve_rng(options)
        parameters = cast("ParametricFamilyDistribution", distr).base_parameters
        values = np.asarray(self._sampler(parameters, rng, n), dtype=self._dtype)
        return ArraySample(values.reshape(n, 1))
