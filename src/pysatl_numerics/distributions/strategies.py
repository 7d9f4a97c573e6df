"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy` — resolves characteristic methods.
- :class:`DefaultComputationStrategy` — resolves analyticals and derives
  log-scale characteristics from their linear-scale counterparts.
- :class:`SamplingStrategy` — draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy` — draws ``(n, 1)`` samples using
  ``ppf`` and i.i.d. uniform variates.

Notes
-----
- Strategies are intentionally lightweight and stateless.
- Sampling strategies accept a caller-owned ``rng`` option
  (:class:`numpy.random.Generator`); a fresh generator is used otherwise.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_numerics.distributions.computation import (
    AnalyticalComputation,
    FittedComputationMethod,
)
from pysatl_numerics.types import (
    CharacteristicName,
    GenericCharacteristicName,
)

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out] | FittedComputationMethod[In, Out]


def _log_of(values: Any) -> Any:
    with np.errstate(divide="ignore"):
        return np.log(values)


DERIVED_CHARACTERISTICS: dict[
    GenericCharacteristicName, tuple[GenericCharacteristicName, Callable[[Any], Any]]
] = {
    CharacteristicName.LOG_PDF: (CharacteristicName.PDF, _log_of),
    CharacteristicName.LOG_PMF: (CharacteristicName.PMF, _log_of),
}
"""Characteristics derivable from a single source by an element-wise transform."""


def resolve_rng(options: dict[str, Any]) -> np.random.Generator:
    """
    Extract the random generator from sampling options.

    Parameters
    ----------
    options : dict
        Sampling options; the ``rng`` entry is removed if present.

    Returns
    -------
    numpy.random.Generator
        The caller's generator, or a freshly seeded one.
    """
    rng = options.pop("rng", None)
    if rng is None:
        return np.random.default_rng()
    return rng


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Resolution order
    ----------------
    1. If the distribution provides an analytical implementation, return it.
    2. Else, if the characteristic is derivable (see
       :data:`DERIVED_CHARACTERISTICS`) and its source is analytical, wrap the
       source in a :class:`FittedComputationMethod`.

    Raises
    ------
    RuntimeError
        If the distribution has no analytical base or no derivation exists.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve an analytical or derived method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical computations.
        **options
            Unused; accepted for interface compatibility.

        Returns
        -------
        Method
            Analytical or derived callable implementing ``state``.
        """
        computations = distr.analytical_computations
        if state in computations:
            return computations[state]

        if not computations:
            raise RuntimeError("Distribution provides no analytical computations.")

        derivation = DERIVED_CHARACTERISTICS.get(state)
        if derivation is not None:
            source_name, transform = derivation
            source = computations.get(source_name)
            if source is not None:

                def _derived(data: In, **kwargs: Any) -> Out:
                    return transform(source(data, **kwargs))  # type: ignore[no-any-return]

                return FittedComputationMethod(target=state, sources=[source_name], func=_derived)

        raise RuntimeError(f"Characteristic '{state}' is not available for this distribution.")


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U[0, 1)``.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        rng = resolve_rng(options)
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        U = rng.random(n)
        vals = np.asarray(ppf(U), dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)
