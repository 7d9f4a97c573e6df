"""
Characteristics API
===================

Lightweight wrappers for calling a distribution's characteristic (e.g.,
``pdf``, ``cdf``) resolved by the current computation strategy.

- :class:`GenericCharacteristic` — a callable descriptor naming one
  characteristic.
- :class:`ProbabilityFunctionView` — read-only density/mass view of a
  distribution (``pdf`` for continuous kinds, ``pmf`` for discrete kinds).
- :class:`CumulativeDistributionView` — read-only ``cdf`` view; for
  continuous kinds its derivative is the probability function view.

Notes
-----
- Views share the distribution's parameters by reference and never copy or
  modify them.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

from pysatl_numerics.distributions.strategies import Method
from pysatl_numerics.types import (
    CharacteristicName,
    GenericCharacteristicName,
    Kind,
)

if TYPE_CHECKING:
    from pysatl_numerics.distributions.distribution import Distribution


@dataclass(slots=True, frozen=True)
class GenericCharacteristic[In, Out]:
    """
    Callable characteristic descriptor.

    Parameters
    ----------
    name : str
        Characteristic identifier (e.g., ``"pdf"``, ``"cdf"`` or ``"ppf"``).

    Examples
    --------
    >>> from pysatl_numerics.distributions.characteristics import GenericCharacteristic
    >>> PDF = GenericCharacteristic[float, float]("pdf")
    >>> # Later:
    >>> # value = PDF(dist, 0.0)  # resolves dist's pdf(0.0)
    """

    name: GenericCharacteristicName

    def __call__(self, distribution: "Distribution", data: In, **options: Any) -> Out:
        """
        Evaluate the characteristic on the given data.

        Parameters
        ----------
        distribution : Distribution
            Distribution instance providing the computation strategy.
        data : Any
            Input value(s) for the characteristic.
        **options
            Options forwarded to the characteristic function.
        """
        method = cast(
            Method[In, Out],
            distribution.computation_strategy.query_method(self.name, distribution, **options),
        )
        return method(data, **options)


def _kind_of(distribution: "Distribution") -> Kind | None:
    return getattr(distribution.distribution_type, "kind", None)


@dataclass(slots=True, frozen=True)
class ProbabilityFunctionView:
    """Density (continuous) or mass (discrete) function of a distribution."""

    distribution: "Distribution"

    @property
    def is_discrete(self) -> bool:
        return _kind_of(self.distribution) == Kind.DISCRETE

    @property
    def _evaluator(self) -> GenericCharacteristic[Any, Any]:
        name = CharacteristicName.PMF if self.is_discrete else CharacteristicName.PDF
        return GenericCharacteristic(name)

    @property
    def _log_evaluator(self) -> GenericCharacteristic[Any, Any]:
        name = CharacteristicName.LOG_PMF if self.is_discrete else CharacteristicName.LOG_PDF
        return GenericCharacteristic(name)

    def __call__(self, x: Any, **options: Any) -> Any:
        return self._evaluator(self.distribution, x, **options)

    def log_evaluate(self, x: Any, **options: Any) -> Any:
        """Natural logarithm of the probability function at ``x``."""
        return self._log_evaluator(self.distribution, x, **options)


@dataclass(slots=True, frozen=True)
class CumulativeDistributionView:
    """Cumulative distribution function of a distribution."""

    distribution: "Distribution"

    def __call__(self, x: Any, **options: Any) -> Any:
        return GenericCharacteristic[Any, Any](CharacteristicName.CDF)(
            self.distribution, x, **options
        )

    @property
    def derivative(self) -> ProbabilityFunctionView:
        """
        Derivative of a smooth CDF, i.e. the density view.

        Raises
        ------
        TypeError
            If the distribution is discrete.
        """
        if _kind_of(self.distribution) != Kind.CONTINUOUS:
            raise TypeError("Only continuous distributions have a differentiable CDF.")
        return ProbabilityFunctionView(self.distribution)

    def differentiate(self, x: Any, **options: Any) -> Any:
        """Evaluate the CDF derivative at ``x``."""
        return self.derivative(x, **options)
