"""
Computation Primitives
======================

This module defines the building blocks used to compute distribution
characteristics:

- :class:`Computation` — callable (analytical or derived) for a single
  characteristic.
- :class:`AnalyticalComputation` — an analytical callable provided by a
  distribution directly.
- :class:`FittedComputationMethod` — a callable derived from other
  characteristics (e.g., ``log_pdf`` from ``pdf``), ready to be called.

Notes
-----
- Callables accept scalars or ``numpy`` arrays and evaluate element-wise.
- ``**options`` are free-form keyword arguments forwarded to the
  characteristic function (e.g., numeric tolerances).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from mypy_extensions import KwArg

from pysatl_numerics.types import (
    GenericCharacteristicName,
)


@runtime_checkable
class Computation[In, Out](Protocol):
    """Callable for a single characteristic.

    Attributes
    ----------
    target : str
        The characteristic name this computation represents.

    Methods
    -------
    __call__(data, **options)
        Evaluate the characteristic at ``data``.
    """

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class FittedComputationMethod[In, Out]:
    """Derived computation method (ready-to-use).

    Parameters
    ----------
    target : str
        Destination characteristic name.
    sources : Sequence[str]
        Source characteristic names the method is built from.
    func : Callable[[In, KwArg(Any)], Out]
        Callable implementing the derived characteristic.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the derived characteristic."""
        return self.func(data, **options)
