"""
Error Taxonomy
==============

Exceptions raised by the numerical routines and the distribution families.

- :class:`DomainError` — an argument or parameter violates its precondition.
- :class:`NonConvergenceError` — an iterative method hit its iteration cap.
- :class:`RankOutOfRangeError` — a selection rank lies outside the data.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


class DomainError(ValueError):
    """Raised when an argument lies outside the domain of a function or family."""


class NonConvergenceError(ArithmeticError):
    """
    Raised when an iterative numerical method exceeds its iteration cap.

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    context : Mapping[str, Any], optional
        Arguments of the failing evaluation, kept for diagnostics.
    """

    def __init__(self, message: str, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: Mapping[str, Any] = MappingProxyType(dict(context or {}))

    def __str__(self) -> str:
        message = super().__str__()
        if not self.context:
            return message
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{message} ({details})"


class RankOutOfRangeError(IndexError):
    """Raised when a selection rank is outside ``[0, N-1]``."""


__all__ = [
    "DomainError",
    "NonConvergenceError",
    "RankOutOfRangeError",
]
