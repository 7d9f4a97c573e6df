"""
Lentz's Method
==============

Modified Lentz algorithm for evaluating continued fractions of the form

.. math::

    f = b_0 + \\frac{a_1}{b_1 + \\frac{a_2}{b_2 + \\cdots}}

The solver is fed one ``(a_i, b_i)`` term pair at a time and keeps the running
ratio. A solver instance belongs to a single evaluation and is discarded
afterwards.

Examples
--------
>>> lentz = LentzMethod()
>>> lentz.initialize(0.0)
>>> keep_going = lentz.iterate(1.0, 2.0)
>>> while lentz.keep_going:
...     keep_going = lentz.iterate(1.0, 2.0)
>>> round(lentz.result, 6)  # sqrt(2) - 1
0.414214

References
----------
W. H. Press et al., *Numerical Recipes in C*, 2nd ed., 1992, section 5.2.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

DEFAULT_TOLERANCE: float = 3e-7
"""Relative change of the ratio below which the fraction is converged."""

DEFAULT_MAX_ITERATIONS: int = 1000
"""Maximum number of term pairs consumed before giving up."""

DEFAULT_TINY: float = 1e-30
"""Floor replacing zero denominators."""


class LentzMethod:
    """
    Stateful continued-fraction solver.

    Parameters
    ----------
    tolerance : float, default 3e-7
        Convergence threshold on ``|delta - 1|``.
    max_iterations : int, default 1000
        Iteration cap.
    tiny : float, default 1e-30
        Value substituted for vanishing intermediate denominators.

    Notes
    -----
    Callers loop ``while lentz.keep_going: lentz.iterate(a, b)`` and must check
    :attr:`is_result_valid` afterwards: hitting the iteration cap leaves a
    partial, unconverged ratio in :attr:`result`.
    """

    __slots__ = (
        "tolerance",
        "max_iterations",
        "tiny",
        "_ratio",
        "_c",
        "_d",
        "_delta",
        "_iteration",
    )

    def __init__(
        self,
        tolerance: float = DEFAULT_TOLERANCE,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        tiny: float = DEFAULT_TINY,
    ) -> None:
        self.tolerance = tolerance
        self.max_iterations = max_iterations
        self.tiny = tiny
        self.initialize()

    def initialize(self, b0: float = 0.0) -> None:
        """
        Reset the solver for a new continued fraction.

        Parameters
        ----------
        b0 : float, default 0.0
            Leading term of the fraction. A zero value is replaced by ``tiny``.
        """
        ratio = b0
        if abs(ratio) < self.tiny:
            ratio = self.tiny
        self._ratio = ratio
        self._c = ratio
        self._d = 0.0
        self._delta = math.inf
        self._iteration = 0

    def iterate(self, a: float, b: float) -> bool:
        """
        Consume one term pair.

        Parameters
        ----------
        a : float
            Partial numerator ``a_i``.
        b : float
            Partial denominator ``b_i``.

        Returns
        -------
        bool
            Whether the caller should keep feeding terms.
        """
        d = b + a * self._d
        if abs(d) < self.tiny:
            d = self.tiny

        c = b + a / self._c
        if abs(c) < self.tiny:
            c = self.tiny

        d = 1.0 / d
        delta = c * d

        self._c = c
        self._d = d
        self._delta = delta
        self._ratio *= delta
        self._iteration += 1
        return self.keep_going

    @property
    def keep_going(self) -> bool:
        """Whether the fraction is neither converged nor out of iterations."""
        return abs(self._delta - 1.0) > self.tolerance and self._iteration < self.max_iterations

    @property
    def iteration(self) -> int:
        """Number of term pairs consumed since :meth:`initialize`."""
        return self._iteration

    @property
    def result(self) -> float:
        """Current value of the continued fraction."""
        return self._ratio

    @property
    def is_result_valid(self) -> bool:
        """Whether the last update met the convergence tolerance."""
        return abs(self._delta - 1.0) <= self.tolerance

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(iteration={self._iteration}, result={self._ratio!r}, "
            f"converged={self.is_result_valid})"
        )
