"""
Special Functions
=================

Scalar special functions used by the closed-form distributions:

- logarithms: :func:`log`, :func:`log2`;
- Gamma family: :func:`log_gamma`, :func:`log_factorial`,
  :func:`lower_incomplete_gamma` and its series / continued fraction parts;
- combinatorics: :func:`log_binomial_coefficient`, :func:`binomial_coefficient`;
- Beta family: :func:`log_beta`, :func:`regularized_incomplete_beta`,
  :func:`incomplete_beta_continued_fraction`, :func:`log_multinomial_beta`;
- :func:`error_function`, expressed through the incomplete Gamma function.

Notes
-----
- All functions are pure and operate on Python floats. Vectorization is done
  by the callers (see :mod:`pysatl_numerics.families.builtins`).
- Domain violations raise :class:`~pysatl_numerics.errors.DomainError`,
  exhausted iteration caps raise
  :class:`~pysatl_numerics.errors.NonConvergenceError`.

References
----------
W. H. Press et al., *Numerical Recipes in C*, 2nd ed., 1992, sections 6.1-6.4.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from pysatl_numerics.errors import DomainError, NonConvergenceError
from pysatl_numerics.special.lentz import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, LentzMethod

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_numerics.types import NumericArray

logger = logging.getLogger(__name__)

INCOMPLETE_GAMMA_SATURATION: float = 1e10
"""Beyond this argument the lower incomplete Gamma function is taken as 1."""

_LANCZOS_COEFFICIENTS = (
    76.18009172947146,
    -86.50532032941677,
    24.01409824083091,
    -1.231739572450155,
    0.1208650973866179e-2,
    -0.5395239384953e-5,
)
_LANCZOS_SERIES_BASE = 1.000000000190015
_SQRT_2PI = 2.5066282746310005


def log(x: float, base: float) -> float:
    """Logarithm of ``x`` in the given ``base``."""
    return math.log(x) / math.log(base)


def log2(x: float) -> float:
    """Base-2 logarithm of ``x``."""
    return log(x, 2.0)


def log_gamma(x: float) -> float:
    """
    Natural logarithm of the Gamma function.

    Uses the six-term Lanczos approximation, accurate to roughly 1e-10
    relative error over the positive reals.

    Parameters
    ----------
    x : float
        Argument, must be positive.

    Returns
    -------
    float
        ``log(Gamma(x))``.

    Raises
    ------
    DomainError
        If ``x <= 0``.
    """
    if not x > 0.0:
        raise DomainError(f"log_gamma requires x > 0.0, got {x}")

    tmp = x + 4.5
    tmp -= (x - 0.5) * math.log(tmp)

    series = _LANCZOS_SERIES_BASE
    for offset, coefficient in enumerate(_LANCZOS_COEFFICIENTS):
        series += coefficient / (x + offset)

    return math.log(_SQRT_2PI * series) - tmp


def log_factorial(n: int) -> float:
    """
    Natural logarithm of ``n!``.

    Raises
    ------
    DomainError
        If ``n < 0``.
    """
    if n < 0:
        raise DomainError(f"log_factorial requires n >= 0, got {n}")
    # 0! and 1! are both 1
    if n <= 1:
        return 0.0
    return log_gamma(n + 1.0)


def log_binomial_coefficient(n: int, k: int) -> float:
    """
    Natural logarithm of the binomial coefficient ``C(n, k)``.

    Raises
    ------
    DomainError
        If ``k`` is outside ``[0, n]``.
    """
    if k < 0 or k > n:
        raise DomainError(f"binomial coefficient requires 0 <= k <= n, got n={n}, k={k}")
    # C(n, k) and C(n, n - k) share one evaluation order
    k = min(k, n - k)
    return log_factorial(n) - log_factorial(k) - log_factorial(n - k)


def binomial_coefficient(n: int, k: int) -> int:
    """
    Binomial coefficient ``C(n, k)`` rounded to the nearest integer.

    Evaluated in log space. Once ``C(n, k)`` exceeds the float range the
    exact integer is returned instead.

    Raises
    ------
    DomainError
        If ``k`` is outside ``[0, n]``.
    """
    log_value = log_binomial_coefficient(n, k)
    try:
        return round(math.exp(log_value))
    except OverflowError:
        return math.comb(int(n), int(k))


def lower_incomplete_gamma(a: float, x: float) -> float:
    """
    Regularized lower incomplete Gamma function ``P(a, x)``.

    Parameters
    ----------
    a : float
        Shape argument, must be positive.
    x : float
        Upper integration limit.

    Returns
    -------
    float
        ``P(a, x)``: 0 for ``x <= 0``, 1 for ``x > 1e10``; otherwise the series
        expansion when ``x < a + 1`` and the continued fraction elsewhere.

    Raises
    ------
    DomainError
        If ``a <= 0``.
    NonConvergenceError
        If the selected expansion does not converge.
    """
    if not a > 0.0:
        raise DomainError(f"lower_incomplete_gamma requires a > 0.0, got {a}")

    if x <= 0.0:
        return 0.0
    if x > INCOMPLETE_GAMMA_SATURATION:
        return 1.0
    if x < a + 1.0:
        return incomplete_gamma_series_expansion(a, x)
    return incomplete_gamma_continued_fraction(a, x)


def incomplete_gamma_series_expansion(
    a: float,
    x: float,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> float:
    """
    Series expansion of ``P(a, x)``, fast for ``x < a + 1``.

    Raises
    ------
    DomainError
        If ``x < 0``.
    NonConvergenceError
        If the series has not converged after ``max_iterations`` terms.
    """
    if x < 0.0:
        raise DomainError(f"incomplete gamma series requires x >= 0.0, got {x}")
    if x == 0.0:
        return 0.0

    log_gamma_a = log_gamma(a)
    denominator = a
    term = 1.0 / a
    total = term
    for _ in range(max_iterations):
        denominator += 1.0
        term *= x / denominator
        total += term
        if abs(term) < abs(total) * tolerance:
            return total * math.exp(-x + a * math.log(x) - log_gamma_a)

    raise NonConvergenceError(
        "Incomplete gamma series expansion did not converge", {"a": a, "x": x}
    )


def incomplete_gamma_continued_fraction(a: float, x: float) -> float:
    """
    Continued-fraction evaluation of ``P(a, x)``, fast for ``x >= a + 1``.

    Raises
    ------
    NonConvergenceError
        If Lentz's method does not converge.
    """
    lentz = LentzMethod()
    lentz.initialize(0.0)
    lentz.iterate(1.0, x + 1.0 - a)
    while lentz.keep_going:
        i = lentz.iteration
        lentz.iterate(-i * (i - a), x + (2 * i + 1) - a)

    if not lentz.is_result_valid:
        raise NonConvergenceError(
            "Lentz's method failed in the incomplete gamma continued fraction",
            {"a": a, "x": x},
        )

    return 1.0 - math.exp(-x + a * math.log(x) - log_gamma(a)) * lentz.result


def log_beta(a: float, b: float) -> float:
    """Natural logarithm of the Beta function ``B(a, b)``."""
    return log_gamma(a) + log_gamma(b) - log_gamma(a + b)


def regularized_incomplete_beta(a: float, b: float, x: float) -> float:
    """
    Regularized incomplete Beta function ``I_x(a, b)``.

    The continued fraction is evaluated directly when
    ``x < (a + 1) / (a + b + 2)`` and through the symmetry
    ``I_x(a, b) = 1 - I_{1-x}(b, a)`` otherwise.

    Raises
    ------
    DomainError
        If ``x`` is outside ``[0, 1]``.
    NonConvergenceError
        If the continued fraction does not converge.
    """
    if not 0.0 <= x <= 1.0:
        raise DomainError(f"regularized_incomplete_beta requires 0 <= x <= 1, got {x}")

    if x == 0.0:
        return 0.0
    if x == 1.0:
        return 1.0

    front = math.exp(a * math.log(x) + b * math.log(1.0 - x) - log_beta(a, b))

    if x < (a + 1.0) / (a + b + 2.0):
        return front * incomplete_beta_continued_fraction(a, b, x) / a
    return 1.0 - front * incomplete_beta_continued_fraction(b, a, 1.0 - x) / b


def incomplete_beta_continued_fraction(a: float, b: float, x: float) -> float:
    """
    Continued fraction of the incomplete Beta function.

    Odd steps use ``-(a+m)(a+b+m)x / ((a+2m)(a+2m+1))``, even steps use
    ``m(b-m)x / ((a+2m-1)(a+2m))`` with ``m = iteration // 2``.

    Raises
    ------
    NonConvergenceError
        If Lentz's method does not converge. The failing ``(a, b, x)`` is
        logged and attached to the exception context.
    """
    a_plus_b = a + b
    lentz = LentzMethod()
    lentz.initialize(0.0)
    lentz.iterate(1.0, 1.0)
    while lentz.keep_going:
        iteration = lentz.iteration
        m = iteration // 2
        a_plus_2m = a + 2 * m

        if iteration % 2 != 0:
            numerator = -(a + m) * (a_plus_b + m) * x
            denominator = a_plus_2m * (a_plus_2m + 1)
        else:
            numerator = m * (b - m) * x
            denominator = (a_plus_2m - 1) * a_plus_2m

        lentz.iterate(numerator / denominator, 1.0)

    if not lentz.is_result_valid:
        logger.error(
            "Lentz's method failed in the incomplete beta continued fraction: a=%f, b=%f, x=%f",
            a,
            b,
            x,
        )
        raise NonConvergenceError(
            "Lentz's method failed in the incomplete beta continued fraction",
            {"a": a, "b": b, "x": x},
        )

    return lentz.result


def log_multinomial_beta(vector: Sequence[float] | NumericArray) -> float:
    """
    Natural logarithm of the multinomial Beta function.

    Parameters
    ----------
    vector : Sequence[float] or NumericArray
        Positive concentration values ``a_1, ..., a_n``.

    Returns
    -------
    float
        ``sum(log_gamma(a_i)) - log_gamma(sum(a_i))``.

    Raises
    ------
    DomainError
        If any element is not positive.
    """
    values = np.asarray(vector, dtype=np.float64).ravel()

    log_sum = 0.0
    total = 0.0
    for value in values:
        total += float(value)
        log_sum += log_gamma(float(value))

    return log_sum - log_gamma(total)


def error_function(x: float) -> float:
    """
    Gauss error function ``erf(x) = sign(x) * P(1/2, x^2)``.

    Accuracy follows the incomplete Gamma tolerance (about 3e-7).
    """
    value = lower_incomplete_gamma(0.5, x * x)
    return value if x >= 0.0 else -value


__all__ = [
    "log",
    "log2",
    "log_gamma",
    "log_factorial",
    "log_binomial_coefficient",
    "binomial_coefficient",
    "lower_incomplete_gamma",
    "incomplete_gamma_series_expansion",
    "incomplete_gamma_continued_fraction",
    "log_beta",
    "regularized_incomplete_beta",
    "incomplete_beta_continued_fraction",
    "log_multinomial_beta",
    "error_function",
    "INCOMPLETE_GAMMA_SATURATION",
]
