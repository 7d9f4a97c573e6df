"""
Special functions subpackage

Numerically careful scalar routines that the distribution families build on:

- continued-fraction solver (:mod:`.lentz`);
- Gamma, Beta and related special functions (:mod:`.functions`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .functions import (
    INCOMPLETE_GAMMA_SATURATION,
    binomial_coefficient,
    error_function,
    incomplete_beta_continued_fraction,
    incomplete_gamma_continued_fraction,
    incomplete_gamma_series_expansion,
    log,
    log2,
    log_beta,
    log_binomial_coefficient,
    log_factorial,
    log_gamma,
    log_multinomial_beta,
    lower_incomplete_gamma,
    regularized_incomplete_beta,
)
from .lentz import LentzMethod

__all__ = [
    # solver
    "LentzMethod",
    # logarithms
    "log",
    "log2",
    # gamma family
    "log_gamma",
    "log_factorial",
    "lower_incomplete_gamma",
    "incomplete_gamma_series_expansion",
    "incomplete_gamma_continued_fraction",
    "INCOMPLETE_GAMMA_SATURATION",
    # combinatorics
    "log_binomial_coefficient",
    "binomial_coefficient",
    # beta family
    "log_beta",
    "regularized_incomplete_beta",
    "incomplete_beta_continued_fraction",
    "log_multinomial_beta",
    # derived
    "error_function",
]
