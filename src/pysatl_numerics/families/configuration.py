"""
Distribution Families Configuration
====================================

This module defines and configures the built-in parametric distribution
families of PySATL Numerics:

- Gamma, LogNormal and ContinuousUniform (continuous);
- Bernoulli and NegativeBinomial (discrete).

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Each family supports one or more parameterizations with automatic conversions.
- Families without an analytical ``log_pdf``/``log_pmf`` get it derived by the
  default computation strategy.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_numerics.families.builtins import (
    configure_bernoulli_family,
    configure_gamma_family,
    configure_log_normal_family,
    configure_negative_binomial_family,
    configure_uniform_family,
)
from pysatl_numerics.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    This function initializes all parametric families with their respective
    parameterizations, characteristics, and sampling strategies. It should be
    called during application startup to make distributions available.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_gamma_family()
    configure_log_normal_family()
    configure_uniform_family()
    configure_bernoulli_family()
    configure_negative_binomial_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
