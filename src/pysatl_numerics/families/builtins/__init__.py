"""
Built-in distribution families for PySATL Numerics.

This package contains implementations of standard statistical distribution families
that are available by default in PySATL Numerics.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_numerics.families.builtins.continuous import (
    configure_gamma_family,
    configure_log_normal_family,
    configure_uniform_family,
)
from pysatl_numerics.families.builtins.discrete import (
    configure_bernoulli_family,
    configure_negative_binomial_family,
)

__all__ = [
    "configure_gamma_family",
    "configure_log_normal_family",
    "configure_uniform_family",
    "configure_bernoulli_family",
    "configure_negative_binomial_family",
]
