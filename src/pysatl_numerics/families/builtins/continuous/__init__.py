"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_numerics.families.builtins.continuous.gamma import configure_gamma_family
from pysatl_numerics.families.builtins.continuous.log_normal import configure_log_normal_family
from pysatl_numerics.families.builtins.continuous.uniform import configure_uniform_family

__all__ = [
    "configure_gamma_family",
    "configure_log_normal_family",
    "configure_uniform_family",
]
