"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_numerics.families.builtins.discrete.bernoulli import configure_bernoulli_family
from pysatl_numerics.families.builtins.discrete.negative_binomial import (
    configure_negative_binomial_family,
)

__all__ = [
    "configure_bernoulli_family",
    "configure_negative_binomial_family",
]
