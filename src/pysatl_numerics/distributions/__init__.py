"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL Numerics:

- distribution protocol (:mod:`.distribution`);
- computation primitives (:mod:`.computation`);
- characteristic descriptors and views (:mod:`.characteristics`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable strategies (:mod:`.strategies`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .characteristics import (
    CumulativeDistributionView,
    GenericCharacteristic,
    ProbabilityFunctionView,
)
from .computation import (
    AnalyticalComputation,
    Computation,
    FittedComputationMethod,
)
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    "FittedComputationMethod",
    # characteristics
    "GenericCharacteristic",
    "ProbabilityFunctionView",
    "CumulativeDistributionView",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
