"""
Nodes subpackage

The data model of generator trees:

- node base class and constraint machinery (:mod:`.base`, :mod:`.constraints`);
- primitive distributions (:mod:`.primitives`);
- vector and weighted alternative composites (:mod:`.composite`);
- factory functions with default parameters (:mod:`.factories`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .base import DistributionNode
from .composite import VectorComposition, WeightedAlternative, WeightedChild
from .constraints import NodeConstraint, constraint
from .factories import exponential, gamma, gaussian, logistic, supplied, uniform
from .primitives import (
    GAUSSIAN_SCALE_FACTOR,
    ConstantGenerator,
    Exponential,
    Gamma,
    Gaussian,
    Logistic,
    Supplied,
    Uniform,
)

__all__ = [
    # base
    "DistributionNode",
    "NodeConstraint",
    "constraint",
    # primitives
    "GAUSSIAN_SCALE_FACTOR",
    "Gaussian",
    "Uniform",
    "Logistic",
    "Exponential",
    "Gamma",
    "ConstantGenerator",
    "Supplied",
    # composites
    "VectorComposition",
    "WeightedChild",
    "WeightedAlternative",
    # factories
    "gaussian",
    "uniform",
    "logistic",
    "supplied",
    "gamma",
    "exponential",
]
