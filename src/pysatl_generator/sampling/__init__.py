"""
Sampling subpackage

- closed-form primitive samplers (:mod:`.primitives`);
- gamma samplers: product of uniforms, Marsaglia, Ahrens-Dieter (:mod:`.gamma`);
- the recursive sample engine (:mod:`.engine`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .engine import sample, select_alternative
from .gamma import (
    fractional_argument,
    gamma_frac,
    gamma_int,
    gamma_large_int,
    sample_gamma,
)
from .primitives import (
    sample_exponential,
    sample_gaussian,
    sample_logistic,
    sample_supplied,
    sample_uniform,
)

__all__ = [
    # engine
    "sample",
    "select_alternative",
    # primitives
    "sample_uniform",
    "sample_exponential",
    "sample_logistic",
    "sample_gaussian",
    "sample_supplied",
    # gamma
    "gamma_int",
    "gamma_large_int",
    "gamma_frac",
    "fractional_argument",
    "sample_gamma",
]
