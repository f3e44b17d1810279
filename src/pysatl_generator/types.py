"""
Core Type Definitions
=====================

Type aliases and enumerations shared across PySATL Generator.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from enum import StrEnum
from typing import Any, TypeAlias

SampleValue: TypeAlias = "float | tuple[SampleValue, ...] | Any"
"""Result of sampling a node: a scalar, or a tuple for vector compositions."""

ValueGenerator: TypeAlias = Callable[[], Any]
"""Zero-argument callable invoked by supplied nodes on every sample."""


class GammaFractionMode(StrEnum):
    """
    Fractional argument used by the gamma sampler for non-integer orders above one.

    Attributes
    ----------
    REMAINDER : str
        ``order - floor(order)``, the fractional part of the order, in ``(0, 1)``.
    LEGACY : str
        ``floor(order) - order``, the inverted argument produced by the historical
        implementation. Kept for reproducing old output; it is negative and does
        not yield a gamma variate of the requested order.
    """

    REMAINDER = "remainder"
    LEGACY = "legacy"


__all__ = [
    "SampleValue",
    "ValueGenerator",
    "GammaFractionMode",
]
