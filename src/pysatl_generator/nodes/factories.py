"""
Node factories.

Construction functions with the documented defaults. Each validates its
parameters and raises :class:`~pysatl_generator.errors.ConfigurationError`
on invalid input.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

from pysatl_generator.nodes.primitives import (
    ConstantGenerator,
    Exponential,
    Gamma,
    Gaussian,
    Logistic,
    Supplied,
    Uniform,
)


def gaussian(mean: float = 0.0, stddev: float = 1.0 / 3.0) -> Gaussian:
    """
    Gaussian node.

    Samples have standard deviation ``3 * stddev``; with the default
    ``stddev = 1/3`` about two thirds of the samples fall within ``mean ± 1``.
    """
    return Gaussian(mean=mean, stddev=stddev)


def uniform(min: float = 0.0, max: float = 1.0) -> Uniform:  # noqa: A002
    """Uniform node on ``[min, max)``."""
    return Uniform(min=min, max=max)


def logistic() -> Logistic:
    """Standard logistic node."""
    return Logistic()


def supplied(value_or_generator: Any) -> Supplied:
    """
    Node returning a caller-supplied value.

    Parameters
    ----------
    value_or_generator : Any
        A zero-argument callable, invoked on every sample, or any other value,
        returned unchanged on every sample.
    """
    if callable(value_or_generator):
        return Supplied(value_or_generator)
    return Supplied(ConstantGenerator(value_or_generator))


def gamma(order: float = 1.0, scale: float = 1.0) -> Gamma:
    """Gamma node with shape ``order`` and scale ``scale``."""
    return Gamma(order=order, scale=scale)


def exponential(rate: float = 1.0) -> Exponential:
    """Exponential node with the given ``rate``."""
    return Exponential(rate=rate)


__all__ = [
    "gaussian",
    "uniform",
    "logistic",
    "supplied",
    "gamma",
    "exponential",
]
