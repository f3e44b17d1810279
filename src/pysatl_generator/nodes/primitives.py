"""
Primitive distribution nodes.

Immutable leaves of a generator tree: Gaussian, Uniform, Logistic,
Exponential, Gamma and Supplied. Sampling formulas live in
:mod:`pysatl_generator.sampling`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pysatl_generator.errors import ConfigurationError
from pysatl_generator.nodes.base import DistributionNode
from pysatl_generator.nodes.constraints import constraint

if TYPE_CHECKING:
    from pysatl_generator.types import ValueGenerator

GAUSSIAN_SCALE_FACTOR = 3.0
"""Multiplier applied to ``stddev`` by the Box-Muller sampler."""


@dataclass(frozen=True, slots=True)
class Gaussian(DistributionNode):
    """
    Gaussian distribution sampled with the Box-Muller transform.

    Parameters
    ----------
    mean : float
        Location of the distribution.
    stddev : float
        Spread parameter. The sampler multiplies it by 3, so the effective
        standard deviation of the samples is ``3 * stddev``; the default of
        ``1/3`` gives unit effective deviation.
    """

    mean: float = 0.0
    stddev: float = 1.0 / 3.0

    _real_parameters = ("mean", "stddev")

    @constraint(description="stddev > 0")
    def check_stddev_positive(self) -> bool:
        return self.stddev > 0

    @property
    def effective_stddev(self) -> float:
        """Standard deviation of the generated samples."""
        return GAUSSIAN_SCALE_FACTOR * self.stddev


@dataclass(frozen=True, slots=True)
class Uniform(DistributionNode):
    """Continuous uniform distribution on ``[min, max)``."""

    min: float = 0.0
    max: float = 1.0

    _real_parameters = ("min", "max")

    @constraint(description="min < max")
    def check_bounds_ordered(self) -> bool:
        return self.min < self.max


@dataclass(frozen=True, slots=True)
class Logistic(DistributionNode):
    """Standard logistic distribution (location 0, scale 1)."""


@dataclass(frozen=True, slots=True)
class Exponential(DistributionNode):
    """Exponential distribution with the given ``rate``; mean is ``1 / rate``."""

    rate: float = 1.0

    _real_parameters = ("rate",)

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        return self.rate > 0


@dataclass(frozen=True, slots=True)
class Gamma(DistributionNode):
    """
    Gamma distribution with shape ``order`` and scale ``scale``.

    Parameters
    ----------
    order : float
        Shape parameter (k). May be fractional.
    scale : float
        Scale parameter (θ). The mean of the distribution is ``order * scale``.

    Attributes
    ----------
    integer_order : int
        ``floor(order)``, derived at construction.
    """

    order: float = 1.0
    scale: float = 1.0
    integer_order: int = field(init=False, compare=False)

    _real_parameters = ("order", "scale")

    def _normalize(self) -> None:
        DistributionNode._normalize(self)
        object.__setattr__(self, "integer_order", math.floor(self.order))

    @constraint(description="order > 0")
    def check_order_positive(self) -> bool:
        return self.order > 0

    @constraint(description="scale > 0")
    def check_scale_positive(self) -> bool:
        return self.scale > 0

    @property
    def is_integer_order(self) -> bool:
        return self.order == self.integer_order

    @property
    def fractional_order(self) -> float:
        """``order - integer_order``, in ``[0, 1)``."""
        return self.order - self.integer_order


class ConstantGenerator:
    """Zero-argument callable returning the same value on every call."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __call__(self) -> Any:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstantGenerator):
            return NotImplemented
        return bool(self.value == other.value)

    def __hash__(self) -> int:
        try:
            return hash((ConstantGenerator, self.value))
        except TypeError:
            return id(self)

    def __repr__(self) -> str:
        return f"ConstantGenerator({self.value!r})"


@dataclass(frozen=True, slots=True)
class Supplied(DistributionNode):
    """
    Caller-supplied value source.

    Parameters
    ----------
    generator : Callable[[], Any]
        Invoked with no arguments on every sample. Constants are wrapped in a
        :class:`ConstantGenerator` by :func:`~pysatl_generator.supplied`.
    """

    generator: ValueGenerator

    def _normalize(self) -> None:
        if not callable(self.generator):
            raise ConfigurationError(
                f"Supplied.generator must be callable, got {self.generator!r}"
            )

    @property
    def is_constant(self) -> bool:
        return isinstance(self.generator, ConstantGenerator)


__all__ = [
    "GAUSSIAN_SCALE_FACTOR",
    "Gaussian",
    "Uniform",
    "Logistic",
    "Exponential",
    "Gamma",
    "ConstantGenerator",
    "Supplied",
]
