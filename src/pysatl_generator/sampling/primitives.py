"""
Primitive Samplers
==================

Closed-form samplers for the primitive distributions. Every function takes
its parameters and a :class:`~pysatl_generator.sources.UniformSource`, and
returns one variate.

Notes
-----
- Every formula that takes a logarithm of a draw uses
  :func:`~pysatl_generator.sources.draw_nonzero`, so ``-inf`` and NaN never
  leave these functions.
- The Box-Muller sampler multiplies ``stddev`` by
  :data:`~pysatl_generator.nodes.primitives.GAUSSIAN_SCALE_FACTOR`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_generator.config import get_config
from pysatl_generator.nodes.primitives import GAUSSIAN_SCALE_FACTOR
from pysatl_generator.sources import draw, draw_nonzero

if TYPE_CHECKING:
    from typing import Any

    from pysatl_generator.config import GeneratorConfig
    from pysatl_generator.sources import UniformSource
    from pysatl_generator.types import ValueGenerator

TWO_PI = 2.0 * math.pi


def sample_uniform(min: float, max: float, source: UniformSource) -> float:  # noqa: A002
    """``(max - min) * U + min``."""
    return (max - min) * draw(source) + min


def sample_exponential(
    rate: float, source: UniformSource, config: GeneratorConfig | None = None
) -> float:
    """``-ln(U') / rate``."""
    cfg = config or get_config()
    return -math.log(draw_nonzero(source, cfg.max_rejections)) / rate


def sample_logistic(source: UniformSource, config: GeneratorConfig | None = None) -> float:
    """Standard logistic variate, ``-ln(1/U' - 1)``."""
    cfg = config or get_config()
    u = draw_nonzero(source, cfg.max_rejections)
    return -math.log(1.0 / u - 1.0)


def sample_gaussian(
    mean: float, stddev: float, source: UniformSource, config: GeneratorConfig | None = None
) -> float:
    """
    Box-Muller transform.

    Returns ``mean + sqrt(-2 ln U') * cos(2 pi V) * stddev * 3``, where ``U'``
    is drawn first and ``V`` second.
    """
    cfg = config or get_config()
    u = draw_nonzero(source, cfg.max_rejections)
    v = draw(source)
    radius = math.sqrt(-2.0 * math.log(u))
    return mean + radius * math.cos(TWO_PI * v) * stddev * GAUSSIAN_SCALE_FACTOR


def sample_supplied(generator: ValueGenerator) -> Any:
    """Invoke ``generator`` and return its result."""
    return generator()


__all__ = [
    "sample_uniform",
    "sample_exponential",
    "sample_logistic",
    "sample_gaussian",
    "sample_supplied",
]
