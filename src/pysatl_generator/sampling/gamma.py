"""
Gamma Samplers
==============

Gamma variates of shape ``order`` are assembled from three algorithms:

- :func:`gamma_int` — integer orders below ``large_order_threshold``, as the
  negative logarithm of a product of nonzero uniforms (a sum of unit
  exponentials);
- :func:`gamma_large_int` — larger integer orders, Marsaglia's rejection
  method with a tangent (Cauchy) proposal;
- :func:`gamma_frac` — orders in ``(0, 1)``, the Ahrens-Dieter GS algorithm.

:func:`sample_gamma` combines them. For a non-integer order above one the
integer part and the fractional part are sampled separately and summed; the
fractional argument depends on
:attr:`~pysatl_generator.config.GeneratorConfig.gamma_fraction_mode`.

Every rejection loop gives up after
:attr:`~pysatl_generator.config.GeneratorConfig.max_rejections` iterations
with :class:`~pysatl_generator.errors.RejectionLimitError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

from pysatl_generator.config import get_config
from pysatl_generator.errors import RejectionLimitError
from pysatl_generator.sources import draw, draw_nonzero
from pysatl_generator.types import GammaFractionMode

if TYPE_CHECKING:
    from pysatl_generator.config import GeneratorConfig
    from pysatl_generator.sources import UniformSource

logger = logging.getLogger(__name__)


def _give_up(algorithm: str, attempts: int) -> RejectionLimitError:
    logger.error("%s rejected every candidate in %d attempts", algorithm, attempts)
    return RejectionLimitError(algorithm, attempts)


def gamma_int(order: int, source: UniformSource, config: GeneratorConfig | None = None) -> float:
    """
    Gamma variate of integer shape ``order`` and unit scale.

    Below ``large_order_threshold`` this is ``-(ln U'_1 + ... + ln U'_order)``,
    the log of the product taken term by term so large orders cannot underflow;
    otherwise :func:`gamma_large_int` is used.
    """
    cfg = config or get_config()
    if order >= cfg.large_order_threshold:
        return gamma_large_int(order, source, cfg)

    return -math.fsum(math.log(draw_nonzero(source, cfg.max_rejections)) for _ in range(order))


def gamma_large_int(
    order: int, source: UniformSource, config: GeneratorConfig | None = None
) -> float:
    """
    Marsaglia's rejection method for integer shape ``order >= 2``.

    With ``sq = sqrt(2 order - 1)`` the proposal is ``x = sq * tan(pi U) + order - 1``
    (redrawn until positive), accepted when a fresh ``V`` satisfies
    ``V <= (1 + y^2) exp((order - 1) ln(x / (order - 1)) - sq y)``.
    """
    cfg = config or get_config()
    sq = math.sqrt(2 * order - 1)
    shift = order - 1

    for _ in range(cfg.max_rejections):
        for _ in range(cfg.max_rejections):
            y = math.tan(math.pi * draw(source))
            x = sq * y + shift
            if x > 0:
                break
        else:
            raise _give_up("Marsaglia proposal", cfg.max_rejections)

        v = draw(source)
        if v <= (1 + y * y) * math.exp(shift * math.log(x / shift) - sq * y):
            return x

    raise _give_up("Marsaglia acceptance", cfg.max_rejections)


def gamma_frac(order: float, source: UniformSource, config: GeneratorConfig | None = None) -> float:
    """
    Ahrens-Dieter GS algorithm for shape ``order`` in ``(0, 1)``.

    With ``p = e / (order + e)``, draw ``u = U`` and ``v = U'``; if ``u < p``
    the candidate is ``x = v^(1/order)`` with acceptance level ``exp(-x)``,
    otherwise ``x = 1 - ln v`` with level ``x^(order - 1)``. A fresh ``W``
    below the level accepts ``x``.
    """
    cfg = config or get_config()
    p = math.e / (order + math.e)

    for _ in range(cfg.max_rejections):
        u = draw(source)
        v = draw_nonzero(source, cfg.max_rejections)
        if u < p:
            try:
                x = math.exp(math.log(v) / order)
            except OverflowError:
                # only reachable with a negative order (legacy fraction mode)
                x = math.inf
            q = math.exp(-x)
        else:
            x = 1.0 - math.log(v)
            q = math.exp((order - 1.0) * math.log(x))
        if draw(source) < q:
            return x

    raise _give_up("Ahrens-Dieter GS", cfg.max_rejections)


def fractional_argument(order: float, integer_order: int, mode: GammaFractionMode) -> float:
    """
    Argument passed to :func:`gamma_frac` for the fractional part of ``order``.

    ``REMAINDER`` gives ``order - integer_order``; ``LEGACY`` gives
    ``integer_order - order``.
    """
    if mode is GammaFractionMode.LEGACY:
        return integer_order - order
    return order - integer_order


def sample_gamma(
    order: float,
    scale: float,
    integer_order: int,
    source: UniformSource,
    config: GeneratorConfig | None = None,
) -> float:
    """
    Gamma variate of shape ``order`` and scale ``scale``.

    Parameters
    ----------
    order : float
        Shape, > 0.
    scale : float
        Scale, > 0.
    integer_order : int
        ``floor(order)``.
    source : UniformSource
        Uniform source to draw from.
    config : GeneratorConfig, optional
        Overrides the active configuration.
    """
    cfg = config or get_config()

    if order == integer_order:
        return scale * gamma_int(integer_order, source, cfg)
    if integer_order == 0:
        return scale * gamma_frac(order, source, cfg)

    fraction = fractional_argument(order, integer_order, cfg.gamma_fraction_mode)
    integer_part = gamma_int(integer_order, source, cfg)
    return scale * (integer_part + gamma_frac(fraction, source, cfg))


__all__ = [
    "gamma_int",
    "gamma_large_int",
    "gamma_frac",
    "fractional_argument",
    "sample_gamma",
]
