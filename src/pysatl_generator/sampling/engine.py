"""
Sample Engine
=============

:func:`sample` draws one value from any node of a generator tree. It
dispatches over the closed set of node variants, delegating primitives to
:mod:`pysatl_generator.sampling.primitives` and
:mod:`pysatl_generator.sampling.gamma`, and recursing into composites.

Notes
-----
- Sampling is stateless: the only state touched is the uniform source.
- A :class:`~pysatl_generator.nodes.VectorComposition` yields a tuple with one
  independent draw per child, in child order.
- A :class:`~pysatl_generator.nodes.WeightedAlternative` is sampled by
  roulette-wheel selection over its current weights.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_generator.config import get_config
from pysatl_generator.errors import DegenerateStateError
from pysatl_generator.nodes.composite import (
    VectorComposition,
    WeightedAlternative,
    WeightedChild,
)
from pysatl_generator.nodes.primitives import (
    Exponential,
    Gamma,
    Gaussian,
    Logistic,
    Supplied,
    Uniform,
)
from pysatl_generator.sampling.gamma import sample_gamma
from pysatl_generator.sampling.primitives import (
    sample_exponential,
    sample_gaussian,
    sample_logistic,
    sample_supplied,
    sample_uniform,
)
from pysatl_generator.sources import default_uniform_source, draw

if TYPE_CHECKING:
    from pysatl_generator.config import GeneratorConfig
    from pysatl_generator.nodes.base import DistributionNode
    from pysatl_generator.sources import UniformSource
    from pysatl_generator.types import SampleValue


def sample(
    node: DistributionNode,
    source: UniformSource | None = None,
    config: GeneratorConfig | None = None,
) -> SampleValue:
    """
    Draw one sample from ``node``.

    Parameters
    ----------
    node : DistributionNode
        Root of the generator tree.
    source : UniformSource, optional
        Uniform source; defaults to the process-wide source.
    config : GeneratorConfig, optional
        Overrides the active configuration for this draw.

    Returns
    -------
    SampleValue
        A float for primitive nodes, the generator's result for supplied
        nodes, or a tuple for vector compositions.

    Raises
    ------
    DegenerateStateError
        If ``node`` is not a known node variant, or is an alternative with
        no children.
    """
    return _sample(
        node,
        default_uniform_source() if source is None else source,
        config or get_config(),
    )


def _sample(node: DistributionNode, source: UniformSource, config: GeneratorConfig) -> SampleValue:
    match node:
        case Uniform(min=low, max=high):
            return sample_uniform(low, high, source)
        case Gaussian(mean=mean, stddev=stddev):
            return sample_gaussian(mean, stddev, source, config)
        case Exponential(rate=rate):
            return sample_exponential(rate, source, config)
        case Logistic():
            return sample_logistic(source, config)
        case Gamma():
            return sample_gamma(node.order, node.scale, node.integer_order, source, config)
        case Supplied(generator=generator):
            return sample_supplied(generator)
        case VectorComposition(children=children):
            return tuple(_sample(child, source, config) for child in children)
        case WeightedAlternative(entries=entries) if entries:
            return _sample(select_alternative(entries, source).node, source, config)
        case _:
            raise DegenerateStateError(f"Cannot sample {node!r}: not a samplable node")


def select_alternative(entries: list[WeightedChild], source: UniformSource) -> WeightedChild:
    """
    Roulette-wheel selection.

    Draws ``r = S * U`` with ``S`` the sum of the weights, then walks the
    entries in insertion order subtracting each weight from ``r``; the first
    entry bringing ``r`` to ``<= 0`` is selected.

    Raises
    ------
    DegenerateStateError
        If ``entries`` is empty.
    """
    if not entries:
        raise DegenerateStateError("Weighted alternative has no children")

    weights = [entry.weight for entry in entries]
    remainder = sum(weights) * draw(source)
    for entry, weight in zip(entries, weights, strict=True):
        remainder -= weight
        if remainder <= 0:
            return entry
    # rounding can leave a tiny positive remainder after the last entry
    return entries[-1]


__all__ = [
    "sample",
    "select_alternative",
]
