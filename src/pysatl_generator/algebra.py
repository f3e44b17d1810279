"""
Composition Algebra
===================

Combinators building new nodes out of existing ones:

- :func:`vector_compose` — bundle nodes into one flat
  :class:`~pysatl_generator.nodes.VectorComposition`;
- :func:`weighted_alternative` — add an alternative to a
  :class:`~pysatl_generator.nodes.WeightedAlternative`, so chained calls
  build one flat alternative set;
- :func:`alternatives` — fold :func:`weighted_alternative` over many nodes;
- :func:`set_weight` — change the weight of a child of an alternative.

Operands that are not nodes are wrapped with
:func:`~pysatl_generator.nodes.supplied`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_generator.errors import ConfigurationError
from pysatl_generator.nodes.base import DistributionNode
from pysatl_generator.nodes.composite import (
    VectorComposition,
    WeightedAlternative,
    WeightedChild,
)
from pysatl_generator.nodes.factories import supplied

if TYPE_CHECKING:
    from typing import Any


def _as_node(value: Any) -> DistributionNode:
    return value if isinstance(value, DistributionNode) else supplied(value)


def vector_compose(*nodes: Any) -> VectorComposition:
    """
    Bundle nodes into a vector composition.

    Operands that are already vector compositions contribute their children,
    so ``vector_compose(vector_compose(a, b), c)`` has three components.

    Raises
    ------
    ConfigurationError
        If no operand is given.
    """
    if not nodes:
        raise ConfigurationError("vector_compose needs at least one operand")

    children: list[DistributionNode] = []
    for operand in map(_as_node, nodes):
        if isinstance(operand, VectorComposition):
            children.extend(operand.children)
        else:
            children.append(operand)
    return VectorComposition(tuple(children))


def weighted_alternative(lhs: Any, rhs: Any, weight: float = 1.0) -> WeightedAlternative:
    """
    Combine two operands into a weighted alternative.

    If ``lhs`` is already a weighted alternative its children, with their
    current weights, come first and ``rhs`` is appended; otherwise the result
    holds ``lhs`` with weight 1 followed by ``rhs``.

    ``lhs`` is not modified and the result does not share its entries: a later
    :func:`set_weight` on ``lhs`` leaves the result unchanged, and vice versa.
    Use :meth:`WeightedAlternative.extend` to grow an alternative in place.

    Parameters
    ----------
    lhs, rhs : Any
        Nodes, or values wrapped with :func:`~pysatl_generator.nodes.supplied`.
    weight : float, default 1.0
        Weight of ``rhs``.
    """
    lhs_node = _as_node(lhs)
    if isinstance(lhs_node, WeightedAlternative):
        entries = [WeightedChild(entry.node, entry.weight) for entry in lhs_node.entries]
    else:
        entries = [WeightedChild(lhs_node)]
    result = WeightedAlternative(entries)
    result.extend(_as_node(rhs), weight)
    return result


def alternatives(first: Any, second: Any, *rest: Any) -> WeightedAlternative:
    """Equal-weight alternative over all operands, in order."""
    result = weighted_alternative(first, second)
    for operand in rest:
        result.extend(_as_node(operand))
    return result


def set_weight(
    alternative: WeightedAlternative, node_or_index: DistributionNode | int, weight: float
) -> None:
    """
    Change the weight of a child of ``alternative``.

    Parameters
    ----------
    alternative : WeightedAlternative
        Alternative holding the child.
    node_or_index : DistributionNode or int
        The child node (matched by identity) or its position.
    weight : float
        New weight, finite and > 0. Affects only subsequent samples.

    Raises
    ------
    ConfigurationError
        If ``weight`` is invalid.
    KeyError
        If the node is not a child of ``alternative``.
    """
    alternative.set_weight(node_or_index, weight)


__all__ = [
    "vector_compose",
    "weighted_alternative",
    "alternatives",
    "set_weight",
]
