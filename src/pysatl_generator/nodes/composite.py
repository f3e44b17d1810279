"""
Composite distribution nodes.

- :class:`VectorComposition` — fixed-order bundle of independent children,
  sampled into a tuple.
- :class:`WeightedAlternative` — roulette-wheel choice among weighted
  children, one of which is sampled per draw.

Notes
-----
- Children are owned by the composite that holds them.
- The weight of a :class:`WeightedChild` is the only mutable field of the node
  model. Mutating an alternative (``extend``/``set_weight``) is not
  synchronised; guard it externally if other threads sample concurrently.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import TYPE_CHECKING

from pysatl_generator.errors import ConfigurationError
from pysatl_generator.nodes.base import DistributionNode
from pysatl_generator.nodes.constraints import constraint

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def _check_node(value: object, owner: str) -> DistributionNode:
    if not isinstance(value, DistributionNode):
        raise ConfigurationError(f"{owner} children must be distribution nodes, got {value!r}")
    return value


def _check_weight(weight: object) -> float:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise ConfigurationError(f"Weight must be a real number, got {weight!r}")
    weight = float(weight)
    if not math.isfinite(weight) or weight <= 0:
        raise ConfigurationError(f"Weight must be finite and > 0, got {weight!r}")
    return weight


@dataclass(frozen=True, slots=True)
class VectorComposition(DistributionNode):
    """
    Ordered bundle of independent distributions.

    Parameters
    ----------
    children : tuple[DistributionNode, ...]
        Components in sampling order. Use
        :func:`~pysatl_generator.vector_compose` to build one from nodes and
        existing compositions.
    """

    children: tuple[DistributionNode, ...]

    def _normalize(self) -> None:
        children = tuple(self.children)
        for child in children:
            _check_node(child, "VectorComposition")
        object.__setattr__(self, "children", children)

    @constraint(description="at least one child")
    def check_not_empty(self) -> bool:
        return len(self.children) > 0

    @constraint(description="no directly nested vector compositions")
    def check_flat(self) -> bool:
        return not any(isinstance(child, VectorComposition) for child in self.children)

    @property
    def dimension(self) -> int:
        """Number of components of each sample."""
        return len(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[DistributionNode]:
        return iter(self.children)


class WeightedChild:
    """
    Child of a :class:`WeightedAlternative` with its selection weight.

    Parameters
    ----------
    node : DistributionNode
        Alternative to sample when selected.
    weight : float, default 1.0
        Relative selection weight, finite and > 0. Reassigning it affects
        only subsequent samples.
    """

    __slots__ = ("_node", "_weight")

    def __init__(self, node: DistributionNode, weight: float = 1.0) -> None:
        self._node = _check_node(node, "WeightedAlternative")
        self._weight = _check_weight(weight)

    @property
    def node(self) -> DistributionNode:
        return self._node

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value: float) -> None:
        self._weight = _check_weight(value)

    def __repr__(self) -> str:
        return f"WeightedChild(node={self._node!r}, weight={self._weight!r})"


@dataclass(slots=True, eq=False)
class WeightedAlternative(DistributionNode):
    """
    Weighted choice among alternative distributions.

    Each sample selects one child with probability proportional to its
    weight and returns that child's sample. Ties are resolved by insertion
    order.

    Parameters
    ----------
    entries : list[WeightedChild]
        Children in insertion order.
    """

    entries: list[WeightedChild] = field(default_factory=list)

    def _normalize(self) -> None:
        entries = list(self.entries)
        for entry in entries:
            if not isinstance(entry, WeightedChild):
                raise ConfigurationError(
                    f"WeightedAlternative entries must be WeightedChild, got {entry!r}"
                )
        self.entries = entries

    @classmethod
    def of(cls, nodes: Iterable[DistributionNode]) -> WeightedAlternative:
        """Create an alternative over ``nodes``, each with weight 1."""
        return cls([WeightedChild(node) for node in nodes])

    def extend(self, node: DistributionNode, weight: float = 1.0) -> WeightedChild:
        """
        Append an alternative in place.

        Returns
        -------
        WeightedChild
            The new entry, whose ``weight`` can be adjusted later.
        """
        entry = WeightedChild(node, weight)
        self.entries.append(entry)
        return entry

    def entry(self, node_or_index: DistributionNode | int) -> WeightedChild:
        """
        Find an entry by position or by node identity.

        Nodes are matched with ``is``; the first match in insertion order wins.

        Raises
        ------
        IndexError
            If the index is out of range.
        KeyError
            If the node is not a child of this alternative.
        """
        if isinstance(node_or_index, DistributionNode):
            for candidate in self.entries:
                if candidate.node is node_or_index:
                    return candidate
            raise KeyError(f"{node_or_index!r} is not an alternative of this node")
        return self.entries[node_or_index]

    def set_weight(self, node_or_index: DistributionNode | int, weight: float) -> None:
        """
        Change the weight of a child; affects only subsequent samples.

        Raises
        ------
        ConfigurationError
            If ``weight`` is not finite and positive.
        """
        self.entry(node_or_index).weight = weight

    @property
    def nodes(self) -> list[DistributionNode]:
        return [entry.node for entry in self.entries]

    @property
    def weights(self) -> list[float]:
        return [entry.weight for entry in self.entries]

    @property
    def total_weight(self) -> float:
        return math.fsum(self.weights)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[WeightedChild]:
        return iter(self.entries)


__all__ = [
    "VectorComposition",
    "WeightedChild",
    "WeightedAlternative",
]
