"""
Parameter constraints for distribution nodes.

Node classes declare their invariants as predicate methods decorated with
:func:`constraint`; :func:`collect_constraints` gathers them when the class is
created and :meth:`~pysatl_generator.nodes.base.DistributionNode.validate`
checks them at construction time.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from inspect import isfunction
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., bool])


@dataclass(slots=True, frozen=True)
class NodeConstraint:
    """
    Named invariant of a node class.

    ``description`` appears in the :class:`~pysatl_generator.errors.ConfigurationError`
    raised when ``check(node)`` returns False, e.g. ``"stddev > 0"``.
    """

    description: str
    check: Callable[[Any], bool]


_MARKER = "_node_constraint"


def constraint(description: str) -> Callable[[F], F]:
    """
    Register a predicate method as an invariant of its node class.

    The method takes only ``self`` and returns whether the node's parameters
    are acceptable; ``description`` names the invariant in error messages.
    Marked methods are picked up by :func:`collect_constraints` when the class
    is created.
    """

    def decorator(func: F) -> F:
        setattr(func, _MARKER, description)
        return func

    return decorator


def collect_constraints(cls: type) -> list[NodeConstraint]:
    """
    Collect constraint methods declared directly on ``cls``.

    Raises
    ------
    TypeError
        If a constraint is declared as a static or class method.
    """
    constraints: list[NodeConstraint] = []
    for name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod | classmethod):
            if hasattr(attr.__func__, _MARKER):
                raise TypeError(f"@constraint '{name}' must be an instance method")
        elif isfunction(attr) and hasattr(attr, _MARKER):
            constraints.append(NodeConstraint(getattr(attr, _MARKER), attr))
    return constraints


__all__ = [
    "NodeConstraint",
    "constraint",
    "collect_constraints",
]
