"""
Distribution Node Base
======================

:class:`DistributionNode` is the root of the closed set of node variants
callers build and sample. Concrete variants are dataclasses defined in
:mod:`pysatl_generator.nodes.primitives` and
:mod:`pysatl_generator.nodes.composite`.

Notes
-----
- Real-valued parameters listed in ``_real_parameters`` are coerced to
  ``float`` and must be finite.
- Constraints declared with :func:`~pysatl_generator.nodes.constraints.constraint`
  are checked right after construction; a violation raises
  :class:`~pysatl_generator.errors.ConfigurationError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC
from numbers import Real
from typing import TYPE_CHECKING, ClassVar

from pysatl_generator.errors import ConfigurationError
from pysatl_generator.nodes.constraints import NodeConstraint, collect_constraints

if TYPE_CHECKING:
    from typing import Any

    from pysatl_generator.sources import UniformSource
    from pysatl_generator.types import SampleValue


class DistributionNode(ABC):
    """Base class of every node of a generator tree."""

    __slots__ = ()

    _constraints: ClassVar[list[NodeConstraint]] = []
    _real_parameters: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._constraints = collect_constraints(cls)

    def __post_init__(self) -> None:
        self._normalize()
        self.validate()

    def _normalize(self) -> None:
        for name in self._real_parameters:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ConfigurationError(
                    f"{type(self).__name__}.{name} must be a real number, got {value!r}"
                )
            value = float(value)
            if not math.isfinite(value):
                raise ConfigurationError(
                    f"{type(self).__name__}.{name} must be finite, got {value!r}"
                )
            object.__setattr__(self, name, value)

    @property
    def constraints(self) -> list[NodeConstraint]:
        """Get constraints for this node."""
        return self._constraints

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        fields = getattr(self, "__dataclass_fields__", {})
        return {f: getattr(self, f) for f in fields}

    def validate(self) -> None:
        """
        Validate all constraints for this node.

        Raises
        ------
        ConfigurationError
            If any constraint is not satisfied.
        """
        for node_constraint in self._constraints:
            if not node_constraint.check(self):
                raise ConfigurationError(
                    f'Constraint "{node_constraint.description}" does not hold '
                    f"for {type(self).__name__}"
                )

    def sample(self, source: UniformSource | None = None) -> SampleValue:
        """
        Draw one sample from this node.

        Parameters
        ----------
        source : UniformSource, optional
            Uniform source to draw from; defaults to the process-wide source.
        """
        from pysatl_generator.sampling.engine import sample

        return sample(self, source)


__all__ = [
    "DistributionNode",
]
