"""
Tests for vector compositions and weighted alternatives.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_generator.errors import ConfigurationError
from pysatl_generator.nodes import (
    Exponential,
    Gaussian,
    Uniform,
    VectorComposition,
    WeightedAlternative,
    WeightedChild,
)


class TestVectorComposition:
    def test_children_stored_as_tuple_in_order(self) -> None:
        a, b = Gaussian(), Uniform()
        node = VectorComposition([a, b])  # type: ignore[arg-type]
        assert node.children == (a, b)
        assert node.dimension == 2
        assert len(node) == 2
        assert list(node) == [a, b]

    def test_empty_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="at least one child"):
            VectorComposition(())

    def test_nested_vector_rejected(self) -> None:
        inner = VectorComposition((Gaussian(),))
        with pytest.raises(ConfigurationError, match="nested"):
            VectorComposition((inner, Uniform()))

    def test_non_node_child_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="distribution nodes"):
            VectorComposition((Gaussian(), 3.0))  # type: ignore[arg-type]


class TestWeightedChild:
    def test_default_weight(self) -> None:
        assert WeightedChild(Gaussian()).weight == 1.0

    @pytest.mark.parametrize("weight", [0.0, -1.0, float("nan"), float("inf"), "2", False])
    def test_invalid_weight_rejected_on_construction(self, weight: object) -> None:
        with pytest.raises(ConfigurationError, match="Weight"):
            WeightedChild(Gaussian(), weight)  # type: ignore[arg-type]

    def test_invalid_weight_rejected_on_assignment(self) -> None:
        entry = WeightedChild(Gaussian(), 2.0)
        with pytest.raises(ConfigurationError):
            entry.weight = 0.0
        assert entry.weight == 2.0

    def test_weight_assignment(self) -> None:
        entry = WeightedChild(Gaussian())
        entry.weight = 4
        assert entry.weight == 4.0

    def test_node_required(self) -> None:
        with pytest.raises(ConfigurationError):
            WeightedChild("not a node")  # type: ignore[arg-type]


class TestWeightedAlternative:
    def setup_method(self) -> None:
        self.a = Gaussian()
        self.b = Uniform()
        self.c = Exponential()
        self.alt = WeightedAlternative.of([self.a, self.b])

    def test_of_uses_unit_weights(self) -> None:
        assert self.alt.nodes == [self.a, self.b]
        assert self.alt.weights == [1.0, 1.0]
        assert self.alt.total_weight == 2.0

    def test_extend_appends_in_place(self) -> None:
        entry = self.alt.extend(self.c, weight=3.0)
        assert entry.node is self.c
        assert self.alt.nodes == [self.a, self.b, self.c]
        assert self.alt.weights == [1.0, 1.0, 3.0]
        assert len(self.alt) == 3

    def test_set_weight_by_node_and_index(self) -> None:
        self.alt.set_weight(self.b, 5.0)
        self.alt.set_weight(0, 0.5)
        assert self.alt.weights == [0.5, 5.0]

    def test_set_weight_matches_identity_first(self) -> None:
        twin = Gaussian()
        self.alt.extend(twin)
        assert twin == self.a
        self.alt.set_weight(twin, 7.0)
        assert self.alt.weights == [1.0, 1.0, 7.0]

    def test_set_weight_unknown_node(self) -> None:
        with pytest.raises(KeyError):
            self.alt.set_weight(self.c, 2.0)

    def test_set_weight_rejects_non_positive(self) -> None:
        with pytest.raises(ConfigurationError):
            self.alt.set_weight(self.a, -1.0)
        assert self.alt.weights == [1.0, 1.0]

    def test_entries_validated(self) -> None:
        with pytest.raises(ConfigurationError, match="WeightedChild"):
            WeightedAlternative([self.a])  # type: ignore[list-item]

    def test_identity_equality(self) -> None:
        other = WeightedAlternative.of([self.a, self.b])
        assert other != self.alt
        assert {self.alt, other} == {self.alt, other}
