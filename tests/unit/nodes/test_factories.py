from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_generator import (
    ConfigurationError,
    ConstantGenerator,
    Exponential,
    Gamma,
    Gaussian,
    Logistic,
    Supplied,
    Uniform,
    exponential,
    gamma,
    gaussian,
    logistic,
    supplied,
    uniform,
)


def test_factories_return_variants_with_defaults() -> None:
    assert gaussian() == Gaussian(0.0, 1 / 3)
    assert uniform() == Uniform(0.0, 1.0)
    assert logistic() == Logistic()
    assert exponential() == Exponential(1.0)
    assert gamma() == Gamma(1.0, 1.0)


def test_factories_forward_parameters() -> None:
    assert gaussian(5, 2) == Gaussian(5.0, 2.0)
    assert uniform(-1, 1) == Uniform(-1.0, 1.0)
    assert exponential(0.5).rate == 0.5
    node = gamma(3.7, 2)
    assert (node.order, node.scale, node.integer_order) == (3.7, 2.0, 3)


def test_supplied_wraps_constants() -> None:
    node = supplied(4.2)
    assert isinstance(node, Supplied)
    assert node.generator == ConstantGenerator(4.2)


def test_supplied_keeps_callables() -> None:
    def gen() -> int:
        return 1

    assert supplied(gen).generator is gen


@pytest.mark.parametrize(
    "call",
    [
        lambda: gaussian(0, 0),
        lambda: uniform(1, 0),
        lambda: exponential(-1),
        lambda: gamma(0),
        lambda: gamma(1, -1),
    ],
)
def test_factories_validate(call) -> None:
    with pytest.raises(ConfigurationError):
        call()
