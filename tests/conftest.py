from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_generator.config import reset_config
from pysatl_generator.sources import NumpyUniformSource, reset_default_uniform_source


@pytest.fixture(autouse=True)
def _fresh_state() -> Generator[None, Any, None]:
    reset_config()
    reset_default_uniform_source(seed=20250101)
    yield
    reset_config()
    reset_default_uniform_source()


@pytest.fixture
def rng_source() -> NumpyUniformSource:
    return NumpyUniformSource(seed=12345)
