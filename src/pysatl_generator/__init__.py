"""
PySATL Generator
================

Composite random-variate generators built from primitive distributions
(Gaussian, Uniform, Logistic, Exponential, Gamma, caller-supplied values)
with two combinators: vector composition and weighted alternatives.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .algebra import alternatives, set_weight, vector_compose, weighted_alternative
from .config import GeneratorConfig, configure, get_config, reset_config
from .errors import *
from .errors import __all__ as _errors_all
from .nodes import *
from .nodes import __all__ as _nodes_all
from .sampling import sample
from .sources import *
from .sources import __all__ as _sources_all
from .types import GammaFractionMode

__version__ = version("pysatl-generator")
__all__ = [
    "__version__",
    "vector_compose",
    "weighted_alternative",
    "alternatives",
    "set_weight",
    "sample",
    "GeneratorConfig",
    "GammaFractionMode",
    "configure",
    "get_config",
    "reset_config",
    *_errors_all,
    *_nodes_all,
    *_sources_all,
]

del _errors_all
del _nodes_all
del _sources_all
