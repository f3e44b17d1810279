"""
Error Hierarchy
===============

Exceptions raised by PySATL Generator.

- :class:`ConfigurationError` — invalid construction parameters, weights or
  configuration values; raised eagerly, at construction or assignment time.
- :class:`NumericDomainError` — the uniform source produced a value that a
  sampling formula cannot consume.
- :class:`RejectionLimitError` — a rejection loop ran out of attempts.
- :class:`DegenerateStateError` — internal invariant violation in the engine.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class GeneratorError(Exception):
    """Base class for all errors raised by the library."""


class ConfigurationError(GeneratorError, ValueError):
    """Invalid parameters of a node, a weight, or a configuration value."""


class NumericDomainError(GeneratorError, ArithmeticError):
    """A uniform draw fell outside the domain required by a formula."""


class RejectionLimitError(GeneratorError, RuntimeError):
    """
    A rejection loop exceeded the configured number of attempts.

    Parameters
    ----------
    algorithm : str
        Name of the rejection loop that gave up.
    attempts : int
        Number of attempts made.
    """

    def __init__(self, algorithm: str, attempts: int) -> None:
        super().__init__(f"{algorithm}: no candidate accepted after {attempts} attempts")
        self.algorithm = algorithm
        self.attempts = attempts


class DegenerateStateError(GeneratorError, AssertionError):
    """The sample engine reached a node it cannot sample."""


__all__ = [
    "GeneratorError",
    "ConfigurationError",
    "NumericDomainError",
    "RejectionLimitError",
    "DegenerateStateError",
]
