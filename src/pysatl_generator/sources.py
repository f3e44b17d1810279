"""
Uniform Sources
===============

The uniform source is the only source of randomness of the library. Every
sampler consumes draws through the helpers defined here:

- :class:`UniformSource` protocol — anything with a ``random() -> float``
  method returning values in ``[0, 1)``.
- :class:`NumpyUniformSource` — backed by an independent
  :class:`numpy.random.Generator`.
- :class:`LockedUniformSource` — serialises draws of a wrapped source so it
  can be shared between threads.
- :func:`draw` and :func:`draw_nonzero` — checked draws used by samplers.

Notes
-----
- The process-wide default source is a :class:`LockedUniformSource` around a
  fresh :class:`NumpyUniformSource`. Threads that need independent streams
  should pass their own source to :func:`~pysatl_generator.sample`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import threading
from typing import Protocol, runtime_checkable

import numpy as np

from pysatl_generator.errors import NumericDomainError

logger = logging.getLogger(__name__)


@runtime_checkable
class UniformSource(Protocol):
    """Producer of independent uniform variates in ``[0, 1)``."""

    def random(self) -> float: ...


class NumpyUniformSource:
    """
    Uniform source backed by a NumPy generator.

    Parameters
    ----------
    seed : int, numpy.random.Generator or None, default None
        Seed for :func:`numpy.random.default_rng`, or an existing generator
        to draw from. ``None`` seeds from system entropy.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | np.random.Generator | None = None) -> None:
        self._rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        """Underlying NumPy generator."""
        return self._rng

    def random(self) -> float:
        """Return a uniform variate in ``[0, 1)``."""
        return float(self._rng.random())


class LockedUniformSource:
    """
    Thread-safe wrapper serialising draws from another source.

    Parameters
    ----------
    inner : UniformSource
        Source to protect.
    """

    __slots__ = ("_inner", "_lock")

    def __init__(self, inner: UniformSource) -> None:
        self._inner = inner
        self._lock = threading.Lock()

    @property
    def inner(self) -> UniformSource:
        return self._inner

    def random(self) -> float:
        with self._lock:
            return self._inner.random()


_default_source: UniformSource = LockedUniformSource(NumpyUniformSource())


def default_uniform_source() -> UniformSource:
    """Return the process-wide default uniform source."""
    return _default_source


def set_default_uniform_source(source: UniformSource) -> None:
    """
    Replace the process-wide default uniform source.

    Parameters
    ----------
    source : UniformSource
        New default. It is used as-is; wrap it in :class:`LockedUniformSource`
        if it will be shared between threads.

    Raises
    ------
    TypeError
        If ``source`` has no ``random`` method.
    """
    global _default_source
    if not isinstance(source, UniformSource):
        raise TypeError(f"Uniform source must provide random(), got {type(source).__name__}")
    _default_source = source


def reset_default_uniform_source(seed: int | None = None) -> None:
    """Install a fresh, locked NumPy-backed default source."""
    global _default_source
    _default_source = LockedUniformSource(NumpyUniformSource(seed))


def draw(source: UniformSource) -> float:
    """
    Draw a single value in ``[0, 1)``.

    Raises
    ------
    NumericDomainError
        If the source returned a value outside ``[0, 1)`` (NaN included).
    """
    u = source.random()
    if not 0.0 <= u < 1.0:
        raise NumericDomainError(f"Uniform source returned {u!r}, expected a value in [0, 1)")
    return u


def draw_nonzero(source: UniformSource, max_attempts: int) -> float:
    """
    Draw a single value in ``(0, 1)``, redrawing exact zeros.

    Parameters
    ----------
    source : UniformSource
        Source to draw from.
    max_attempts : int
        Number of draws after which the source is considered stuck at zero.

    Raises
    ------
    NumericDomainError
        If the source returned a value outside ``[0, 1)`` or only zeros.
    """
    for _ in range(max_attempts):
        u = draw(source)
        if u > 0.0:
            return u
    logger.error("Uniform source returned zero %d times in a row", max_attempts)
    raise NumericDomainError(
        f"Uniform source returned zero {max_attempts} times in a row; "
        "cannot take the logarithm of a zero draw"
    )


__all__ = [
    "UniformSource",
    "NumpyUniformSource",
    "LockedUniformSource",
    "default_uniform_source",
    "set_default_uniform_source",
    "reset_default_uniform_source",
    "draw",
    "draw_nonzero",
]
