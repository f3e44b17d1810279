"""
Generator Configuration
=======================

Process-wide settings consulted by the samplers at call time:

- :class:`GeneratorConfig` — immutable bundle of sampler settings.
- :func:`configure` — replace the active configuration.
- :func:`get_config` / :func:`reset_config` — query and restore defaults.

Notes
-----
- Samplers accept an explicit ``config`` argument which takes precedence over
  the active configuration for a single call.
- Selecting :attr:`GammaFractionMode.LEGACY` emits a :class:`UserWarning`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import warnings
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from pysatl_generator.errors import ConfigurationError
from pysatl_generator.types import GammaFractionMode

if TYPE_CHECKING:
    from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_MAX_REJECTIONS = 100_000
DEFAULT_LARGE_ORDER_THRESHOLD = 12


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """
    Sampler settings.

    Parameters
    ----------
    gamma_fraction_mode : GammaFractionMode, default REMAINDER
        Fractional argument of the gamma sampler for non-integer orders > 1.
    max_rejections : int, default 100000
        Upper bound on iterations of every rejection loop. Exhaustion is a
        fatal error; it never triggers with a well-behaved uniform source.
    large_order_threshold : int, default 12
        Integer gamma orders at or above this value use Marsaglia's rejection
        method instead of a product of uniforms.

    Raises
    ------
    ConfigurationError
        If a value is out of range.
    """

    gamma_fraction_mode: GammaFractionMode = GammaFractionMode.REMAINDER
    max_rejections: int = DEFAULT_MAX_REJECTIONS
    large_order_threshold: int = DEFAULT_LARGE_ORDER_THRESHOLD

    def __post_init__(self) -> None:
        try:
            mode = GammaFractionMode(self.gamma_fraction_mode)
        except ValueError:
            raise ConfigurationError(
                f"Unknown gamma fraction mode {self.gamma_fraction_mode!r}, "
                f"expected one of {[m.value for m in GammaFractionMode]}"
            ) from None
        object.__setattr__(self, "gamma_fraction_mode", mode)

        if not _is_int(self.max_rejections) or self.max_rejections < 1:
            raise ConfigurationError(
                f"max_rejections must be a positive integer, got {self.max_rejections!r}"
            )
        if not _is_int(self.large_order_threshold) or self.large_order_threshold < 2:
            raise ConfigurationError(
                "large_order_threshold must be an integer >= 2, "
                f"got {self.large_order_threshold!r}"
            )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


_active_config = GeneratorConfig()


def get_config() -> GeneratorConfig:
    """Return the active configuration."""
    return _active_config


def configure(**overrides: Any) -> GeneratorConfig:
    """
    Replace the active configuration.

    Fields not mentioned keep their current values.

    Parameters
    ----------
    **overrides
        Field values of :class:`GeneratorConfig`.

    Returns
    -------
    GeneratorConfig
        The new active configuration.

    Raises
    ------
    ConfigurationError
        If a field is unknown or a value is out of range.
    """
    global _active_config

    try:
        new_config = replace(_active_config, **overrides)
    except TypeError as exc:
        raise ConfigurationError(str(exc)) from exc

    if (
        new_config.gamma_fraction_mode is GammaFractionMode.LEGACY
        and _active_config.gamma_fraction_mode is not GammaFractionMode.LEGACY
    ):
        warnings.warn(
            "Gamma fraction mode 'legacy' samples the fractional part with the "
            "inverted argument floor(order) - order; non-integer orders above one "
            "will not follow the requested gamma distribution.",
            UserWarning,
            stacklevel=2,
        )

    logger.debug("Generator configuration changed: %s", new_config)
    _active_config = new_config
    return new_config


def reset_config() -> None:
    """Restore the default configuration."""
    global _active_config
    _active_config = GeneratorConfig()


__all__ = [
    "GeneratorConfig",
    "GammaFractionMode",
    "configure",
    "get_config",
    "reset_config",
]
