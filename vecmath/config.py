# vecmath/config.py
"""
Library-wide configuration.

A single VecmathConfig instance is active at a time. Modules read it through
get_config() at call time, so swapping it affects subsequent calls only.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
import logging

import numpy as np

logger = logging.getLogger(__name__)


@dataclass
class VecmathConfig:
    # Raise IndexError from Mat get/set/get_row/set_row instead of
    # returning None / logging a warning.
    strict_bounds: bool = False
    # Absolute tolerance used by inv_lerp2/inv_lerp3 when comparing the
    # per-axis fractions. 0.0 means exact equality.
    inv_lerp_tolerance: float = 0.0
    serialization_enabled: bool = True
    float_dtype: str = 'float32'

    def validate(self) -> None:
        if self.inv_lerp_tolerance < 0.0:
            raise ValueError("inv_lerp_tolerance must be non-negative")
        try:
            dtype = np.dtype(self.float_dtype)
        except TypeError as e:
            raise ValueError(f"Unknown float_dtype {self.float_dtype!r}") from e
        if dtype.kind != 'f':
            raise ValueError(f"float_dtype must be a floating point type, got {dtype}")


_config = VecmathConfig()


def get_config() -> VecmathConfig:
    return _config


def set_config(config: VecmathConfig) -> VecmathConfig:
    """Install a new active config. Returns the previous one."""
    global _config
    config.validate()
    previous = _config
    _config = config
    logger.debug(f"config replaced: {config}")
    return previous


def configure(**overrides) -> VecmathConfig:
    """Replace selected fields of the active config, e.g. configure(strict_bounds=True)."""
    return set_config(replace(_config, **overrides))


def reset_config() -> VecmathConfig:
    return set_config(VecmathConfig())
