"""
Configuration classes for rot3_manifold.

Holds the chart selection used by retract/local_coordinates when the
caller does not name one, plus the tolerances used by validated
constructors and approximate comparison. A loaded ChartConfig is passed
as the ``config`` argument of retract, local_coordinates, Rot3.equals and
Rot3.rodrigues; DEFAULT_CONFIG applies when none is given.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass, fields
from collections.abc import Mapping
from typing import Any, Dict, Union

from rot3_manifold import constants
from rot3_manifold.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Top-level key under which a YAML file may nest its parameters
CONFIG_ROOT_KEY = "rot3_manifold"


class ChartMode(enum.Enum):
    """Local chart used by retract and local_coordinates."""
    EXPMAP = "expmap"  # exact exponential map (Rodrigues / Logmap)
    CALEY = "caley"  # closed-form Cayley transform
    SLOW_CALEY = "slow_caley"  # generic Cayley primitive, reference for CALEY

    @classmethod
    def parse(cls, value: Union["ChartMode", str]) -> "ChartMode":
        """Accept a member or its case-insensitive name/value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for mode in cls:
                if key == mode.value:
                    return mode
        raise ConfigError(
            f"Unknown chart mode {value!r}; expected one of {[m.value for m in cls]}"
        )


@dataclass(frozen=True)
class ChartConfig:
    """Chart and tolerance configuration."""
    coordinates_mode: ChartMode = ChartMode.EXPMAP
    equality_tol: float = constants.EQUALITY_TOL_DEFAULT
    unit_axis_tol: float = constants.UNIT_AXIS_TOL

    def __post_init__(self):
        if not isinstance(self.coordinates_mode, ChartMode):
            raise ConfigError(f"coordinates_mode must be a ChartMode, got {self.coordinates_mode!r}")
        for name in ("equality_tol", "unit_axis_tol"):
            value = getattr(self, name)
            if not value > 0.0:
                raise ConfigError(f"{name} must be positive, got {value!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChartConfig":
        """Create configuration from a plain mapping (e.g. parsed YAML)."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {unknown}")

        kwargs: Dict[str, Any] = {}
        if "coordinates_mode" in data:
            kwargs["coordinates_mode"] = ChartMode.parse(data["coordinates_mode"])
        for name in ("equality_tol", "unit_axis_tol"):
            if name in data:
                try:
                    kwargs[name] = float(data[name])
                except (TypeError, ValueError) as e:
                    raise ConfigError(f"{name} must be a number, got {data[name]!r}") from e
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {
            "coordinates_mode": self.coordinates_mode.value,
            "equality_tol": self.equality_tol,
            "unit_axis_tol": self.unit_axis_tol,
        }


def load_config(path: Union[str, os.PathLike]) -> ChartConfig:
    """
    Load a ChartConfig from a YAML file.

    The file may hold the parameters directly or nest them under a
    top-level ``rot3_manifold`` key. An empty file yields the defaults.
    """
    import yaml

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, Mapping):
        raise ConfigError(f"{path}: expected a mapping at top level, got {type(data).__name__}")
    if CONFIG_ROOT_KEY in data:
        data = data[CONFIG_ROOT_KEY] or {}
        if not isinstance(data, Mapping):
            raise ConfigError(f"{path}: '{CONFIG_ROOT_KEY}' must be a mapping")

    config = ChartConfig.from_dict(data)
    logger.debug("Loaded chart config from %s: mode=%s", path, config.coordinates_mode.value)
    return config


DEFAULT_CONFIG = ChartConfig()
