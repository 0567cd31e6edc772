"""
rot3_manifold: SO(3) as a manifold-valued optimization variable.

Modules:
- rot3: Rot3 value type, constructors and factories
- group_ops: compose / inverse / between / rotate / unrotate (+ Jacobians)
- manifold: logmap, expmap, retract, local_coordinates (ChartMode)
- decomposition: RQ factorization and xyz / ypr / rpy angles
- config: ChartConfig and YAML loading

Usage:
    from rot3_manifold import Rot3, ChartMode, retract, local_coordinates

    R = Rot3.rz_ry_rx(0.1, 0.2, 0.3)
    T = retract(R, [0.01, 0.0, -0.02], ChartMode.CALEY)
    omega = local_coordinates(R, T, ChartMode.CALEY)
"""

from rot3_manifold import constants
from rot3_manifold.config import DEFAULT_CONFIG, ChartConfig, ChartMode, load_config
from rot3_manifold.exceptions import ConfigError, DomainError, InvalidArgument, Rot3Error
from rot3_manifold.rot3 import Rot3
from rot3_manifold.group_ops import (
    compose,
    compose_with_jacobians,
    inverse,
    inverse_with_jacobians,
    between,
    between_with_jacobians,
    rotate,
    rotate_with_jacobians,
    unrotate,
    unrotate_with_jacobians,
)
from rot3_manifold.manifold import expmap, logmap, retract, local_coordinates
from rot3_manifold.decomposition import rq, xyz, ypr, rpy, yaw, pitch, roll

__all__ = [
    "constants",
    # Config
    "DEFAULT_CONFIG",
    "ChartConfig",
    "ChartMode",
    "load_config",
    # Errors
    "Rot3Error",
    "InvalidArgument",
    "DomainError",
    "ConfigError",
    # Value type
    "Rot3",
    # Group operations
    "compose",
    "compose_with_jacobians",
    "inverse",
    "inverse_with_jacobians",
    "between",
    "between_with_jacobians",
    "rotate",
    "rotate_with_jacobians",
    "unrotate",
    "unrotate_with_jacobians",
    # Manifold
    "expmap",
    "logmap",
    "retract",
    "local_coordinates",
    # Decomposition
    "rq",
    "xyz",
    "ypr",
    "rpy",
    "yaw",
    "pitch",
    "roll",
]
