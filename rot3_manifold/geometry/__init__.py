"""
Geometry package for rot3_manifold.

Dense NumPy primitives the rotation type is built on.

Usage:
    from rot3_manifold.geometry import skew, unskew, cayley
"""

from __future__ import annotations

from rot3_manifold.geometry.so3_numpy import (
    QUAT_NORM_EPSILON,
    as_matrix3,
    as_vector3,
    skew,
    unskew,
    cayley,
    quat_to_rotmat,
    rotmat_to_quat,
)

__all__ = [
    "QUAT_NORM_EPSILON",
    "as_matrix3",
    "as_vector3",
    "skew",
    "unskew",
    "cayley",
    "quat_to_rotmat",
    "rotmat_to_quat",
]
