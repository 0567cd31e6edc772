"""
SO(3) matrix primitives using NumPy.

These are the dense building blocks the rotation type is written against:
- hat / vee isomorphism between R^3 and so(3)
- fixed-size Cayley transform
- unit quaternion <-> rotation matrix conversion

Quaternion convention: q = [x, y, z, w] where w is scalar (ROS order).

References:
- Barfoot (2017): State Estimation for Robotics
- Sola et al. (2018): A micro Lie theory for state estimation
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from rot3_manifold.exceptions import InvalidArgument


# Quaternions with a norm below this cannot be normalized
QUAT_NORM_EPSILON: float = 1e-10


# =============================================================================
# so(3) <-> R^3
# =============================================================================


def as_vector3(v, name: str = "vector") -> np.ndarray:
    """Coerce input to a float 3-vector, rejecting other sizes."""
    v = np.asarray(v, dtype=float).reshape(-1)
    if v.shape != (3,):
        raise InvalidArgument(f"{name}: expected 3 elements, got shape {v.shape}")
    return v


def as_matrix3(M, name: str = "matrix") -> np.ndarray:
    """Coerce input to a float 3x3 matrix, rejecting other shapes."""
    M = np.asarray(M, dtype=float)
    if M.shape != (3, 3):
        raise InvalidArgument(f"{name}: expected 3x3 matrix, got shape {M.shape}")
    return M


def skew(v) -> np.ndarray:
    """Skew-symmetric matrix from 3-vector (hat operator)."""
    v = as_vector3(v)
    return np.array([
        [0.0, -v[2], v[1]],
        [v[2], 0.0, -v[0]],
        [-v[1], v[0], 0.0]
    ], dtype=float)


def unskew(S: np.ndarray) -> np.ndarray:
    """Extract 3-vector from skew-symmetric matrix (vee operator)."""
    return np.array([S[2, 1], S[0, 2], S[1, 0]], dtype=float)


# =============================================================================
# Cayley transform
# =============================================================================


def cayley(A: np.ndarray) -> np.ndarray:
    """
    Cayley transform C(A) = (I - A)(I + A)^-1 of a 3x3 matrix.

    C is an involution wherever defined: C(C(A)) = A. For skew-symmetric
    A it returns a rotation, and for a rotation without a half-turn
    component it returns a skew-symmetric matrix.
    """
    A = as_matrix3(A)
    I = np.eye(3, dtype=float)
    return (I - A) @ np.linalg.inv(I + A)


# =============================================================================
# Quaternion conversions
# =============================================================================


def quat_to_rotmat(x_or_q, y=None, z=None, w=None) -> np.ndarray:
    """
    Convert quaternion (x, y, z, w) to rotation matrix.

    Can be called as:
        quat_to_rotmat(np.array([x, y, z, w]))
        quat_to_rotmat(x, y, z, w)

    The quaternion is normalized first, so any non-zero scaling of a unit
    quaternion gives the same matrix.
    """
    if y is not None and z is not None and w is not None:
        q = np.array([x_or_q, y, z, w], dtype=float)
    else:
        q = np.asarray(x_or_q, dtype=float).reshape(-1)

    if len(q) != 4:
        raise InvalidArgument(f"Expected 4-element quaternion, got {len(q)}")

    x, y, z, w = q[0], q[1], q[2], q[3]

    norm = math.sqrt(x*x + y*y + z*z + w*w)
    if norm < QUAT_NORM_EPSILON:
        raise InvalidArgument("Quaternion norm is too small (near zero)")
    x, y, z, w = x/norm, y/norm, z/norm, w/norm

    return np.array([
        [1 - 2*(y*y + z*z), 2*(x*y - z*w), 2*(x*z + y*w)],
        [2*(x*y + z*w), 1 - 2*(x*x + z*z), 2*(y*z - x*w)],
        [2*(x*z - y*w), 2*(y*z + x*w), 1 - 2*(x*x + y*y)]
    ], dtype=float)


def rotmat_to_quat(R: np.ndarray) -> Tuple[float, float, float, float]:
    """
    Convert rotation matrix to quaternion (x, y, z, w).

    Uses Shepperd's method: branch on the largest of the trace and the
    diagonal entries so the square root argument stays away from zero.
    The sign is fixed so that w >= 0.
    """
    R = as_matrix3(R)

    trace = R[0, 0] + R[1, 1] + R[2, 2]

    if trace > 0:
        s = math.sqrt(trace + 1.0) * 2  # s = 4 * qw
        w = 0.25 * s
        x = (R[2, 1] - R[1, 2]) / s
        y = (R[0, 2] - R[2, 0]) / s
        z = (R[1, 0] - R[0, 1]) / s
    elif (R[0, 0] > R[1, 1]) and (R[0, 0] > R[2, 2]):
        s = math.sqrt(1.0 + R[0, 0] - R[1, 1] - R[2, 2]) * 2  # s = 4 * qx
        w = (R[2, 1] - R[1, 2]) / s
        x = 0.25 * s
        y = (R[0, 1] + R[1, 0]) / s
        z = (R[0, 2] + R[2, 0]) / s
    elif R[1, 1] > R[2, 2]:
        s = math.sqrt(1.0 + R[1, 1] - R[0, 0] - R[2, 2]) * 2  # s = 4 * qy
        w = (R[0, 2] - R[2, 0]) / s
        x = (R[0, 1] + R[1, 0]) / s
        y = 0.25 * s
        z = (R[1, 2] + R[2, 1]) / s
    else:
        s = math.sqrt(1.0 + R[2, 2] - R[0, 0] - R[1, 1]) * 2  # s = 4 * qz
        w = (R[1, 0] - R[0, 1]) / s
        x = (R[0, 2] + R[2, 0]) / s
        y = (R[1, 2] + R[2, 1]) / s
        z = 0.25 * s

    if w < 0.0:
        x, y, z, w = -x, -y, -z, -w
    return (float(x), float(y), float(z), float(w))
