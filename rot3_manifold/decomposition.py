"""
RQ decomposition and fixed-axis angle extraction.

rq(A) removes the x, y and z rotations from a general 3x3 matrix one
column pair at a time:

    B = A  * Rx(-x)     x chosen so that B[2, 1] = 0
    C = B  * Ry(-y)     y chosen so that C[2, 0] = 0
    R = C  * Rz(-z)     z chosen so that R[1, 0] = 0

so A = R * Rz(z) * Ry(y) * Rx(x) with R upper triangular. For a rotation
A the remainder R is the identity and A = Rot3.rz_ry_rx(x, y, z).
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from rot3_manifold.geometry.so3_numpy import as_matrix3
from rot3_manifold.rot3 import Rot3


def rq(A) -> Tuple[np.ndarray, np.ndarray]:
    """
    Factor a 3x3 matrix as A = R * Rz(z) * Ry(y) * Rx(x).

    Args:
        A: Any 3x3 matrix

    Returns:
        Tuple of (R (3, 3) upper triangular, angles (x, y, z))
    """
    A = as_matrix3(A, name="rq")

    x = -math.atan2(-A[2, 1], A[2, 2])
    B = A @ Rot3.rx(-x).matrix()

    y = -math.atan2(B[2, 0], B[2, 2])
    C = B @ Rot3.ry(-y).matrix()

    z = -math.atan2(-C[1, 0], C[1, 1])
    R = C @ Rot3.rz(-z).matrix()

    return R, np.array([x, y, z], dtype=float)


def xyz(R: Rot3) -> np.ndarray:
    """Angles (x, y, z) such that R = Rz(z) * Ry(y) * Rx(x)."""
    _, q = rq(R.matrix())
    return q


def ypr(R: Rot3) -> np.ndarray:
    """(yaw, pitch, roll) = (z, y, x)."""
    q = xyz(R)
    return np.array([q[2], q[1], q[0]], dtype=float)


def rpy(R: Rot3) -> np.ndarray:
    """(roll, pitch, yaw) = (x, y, z)."""
    q = xyz(R)
    return np.array([q[0], q[1], q[2]], dtype=float)


def yaw(R: Rot3) -> float:
    return float(ypr(R)[0])


def pitch(R: Rot3) -> float:
    return float(ypr(R)[1])


def roll(R: Rot3) -> float:
    return float(ypr(R)[2])
