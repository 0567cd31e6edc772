"""
Group operations on Rot3 with analytic Jacobians.

Every operation comes as a value-only function and a ``*_with_jacobians``
variant returning ``(value, H1, H2)``. Jacobians are taken with respect to
right (body-frame) tangent perturbations R -> R * Exp(delta), the chart
convention the nonlinear optimizer linearizes in:

    compose(R1, R2)   H1 = R2^T            H2 = I
    inverse(R)        H  = -R
    between(R1, R2)   H1 = -(R2^T R1)      H2 = I
    rotate(R, p)      H1 = R [-p]_x        H2 = R
    unrotate(R, p)    H1 = [R^T p]_x       H2 = R^T

These signs and orderings are load-bearing for the optimizer; they are
mutually consistent and must not be changed independently.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from rot3_manifold.geometry.so3_numpy import as_vector3, skew
from rot3_manifold.rot3 import Rot3


# =============================================================================
# Composition
# =============================================================================


def compose(R1: Rot3, R2: Rot3) -> Rot3:
    """R1 * R2."""
    return R1 * R2


def compose_with_jacobians(R1: Rot3, R2: Rot3) -> Tuple[Rot3, np.ndarray, np.ndarray]:
    """
    R1 * R2 with Jacobians.

    Returns:
        Tuple of (R1 * R2, d/dR1 = R2^T, d/dR2 = I)
    """
    return R1 * R2, R2.transpose(), np.eye(3, dtype=float)


# =============================================================================
# Inverse and relative rotation
# =============================================================================


def inverse(R: Rot3) -> Rot3:
    """R^-1 = R^T (rows of R become the columns)."""
    return Rot3.from_matrix(R.transpose())


def inverse_with_jacobians(R: Rot3) -> Tuple[Rot3, np.ndarray]:
    """
    R^-1 with Jacobian.

    Returns:
        Tuple of (R^T, d/dR = -R)
    """
    return inverse(R), -R.matrix()


def between(R1: Rot3, R2: Rot3) -> Rot3:
    """R1^-1 * R2: R2 expressed in the frame of R1."""
    return inverse(R1) * R2


def between_with_jacobians(R1: Rot3, R2: Rot3) -> Tuple[Rot3, np.ndarray, np.ndarray]:
    """
    R1^-1 * R2 with Jacobians.

    Returns:
        Tuple of (R1^T R2, d/dR1 = -(R2^T R1), d/dR2 = I)
    """
    H1 = -(R2.transpose() @ R1.matrix())
    return between(R1, R2), H1, np.eye(3, dtype=float)


# =============================================================================
# Group action on points
# =============================================================================


def rotate(R: Rot3, p) -> np.ndarray:
    """R * p."""
    return R * p


def rotate_with_jacobians(R: Rot3, p) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    R * p with Jacobians.

    Returns:
        Tuple of (R p, d/dR = R [-p]_x, d/dp = R)
    """
    p = as_vector3(p, name="point")
    Rm = R.matrix()
    return R * p, Rm @ skew(-p), Rm


def unrotate(R: Rot3, p) -> np.ndarray:
    """R^T * p: the point expressed in the rotated frame."""
    p = as_vector3(p, name="point")
    # q_i = r_i . p
    return np.array([R.r1 @ p, R.r2 @ p, R.r3 @ p], dtype=float)


def unrotate_with_jacobians(R: Rot3, p) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    R^T * p with Jacobians.

    Returns:
        Tuple of (q = R^T p, d/dR = [q]_x, d/dp = R^T)
    """
    q = unrotate(R, p)
    return q, skew(q), R.transpose()
