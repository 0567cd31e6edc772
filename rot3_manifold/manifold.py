"""
Manifold structure of SO(3): logarithm map and local charts.

retract(R, omega, mode) = R * Delta(omega) and local_coordinates is its
inverse around R. Three charts are available (ChartMode):

- EXPMAP: Delta = Exp(omega), exact exponential map (Rodrigues / Logmap).
- CALEY: Delta = (I + W/2)(I - W/2)^-1 with W = [omega]_x, expanded in
  closed form so no matrix is inverted. Agrees with Exp to first order.
- SLOW_CALEY: the same transform through the generic cayley() primitive.
  Kept as a reference oracle for the closed-form path.

Numerical notes for logmap:
- theta -> 0 (trace -> 3): theta / (2 sin theta) is 0/0; replaced by its
  Taylor expansion 1/2 - (trace - 3)^2 / 12.
- theta -> pi (trace -> -1): the skew part of R vanishes and carries no
  axis information. The axis is read from a column of (I + R) = 2 n n^T,
  choosing the column by a fixed priority (3, then 2, then 1). Both n and
  -n are valid logarithms; the priority makes the choice reproducible,
  not canonical.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np

from rot3_manifold import constants
from rot3_manifold.config import DEFAULT_CONFIG, ChartConfig, ChartMode
from rot3_manifold.geometry.so3_numpy import as_vector3, cayley, skew, unskew
from rot3_manifold.group_ops import between
from rot3_manifold.rot3 import Rot3

logger = logging.getLogger(__name__)


# =============================================================================
# Exponential / logarithm at identity
# =============================================================================


def expmap(omega) -> Rot3:
    """Exponential map so(3) -> SO(3) at identity."""
    return Rot3.rodrigues(omega)


def logmap(R: Rot3) -> np.ndarray:
    """
    Logarithm map SO(3) -> so(3) at identity.

    Returns the rotation vector axis * theta with theta in [0, pi].
    """
    tr = R.r1[0] + R.r2[1] + R.r3[2]

    # theta = +-pi, +-3pi, ...: generic formula divides by sin(theta) = 0.
    # One-sided so a drifted trace below -1 never reaches acos.
    if tr + 1.0 < constants.LOGMAP_HALF_TURN_EPS:
        if R.r3[2] + 1.0 > constants.LOGMAP_DIAGONAL_EPS:
            logger.debug("logmap: half-turn branch, axis from column 3")
            return (math.pi / math.sqrt(2.0 + 2.0 * R.r3[2])) * np.array(
                [R.r3[0], R.r3[1], 1.0 + R.r3[2]], dtype=float)
        elif R.r2[1] + 1.0 > constants.LOGMAP_DIAGONAL_EPS:
            logger.debug("logmap: half-turn branch, axis from column 2")
            return (math.pi / math.sqrt(2.0 + 2.0 * R.r2[1])) * np.array(
                [R.r2[0], 1.0 + R.r2[1], R.r2[2]], dtype=float)
        else:
            logger.debug("logmap: half-turn branch, axis from column 1")
            return (math.pi / math.sqrt(2.0 + 2.0 * R.r1[0])) * np.array(
                [1.0 + R.r1[0], R.r1[1], R.r1[2]], dtype=float)

    tr_3 = tr - 3.0  # always <= 0 for a rotation
    if tr_3 < -constants.LOGMAP_TAYLOR_SWITCH:
        theta = math.acos((tr - 1.0) / 2.0)
        magnitude = theta / (2.0 * math.sin(theta))
    else:
        # theta near 0 (trace near 3)
        magnitude = 0.5 - tr_3 * tr_3 / 12.0

    return magnitude * unskew(R.matrix() - R.transpose())


# =============================================================================
# Charts
# =============================================================================


def _resolve_mode(mode: Optional[ChartMode], config: Optional[ChartConfig]) -> ChartMode:
    if mode is not None:
        return mode
    return (config or DEFAULT_CONFIG).coordinates_mode


def _unhandled_mode(op: str, mode) -> AssertionError:
    logger.error("%s: unhandled chart mode %r", op, mode)
    return AssertionError(f"{op}: unhandled chart mode {mode!r}")


def _cayley_closed_form(omega: np.ndarray) -> Rot3:
    """(I + W/2)(I - W/2)^-1 for W = [omega]_x, entry by entry."""
    x, y, z = omega
    x2, y2, z2 = x*x, y*y, z*z
    xy, xz, yz = x*y, x*z, y*z
    f = 1.0 / (4.0 + x2 + y2 + z2)
    _2f = 2.0 * f
    return Rot3.from_entries(
        (4 + x2 - y2 - z2) * f, (xy - 2*z) * _2f, (xz + 2*y) * _2f,
        (xy + 2*z) * _2f, (4 - x2 + y2 - z2) * f, (yz - 2*x) * _2f,
        (xz - 2*y) * _2f, (yz + 2*x) * _2f, (4 - x2 - y2 + z2) * f)


def retract(
    R: Rot3,
    omega,
    mode: Optional[ChartMode] = None,
    config: Optional[ChartConfig] = None,
) -> Rot3:
    """
    Move from R along tangent vector omega: R * Delta(omega).

    Args:
        R: Anchor rotation
        omega: Tangent vector (3,)
        mode: Chart; None falls back to config.coordinates_mode
        config: Chart configuration, e.g. from load_config; None uses DEFAULT_CONFIG

    Returns:
        Retracted rotation
    """
    omega = as_vector3(omega, name="omega")
    mode = _resolve_mode(mode, config)

    if mode is ChartMode.EXPMAP:
        return R * expmap(omega)
    elif mode is ChartMode.CALEY:
        return R * _cayley_closed_form(omega)
    elif mode is ChartMode.SLOW_CALEY:
        return R * Rot3.from_matrix(cayley(-skew(omega) / 2.0))
    raise _unhandled_mode("retract", mode)


def local_coordinates(
    R: Rot3,
    T: Rot3,
    mode: Optional[ChartMode] = None,
    config: Optional[ChartConfig] = None,
) -> np.ndarray:
    """
    Tangent vector omega at R such that retract(R, omega, mode) = T.

    Args:
        R: Anchor rotation
        T: Target rotation
        mode: Chart; None falls back to config.coordinates_mode
        config: Chart configuration, e.g. from load_config; None uses DEFAULT_CONFIG

    Returns:
        omega (3,)
    """
    mode = _resolve_mode(mode, config)

    if mode is ChartMode.EXPMAP:
        return logmap(between(R, T))
    elif mode is ChartMode.CALEY:
        A = between(R, T).matrix()
        a, b, c = A[0, 0], A[0, 1], A[0, 2]
        d, e, f = A[1, 0], A[1, 1], A[1, 2]
        g, h, i = A[2, 0], A[2, 1], A[2, 2]
        di, ce, cd, fg = d*i, c*e, c*d, f*g
        M = 1 + e - f*h + i + e*i
        K = 2.0 / (cd*h + M + a*M - g*(c + ce) - b*(d + di - fg))
        x = (a*f - cd + f) * K
        y = (b*f - ce - c) * K
        z = (fg - di - d) * K
        return -2.0 * np.array([x, y, z], dtype=float)
    elif mode is ChartMode.SLOW_CALEY:
        Omega = cayley(between(R, T).matrix())
        return -2.0 * unskew(Omega)
    raise _unhandled_mode("local_coordinates", mode)
