"""
Rot3: an element of SO(3) stored as three orthonormal column vectors.

R = [r1 | r2 | r3] with R^T R = I and det(R) = +1.

Only the factories (rx/ry/rz, rz_ry_rx, rodrigues) and the quaternion
constructor guarantee that invariant. The matrix and nine-entry
constructors store the caller's numbers as given; handing them a
non-rotation is a caller contract breach and is not detected.

Instances are immutable values: the column arrays are read-only and every
operation returns a new Rot3.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from rot3_manifold import constants
from rot3_manifold.config import DEFAULT_CONFIG, ChartConfig
from rot3_manifold.exceptions import DomainError, InvalidArgument
from rot3_manifold.geometry.so3_numpy import (
    as_matrix3,
    as_vector3,
    quat_to_rotmat,
    rotmat_to_quat,
)


def _frozen(v: np.ndarray) -> np.ndarray:
    v.setflags(write=False)
    return v


@dataclass(frozen=True, eq=False)
class Rot3:
    """
    Rotation in 3D, stored column-wise.

    Attributes:
        r1, r2, r3: Columns of the rotation matrix (read-only 3-vectors)
    """
    r1: np.ndarray
    r2: np.ndarray
    r3: np.ndarray

    def __post_init__(self):
        for name in ("r1", "r2", "r3"):
            col = np.array(as_vector3(getattr(self, name), name=name), dtype=float)
            object.__setattr__(self, name, _frozen(col))

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def identity(cls) -> "Rot3":
        return cls(
            np.array([1.0, 0.0, 0.0]),
            np.array([0.0, 1.0, 0.0]),
            np.array([0.0, 0.0, 1.0]),
        )

    @classmethod
    def from_entries(
        cls,
        R11: float, R12: float, R13: float,
        R21: float, R22: float, R23: float,
        R31: float, R32: float, R33: float,
    ) -> "Rot3":
        """Build from nine scalars given in row-major order."""
        return cls(
            np.array([R11, R21, R31], dtype=float),
            np.array([R12, R22, R32], dtype=float),
            np.array([R13, R23, R33], dtype=float),
        )

    @classmethod
    def from_matrix(cls, R) -> "Rot3":
        """Build from a 3x3 matrix. Orthonormality is not checked."""
        R = as_matrix3(R, name="Rot3.from_matrix")
        return cls(R[:, 0].copy(), R[:, 1].copy(), R[:, 2].copy())

    @classmethod
    def from_quaternion(cls, q) -> "Rot3":
        """Build from a quaternion (x, y, z, w); it is normalized first."""
        return cls.from_matrix(quat_to_rotmat(q))

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def rx(cls, t: float) -> "Rot3":
        """Rotation by angle t (radians) about the x-axis."""
        st, ct = math.sin(t), math.cos(t)
        return cls.from_entries(
            1.0, 0.0, 0.0,
            0.0, ct, -st,
            0.0, st, ct)

    @classmethod
    def ry(cls, t: float) -> "Rot3":
        """Rotation by angle t (radians) about the y-axis."""
        st, ct = math.sin(t), math.cos(t)
        return cls.from_entries(
            ct, 0.0, st,
            0.0, 1.0, 0.0,
            -st, 0.0, ct)

    @classmethod
    def rz(cls, t: float) -> "Rot3":
        """Rotation by angle t (radians) about the z-axis."""
        st, ct = math.sin(t), math.cos(t)
        return cls.from_entries(
            ct, -st, 0.0,
            st, ct, 0.0,
            0.0, 0.0, 1.0)

    @classmethod
    def rz_ry_rx(cls, x: float, y: float, z: float) -> "Rot3":
        """
        Rz(z) * Ry(y) * Rx(x) expanded into a single set of entries.

        Same result as composing the three elementary rotations, without
        the two 3x3 products.
        """
        cx, sx = math.cos(x), math.sin(x)
        cy, sy = math.cos(y), math.sin(y)
        cz, sz = math.cos(z), math.sin(z)
        ss_ = sx * sy
        cs_ = cx * sy
        sc_ = sx * cy
        cc_ = cx * cy
        c_s = cx * sz
        s_s = sx * sz
        _cs = cy * sz
        _cc = cy * cz
        s_c = sx * cz
        c_c = cx * cz
        ssc, csc, sss, css = ss_ * cz, cs_ * cz, ss_ * sz, cs_ * sz
        return cls.from_entries(
            _cc, -c_s + ssc, s_s + csc,
            _cs, c_c + sss, -s_c + css,
            -sy, sc_, cc_)

    @classmethod
    def rodrigues_unchecked(cls, axis, theta: float) -> "Rot3":
        """
        Rotation by theta about a unit axis, without checking |axis| = 1.

        R = I cos(theta) + (1 - cos(theta)) axis axis^T + sin(theta) [axis]_x

        A non-unit axis silently gives a matrix that is not a rotation.
        """
        wx, wy, wz = as_vector3(axis, name="axis")
        c, s = math.cos(theta), math.sin(theta)
        c_1 = 1.0 - c

        swx, swy, swz = wx * s, wy * s, wz * s
        C00, C01, C02 = c_1 * wx * wx, c_1 * wx * wy, c_1 * wx * wz
        C11, C12 = c_1 * wy * wy, c_1 * wy * wz
        C22 = c_1 * wz * wz

        return cls.from_entries(
            c + C00, -swz + C01, swy + C02,
            swz + C01, c + C11, -swx + C12,
            -swy + C02, swx + C12, c + C22)

    @classmethod
    def rodrigues(
        cls,
        w,
        theta: Optional[float] = None,
        tol: Optional[float] = None,
        config: Optional[ChartConfig] = None,
    ) -> "Rot3":
        """
        Axis-angle constructor (exponential map).

        Called as:
            Rot3.rodrigues(axis, theta)  -- axis must be unit length
            Rot3.rodrigues(omega)        -- rotation vector, theta = |omega|

        tol defaults to config.unit_axis_tol (DEFAULT_CONFIG when config is None).

        Raises:
            DomainError: axis-angle form with | |axis|^2 - 1 | > tol
        """
        w = as_vector3(w, name="axis" if theta is not None else "omega")

        if theta is None:
            t = float(np.linalg.norm(w))
            if t < constants.RODRIGUES_ZERO_ANGLE:
                return cls.identity()
            return cls.rodrigues_unchecked(w / t, t)

        if tol is None:
            tol = (config or DEFAULT_CONFIG).unit_axis_tol
        l_n = float(w @ w)
        if abs(l_n - 1.0) > tol:
            raise DomainError(f"rodrigues: axis must be unit length, |axis|^2 = {l_n:.12g}")
        return cls.rodrigues_unchecked(w, theta)

    @classmethod
    def expmap(cls, omega) -> "Rot3":
        """Exponential map at identity; same as rodrigues(omega)."""
        return cls.rodrigues(omega)

    # =========================================================================
    # Accessors
    # =========================================================================

    @staticmethod
    def dim() -> int:
        return constants.SO3_DIM

    def matrix(self) -> np.ndarray:
        return np.column_stack([self.r1, self.r2, self.r3])

    def transpose(self) -> np.ndarray:
        return np.vstack([self.r1, self.r2, self.r3])

    def column(self, index: int) -> np.ndarray:
        """Column by 1-based index (1, 2 or 3)."""
        if index == 3:
            return self.r3
        elif index == 2:
            return self.r2
        elif index == 1:
            return self.r1
        raise InvalidArgument(f"Argument to Rot3.column must be 1, 2, or 3, got {index!r}")

    def to_quaternion(self) -> Tuple[float, float, float, float]:
        """Quaternion (x, y, z, w) with w >= 0."""
        return rotmat_to_quat(self.matrix())

    def equals(
        self, other: "Rot3", tol: Optional[float] = None, config: Optional[ChartConfig] = None
    ) -> bool:
        """True if all nine entries agree within tol (default: config.equality_tol)."""
        if tol is None:
            tol = (config or DEFAULT_CONFIG).equality_tol
        return bool(np.all(np.abs(self.matrix() - other.matrix()) <= tol))

    # =========================================================================
    # Operators
    # =========================================================================

    def _rotate(self, p: np.ndarray) -> np.ndarray:
        return self.r1 * p[0] + self.r2 * p[1] + self.r3 * p[2]

    def __mul__(self, other):
        """Rot3 * Rot3 composes; Rot3 * point rotates the point."""
        if isinstance(other, Rot3):
            return Rot3(self._rotate(other.r1), self._rotate(other.r2), self._rotate(other.r3))
        if not isinstance(other, (np.ndarray, list, tuple)):
            return NotImplemented
        return self._rotate(as_vector3(other, name="point"))

    def __repr__(self) -> str:
        rows = np.array2string(self.matrix(), precision=6, suppress_small=True, separator=", ")
        return f"Rot3({rows})"
