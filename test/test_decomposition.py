import math

import numpy as np
import pytest

from rot3_manifold import Rot3, pitch, roll, rpy, rq, xyz, yaw, ypr


def _rz_ry_rx_matrix(x, y, z):
    return Rot3.rz(z).matrix() @ Rot3.ry(y).matrix() @ Rot3.rx(x).matrix()


@pytest.mark.parametrize("angles", [
    (0.1, 0.2, 0.3),
    (-1.0, 0.5, 2.5),
    (2.9, -1.2, -3.0),
])
def test_rq_of_rotation_recovers_angles(angles):
    R, q = rq(Rot3.rz_ry_rx(*angles).matrix())
    np.testing.assert_allclose(R, np.eye(3), atol=1e-12)
    np.testing.assert_allclose(q, angles, atol=1e-12)


def test_rq_factorizes_general_matrix():
    A = np.array([
        [2.0, 0.3, -0.5],
        [0.1, 1.5, 0.4],
        [-0.2, 0.6, 1.8],
    ])
    R, (x, y, z) = rq(A)
    np.testing.assert_allclose(R @ _rz_ry_rx_matrix(x, y, z), A, atol=1e-12)
    # upper triangular remainder
    np.testing.assert_allclose([R[1, 0], R[2, 0], R[2, 1]], np.zeros(3), atol=1e-12)


def test_rq_factorizes_near_orthogonal_matrix(random_rotations):
    np.random.seed(3)
    for Q in random_rotations:
        A = Q.matrix() + 1e-3 * np.random.randn(3, 3)
        R, (x, y, z) = rq(A)
        np.testing.assert_allclose(R @ _rz_ry_rx_matrix(x, y, z), A, atol=1e-12)


def test_xyz_matches_scipy_extrinsic_euler():
    from scipy.spatial.transform import Rotation

    R = Rot3.rz_ry_rx(0.4, -0.3, 1.2)
    expected = Rotation.from_matrix(R.matrix()).as_euler("xyz")
    np.testing.assert_allclose(xyz(R), expected, atol=1e-12)


def test_ypr_and_rpy_reorder():
    R = Rot3.rz_ry_rx(0.1, 0.2, 0.3)
    np.testing.assert_allclose(xyz(R), [0.1, 0.2, 0.3], atol=1e-12)
    np.testing.assert_allclose(rpy(R), [0.1, 0.2, 0.3], atol=1e-12)
    np.testing.assert_allclose(ypr(R), [0.3, 0.2, 0.1], atol=1e-12)
    assert math.isclose(yaw(R), 0.3, abs_tol=1e-12)
    assert math.isclose(pitch(R), 0.2, abs_tol=1e-12)
    assert math.isclose(roll(R), 0.1, abs_tol=1e-12)


def test_elementary_rotations():
    np.testing.assert_allclose(xyz(Rot3.rx(0.7)), [0.7, 0.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(xyz(Rot3.ry(-0.4)), [0.0, -0.4, 0.0], atol=1e-12)
    np.testing.assert_allclose(xyz(Rot3.rz(1.9)), [0.0, 0.0, 1.9], atol=1e-12)


def test_identity_angles_are_zero():
    np.testing.assert_array_equal(np.abs(xyz(Rot3.identity())), np.zeros(3))
