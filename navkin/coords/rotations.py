"""Rotation representations and small-rotation helpers.

This module provides the rotation utilities needed by the kinematics
estimators:
- Direction cosine matrices (3x3 orthonormal matrices, SO(3))
- Quaternions (q = [qw, qx, qy, qz], scalar first)
- Euler angles (roll-pitch-yaw, ZYX convention)
- Skew-symmetric (cross-product) matrices
- Earth rotation over an interval

Conventions:
- A body-to-frame matrix C maps body vectors into the frame: v_n = C @ v_b
- Euler angles are [roll, pitch, yaw] in radians

Reference: Groves (2013), Chapter 2, Section 2.2 - Attitude, Rotation,
and Resolving Axes Transformations
"""

import numpy as np
from numpy.typing import NDArray


def skew_symmetric(v: NDArray[np.float64]) -> NDArray[np.float64]:
    """Build the skew-symmetric matrix of a 3-vector.

    The returned matrix satisfies ``skew_symmetric(a) @ b == np.cross(a, b)``.

    Args:
        v: 3-element vector.

    Returns:
        3x3 skew-symmetric matrix.

    Raises:
        ValueError: If v does not have 3 elements.

    Reference:
        Groves (2013), Eq. (2.50)
    """
    v = np.asarray(v, dtype=np.float64)
    if v.shape != (3,):
        raise ValueError(f"Expected 3-element vector, got shape {v.shape}")

    return np.array(
        [
            [0.0, -v[2], v[1]],
            [v[2], 0.0, -v[0]],
            [-v[1], v[0], 0.0],
        ],
        dtype=np.float64,
    )


def earth_rotation_matrix(angle: float) -> NDArray[np.float64]:
    """Rotation of ECEF axes with respect to inertial axes over an interval.

    Args:
        angle: Earth rotation angle in radians (rotation rate times interval).

    Returns:
        3x3 matrix rotating ECEF-resolved vectors by -angle about the z-axis.

    Reference:
        Groves (2013), Eq. (5.30)
    """
    c = np.cos(angle)
    s = np.sin(angle)
    return np.array(
        [
            [c, s, 0.0],
            [-s, c, 0.0],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def is_rotation_matrix(R: NDArray[np.float64], tol: float = 1e-6) -> bool:
    """Check whether R is a proper rotation (orthonormal, det = +1)."""
    R = np.asarray(R, dtype=np.float64)
    if R.shape != (3, 3):
        return False
    if not np.all(np.isfinite(R)):
        return False
    if not np.allclose(R @ R.T, np.eye(3), atol=tol):
        return False
    return abs(np.linalg.det(R) - 1.0) < tol


def euler_to_rotation_matrix(
    roll: float,
    pitch: float,
    yaw: float,
) -> NDArray[np.float64]:
    """Convert Euler angles to a body-to-frame direction cosine matrix.

    Args:
        roll: Roll angle in radians (rotation about x-axis).
        pitch: Pitch angle in radians (rotation about y-axis).
        yaw: Yaw angle in radians (rotation about z-axis).

    Returns:
        3x3 matrix C such that v_frame = C @ v_body.

    Example:
        >>> C = euler_to_rotation_matrix(0.1, 0.2, 0.3)
        >>> print(f"Determinant: {np.linalg.det(C):.6f}")

    Reference:
        Groves (2013), Eq. (2.24), transposed
    """
    sin_r, cos_r = np.sin(roll), np.cos(roll)
    sin_p, cos_p = np.sin(pitch), np.cos(pitch)
    sin_y, cos_y = np.sin(yaw), np.cos(yaw)

    return np.array(
        [
            [
                cos_p * cos_y,
                -cos_r * sin_y + sin_r * sin_p * cos_y,
                sin_r * sin_y + cos_r * sin_p * cos_y,
            ],
            [
                cos_p * sin_y,
                cos_r * cos_y + sin_r * sin_p * sin_y,
                -sin_r * cos_y + cos_r * sin_p * sin_y,
            ],
            [-sin_p, sin_r * cos_p, cos_r * cos_p],
        ],
        dtype=np.float64,
    )


def rotation_matrix_to_euler(R: NDArray[np.float64]) -> NDArray[np.float64]:
    """Extract [roll, pitch, yaw] from a body-to-frame matrix.

    At gimbal lock (pitch = ±90°) roll is set to zero and the remaining
    rotation is attributed to yaw.

    Raises:
        ValueError: If R is not a 3x3 matrix.
    """
    R = np.asarray(R, dtype=np.float64)
    if R.shape != (3, 3):
        raise ValueError(f"Expected 3x3 matrix, got shape {R.shape}")

    sin_pitch = np.clip(-R[2, 0], -1.0, 1.0)
    if abs(sin_pitch) >= 1.0 - 1e-12:
        pitch = np.copysign(np.pi / 2.0, sin_pitch)
        roll = 0.0
        yaw = np.arctan2(-R[0, 1], R[1, 1])
    else:
        pitch = np.arcsin(sin_pitch)
        roll = np.arctan2(R[2, 1], R[2, 2])
        yaw = np.arctan2(R[1, 0], R[0, 0])

    return np.array([roll, pitch, yaw], dtype=np.float64)


def quat_to_rotation_matrix(q: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert a unit quaternion [qw, qx, qy, qz] to a rotation matrix.

    Raises:
        ValueError: If q is not a 4-element array.
    """
    q = np.asarray(q, dtype=np.float64)
    if q.shape != (4,):
        raise ValueError(f"Expected 4-element quaternion, got shape {q.shape}")

    w, x, y, z = q
    xx, yy, zz = x * x, y * y, z * z
    return np.array(
        [
            [1.0 - 2.0 * (yy + zz), 2.0 * (x * y - w * z), 2.0 * (x * z + w * y)],
            [2.0 * (x * y + w * z), 1.0 - 2.0 * (xx + zz), 2.0 * (y * z - w * x)],
            [2.0 * (x * z - w * y), 2.0 * (y * z + w * x), 1.0 - 2.0 * (xx + yy)],
        ],
        dtype=np.float64,
    )


def rotation_matrix_to_quat(R: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert a rotation matrix to a unit quaternion with qw >= 0.

    Uses Shepperd's method, branching on the largest of the trace and the
    diagonal elements.

    Raises:
        ValueError: If R is not a 3x3 matrix.
    """
    R = np.asarray(R, dtype=np.float64)
    if R.shape != (3, 3):
        raise ValueError(f"Expected 3x3 matrix, got shape {R.shape}")

    trace = np.trace(R)
    candidates = [trace, R[0, 0], R[1, 1], R[2, 2]]
    k = int(np.argmax(candidates))

    if k == 0:
        s = 2.0 * np.sqrt(1.0 + trace)
        q = [0.25 * s, (R[2, 1] - R[1, 2]) / s, (R[0, 2] - R[2, 0]) / s, (R[1, 0] - R[0, 1]) / s]
    elif k == 1:
        s = 2.0 * np.sqrt(1.0 + R[0, 0] - R[1, 1] - R[2, 2])
        q = [(R[2, 1] - R[1, 2]) / s, 0.25 * s, (R[0, 1] + R[1, 0]) / s, (R[0, 2] + R[2, 0]) / s]
    elif k == 2:
        s = 2.0 * np.sqrt(1.0 + R[1, 1] - R[0, 0] - R[2, 2])
        q = [(R[0, 2] - R[2, 0]) / s, (R[0, 1] + R[1, 0]) / s, 0.25 * s, (R[1, 2] + R[2, 1]) / s]
    else:
        s = 2.0 * np.sqrt(1.0 + R[2, 2] - R[0, 0] - R[1, 1])
        q = [(R[1, 0] - R[0, 1]) / s, (R[0, 2] + R[2, 0]) / s, (R[1, 2] + R[2, 1]) / s, 0.25 * s]

    q = np.array(q, dtype=np.float64)
    q /= np.linalg.norm(q)
    if q[0] < 0.0:
        q = -q
    return q
