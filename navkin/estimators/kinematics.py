"""Shared body-kinematics inversion for ECEF, ECI and NED navigation states.

Given two navigation states separated by a time interval, the estimators
recover the specific force and angular rate that an IMU rigidly attached to
the body would have measured over that interval. This is the inverse of the
strapdown mechanization: attitude, velocity and position are known, and
the inertial sensor outputs are solved for.

The computation is identical for every reference frame apart from four
frame-dependent terms, bundled as ReferenceTerms:

    attitude_update: rotation of the reference axes over the interval
    coriolis_rate:   rate whose cross product with the old velocity
                     corrects the velocity derivative
    averaging_rate:  rate of the reference axes used when averaging the
                     attitude over the interval
    gravity:         gravity (or gravitation) resolved in reference axes

A FrameKinematicsPolicy names the reference frame and supplies these terms;
estimate_body_kinematics runs the common algorithm.

Reference: Groves (2013), Chapter 5 - Inertial Navigation (precision
mechanization equations, solved for the sensor outputs)
"""

import warnings
from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional

import numpy as np
from numpy.typing import NDArray

from navkin.coords.frames import (
    CoordinateTransformation,
    FrameType,
    check_body_transformation,
)
from navkin.coords.rotations import skew_symmetric
from navkin.sensors.types import BodyKinematics

# Rotation angle (rad) above which the small-angle rotation vector is rescaled
SCALING_THRESHOLD = 2e-5
# Rotation vector magnitude (rad) above which the attitude is averaged
ALPHA_THRESHOLD = 1e-8
# Distance from pi (rad) at which the rotation vector becomes ill-conditioned
NEAR_PI_TOLERANCE = 1e-6


class ReferenceTerms(NamedTuple):
    """Frame-dependent terms of the kinematics inversion.

    Attributes:
        attitude_update: 3x3 rotation of the reference axes over the interval.
        coriolis_rate: Rate vector (rad/s) applied to the old velocity.
        averaging_rate: Rate vector (rad/s) of the reference axes.
        gravity: Gravity or gravitation vector (m/s²).
    """

    attitude_update: NDArray[np.float64]
    coriolis_rate: NDArray[np.float64]
    averaging_rate: NDArray[np.float64]
    gravity: NDArray[np.float64]


@dataclass(frozen=True)
class FrameKinematicsPolicy:
    """Reference frame description consumed by estimate_body_kinematics.

    Attributes:
        frame_type: Destination frame required on both attitude
            transformations.
        reference_terms: Callable
            ``(time_interval, velocity, old_velocity, position, old_position)``
            returning the ReferenceTerms of the frame.
    """

    frame_type: FrameType
    reference_terms: Callable[..., ReferenceTerms]


def check_time_interval(time_interval: float) -> None:
    """Raise ValueError unless time_interval is a non-negative number."""
    if not time_interval >= 0.0:
        raise ValueError(f"time_interval must be non-negative, got {time_interval}")


def rotation_vector_from_attitude_change(
    c_old_new: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Extract the rotation vector of an attitude change matrix.

    The vector comes from the antisymmetric part of the matrix. For angles
    above SCALING_THRESHOLD it is rescaled by theta/sin(theta) so that its
    norm equals the rotation angle.

    Args:
        c_old_new: 3x3 matrix resolving old body axes in new body axes.

    Returns:
        Rotation vector (rad) of the body over the interval.
    """
    alpha = 0.5 * np.array(
        [
            c_old_new[1, 2] - c_old_new[2, 1],
            c_old_new[2, 0] - c_old_new[0, 2],
            c_old_new[0, 1] - c_old_new[1, 0],
        ]
    )

    # Clipped so that round-off on near-identity matrices cannot produce NaN
    cos_theta = np.clip(0.5 * (np.trace(c_old_new) - 1.0), -1.0, 1.0)
    theta = np.arccos(cos_theta)
    if theta > SCALING_THRESHOLD:
        if np.pi - theta < NEAR_PI_TOLERANCE:
            warnings.warn(
                f"Attitude change of {theta:.6f} rad is close to pi; "
                "the recovered angular rate is ill-conditioned",
                RuntimeWarning,
                stacklevel=3,
            )
        alpha = alpha * (theta / np.sin(theta))

    return alpha


def average_attitude(
    old_c: NDArray[np.float64],
    alpha: NDArray[np.float64],
    reference_rotation: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Body-to-reference attitude averaged over the interval.

    Args:
        old_c: Body-to-reference matrix at the start of the interval.
        alpha: Body rotation vector over the interval (rad).
        reference_rotation: Rotation vector of the reference axes over the
            interval (rad), i.e. averaging_rate * time_interval.

    Returns:
        3x3 averaged attitude matrix.

    Reference:
        Groves (2013), Eq. (5.84)
    """
    mag_alpha = np.linalg.norm(alpha)
    if mag_alpha > ALPHA_THRESHOLD:
        skew_alpha = skew_symmetric(alpha)
        mag_sq = mag_alpha**2
        body_average = (
            np.eye(3)
            + (1.0 - np.cos(mag_alpha)) / mag_sq * skew_alpha
            + (1.0 - np.sin(mag_alpha) / mag_alpha) / mag_sq * skew_alpha @ skew_alpha
        )
        ave_c = old_c @ body_average
    else:
        ave_c = old_c.copy()

    return ave_c - 0.5 * skew_symmetric(reference_rotation) @ old_c


def estimate_body_kinematics(
    policy: FrameKinematicsPolicy,
    time_interval: float,
    c: CoordinateTransformation,
    old_c: CoordinateTransformation,
    velocity: NDArray[np.float64],
    old_velocity: NDArray[np.float64],
    position,
    old_position=None,
    result: Optional[BodyKinematics] = None,
) -> BodyKinematics:
    """Recover body kinematics between two navigation states.

    All inputs are raw SI values; unit handling happens in the per-frame
    entry points.

    Args:
        policy: Reference frame description.
        time_interval: Seconds between the two states. Must be >= 0.
        c: Body-to-reference transformation at the end of the interval.
        old_c: Body-to-reference transformation at the start.
        velocity: Velocity at the end of the interval (m/s), shape (3,).
        old_velocity: Velocity at the start of the interval (m/s), shape (3,).
        position: Position at the end of the interval, in the
            representation the policy expects.
        old_position: Position at the start of the interval, where the
            policy needs it.
        result: Record to write into. A new one is created when omitted.

    Returns:
        The populated BodyKinematics (``result`` when given). A zero
        interval yields exactly zero specific force and angular rate.

    Raises:
        ValueError: If time_interval is negative or a transformation is not
            body-to-reference.
        numpy.linalg.LinAlgError: If the averaged attitude is singular.
    """
    check_time_interval(time_interval)
    check_body_transformation(c, policy.frame_type, "c")
    check_body_transformation(old_c, policy.frame_type, "old_c")

    if result is None:
        result = BodyKinematics()

    if time_interval == 0.0:
        result.reset()
        return result

    terms = policy.reference_terms(
        time_interval, velocity, old_velocity, position, old_position
    )

    # Attitude change, including the rotation of the reference axes
    c_old_new = c.matrix.T @ (terms.attitude_update @ old_c.matrix)
    alpha = rotation_vector_from_attitude_change(c_old_new)
    angular_rate = alpha / time_interval

    # Specific force in reference axes
    f_ref = (
        (velocity - old_velocity) / time_interval
        - terms.gravity
        + skew_symmetric(terms.coriolis_rate) @ old_velocity
    )

    ave_c = average_attitude(
        old_c.matrix, alpha, terms.averaging_rate * time_interval
    )
    specific_force = np.linalg.inv(ave_c) @ f_ref

    result.set_specific_force(specific_force)
    result.set_angular_rate(angular_rate)
    return result
