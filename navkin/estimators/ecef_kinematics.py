"""Body kinematics from consecutive ECEF navigation states.

ECEF axes rotate with the Earth, so the attitude change, the velocity
derivative and the averaged attitude are all corrected for Earth rotation.
Gravity includes the centrifugal term and is evaluated at the new position.

Reference: Groves (2013), Section 5.2 - Earth-Frame Navigation Equations
"""

from typing import Optional

import numpy as np

from navkin.coords.frames import CoordinateTransformation, ECEFFrame, FrameType
from navkin.coords.rotations import earth_rotation_matrix
from navkin.coords.transforms import EARTH_ROTATION_RATE
from navkin.estimators.inputs import (
    TimeInterval,
    as_cartesian_position,
    as_seconds,
    as_velocity,
)
from navkin.estimators.kinematics import (
    FrameKinematicsPolicy,
    ReferenceTerms,
    estimate_body_kinematics,
)
from navkin.sensors.gravity import ecef_gravity
from navkin.sensors.types import BodyKinematics

_EARTH_RATE = np.array([0.0, 0.0, EARTH_ROTATION_RATE])


def _ecef_reference_terms(time_interval, velocity, old_velocity, position, old_position):
    return ReferenceTerms(
        attitude_update=earth_rotation_matrix(EARTH_ROTATION_RATE * time_interval),
        coriolis_rate=2.0 * _EARTH_RATE,
        averaging_rate=_EARTH_RATE,
        gravity=ecef_gravity(position),
    )


ECEF_POLICY = FrameKinematicsPolicy(FrameType.ECEF, _ecef_reference_terms)


def estimate_ecef_kinematics(
    time_interval: TimeInterval,
    c: CoordinateTransformation,
    old_c: CoordinateTransformation,
    velocity,
    old_velocity,
    position,
    result: Optional[BodyKinematics] = None,
) -> BodyKinematics:
    """Estimate body kinematics between two ECEF navigation states.

    Args:
        time_interval: Seconds between the states (float, Time or
            timedelta). Must be non-negative.
        c: Body-to-ECEF transformation at the new state.
        old_c: Body-to-ECEF transformation at the old state.
        velocity: New ECEF velocity (m/s or Speed items).
        old_velocity: Old ECEF velocity (m/s or Speed items).
        position: New ECEF position (m or Distance items) or an NEDPosition.
        result: Optional record to write into.

    Returns:
        Specific force and angular rate resolved in body axes.

    Raises:
        ValueError: On a negative interval or non body-to-ECEF transformations.
        numpy.linalg.LinAlgError: If the averaged attitude is singular.

    Example:
        >>> kinematics = estimate_ecef_kinematics(0.02, frame.c, old_frame.c,
        ...     frame.velocity, old_frame.velocity, frame.position)
        >>> print(kinematics.specific_force_norm)
    """
    return estimate_body_kinematics(
        ECEF_POLICY,
        as_seconds(time_interval),
        c,
        old_c,
        as_velocity(velocity),
        as_velocity(old_velocity),
        as_cartesian_position(position),
        result=result,
    )


def estimate_ecef_kinematics_from_frames(
    time_interval: TimeInterval,
    frame: ECEFFrame,
    old_frame: ECEFFrame,
    result: Optional[BodyKinematics] = None,
) -> BodyKinematics:
    """Estimate body kinematics between two ECEFFrame states."""
    return estimate_ecef_kinematics(
        time_interval,
        frame.c,
        old_frame.c,
        frame.velocity,
        old_frame.velocity,
        frame.position,
        result=result,
    )
