"""Body kinematics from consecutive ECI navigation states.

ECI axes do not rotate, so there is no Earth-rotation or Coriolis
correction. The gravitational model excludes the centrifugal term.

Reference: Groves (2013), Section 5.1 - Inertial-Frame Navigation Equations
"""

from typing import Optional

import numpy as np

from navkin.coords.frames import CoordinateTransformation, ECIFrame, FrameType
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
from navkin.sensors.gravity import eci_gravitation
from navkin.sensors.types import BodyKinematics


def _eci_reference_terms(time_interval, velocity, old_velocity, position, old_position):
    return ReferenceTerms(
        attitude_update=np.eye(3),
        coriolis_rate=np.zeros(3),
        averaging_rate=np.zeros(3),
        gravity=eci_gravitation(position),
    )


ECI_POLICY = FrameKinematicsPolicy(FrameType.ECI, _eci_reference_terms)


def estimate_eci_kinematics(
    time_interval: TimeInterval,
    c: CoordinateTransformation,
    old_c: CoordinateTransformation,
    velocity,
    old_velocity,
    position,
    result: Optional[BodyKinematics] = None,
) -> BodyKinematics:
    """Estimate body kinematics between two ECI navigation states.

    Args:
        time_interval: Seconds between the states (float, Time or
            timedelta). Must be non-negative.
        c: Body-to-ECI transformation at the new state.
        old_c: Body-to-ECI transformation at the old state.
        velocity: New ECI velocity (m/s or Speed items).
        old_velocity: Old ECI velocity (m/s or Speed items).
        position: New ECI position (m or Distance items).
        result: Optional record to write into.

    Returns:
        Specific force and angular rate resolved in body axes.

    Raises:
        ValueError: On a negative interval or non body-to-ECI transformations.
        numpy.linalg.LinAlgError: If the averaged attitude is singular.
    """
    return estimate_body_kinematics(
        ECI_POLICY,
        as_seconds(time_interval),
        c,
        old_c,
        as_velocity(velocity),
        as_velocity(old_velocity),
        as_cartesian_position(position),
        result=result,
    )


def estimate_eci_kinematics_from_frames(
    time_interval: TimeInterval,
    frame: ECIFrame,
    old_frame: ECIFrame,
    result: Optional[BodyKinematics] = None,
) -> BodyKinematics:
    """Estimate body kinematics between two ECIFrame states."""
    return estimate_eci_kinematics(
        time_interval,
        frame.c,
        old_frame.c,
        frame.velocity,
        old_frame.velocity,
        frame.position,
        result=result,
    )
