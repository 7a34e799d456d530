"""Body kinematics from consecutive NED navigation states.

Local NED axes rotate with the Earth and also with the motion of the body
over the curved Earth (transport rate). Both rates are resolved in NED:

    omega_ie = Ω [cos L, 0, -sin L]
    omega_en = [v_E / (R_E + h), -v_N / (R_N + h), -v_E tan L / (R_E + h)]

where R_N and R_E are the meridian and transverse radii of curvature.
The Earth rate is evaluated at the old latitude; the transport rate at
both the old and the new state. Gravity uses the NED model at the old
latitude and height.

Reference: Groves (2013), Section 5.4 - Local-Navigation-Frame Navigation
Equations, Eqs. (2.123), (5.44) and (5.54)
"""

from typing import Optional

import numpy as np

from navkin.coords.frames import CoordinateTransformation, FrameType, NEDFrame
from navkin.coords.rotations import skew_symmetric
from navkin.coords.transforms import EARTH_ROTATION_RATE
from navkin.estimators.inputs import (
    TimeInterval,
    as_geodetic_position,
    as_seconds,
    as_velocity,
)
from navkin.estimators.kinematics import (
    FrameKinematicsPolicy,
    ReferenceTerms,
    estimate_body_kinematics,
)
from navkin.sensors.gravity import ned_gravity, radii_of_curvature
from navkin.sensors.types import BodyKinematics


def earth_rate_ned(latitude: float) -> np.ndarray:
    """Earth rotation rate resolved in NED axes at the given latitude."""
    return EARTH_ROTATION_RATE * np.array([np.cos(latitude), 0.0, -np.sin(latitude)])


def transport_rate_ned(latitude: float, height: float, velocity: np.ndarray) -> np.ndarray:
    """Rotation rate of NED axes with respect to ECEF caused by motion."""
    r_n, r_e = radii_of_curvature(latitude)
    return np.array(
        [
            velocity[1] / (r_e + height),
            -velocity[0] / (r_n + height),
            -velocity[1] * np.tan(latitude) / (r_e + height),
        ]
    )


def _ned_reference_terms(time_interval, velocity, old_velocity, position, old_position):
    omega_ie = earth_rate_ned(old_position.latitude)
    omega_en = transport_rate_ned(position.latitude, position.height, velocity)
    old_omega_en = transport_rate_ned(
        old_position.latitude, old_position.height, old_velocity
    )

    attitude_update = np.eye(3) - time_interval * skew_symmetric(
        omega_ie + 0.5 * omega_en + 0.5 * old_omega_en
    )
    return ReferenceTerms(
        attitude_update=attitude_update,
        coriolis_rate=old_omega_en + 2.0 * omega_ie,
        averaging_rate=old_omega_en + omega_ie,
        gravity=ned_gravity(old_position.latitude, old_position.height),
    )


NED_POLICY = FrameKinematicsPolicy(FrameType.NED, _ned_reference_terms)


def estimate_ned_kinematics(
    time_interval: TimeInterval,
    c: CoordinateTransformation,
    old_c: CoordinateTransformation,
    velocity,
    old_velocity,
    position,
    old_position,
    result: Optional[BodyKinematics] = None,
) -> BodyKinematics:
    """Estimate body kinematics between two NED navigation states.

    Args:
        time_interval: Seconds between the states (float, Time or
            timedelta). Must be non-negative.
        c: Body-to-NED transformation at the new state.
        old_c: Body-to-NED transformation at the old state.
        velocity: New NED velocity [vn, ve, vd] (m/s or Speed items).
        old_velocity: Old NED velocity (m/s or Speed items).
        position: New geodetic position, an NEDPosition or a
            (latitude, longitude, height) sequence of floats/Angle/Distance.
        old_position: Old geodetic position, same forms as ``position``.
        result: Optional record to write into.

    Returns:
        Specific force and angular rate resolved in body axes.

    Raises:
        ValueError: On a negative interval or non body-to-NED transformations.
        numpy.linalg.LinAlgError: If the averaged attitude is singular.
    """
    return estimate_body_kinematics(
        NED_POLICY,
        as_seconds(time_interval),
        c,
        old_c,
        as_velocity(velocity),
        as_velocity(old_velocity),
        as_geodetic_position(position),
        old_position=as_geodetic_position(old_position),
        result=result,
    )


def estimate_ned_kinematics_from_frames(
    time_interval: TimeInterval,
    frame: NEDFrame,
    old_frame: NEDFrame,
    result: Optional[BodyKinematics] = None,
) -> BodyKinematics:
    """Estimate body kinematics between two NEDFrame states."""
    return estimate_ned_kinematics(
        time_interval,
        frame.c,
        old_frame.c,
        frame.velocity,
        old_frame.velocity,
        frame.position,
        old_frame.position,
        result=result,
    )