"""
Body kinematics estimators.

This module recovers the specific force and angular rate sensed by an IMU
from two consecutive navigation states, one estimator per reference frame:
    - ECEF: Earth-rotation corrected, gravity with centrifugal term
    - ECI: inertial, gravitation only
    - NED: Earth rate and transport rate in local axes

All estimators share one algorithm (estimate_body_kinematics) configured by
a FrameKinematicsPolicy.
"""

from navkin.estimators.ecef_kinematics import (
    ECEF_POLICY,
    estimate_ecef_kinematics,
    estimate_ecef_kinematics_from_frames,
)
from navkin.estimators.eci_kinematics import (
    ECI_POLICY,
    estimate_eci_kinematics,
    estimate_eci_kinematics_from_frames,
)
from navkin.estimators.kinematics import (
    ALPHA_THRESHOLD,
    SCALING_THRESHOLD,
    FrameKinematicsPolicy,
    ReferenceTerms,
    average_attitude,
    estimate_body_kinematics,
    rotation_vector_from_attitude_change,
)
from navkin.estimators.ned_kinematics import (
    NED_POLICY,
    earth_rate_ned,
    estimate_ned_kinematics,
    estimate_ned_kinematics_from_frames,
    transport_rate_ned,
)

__all__ = [
    # Shared algorithm
    "SCALING_THRESHOLD",
    "ALPHA_THRESHOLD",
    "FrameKinematicsPolicy",
    "ReferenceTerms",
    "rotation_vector_from_attitude_change",
    "average_attitude",
    "estimate_body_kinematics",
    # ECEF
    "ECEF_POLICY",
    "estimate_ecef_kinematics",
    "estimate_ecef_kinematics_from_frames",
    # ECI
    "ECI_POLICY",
    "estimate_eci_kinematics",
    "estimate_eci_kinematics_from_frames",
    # NED
    "NED_POLICY",
    "earth_rate_ned",
    "transport_rate_ned",
    "estimate_ned_kinematics",
    "estimate_ned_kinematics_from_frames",
]
