"""Reference frames, rotations and frame conversions.

This module provides the frame model consumed by the kinematics estimators:
- Frame types and tagged direction cosine matrices
- ECEF, ECI and NED navigation states
- Geodetic <-> ECEF position conversion
- NED <-> ECEF <-> ECI navigation state conversion
- Rotation representations (matrices, quaternions, Euler angles)

Reference: Groves (2013), Chapter 2 - Coordinate Frames, Kinematics and
the Earth
"""

from navkin.coords.frames import (
    CoordinateTransformation,
    ECEFFrame,
    ECIFrame,
    FrameType,
    NEDFrame,
    NEDPosition,
    check_body_transformation,
)
from navkin.coords.rotations import (
    earth_rotation_matrix,
    euler_to_rotation_matrix,
    is_rotation_matrix,
    quat_to_rotation_matrix,
    rotation_matrix_to_euler,
    rotation_matrix_to_quat,
    skew_symmetric,
)
from navkin.coords.transforms import (
    EARTH_GM,
    EARTH_J2,
    EARTH_ROTATION_RATE,
    WGS84_A,
    WGS84_E2,
    WGS84_F,
    ecef_to_eci_frame,
    ecef_to_eci_matrix,
    ecef_to_llh,
    ecef_to_ned_frame,
    ecef_to_ned_matrix,
    eci_to_ecef_frame,
    llh_to_ecef,
    ned_to_ecef_frame,
)

__all__ = [
    # Frames
    "FrameType",
    "NEDPosition",
    "CoordinateTransformation",
    "ECEFFrame",
    "ECIFrame",
    "NEDFrame",
    "check_body_transformation",
    # Constants
    "WGS84_A",
    "WGS84_F",
    "WGS84_E2",
    "EARTH_ROTATION_RATE",
    "EARTH_GM",
    "EARTH_J2",
    # Transforms
    "llh_to_ecef",
    "ecef_to_llh",
    "ecef_to_ned_matrix",
    "ecef_to_eci_matrix",
    "ned_to_ecef_frame",
    "ecef_to_ned_frame",
    "ecef_to_eci_frame",
    "eci_to_ecef_frame",
    # Rotations
    "skew_symmetric",
    "earth_rotation_matrix",
    "is_rotation_matrix",
    "euler_to_rotation_matrix",
    "rotation_matrix_to_euler",
    "quat_to_rotation_matrix",
    "rotation_matrix_to_quat",
]
