"""Frame types, attitude transformations and navigation frame states.

This module defines the reference frames handled by the kinematics
estimators and the containers that describe a navigation state in each:
- BODY: Vehicle/sensor body frame (forward-right-down)
- ECEF: Earth-Centered Earth-Fixed Cartesian frame
- ECI: Earth-Centered Inertial Cartesian frame
- NED: North-East-Down local navigation frame

Reference: Groves (2013), Chapter 2, Section 2.1 - Coordinate Frames
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from navkin.coords.rotations import (
    euler_to_rotation_matrix,
    is_rotation_matrix,
    rotation_matrix_to_euler,
)


class FrameType(Enum):
    """Enumeration of reference frame types.

    Attributes:
        BODY: Vehicle/sensor body frame.
        ECEF: Earth-Centered Earth-Fixed frame.
        ECI: Earth-Centered Inertial frame.
        NED: North-East-Down local navigation frame.
    """

    BODY = "body"
    ECEF = "ecef"
    ECI = "eci"
    NED = "ned"


class NEDPosition(NamedTuple):
    """Geodetic position.

    Attributes:
        latitude: Geodetic latitude in radians.
        longitude: Longitude in radians.
        height: Height above the WGS84 ellipsoid in meters.
    """

    latitude: float
    longitude: float
    height: float


def _as_vector(value, name: str) -> NDArray[np.float64]:
    vector = np.array(value, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {vector.shape}")
    return vector


@dataclass
class CoordinateTransformation:
    """Direction cosine matrix tagged with its source and destination frames.

    The matrix resolves vectors from the source frame into the destination
    frame. Frame tags are plain attributes and can be reassigned; consumers
    validate them at the point of use.

    Attributes:
        matrix: 3x3 orthonormal matrix with unit determinant.
        source_type: Frame the matrix maps from.
        destination_type: Frame the matrix maps to.

    Raises:
        ValueError: If the matrix is not a 3x3 proper rotation.
    """

    matrix: NDArray[np.float64]
    source_type: FrameType
    destination_type: FrameType

    def __post_init__(self) -> None:
        self.matrix = np.array(self.matrix, dtype=np.float64)
        if self.matrix.shape != (3, 3):
            raise ValueError(f"Expected 3x3 matrix, got shape {self.matrix.shape}")
        if not is_rotation_matrix(self.matrix):
            raise ValueError("matrix must be orthonormal with determinant +1")

    @classmethod
    def from_euler_angles(
        cls,
        roll: float,
        pitch: float,
        yaw: float,
        source_type: FrameType = FrameType.BODY,
        destination_type: FrameType = FrameType.NED,
    ) -> "CoordinateTransformation":
        """Build a transformation from ZYX Euler angles (radians)."""
        return cls(
            euler_to_rotation_matrix(roll, pitch, yaw),
            source_type,
            destination_type,
        )

    def euler_angles(self) -> NDArray[np.float64]:
        """Return [roll, pitch, yaw] in radians."""
        return rotation_matrix_to_euler(self.matrix)

    def inverse(self) -> "CoordinateTransformation":
        """Return the transformation in the opposite direction."""
        return CoordinateTransformation(
            self.matrix.T.copy(), self.destination_type, self.source_type
        )

    def copy(self) -> "CoordinateTransformation":
        return CoordinateTransformation(
            self.matrix.copy(), self.source_type, self.destination_type
        )


def check_body_transformation(
    c: CoordinateTransformation,
    destination_type: FrameType,
    name: str = "c",
) -> None:
    """Ensure c maps from the body frame into ``destination_type``.

    Raises:
        ValueError: If either frame tag does not match.
    """
    if (
        c.source_type is not FrameType.BODY
        or c.destination_type is not destination_type
    ):
        raise ValueError(
            f"{name} must transform from {FrameType.BODY.value} to "
            f"{destination_type.value}, got {c.source_type.value} to "
            f"{c.destination_type.value}"
        )


@dataclass
class ECEFFrame:
    """Navigation state resolved in ECEF.

    Attributes:
        position: Cartesian position [x, y, z] in meters.
        velocity: Velocity [vx, vy, vz] in m/s.
        c: Body-to-ECEF transformation.
    """

    position: NDArray[np.float64]
    velocity: NDArray[np.float64]
    c: CoordinateTransformation

    def __post_init__(self) -> None:
        self.position = _as_vector(self.position, "position")
        self.velocity = _as_vector(self.velocity, "velocity")
        check_body_transformation(self.c, FrameType.ECEF)


@dataclass
class ECIFrame:
    """Navigation state resolved in ECI.

    Attributes:
        position: Cartesian position [x, y, z] in meters.
        velocity: Velocity [vx, vy, vz] in m/s.
        c: Body-to-ECI transformation.
    """

    position: NDArray[np.float64]
    velocity: NDArray[np.float64]
    c: CoordinateTransformation

    def __post_init__(self) -> None:
        self.position = _as_vector(self.position, "position")
        self.velocity = _as_vector(self.velocity, "velocity")
        check_body_transformation(self.c, FrameType.ECI)


@dataclass
class NEDFrame:
    """Navigation state resolved in the local NED frame.

    Attributes:
        latitude: Geodetic latitude in radians.
        longitude: Longitude in radians.
        height: Height above the WGS84 ellipsoid in meters.
        velocity: Velocity [vn, ve, vd] in m/s.
        c: Body-to-NED transformation.
    """

    latitude: float
    longitude: float
    height: float
    velocity: NDArray[np.float64]
    c: CoordinateTransformation

    def __post_init__(self) -> None:
        self.latitude = float(self.latitude)
        self.longitude = float(self.longitude)
        self.height = float(self.height)
        self.velocity = _as_vector(self.velocity, "velocity")
        check_body_transformation(self.c, FrameType.NED)

    @property
    def position(self) -> NEDPosition:
        return NEDPosition(self.latitude, self.longitude, self.height)
