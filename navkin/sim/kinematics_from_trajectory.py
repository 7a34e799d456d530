"""
Generate ideal IMU kinematics from ground truth navigation trajectories.

This module turns a sampled trajectory into the specific force and angular
rate an error-free IMU would have measured along it, by running the frame
estimator over every pair of consecutive states:

    f_b[k], ω_b[k] = estimate(dt, state[k], state[k-1])

It also provides a parametric trajectory in NED (circle with optional
climb) and helpers to express the same trajectory in ECEF and ECI, so that
the three estimators can be compared on one physical motion.

Key insight: an accelerometer at rest measures the reaction to gravity, so a
level, stationary body in NED senses f_b ≈ [0, 0, -9.8] m/s², and the
gyroscope senses the Earth rotation rate, |ω_b| ≈ 7.29e-5 rad/s.
"""

import warnings
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from navkin.coords.frames import (
    CoordinateTransformation,
    ECEFFrame,
    ECIFrame,
    FrameType,
    NEDFrame,
)
from navkin.coords.rotations import (
    euler_to_rotation_matrix,
    quat_to_rotation_matrix,
    rotation_matrix_to_quat,
)
from navkin.coords.transforms import ecef_to_eci_frame, ned_to_ecef_frame
from navkin.estimators.ecef_kinematics import estimate_ecef_kinematics_from_frames
from navkin.estimators.eci_kinematics import estimate_eci_kinematics_from_frames
from navkin.estimators.ned_kinematics import estimate_ned_kinematics_from_frames
from navkin.sensors.gravity import radii_of_curvature
from navkin.sensors.types import BodyKinematics

NavigationFrame = Union[ECEFFrame, ECIFrame, NEDFrame]

_FRAME_ESTIMATORS = {
    ECEFFrame: estimate_ecef_kinematics_from_frames,
    ECIFrame: estimate_eci_kinematics_from_frames,
    NEDFrame: estimate_ned_kinematics_from_frames,
}


def generate_kinematics_from_frames(
    frames: Sequence[NavigationFrame],
    dt: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate ideal IMU readings along a sampled trajectory.

    Args:
        frames: Navigation states of a single frame type (all ECEFFrame,
                all ECIFrame or all NEDFrame), sampled every dt seconds.
        dt: Time step between samples.
            Units: seconds.

    Returns:
        Tuple (specific_force, angular_rate):
            specific_force: shape (N, 3), units: m/s²
            angular_rate: shape (N, 3), units: rad/s

    Raises:
        ValueError: If frames mixes frame types or is of an unsupported type.

    Notes:
        - Sample k holds the kinematics over the interval (k-1, k].
        - First sample copies the second (no previous state).
        - A single frame yields one all-zero sample.

    Example:
        >>> frames = build_ned_frames(lat, lon, h, vel_ned, quat_b_to_n)
        >>> f_b, w_b = generate_kinematics_from_frames(frames, 0.01)
    """
    frames = list(frames)
    n = len(frames)
    specific_force = np.zeros((n, 3))
    angular_rate = np.zeros((n, 3))
    if n == 0:
        return specific_force, angular_rate

    frame_class = type(frames[0])
    if frame_class not in _FRAME_ESTIMATORS:
        raise ValueError(f"Unsupported frame type: {frame_class.__name__}")
    if any(type(frame) is not frame_class for frame in frames):
        raise ValueError("All frames must share the same frame type")
    estimate = _FRAME_ESTIMATORS[frame_class]

    kinematics = BodyKinematics()
    for k in range(1, n):
        estimate(dt, frames[k], frames[k - 1], result=kinematics)
        specific_force[k] = kinematics.specific_force
        angular_rate[k] = kinematics.angular_rate

    if n > 1:
        specific_force[0] = specific_force[1]
        angular_rate[0] = angular_rate[1]

    return specific_force, angular_rate


def build_ned_frames(
    latitude: np.ndarray,
    longitude: np.ndarray,
    height: np.ndarray,
    velocity_ned: np.ndarray,
    quat_b_to_n: np.ndarray,
) -> List[NEDFrame]:
    """
    Build NED navigation states from trajectory arrays.

    Args:
        latitude: Latitudes in radians, shape (N,).
        longitude: Longitudes in radians, shape (N,).
        height: Heights in meters, shape (N,).
        velocity_ned: NED velocities in m/s, shape (N, 3).
        quat_b_to_n: Body-to-NED quaternions, scalar first, shape (N, 4).
                     Non-unit quaternions are normalized with a warning.

    Returns:
        List of N NEDFrame.
    """
    latitude = np.asarray(latitude, dtype=float)
    n = latitude.shape[0]
    velocity_ned = np.asarray(velocity_ned, dtype=float)
    quat_b_to_n = np.asarray(quat_b_to_n, dtype=float)
    if velocity_ned.shape != (n, 3):
        raise ValueError(f"velocity_ned must have shape ({n}, 3), got {velocity_ned.shape}")
    if quat_b_to_n.shape != (n, 4):
        raise ValueError(f"quat_b_to_n must have shape ({n}, 4), got {quat_b_to_n.shape}")

    norms = np.linalg.norm(quat_b_to_n, axis=1)
    if not np.allclose(norms, 1.0, atol=1e-6):
        warnings.warn(
            f"Quaternions not normalized (norms in [{norms.min():.6f}, "
            f"{norms.max():.6f}]); normalizing",
            UserWarning,
        )
        quat_b_to_n = quat_b_to_n / norms[:, None]

    frames = []
    for k in range(n):
        c = CoordinateTransformation(
            quat_to_rotation_matrix(quat_b_to_n[k]), FrameType.BODY, FrameType.NED
        )
        frames.append(
            NEDFrame(latitude[k], longitude[k], height[k], velocity_ned[k], c)
        )
    return frames


def ned_frames_to_ecef(frames: Sequence[NEDFrame]) -> List[ECEFFrame]:
    return [ned_to_ecef_frame(frame) for frame in frames]


def ecef_frames_to_eci(
    frames: Sequence[ECEFFrame],
    times: np.ndarray,
) -> List[ECIFrame]:
    """Express ECEF states in ECI, each at its own sample time (s)."""
    return [ecef_to_eci_frame(t, frame) for t, frame in zip(times, frames)]


def generate_circular_trajectory(
    latitude: float,
    longitude: float,
    height: float,
    radius: float,
    speed: float,
    duration: float,
    dt: float,
    climb_rate: float = 0.0,
) -> Dict[str, np.ndarray]:
    """
    Generate a constant-speed circle in the local NED frame.

    The body starts at the given position heading north and turns right at
    constant rate speed/radius, climbing at climb_rate. Body attitude follows
    the velocity direction with zero roll. Positions are mapped to geodetic
    coordinates with the radii of curvature at the start point.

    Args:
        latitude: Start latitude in radians.
        longitude: Start longitude in radians.
        height: Start height in meters.
        radius: Turn radius in meters. 0 gives straight-line motion.
        speed: Horizontal ground speed in m/s. 0 gives a stationary body.
        duration: Trajectory length in seconds.
        dt: Sample interval in seconds.
        climb_rate: Vertical speed in m/s (positive up).

    Returns:
        Dictionary with keys 't', 'latitude', 'longitude', 'height',
        'velocity_ned' (N, 3) and 'quat_b_to_n' (N, 4).
    """
    if dt <= 0:
        raise ValueError(f"dt must be positive, got {dt}")
    if duration < 0:
        raise ValueError(f"duration must be non-negative, got {duration}")

    t = np.arange(0.0, duration + 0.5 * dt, dt)
    r_n, r_e = radii_of_curvature(latitude)

    if radius > 0.0:
        turn_rate = speed / radius
        heading = turn_rate * t
        north = radius * np.sin(heading)
        east = radius * (1.0 - np.cos(heading))
    else:
        heading = np.zeros_like(t)
        north = speed * t
        east = np.zeros_like(t)

    heights = height + climb_rate * t
    latitudes = latitude + north / (r_n + height)
    longitudes = longitude + east / ((r_e + height) * np.cos(latitude))

    velocity_ned = np.column_stack(
        [
            speed * np.cos(heading),
            speed * np.sin(heading),
            np.full_like(t, -climb_rate),
        ]
    )

    pitch = np.arctan2(climb_rate, speed) if speed > 0.0 else 0.0
    quat = np.array(
        [rotation_matrix_to_quat(euler_to_rotation_matrix(0.0, pitch, yaw)) for yaw in heading]
    )

    return {
        "t": t,
        "latitude": latitudes,
        "longitude": longitudes,
        "height": heights,
        "velocity_ned": velocity_ned,
        "quat_b_to_n": quat,
    }


def trajectory_kinematics(
    trajectory: Dict[str, np.ndarray],
    frame_type: FrameType = FrameType.NED,
    dt: Optional[float] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Ideal IMU readings for a trajectory dictionary, estimated in one frame.

    Args:
        trajectory: Output of generate_circular_trajectory.
        frame_type: Frame to estimate in (NED, ECEF or ECI).
        dt: Sample interval; inferred from trajectory['t'] when omitted.

    Returns:
        Tuple (specific_force, angular_rate), both shape (N, 3).
    """
    t = trajectory["t"]
    if dt is None:
        dt = float(t[1] - t[0]) if len(t) > 1 else 0.0

    frames = build_ned_frames(
        trajectory["latitude"],
        trajectory["longitude"],
        trajectory["height"],
        trajectory["velocity_ned"],
        trajectory["quat_b_to_n"],
    )
    if frame_type is FrameType.ECEF:
        frames = ned_frames_to_ecef(frames)
    elif frame_type is FrameType.ECI:
        frames = ecef_frames_to_eci(ned_frames_to_ecef(frames), t)
    elif frame_type is not FrameType.NED:
        raise ValueError(f"Cannot estimate kinematics in {frame_type.value} frame")

    return generate_kinematics_from_frames(frames, dt)
