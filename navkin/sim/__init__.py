"""
Simulation utilities for generating ideal kinematics from ground truth trajectories.

This package runs the kinematics estimators along sampled trajectories to
produce the error-free accelerometer and gyroscope outputs a body would
sense while following them.

Modules:
    kinematics_from_trajectory: Trajectory generation and IMU kinematics
"""

from navkin.sim.kinematics_from_trajectory import (
    build_ned_frames,
    ecef_frames_to_eci,
    generate_circular_trajectory,
    generate_kinematics_from_frames,
    ned_frames_to_ecef,
    trajectory_kinematics,
)

__all__ = [
    "build_ned_frames",
    "ecef_frames_to_eci",
    "generate_circular_trajectory",
    "generate_kinematics_from_frames",
    "ned_frames_to_ecef",
    "trajectory_kinematics",
]
