"""Sensor-side models for inertial kinematics.

This module provides:
- Gravity and gravitation models (ECEF, ECI, NED)
- Unit-wrapped quantities (time, speed, angle, distance)
- The BodyKinematics record (specific force and angular rate)

Reference: Groves (2013), Chapters 2 and 4
"""

from navkin.sensors.gravity import (
    ecef_gravitation,
    ecef_gravity,
    eci_gravitation,
    ned_gravity,
    radii_of_curvature,
)
from navkin.sensors.types import BodyKinematics
from navkin.sensors.units import (
    Angle,
    AngleUnit,
    Distance,
    DistanceUnit,
    Speed,
    SpeedUnit,
    Time,
    TimeUnit,
    convert_angle,
    convert_distance,
    convert_speed,
    convert_time,
)

__all__ = [
    # Gravity
    "ecef_gravity",
    "ecef_gravitation",
    "eci_gravitation",
    "ned_gravity",
    "radii_of_curvature",
    # Types
    "BodyKinematics",
    # Units
    "Time",
    "TimeUnit",
    "Speed",
    "SpeedUnit",
    "Angle",
    "AngleUnit",
    "Distance",
    "DistanceUnit",
    "convert_time",
    "convert_speed",
    "convert_angle",
    "convert_distance",
]
