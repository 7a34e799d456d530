"""Conversion of estimator arguments to raw SI values.

Every estimator entry point accepts several equivalent argument shapes:
plain floats, unit-wrapped quantities, datetime.timedelta intervals and
geodetic positions. The helpers below reduce each shape to the raw SI
floats the shared algorithm works with, so that all shapes of the same
physical input produce identical results.
"""

from datetime import timedelta
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from navkin.coords.frames import NEDPosition
from navkin.coords.transforms import llh_to_ecef
from navkin.sensors.units import Angle, Distance, Speed, Time

TimeInterval = Union[float, Time, timedelta]

_QUANTITY_TYPES = (Time, Speed, Angle, Distance)


def as_seconds(time_interval: TimeInterval) -> float:
    """Return the interval in seconds."""
    if isinstance(time_interval, Time):
        return time_interval.to_seconds()
    if isinstance(time_interval, timedelta):
        return time_interval.total_seconds()
    if isinstance(time_interval, _QUANTITY_TYPES):
        raise TypeError(
            f"time_interval must be a Time, got {type(time_interval).__name__}"
        )
    return float(time_interval)


def _scalar(value, quantity_type, to_si, name: str) -> float:
    if isinstance(value, quantity_type):
        return to_si(value)
    if isinstance(value, _QUANTITY_TYPES):
        raise TypeError(
            f"{name} must be a float or {quantity_type.__name__}, "
            f"got {type(value).__name__}"
        )
    return float(value)


def _vector(values, quantity_type, to_si, name: str) -> NDArray[np.float64]:
    if isinstance(values, np.ndarray):
        vector = values.astype(np.float64)
    else:
        vector = np.array(
            [_scalar(item, quantity_type, to_si, name) for item in values],
            dtype=np.float64,
        )
    if vector.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got shape {vector.shape}")
    return vector


def as_velocity(velocity) -> NDArray[np.float64]:
    """Velocity in m/s from an array or a sequence of floats/Speed."""
    return _vector(velocity, Speed, Speed.to_meters_per_second, "velocity")


def as_cartesian_position(position) -> NDArray[np.float64]:
    """Cartesian position in meters.

    Accepts an array, a sequence of floats/Distance, or an NEDPosition,
    which is converted from geodetic coordinates to ECEF.
    """
    if isinstance(position, NEDPosition):
        geodetic = as_geodetic_position(position)
        return llh_to_ecef(geodetic.latitude, geodetic.longitude, geodetic.height)
    return _vector(position, Distance, Distance.to_meters, "position")


def as_geodetic_position(position: Union[NEDPosition, Sequence]) -> NEDPosition:
    """Geodetic position with latitude/longitude in radians, height in meters.

    Accepts an NEDPosition or any 3-sequence (latitude, longitude, height)
    whose items are floats, Angle (latitude/longitude) or Distance (height).
    """
    if len(position) != 3:
        raise ValueError(
            f"position must have 3 components (latitude, longitude, height), "
            f"got {len(position)}"
        )
    latitude, longitude, height = position
    return NEDPosition(
        _scalar(latitude, Angle, Angle.to_radians, "latitude"),
        _scalar(longitude, Angle, Angle.to_radians, "longitude"),
        _scalar(height, Distance, Distance.to_meters, "height"),
    )
