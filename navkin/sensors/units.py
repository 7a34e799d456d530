"""
Unit-wrapped quantities and explicit unit conversions.

Estimator inputs may be given either as raw SI floats or as values tagged
with a unit. This module defines the tagged types and the conversions that
bring them back to SI:

    - Time: seconds, milliseconds, microseconds, nanoseconds, minutes, hours
    - Speed: m/s, km/h, knots, ft/s, mph
    - Angle: radians, degrees
    - Distance: meters, centimeters, millimeters, kilometers, feet

Every unit enum stores the factor that converts one unit to SI, so that
``value * unit.value`` is the SI magnitude.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np

# Type alias for numeric types
Numeric = Union[float, np.ndarray]


# ============================================================================
# Unit Enumerations
# ============================================================================

class TimeUnit(Enum):
    """Time units with their factor to seconds."""

    SECOND = 1.0
    MILLISECOND = 1e-3
    MICROSECOND = 1e-6
    NANOSECOND = 1e-9
    MINUTE = 60.0
    HOUR = 3600.0


class SpeedUnit(Enum):
    """Speed units with their factor to meters per second."""

    METERS_PER_SECOND = 1.0
    KILOMETERS_PER_HOUR = 1000.0 / 3600.0
    KNOTS = 1852.0 / 3600.0
    FEET_PER_SECOND = 0.3048
    MILES_PER_HOUR = 1609.344 / 3600.0


class AngleUnit(Enum):
    """Angle units with their factor to radians."""

    RADIANS = 1.0
    DEGREES = np.pi / 180.0


class DistanceUnit(Enum):
    """Distance units with their factor to meters."""

    METER = 1.0
    CENTIMETER = 1e-2
    MILLIMETER = 1e-3
    KILOMETER = 1e3
    FOOT = 0.3048


# ============================================================================
# Conversions
# ============================================================================

def convert_time(value: Numeric, from_unit: TimeUnit, to_unit: TimeUnit) -> Numeric:
    """Convert a time value between units."""
    if from_unit is to_unit:
        return value
    return value * from_unit.value / to_unit.value


def convert_speed(value: Numeric, from_unit: SpeedUnit, to_unit: SpeedUnit) -> Numeric:
    """Convert a speed value between units."""
    if from_unit is to_unit:
        return value
    return value * from_unit.value / to_unit.value


def convert_angle(value: Numeric, from_unit: AngleUnit, to_unit: AngleUnit) -> Numeric:
    """
    Convert an angle value between units.

    Degree/radian conversions go through np.deg2rad / np.rad2deg so the
    results match numpy's own conversions exactly.
    """
    if from_unit is to_unit:
        return value
    if from_unit is AngleUnit.DEGREES:
        return np.deg2rad(value)
    return np.rad2deg(value)


def convert_distance(
    value: Numeric, from_unit: DistanceUnit, to_unit: DistanceUnit
) -> Numeric:
    """Convert a distance value between units."""
    if from_unit is to_unit:
        return value
    return value * from_unit.value / to_unit.value


# ============================================================================
# Quantities
# ============================================================================

@dataclass(frozen=True)
class Time:
    """
    Time value tagged with its unit.

    Example:
        >>> Time(2.0, TimeUnit.MINUTE).to_seconds()
        120.0
    """

    value: float
    unit: TimeUnit = TimeUnit.SECOND

    def to(self, unit: TimeUnit) -> "Time":
        return Time(convert_time(self.value, self.unit, unit), unit)

    def to_seconds(self) -> float:
        return float(convert_time(self.value, self.unit, TimeUnit.SECOND))


@dataclass(frozen=True)
class Speed:
    """Speed value tagged with its unit."""

    value: float
    unit: SpeedUnit = SpeedUnit.METERS_PER_SECOND

    def to(self, unit: SpeedUnit) -> "Speed":
        return Speed(convert_speed(self.value, self.unit, unit), unit)

    def to_meters_per_second(self) -> float:
        return float(convert_speed(self.value, self.unit, SpeedUnit.METERS_PER_SECOND))


@dataclass(frozen=True)
class Angle:
    """Angle value tagged with its unit."""

    value: float
    unit: AngleUnit = AngleUnit.RADIANS

    def to(self, unit: AngleUnit) -> "Angle":
        return Angle(convert_angle(self.value, self.unit, unit), unit)

    def to_radians(self) -> float:
        return float(convert_angle(self.value, self.unit, AngleUnit.RADIANS))


@dataclass(frozen=True)
class Distance:
    """Distance value tagged with its unit."""

    value: float
    unit: DistanceUnit = DistanceUnit.METER

    def to(self, unit: DistanceUnit) -> "Distance":
        return Distance(convert_distance(self.value, self.unit, unit), unit)

    def to_meters(self) -> float:
        return float(convert_distance(self.value, self.unit, DistanceUnit.METER))
