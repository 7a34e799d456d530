"""
Earth gravity and gravitation models.

This module provides the gravity models used to separate the gravitational
part of a velocity change from the specific force sensed by an IMU:

    - eci_gravitation / ecef_gravitation: J2 gravitational acceleration
      (mass attraction only, no centrifugal term)
    - ecef_gravity: gravitation plus the centrifugal acceleration of a
      point fixed to the rotating Earth
    - ned_gravity: Somigliana surface gravity with free-air height
      correction, resolved in local NED axes
    - radii_of_curvature: meridian and transverse radii used by the NED
      transport-rate terms

Physical interpretation:
    - An accelerometer at rest on the Earth's surface senses -g, the
      reaction to gravity, with |g| ≈ 9.78 m/s² at the equator and
      ≈ 9.83 m/s² at the poles.
    - In an inertial frame there is no centrifugal term, so the ECI model
      returns gravitation, not gravity.

All positions are in meters and all latitudes in radians.

Reference: Groves (2013), Chapter 2, Section 2.4.7 - Gravity Models
"""

from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from navkin.coords.transforms import (
    EARTH_GM,
    EARTH_J2,
    EARTH_ROTATION_RATE,
    WGS84_A,
    WGS84_B,
    WGS84_E2,
    WGS84_F,
)

# Somigliana model coefficients (WGS84)
EQUATORIAL_GRAVITY = 9.7803253359  # m/s²
SOMIGLIANA_K = 0.001931853
NORTH_GRAVITY_COEFFICIENT = -8.08e-9  # (m/s²)/m


def radii_of_curvature(latitude: float) -> Tuple[float, float]:
    """
    Compute the meridian and transverse radii of curvature.

    Args:
        latitude: Geodetic latitude in radians.

    Returns:
        Tuple (r_n, r_e):
            r_n: Meridian radius of curvature in meters (north-south).
            r_e: Transverse radius of curvature in meters (east-west).

    Example:
        >>> r_n, r_e = radii_of_curvature(0.0)
        >>> print(f"{r_e:.1f}")  # 6378137.0 at the equator

    References:
        Groves (2013), Eqs. (2.105) and (2.106)
    """
    denominator = 1.0 - WGS84_E2 * np.sin(latitude) ** 2
    r_n = WGS84_A * (1.0 - WGS84_E2) / denominator**1.5
    r_e = WGS84_A / np.sqrt(denominator)
    return float(r_n), float(r_e)


def eci_gravitation(position: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Compute gravitational acceleration with the J2 zonal harmonic.

    The same expression applies to ECI and ECEF positions since the J2
    field is symmetric about the polar axis shared by both frames.

    Args:
        position: Cartesian position [x, y, z] in meters.

    Returns:
        Gravitational acceleration [gx, gy, gz] in m/s², resolved in the
        axes of the input. Zero at the Earth's center.

    References:
        Groves (2013), Eq. (2.142)
    """
    r = np.asarray(position, dtype=np.float64)
    magnitude = np.linalg.norm(r)
    if magnitude == 0.0:
        return np.zeros(3)

    z_scale = 5.0 * (r[2] / magnitude) ** 2
    j2_term = 1.5 * EARTH_J2 * (WGS84_A / magnitude) ** 2 * np.array(
        [
            (1.0 - z_scale) * r[0],
            (1.0 - z_scale) * r[1],
            (3.0 - z_scale) * r[2],
        ]
    )
    return -EARTH_GM / magnitude**3 * (r + j2_term)


ecef_gravitation = eci_gravitation


def ecef_gravity(position: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Compute the acceleration due to gravity at an ECEF position.

    Gravity is gravitation plus the centrifugal acceleration of a point
    rotating with the Earth.

    Args:
        position: ECEF position [x, y, z] in meters.

    Returns:
        Gravity [gx, gy, gz] in m/s², resolved in ECEF.

    Example:
        >>> from navkin.coords.transforms import llh_to_ecef
        >>> g = ecef_gravity(llh_to_ecef(0.0, 0.0, 0.0))
        >>> print(f"{np.linalg.norm(g):.3f}")  # ~9.780

    References:
        Groves (2013), Eq. (2.133)
    """
    r = np.asarray(position, dtype=np.float64)
    if np.linalg.norm(r) == 0.0:
        return np.zeros(3)

    centrifugal = EARTH_ROTATION_RATE**2 * np.array([r[0], r[1], 0.0])
    return eci_gravitation(r) + centrifugal


def ned_gravity(latitude: float, height: float) -> NDArray[np.float64]:
    """
    Compute the acceleration due to gravity resolved in NED axes.

    Surface gravity follows the Somigliana model; the down component gets
    the free-air height correction and the north component the small
    deflection caused by the ellipsoid shape. The east component is zero.

    Args:
        latitude: Geodetic latitude in radians.
        height: Height above the WGS84 ellipsoid in meters.

    Returns:
        Gravity [gn, ge, gd] in m/s².

    References:
        Groves (2013), Eqs. (2.134), (2.139) and (2.140)
    """
    sin_sq_lat = np.sin(latitude) ** 2
    surface_gravity = (
        EQUATORIAL_GRAVITY
        * (1.0 + SOMIGLIANA_K * sin_sq_lat)
        / np.sqrt(1.0 - WGS84_E2 * sin_sq_lat)
    )

    north = NORTH_GRAVITY_COEFFICIENT * height * np.sin(2.0 * latitude)
    height_scale = (
        1.0
        + WGS84_F * (1.0 - 2.0 * sin_sq_lat)
        + EARTH_ROTATION_RATE**2 * WGS84_A**2 * WGS84_B / EARTH_GM
    )
    down = surface_gravity * (
        1.0 - (2.0 / WGS84_A) * height_scale * height + 3.0 * height**2 / WGS84_A**2
    )

    return np.array([north, 0.0, down], dtype=np.float64)
