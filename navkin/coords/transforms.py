"""Position and navigation-frame conversions between NED, ECEF and ECI.

This module implements the geodetic <-> Cartesian position conversions and
the full navigation-state (position, velocity, attitude) conversions used
to express one physical trajectory in each of the estimator frames.

WGS84 ellipsoid parameters:
- Semi-major axis (a): 6378137.0 m
- Flattening (f): 1/298.257223563
- First eccentricity squared (e²): 0.00669437999014

Reference: Groves (2013), Chapter 2, Sections 2.4-2.5
"""

import numpy as np
from numpy.typing import NDArray

from navkin.coords.frames import (
    CoordinateTransformation,
    ECEFFrame,
    ECIFrame,
    FrameType,
    NEDFrame,
)
from navkin.coords.rotations import skew_symmetric

# WGS84 ellipsoid parameters
WGS84_A = 6378137.0  # Equatorial radius (m)
WGS84_F = 1.0 / 298.257223563  # Flattening
WGS84_B = WGS84_A * (1.0 - WGS84_F)  # Polar radius (m)
WGS84_E2 = 1.0 - (WGS84_B / WGS84_A) ** 2  # First eccentricity squared

# Earth model constants
EARTH_ROTATION_RATE = 7.292115e-5  # rad/s
EARTH_GM = 3.986004418e14  # m^3/s^2
EARTH_J2 = 1.082627e-3

_EARTH_RATE_VECTOR = np.array([0.0, 0.0, EARTH_ROTATION_RATE])


def llh_to_ecef(
    lat: float,
    lon: float,
    height: float,
) -> NDArray[np.float64]:
    """Convert geodetic coordinates to ECEF Cartesian coordinates.

    Args:
        lat: Latitude in radians (positive north).
        lon: Longitude in radians (positive east).
        height: Height above WGS84 ellipsoid in meters.

    Returns:
        ECEF position [x, y, z] in meters.

    Example:
        >>> xyz = llh_to_ecef(np.deg2rad(41.3825), np.deg2rad(2.176944), 0.0)

    Reference:
        Groves (2013), Eq. (2.112)
    """
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    # Transverse radius of curvature
    r_e = WGS84_A / np.sqrt(1.0 - WGS84_E2 * sin_lat**2)

    return np.array(
        [
            (r_e + height) * cos_lat * np.cos(lon),
            (r_e + height) * cos_lat * np.sin(lon),
            ((1.0 - WGS84_E2) * r_e + height) * sin_lat,
        ],
        dtype=np.float64,
    )


def ecef_to_llh(
    x: float,
    y: float,
    z: float,
    tol: float = 1e-14,
    max_iter: int = 20,
) -> NDArray[np.float64]:
    """Convert ECEF Cartesian coordinates to geodetic coordinates.

    Latitude is refined by fixed-point iteration on the geodetic
    relationship between latitude, height and the radius of curvature.

    Args:
        x: ECEF x-coordinate in meters.
        y: ECEF y-coordinate in meters.
        z: ECEF z-coordinate in meters.
        tol: Latitude convergence tolerance in radians.
        max_iter: Maximum number of iterations.

    Returns:
        [lat, lon, height] with angles in radians and height in meters.

    Reference:
        Groves (2013), Section 2.4.2
    """
    lon = np.arctan2(y, x)
    p = np.hypot(x, y)

    if p < 1e-10:
        lat = np.copysign(np.pi / 2.0, z)
        return np.array([lat, lon, abs(z) - WGS84_B], dtype=np.float64)

    lat = np.arctan2(z, p * (1.0 - WGS84_E2))
    for _ in range(max_iter):
        r_e = WGS84_A / np.sqrt(1.0 - WGS84_E2 * np.sin(lat) ** 2)
        height = p / np.cos(lat) - r_e
        updated = np.arctan2(z, p * (1.0 - WGS84_E2 * r_e / (r_e + height)))
        converged = abs(updated - lat) < tol
        lat = updated
        if converged:
            break

    r_e = WGS84_A / np.sqrt(1.0 - WGS84_E2 * np.sin(lat) ** 2)
    height = p / np.cos(lat) - r_e

    return np.array([lat, lon, height], dtype=np.float64)


def ecef_to_ned_matrix(lat: float, lon: float) -> NDArray[np.float64]:
    """Matrix resolving ECEF vectors in the NED frame at (lat, lon).

    Reference:
        Groves (2013), Eq. (2.150)
    """
    sin_lat, cos_lat = np.sin(lat), np.cos(lat)
    sin_lon, cos_lon = np.sin(lon), np.cos(lon)

    return np.array(
        [
            [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
            [-sin_lon, cos_lon, 0.0],
            [-cos_lat * cos_lon, -cos_lat * sin_lon, -sin_lat],
        ],
        dtype=np.float64,
    )


def ecef_to_eci_matrix(time: float) -> NDArray[np.float64]:
    """Matrix resolving ECEF vectors in ECI ``time`` seconds after alignment.

    The ECI and ECEF axes are taken to coincide at time zero.

    Reference:
        Groves (2013), Eq. (2.145), transposed
    """
    angle = EARTH_ROTATION_RATE * time
    c, s = np.cos(angle), np.sin(angle)
    return np.array(
        [
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def ned_to_ecef_frame(frame: NEDFrame) -> ECEFFrame:
    """Express an NED navigation state in ECEF.

    Reference:
        Groves (2013), Eqs. (2.112), (2.153) and (2.154)
    """
    c_e_n = ecef_to_ned_matrix(frame.latitude, frame.longitude)
    position = llh_to_ecef(frame.latitude, frame.longitude, frame.height)
    velocity = c_e_n.T @ frame.velocity
    c_b_e = c_e_n.T @ frame.c.matrix

    return ECEFFrame(
        position,
        velocity,
        CoordinateTransformation(c_b_e, FrameType.BODY, FrameType.ECEF),
    )


def ecef_to_ned_frame(frame: ECEFFrame) -> NEDFrame:
    """Express an ECEF navigation state in NED at its own position."""
    lat, lon, height = ecef_to_llh(*frame.position)
    c_e_n = ecef_to_ned_matrix(lat, lon)

    return NEDFrame(
        lat,
        lon,
        height,
        c_e_n @ frame.velocity,
        CoordinateTransformation(c_e_n @ frame.c.matrix, FrameType.BODY, FrameType.NED),
    )


def ecef_to_eci_frame(time: float, frame: ECEFFrame) -> ECIFrame:
    """Express an ECEF navigation state in ECI at the given time.

    Args:
        time: Seconds elapsed since ECI and ECEF axes coincided.
        frame: ECEF navigation state.

    Returns:
        ECI navigation state including the Earth-rotation velocity term.

    Reference:
        Groves (2013), Eqs. (2.146) and (2.147)
    """
    c_e_i = ecef_to_eci_matrix(time)
    position = c_e_i @ frame.position
    velocity = c_e_i @ (frame.velocity + skew_symmetric(_EARTH_RATE_VECTOR) @ frame.position)

    return ECIFrame(
        position,
        velocity,
        CoordinateTransformation(c_e_i @ frame.c.matrix, FrameType.BODY, FrameType.ECI),
    )


def eci_to_ecef_frame(time: float, frame: ECIFrame) -> ECEFFrame:
    """Express an ECI navigation state in ECEF at the given time."""
    c_i_e = ecef_to_eci_matrix(time).T
    position = c_i_e @ frame.position
    velocity = c_i_e @ (frame.velocity - skew_symmetric(_EARTH_RATE_VECTOR) @ frame.position)

    return ECEFFrame(
        position,
        velocity,
        CoordinateTransformation(c_i_e @ frame.c.matrix, FrameType.BODY, FrameType.ECEF),
    )
