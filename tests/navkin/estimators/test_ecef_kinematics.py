"""
Unit tests for the ECEF kinematics estimator.

Tests cover:
    - Agreement with a direct transcription of the ECEF inversion equations
    - Equivalence of every accepted argument form
    - Zero and negative time intervals
    - Frame tag validation
    - Stationary body: Earth rate and gravity reaction

Run with: pytest tests/navkin/estimators/test_ecef_kinematics.py -v
"""

import unittest
from datetime import timedelta

import numpy as np
import pytest

from navkin.coords.frames import (
    CoordinateTransformation,
    ECEFFrame,
    FrameType,
    NEDFrame,
    NEDPosition,
)
from navkin.coords.transforms import EARTH_ROTATION_RATE, llh_to_ecef, ned_to_ecef_frame
from navkin.estimators.ecef_kinematics import (
    estimate_ecef_kinematics,
    estimate_ecef_kinematics_from_frames,
)
from navkin.sensors.gravity import ecef_gravity
from navkin.sensors.types import BodyKinematics
from navkin.sensors.units import Distance, DistanceUnit, Speed, SpeedUnit, Time, TimeUnit

TIME_INTERVAL = 0.02
LATITUDE = np.deg2rad(41.3825)
LONGITUDE = np.deg2rad(2.176944)


def reference_ecef_kinematics(dt, C, old_C, v, old_v, r):
    """Direct transcription of the ECEF kinematics equations."""
    alpha_ie = EARTH_ROTATION_RATE * dt
    C_earth = np.array(
        [
            [np.cos(alpha_ie), np.sin(alpha_ie), 0.0],
            [-np.sin(alpha_ie), np.cos(alpha_ie), 0.0],
            [0.0, 0.0, 1.0],
        ]
    )
    C_old_new = C.T @ C_earth @ old_C

    alpha = 0.5 * np.array(
        [
            C_old_new[1, 2] - C_old_new[2, 1],
            C_old_new[2, 0] - C_old_new[0, 2],
            C_old_new[0, 1] - C_old_new[1, 0],
        ]
    )
    theta = np.arccos(np.clip(0.5 * (np.trace(C_old_new) - 1.0), -1.0, 1.0))
    if theta > 2e-5:
        alpha = alpha * theta / np.sin(theta)
    omega_ib_b = alpha / dt

    omega_ie = np.array([0.0, 0.0, EARTH_ROTATION_RATE])
    f_ib_e = (v - old_v) / dt - ecef_gravity(r) + 2.0 * np.cross(omega_ie, old_v)

    Omega_ie = np.array(
        [[0.0, -EARTH_ROTATION_RATE, 0.0], [EARTH_ROTATION_RATE, 0.0, 0.0], [0.0, 0.0, 0.0]]
    )
    mag = np.linalg.norm(alpha)
    A = np.array(
        [[0.0, -alpha[2], alpha[1]], [alpha[2], 0.0, -alpha[0]], [-alpha[1], alpha[0], 0.0]]
    )
    if mag > 1e-8:
        ave_C = old_C @ (
            np.eye(3)
            + (1.0 - np.cos(mag)) / mag**2 * A
            + (1.0 - np.sin(mag) / mag) / mag**2 * A @ A
        ) - 0.5 * Omega_ie @ old_C * dt
    else:
        ave_C = old_C - 0.5 * Omega_ie @ old_C * dt

    f_ib_b = np.linalg.inv(ave_C) @ f_ib_e
    return f_ib_b, omega_ib_b


def _random_ecef_frames(rng):
    """Two ECEF states 0.02 s apart built from perturbed NED states."""
    angles = rng.uniform(-np.pi / 4.0, np.pi / 4.0, 3)
    velocity = rng.uniform(-2.0, 2.0, 3)
    old_ned = NEDFrame(
        LATITUDE, LONGITUDE, 0.0, velocity,
        CoordinateTransformation.from_euler_angles(*angles),
    )
    new_ned = NEDFrame(
        LATITUDE + np.deg2rad(rng.uniform(-1e-4, 1e-4)),
        LONGITUDE + np.deg2rad(rng.uniform(-1e-4, 1e-4)),
        rng.uniform(-0.5, 0.5),
        velocity + rng.uniform(-0.1, 0.1, 3),
        CoordinateTransformation.from_euler_angles(
            *(angles + np.deg2rad(rng.uniform(-5.0, 5.0, 3)))
        ),
    )
    return ned_to_ecef_frame(new_ned), ned_to_ecef_frame(old_ned), new_ned


class TestECEFKinematicsReference(unittest.TestCase):
    """Compare with the transcribed reference equations."""

    def test_random_states(self) -> None:
        """Test random state pairs against the reference."""
        rng = np.random.default_rng(1)
        for _ in range(50):
            frame, old_frame, _ = _random_ecef_frames(rng)

            result = estimate_ecef_kinematics_from_frames(TIME_INTERVAL, frame, old_frame)
            f_ref, w_ref = reference_ecef_kinematics(
                TIME_INTERVAL, frame.c.matrix, old_frame.c.matrix,
                frame.velocity, old_frame.velocity, frame.position,
            )

            np.testing.assert_allclose(result.specific_force, f_ref, atol=1e-9)
            np.testing.assert_allclose(result.angular_rate, w_ref, atol=1e-12)

    def test_stationary_body(self) -> None:
        """Test a body fixed to the Earth senses Earth rate and -gravity."""
        position = llh_to_ecef(LATITUDE, LONGITUDE, 0.0)
        c = CoordinateTransformation.from_euler_angles(
            0.1, -0.3, 2.0, FrameType.BODY, FrameType.ECEF
        )

        result = estimate_ecef_kinematics(
            TIME_INTERVAL, c, c, np.zeros(3), np.zeros(3), position
        )

        np.testing.assert_allclose(
            result.angular_rate, c.matrix.T @ [0.0, 0.0, EARTH_ROTATION_RATE], atol=1e-13
        )
        np.testing.assert_allclose(
            result.specific_force, -c.matrix.T @ ecef_gravity(position), atol=1e-5
        )
        self.assertAlmostEqual(result.angular_rate_norm, EARTH_ROTATION_RATE, delta=1e-12)


class TestECEFKinematicsArguments(unittest.TestCase):
    """Equivalence of accepted argument forms."""

    def setUp(self) -> None:
        rng = np.random.default_rng(7)
        self.frame, self.old_frame, self.new_ned = _random_ecef_frames(rng)
        self.expected = estimate_ecef_kinematics(
            TIME_INTERVAL, self.frame.c, self.old_frame.c,
            self.frame.velocity, self.old_frame.velocity, self.frame.position,
        )

    def test_frames_form_is_identical(self) -> None:
        """Test the frame-object form."""
        result = estimate_ecef_kinematics_from_frames(TIME_INTERVAL, self.frame, self.old_frame)

        self.assertTrue(result.is_close(self.expected))

    def test_result_form_is_identical(self) -> None:
        """Test writing into a supplied record."""
        result = BodyKinematics()
        returned = estimate_ecef_kinematics_from_frames(
            TIME_INTERVAL, self.frame, self.old_frame, result=result
        )

        self.assertIs(returned, result)
        self.assertTrue(result.is_close(self.expected))

    def test_lists_are_identical(self) -> None:
        """Test plain lists for velocities and position."""
        result = estimate_ecef_kinematics(
            TIME_INTERVAL, self.frame.c, self.old_frame.c,
            list(self.frame.velocity), list(self.old_frame.velocity), list(self.frame.position),
        )

        self.assertTrue(result.is_close(self.expected))

    def test_si_quantities_are_identical(self) -> None:
        """Test Time, Speed and Distance in SI units."""
        result = estimate_ecef_kinematics(
            Time(TIME_INTERVAL, TimeUnit.SECOND),
            self.frame.c,
            self.old_frame.c,
            [Speed(v) for v in self.frame.velocity],
            [Speed(v, SpeedUnit.METERS_PER_SECOND) for v in self.old_frame.velocity],
            [Distance(x, DistanceUnit.METER) for x in self.frame.position],
        )

        self.assertTrue(result.is_close(self.expected))

    def test_timedelta_is_identical(self) -> None:
        """Test a datetime.timedelta interval."""
        result = estimate_ecef_kinematics_from_frames(
            timedelta(milliseconds=20), self.frame, self.old_frame
        )

        self.assertTrue(result.is_close(self.expected))

    def test_geodetic_position_is_identical(self) -> None:
        """Test an NEDPosition in place of the ECEF position."""
        position = NEDPosition(self.new_ned.latitude, self.new_ned.longitude, self.new_ned.height)
        result = estimate_ecef_kinematics(
            TIME_INTERVAL, self.frame.c, self.old_frame.c,
            self.frame.velocity, self.old_frame.velocity, position,
        )
        expected = estimate_ecef_kinematics(
            TIME_INTERVAL, self.frame.c, self.old_frame.c,
            self.frame.velocity, self.old_frame.velocity,
            llh_to_ecef(self.new_ned.latitude, self.new_ned.longitude, self.new_ned.height),
        )

        self.assertTrue(result.is_close(expected))

    def test_other_units_agree(self) -> None:
        """Test non-SI units agree within floating-point tolerance."""
        result = estimate_ecef_kinematics(
            Time(20.0, TimeUnit.MILLISECOND),
            self.frame.c,
            self.old_frame.c,
            [Speed(3.6 * v, SpeedUnit.KILOMETERS_PER_HOUR) for v in self.frame.velocity],
            self.old_frame.velocity,
            [Distance(x / 1000.0, DistanceUnit.KILOMETER) for x in self.frame.position],
        )

        self.assertTrue(result.is_close(self.expected, atol=1e-6))


class TestECEFKinematicsValidation(unittest.TestCase):
    """Interval and frame tag validation."""

    def setUp(self) -> None:
        rng = np.random.default_rng(3)
        self.frame, self.old_frame, _ = _random_ecef_frames(rng)

    def test_zero_interval_gives_exact_zeros(self) -> None:
        """Test dt = 0 returns zero kinematics."""
        result = estimate_ecef_kinematics_from_frames(0.0, self.frame, self.old_frame)

        np.testing.assert_array_equal(result.specific_force, np.zeros(3))
        np.testing.assert_array_equal(result.angular_rate, np.zeros(3))

    def test_negative_interval_rejected(self) -> None:
        """Test dt = -1 fails."""
        with pytest.raises(ValueError, match="non-negative"):
            estimate_ecef_kinematics_from_frames(-1.0, self.frame, self.old_frame)

    def test_new_attitude_tag_rejected(self) -> None:
        """Test a new attitude not ending in ECEF fails."""
        self.frame.c.destination_type = FrameType.BODY
        with pytest.raises(ValueError):
            estimate_ecef_kinematics_from_frames(TIME_INTERVAL, self.frame, self.old_frame)

    def test_old_attitude_tag_rejected(self) -> None:
        """Test an old attitude not ending in ECEF fails."""
        self.old_frame.c.destination_type = FrameType.BODY
        with pytest.raises(ValueError):
            estimate_ecef_kinematics_from_frames(TIME_INTERVAL, self.frame, self.old_frame)

    def test_eci_attitude_rejected(self) -> None:
        """Test body-to-ECI attitudes are not accepted."""
        c = CoordinateTransformation(np.eye(3), FrameType.BODY, FrameType.ECI)
        with pytest.raises(ValueError):
            estimate_ecef_kinematics(
                TIME_INTERVAL, c, c, np.zeros(3), np.zeros(3), self.frame.position
            )

    def test_frame_type_is_ecef(self) -> None:
        """Test converted frames are ECEF states."""
        self.assertIsInstance(self.frame, ECEFFrame)


if __name__ == "__main__":
    unittest.main()
