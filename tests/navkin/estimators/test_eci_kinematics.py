"""
Unit tests for the ECI kinematics estimator.

Tests cover:
    - Agreement with a direct transcription of the ECI inversion equations
    - Body at rest in inertial space
    - Argument form equivalence
    - Zero/negative intervals, frame tags and a singular averaged attitude

Run with: pytest tests/navkin/estimators/test_eci_kinematics.py -v
"""

import unittest
from datetime import timedelta

import numpy as np
import pytest

from navkin.coords.frames import CoordinateTransformation, FrameType, NEDFrame
from navkin.coords.transforms import ecef_to_eci_frame, llh_to_ecef, ned_to_ecef_frame
from navkin.estimators.eci_kinematics import (
    estimate_eci_kinematics,
    estimate_eci_kinematics_from_frames,
)
from navkin.sensors.gravity import eci_gravitation
from navkin.sensors.types import BodyKinematics
from navkin.sensors.units import Distance, Speed, Time, TimeUnit

TIME_INTERVAL = 0.02
LATITUDE = np.deg2rad(41.3825)
LONGITUDE = np.deg2rad(2.176944)


def reference_eci_kinematics(dt, C, old_C, v, old_v, r):
    """Direct transcription of the ECI kinematics equations."""
    C_old_new = C.T @ old_C

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

    f_ib_i = (v - old_v) / dt - eci_gravitation(r)

    mag = np.linalg.norm(alpha)
    A = np.array(
        [[0.0, -alpha[2], alpha[1]], [alpha[2], 0.0, -alpha[0]], [-alpha[1], alpha[0], 0.0]]
    )
    if mag > 1e-8:
        ave_C = old_C @ (
            np.eye(3)
            + (1.0 - np.cos(mag)) / mag**2 * A
            + (1.0 - np.sin(mag) / mag) / mag**2 * A @ A
        )
    else:
        ave_C = old_C

    return np.linalg.inv(ave_C) @ f_ib_i, omega_ib_b


def _random_eci_frames(rng):
    """Two ECI states 0.02 s apart, converted at t=0 and t=dt."""
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
    old_frame = ecef_to_eci_frame(0.0, ned_to_ecef_frame(old_ned))
    frame = ecef_to_eci_frame(TIME_INTERVAL, ned_to_ecef_frame(new_ned))
    return frame, old_frame


class TestECIKinematicsReference(unittest.TestCase):
    """Compare with the transcribed reference equations."""

    def test_random_states(self) -> None:
        """Test random state pairs against the reference."""
        rng = np.random.default_rng(2)
        for _ in range(50):
            frame, old_frame = _random_eci_frames(rng)

            result = estimate_eci_kinematics_from_frames(TIME_INTERVAL, frame, old_frame)
            f_ref, w_ref = reference_eci_kinematics(
                TIME_INTERVAL, frame.c.matrix, old_frame.c.matrix,
                frame.velocity, old_frame.velocity, frame.position,
            )

            np.testing.assert_allclose(result.specific_force, f_ref, atol=1e-9)
            np.testing.assert_allclose(result.angular_rate, w_ref, atol=1e-12)

    def test_inertially_fixed_body(self) -> None:
        """Test a body at rest in inertial space only senses -gravitation."""
        position = llh_to_ecef(LATITUDE, LONGITUDE, 100.0)
        c = CoordinateTransformation.from_euler_angles(
            0.2, 0.1, -1.0, FrameType.BODY, FrameType.ECI
        )

        result = estimate_eci_kinematics(
            TIME_INTERVAL, c, c, np.zeros(3), np.zeros(3), position
        )

        np.testing.assert_allclose(result.angular_rate, np.zeros(3), atol=1e-13)
        np.testing.assert_allclose(
            result.specific_force, -c.matrix.T @ eci_gravitation(position), atol=1e-12
        )

    def test_free_fall_is_weightless(self) -> None:
        """Test a body accelerating with gravitation senses no force."""
        position = llh_to_ecef(LATITUDE, LONGITUDE, 0.0)
        old_velocity = np.array([10.0, -5.0, 3.0])
        velocity = old_velocity + eci_gravitation(position) * TIME_INTERVAL
        c = CoordinateTransformation(np.eye(3), FrameType.BODY, FrameType.ECI)

        result = estimate_eci_kinematics(
            TIME_INTERVAL, c, c, velocity, old_velocity, position
        )

        np.testing.assert_allclose(result.specific_force, np.zeros(3), atol=1e-10)


class TestECIKinematicsArguments(unittest.TestCase):
    """Equivalence of accepted argument forms."""

    def setUp(self) -> None:
        rng = np.random.default_rng(11)
        self.frame, self.old_frame = _random_eci_frames(rng)
        self.expected = estimate_eci_kinematics(
            TIME_INTERVAL, self.frame.c, self.old_frame.c,
            self.frame.velocity, self.old_frame.velocity, self.frame.position,
        )

    def test_frames_form_is_identical(self) -> None:
        """Test the frame-object form."""
        result = estimate_eci_kinematics_from_frames(TIME_INTERVAL, self.frame, self.old_frame)

        self.assertTrue(result.is_close(self.expected))

    def test_quantities_are_identical(self) -> None:
        """Test Time, Speed, Distance and timedelta forms."""
        result = estimate_eci_kinematics(
            timedelta(milliseconds=20),
            self.frame.c,
            self.old_frame.c,
            [Speed(v) for v in self.frame.velocity],
            [Speed(v) for v in self.old_frame.velocity],
            [Distance(x) for x in self.frame.position],
        )
        other = estimate_eci_kinematics_from_frames(
            Time(TIME_INTERVAL, TimeUnit.SECOND), self.frame, self.old_frame
        )

        self.assertTrue(result.is_close(self.expected))
        self.assertTrue(other.is_close(self.expected))

    def test_rejects_speed_interval(self) -> None:
        """Test a Speed is not accepted as a time interval."""
        with pytest.raises(TypeError):
            estimate_eci_kinematics_from_frames(Speed(1.0), self.frame, self.old_frame)


class TestECIKinematicsValidation(unittest.TestCase):
    """Interval, frame tag and conditioning checks."""

    def setUp(self) -> None:
        rng = np.random.default_rng(5)
        self.frame, self.old_frame = _random_eci_frames(rng)

    def test_zero_interval_gives_exact_zeros(self) -> None:
        """Test dt = 0 returns zero kinematics."""
        result = estimate_eci_kinematics_from_frames(0.0, self.frame, self.old_frame)

        np.testing.assert_array_equal(result.as_array(), np.zeros(6))

    def test_negative_interval_rejected(self) -> None:
        """Test dt = -1 fails."""
        with pytest.raises(ValueError, match="non-negative"):
            estimate_eci_kinematics_from_frames(-1.0, self.frame, self.old_frame)

    def test_attitude_tag_rejected(self) -> None:
        """Test an attitude not ending in ECI fails."""
        self.frame.c.destination_type = FrameType.ECEF
        with pytest.raises(ValueError, match="eci"):
            estimate_eci_kinematics_from_frames(TIME_INTERVAL, self.frame, self.old_frame)

    def test_singular_attitude_leaves_result_untouched(self) -> None:
        """Test a singular averaged attitude raises without writing the result."""
        self.old_frame.c.matrix = np.zeros((3, 3))
        result = BodyKinematics([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])

        with pytest.raises(np.linalg.LinAlgError):
            estimate_eci_kinematics_from_frames(
                TIME_INTERVAL, self.frame, self.old_frame, result=result
            )
        np.testing.assert_array_equal(result.as_array(), [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])


if __name__ == "__main__":
    unittest.main()
