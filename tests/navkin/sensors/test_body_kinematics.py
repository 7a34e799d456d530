"""
Unit tests for the BodyKinematics record.

Run with: pytest tests/navkin/sensors/test_body_kinematics.py -v
"""

import unittest

import numpy as np
import pytest

from navkin.sensors.types import BodyKinematics


class TestBodyKinematics(unittest.TestCase):
    """Test suite for BodyKinematics."""

    def test_defaults_to_zero(self) -> None:
        """Test new records are zero."""
        kinematics = BodyKinematics()

        np.testing.assert_array_equal(kinematics.as_array(), np.zeros(6))

    def test_instances_do_not_share_buffers(self) -> None:
        """Test default arrays are per-instance."""
        a = BodyKinematics()
        b = BodyKinematics()
        a.specific_force[0] = 1.0

        self.assertEqual(b.specific_force[0], 0.0)

    def test_components_and_norms(self) -> None:
        """Test accessors and magnitudes."""
        kinematics = BodyKinematics([3.0, 4.0, 0.0], [0.0, 0.0, -2.0])

        self.assertEqual(kinematics.fx, 3.0)
        self.assertEqual(kinematics.fy, 4.0)
        self.assertEqual(kinematics.angular_rate_z, -2.0)
        self.assertEqual(kinematics.specific_force_norm, 5.0)
        self.assertEqual(kinematics.angular_rate_norm, 2.0)

    def test_setters_write_in_place(self) -> None:
        """Test setters keep the same array objects."""
        kinematics = BodyKinematics()
        force = kinematics.specific_force
        kinematics.set_specific_force([1.0, 2.0, 3.0])
        kinematics.set_angular_rate(np.array([0.1, 0.2, 0.3]))

        self.assertIs(kinematics.specific_force, force)
        np.testing.assert_array_equal(kinematics.as_array(), [1.0, 2.0, 3.0, 0.1, 0.2, 0.3])

    def test_invalid_shapes(self) -> None:
        """Test wrong vector lengths are rejected."""
        with pytest.raises(ValueError, match="specific_force"):
            BodyKinematics(np.zeros(2))
        with pytest.raises(ValueError, match="angular_rate"):
            BodyKinematics().set_angular_rate(np.zeros(4))

    def test_copy_and_copy_from(self) -> None:
        """Test copies are independent and copy_from overwrites."""
        source = BodyKinematics([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
        duplicate = source.copy()
        duplicate.reset()
        target = BodyKinematics()
        target.copy_from(source)

        np.testing.assert_array_equal(source.angular_rate, [4.0, 5.0, 6.0])
        self.assertTrue(target.is_close(source))

    def test_is_close_threshold(self) -> None:
        """Test threshold comparison."""
        a = BodyKinematics([1.0, 0.0, 0.0], [0.0, 0.0, 0.0])
        b = BodyKinematics([1.05, 0.0, 0.0], [0.0, 0.0, 0.01])

        self.assertFalse(a.is_close(b))
        self.assertFalse(a.is_close(b, atol=0.01))
        self.assertTrue(a.is_close(b, atol=0.1))


if __name__ == "__main__":
    unittest.main()
