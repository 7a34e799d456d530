"""
Data structures for inertial kinematics.

This module defines the record produced by the kinematics estimators:
    - BodyKinematics: specific force and angular rate resolved in body axes

Frame Conventions:
    - B: Body frame (x=forward, y=right, z=down)
    - Specific force is the non-gravitational acceleration an accelerometer
      senses; a body at rest senses the reaction to gravity.
    - Angular rate is the rotation of the body relative to inertial space.

References:
    Groves (2013), Section 2.3.5 and Chapter 4 - Inertial Sensors
"""

from dataclasses import dataclass, field

import numpy as np


@dataclass
class BodyKinematics:
    """
    Specific force and angular rate of a body, resolved in body axes.

    This is a MUTABLE dataclass: estimators can write their output into a
    caller-supplied instance instead of allocating a new one.

    Attributes:
        specific_force: Specific force [fx, fy, fz] in m/s². Shape: (3,).
        angular_rate: Angular rate [wx, wy, wz] in rad/s. Shape: (3,).

    Example:
        >>> kinematics = BodyKinematics()
        >>> kinematics.set_specific_force([0.0, 0.0, -9.81])
        >>> print(kinematics.specific_force_norm)
        9.81
    """

    specific_force: np.ndarray = field(default_factory=lambda: np.zeros(3))
    angular_rate: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self):
        self.specific_force = np.array(self.specific_force, dtype=float)
        self.angular_rate = np.array(self.angular_rate, dtype=float)
        if self.specific_force.shape != (3,):
            raise ValueError(
                f"specific_force must have shape (3,), got {self.specific_force.shape}"
            )
        if self.angular_rate.shape != (3,):
            raise ValueError(
                f"angular_rate must have shape (3,), got {self.angular_rate.shape}"
            )

    def set_specific_force(self, values) -> None:
        values = np.asarray(values, dtype=float)
        if values.shape != (3,):
            raise ValueError(f"specific_force must have shape (3,), got {values.shape}")
        self.specific_force[:] = values

    def set_angular_rate(self, values) -> None:
        values = np.asarray(values, dtype=float)
        if values.shape != (3,):
            raise ValueError(f"angular_rate must have shape (3,), got {values.shape}")
        self.angular_rate[:] = values

    def reset(self) -> None:
        """Set both vectors to zero."""
        self.specific_force[:] = 0.0
        self.angular_rate[:] = 0.0

    @property
    def fx(self) -> float:
        return float(self.specific_force[0])

    @property
    def fy(self) -> float:
        return float(self.specific_force[1])

    @property
    def fz(self) -> float:
        return float(self.specific_force[2])

    @property
    def angular_rate_x(self) -> float:
        return float(self.angular_rate[0])

    @property
    def angular_rate_y(self) -> float:
        return float(self.angular_rate[1])

    @property
    def angular_rate_z(self) -> float:
        return float(self.angular_rate[2])

    @property
    def specific_force_norm(self) -> float:
        return float(np.linalg.norm(self.specific_force))

    @property
    def angular_rate_norm(self) -> float:
        return float(np.linalg.norm(self.angular_rate))

    def as_array(self) -> np.ndarray:
        """Return [fx, fy, fz, wx, wy, wz]."""
        return np.concatenate([self.specific_force, self.angular_rate])

    def copy(self) -> "BodyKinematics":
        return BodyKinematics(self.specific_force.copy(), self.angular_rate.copy())

    def copy_from(self, other: "BodyKinematics") -> None:
        """Overwrite this record with the values of another."""
        self.specific_force[:] = other.specific_force
        self.angular_rate[:] = other.angular_rate

    def is_close(self, other: "BodyKinematics", atol: float = 0.0) -> bool:
        """
        Component-wise comparison within an absolute threshold.

        With the default ``atol=0.0`` only identical records compare equal.
        """
        return bool(
            np.all(np.abs(self.specific_force - other.specific_force) <= atol)
            and np.all(np.abs(self.angular_rate - other.angular_rate) <= atol)
        )
