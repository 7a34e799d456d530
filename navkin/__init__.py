"""Body kinematics estimation from consecutive navigation frames.

This package recovers the specific force and angular rate an IMU would have
measured between two known navigation states:
- coords: Frame types, coordinate transformations and frame conversions
- sensors: Gravity models, unit-wrapped quantities and kinematics records
- estimators: ECEF, ECI and NED kinematics estimators
- sim: Synthetic kinematics generation along trajectories
- eval: Comparison metrics and plots
"""

__version__ = "0.1.0"
