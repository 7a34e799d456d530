"""
Examples for body kinematics estimation.

Examples:
    - example_frame_kinematics.py: Same trajectory estimated in NED, ECEF
      and ECI, with cross-frame agreement and plots
"""

__version__ = "0.1.0"
__all__ = []
