"""
Evaluation and Visualization Module.

This module provides agreement metrics and plots for body kinematics.

Modules:
    metrics: Differences, RMSE and summary statistics
    plots: Kinematics time series and difference plots
"""

from .metrics import (
    compute_error_stats,
    compute_kinematics_differences,
    compute_norm_differences,
    compute_rmse,
)
from .plots import plot_body_kinematics, plot_kinematics_difference, save_figure

__all__ = [
    # Metrics
    "compute_kinematics_differences",
    "compute_norm_differences",
    "compute_rmse",
    "compute_error_stats",
    # Plots
    "plot_body_kinematics",
    "plot_kinematics_difference",
    "save_figure",
]
