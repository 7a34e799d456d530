"""
Visualization utilities for body kinematics.

All functions return matplotlib Figure objects for flexible display/saving.
"""

from pathlib import Path
from typing import Dict, List, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np

_AXIS_LABELS = ["X", "Y", "Z"]
_COLORS = ["blue", "red", "green", "orange", "purple"]


def plot_body_kinematics(
    kinematics_dict: Dict[str, Tuple[np.ndarray, np.ndarray]],
    dt: float = 1.0,
    title: str = "Body Kinematics",
) -> plt.Figure:
    """
    Plot specific force and angular rate components over time.

    Args:
        kinematics_dict: {name: (specific_force, angular_rate)}, each array
                         of shape (N, 3)
        dt: Time step in seconds
        title: Plot title

    Returns:
        fig: Matplotlib figure with one column per quantity and one row
             per body axis
    """
    fig, axes_arr = plt.subplots(3, 2, figsize=(14, 10), sharex=True)

    for j, (name, (specific_force, angular_rate)) in enumerate(kinematics_dict.items()):
        time = np.arange(len(specific_force)) * dt
        color = _COLORS[j % len(_COLORS)]
        for i in range(3):
            axes_arr[i, 0].plot(
                time, specific_force[:, i], label=name, color=color, linewidth=1.5
            )
            axes_arr[i, 1].plot(
                time, np.rad2deg(angular_rate[:, i]), label=name, color=color, linewidth=1.5
            )

    for i, axis_label in enumerate(_AXIS_LABELS):
        axes_arr[i, 0].set_ylabel(f"f_{axis_label.lower()} (m/s²)", fontsize=11)
        axes_arr[i, 1].set_ylabel(f"ω_{axis_label.lower()} (deg/s)", fontsize=11)
        for ax in axes_arr[i]:
            ax.grid(True, alpha=0.3)
            ax.legend(fontsize=9)

    axes_arr[0, 0].set_title("Specific Force", fontsize=12, fontweight="bold")
    axes_arr[0, 1].set_title("Angular Rate", fontsize=12, fontweight="bold")
    axes_arr[2, 0].set_xlabel("Time (s)", fontsize=11)
    axes_arr[2, 1].set_xlabel("Time (s)", fontsize=11)

    fig.suptitle(title, fontsize=14, fontweight="bold", y=1.0)
    plt.tight_layout()
    return fig


def plot_kinematics_difference(
    differences_dict: Dict[str, Tuple[np.ndarray, np.ndarray]],
    dt: float = 1.0,
    title: str = "Kinematics Difference vs Time",
) -> plt.Figure:
    """
    Plot magnitude differences of specific force and angular rate.

    Args:
        differences_dict: {name: (force_norm_diff, rate_norm_diff)}, each
                          array of shape (N,)
        dt: Time step in seconds
        title: Plot title

    Returns:
        fig: Matplotlib figure
    """
    fig, (ax_force, ax_rate) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    for j, (name, (force_diff, rate_diff)) in enumerate(differences_dict.items()):
        time = np.arange(len(force_diff)) * dt
        color = _COLORS[j % len(_COLORS)]
        ax_force.plot(time, force_diff, label=name, color=color, linewidth=1.5)
        ax_rate.plot(time, rate_diff, label=name, color=color, linewidth=1.5)

    ax_force.set_ylabel("Δ|f| (m/s²)", fontsize=11)
    ax_rate.set_ylabel("Δ|ω| (rad/s)", fontsize=11)
    ax_rate.set_xlabel("Time (s)", fontsize=11)
    for ax in (ax_force, ax_rate):
        ax.legend(fontsize=9)
        ax.grid(True, alpha=0.3)
        ax.axhline(y=0, color="k", linestyle="--", linewidth=0.8, alpha=0.5)

    fig.suptitle(title, fontsize=14, fontweight="bold", y=1.0)
    plt.tight_layout()
    return fig


def save_figure(
    fig: plt.Figure,
    out_dir: Union[str, Path],
    name: str,
    formats: Tuple[str, ...] = ("svg", "pdf", "png"),
) -> List[Path]:
    """
    Save figure in multiple formats.

    Args:
        fig: Matplotlib figure to save
        out_dir: Output directory, created if missing
        name: Base filename (without extension)
        formats: Tuple of format extensions

    Returns:
        paths: List of saved file paths
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    paths = []
    for fmt in formats:
        path = out_dir / f"{name}.{fmt}"
        fig.savefig(path, dpi=150, bbox_inches="tight")
        paths.append(path)
    return paths
