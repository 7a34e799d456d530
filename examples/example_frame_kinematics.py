"""
Example: Body Kinematics in NED, ECEF and ECI

Builds a climbing turn near Barcelona, expresses it in the three reference
frames and recovers the ideal IMU readings with each frame's estimator.

Demonstrates:
    - NED estimator with Earth rate and transport rate
    - ECEF estimator with Earth rotation correction
    - ECI estimator with gravitation only
    - Cross-frame agreement of specific force and angular rate magnitudes

Key Insight: the reference frame changes the bookkeeping, not the physics.
All three estimators recover the same sensor readings.
"""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from navkin.coords import FrameType
from navkin.eval import (
    compute_error_stats,
    compute_norm_differences,
    plot_body_kinematics,
    plot_kinematics_difference,
    save_figure,
)
from navkin.sim import generate_circular_trajectory, trajectory_kinematics


def main():
    """Main execution function."""
    print("\n" + "=" * 60)
    print("Body Kinematics in NED, ECEF and ECI")
    print("=" * 60)

    dt = 0.02
    duration = 60.0
    latitude = np.deg2rad(41.3825)
    longitude = np.deg2rad(2.176944)

    print("\nConfiguration:")
    print(f"  Start:      {np.rad2deg(latitude):.4f}°N, {np.rad2deg(longitude):.4f}°E")
    print(f"  Duration:   {duration} s")
    print(f"  Rate:       {1/dt:.0f} Hz")
    print("  Trajectory: climbing turn (r=50 m, v=10 m/s, climb=1 m/s)\n")

    trajectory = generate_circular_trajectory(
        latitude, longitude, 0.0,
        radius=50.0, speed=10.0, duration=duration, dt=dt, climb_rate=1.0,
    )

    results = {}
    for frame_type in (FrameType.NED, FrameType.ECEF, FrameType.ECI):
        print(f"Estimating kinematics in {frame_type.value.upper()}...")
        results[frame_type.value.upper()] = trajectory_kinematics(trajectory, frame_type, dt)

    force_ned, rate_ned = results["NED"]
    print(f"\n  Mean |f| (NED): {np.mean(np.linalg.norm(force_ned, axis=1)):.4f} m/s²")
    print(f"  Mean |ω| (NED): {np.rad2deg(np.mean(np.linalg.norm(rate_ned, axis=1))):.4f} deg/s")

    print("\nAgreement with NED:")
    differences = {}
    for name in ("ECEF", "ECI"):
        force, rate = results[name]
        force_diff = compute_norm_differences(force_ned, force)
        rate_diff = compute_norm_differences(rate_ned, rate)
        differences[f"{name} - NED"] = (force_diff, rate_diff)
        force_stats = compute_error_stats(force_diff)
        rate_stats = compute_error_stats(rate_diff)
        print(f"  {name:4s} Δ|f|: rmse={force_stats['rmse']:.2e}, max={force_stats['max']:.2e} m/s²")
        print(f"  {name:4s} Δ|ω|: rmse={rate_stats['rmse']:.2e}, max={rate_stats['max']:.2e} rad/s")

    figs_dir = Path(__file__).parent / "figs"
    print("\nGenerating plots...")
    fig1 = plot_body_kinematics(results, dt=dt, title="Ideal IMU Kinematics per Frame")
    for path in save_figure(fig1, figs_dir, "frame_kinematics", formats=("svg", "png")):
        print(f"  [OK] Saved: {path}")
    fig2 = plot_kinematics_difference(differences, dt=dt, title="Cross-Frame Magnitude Differences")
    for path in save_figure(fig2, figs_dir, "frame_kinematics_difference", formats=("svg", "png")):
        print(f"  [OK] Saved: {path}")
    plt.close("all")

    print("\n" + "=" * 60)
    print("Done.")
    print("=" * 60)


if __name__ == "__main__":
    main()
