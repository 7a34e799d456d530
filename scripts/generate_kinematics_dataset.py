"""Generate an ideal body-kinematics dataset from a known trajectory.

Creates a trajectory near Barcelona and the error-free IMU readings a body
following it would sense:
    - Circular, straight or stationary motion with optional climb
    - Ground truth in NED: latitude, longitude, height, velocity, attitude
    - Specific force and angular rate estimated in NED, ECEF and ECI
    - Configuration saved alongside the data

Saves to: data/sim/kinematics_<preset>/
"""

import argparse
import json
import sys
from pathlib import Path

import numpy as np
from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from navkin.coords.frames import FrameType
from navkin.eval.metrics import compute_error_stats, compute_norm_differences
from navkin.sim.kinematics_from_trajectory import (
    generate_circular_trajectory,
    trajectory_kinematics,
)


# ============================================================================
# PRESET CONFIGURATIONS
# ============================================================================

PRESETS = {
    'static': {
        'description': 'Stationary body (Earth rate and gravity only)',
        'radius': 0.0,
        'speed': 0.0,
        'climb_rate': 0.0,
    },
    'circle': {
        'description': 'Level circle at walking speed',
        'radius': 20.0,
        'speed': 2.0,
        'climb_rate': 0.0,
    },
    'climb': {
        'description': 'Climbing turn at vehicle speed',
        'radius': 100.0,
        'speed': 15.0,
        'climb_rate': 1.5,
    },
}


# ============================================================================
# DATASET GENERATION
# ============================================================================

def generate_kinematics_dataset(
    output_dir: str,
    latitude_deg: float = 41.3825,
    longitude_deg: float = 2.176944,
    height: float = 0.0,
    radius: float = 20.0,
    speed: float = 2.0,
    climb_rate: float = 0.0,
    duration: float = 30.0,
    dt: float = 0.02,
) -> None:
    """Generate and save the dataset.

    Args:
        output_dir: Output directory.
        latitude_deg: Start latitude (degrees).
        longitude_deg: Start longitude (degrees).
        height: Start height (meters).
        radius: Turn radius (meters), 0 for straight motion.
        speed: Horizontal speed (m/s).
        climb_rate: Vertical speed, positive up (m/s).
        duration: Trajectory duration (seconds).
        dt: Sample interval (seconds).
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    print(f"\n{'='*70}")
    print("Generating Body Kinematics Dataset")
    print(f"{'='*70}")

    # 1. Trajectory
    print("\n1. Generating trajectory...")
    print(f"   Start: lat={latitude_deg:.6f}°, lon={longitude_deg:.6f}°, h={height:.1f} m")
    print(f"   Radius: {radius} m, speed: {speed} m/s, climb: {climb_rate} m/s")
    print(f"   Duration: {duration} s at {1/dt:.0f} Hz")

    trajectory = generate_circular_trajectory(
        np.deg2rad(latitude_deg),
        np.deg2rad(longitude_deg),
        height,
        radius=radius,
        speed=speed,
        duration=duration,
        dt=dt,
        climb_rate=climb_rate,
    )
    np.savez(output_path / "truth.npz", **trajectory)
    print(f"   Generated {len(trajectory['t'])} samples")
    print("   Saved: truth.npz")

    # 2. Kinematics in every frame
    print("\n2. Estimating kinematics...")
    results = {}
    for frame_type in tqdm(
        [FrameType.NED, FrameType.ECEF, FrameType.ECI], desc="Frames", unit="frame"
    ):
        results[frame_type.value] = trajectory_kinematics(trajectory, frame_type, dt)

    arrays = {"t": trajectory["t"]}
    for name, (specific_force, angular_rate) in results.items():
        arrays[f"specific_force_{name}"] = specific_force
        arrays[f"angular_rate_{name}"] = angular_rate
    np.savez(output_path / "kinematics.npz", **arrays)
    print("   Saved: kinematics.npz")

    # 3. Cross-frame agreement
    print("\n3. Cross-frame agreement (vs NED)...")
    force_ned, rate_ned = results["ned"]
    agreement = {}
    for name in ("ecef", "eci"):
        force, rate = results[name]
        force_stats = compute_error_stats(compute_norm_differences(force_ned, force))
        rate_stats = compute_error_stats(compute_norm_differences(rate_ned, rate))
        agreement[name] = {"specific_force": force_stats, "angular_rate": rate_stats}
        print(
            f"   {name.upper():4s}: max Δ|f| = {force_stats['max']:.3e} m/s², "
            f"max Δ|ω| = {rate_stats['max']:.3e} rad/s"
        )

    # 4. Configuration
    print("\n4. Saving configuration...")
    config = {
        "dataset": "body_kinematics",
        "trajectory": {
            "latitude_deg": latitude_deg,
            "longitude_deg": longitude_deg,
            "height_m": height,
            "radius_m": radius,
            "speed_mps": speed,
            "climb_rate_mps": climb_rate,
            "duration_s": duration,
            "dt_s": dt,
            "num_samples": int(len(trajectory["t"])),
        },
        "frames": list(results.keys()),
        "agreement_vs_ned": agreement,
    }
    with open(output_path / "config.json", "w") as f:
        json.dump(config, f, indent=2)
    print("   Saved: config.json")

    print(f"\n{'='*70}")
    print("Dataset generation complete!")
    print(f"{'='*70}")
    print(f"Output directory: {output_path.absolute()}")
    print("\nFiles created:")
    print("  - truth.npz      : Ground truth (t, latitude, longitude, height, velocity_ned, quat_b_to_n)")
    print("  - kinematics.npz : Specific force and angular rate per frame")
    print("  - config.json    : Dataset configuration")
    print()


# ============================================================================
# COMMAND-LINE INTERFACE
# ============================================================================

def main():
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Generate an ideal body-kinematics dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate with default parameters (level circle)
  python %(prog)s

  # Stationary body
  python %(prog)s --preset static

  # Climbing turn, longer
  python %(prog)s --preset climb --duration 120 --output data/sim/kinematics_climb_long

Available presets: """ + ", ".join(PRESETS.keys())
    )

    parser.add_argument(
        '--preset',
        type=str,
        choices=PRESETS.keys(),
        help='Use preset configuration (overrides individual parameters)'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Output directory (default: data/sim/kinematics_<preset or custom>)'
    )

    position_group = parser.add_argument_group('Start Position')
    position_group.add_argument(
        '--lat', type=float, default=41.3825, dest='latitude_deg',
        help='Start latitude in degrees (default: 41.3825)'
    )
    position_group.add_argument(
        '--lon', type=float, default=2.176944, dest='longitude_deg',
        help='Start longitude in degrees (default: 2.176944)'
    )
    position_group.add_argument(
        '--height', type=float, default=0.0,
        help='Start height in meters (default: 0.0)'
    )

    traj_group = parser.add_argument_group('Trajectory Parameters')
    traj_group.add_argument(
        '--radius', type=float, default=20.0,
        help='Turn radius in meters, 0 for straight motion (default: 20.0)'
    )
    traj_group.add_argument(
        '--speed', type=float, default=2.0,
        help='Horizontal speed in m/s (default: 2.0)'
    )
    traj_group.add_argument(
        '--climb-rate', type=float, default=0.0,
        help='Vertical speed in m/s, positive up (default: 0.0)'
    )
    traj_group.add_argument(
        '--duration', type=float, default=30.0,
        help='Trajectory duration in seconds (default: 30.0)'
    )
    traj_group.add_argument(
        '--dt', type=float, default=0.02,
        help='Sample interval in seconds (default: 0.02, i.e., 50 Hz)'
    )

    args = parser.parse_args()

    if args.preset:
        preset_config = PRESETS[args.preset]
        print(f"\nUsing preset: '{args.preset}'")
        print(f"Description: {preset_config['description']}\n")
        for key, value in preset_config.items():
            if key != 'description' and hasattr(args, key):
                setattr(args, key, value)

    if args.duration <= 0:
        parser.error("Duration must be positive")
    if args.dt <= 0 or args.dt > args.duration:
        parser.error("Time step must be positive and less than duration")
    if args.speed < 0 or args.radius < 0:
        parser.error("Speed and radius must be non-negative")
    if not -90.0 <= args.latitude_deg <= 90.0:
        parser.error("Latitude must be within [-90, 90] degrees")

    output = args.output or f"data/sim/kinematics_{args.preset or 'custom'}"

    generate_kinematics_dataset(
        output_dir=output,
        latitude_deg=args.latitude_deg,
        longitude_deg=args.longitude_deg,
        height=args.height,
        radius=args.radius,
        speed=args.speed,
        climb_rate=args.climb_rate,
        duration=args.duration,
        dt=args.dt,
    )


if __name__ == "__main__":
    main()
