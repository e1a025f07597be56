#!/usr/bin/env python3
"""Inspect the geometry derived from a vehicle parameter file.

Prints the derived extents, the footprint polygon and the steering
limits. Nothing is written to disk.

Usage:
    python scripts/inspect_vehicle.py --config configs/vehicle_info.param.yaml

    # Inflated footprint
    python scripts/inspect_vehicle.py --margin 0.2
    python scripts/inspect_vehicle.py --lat-margin 0.1 --lon-margin 0.5

    # Conversions
    python scripts/inspect_vehicle.py --steer-angle 0.3 --curvature 0.05
"""

import argparse
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.analysis import setup_logging
from src.config import ConfigError, load_vehicle_info


def main():
    parser = argparse.ArgumentParser(description="Inspect vehicle geometry")
    parser.add_argument("--config", type=Path, default=Path("configs/vehicle_info.param.yaml"))
    parser.add_argument("--margin", type=float, default=None, help="Margin on both axes [m]")
    parser.add_argument("--lat-margin", type=float, default=0.0, help="Lateral margin [m]")
    parser.add_argument("--lon-margin", type=float, default=0.0, help="Longitudinal margin [m]")
    parser.add_argument("--steer-angle", type=float, default=None, help="Steer angle to convert [rad]")
    parser.add_argument("--curvature", type=float, default=None, help="Curvature to convert [1/m]")
    parser.add_argument("--log-level", type=str, default="WARNING")

    args = parser.parse_args()

    logger = setup_logging(level=args.log_level)

    try:
        info = load_vehicle_info(args.config, logger=logger)
    except (FileNotFoundError, ConfigError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Vehicle geometry from {args.config}")
    print(f"  length:      {info.vehicle_length_m:.3f} m")
    print(f"  width:       {info.vehicle_width_m:.3f} m")
    print(f"  height:      {info.vehicle_height_m:.3f} m")
    print(f"  longitudinal offsets: [{info.min_longitudinal_offset_m:.3f}, {info.max_longitudinal_offset_m:.3f}] m")
    print(f"  lateral offsets:      [{info.min_lateral_offset_m:.3f}, {info.max_lateral_offset_m:.3f}] m")
    print(f"  max curvature: {info.calc_max_curvature():.4f} 1/m "
          f"(min radius {1.0 / info.calc_max_curvature():.2f} m)")

    if args.margin is not None:
        footprint = info.create_footprint(args.margin)
    else:
        footprint = info.create_footprint(args.lat_margin, args.lon_margin)

    print("Footprint:")
    with np.printoptions(precision=3, suppress=True):
        for i, point in enumerate(footprint):
            print(f"  {i}: {point}")

    if args.steer_angle is not None:
        curvature = info.calc_curvature_from_steer_angle(args.steer_angle)
        print(f"steer angle {args.steer_angle:.4f} rad -> curvature {curvature:.6f} 1/m")

    if args.curvature is not None:
        steer = info.calc_steer_angle_from_curvature(args.curvature)
        print(f"curvature {args.curvature:.6f} 1/m -> steer angle {steer:.4f} rad")


if __name__ == "__main__":
    main()
