#!/usr/bin/env python3
"""Validate a vehicle parameter file."""

import argparse
import sys
from pathlib import Path

import yaml

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import extract_parameters, validate_vehicle_config
from src.core.normalization import normalize_vehicle_params
from src.core.types import VehicleParams


def main():
    parser = argparse.ArgumentParser(description="Validate vehicle parameter file")
    parser.add_argument(
        "config",
        type=Path,
        help="Path to parameter file",
    )

    args = parser.parse_args()

    if not args.config.exists():
        print(f"Error: Config file not found: {args.config}")
        sys.exit(1)

    with open(args.config) as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            print(f"Error: Invalid YAML: {e}")
            sys.exit(1)

    errors = validate_vehicle_config(config)

    if errors:
        print("Configuration validation failed:")
        for error in errors:
            print(f"  - {error}")
        sys.exit(1)

    # Geometry problems are warnings only, the factory repairs them
    params = VehicleParams.from_dict(extract_parameters(config))
    _, diagnostics = normalize_vehicle_params(params)
    for diagnostic in diagnostics:
        print(f"  warning: {diagnostic.message} {diagnostic.values}")

    print("Configuration is valid")
    sys.exit(0)


if __name__ == "__main__":
    main()
