# Vehicle parameter file loading

import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..core.types import PARAM_KEYS, VehicleParams
from ..vehicle.vehicle_info import VehicleInfo

ROS_PARAMETERS_KEY = "ros__parameters"


class ConfigError(ValueError):
    """Raised when a vehicle parameter file cannot be used."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Invalid vehicle configuration: " + "; ".join(self.errors))


def extract_parameters(config: Any) -> Optional[Dict[str, Any]]:
    """Find the parameter mapping inside a config document.

    Accepts a flat mapping of parameter keys or the node parameter layout
    `{<node>: {ros__parameters: {...}}}`, e.g. `/**`.

    Args:
        config: Parsed YAML document

    Returns:
        Parameter mapping, or None if the layout is not recognized
    """
    if not isinstance(config, dict):
        return None

    if any(key in config for key in PARAM_KEYS):
        return config

    for section in config.values():
        if isinstance(section, dict) and isinstance(section.get(ROS_PARAMETERS_KEY), dict):
            return section[ROS_PARAMETERS_KEY]

    return None


def validate_vehicle_config(config: Any) -> List[str]:
    """Validate a vehicle parameter document.

    Args:
        config: Parsed YAML document

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    parameters = extract_parameters(config)
    if parameters is None:
        errors.append(
            "Unrecognized layout: expected vehicle parameters at top level "
            f"or under '<node>.{ROS_PARAMETERS_KEY}'"
        )
        return errors

    for key in PARAM_KEYS:
        if key not in parameters:
            errors.append(f"Missing required parameter: {key}")
            continue

        value = parameters[key]
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"{key} must be a number, got {value!r}")
        elif not math.isfinite(value):
            errors.append(f"{key} must be finite, got {value}")

    return errors


def load_vehicle_params(path: Path) -> VehicleParams:
    """Load raw vehicle parameters from a YAML file.

    Args:
        path: Path to parameter file

    Returns:
        VehicleParams, not yet normalized

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the document is not a valid parameter file
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError([f"Invalid YAML: {e}"]) from e

    errors = validate_vehicle_config(config)
    if errors:
        raise ConfigError(errors)

    return VehicleParams.from_dict(extract_parameters(config))


def load_vehicle_info(
    path: Path,
    logger: Optional[logging.Logger] = None,
) -> VehicleInfo:
    """Load a parameter file and build the vehicle geometry.

    Args:
        path: Path to parameter file
        logger: Destination for geometry diagnostics

    Returns:
        VehicleInfo
    """
    return VehicleInfo.from_params(load_vehicle_params(path), logger=logger)
