# Config module - Vehicle parameter files
# IMPURE - Reads YAML from disk

from .loader import (
    ConfigError,
    extract_parameters,
    validate_vehicle_config,
    load_vehicle_params,
    load_vehicle_info,
)
