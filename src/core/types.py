# Core type definitions
# FORBIDDEN: logging, any I/O

from dataclasses import dataclass, field
from typing import Dict, Any


# Parameter file key -> VehicleParams attribute
PARAM_KEYS = {
    "wheel_radius": "wheel_radius_m",
    "wheel_width": "wheel_width_m",
    "wheel_base": "wheel_base_m",
    "wheel_tread": "wheel_tread_m",
    "front_overhang": "front_overhang_m",
    "rear_overhang": "rear_overhang_m",
    "left_overhang": "left_overhang_m",
    "right_overhang": "right_overhang_m",
    "vehicle_height": "vehicle_height_m",
    "max_steer_angle": "max_steer_angle_rad",
}


@dataclass(frozen=True)
class VehicleParams:
    """Raw measured vehicle dimensions.

    All lengths in meters, max steer angle in radians. Values are
    stored as given; see normalize_vehicle_params for the clamping rules.
    """
    wheel_radius_m: float
    wheel_width_m: float
    wheel_base_m: float
    wheel_tread_m: float
    front_overhang_m: float
    rear_overhang_m: float
    left_overhang_m: float
    right_overhang_m: float
    vehicle_height_m: float
    max_steer_angle_rad: float

    def to_dict(self) -> Dict[str, float]:
        """Convert to parameter file keys."""
        return {key: getattr(self, attr) for key, attr in PARAM_KEYS.items()}

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "VehicleParams":
        """Build from parameter file keys.

        Args:
            values: Mapping containing every key of PARAM_KEYS

        Returns:
            VehicleParams with float values
        """
        missing = [key for key in PARAM_KEYS if key not in values]
        assert not missing, f"Missing vehicle parameters: {missing}"
        return cls(**{attr: float(values[key]) for key, attr in PARAM_KEYS.items()})


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal data quality event produced by pure code.

    level uses logging level names so it can be forwarded as-is.
    """
    level: str
    message: str
    values: Dict[str, float] = field(default_factory=dict, hash=False)
