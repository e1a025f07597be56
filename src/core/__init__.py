# Core module - Pure functions, no side effects
# FORBIDDEN: logging, pathlib, yaml, any I/O

from .constants import MIN_WHEEL_BASE_M, MIN_MAX_STEER_ANGLE_RAD, MIN_CURVATURE
from .types import VehicleParams, Diagnostic
from .normalization import normalize_vehicle_params
from .footprint import create_footprint, transform_footprint
from .kinematics import (
    max_curvature,
    curvature_from_steer_angle,
    steer_angle_from_curvature,
)
