# Vehicle geometry value object

import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from ..analysis.logger import emit_diagnostics
from ..core.constants import LOGGER_NAME, MIN_WHEEL_BASE_M
from ..core.footprint import create_footprint
from ..core.kinematics import (
    max_curvature,
    curvature_from_steer_angle,
    steer_angle_from_curvature,
)
from ..core.normalization import normalize_vehicle_params
from ..core.types import VehicleParams

logger = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class VehicleInfo:
    """Immutable vehicle geometry.

    Longitudinal offsets are measured from the rear axle center, lateral
    offsets from the vehicle centerline, height from the ground.
    Build it with create_vehicle_info so degenerate values get clamped.
    """
    # Base parameters
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

    # Destination for diagnostics, "vehicle_info" if None
    logger: Optional[logging.Logger] = field(default=None, compare=False, repr=False)

    # Derived parameters
    vehicle_length_m: float = field(init=False)
    vehicle_width_m: float = field(init=False)
    min_longitudinal_offset_m: float = field(init=False)
    max_longitudinal_offset_m: float = field(init=False)
    min_lateral_offset_m: float = field(init=False)
    max_lateral_offset_m: float = field(init=False)
    min_height_offset_m: float = field(init=False)
    max_height_offset_m: float = field(init=False)

    def __post_init__(self):
        derived = {
            "vehicle_length_m": self.front_overhang_m + self.wheel_base_m + self.rear_overhang_m,
            "vehicle_width_m": self.wheel_tread_m + self.left_overhang_m + self.right_overhang_m,
            "min_longitudinal_offset_m": -self.rear_overhang_m,
            "max_longitudinal_offset_m": self.front_overhang_m + self.wheel_base_m,
            "min_lateral_offset_m": -(self.wheel_tread_m / 2.0 + self.right_overhang_m),
            "max_lateral_offset_m": self.wheel_tread_m / 2.0 + self.left_overhang_m,
            "min_height_offset_m": 0.0,
            "max_height_offset_m": self.vehicle_height_m,
        }
        # Frozen dataclass: derived values are written once here
        for name, value in derived.items():
            object.__setattr__(self, name, value)

    @classmethod
    def from_params(
        cls,
        params: VehicleParams,
        logger: Optional[logging.Logger] = None,
    ) -> "VehicleInfo":
        """Normalize raw parameters and build the geometry.

        Args:
            params: Raw measured parameters
            logger: Destination for diagnostics, "vehicle_info" if None

        Returns:
            VehicleInfo built from the clamped parameters
        """
        normalized, diagnostics = normalize_vehicle_params(params)
        emit_diagnostics(diagnostics, logger or logging.getLogger(LOGGER_NAME))
        return cls(
            wheel_radius_m=normalized.wheel_radius_m,
            wheel_width_m=normalized.wheel_width_m,
            wheel_base_m=normalized.wheel_base_m,
            wheel_tread_m=normalized.wheel_tread_m,
            front_overhang_m=normalized.front_overhang_m,
            rear_overhang_m=normalized.rear_overhang_m,
            left_overhang_m=normalized.left_overhang_m,
            right_overhang_m=normalized.right_overhang_m,
            vehicle_height_m=normalized.vehicle_height_m,
            max_steer_angle_rad=normalized.max_steer_angle_rad,
            logger=logger,
        )

    def to_params(self) -> VehicleParams:
        """Base parameters of this geometry."""
        return VehicleParams(
            wheel_radius_m=self.wheel_radius_m,
            wheel_width_m=self.wheel_width_m,
            wheel_base_m=self.wheel_base_m,
            wheel_tread_m=self.wheel_tread_m,
            front_overhang_m=self.front_overhang_m,
            rear_overhang_m=self.rear_overhang_m,
            left_overhang_m=self.left_overhang_m,
            right_overhang_m=self.right_overhang_m,
            vehicle_height_m=self.vehicle_height_m,
            max_steer_angle_rad=self.max_steer_angle_rad,
        )

    def create_footprint(
        self,
        lat_margin: float = 0.0,
        lon_margin: Optional[float] = None,
    ) -> np.ndarray:
        """Closed outline of the vehicle, optionally inflated.

        With a single argument the same margin is used on both axes.

        Args:
            lat_margin: Lateral margin in meters
            lon_margin: Longitudinal margin in meters, lat_margin if None

        Returns:
            Fresh array of shape (7, 2), last point equal to the first
        """
        if lon_margin is None:
            lon_margin = lat_margin

        return create_footprint(
            wheel_base=self.wheel_base_m,
            wheel_tread=self.wheel_tread_m,
            front_overhang=self.front_overhang_m,
            rear_overhang=self.rear_overhang_m,
            left_overhang=self.left_overhang_m,
            right_overhang=self.right_overhang_m,
            lat_margin=lat_margin,
            lon_margin=lon_margin,
        )

    def calc_max_curvature(self) -> float:
        """Curvature at full steering lock in 1/m."""
        return max_curvature(self.wheel_base_m, self.max_steer_angle_rad)

    def calc_curvature_from_steer_angle(self, steer_angle: float) -> float:
        """Curvature in 1/m for a front wheel angle in radians.

        Returns nan and logs an error if the wheel base is degenerate.
        """
        if self.wheel_base_m < MIN_WHEEL_BASE_M:
            (self.logger or logger).error(
                "wheel_base_m %f should not be 0 or negative", self.wheel_base_m
            )
            return float("nan")

        return curvature_from_steer_angle(self.wheel_base_m, steer_angle)

    def calc_steer_angle_from_curvature(self, curvature: float) -> float:
        """Front wheel angle in radians for a curvature in 1/m."""
        return steer_angle_from_curvature(self.wheel_base_m, curvature)


def create_vehicle_info(
    wheel_radius_m: float,
    wheel_width_m: float,
    wheel_base_m: float,
    wheel_tread_m: float,
    front_overhang_m: float,
    rear_overhang_m: float,
    left_overhang_m: float,
    right_overhang_m: float,
    vehicle_height_m: float,
    max_steer_angle_rad: float,
    logger: Optional[logging.Logger] = None,
) -> VehicleInfo:
    """Create a VehicleInfo from the 10 base measurements.

    Never raises for bad geometry: near-zero wheel base and max steer
    angle are clamped to 1e-6 and non-positive dimensions are reported,
    each as an ERROR record on the given logger.

    Args:
        wheel_radius_m: Wheel radius
        wheel_width_m: Wheel width
        wheel_base_m: Front to rear axle distance
        wheel_tread_m: Left to right wheel center distance
        front_overhang_m: Front axle to front edge
        rear_overhang_m: Rear axle to rear edge
        left_overhang_m: Left wheel to left edge
        right_overhang_m: Right wheel to right edge
        vehicle_height_m: Ground to roof
        max_steer_angle_rad: Max front wheel angle in radians
        logger: Destination for diagnostics, "vehicle_info" if None

    Returns:
        VehicleInfo
    """
    params = VehicleParams(
        wheel_radius_m=wheel_radius_m,
        wheel_width_m=wheel_width_m,
        wheel_base_m=wheel_base_m,
        wheel_tread_m=wheel_tread_m,
        front_overhang_m=front_overhang_m,
        rear_overhang_m=rear_overhang_m,
        left_overhang_m=left_overhang_m,
        right_overhang_m=right_overhang_m,
        vehicle_height_m=vehicle_height_m,
        max_steer_angle_rad=max_steer_angle_rad,
    )
    return VehicleInfo.from_params(params, logger=logger)
