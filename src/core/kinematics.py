# Single-track (bicycle) kinematic conversions
# FORBIDDEN: logging, any I/O

import numpy as np

from .constants import MIN_WHEEL_BASE_M, MIN_CURVATURE


def max_curvature(wheel_base: float, max_steer_angle: float) -> float:
    """Curvature reached at full steering lock.

    Args:
        wheel_base: Front to rear axle distance in meters
        max_steer_angle: Max front wheel angle in radians

    Returns:
        Curvature in 1/m
    """
    radius = wheel_base / np.tan(max_steer_angle)
    return float(1.0 / radius)


def curvature_from_steer_angle(wheel_base: float, steer_angle: float) -> float:
    """Convert a front wheel angle to path curvature.

    kappa = tan(delta) / L, written without the intermediate radius so a
    zero steer angle never divides by zero.

    Args:
        wheel_base: Front to rear axle distance in meters
        steer_angle: Front wheel angle in radians

    Returns:
        Curvature in 1/m, or nan if wheel_base is below MIN_WHEEL_BASE_M
    """
    if wheel_base < MIN_WHEEL_BASE_M:
        return float("nan")
    return float(np.tan(steer_angle) / wheel_base)


def steer_angle_from_curvature(wheel_base: float, curvature: float) -> float:
    """Convert path curvature to a front wheel angle.

    Args:
        wheel_base: Front to rear axle distance in meters
        curvature: Signed curvature in 1/m

    Returns:
        Steer angle in radians, exactly 0.0 for |curvature| < MIN_CURVATURE
    """
    if abs(curvature) < MIN_CURVATURE:
        return 0.0

    radius = 1.0 / curvature
    # atan2 keeps the sign of a negative radius
    return float(np.arctan2(wheel_base, radius))
