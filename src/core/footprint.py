# Footprint polygon generation
# FORBIDDEN: logging, any I/O

import numpy as np

from .math_utils import rotate_2d


FOOTPRINT_SIZE = 7


def create_footprint(
    wheel_base: float,
    wheel_tread: float,
    front_overhang: float,
    rear_overhang: float,
    left_overhang: float,
    right_overhang: float,
    lat_margin: float = 0.0,
    lon_margin: float = 0.0,
) -> np.ndarray:
    """Build the closed vehicle outline in the base_link frame.

    Origin is the rear axle center, x forward, y left. The ring is a
    hexagon with side vertices at half the wheel base; the last point
    repeats the first. Margins are applied as given, negative values
    shrink the outline.

    Args:
        wheel_base: Front to rear axle distance in meters
        wheel_tread: Left to right wheel distance in meters
        front_overhang: Front axle to front bumper in meters
        rear_overhang: Rear axle to rear bumper in meters
        left_overhang: Left wheel to left edge in meters
        right_overhang: Right wheel to right edge in meters
        lat_margin: Extra width on each side in meters
        lon_margin: Extra length at front and rear in meters

    Returns:
        Array of shape (7, 2)
    """
    x_front = front_overhang + wheel_base + lon_margin
    x_center = wheel_base / 2.0
    x_rear = -(rear_overhang + lon_margin)
    y_left = wheel_tread / 2.0 + left_overhang + lat_margin
    y_right = -(wheel_tread / 2.0 + right_overhang + lat_margin)

    return np.array([
        [x_front, y_left],
        [x_front, y_right],
        [x_center, y_right],
        [x_rear, y_right],
        [x_rear, y_left],
        [x_center, y_left],
        [x_front, y_left],
    ], dtype=np.float64)


def transform_footprint(
    footprint: np.ndarray,
    x: float,
    y: float,
    yaw: float,
) -> np.ndarray:
    """Place a footprint at a pose.

    Args:
        footprint: Points in the vehicle frame, shape (N, 2)
        x, y: Pose position in meters
        yaw: Pose heading in radians

    Returns:
        New array of shape (N, 2) in the pose's parent frame
    """
    rotated_x, rotated_y = rotate_2d(footprint[:, 0], footprint[:, 1], yaw)
    return np.stack([rotated_x + x, rotated_y + y], axis=1)
