# Mathematical utilities
# FORBIDDEN: logging, any I/O

import numpy as np
from typing import Tuple, Union


ArrayLike = Union[float, np.ndarray]


def rotate_2d(x: ArrayLike, y: ArrayLike, angle: float) -> Tuple[ArrayLike, ArrayLike]:
    """Rotate 2D point(s) about the origin.

    Args:
        x, y: Point coordinates, scalars or arrays of equal shape
        angle: Rotation angle in radians (counter-clockwise)

    Returns:
        Rotated (x, y) coordinates
    """
    cos_a = np.cos(angle)
    sin_a = np.sin(angle)
    return (
        x * cos_a - y * sin_a,
        x * sin_a + y * cos_a,
    )
