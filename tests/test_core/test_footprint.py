# Tests for footprint generation

import math

import numpy as np
import pytest
from src.core.footprint import create_footprint, transform_footprint, FOOTPRINT_SIZE


@pytest.fixture
def dimensions():
    return {
        "wheel_base": 2.5,
        "wheel_tread": 1.5,
        "front_overhang": 0.4,
        "rear_overhang": 0.3,
        "left_overhang": 0.1,
        "right_overhang": 0.1,
    }


class TestCreateFootprint:

    def test_shape_and_closed(self, dimensions):
        """Footprint should be a closed ring of 7 points."""
        footprint = create_footprint(**dimensions)

        assert footprint.shape == (FOOTPRINT_SIZE, 2)
        assert np.array_equal(footprint[0], footprint[-1])

    def test_vertices(self, dimensions):
        """Vertices should follow front, right side, rear, left side."""
        footprint = create_footprint(**dimensions)

        expected = np.array([
            [2.9, 0.85],
            [2.9, -0.85],
            [1.25, -0.85],
            [-0.3, -0.85],
            [-0.3, 0.85],
            [1.25, 0.85],
            [2.9, 0.85],
        ])
        assert np.allclose(footprint, expected)

    def test_margins_per_axis(self, dimensions):
        """Lateral and longitudinal margins apply to their own axis."""
        base = create_footprint(**dimensions)
        inflated = create_footprint(**dimensions, lat_margin=0.2, lon_margin=0.5)

        assert inflated[0, 0] == pytest.approx(base[0, 0] + 0.5)
        assert inflated[3, 0] == pytest.approx(base[3, 0] - 0.5)
        assert inflated[0, 1] == pytest.approx(base[0, 1] + 0.2)
        assert inflated[1, 1] == pytest.approx(base[1, 1] - 0.2)
        # Side vertices stay at half the wheel base
        assert inflated[2, 0] == base[2, 0] == 1.25

    def test_negative_margin_shrinks(self, dimensions):
        """Negative margins should shrink the outline."""
        shrunk = create_footprint(**dimensions, lat_margin=-0.1, lon_margin=-0.1)

        assert shrunk[0, 0] == pytest.approx(2.8)
        assert shrunk[0, 1] == pytest.approx(0.75)

    def test_fresh_array_each_call(self, dimensions):
        """Each call should return an independent array."""
        first = create_footprint(**dimensions)
        second = create_footprint(**dimensions)
        first[0, 0] = 100.0

        assert second[0, 0] == pytest.approx(2.9)


class TestTransformFootprint:

    def test_identity(self, dimensions):
        """Zero pose should leave points unchanged."""
        footprint = create_footprint(**dimensions)
        assert np.allclose(transform_footprint(footprint, 0.0, 0.0, 0.0), footprint)

    def test_rotation_and_translation(self):
        """Points should be rotated about the origin then translated."""
        points = np.array([[1.0, 0.0], [0.0, 1.0]])
        moved = transform_footprint(points, 10.0, 5.0, math.pi / 2)

        assert np.allclose(moved, [[10.0, 6.0], [9.0, 5.0]])

    def test_input_untouched(self, dimensions):
        """Transform should not modify its input."""
        footprint = create_footprint(**dimensions)
        original = footprint.copy()
        transform_footprint(footprint, 1.0, 2.0, 0.3)

        assert np.array_equal(footprint, original)
