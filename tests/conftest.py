# Pytest configuration and fixtures

import pytest
from pathlib import Path
import tempfile
import yaml

from src.core.types import VehicleParams
from src.vehicle import create_vehicle_info


@pytest.fixture
def geometry_kwargs():
    """Base measurements of a small test vehicle."""
    return {
        "wheel_radius_m": 0.3,
        "wheel_width_m": 0.2,
        "wheel_base_m": 2.5,
        "wheel_tread_m": 1.5,
        "front_overhang_m": 0.4,
        "rear_overhang_m": 0.3,
        "left_overhang_m": 0.1,
        "right_overhang_m": 0.1,
        "vehicle_height_m": 1.8,
        "max_steer_angle_rad": 0.5,
    }


@pytest.fixture
def vehicle_params(geometry_kwargs):
    """Raw parameters of the test vehicle."""
    return VehicleParams(**geometry_kwargs)


@pytest.fixture
def vehicle_info(geometry_kwargs):
    """Geometry of the test vehicle."""
    return create_vehicle_info(**geometry_kwargs)


@pytest.fixture
def parameters(vehicle_params):
    """Parameter file mapping of the test vehicle."""
    return vehicle_params.to_dict()


@pytest.fixture
def config(parameters):
    """Parameter document in node parameter layout."""
    return {
        "/**": {
            "ros__parameters": dict(parameters),
        },
    }


@pytest.fixture
def temp_dir():
    """Create temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_file(config, temp_dir):
    """Create temporary parameter file."""
    config_path = temp_dir / "vehicle_info.param.yaml"
    with open(config_path, "w") as f:
        yaml.dump(config, f)
    return config_path
