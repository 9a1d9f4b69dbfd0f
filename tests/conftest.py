"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from typing import Any, Dict

import yaml

from fnshapes.config.defaults import BindingParams
from fnshapes.logging.config import configure_logging
from fnshapes.shapes.binding import configure_binding

# Configure before any test module binds a shape
configure_logging(level="WARNING")


@pytest.fixture(autouse=True)
def default_binding_checks():
    """Restore the default bind-time checks after each test."""
    configure_binding(BindingParams())
    yield
    configure_binding(BindingParams())


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """Sample configuration overrides for testing."""
    return {
        "binding": {
            "check_annotations": False,
        },
        "demo": {
            "name": "Ali Mohamed",
            "random_seed": 7,
        },
        "logging": {
            "level": "ERROR",
        },
    }


@pytest.fixture
def config_dir(tmp_path: Path, sample_config: Dict[str, Any]) -> Path:
    """Temporary config directory holding fnshapes.yaml."""
    with open(tmp_path / "fnshapes.yaml", "w") as f:
        yaml.safe_dump(sample_config, f)
    return tmp_path
