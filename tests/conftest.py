"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from flystack.config.defaults import FlightParams
from flystack.config.loader import ConfigLoader


@pytest.fixture
def flight_params() -> FlightParams:
    """Small flight parameters that reach cruise altitude in three steps."""
    return FlightParams(
        cruise_altitude=30.0,
        climb_rate=10.0,
        cruise_speed=12.0,
        fuel_capacity=20.0,
        fuel_per_step=5.0,
    )


@pytest.fixture
def units_config_dir(tmp_path: Path) -> Path:
    """Config directory with a units.yaml holding two unit overrides."""
    (tmp_path / "units.yaml").write_text(
        "units:\n"
        "  heron:\n"
        "    flight:\n"
        "      cruise_altitude: 60.0\n"
        "      climb_rate: 20.0\n"
        "  glider:\n"
        "    flight:\n"
        "      fuel_per_step: -1\n"
    )
    return tmp_path


@pytest.fixture
def loader(units_config_dir: Path) -> ConfigLoader:
    return ConfigLoader.create(config_dir=units_config_dir)
