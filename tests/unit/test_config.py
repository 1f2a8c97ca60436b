"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from flystack.config.defaults import FlightParams, LoggingParams, get_default_config
from flystack.config.loader import ConfigLoader
from flystack.config.validation import ConfigValidator
from flystack.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        config = get_default_config()

        assert config.flight.cruise_altitude == 100.0
        assert config.flight.fuel_per_step == 5.0
        assert config.logging.level == "INFO"
        assert config.logging.format_json is False


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, loader: ConfigLoader) -> None:
        config = loader.merge_config("UNKNOWN-UNIT")

        assert config["flight"]["cruise_altitude"] == 100.0
        assert config["logging"]["level"] == "INFO"

    def test_merge_config_unit_file(self, loader: ConfigLoader) -> None:
        config = loader.merge_config("heron")

        assert config["flight"]["cruise_altitude"] == 60.0
        assert config["flight"]["climb_rate"] == 20.0
        # Other defaults should remain
        assert config["flight"]["cruise_speed"] == 15.0

    def test_overrides_win_over_unit_file(self, loader: ConfigLoader) -> None:
        config = loader.merge_config("heron", {"flight": {"cruise_altitude": 80.0}})

        assert config["flight"]["cruise_altitude"] == 80.0
        assert config["flight"]["climb_rate"] == 20.0

    def test_missing_units_file(self, tmp_path: Path) -> None:
        loader = ConfigLoader.create(config_dir=tmp_path)

        assert loader.load_unit_config("heron") == {}

    def test_empty_units_file(self, tmp_path: Path) -> None:
        (tmp_path / "units.yaml").write_text("")
        loader = ConfigLoader.create(config_dir=tmp_path)

        assert loader.load_unit_config("heron") == {}

    @pytest.mark.parametrize("content", [
        "units:\n  sparrow:\n",
        "units:\n",
        "units:\n  sparrow:\n    flight:\n",
    ])
    def test_null_entries_fall_back_to_defaults(self, tmp_path: Path, content: str) -> None:
        (tmp_path / "units.yaml").write_text(content)
        loader = ConfigLoader.create(config_dir=tmp_path)

        assert loader.load_flight_params("sparrow") == FlightParams()

    @pytest.mark.parametrize("content", [
        "- sparrow\n",
        "units: [sparrow]\n",
        "units:\n  sparrow: fast\n",
        "units:\n  sparrow:\n    flight: 5\n",
    ])
    def test_non_mapping_entries_rejected(self, tmp_path: Path, content: str) -> None:
        (tmp_path / "units.yaml").write_text(content)
        loader = ConfigLoader.create(config_dir=tmp_path)

        with pytest.raises(ConfigurationError):
            loader.load_flight_params("sparrow")

    def test_load_flight_params(self, loader: ConfigLoader) -> None:
        params = loader.load_flight_params("heron", {"cruise_speed": 9.0})

        assert params == FlightParams(cruise_altitude=60.0, climb_rate=20.0, cruise_speed=9.0)

    def test_load_flight_params_invalid(self, loader: ConfigLoader) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            loader.load_flight_params("heron", {"climb_rate": "fast"})

        assert [e.field for e in exc_info.value.errors] == ["climb_rate"]
        assert "heron" in str(exc_info.value)

    def test_load_flight_params_unknown_key(self, loader: ConfigLoader) -> None:
        with pytest.raises(ConfigurationError):
            loader.load_flight_params("heron", {"wingspan": 2.0})

    def test_load_logging_params(self, loader: ConfigLoader) -> None:
        assert loader.load_logging_params() == LoggingParams()
        assert loader.load_logging_params({"level": "DEBUG"}) == LoggingParams(level="DEBUG")

    def test_load_logging_params_invalid(self, loader: ConfigLoader) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            loader.load_logging_params({"level": "LOUD", "colour": True})

        assert [e.field for e in exc_info.value.errors] == ["level", "colour"]

    def test_shipped_units_file_is_valid(self) -> None:
        loader = ConfigLoader.create()

        for unit_id in ("sparrow", "cessna"):
            assert loader.load_flight_params(unit_id) is not None


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_flight_params(self) -> None:
        errors = ConfigValidator.validate_flight_params(
            {"cruise_altitude": 50.0, "climb_rate": 5, "fuel_capacity": 0}
        )
        assert errors == []

    @pytest.mark.parametrize("field", ["cruise_altitude", "climb_rate", "cruise_speed", "fuel_per_step"])
    def test_non_positive_rejected(self, field: str) -> None:
        errors = ConfigValidator.validate_flight_params({field: 0})

        assert len(errors) == 1
        assert errors[0].field == field

    def test_bool_is_not_a_number(self) -> None:
        errors = ConfigValidator.validate_flight_params({"cruise_speed": True})
        assert errors[0].field == "cruise_speed"

    def test_negative_fuel_capacity(self) -> None:
        errors = ConfigValidator.validate_flight_params({"fuel_capacity": -1.0})
        assert errors[0].field == "fuel_capacity"

    def test_climb_rate_above_ceiling(self) -> None:
        errors = ConfigValidator.validate_flight_params({"cruise_altitude": 10.0, "climb_rate": 20.0})

        assert len(errors) == 1
        assert errors[0].message == "Must not exceed cruise_altitude"

    def test_logging_params(self) -> None:
        assert ConfigValidator.validate_logging_params({"level": "debug", "format_json": True}) == []

        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": "yes"})
        assert [e.field for e in errors] == ["level", "format_json"]

    def test_validate_config(self) -> None:
        errors = ConfigValidator.validate_config({
            "flight": {"climb_rate": -1},
            "logging": {"level": 5},
        })

        assert {e.field for e in errors} == {"climb_rate", "level"}
