"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, FlightParams, LoggingParams, get_default_config
from .validation import ConfigValidator


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=config_dir,
            defaults=get_default_config(),
        )

    def load_unit_config(self, unit_id: str) -> dict[str, Any]:
        """
        Load unit-specific configuration overrides.

        Empty (null) entries count as no overrides. Any other non-mapping
        value where a mapping is expected raises ``ConfigurationError``.
        """
        units_file = self.config_dir / "units.yaml"

        if not units_file.exists():
            return {}

        with open(units_file) as f:
            units_config = self._mapping(yaml.safe_load(f), str(units_file))

        units = self._mapping(units_config.get("units"), "units")
        unit_config = self._mapping(units.get(unit_id), f"units.{unit_id}")

        return {
            section: self._mapping(values, f"units.{unit_id}.{section}")
            for section, values in unit_config.items()
        }

    @staticmethod
    def _mapping(value: Any, where: str) -> dict[str, Any]:
        """Return ``value`` as a mapping, treating None as empty."""
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ConfigurationError(
                f"Expected a mapping at {where!r}, got {type(value).__name__}"
            )
        return value

    def merge_config(
        self,
        unit_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-instance overrides (highest priority)
        2. Unit-specific overrides from units.yaml
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        unit_config = self.load_unit_config(unit_id)
        config = self._deep_merge(config, unit_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_flight_params(
        self,
        unit_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> FlightParams:
        """
        Build validated flight parameters for a unit.

        Args:
            unit_id: Key under ``units`` in units.yaml
            overrides: Flight parameter overrides for this instance

        Raises:
            ConfigurationError: If the merged flight section is invalid
        """
        config = self.merge_config(unit_id, {"flight": overrides} if overrides else None)
        flight = config.get("flight", {})

        errors = ConfigValidator.validate_flight_params(flight)
        if errors:
            summary = "; ".join(f"{e.field}: {e.message}" for e in errors)
            raise ConfigurationError(
                f"Invalid flight configuration for {unit_id!r}: {summary}",
                errors=errors,
            )

        return FlightParams(**flight)

    def load_logging_params(self, overrides: Optional[dict[str, Any]] = None) -> LoggingParams:
        """
        Build validated logging parameters.

        Raises:
            ConfigurationError: If the merged logging section is invalid
        """
        config = self._dataclass_to_dict(self.defaults)
        if overrides:
            config = self._deep_merge(config, {"logging": overrides})

        errors = ConfigValidator.validate_config(config)
        if errors:
            summary = "; ".join(f"{e.field}: {e.message}" for e in errors)
            raise ConfigurationError(f"Invalid logging configuration: {summary}", errors=errors)

        return LoggingParams(**config["logging"])

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
