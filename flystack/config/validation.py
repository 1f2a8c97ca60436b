"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_flight_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate flight parameters."""
        errors = []

        for field in ("cruise_altitude", "climb_rate", "cruise_speed", "fuel_per_step"):
            if field in params:
                value = params[field]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=field,
                        message="Must be a positive number",
                        value=value
                    ))

        if "fuel_capacity" in params:
            value = params["fuel_capacity"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="fuel_capacity",
                    message="Must be a non-negative number",
                    value=value
                ))

        # Climbing past the ceiling in a single step makes no sense
        climb_rate = params.get("climb_rate")
        ceiling = params.get("cruise_altitude")
        if _is_number(climb_rate) and _is_number(ceiling) and 0 < ceiling < climb_rate:
            errors.append(ValidationError(
                field="climb_rate",
                message="Must not exceed cruise_altitude",
                value=climb_rate
            ))

        unknown = set(params) - {
            "cruise_altitude", "climb_rate", "cruise_speed", "fuel_capacity", "fuel_per_step"
        }
        for field in sorted(unknown):
            errors.append(ValidationError(
                field=field,
                message="Unknown flight parameter",
                value=params[field]
            ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        for field in sorted(set(params) - {"level", "format_json"}):
            errors.append(ValidationError(
                field=field,
                message="Unknown logging parameter",
                value=params[field]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "flight" in config:
            errors.extend(ConfigValidator.validate_flight_params(config["flight"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
