"""Default configuration parameters for flystack game units."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FlightParams:
    """Flight simulation parameters shared by all flying units."""
    cruise_altitude: float = 100.0      # Altitude ceiling, metres
    climb_rate: float = 10.0            # Altitude gained per fly() step
    cruise_speed: float = 15.0          # Velocity while airborne, m/s

    # Only consumed by fuelled units
    fuel_capacity: float = 100.0
    fuel_per_step: float = 5.0


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    flight: FlightParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        flight=FlightParams(),
        logging=LoggingParams(),
    )
