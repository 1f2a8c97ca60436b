"""
Configuration module.

Frozen dataclass defaults, a YAML-backed loader with per-unit overrides,
and validation of merged parameters.
"""

from .defaults import DefaultConfig, FlightParams, LoggingParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "FlightParams",
    "LoggingParams",
    "ValidationError",
    "get_default_config",
]
