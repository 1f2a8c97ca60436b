"""
Logging configuration and utilities for flystack.
"""
from .config import configure_logging, configure_logging_from_params, get_logger

__all__ = ["configure_logging", "configure_logging_from_params", "get_logger"]
