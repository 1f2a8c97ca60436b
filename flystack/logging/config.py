"""
Centralized logging configuration for flystack.

This module provides standardized logging configuration using structlog
for all components. Flight units and constrained generic operations log
through the helpers defined here so output stays structured and consistent.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..config.defaults import LoggingParams


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire library.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_params(params: LoggingParams, **kwargs: Any) -> None:
    """Configure logging from a validated ``LoggingParams`` section."""
    configure_logging(level=params.level, format_json=params.format_json, **kwargs)


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_state_logger(name: str) -> FilteringBoundLogger:
    """Logger bound for flight phase transitions of game units."""
    return get_logger(name).bind(subsystem="flight_state")


def get_constraint_logger(name: str) -> FilteringBoundLogger:
    """Logger bound for capability constraint checks."""
    return get_logger(name).bind(subsystem="constraints")


def log_state_transition(
    logger: FilteringBoundLogger,
    unit_id: str,
    from_state: str,
    to_state: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a flight phase transition with standardized format.

    Args:
        logger: Structlog logger instance
        unit_id: Identifier of the transitioning unit
        from_state: Current phase
        to_state: Target phase
        trigger: Operation that caused the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        unit_id=unit_id,
        from_state=from_state,
        to_state=to_state,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("State transition")


def log_constraint_rejection(
    logger: FilteringBoundLogger,
    operation: str,
    constraint: str,
    element_type: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a rejected element type before the error is raised.

    Args:
        logger: Structlog logger instance
        operation: Generic operation that was called
        constraint: Name of the unsatisfied constraint
        element_type: Name of the offending type
        context: Additional context data
    """
    bound_logger = logger.bind(
        operation=operation,
        constraint=constraint,
        element_type=element_type,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("Constraint rejected")


def log_element_type_rejection(
    logger: FilteringBoundLogger,
    operation: str,
    expected_type: Optional[str],
    actual_type: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a value whose type does not match the expected element type.

    Args:
        logger: Structlog logger instance
        operation: Generic operation that was called
        expected_type: Name of the element type in force, if any
        actual_type: Name of the offending value's type
        context: Additional context data
    """
    bound_logger = logger.bind(
        operation=operation,
        expected_type=expected_type,
        actual_type=actual_type,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("Element type rejected")
