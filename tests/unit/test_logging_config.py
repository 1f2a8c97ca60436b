"""Tests for logging configuration helpers."""

from unittest.mock import Mock, patch

import structlog

from flystack.config.defaults import LoggingParams
from flystack.logging import configure_logging, configure_logging_from_params, get_logger
from flystack.logging.config import (
    get_constraint_logger,
    get_state_logger,
    log_constraint_rejection,
    log_element_type_rejection,
    log_state_transition,
)


class TestConfigureLogging:

    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_renderer_last(self):
        configure_logging(level="DEBUG", format_json=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_and_extras(self):
        marker = Mock(side_effect=lambda logger, name, event: event)
        configure_logging(include_timestamp=False, include_caller=True, extra_processors=[marker])

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert marker in processors
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)

    def test_configure_from_params(self):
        with patch("flystack.logging.config.configure_logging") as mock_configure:
            configure_logging_from_params(LoggingParams(level="DEBUG", format_json=True),
                                          include_timestamp=False)

        mock_configure.assert_called_once_with(
            level="DEBUG", format_json=True, include_timestamp=False
        )


class TestLoggerFactories:

    def test_loggers_are_created(self):
        assert get_logger(__name__) is not None
        assert get_state_logger(__name__) is not None
        assert get_constraint_logger(__name__) is not None


class TestLogHelpers:

    def test_log_state_transition_with_context(self):
        logger = Mock()

        log_state_transition(logger, unit_id="u1", from_state="grounded",
                             to_state="airborne", trigger="take_off", context={"fuel": 3.0})

        logger.bind.assert_called_once_with(
            unit_id="u1", from_state="grounded", to_state="airborne", trigger="take_off"
        )
        bound = logger.bind.return_value
        bound.bind.assert_called_once_with(context={"fuel": 3.0})
        bound.bind.return_value.info.assert_called_once_with("State transition")

    def test_log_state_transition_without_context(self):
        logger = Mock()

        log_state_transition(logger, unit_id="u1", from_state="airborne",
                             to_state="grounded", trigger="land")

        logger.bind.return_value.info.assert_called_once_with("State transition")
        logger.bind.return_value.bind.assert_not_called()

    def test_log_element_type_rejection(self):
        logger = Mock()

        log_element_type_rejection(logger, operation="Stack.push", expected_type="int",
                                   actual_type="str", context={"size": 1})

        logger.bind.assert_called_once_with(
            operation="Stack.push", expected_type="int", actual_type="str"
        )
        logger.bind.return_value.bind.return_value.warning.assert_called_once_with(
            "Element type rejected"
        )

    def test_log_constraint_rejection(self):
        logger = Mock()

        log_constraint_rejection(logger, operation="map_doubled", constraint="Numeric",
                                 element_type="str")

        logger.bind.return_value.warning.assert_called_once_with("Constraint rejected")
