"""Tests for logging configuration helpers."""

import logging
from unittest.mock import Mock

import structlog

from odometer_app.logging.config import (
    configure_logging,
    get_counter_logger,
    get_logger,
    log_counter_advance,
    log_parse_fallback,
)


class TestConfigureLogging:
    """Test structlog setup."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_sets_root_level(self):
        """Test the requested level reaches stdlib logging."""
        configure_logging(level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_json_renderer(self):
        """Test JSON output ends the processor chain."""
        configure_logging(level="DEBUG", format_json=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_extra_processors_before_renderer(self):
        """Test extra processors run before rendering."""
        extra = Mock(side_effect=lambda logger, name, event: event)
        configure_logging(level="INFO", extra_processors=[extra], include_timestamp=False)
        processors = structlog.get_config()["processors"]
        assert processors[-2] is extra

    def test_get_logger(self):
        """Test loggers come from structlog."""
        assert get_logger("odometer.test") is not None
        assert get_counter_logger("odometer.test") is not None


class TestLogHelpers:
    """Test standardized log helpers."""

    def test_advance_levels(self):
        """Test advance events choose level by outcome."""
        logger = Mock()

        log_counter_advance(logger, "A1", "A2", overflow=False, grew=False)
        logger.bind.return_value.debug.assert_called_once_with("Counter advanced")

        logger = Mock()
        log_counter_advance(logger, "Z9", "A1-A1", overflow=False, grew=True)
        logger.bind.return_value.info.assert_called_once_with("Counter grew by one group")

        logger = Mock()
        log_counter_advance(logger, "Z9", "A1", overflow=True, grew=False)
        logger.bind.return_value.info.assert_called_once_with("Counter wrapped to minimum")

    def test_advance_with_context(self):
        """Test context is bound when given."""
        logger = Mock()
        log_counter_advance(logger, "A1", "A2", overflow=False, grew=False, context={"run": 1})
        logger.bind.return_value.bind.assert_called_once_with(context={"run": 1})

    def test_parse_fallback(self):
        """Test fallback logs a warning with text and reason."""
        logger = Mock()
        log_parse_fallback(logger, text="Q1", reason="bad letter")

        logger.bind.assert_called_once_with(text="Q1", reason="bad letter")
        logger.bind.return_value.warning.assert_called_once()
