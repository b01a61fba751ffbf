"""
Centralized logging configuration for the odometer counter.

This module provides standardized logging configuration using structlog
for all components. Counter operations, parse fallbacks and CLI runs all
log through this configuration so output stays consistent and structured.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # Logs go to stderr so counter values on stdout stay machine-readable
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s"
    )
    logging.getLogger().setLevel(log_level)

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
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_counter_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the counter subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for counter operations
    """
    # Initial values keep the logger lazy until configure_logging has run
    return structlog.get_logger(name, subsystem="counter")


def log_counter_advance(
    logger: FilteringBoundLogger,
    previous: str,
    current: str,
    overflow: bool,
    grew: bool,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a counter advance with standardized format.

    Plain steps are logged at debug level; a step that adds a group or
    wraps back to the minimum is logged at info level.

    Args:
        logger: Structlog logger instance
        previous: Value before the advance
        current: Value after the advance
        overflow: Whether the number wrapped to its minimum
        grew: Whether a new most significant group was added
        context: Additional context data
    """
    bound_logger = logger.bind(
        previous=previous,
        current=current,
        overflow=overflow,
        grew=grew,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if overflow:
        bound_logger.info("Counter wrapped to minimum")
    elif grew:
        bound_logger.info("Counter grew by one group")
    else:
        bound_logger.debug("Counter advanced")


def log_parse_fallback(
    logger: FilteringBoundLogger,
    text: str,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a rejected counter text that fell back to the minimum value.

    Args:
        logger: Structlog logger instance
        text: The rejected input text
        reason: Why the text was rejected
        context: Additional context data
    """
    bound_logger = logger.bind(text=text, reason=reason)

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("Counter text rejected, using minimum value")
