"""
Error classification for counter parsing and counter state failures.

Parse errors are recoverable: the lenient constructor falls back to the
minimum value. System failures indicate misuse or misconfiguration.
"""

from .parsing import (
    CounterParseError,
    EmptyInputError,
    MalformedGroupError,
    InvalidGroupError,
    SeparatorError,
    TooManyGroupsError,
)
from .system_failures import (
    SystemFailureError,
    DigitStateError,
    ConfigurationError,
)

__all__ = [
    # Parse Errors
    "CounterParseError",
    "EmptyInputError",
    "MalformedGroupError",
    "InvalidGroupError",
    "SeparatorError",
    "TooManyGroupsError",
    # System Failures
    "SystemFailureError",
    "DigitStateError",
    "ConfigurationError",
]
