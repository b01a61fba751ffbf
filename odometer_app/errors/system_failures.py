"""
System failure error classifications.

These exceptions indicate misuse of the digit API or an unusable
configuration; retrying the same call will not succeed.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class DigitStateError(SystemFailureError):
    """A digit was asked to increment from a value outside its alphabet."""

    def __init__(self, message: str, value: Optional[str] = None,
                 digit_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
        self.digit_type = digit_type


class ConfigurationError(SystemFailureError):
    """Configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
