"""
Parse error classifications for counter text.

These exceptions describe why a textual counter value was rejected. The
lenient Number constructor catches them and falls back to the minimum.
"""

from typing import Optional, Dict, Any


class CounterParseError(Exception):
    """Base class for counter text that cannot be parsed."""

    def __init__(self, message: str, text: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.text = text
        self.context = context or {}
        self.recoverable = True


class EmptyInputError(CounterParseError):
    """No groups at all in the input text."""


class MalformedGroupError(CounterParseError):
    """A group is cut short before both of its characters."""

    def __init__(self, message: str, group: Optional[str] = None,
                 position: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.group = group
        self.position = position


class InvalidGroupError(CounterParseError):
    """A group holds a character outside the letter or numeral alphabet."""

    def __init__(self, message: str, group: Optional[str] = None,
                 position: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.group = group
        self.position = position


class SeparatorError(CounterParseError):
    """A separator is missing between groups or dangling at the end."""

    def __init__(self, message: str, found: Optional[str] = None,
                 position: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.found = found
        self.position = position


class TooManyGroupsError(CounterParseError):
    """More groups than the counter can hold."""

    def __init__(self, message: str, count: Optional[int] = None,
                 limit: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.count = count
        self.limit = limit
