"""
Shared digit contract and increment algorithm.

Every digit-like type (single characters, letter/numeral pairs and whole
counters) implements the Digit protocol. The increment loop lives here once
and is reused at every level; carries move upward through advance_raw()
return values instead of per-digit flags.
"""

from typing import Protocol

from ..errors import DigitStateError


class Digit(Protocol):
    """Operations the shared increment loop needs from a digit."""

    def is_valid(self) -> bool:
        """Whether the current value belongs to the digit's alphabet."""
        ...

    def is_maximum(self) -> bool:
        """Whether the current value is the largest one."""
        ...

    def set_minimum(self) -> None:
        """Reset to the smallest value."""
        ...

    def identifier(self) -> str:
        """Text form of the current value."""
        ...

    def advance_raw(self) -> bool:
        """
        Step to the next raw value without rollover handling.

        Returns:
            True if a carry escaped the digit and must be surfaced
        """
        ...


def increment(digit: Digit) -> bool:
    """
    Advance a digit to its next valid value.

    At the maximum the digit rolls over to its minimum; otherwise it takes
    raw steps until it lands on a valid value, so excluded code points are
    skipped.

    Args:
        digit: Digit to advance in place

    Returns:
        True if the digit rolled over (or a carry escaped from its parts)

    Raises:
        DigitStateError: If the digit does not hold a valid value
    """
    if not digit.is_valid():
        raise DigitStateError(
            f"Cannot increment invalid digit value {digit.identifier()!r}",
            value=digit.identifier(),
            digit_type=type(digit).__name__,
        )

    overflow = False
    while True:
        if digit.is_maximum():
            digit.set_minimum()
            overflow = True
        elif digit.advance_raw():
            overflow = True
        if digit.is_valid():
            return overflow
