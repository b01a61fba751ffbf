"""
Parsing and formatting of the counter text form.

Text is written most significant group first: "B3-A1-Z9". Each group is one
allowed letter followed by one allowed numeral, and groups are joined by a
single separator character.
"""

from collections.abc import Iterable

from ..digits import CompositeDigit
from ..digits.composite import GROUP_WIDTH
from ..errors import (
    EmptyInputError,
    InvalidGroupError,
    MalformedGroupError,
    SeparatorError,
    TooManyGroupsError,
)

DEFAULT_SEPARATOR = "-"
DEFAULT_MAX_GROUPS = 10


def parse_groups(
    text: str,
    max_groups: int = DEFAULT_MAX_GROUPS,
    separator: str = DEFAULT_SEPARATOR
) -> list[CompositeDigit]:
    """
    Parse counter text into groups, most significant first.

    The whole input is rejected on the first problem; a valid prefix
    followed by anything else is not accepted.

    Args:
        text: Counter text such as "A1-B2"
        max_groups: Largest number of groups allowed
        separator: Character between groups

    Returns:
        Parsed groups in text order (most significant first)

    Raises:
        EmptyInputError: If text is empty
        MalformedGroupError: If the text ends inside a group
        InvalidGroupError: If a group has a character outside its alphabet
        SeparatorError: If a separator is missing or dangling
        TooManyGroupsError: If more than max_groups groups are present
    """
    if not text:
        raise EmptyInputError("Counter text is empty", text=text)

    groups: list[CompositeDigit] = []
    pos = 0
    while True:
        chunk = text[pos:pos + GROUP_WIDTH]
        if len(chunk) < GROUP_WIDTH:
            raise MalformedGroupError(
                f"Truncated group {chunk!r} at position {pos}",
                text=text, group=chunk, position=pos,
            )

        digit = CompositeDigit.from_text(chunk)
        if not digit.is_valid():
            raise InvalidGroupError(
                f"Invalid group {chunk!r} at position {pos}",
                text=text, group=chunk, position=pos,
            )

        groups.append(digit)
        if len(groups) > max_groups:
            raise TooManyGroupsError(
                f"More than {max_groups} groups",
                text=text, count=len(text.split(separator)), limit=max_groups,
            )

        pos += GROUP_WIDTH
        if pos == len(text):
            return groups

        if text[pos] != separator:
            raise SeparatorError(
                f"Expected {separator!r} at position {pos}, found {text[pos]!r}",
                text=text, found=text[pos], position=pos,
            )

        pos += 1
        if pos == len(text):
            raise SeparatorError(
                f"Dangling separator at position {pos - 1}",
                text=text, found=separator, position=pos - 1,
            )


def format_groups(groups: Iterable[CompositeDigit], separator: str = DEFAULT_SEPARATOR) -> str:
    """Join groups, given most significant first, into counter text."""
    return separator.join(digit.identifier() for digit in groups)
