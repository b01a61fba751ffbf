"""Letter/numeral pair forming one group of a counter."""

from typing import Optional

from .alphabets import LetterDigit, NumeralDigit
from .base import increment

GROUP_WIDTH = 2


class CompositeDigit:
    """
    One counter group: a letter followed by a numeral, e.g. "A1".

    The numeral is the less significant half; it carries into the letter
    when it rolls over. Values run A1, A2 .. A9, B1 .. Z9.
    """

    def __init__(self, letter: Optional[LetterDigit] = None,
                 numeral: Optional[NumeralDigit] = None):
        self.letter = letter if letter is not None else LetterDigit()
        self.numeral = numeral if numeral is not None else NumeralDigit()

    @classmethod
    def from_text(cls, text: str) -> "CompositeDigit":
        """
        Build a pair from a two-character group.

        Missing characters become empty placeholders, so the result reports
        is_valid() False rather than raising.
        """
        return cls(LetterDigit(text[0:1]), NumeralDigit(text[1:2]))

    def is_valid(self) -> bool:
        return self.letter.is_valid() and self.numeral.is_valid()

    def is_maximum(self) -> bool:
        return self.letter.is_maximum() and self.numeral.is_maximum()

    def set_minimum(self) -> None:
        self.letter.set_minimum()
        self.numeral.set_minimum()

    def identifier(self) -> str:
        return self.letter.identifier() + self.numeral.identifier()

    def advance_raw(self) -> bool:
        if not increment(self.numeral):
            return False
        return increment(self.letter)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositeDigit):
            return NotImplemented
        return self.letter == other.letter and self.numeral == other.numeral

    def __repr__(self) -> str:
        return f"CompositeDigit({self.identifier()!r})"
