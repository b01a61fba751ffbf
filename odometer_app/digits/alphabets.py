"""Single-character digit alphabets."""

from typing import ClassVar, Optional

# A, B, C, !D, E, !F, !G, H, I, !J, K, L, !M, N, O, P, !Q, R, S, T, U, !V, W, X, Y, Z
LETTER_ALPHABET = frozenset("ABCEHIKLNOPRSTUWXYZ")
NUMERAL_ALPHABET = frozenset("123456789")


class CharDigit:
    """A digit holding one character drawn from a fixed alphabet."""

    ALPHABET: ClassVar[frozenset] = frozenset()
    MINIMUM: ClassVar[str] = ""
    MAXIMUM: ClassVar[str] = ""

    def __init__(self, value: Optional[str] = None):
        self.value = self.MINIMUM if value is None else value

    def is_valid(self) -> bool:
        return self.value in self.ALPHABET

    def is_maximum(self) -> bool:
        return self.value == self.MAXIMUM

    def set_minimum(self) -> None:
        self.value = self.MINIMUM

    def identifier(self) -> str:
        return self.value

    def advance_raw(self) -> bool:
        # Next code point; the increment loop skips the excluded ones
        self.value = chr(ord(self.value) + 1)
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharDigit):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class LetterDigit(CharDigit):
    """Uppercase letter, excluding D, F, G, J, M, Q and V."""

    ALPHABET = LETTER_ALPHABET
    MINIMUM = "A"
    MAXIMUM = "Z"


class NumeralDigit(CharDigit):
    """Decimal numeral 1 through 9; 0 is never valid."""

    ALPHABET = NUMERAL_ALPHABET
    MINIMUM = "1"
    MAXIMUM = "9"
