"""
Digit types and the shared increment algorithm.

Single-character alphabets (letters, numerals), the letter/numeral pair
that forms one group of a counter, and the increment loop they all share.
"""
from .alphabets import LetterDigit, NumeralDigit
from .base import Digit, increment
from .composite import CompositeDigit

__all__ = ["CompositeDigit", "Digit", "LetterDigit", "NumeralDigit", "increment"]
