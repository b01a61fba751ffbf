"""
Counter module.

The bounded-length Number built from letter/numeral groups, and the
parser/formatter for its XY-XY-...-XY text form.
"""
from .number import AdvanceResult, Number
from .parser import format_groups, parse_groups

__all__ = ["AdvanceResult", "Number", "format_groups", "parse_groups"]
