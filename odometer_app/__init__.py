"""
Odometer - Mixed-Radix Letter/Numeral Counter

A counter whose digits are letter/numeral pairs (A1 .. Z9) chained into a
bounded-length number written as XY-XY-...-XY. Supports parsing, formatting
and increment-by-one with carry propagation, growth and wrap-around.
"""

__version__ = "0.1.0"
__author__ = "Odometer Team"
