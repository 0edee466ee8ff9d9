"""Conversions between decimal numbers and binary or octal digit numerals.

A binary or octal value is carried as an ``int`` whose decimal digits are the
digits of the other base, so that 5 in binary is the integer 101.
"""

from __future__ import annotations


def binary_to_decimal(num: int) -> int:
    """Read the decimal digits of ``num`` as a binary numeral; 0 if num < 1."""
    if num < 1:
        return 0
    return sum(int(digit) << place for place, digit in enumerate(reversed(str(num))))


def decimal_to_binary_bitwise(num: int) -> int:
    """Write a non-negative number as binary digits, one bit at a time."""
    if num < 0:
        raise ValueError(f"expected a non-negative number, got {num}")
    bits = []
    while num:
        bits.append(str(num & 1))
        num >>= 1
    return int("".join(reversed(bits))) if bits else 0


def _in_base(num: int, spec: str) -> int:
    sign = -1 if num < 0 else 1
    return sign * int(format(abs(num), spec))


def decimal_to_binary(num: int) -> int:
    """Write ``num`` as binary digits; a negative number keeps its sign."""
    return _in_base(num, "b")


def decimal_to_octal(num: int) -> int:
    """Write ``num`` as octal digits; a negative number keeps its sign."""
    return _in_base(num, "o")