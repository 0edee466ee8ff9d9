"""Arithmetic drills on integers: digits, primes, leap years and small games."""

from __future__ import annotations

import math
from collections.abc import Iterator

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _digits(num: int) -> Iterator[int]:
    """Yield the decimal digits from the lowest, carrying the sign of ``num``."""
    sign = -1 if num < 0 else 1
    num = abs(num)
    while num:
        num, digit = divmod(num, 10)
        yield sign * digit


def can_form_rectangle(a: int, b: int, c: int, d: int) -> bool:
    """Tell whether the four sides pair up into the sides of a rectangle."""
    return (a == b and c == d) or (a == c and b == d) or (a == d and b == c)


def to_uppercase(ch: str) -> str:
    """Convert a lowercase ASCII letter to uppercase."""
    if len(ch) != 1 or not "a" <= ch <= "z":
        raise ValueError(f"expected a lowercase letter, got {ch!r}")
    return chr(ord(ch) - ord("a") + ord("A"))


def gcd_of_odd_even_sums(n: int) -> int:
    """Return the GCD of the sums of the first n odd and first n even numbers."""
    if n < 1:
        return 1
    sum_odd = sum(2 * i - 1 for i in range(1, n + 1))
    sum_even = sum(2 * i for i in range(1, n + 1))
    return math.gcd(sum_odd, sum_even)


def integer_sqrt(x: int) -> int:
    """Return the square root of x rounded down; 0 for x below one."""
    if x < 1:
        return 0
    return math.isqrt(x)


def add_digits(num: int) -> int:
    """Sum the digits repeatedly until a single digit is left."""
    while num >= 10:
        num = sum(_digits(num))
    return num


def count_digits(num: int) -> int:
    """Return the number of decimal digits of ``num`` (1 for zero)."""
    return len(str(abs(num)))


def is_armstrong(num: int, digits: int | None = None) -> bool:
    """Tell whether num equals the sum of its digits each raised to ``digits``."""
    if num < 0:
        raise ValueError(f"expected a non-negative number, got {num}")
    if num < 10:
        return True
    if digits is None:
        digits = count_digits(num)
    return sum(digit**digits for digit in _digits(num)) == num


def bishop_moves(row: int, col: int) -> int:
    """Return how many squares a bishop at (row, col) on a chessboard can reach."""
    if not (1 <= row <= 8 and 1 <= col <= 8):
        raise ValueError(f"invalid position ({row}, {col})")
    return (
        min(8 - row, 8 - col)
        + min(8 - row, col - 1)
        + min(row - 1, col - 1)
        + min(row - 1, 8 - col)
    )


def complement_base_10(num: int) -> int:
    """Flip every bit of the binary form of ``num``; the complement of 0 is 1."""
    if num < 0:
        raise ValueError(f"expected a non-negative number, got {num}")
    if num == 0:
        return 1
    return num ^ ((1 << num.bit_length()) - 1)


def digit_product_minus_sum(num: int) -> int:
    """Return the product of the digits minus their sum."""
    product = math.prod(_digits(num))
    return product - sum(_digits(num))


def factorial_trailing_zeroes(num: int) -> int:
    """Return how many trailing zeros num! has."""
    zeros = 0
    while num >= 5:
        num //= 5
        zeros += num
    return zeros


def fibonacci_sequence(n: int) -> list[int]:
    """Return the first n Fibonacci numbers, starting from 0."""
    numbers = []
    previous, current = 0, 1
    for _ in range(n):
        numbers.append(previous)
        previous, current = current, previous + current
    return numbers


def is_leap(year: int) -> bool:
    """Tell whether ``year`` is a Gregorian leap year."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def nim_winner(stones: int, first: str, second: str) -> str:
    """Return the winner of Nim (take 1 to 3 stones) under perfect play."""
    return second if stones % 4 == 0 else first


def is_palindrome_number(num: int) -> bool:
    """Tell whether the decimal digits of ``num`` read the same both ways."""
    if num < 0:
        return False
    reversed_value = 0
    for digit in _digits(num):
        reversed_value = reversed_value * 10 + digit
    return reversed_value == num


def is_power_of_two(num: int) -> bool:
    """Tell whether ``num`` is a power of two."""
    return num >= 1 and num & (num - 1) == 0


def is_prime(num: int) -> bool:
    """Tell whether ``num`` is a prime number."""
    if num < 2:
        return False
    return all(num % divisor for divisor in range(2, math.isqrt(num) + 1))


def reverse_integer(num: int) -> int:
    """Reverse the digits of num, or return 0 if it leaves the 32-bit range."""
    sign = -1 if num < 0 else 1
    result = sign * int(str(abs(num))[::-1])
    return result if INT32_MIN <= result <= INT32_MAX else 0