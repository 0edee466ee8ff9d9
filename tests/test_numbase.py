import pytest

from numdrills.numbase import (
    binary_to_decimal,
    decimal_to_binary,
    decimal_to_binary_bitwise,
    decimal_to_octal,
)


def test_binary_round_trip():
    for num in range(0, 2000):
        assert binary_to_decimal(decimal_to_binary(num)) == num


def test_binary_to_decimal_matches_int_parsing():
    for num in range(0, 1024):
        digits = format(num, "b")
        assert binary_to_decimal(int(digits)) == int(digits, 2)


def test_binary_to_decimal_below_one():
    assert binary_to_decimal(0) == 0
    assert binary_to_decimal(-101) == 0


def test_binary_digits_are_only_zero_and_one():
    for num in range(0, 500):
        assert set(str(decimal_to_binary(num))) <= {"0", "1"}


def test_bitwise_agrees_with_division():
    for num in range(0, 2000):
        assert decimal_to_binary_bitwise(num) == decimal_to_binary(num)


def test_bitwise_rejects_negative():
    with pytest.raises(ValueError):
        decimal_to_binary_bitwise(-1)


def test_negative_binary_keeps_sign():
    for num in range(1, 300):
        assert decimal_to_binary(-num) == -decimal_to_binary(num)


def test_octal_parses_back():
    for num in range(0, 3000):
        assert int(str(decimal_to_octal(num)), 8) == num


def test_octal_digits_below_eight():
    for num in range(0, 1000):
        assert set(str(decimal_to_octal(num))) <= set("01234567")


def test_negative_octal_keeps_sign():
    for num in range(1, 300):
        assert decimal_to_octal(-num) == -decimal_to_octal(num)