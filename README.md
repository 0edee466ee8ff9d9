# numdrills

Classic programming drills as plain Python functions: text patterns, array
exercises, number puzzles and base conversions. Call them, test them, or
compare them with your own solutions.

## Modules

- `numdrills.patterns`: text patterns built from a size `n`. Each function
  returns the rows as a list of strings, exactly as they are printed, with
  trailing spaces kept. A size below one gives no rows. The patterns are
  squares of stars, numbers and letters, right and inverted triangles, Floyd's
  triangle in numbers and in letters, and palindromic number pyramids. See
  `solid_square`, `floyds_triangle`, `alphabet_floyd_triangle`,
  `palindromic_number_pyramid` and `hollow_palindromic_number_pyramid`, among
  others. The `PATTERNS` dictionary maps every pattern name to its function.
- `numdrills.arrays`: exercises on integer sequences.
  - `find_min`, `find_max`
  - `search_element`, which returns an index, or `None` when the key is absent
  - `reverse_array`, `rotate_by_one`
  - `missing_number`, which finds the one number of `0..len(values)` that is not present
  - `second_largest`
  - `fibonacci_element(n)`, the 1-based element of 0, 1, 1, 2, …
  - `has_unique_occurrences`
- `numdrills.mathutils`: number puzzles.
  - `integer_sqrt`, `add_digits` (the digital root)
  - `count_digits`, `is_armstrong`, `is_palindrome_number`, `is_prime`, `is_power_of_two`
  - `is_leap`
  - `reverse_integer`, which returns 0 when the result leaves the signed 32-bit range
  - `factorial_trailing_zeroes`, `fibonacci_sequence`, `digit_product_minus_sum`
  - `gcd_of_odd_even_sums`, `complement_base_10`
  - `bishop_moves`, `nim_winner`
  - `can_form_rectangle`, `to_uppercase`
- `numdrills.numbase`: conversions between decimal and binary or octal. A
  binary or octal value is carried as an `int` whose decimal digits are the
  digits in that base, so 10 in binary is `1010`. The functions are
  `binary_to_decimal`, `decimal_to_binary`, `decimal_to_binary_bitwise` and
  `decimal_to_octal`.

Invalid input raises `ValueError`. That covers the minimum or maximum of an
empty sequence, a list with no second largest value, a bishop off the board,
`to_uppercase` given anything but a lowercase ASCII letter, and a negative
number where only non-negative ones make sense.

## Example

```python
from numdrills.arrays import find_max, find_min
from numdrills.mathutils import bishop_moves, integer_sqrt, is_leap, reverse_integer
from numdrills.numbase import binary_to_decimal, decimal_to_binary
from numdrills.patterns import floyds_triangle

is_leap(2000)            # True
is_leap(1900)            # False
integer_sqrt(8)          # 2
reverse_integer(123)     # 321
bishop_moves(4, 4)       # 13

decimal_to_binary(10)    # 1010
binary_to_decimal(1010)  # 10

find_min([2, 89, -123, 45678])  # -123
find_max([2, 89, -123, 45678])  # 45678

floyds_triangle(3)       # ['1 ', '2 3 ', '4 5 6 ']
```

## Installation

From a checkout of the project:

```
pip install .
```

## Command line

The patterns can be printed from the shell:

```
numdrills-patterns floyds_triangle 4
```

The first argument is the pattern name (run `numdrills-patterns --help` for the list). The second is the size. If you leave the size out, the command asks for it on standard input.

The array, math and base-conversion functions have no command of their own.
Use them from Python.

## Running the tests

```
pip install ".[test]"
pytest
```