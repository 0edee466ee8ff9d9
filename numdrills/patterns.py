"""Text patterns of stars, numbers and letters, built row by row.

Every pattern function takes the size ``n`` and returns the rows as a list
of strings, exactly as they are printed (trailing spaces included).  A size
below one gives no rows.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from itertools import count


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def _letters(start: int = 0) -> Iterator[str]:
    return (_letter(offset) for offset in count(start))


def _rows(n: int) -> range:
    return range(1, n + 1)


def alphabet_floyd_triangle(n: int) -> list[str]:
    """Row r holds r letters, continuing the alphabet from the row before."""
    letters = _letters()
    return ["".join(f"{next(letters)} " for _ in range(row)) for row in _rows(n)]


def alphabet_matrix(n: int) -> list[str]:
    """Every row is the first n letters."""
    line = "".join(f"{_letter(col)} " for col in range(n))
    return [line for _ in _rows(n)]


def alphabet_right_triangle(n: int) -> list[str]:
    """Row r repeats the r-th letter r times."""
    return [f"{_letter(row - 1)} " * row for row in _rows(n)]


def alphabet_shift_square(n: int) -> list[str]:
    """Row r holds n consecutive letters starting at the r-th letter."""
    return [
        "".join(f"{_letter(row - 1 + col)}  " for col in range(n)) for row in _rows(n)
    ]


def alphabet_shifted_right_triangle(n: int) -> list[str]:
    """Row r holds r consecutive letters starting at the r-th letter."""
    return [
        "".join(f"{_letter(row - 1 + col)} " for col in range(row)) for row in _rows(n)
    ]


def alphabet_square(n: int) -> list[str]:
    """Row r repeats the r-th letter n times."""
    return [f"{_letter(row - 1)}  " * n for row in _rows(n)]


def column_number_square(n: int) -> list[str]:
    """Every row counts from 1 to n."""
    line = "".join(f"{col}  " for col in _rows(n))
    return [line for _ in _rows(n)]


def continuous_number_square(n: int) -> list[str]:
    """An n by n square counting on from 1 across the rows."""
    numbers = count(1)
    return ["".join(f"{next(numbers)}  " for _ in range(n)) for _ in _rows(n)]


def floyds_triangle_left_aligned(n: int) -> list[str]:
    """Floyd's triangle padded on the left, numbers written without gaps."""
    numbers = count(1)
    return [
        " " * (n - row) + "".join(str(next(numbers)) for _ in range(row))
        for row in _rows(n)
    ]


def floyds_triangle(n: int) -> list[str]:
    """Floyd's triangle: row r holds the next r counting numbers."""
    numbers = count(1)
    return ["".join(f"{next(numbers)} " for _ in range(row)) for row in _rows(n)]


def hollow_palindromic_number_pyramid(n: int) -> list[str]:
    """Numbers counting up and back down, with stars filling the middle."""
    lines = []
    for row in _rows(n):
        width = n - row + 1
        rising = "".join(f"{col} " for col in range(1, width + 1))
        stars = "* " * (2 * (row - 1))
        falling = "".join(f"{col} " for col in range(width, 0, -1))
        lines.append(rising + stars + falling)
    return lines


def inverted_right_triangle(n: int) -> list[str]:
    """Row r holds n - r + 1 stars."""
    return ["* " * (n - row + 1) for row in _rows(n)]


def left_aligned_right_triangle(n: int) -> list[str]:
    """Row r holds r stars."""
    return ["* " * row for row in _rows(n)]


def left_aligned_star_triangle(n: int) -> list[str]:
    """Stars aligned to the right edge of an n-wide block."""
    return [" " * (n - row) + "*" * row for row in _rows(n)]


def left_aligned_upper_triangular_numbers(n: int) -> list[str]:
    """Row r is padded by r - 1 spaces, then the column numbers r to n."""
    return [
        " " * (row - 1) + "".join(str(col) for col in range(row, n + 1))
        for row in _rows(n)
    ]


def number_right_triangle(n: int) -> list[str]:
    """Row r is padded by r - 1 spaces, then the row number n - r + 1 times."""
    return [" " * (row - 1) + str(row) * (n - row + 1) for row in _rows(n)]


def number_shifted_right_triangle(n: int) -> list[str]:
    """Row r is padded by n - r spaces, then the row number r times."""
    return [" " * (n - row) + str(row) * row for row in _rows(n)]


def number_square(n: int) -> list[str]:
    """Row r repeats the row number n times."""
    return [f"{row}  " * n for row in _rows(n)]


def palindromic_number_pyramid(n: int) -> list[str]:
    """Centred rows counting 1 to r and back down to 1."""
    return [
        " " * (n - row)
        + "".join(str(value) for value in range(1, row + 1))
        + "".join(str(value) for value in range(row - 1, 0, -1))
        for row in _rows(n)
    ]


def reverse_alphabet_right_triangle(n: int) -> list[str]:
    """Row r holds r consecutive letters ending at the n-th letter."""
    return [
        "".join(f"{_letter(n - row + col)}  " for col in range(row))
        for row in _rows(n)
    ]


def reverse_number_triangle(n: int) -> list[str]:
    """Row r counts down from r to 1."""
    return ["".join(f"{col} " for col in range(row, 0, -1)) for row in _rows(n)]


def right_angled_number_triangle(n: int) -> list[str]:
    """Row r counts from r up to 2r - 1."""
    return [
        "".join(f"{row + col - 1} " for col in range(1, row + 1)) for row in _rows(n)
    ]


def row_number_triangle(n: int) -> list[str]:
    """Row r repeats the row number r times."""
    return [f"{row} " * row for row in _rows(n)]


def sequential_alphabet_square(n: int) -> list[str]:
    """An n by n square running on through the alphabet across the rows."""
    letters = _letters()
    return ["".join(f"{next(letters)} " for _ in range(n)) for _ in _rows(n)]


def solid_square(n: int) -> list[str]:
    """An n by n square of stars."""
    return [" * " * n for _ in _rows(n)]


PATTERNS: dict[str, Callable[[int], list[str]]] = {
    func.__name__: func
    for func in (
        alphabet_floyd_triangle,
        alphabet_matrix,
        alphabet_right_triangle,
        alphabet_shift_square,
        alphabet_shifted_right_triangle,
        alphabet_square,
        column_number_square,
        continuous_number_square,
        floyds_triangle_left_aligned,
        floyds_triangle,
        hollow_palindromic_number_pyramid,
        inverted_right_triangle,
        left_aligned_right_triangle,
        left_aligned_star_triangle,
        left_aligned_upper_triangular_numbers,
        number_right_triangle,
        number_shifted_right_triangle,
        number_square,
        palindromic_number_pyramid,
        reverse_alphabet_right_triangle,
        reverse_number_triangle,
        right_angled_number_triangle,
        row_number_triangle,
        sequential_alphabet_square,
        solid_square,
    )
}


def main(argv: list[str] | None = None) -> int:
    """Print the named pattern; ask for the size when it is not given."""
    parser = argparse.ArgumentParser(
        prog="numdrills-patterns", description="Print a text pattern."
    )
    parser.add_argument("pattern", choices=sorted(PATTERNS))
    parser.add_argument("number", nargs="?", type=int)
    args = parser.parse_args(argv)

    number = args.number
    if number is None:
        raw = input("enter number : ")
        try:
            number = int(raw.strip())
        except ValueError:
            print(f"invalid number: {raw!r}", file=sys.stderr)
            return 1

    for line in PATTERNS[args.pattern](number):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())