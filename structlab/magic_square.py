"""Checks whether a 4x4 grid of integers is a magic square."""

from __future__ import annotations

import argparse
from itertools import pairwise
from typing import Iterable, Optional, Sequence

SIZE = 4
MAGIC_CONST = SIZE * (SIZE * SIZE + 1) // 2

Square = Sequence[Sequence[int]]


class MagicSquareError(ValueError):
    """Raised when a grid is not a magic square."""


def _rows(square: Square) -> tuple[tuple[int, ...], ...]:
    rows = tuple(tuple(row) for row in square)
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise ValueError(f"square must be {SIZE}x{SIZE}")
    return rows


def find_repeated(square: Square) -> Optional[tuple[int, int, int]]:
    """Return (value, line, column) of the first repeat found, or None."""
    cells = [
        (line, column, value)
        for line, row in enumerate(_rows(square))
        for column, value in enumerate(row)
    ]
    for line, column, value in cells:
        for other_line, other_column, other in cells:
            if (other_line, other_column) != (line, column) and other == value:
                return other, other_line, other_column
    return None


def flatten(square: Square) -> list[int]:
    return [value for row in _rows(square) for value in row]


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted with bubble sort."""
    items = list(values)
    for done in range(len(items) - 1):
        for j in range(len(items) - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def first_adjacent_duplicate(sorted_values: Iterable[int]) -> Optional[int]:
    for current, following in pairwise(sorted_values):
        if current == following:
            return current
    return None


def check_rows(square: Square) -> list[int]:
    sums = [sum(row) for row in _rows(square)]
    for index, total in enumerate(sums):
        if total != MAGIC_CONST:
            raise MagicSquareError(
                f"Line {index} sum ({total}) is not equal to {MAGIC_CONST}!"
            )
    return sums


def check_columns(square: Square) -> list[int]:
    sums = [sum(column) for column in zip(*_rows(square))]
    for index, total in enumerate(sums):
        if total != MAGIC_CONST:
            raise MagicSquareError(
                f"Column {index} sum ({total}) is not equal to {MAGIC_CONST}!"
            )
    return sums


def check_diagonals(square: Square) -> tuple[int, int]:
    rows = _rows(square)
    primary = sum(row[i] for i, row in enumerate(rows))
    if primary != MAGIC_CONST:
        raise MagicSquareError(
            f"Primary diagonal sum ({primary}) is not equal to {MAGIC_CONST}!"
        )
    secondary = sum(row[SIZE - 1 - i] for i, row in enumerate(rows))
    if secondary != MAGIC_CONST:
        raise MagicSquareError(
            f"Secondary diagonal sum ({secondary}) is not equal to {MAGIC_CONST}!"
        )
    return primary, secondary


def _check_sums(square: Square) -> None:
    check_rows(square)
    check_columns(square)
    check_diagonals(square)


def validate(square: Square) -> tuple[tuple[int, ...], ...]:
    """Raise MagicSquareError unless the grid is magic; return it as tuples."""
    rows = _rows(square)
    repeated = find_repeated(rows)
    if repeated is not None:
        value, line, column = repeated
        raise MagicSquareError(f"Repeated number {value} at position {line} x {column}!")
    _check_sums(rows)
    return rows


def format_square(square: Square) -> str:
    return "\n".join(
        "".join(f"[ {value:02d} ]" for value in row) for row in _rows(square)
    )


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt)
        try:
            return int(text.strip())
        except ValueError:
            print("Please enter an integer.")


def main(argv: Optional[list[str]] = None) -> int:
    """Read a 4x4 grid and report whether it is a magic square."""
    parser = argparse.ArgumentParser(description="Check a 4x4 magic square")
    parser.add_argument(
        "--method",
        choices=("pairwise", "sorted"),
        default="pairwise",
        help="how to look for repeated numbers",
    )
    args = parser.parse_args(argv)
    try:
        square = [
            [_read_int(f"Insert a number ({line} x {column}): ") for column in range(SIZE)]
            for line in range(SIZE)
        ]
    except EOFError:
        print("\nIncomplete input.")
        return 1
    try:
        if args.method == "sorted":
            repeated = first_adjacent_duplicate(bubble_sort(flatten(square)))
            if repeated is not None:
                raise MagicSquareError(f"Repeated number at {repeated}!")
            _check_sums(square)
        else:
            validate(square)
    except MagicSquareError as exc:
        print(exc)
        return 1
    print("\n" + format_square(square) + "\n")
    return 0