"""Text patterns built row by row from numbers, stars and letters."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import count


def _row(values: Iterable[object]) -> str:
    return " ".join(str(value) for value in values)


def column_numbers(rows: int = 4, cols: int = 4) -> list[str]:
    """Each of ``rows`` lines counts 1..cols."""
    return [_row(range(1, cols + 1)) for _ in range(rows)]


def descending_rows(n: int) -> list[str]:
    """Each of ``n`` lines counts down from n to 1."""
    return [_row(range(n, 0, -1)) for _ in range(n)]


def counting_square(n: int) -> list[str]:
    """An n-by-n square filled with 1, 2, 3, ... left to right, top to bottom."""
    numbers = count(1)
    return [_row(next(numbers) for _ in range(n)) for _ in range(n)]


def star_triangle(n: int) -> list[str]:
    """Line i holds i stars, each written as ``" * "``."""
    return [" * " * i for i in range(1, n + 1)]


def repeated_row_triangle(n: int = 4) -> list[str]:
    """Line i repeats the number i, i times."""
    return [_row([i] * i) for i in range(1, n + 1)]


def floyd_triangle(n: int = 5) -> list[str]:
    """Floyd's triangle: line i holds the next i consecutive numbers from 1."""
    numbers = count(1)
    return [_row(next(numbers) for _ in range(i)) for i in range(1, n + 1)]


def countdown_triangle(n: int) -> list[str]:
    """Line i counts down from i to 1."""
    return [_row(range(i, 0, -1)) for i in range(1, n + 1)]


def letter_square(n: int = 5) -> list[str]:
    """n lines of n letters, 'A' on the first line, the next letter on each after."""
    return [chr(ord("A") + i) * n for i in range(n)]


def render(lines: Iterable[str]) -> str:
    """Join pattern lines into printable text, each line ended by a newline."""
    return "".join(f"{line}\n" for line in lines)