"""Recursion drills: counting, sums, sequences, searches and combinations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache
from typing import Any, TypeVar

T = TypeVar("T")

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_DIGIT_WORDS = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} needs a non-negative number, got {value}")


def count_up(n: int) -> list[int]:
    """Return 1..n, built by recursing forward from 1."""

    def step(i: int) -> list[int]:
        if i > n:
            return []
        return [i, *step(i + 1)]

    return step(1)


def count_up_from_end(n: int) -> list[int]:
    """Return 1..n, built by recursing down from n and emitting on the way back."""
    if n < 1:
        return []
    return [*count_up_from_end(n - 1), n]


def recursive_sum(n: int) -> int:
    """Return ``n + (n - 1) + ... + 1``."""
    _require_non_negative("recursive_sum", n)
    if n == 0:
        return 0
    return n + recursive_sum(n - 1)


def factorial(n: int) -> int:
    """Return ``n!``."""
    _require_non_negative("factorial", n)
    if n == 0:
        return 1
    return n * factorial(n - 1)


def reverse_list(items: Iterable[T]) -> list[T]:
    """Return a new list with the items reversed, swapping ends inward."""
    values = list(items)

    def swap_from(i: int) -> None:
        if i >= len(values) // 2:
            return
        j = len(values) - i - 1
        values[i], values[j] = values[j], values[i]
        swap_from(i + 1)

    swap_from(0)
    return values


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list; each pass bubbles the largest item to the end."""
    values = list(items)

    def sort_prefix(n: int) -> None:
        if n <= 1:
            return
        for i in range(n - 1):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
        sort_prefix(n - 1)

    sort_prefix(len(values))
    return values


@lru_cache(maxsize=None)
def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` stairs taking one or two steps."""
    if n < 0:
        return 0
    if n == 0:
        return 1
    return climb_stairs(n - 1) + climb_stairs(n - 2)


@lru_cache(maxsize=None)
def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    _require_non_negative("fibonacci", n)
    if n < 2:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def letter_combinations(digits: str) -> list[str]:
    """Return every word a phone keypad can spell from ``digits``, in keypad order.

    Digits 0 and 1 carry no letters, so any string holding them spells nothing.
    """
    for char in digits:
        if char not in "0123456789":
            raise ValueError(f"not a keypad digit: {char!r}")

    def spell(index: int, prefix: str) -> list[str]:
        if index >= len(digits):
            return [prefix]
        words: list[str] = []
        for letter in _KEYPAD[int(digits[index])]:
            words.extend(spell(index + 1, prefix + letter))
        return words

    return spell(0, "")


def power(base: int, exponent: int) -> int:
    """Return ``base`` raised to a non-negative ``exponent`` by repeated multiplication."""
    _require_non_negative("power", exponent)
    if exponent == 0:
        return 1
    return base * power(base, exponent - 1)


def subsets(items: Sequence[T]) -> list[list[T]]:
    """Return all subsets of ``items``; each element is first left out, then taken."""

    def choose(index: int, chosen: list[T]) -> list[list[T]]:
        if index >= len(items):
            return [chosen]
        return choose(index + 1, chosen) + choose(index + 1, [*chosen, items[index]])

    return choose(0, [])


def say_digits(n: int) -> list[str]:
    """Return the English word for each decimal digit of ``n``, most significant first.

    Zero has no digits to say and gives an empty list.
    """
    _require_non_negative("say_digits", n)
    if n == 0:
        return []
    rest, digit = divmod(n, 10)
    return [*say_digits(rest), _DIGIT_WORDS[digit]]


def linear_search(items: Sequence[Any], target: Any) -> bool:
    """Return True if ``target`` occurs in ``items``, checking from the front."""

    def search(index: int) -> bool:
        if index >= len(items):
            return False
        if items[index] == target:
            return True
        return search(index + 1)

    return search(0)


def subsequences(text: str) -> list[str]:
    """Return every subsequence of ``text``; each character is first left out, then taken."""

    def choose(index: int, chosen: str) -> list[str]:
        if index >= len(text):
            return [chosen]
        return choose(index + 1, chosen) + choose(index + 1, chosen + text[index])

    return choose(0, "")


def list_sum(items: Sequence[Any]) -> Any:
    """Return the sum of ``items``, head plus the sum of the rest; zero when empty."""

    def total(index: int) -> Any:
        if index >= len(items):
            return 0
        if index == len(items) - 1:
            return items[index]
        return items[index] + total(index + 1)

    return total(0)