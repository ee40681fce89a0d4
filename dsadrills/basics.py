"""Small number drills: bit operators, base conversion, digit sums and loops."""

from __future__ import annotations


def bitwise_summary(a: int, b: int) -> dict[str, int]:
    """Return the results of ``a|b``, ``a&b``, ``~a`` and ``a^b`` keyed by expression."""
    return {
        "a|b": a | b,
        "a&b": a & b,
        "~a": ~a,
        "a^b": a ^ b,
    }


def adjacent_run_count(text: str) -> int:
    """Return 2 if any two neighbouring characters are equal, otherwise 1.

    The counter restarts at every position, so a run never counts past two.
    """
    count = 1
    for left, right in zip(text, text[1:]):
        run = 2 if left == right else 1
        count = max(count, run)
    return count


def decimal_to_binary(n: int) -> int:
    """Return the binary digits of ``n`` written as a decimal integer (5 -> 101)."""
    if n < 0:
        raise ValueError("decimal_to_binary needs a non-negative number")
    return int(format(n, "b"))


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as bits; only digits equal to 1 count."""
    if n < 0:
        raise ValueError("binary_to_decimal needs a non-negative number")
    return sum(2**place for place, digit in enumerate(reversed(str(n))) if digit == "1")


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``; zero for ``n <= 0``."""
    if n <= 0:
        return 0
    return sum(int(digit) for digit in str(n))


def sum_to(n: int) -> int:
    """Return ``1 + 2 + ... + n``; zero when ``n < 1``."""
    return sum(range(1, n + 1))


def fibonacci_series(n: int) -> list[int]:
    """Return the Fibonacci numbers F(0)..F(n), always starting with ``[0, 1]``."""
    series = [0, 1]
    first, second = 0, 1
    for _ in range(2, n + 1):
        first, second = second, first + second
        series.append(second)
    return series


def is_prime(n: int) -> bool:
    """Return True if ``n`` has no divisor between 2 and ``n - 1``."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def legs_needed(n: int) -> int:
    """Return the fewest groups of four needed to cover ``n`` legs (rounded up)."""
    if n < 0:
        raise ValueError("legs_needed needs a non-negative number")
    groups, rest = divmod(n, 4)
    return groups if rest == 0 else groups + 1