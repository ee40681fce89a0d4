import itertools
import math

import pytest

from dsadrills.recursion import (
    bubble_sort,
    climb_stairs,
    count_up,
    count_up_from_end,
    factorial,
    fibonacci,
    letter_combinations,
    linear_search,
    list_sum,
    power,
    recursive_sum,
    reverse_list,
    say_digits,
    subsequences,
    subsets,
)


@pytest.mark.parametrize("n", [0, 1, 5, 30])
def test_count_up_matches_range(n):
    assert count_up(n) == list(range(1, n + 1))


@pytest.mark.parametrize("n", [0, 1, 5, 30])
def test_count_up_from_end_matches_count_up(n):
    assert count_up_from_end(n) == count_up(n)


def test_count_up_negative_is_empty():
    assert count_up(-3) == []
    assert count_up_from_end(-3) == []


@pytest.mark.parametrize("n", [0, 1, 2, 10, 100])
def test_recursive_sum_closed_form(n):
    assert recursive_sum(n) == n * (n + 1) // 2


def test_recursive_sum_rejects_negative():
    with pytest.raises(ValueError):
        recursive_sum(-1)


@pytest.mark.parametrize("n", [0, 1, 5, 12, 20])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_rejects_negative():
    with pytest.raises(ValueError):
        factorial(-2)


@pytest.mark.parametrize("items", [[], [1], [1, 2], [5, 3, 8, 1, 9], list("abcdef")])
def test_reverse_list_matches_reversed(items):
    original = list(items)
    result = reverse_list(items)
    assert result == original[::-1]
    assert items == original


def test_reverse_list_twice_is_identity():
    data = [7, 2, 9, 4, 4, 1]
    assert reverse_list(reverse_list(data)) == data


@pytest.mark.parametrize(
    "items", [[4, 2, 1, 5, 7], [], [1], [3, 3, 1, 2], [9, 8, 7, 6, 5, 4], [-1, 5, 0, -7]]
)
def test_bubble_sort_matches_sorted(items):
    original = list(items)
    assert bubble_sort(items) == sorted(original)
    assert items == original


def test_climb_stairs_base_cases():
    assert climb_stairs(0) == 1
    assert climb_stairs(-1) == 0


@pytest.mark.parametrize("n", [1, 2, 3, 10, 25])
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


@pytest.mark.parametrize("n", range(0, 15))
def test_climb_stairs_is_shifted_fibonacci(n):
    assert climb_stairs(n) == fibonacci(n + 1)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", [2, 3, 10, 40])
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_rejects_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_letter_combinations_empty_digits_gives_empty_word():
    assert letter_combinations("") == [""]


@pytest.mark.parametrize("digits", ["0", "1", "210", "71"])
def test_letter_combinations_zero_and_one_spell_nothing(digits):
    assert letter_combinations(digits) == []


def test_letter_combinations_lengths():
    words = letter_combinations("79")
    assert len(words) == len("pqrs") * len("wxyz")
    assert all(len(word) == 2 for word in words)


def test_letter_combinations_rejects_non_digit():
    with pytest.raises(ValueError):
        letter_combinations("2a")


@pytest.mark.parametrize("base,exponent", [(3, 10), (2, 0), (-2, 5), (0, 3), (7, 1)])
def test_power_matches_builtin(base, exponent):
    assert power(base, exponent) == base**exponent


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


def test_subsets_source_example_order():
    assert subsets([1, 2]) == [[], [2], [1], [1, 2]]


@pytest.mark.parametrize("items", [[], [1], [1, 2, 3], [4, 5, 6, 7]])
def test_subsets_are_all_combinations(items):
    result = subsets(items)
    assert len(result) == 2 ** len(items)
    expected = {
        combo for size in range(len(items) + 1) for combo in itertools.combinations(items, size)
    }
    assert {tuple(subset) for subset in result} == expected


def test_say_digits_words():
    assert say_digits(1203) == ["one", "two", "zero", "three"]
    assert say_digits(9) == ["nine"]


def test_say_digits_zero_is_silent():
    assert say_digits(0) == []


@pytest.mark.parametrize("n", [5, 48, 1000, 987654321])
def test_say_digits_one_word_per_digit(n):
    assert len(say_digits(n)) == len(str(n))


def test_say_digits_rejects_negative():
    with pytest.raises(ValueError):
        say_digits(-4)


def test_linear_search_source_example():
    assert linear_search([2, 4, 6, 3, 7], 0) is False


@pytest.mark.parametrize("target", [2, 4, 6, 3, 7])
def test_linear_search_finds_every_element(target):
    assert linear_search([2, 4, 6, 3, 7], target) is True


def test_linear_search_empty():
    assert linear_search([], 1) is False


def test_subsequences_source_example_order():
    assert subsequences("abc") == ["", "c", "b", "bc", "a", "ac", "ab", "abc"]


@pytest.mark.parametrize("text", ["", "x", "abcd", "hello"])
def test_subsequences_count_and_order(text):
    result = subsequences(text)
    assert len(result) == 2 ** len(text)
    assert result[0] == ""
    assert result[-1] == text
    for seq in result:
        it = iter(text)
        assert all(char in it for char in seq)


@pytest.mark.parametrize("items", [[4, 5, 2, 5, 6], [], [7], [-3, 3, 10], [1.5, 2.5]])
def test_list_sum_matches_sum(items):
    assert list_sum(items) == sum(items)