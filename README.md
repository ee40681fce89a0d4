# dsadrills

dsadrills is a small set of classic programming drills. Each drill is a plain
Python function that returns a value, so you can inspect the result. You can
use the functions to study an algorithm, or to check your own answer to an
exercise against a known one.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `dsadrills.basics`

- `bitwise_summary(a, b)` returns a dict with the keys `"a|b"`, `"a&b"`, `"~a"` and `"a^b"`.
- `adjacent_run_count(text)` returns 2 if any two neighbouring characters are equal and 1 otherwise. The count starts again at every position, so it never goes above 2.
- `decimal_to_binary(n)` writes the binary digits of `n` as a decimal integer, so `5` gives `101`.
- `binary_to_decimal(n)` reads the decimal digits of `n` as bits, so `101` gives `5`. Only digits equal to 1 count.
- Both conversions raise `ValueError` for negative numbers.
- `digit_sum(n)` adds up the decimal digits of `n`. It returns 0 when `n <= 0`.
- `sum_to(n)` returns `1 + 2 + ... + n`. It returns 0 when `n < 1`.
- `fibonacci_series(n)` lists F(0) to F(n). The list always starts with `[0, 1]`.
- `is_prime(n)` tests whether `n` is prime. Numbers below 2 are not prime.
- `legs_needed(n)` divides `n` by four and rounds up. It raises `ValueError` for negative `n`.

### `dsadrills.patterns`

Each pattern function returns a list of lines. Numbers on a line are separated
by single spaces. `render(lines)` joins the lines into one string and ends
every line with a newline.

| Function | Shape |
| --- | --- |
| `column_numbers(rows=4, cols=4)` | Each of `rows` lines reads `1 2 ... cols` |
| `descending_rows(n)` | Each of `n` lines reads `n ... 2 1` |
| `counting_square(n)` | An n-by-n square holding 1, 2, 3, ... in order |
| `star_triangle(n)` | Line i holds i copies of `" * "` |
| `repeated_row_triangle(n=4)` | Line i repeats the number i, i times |
| `floyd_triangle(n=5)` | Floyd's triangle |
| `countdown_triangle(n)` | Line i reads `i ... 2 1` |
| `letter_square(n=5)` | n lines of n letters: `A` on the first line, then the next letter on each following line |

```python
from dsadrills.patterns import floyd_triangle, render

print(render(floyd_triangle(3)), end="")
# 1
# 2 3
# 4 5 6
```

### `dsadrills.sorting`

Both functions accept any iterable and return a new ascending list.

- `merge_sort(items)` sorts by top-down merge sort.
- `quick_sort(items)` sorts by quick sort, using the first element of each range as the pivot.

```python
from dsadrills.sorting import merge_sort, quick_sort

merge_sort([1, 4, 2, 5, 3])     # [1, 2, 3, 4, 5]
quick_sort([4, 6, 5, 2, 1, 9])  # [1, 2, 4, 5, 6, 9]
```

### `dsadrills.recursion`

- `count_up(n)` and `count_up_from_end(n)` both return `[1, ..., n]`, built in two different recursive ways.
- `recursive_sum(n)` returns the sum of 1 to n.
- `factorial(n)` returns n!.
- `power(base, exponent)` raises `base` to a non-negative whole exponent.
- `fibonacci(n)` returns F(n), with F(0) = 0 and F(1) = 1.
- The four functions above raise `ValueError` when given a negative number.
- `reverse_list(items)` returns a new list in reverse order.
- `bubble_sort(items)` returns a new sorted list.
- `linear_search(items, target)` returns `True` if `target` is in `items`.
- `list_sum(items)` adds up a sequence. It returns 0 when the sequence is empty.
- `climb_stairs(n)` counts the ways to climb `n` stairs in steps of one or two.
- `letter_combinations(digits)` lists every word a phone keypad can spell from a string of digits, in keypad order. A string containing 0 or 1 spells nothing. Any character that is not a digit raises `ValueError`.
- `subsets(items)` lists every subset of a sequence. `subsequences(text)` lists every subsequence of a string.
- `say_digits(n)` gives the English word for each digit of `n`. `say_digits(0)` returns an empty list, and negative numbers raise `ValueError`.

```python
from dsadrills.recursion import letter_combinations, say_digits, subsets

letter_combinations("24")  # ['ag', 'ah', 'ai', 'bg', 'bh', 'bi', 'cg', 'ch', 'ci']
say_digits(412)            # ['four', 'one', 'two']
subsets([1, 2])            # [[], [2], [1], [1, 2]]
```

## What it does not do

dsadrills is a library only. It installs no command, reads no input, and
prints nothing. To see a drill's output, call its function and print the
result, or use `render` for the patterns.