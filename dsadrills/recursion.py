"""Recursive drills: searching, summing, counting and spelling digits."""

from functools import lru_cache

DIGIT_WORDS = (
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


def binary_search(values, key):
    """Tell whether ``key`` occurs in the ascending sequence ``values``."""

    def search(start, end):
        if start > end:
            return False
        mid = start + (end - start) // 2
        if values[mid] == key:
            return True
        if values[mid] < key:
            return search(mid + 1, end)
        return search(start, mid - 1)

    return search(0, len(values) - 1)


@lru_cache(maxsize=None)
def climb_stairs(n):
    """Count the ways to climb ``n`` stairs taking one or two steps at a time."""
    if n < 0:
        return 0
    if n == 0:
        return 1
    return climb_stairs(n - 1) + climb_stairs(n - 2)


def array_sum(values):
    """Return the sum of ``values``, adding the first to the sum of the rest."""

    def total(index):
        if index == len(values):
            return 0
        return values[index] + total(index + 1)

    return total(0)


def is_sorted(values):
    """Tell whether ``values`` is in non-decreasing order."""

    def check(index):
        if index + 1 >= len(values):
            return True
        if values[index] > values[index + 1]:
            return False
        return check(index + 1)

    return check(0)


def contains(values, key):
    """Tell whether ``key`` occurs in ``values``, checking one value at a time."""

    def search(index):
        if index == len(values):
            return False
        if values[index] == key:
            return True
        return search(index + 1)

    return search(0)


def power_of_two(n):
    """Return 2 raised to the non-negative power ``n``."""
    if n < 0:
        raise ValueError("the exponent must not be negative")
    if n == 0:
        return 1
    return 2 * power_of_two(n - 1)


def count_up(n):
    """Return the numbers from 1 to ``n`` in increasing order."""
    if n < 0:
        raise ValueError("cannot count up to a negative number")
    if n == 0:
        return []
    return count_up(n - 1) + [n]


def reach_home(source, destination):
    """Return every position walked through, one step at a time, from
    ``source`` to ``destination`` inclusive."""
    if source > destination:
        raise ValueError("the source must not lie beyond the destination")
    if source == destination:
        return [source]
    return [source] + reach_home(source + 1, destination)


def say_digits(num):
    """Return the English word for each digit of ``num``, most significant first.

    Zero has no digits left to say and gives an empty list.
    """
    if num < 0:
        raise ValueError("digits are spelt for non-negative numbers only")
    if num == 0:
        return []
    rest, digit = divmod(num, 10)
    return say_digits(rest) + [DIGIT_WORDS[digit]]