"""Small number drills: digits, grading, days, factorials, primes and series."""

from math import isqrt

_DAY_NAMES = {
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
    7: "Sunday",
}

# Upper bound of each grade band, checked in order.
_GRADE_BANDS = (
    (24, "F"),
    (44, "E"),
    (49, "D"),
    (59, "C"),
    (79, "B"),
    (100, "A"),
)

NOTE_VALUES = (100, 50, 20, 1)


def _digits(n):
    """Yield the decimal digits of ``abs(n)``, least significant first."""
    remaining = abs(n)
    while remaining:
        remaining, digit = divmod(remaining, 10)
        yield digit


def count_dividing_digits(n):
    """Count the digits of ``n`` that divide it evenly; zero digits are skipped."""
    return sum(1 for digit in _digits(n) if digit and n % digit == 0)


def count_digits(n):
    """Count the decimal digits of ``n``; zero has no digits to strip and gives 0."""
    return sum(1 for _ in _digits(n))


def grade(marks):
    """Return the letter grade for ``marks``; marks above 100 are invalid."""
    for upper, letter in _GRADE_BANDS:
        if marks <= upper:
            return letter
    raise ValueError(f"invalid marks entered: {marks}")


def day_name(day):
    """Return the weekday name for ``day`` numbered 1 (Monday) to 7 (Sunday)."""
    try:
        return _DAY_NAMES[day]
    except KeyError:
        raise ValueError(f"invalid day number: {day}") from None


def factorial(n):
    """Return ``n!`` computed recursively."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def ncr(n, r):
    """Return the number of ways to choose ``r`` items out of ``n``."""
    if not 0 <= r <= n:
        raise ValueError("r must satisfy 0 <= r <= n")
    return factorial(n) // (factorial(r) * factorial(n - r))


def is_prime(n):
    """Tell whether ``n`` has no divisor between 2 and ``n - 1``.

    Numbers below 2 have no such divisor and are reported as prime.
    """
    return all(n % divisor for divisor in range(2, isqrt(n) + 1)) if n >= 2 else True


def power(base, exponent):
    """Return ``base`` multiplied by itself ``exponent`` times (1 if none)."""
    return base**exponent if exponent > 0 else 1


def count_notes(amount):
    """Split ``amount`` into notes of 100, 50, 20 and 1, largest first."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    notes = {}
    for value in NOTE_VALUES:
        notes[value], amount = divmod(amount, value)
    return notes


def counting(n):
    """Return the numbers from 1 to ``n`` inclusive."""
    return list(range(1, n + 1))


def ap_term(n):
    """Return the ``n``-th term of the series ``3n + 7``."""
    return 3 * n + 7


def set_bits(n):
    """Count the 1 bits of a non-negative integer."""
    if n < 0:
        raise ValueError("set bits are counted for non-negative numbers only")
    return bin(n).count("1")


def fibonacci(n):
    """Return the ``n``-th Fibonacci term, counting 0 as the first."""
    if n < 1:
        raise ValueError("terms are numbered from 1")
    previous, current = 0, 1
    if n == 1:
        return previous
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current