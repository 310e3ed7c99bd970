import math

import pytest

from dsadrills.numbers import (
    NOTE_VALUES,
    ap_term,
    count_digits,
    count_dividing_digits,
    count_notes,
    counting,
    day_name,
    factorial,
    fibonacci,
    grade,
    is_prime,
    ncr,
    power,
    set_bits,
)


@pytest.mark.parametrize("k", range(1, 8))
def test_count_digits_of_powers_of_ten(k):
    assert count_digits(10**k) == k + 1


def test_count_digits_zero_and_sign():
    assert count_digits(0) == 0
    assert count_digits(-4567) == count_digits(4567)


@pytest.mark.parametrize("n", [1, 11, 111, 1111])
def test_count_dividing_digits_repunits(n):
    assert count_dividing_digits(n) == len(str(n))


@pytest.mark.parametrize("k", range(1, 6))
def test_count_dividing_digits_skips_zero(k):
    assert count_dividing_digits(10**k) == 1


def test_count_dividing_digits_zero():
    assert count_dividing_digits(0) == 0


@pytest.mark.parametrize(
    "marks, letter",
    [
        (0, "F"), (24, "F"), (25, "E"), (44, "E"), (45, "D"), (49, "D"),
        (50, "C"), (59, "C"), (60, "B"), (79, "B"), (80, "A"), (100, "A"),
    ],
)
def test_grade_bands(marks, letter):
    assert grade(marks) == letter


def test_grade_invalid():
    with pytest.raises(ValueError):
        grade(101)


@pytest.mark.parametrize(
    "day, name",
    [(1, "Monday"), (2, "Tuesday"), (3, "Wednesday"), (4, "Thursday"),
     (5, "Friday"), (6, "Saturday"), (7, "Sunday")],
)
def test_day_name(day, name):
    assert day_name(day) == name


@pytest.mark.parametrize("day", [0, 8, -1])
def test_day_name_invalid(day):
    with pytest.raises(ValueError):
        day_name(day)


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


@pytest.mark.parametrize("n, r", [(5, 2), (10, 0), (10, 10), (12, 5), (7, 3)])
def test_ncr_matches_comb(n, r):
    assert ncr(n, r) == math.comb(n, r)


def test_ncr_symmetry():
    assert ncr(9, 4) == ncr(9, 5)


@pytest.mark.parametrize("n, r", [(3, 4), (3, -1)])
def test_ncr_invalid(n, r):
    with pytest.raises(ValueError):
        ncr(n, r)


@pytest.mark.parametrize("p", [2, 3, 5, 7, 13, 97])
def test_is_prime_primes(p):
    assert is_prime(p) is True


@pytest.mark.parametrize("a, b", [(2, 2), (3, 5), (7, 11), (9, 13)])
def test_is_prime_products(a, b):
    assert is_prime(a * b) is False


@pytest.mark.parametrize("base, exponent", [(2, 10), (3, 4), (-2, 3), (7, 1)])
def test_power_matches_builtin(base, exponent):
    assert power(base, exponent) == pow(base, exponent)


def test_power_zero_exponent():
    assert power(5, 0) == 1


@pytest.mark.parametrize("amount", [0, 1, 19, 20, 49, 50, 99, 100, 187, 1234])
def test_count_notes_invariants(amount):
    notes = count_notes(amount)
    assert list(notes) == list(NOTE_VALUES)
    assert sum(value * count for value, count in notes.items()) == amount
    assert notes[50] <= 1
    assert notes[20] <= 2
    assert notes[1] < 20


def test_count_notes_negative():
    with pytest.raises(ValueError):
        count_notes(-5)


@pytest.mark.parametrize("n", [1, 5, 12])
def test_counting(n):
    result = counting(n)
    assert len(result) == n
    assert result[0] == 1 and result[-1] == n
    assert all(b - a == 1 for a, b in zip(result, result[1:]))


def test_counting_empty():
    assert counting(0) == []


def test_ap_term():
    assert ap_term(0) == 7
    assert all(ap_term(n + 1) - ap_term(n) == 3 for n in range(20))


@pytest.mark.parametrize("k", range(0, 12))
def test_set_bits_powers(k):
    assert set_bits(2**k) == 1
    assert set_bits(2**k - 1) == k


def test_set_bits_negative():
    with pytest.raises(ValueError):
        set_bits(-3)


def test_fibonacci_start_and_recurrence():
    assert fibonacci(1) == 0
    assert fibonacci(2) == 1
    for n in range(3, 25):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_invalid():
    with pytest.raises(ValueError):
        fibonacci(0)