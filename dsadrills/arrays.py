"""Array drills: searching, reversing, swapping, extremes and merging."""

from functools import reduce
from operator import xor


def linear_search(values, key):
    """Return every index at which ``key`` occurs in ``values``."""
    return [index for index, value in enumerate(values) if value == key]


def reverse_array(values):
    """Return the values in reverse order."""
    return list(reversed(values))


def swap_alternate(values):
    """Swap each pair of neighbours (0 with 1, 2 with 3, ...); an odd last value stays."""
    result = list(values)
    result[0:-1:2], result[1::2] = result[1::2], result[0:-1:2]
    return result


def find_duplicate(values):
    """Find the one repeated number in a sequence holding 1 to n-1 plus a duplicate.

    All values are XOR-ed together and with every number from 1 to n-1, so
    each number cancels out except the one that appears twice.
    """
    values = list(values)
    return reduce(xor, values, 0) ^ reduce(xor, range(1, len(values)), 0)


def get_min(values):
    """Return the smallest value."""
    values = list(values)
    if not values:
        raise ValueError("minimum of an empty sequence")
    smallest = values[0]
    for value in values[1:]:
        if value < smallest:
            smallest = value
    return smallest


def get_max(values):
    """Return the largest value."""
    values = list(values)
    if not values:
        raise ValueError("maximum of an empty sequence")
    largest = values[0]
    for value in values[1:]:
        if value > largest:
            largest = value
    return largest


def sort_zeros_ones(values):
    """Return the 0s and 1s of ``values`` with every 0 before every 1.

    Two pointers move inwards from both ends, swapping a misplaced 1 on
    the left with a misplaced 0 on the right.
    """
    result = list(values)
    unexpected = set(result) - {0, 1}
    if unexpected:
        raise ValueError(f"only 0 and 1 can be sorted: {sorted(unexpected)}")
    left, right = 0, len(result) - 1
    while left < right:
        while result[left] == 0 and left < right:
            left += 1
        while result[right] == 1 and left < right:
            right -= 1
        if left < right:
            result[left], result[right] = result[right], result[left]
            left += 1
            right -= 1
    return result


def merge_sorted(first, second):
    """Merge two ascending sequences into one ascending list."""
    first, second = list(first), list(second)
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if second[j] < first[i]:
            merged.append(second[j])
            j += 1
        else:
            merged.append(first[i])
            i += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged