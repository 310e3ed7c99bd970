"""Frequency counting by hashing, and distinct counts over sliding windows."""

from collections import Counter
from string import ascii_lowercase

_LOWERCASE = frozenset(ascii_lowercase)


def char_frequencies(text):
    """Count each lowercase letter of ``text``; unseen letters count 0."""
    unexpected = set(text) - _LOWERCASE
    if unexpected:
        raise ValueError(f"only lowercase letters are counted: {sorted(unexpected)}")
    return Counter(text)


def frequencies(values):
    """Count occurrences of each value, ordered by value; unseen values count 0."""
    return Counter(dict(sorted(Counter(values).items())))


def distinct_in_windows(values, k):
    """Return the number of distinct values in each window of ``k`` consecutive values."""
    values = list(values)
    if not 1 <= k <= len(values):
        raise ValueError("window size must be between 1 and the number of values")
    window = Counter(values[:k])
    counts = [len(window)]
    for leaving, entering in zip(values, values[k:]):
        window[leaving] -= 1
        if not window[leaving]:
            del window[leaving]
        window[entering] += 1
        counts.append(len(window))
    return counts