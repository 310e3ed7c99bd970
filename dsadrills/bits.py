"""Bit manipulation drills and decimal/binary conversions."""

_INT_MAX = 2**31 - 1
_NEGATIVE_WIDTH = 10


def bit_operations(num, k):
    """Return the ``k``-th bit of ``num`` (1 = least significant) and ``num``
    with that bit set and cleared, as ``(bit, set_value, cleared_value)``."""
    if k < 1:
        raise ValueError("bits are numbered from 1")
    mask = 1 << (k - 1)
    return (num >> (k - 1)) & 1, num | mask, num & ~mask


def bitwise_complement(n):
    """Flip every bit of ``n`` up to its highest set bit; 0 gives 1."""
    if n < 0:
        raise ValueError("complement is defined for non-negative numbers")
    if n == 0:
        return 1
    mask = (1 << n.bit_length()) - 1
    return ~n & mask


def decimal_to_binary(n):
    """Return the binary digits of a non-negative integer."""
    if n < 0:
        raise ValueError("use signed_binary for negative numbers")
    return format(n, "b")


def binary_to_decimal(bits):
    """Return the value of a string of binary digits; an empty string is 0."""
    if set(bits) - {"0", "1"}:
        raise ValueError(f"not a binary string: {bits!r}")
    return int(bits, 2) if bits else 0


def reverse_integer(x):
    """Reverse the decimal digits of ``x``, returning 0 on 32-bit overflow."""
    sign = -1 if x < 0 else 1
    remaining = abs(x)
    result = 0
    while remaining:
        if result > _INT_MAX // 10:
            return 0
        remaining, digit = divmod(remaining, 10)
        result = result * 10 + digit
    return sign * result


def signed_binary(n):
    """Return the binary digits of ``n``.

    Negative numbers are shown as their lowest ten two's-complement bits,
    without leading zeros.
    """
    if n < 0:
        n &= (1 << _NEGATIVE_WIDTH) - 1
    return format(n, "b")