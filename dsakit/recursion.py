"""Simple whole-sequence operations: doubling, searching, filtering."""

from __future__ import annotations


def doubled(values):
    """Return every value multiplied by two."""
    return [2 * value for value in values]


def linear_search(values, key):
    """Return True if ``key`` occurs in ``values``."""
    return any(value == key for value in values)


def maximum(values):
    """Return the largest value."""
    items = list(values)
    if not items:
        raise ValueError("maximum of an empty sequence")
    return max(items)


def odd_elements(values):
    """Return the odd values, in order."""
    return [value for value in values if value % 2 != 0]


def digits(n):
    """Return the decimal digits of ``n``, most significant first.

    Zero has no digits; digits of a negative number carry its sign.
    """
    if n == 0:
        return []
    sign = -1 if n < 0 else 1
    return [sign * int(ch) for ch in str(abs(n))]


def is_sorted(values):
    """Return True if ``values`` is in non-decreasing order."""
    items = list(values)
    return all(a <= b for a, b in zip(items, items[1:]))