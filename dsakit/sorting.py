"""Divide-and-conquer sorting."""

from __future__ import annotations

import heapq


def merge_sort(values):
    """Return a new list holding ``values`` in ascending order.

    The sort is stable: equal elements keep their relative order.
    """
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    left = merge_sort(items[:mid])
    right = merge_sort(items[mid:])
    return list(heapq.merge(left, right))