"""Greedy algorithms and heap-driven selections."""

from __future__ import annotations

import heapq


def fractional_knapsack(values, weights, capacity):
    """Return the value gathered by filling ``capacity`` greedily by value/weight.

    Ratios are truncated to whole numbers, and so is the value taken from a
    partially used item; items with equal ratios are taken by larger value
    first, then by larger weight.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    items = []
    for value, weight in zip(values, weights, strict=True):
        if weight <= 0:
            raise ValueError("weights must be positive")
        items.append((int(value / weight), value, weight))
    items.sort(reverse=True)

    total = 0
    remaining = capacity
    for ratio, value, weight in items:
        if remaining == 0:
            break
        if remaining >= weight:
            total += value
            remaining -= weight
        else:
            total += int(ratio * remaining)
            break
    return total


def largest_free_area(rows, cols, towers):
    """Return the largest rectangle of cells no tower's row or column passes through.

    ``towers`` holds ``(x, y)`` positions, ``x`` a column in 1..cols and ``y``
    a row in 1..rows.
    """
    towers = list(towers)
    xs = sorted([0, cols + 1, *(x for x, _ in towers)])
    ys = sorted([0, rows + 1, *(y for _, y in towers)])
    x_gaps = [b - a - 1 for a, b in zip(xs, xs[1:])]
    y_gaps = [b - a - 1 for a, b in zip(ys, ys[1:])]
    return max(-1, max(gx * gy for gx in x_gaps for gy in y_gaps))


def min_rope_cost(lengths):
    """Return the least total cost of joining all ropes, each join costing the sum."""
    heap = list(lengths)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        joined = heapq.heappop(heap) + heapq.heappop(heap)
        cost += joined
        heapq.heappush(heap, joined)
    return cost


def max_affordable_items(prices, budget):
    """Return how many items can be bought cheapest first.

    An item is bought only while its price is strictly below the money left.
    """
    heap = list(prices)
    heapq.heapify(heap)
    count = 0
    while heap and heap[0] < budget:
        budget -= heapq.heappop(heap)
        count += 1
    return count


def heap_order(values):
    """Return the values in the order a min-heap releases them."""
    heap = list(values)
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(len(heap))]