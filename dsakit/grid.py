"""Traversals and aggregates over rectangular two-dimensional grids."""

from __future__ import annotations


def _cells(grid):
    return [value for row in grid for value in row]


def rows(grid):
    """Return the grid row by row."""
    return [list(row) for row in grid]


def columns(grid):
    """Return the grid column by column."""
    return [list(column) for column in zip(*grid)]


def contains(grid, target):
    """Return True if ``target`` occurs anywhere in the grid."""
    return any(target in row for row in grid)


def grid_max(grid):
    """Return the largest value in the grid."""
    cells = _cells(grid)
    if not cells:
        raise ValueError("maximum of an empty grid")
    return max(cells)


def grid_min(grid):
    """Return the smallest value in the grid."""
    cells = _cells(grid)
    if not cells:
        raise ValueError("minimum of an empty grid")
    return min(cells)


def row_sums(grid):
    """Return the sum of each row."""
    return [sum(row) for row in grid]


def column_sums(grid):
    """Return the sum of each column."""
    return [sum(column) for column in zip(*grid)]


def diagonal_sum(grid):
    """Return the sum of the main diagonal."""
    return sum(row[i] for i, row in enumerate(grid) if i < len(row))