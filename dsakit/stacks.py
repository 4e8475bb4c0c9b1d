"""Bounded stacks and algorithms built on a stack."""

from __future__ import annotations

from collections.abc import Callable, Iterable


class StackOverflowError(Exception):
    """Raised when an element is pushed onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when an element is taken from an empty stack."""


class TwoStack:
    """Two stacks sharing one fixed capacity, growing towards each other."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._first: list = []
        self._second: list = []

    def _check_room(self) -> None:
        if len(self._first) + len(self._second) >= self.capacity:
            raise StackOverflowError("overflow")

    def push1(self, element):
        """Push onto the first stack."""
        self._check_room()
        self._first.append(element)

    def push2(self, element):
        """Push onto the second stack."""
        self._check_room()
        self._second.append(element)

    def pop1(self):
        """Remove and return the top of the first stack."""
        if not self._first:
            raise StackUnderflowError("first stack is empty")
        return self._first.pop()

    def pop2(self):
        """Remove and return the top of the second stack."""
        if not self._second:
            raise StackUnderflowError("second stack is empty")
        return self._second.pop()


class BoundedStack:
    """A stack that holds at most ``capacity`` elements."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list = []

    def push(self, element):
        if len(self._items) >= self.capacity:
            raise StackOverflowError("overflow")
        self._items.append(element)

    def pop(self):
        """Remove and return the top element."""
        if not self._items:
            raise StackUnderflowError("underflow")
        return self._items.pop()

    def peek(self):
        """Return the top element without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self):
        return not self._items

    def __len__(self):
        return len(self._items)


def middle_element(items):
    """Pop the upper half (rounded up) of a stack and return the new top.

    ``items`` is given bottom first.
    """
    stack = list(items)
    remaining = len(stack) - (len(stack) + 1) // 2
    if remaining <= 0:
        raise StackUnderflowError("stack too small to have a middle element")
    return stack[remaining - 1]


def insert_sorted(stack, num):
    """Insert ``num`` into a list used as an ascending stack, keeping it sorted."""
    held = []
    while stack and stack[-1] > num:
        held.append(stack.pop())
    stack.append(num)
    stack.extend(reversed(held))


def monotonic_increasing(nums):
    """Return the increasing stack left after feeding ``nums``, bottom first."""
    stack: list = []
    for value in nums:
        while stack and stack[-1] > value:
            stack.pop()
        stack.append(value)
    return stack


def _nearest(values: Iterable, discard: Callable) -> list:
    stack: list = []
    answers = []
    for value in values:
        while stack and discard(stack[-1], value):
            stack.pop()
        answers.append(stack[-1] if stack else -1)
        stack.append(value)
    return answers


def next_smaller(values):
    """For each element, the nearest smaller element to its right, or -1."""
    answers = _nearest(reversed(list(values)), lambda top, cur: top >= cur)
    answers.reverse()
    return answers


def previous_greater(values):
    """For each element, the nearest greater element to its left, or -1."""
    return _nearest(values, lambda top, cur: top <= cur)


def previous_smaller(values):
    """For each element, the nearest smaller element to its left, or -1."""
    return _nearest(values, lambda top, cur: top >= cur)