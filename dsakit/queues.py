"""Fixed-capacity queues and a deque helper."""

from __future__ import annotations

from collections import deque


class QueueFullError(Exception):
    """Raised when a value is pushed onto a full queue."""


class QueueEmptyError(Exception):
    """Raised when a value is taken from an empty queue."""


class CircularQueue:
    """A ring-buffer queue whose slots are reused as the front advances."""

    def __init__(self, capacity):
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list = [None] * capacity
        self._front = 0
        self._count = 0

    def push(self, value):
        capacity = len(self._slots)
        if self._count == capacity:
            raise QueueFullError("overflow")
        self._slots[(self._front + self._count) % capacity] = value
        self._count += 1

    def pop(self):
        """Remove and return the oldest value."""
        if not self._count:
            raise QueueEmptyError("underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._count -= 1
        self._front = (self._front + 1) % len(self._slots) if self._count else 0
        return value

    def slots(self):
        """The underlying slots in storage order; empty slots are None."""
        return list(self._slots)

    def __len__(self):
        return self._count


class ArrayQueue:
    """A linear array queue: freed front slots are reused only once it empties."""

    def __init__(self, capacity):
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list = [None] * capacity
        self._front = 0
        self._count = 0

    def push(self, value):
        end = self._front + self._count
        if end == len(self._slots):
            raise QueueFullError("queue is full, cannot insert")
        self._slots[end] = value
        self._count += 1

    def pop(self):
        """Remove and return the oldest value."""
        if not self._count:
            raise QueueEmptyError("underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._count -= 1
        self._front = self._front + 1 if self._count else 0
        return value

    def front(self):
        """Return the oldest value without removing it."""
        if not self._count:
            raise QueueEmptyError("no element in front")
        return self._slots[self._front]

    def slots(self):
        """The underlying slots in storage order; empty slots are None."""
        return list(self._slots)

    def __len__(self):
        return self._count


def insert_after_first(items, value):
    """Return the items as a list with ``value`` inserted after the first one."""
    result = deque(items)
    if not result:
        raise IndexError("cannot insert after the first element of an empty sequence")
    result.insert(1, value)
    return list(result)