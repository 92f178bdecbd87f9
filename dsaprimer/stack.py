"""Last-in first-out stacks: one of fixed capacity, one backed by a linked list."""

from __future__ import annotations

from typing import Any

from dsaprimer.linkedlist import LinkedList


class StackFullError(Exception):
    """Raised when pushing onto a stack that is at capacity."""


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 20) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        if len(self._items) >= self.capacity:
            raise StackFullError(f"stack is full ({self.capacity} items)")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack:
    """An unbounded stack whose top is the front of a linked list."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._list.add_at_begin(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._list:
            raise StackEmptyError("pop from empty stack")
        return self._list.remove_first()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._list:
            raise StackEmptyError("peek at empty stack")
        return next(iter(self._list))

    def __len__(self) -> int:
        return len(self._list)