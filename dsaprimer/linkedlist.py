"""Singly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False, slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """A singly linked list supporting insertion and removal by 1-based position."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def add_at_begin(self, value: Any) -> None:
        """Put ``value`` in front of the first item."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Put ``value`` after the last item."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, value: Any, position: int) -> None:
        """Insert ``value`` after the ``position``-th item.

        A position below 1 inserts at the front. The new item may not become
        the last one: a position of ``len(self)`` or more raises IndexError.
        """
        if position < 1:
            self.add_at_begin(value)
            return
        if position >= self._size:
            raise IndexError(
                f"cannot insert after position {position} in a list of {self._size}"
            )
        previous = self._node_at(position - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def remove_first(self) -> Any:
        """Remove and return the first item."""
        if self._head is None:
            raise IndexError("remove from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def remove_last(self) -> Any:
        """Remove and return the last item."""
        if self._head is None:
            raise IndexError("remove from empty list")
        if self._size == 1:
            return self.remove_first()
        previous = self._node_at(self._size - 2)
        assert self._tail is not None
        value = self._tail.value
        previous.next = None
        self._tail = previous
        self._size -= 1
        return value

    def remove_nth(self, position: int) -> Any:
        """Remove and return the item at 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range for {self._size} items")
        if position == 1:
            return self.remove_first()
        if position == self._size:
            return self.remove_last()
        previous = self._node_at(position - 2)
        node = previous.next
        assert node is not None
        previous.next = node.next
        self._size -= 1
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"