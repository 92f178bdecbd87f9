"""Functions over bare singly linked nodes, where a list is its head node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False, slots=True)
class Node:
    """One link of a singly linked list."""

    data: Any
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def _walk(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_list(values: Iterable[Any]) -> Node | None:
    """Link ``values`` into nodes and return the head, or None when empty."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Node | None) -> list[Any]:
    """Return the data of every node from ``head`` onwards."""
    return [node.data for node in _walk(head)]


def length(head: Node | None) -> int:
    """Count the nodes from ``head`` onwards."""
    return sum(1 for _ in _walk(head))


def contains(head: Node | None, value: Any) -> bool:
    """Tell whether any node holds ``value``."""
    return any(node.data == value for node in _walk(head))


def remove_head(head: Node | None) -> Node | None:
    """Drop the first node and return the new head."""
    if head is None:
        return None
    return head.next


def remove_tail(head: Node | None) -> Node | None:
    """Drop the last node and return the head; None if at most one node."""
    if head is None or head.next is None:
        return None
    previous = head
    while previous.next is not None and previous.next.next is not None:
        previous = previous.next
    previous.next = None
    return head


def _node_at(head: Node, steps: int) -> Node:
    node = head
    for _ in range(steps):
        assert node.next is not None
        node = node.next
    return node


def remove_kth(head: Node | None, k: int) -> Node | None:
    """Drop the ``k``-th node (1-based) and return the head.

    A ``k`` at or beyond the length drops the last node; a ``k`` below 1
    leaves the list unchanged.
    """
    if head is None:
        return None
    if k == 1:
        return remove_head(head)
    if k >= length(head):
        return remove_tail(head)
    if k < 1:
        return head
    previous = _node_at(head, k - 2)
    assert previous.next is not None
    previous.next = previous.next.next
    return head


def remove_value(head: Node | None, value: Any) -> Node | None:
    """Drop the first node holding ``value`` and return the head."""
    if head is None:
        return None
    if head.data == value:
        return head.next
    previous = head
    while previous.next is not None:
        if previous.next.data == value:
            previous.next = previous.next.next
            break
        previous = previous.next
    return head


def insert_head(head: Node | None, value: Any) -> Node:
    """Put a node holding ``value`` in front and return it."""
    return Node(value, head)


def insert_last(head: Node | None, value: Any) -> Node:
    """Put a node holding ``value`` at the end and return the head."""
    node = Node(value)
    if head is None:
        return node
    *_, last = _walk(head)
    last.next = node
    return head


def insert_kth(head: Node | None, value: Any, position: int) -> Node | None:
    """Insert ``value`` so that it becomes the ``position``-th node (1-based).

    A position past the end appends; a position below 1 on a non-empty list
    leaves it unchanged.
    """
    if head is None:
        return Node(value)
    if position == 1:
        return insert_head(head, value)
    if position > length(head):
        return insert_last(head, value)
    if position < 1:
        return head
    previous = _node_at(head, position - 2)
    previous.next = Node(value, previous.next)
    return head


def insert_before_value(head: Node | None, target: Any, value: Any) -> Node | None:
    """Insert ``value`` before the first node holding ``target``.

    An empty list stays empty, and a list without ``target`` is unchanged.
    """
    if head is None:
        return None
    if head.data == target:
        return Node(value, head)
    previous = head
    while previous.next is not None:
        if previous.next.data == target:
            previous.next = Node(value, previous.next)
            break
        previous = previous.next
    return head