"""Doubly linked list of integers and merging of two sorted ones."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _Node:
    value: int
    next: Optional[_Node] = None
    prev: Optional[_Node] = None


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _find(self, value: int) -> _Node:
        for node in self._nodes():
            if node.value == value:
                return node
        raise ValueError(f"{value!r} is not in the list")

    def push_front(self, value: int) -> None:
        """Put ``value`` before the first node."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Put ``value`` after the last node."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_after(self, target: int, value: int) -> None:
        """Insert ``value`` right after the first node holding ``target``."""
        previous = self._find(target)
        node = _Node(value, next=previous.next, prev=previous)
        if previous.next is None:
            self._tail = node
        else:
            previous.next.prev = node
        previous.next = node
        self._size += 1

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``."""
        if self._head is None:
            raise ValueError("remove from an empty list")
        node = self._find(value)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size


_END = object()


def merge_sorted_doubly(first: Iterable[int], second: Iterable[int]) -> DoublyLinkedList:
    """A new list holding the values of two sorted sequences, in sorted order.

    On equal values the one from ``second`` comes first.
    """
    left, right = iter(first), iter(second)
    merged = DoublyLinkedList()
    a = next(left, _END)
    b = next(right, _END)
    while a is not _END and b is not _END:
        if a < b:  # type: ignore[operator]
            merged.push_back(a)  # type: ignore[arg-type]
            a = next(left, _END)
        else:
            merged.push_back(b)  # type: ignore[arg-type]
            b = next(right, _END)
    for pending, rest in ((a, left), (b, right)):
        if pending is not _END:
            merged.push_back(pending)  # type: ignore[arg-type]
            for value in rest:
                merged.push_back(value)
    return merged