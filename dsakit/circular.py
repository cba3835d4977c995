"""Circular linked lists: singly and doubly linked."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional


class _DoubleLink:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: _DoubleLink = self
        self.prev: _DoubleLink = self


class _Link:
    __slots__ = ("value", "next")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: _Link = self


class CircularDoublyLinkedList:
    """A ring of doubly linked nodes; the last node links back to the first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_DoubleLink] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[_DoubleLink]:
        head = self._head
        if head is None:
            return
        node = head
        while True:
            yield node
            node = node.next
            if node is head:
                break

    def _find(self, value: int) -> _DoubleLink:
        for node in self._nodes():
            if node.value == value:
                return node
        raise ValueError(f"{value!r} is not in the list")

    def _unlink(self, node: _DoubleLink) -> None:
        if node.next is node:
            self._head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        self._size -= 1

    def push_back(self, value: int) -> None:
        """Put ``value`` at the end of the ring, just before the head."""
        node = _DoubleLink(value)
        head = self._head
        if head is None:
            self._head = node
        else:
            tail = head.prev
            tail.next = node
            node.prev = tail
            node.next = head
            head.prev = node
        self._size += 1

    def push_front(self, value: int) -> None:
        """Put ``value`` before the head and make it the new head."""
        self.push_back(value)
        assert self._head is not None
        self._head = self._head.prev

    def insert_after(self, target: int, value: int) -> None:
        """Insert ``value`` right after the first node holding ``target``."""
        previous = self._find(target)
        node = _DoubleLink(value)
        node.next = previous.next
        node.prev = previous
        previous.next.prev = node
        previous.next = node
        self._size += 1

    def pop_front(self) -> int:
        """Remove the head node and return its value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        value = self._head.value
        self._unlink(self._head)
        return value

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``."""
        if self._head is None:
            raise ValueError("remove from an empty list")
        self._unlink(self._find(value))

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        if self._head is None:
            return
        tail = self._head.prev
        node = tail
        while True:
            yield node.value
            node = node.prev
            if node is tail:
                break

    def __len__(self) -> int:
        return self._size


class CircularLinkedList:
    """A ring of singly linked nodes; the last node links back to the first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Link] = None
        self._tail: Optional[_Link] = None
        self._size = 0
        for value in values:
            self.append(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _link_in(self, value: int) -> _Link:
        node = _Link(value)
        if self._head is None or self._tail is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._tail.next = node
        self._size += 1
        return node

    def append(self, value: int) -> None:
        """Put ``value`` at the end of the ring."""
        self._tail = self._link_in(value)

    def prepend(self, value: int) -> None:
        """Put ``value`` at the start of the ring."""
        self._head = self._link_in(value)

    def __iter__(self) -> Iterator[int]:
        head = self._head
        if head is None:
            return
        node = head
        while True:
            yield node.value
            node = node.next
            if node is head:
                break

    def __len__(self) -> int:
        return self._size