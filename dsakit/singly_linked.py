"""Singly linked list of integers and problems solved on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    value: int
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list of integers addressed through its head node."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> Node:
        for i, node in enumerate(self._nodes()):
            if i == index:
                return node
        raise IndexError(f"position {index} is out of range")

    def insert_at_beginning(self, value: int) -> None:
        """Put ``value`` in front of the current head."""
        self.head = Node(value, self.head)
        self._size += 1

    def append(self, value: int) -> None:
        """Put ``value`` after the last node."""
        if self.head is None:
            self.insert_at_beginning(value)
            return
        self._node_at(self._size - 1).next = Node(value)
        self._size += 1

    def insert_at(self, value: int, position: int) -> None:
        """Insert ``value`` so that it ends up at the 0-based ``position``."""
        if not 0 <= position <= self._size:
            raise IndexError(f"position {position} is out of range")
        if position == 0:
            self.insert_at_beginning(value)
            return
        previous = self._node_at(position - 1)
        previous.next = Node(value, previous.next)
        self._size += 1

    def update_at(self, value: int, position: int) -> None:
        """Replace the value of the node at the 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is out of range")
        self._node_at(position - 1).value = value

    def delete_first(self) -> int:
        """Remove the head node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        value = self.head.value
        self.head = self.head.next
        self._size -= 1
        return value

    def delete_last(self) -> int:
        """Remove the last node and return its value."""
        if self._size <= 1:
            return self.delete_first()
        second_last = self._node_at(self._size - 2)
        last = second_last.next
        assert last is not None
        second_last.next = None
        self._size -= 1
        return last.value

    def delete_at(self, position: int) -> int:
        """Remove the node at the 0-based ``position`` and return its value."""
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} is out of range")
        if position == 0:
            return self.delete_first()
        previous = self._node_at(position - 1)
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        self._size -= 1
        return removed.value

    def remove_value(self, value: int) -> None:
        """Remove the first node holding ``value``."""
        previous: Optional[Node] = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return
            previous = node
        raise ValueError(f"{value!r} is not in the list")

    def find(self, value: int) -> Optional[Node]:
        """The first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def sort(self) -> None:
        """Sort the values in ascending order, swapping values between nodes."""
        for current in self._nodes():
            other = current.next
            while other is not None:
                if current.value > other.value:
                    current.value, other.value = other.value, current.value
                other = other.next

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Optional[Node] = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def reverse_in_groups(self, k: int) -> None:
        """Reverse the nodes ``k`` at a time; a shorter last group is reversed too."""
        if k < 1:
            raise ValueError("group size must be at least 1")
        new_head: Optional[Node] = None
        previous_tail: Optional[Node] = None
        current = self.head
        while current is not None:
            group_head = current
            previous: Optional[Node] = None
            for _ in range(k):
                if current is None:
                    break
                current.next, previous, current = previous, current, current.next
            if previous_tail is None:
                new_head = previous
            else:
                previous_tail.next = previous
            previous_tail = group_head
        self.head = new_head

    def remove_duplicates(self) -> None:
        """Drop nodes equal to the node before them; on a sorted list each value stays once."""
        for node in self._nodes():
            while node.next is not None and node.next.value == node.value:
                node.next = node.next.next
                self._size -= 1

    def delete_alternate(self) -> None:
        """Delete every second node, starting from the second."""
        current = self.head
        while current is not None and current.next is not None:
            current.next = current.next.next
            self._size -= 1
            current = current.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        return reversed(list(self))

    def __len__(self) -> int:
        return self._size


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> LinkedList:
    """A new list holding the values of two sorted lists, in sorted order."""
    left, right = list(first), list(second)
    merged = LinkedList()
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    for value in left[i:] + right[j:]:
        merged.append(value)
    return merged


def add_numbers(first: Iterable[int], second: Iterable[int]) -> LinkedList:
    """Sum of two numbers given as digits, most significant first."""
    left = list(reversed(list(first)))
    right = list(reversed(list(second)))
    digits: list[int] = []
    carry = 0
    position = 0
    while position < len(left) or position < len(right) or carry:
        total = carry
        if position < len(left):
            total += left[position]
        if position < len(right):
            total += right[position]
        carry, digit = divmod(total, 10)
        digits.append(digit)
        position += 1
    return LinkedList(reversed(digits))