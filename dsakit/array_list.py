"""A linked list stored in fixed-capacity arrays of values and next indices."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_CAPACITY = 5


class ListFullError(Exception):
    """Raised when inserting into a list that has no free slot."""


class ArrayLinkedList:
    """A linked list whose links are indices into parallel value and link arrays."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._values: list[int] = []
        self._links: list[int] = []
        self._head = -1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"

    def insert(self, value: int) -> None:
        """Append ``value`` at the end of the list in the next free slot."""
        if len(self._values) == self.capacity:
            raise ListFullError("list is full, cannot insert")
        slot = len(self._values)
        self._values.append(value)
        self._links.append(-1)
        if self._head == -1:
            self._head = slot
            return
        last = self._head
        while self._links[last] != -1:
            last = self._links[last]
        self._links[last] = slot

    def __iter__(self) -> Iterator[int]:
        slot = self._head
        while slot != -1:
            yield self._values[slot]
            slot = self._links[slot]

    def __len__(self) -> int:
        return len(self._values)