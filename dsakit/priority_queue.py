"""A priority queue kept ordered from highest priority to lowest."""

from __future__ import annotations

from bisect import insort_left
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    value: int
    priority: int


class PriorityQueue:
    """Values ordered by descending priority.

    A new value goes in front of any values that share its priority.
    """

    def __init__(self) -> None:
        self._entries: list[_Entry] = []

    def __repr__(self) -> str:
        pairs = [(e.value, e.priority) for e in self._entries]
        return f"{type(self).__name__}({pairs!r})"

    def insert(self, value: int, priority: int) -> None:
        """Add ``value`` with the given ``priority``."""
        insort_left(self._entries, _Entry(value, priority), key=lambda e: -e.priority)

    def __iter__(self) -> Iterator[int]:
        return (entry.value for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)