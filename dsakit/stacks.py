"""A bounded stack and problems solved with stacks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

DEFAULT_CAPACITY = 100

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


class StackOverflowError(Exception):
    """Raised when pushing onto a stack that is full."""


class StackUnderflowError(IndexError):
    """Raised when taking from an empty stack."""


class Stack:
    """A last-in, first-out stack of integers with an optional capacity.

    Iteration runs from the top of the stack to the bottom.
    """

    def __init__(self, capacity: Optional[int] = DEFAULT_CAPACITY) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity!r}) with {self._items!r}"

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        """Remove the top value and return it."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        """The top value, left in place."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)


def transfer_odd(source: Stack, target: Stack) -> None:
    """Move the odd values of ``source`` onto ``target``.

    Values are taken from the bottom of ``source`` upwards; the even ones
    stay in ``source`` in their original order.
    """
    kept = [value for value in source._items if value % 2 == 0]
    for value in source._items:
        if value % 2 != 0:
            target.push(value)
    source.clear()
    for value in kept:
        source.push(value)


def is_balanced(expression: str) -> bool:
    """Whether the brackets ``()``, ``[]`` and ``{}`` in ``expression`` match."""
    open_brackets: list[str] = []
    for ch in expression:
        if ch in _OPENERS:
            open_brackets.append(ch)
        elif ch in _PAIRS:
            if not open_brackets or open_brackets.pop() != _PAIRS[ch]:
                return False
    return not open_brackets