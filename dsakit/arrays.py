"""Classic problems on sequences of integers."""

from __future__ import annotations

import operator
from collections.abc import MutableSequence, Sequence
from itertools import accumulate


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell; 0 if none is possible."""
    if not prices:
        raise ValueError("prices must not be empty")
    best_buy = prices[0]
    profit = 0
    for price in prices[1:]:
        profit = max(profit, price - best_buy)
        best_buy = min(best_buy, price)
    return profit


def majority_element(values: Sequence[int]) -> int:
    """Candidate majority element by Moore's voting; -1 for an empty sequence.

    The result is only meaningful when a majority element exists.
    """
    count = 0
    candidate = -1
    for value in values:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``values``."""
    items = iter(values)
    try:
        best = current = next(items)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    for value in items:
        current = max(value, current + value)
        best = max(best, current)
    return best


def find_pair_sorted(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices of two entries of a sorted sequence summing to ``target``.

    Uses two pointers closing in from both ends; entries not below
    ``target`` are skipped from the right. Returns None when no pair is found.
    """
    left, right = 0, len(values) - 1
    while left < right:
        if values[right] >= target:
            right -= 1
            continue
        total = values[left] + values[right]
        if total > target:
            right -= 1
        elif total < target:
            left += 1
        else:
            return left, right
    return None


def pair_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """First pair of indices (i, j), i < j, whose entries sum to ``target``."""
    for i, first in enumerate(values):
        for j in range(i + 1, len(values)):
            if first + values[j] == target:
                return i, j
    return None


def product_except_self(values: Sequence[int]) -> list[int]:
    """For each position, the product of every other entry, without division."""
    if not values:
        return []
    prefix = accumulate(values[:-1], operator.mul, initial=1)
    suffix = list(accumulate(reversed(values[1:]), operator.mul, initial=1))
    return [before * after for before, after in zip(prefix, reversed(suffix))]


def max_water_area(heights: Sequence[int]) -> int:
    """Most water held between two of the vertical lines ``heights``."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, min(heights[left], heights[right]) * (right - left))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def reverse_in_place(values: MutableSequence[int]) -> None:
    """Reverse ``values`` in place."""
    values.reverse()


def floor_search(values: Sequence[int], key: int) -> int:
    """Binary search over sorted ``values``.

    Returns the index of ``key`` when present; otherwise the floor value,
    the largest entry below ``key``. Returns -1 when there is no floor.
    """
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        current = values[mid]
        if current == key:
            return mid
        if current < key:
            low = mid + 1
            if mid + 1 == len(values) or values[mid + 1] > key:
                return current
        else:
            high = mid - 1
            if mid > 0 and values[mid - 1] < key:
                return values[mid - 1]
    return -1