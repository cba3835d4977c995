"""Insertion sort and bucket sort."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence

BUCKET_COUNT = 10


def insertion_sort(values: MutableSequence) -> None:
    """Sort ``values`` in place by insertion."""
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Return the values, each in [0, 1), sorted using ten buckets."""
    buckets: list[list[float]] = [[] for _ in range(BUCKET_COUNT)]
    for value in values:
        if not 0 <= value < 1:
            raise ValueError(f"value {value!r} is outside [0, 1)")
        buckets[int(value * BUCKET_COUNT)].append(value)
    result: list[float] = []
    for bucket in buckets:
        insertion_sort(bucket)
        result.extend(bucket)
    return result