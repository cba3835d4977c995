"""Sparse matrices held as (row, column, value) triplets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

MAX_TERMS = 100


@dataclass(frozen=True)
class SparseTerm:
    """One non-zero entry of a sparse matrix."""

    row: int
    col: int
    value: int


def to_triplets(matrix: Sequence[Sequence[int]]) -> list[SparseTerm]:
    """Non-zero entries of a dense matrix, in row-major order."""
    return [
        SparseTerm(r, c, value)
        for r, row in enumerate(matrix)
        for c, value in enumerate(row)
        if value != 0
    ]


def multiply_sparse(
    first: Iterable[SparseTerm], second: Iterable[SparseTerm]
) -> list[SparseTerm]:
    """Product of two sparse matrices.

    Terms appear in the order they are first produced; at most
    ``MAX_TERMS`` distinct terms are kept, further new ones are dropped.
    """
    right = list(second)
    products: dict[tuple[int, int], int] = {}
    for a in first:
        for b in right:
            if a.col != b.row:
                continue
            key = (a.row, b.col)
            if key in products:
                products[key] += a.value * b.value
            elif len(products) < MAX_TERMS:
                products[key] = a.value * b.value
    return [SparseTerm(row, col, value) for (row, col), value in products.items()]


def format_triplets(terms: Iterable[SparseTerm]) -> str:
    """Tab-separated table of terms under a ``Row Column Value`` header."""
    lines = ["Row\tColumn\tValue"]
    lines.extend(f"{t.row}\t{t.col}\t{t.value}" for t in terms)
    return "\n".join(lines) + "\n"