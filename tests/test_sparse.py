from dsakit.sparse import (
    MAX_TERMS,
    SparseTerm,
    format_triplets,
    multiply_sparse,
    to_triplets,
)

MATRIX = [
    [0, 0, 3],
    [0, 4, 0],
    [5, 0, 0],
]


def test_to_triplets_row_major():
    assert to_triplets(MATRIX) == [
        SparseTerm(0, 2, 3),
        SparseTerm(1, 1, 4),
        SparseTerm(2, 0, 5),
    ]


def test_to_triplets_all_zero():
    assert to_triplets([[0, 0], [0, 0]]) == []


def test_multiply_example():
    a = [SparseTerm(0, 0, 5), SparseTerm(0, 2, 8), SparseTerm(1, 1, 6)]
    b = [SparseTerm(0, 1, 4), SparseTerm(2, 0, 7), SparseTerm(2, 2, 2)]
    assert multiply_sparse(a, b) == [
        SparseTerm(0, 1, 20),
        SparseTerm(0, 0, 56),
        SparseTerm(0, 2, 16),
    ]


def test_multiply_by_identity_keeps_terms():
    identity = to_triplets([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    terms = to_triplets(MATRIX)
    assert multiply_sparse(terms, identity) == terms


def test_multiply_accumulates_shared_position():
    a = [SparseTerm(0, 0, 2), SparseTerm(0, 1, 3)]
    b = [SparseTerm(0, 0, 4), SparseTerm(1, 0, 5)]
    result = multiply_sparse(a, b)
    assert len(result) == 1
    assert result[0].value == 2 * 4 + 3 * 5


def test_multiply_with_empty():
    assert multiply_sparse([], to_triplets(MATRIX)) == []


def test_multiply_term_limit():
    a = [SparseTerm(i, 0, 1) for i in range(MAX_TERMS + 50)]
    b = [SparseTerm(0, 0, 1)]
    result = multiply_sparse(a, b)
    assert len(result) == MAX_TERMS
    assert result[-1].row == MAX_TERMS - 1


def test_format_triplets():
    text = format_triplets(to_triplets(MATRIX))
    lines = text.splitlines()
    assert lines[0] == "Row\tColumn\tValue"
    assert lines[1] == "0\t2\t3"
    assert len(lines) == 4
    assert text.endswith("\n")