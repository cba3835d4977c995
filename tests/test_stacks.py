import pytest

from dsakit.stacks import (
    Stack,
    StackOverflowError,
    StackUnderflowError,
    is_balanced,
    transfer_odd,
)


def _filled(values, **kwargs):
    stack = Stack(**kwargs)
    for value in values:
        stack.push(value)
    return stack


def test_push_pop_is_last_in_first_out():
    stack = Stack()
    for value in (5, 10, 15):
        stack.push(value)
    assert stack.pop() == 15
    assert stack.pop() == 10
    assert len(stack) == 1


def test_iteration_runs_top_to_bottom():
    stack = _filled([5, 10, 15])
    assert list(stack) == [15, 10, 5]


def test_peek_leaves_value():
    stack = _filled([1, 2])
    assert stack.peek() == 2
    assert len(stack) == 2


def test_pop_empty_raises():
    with pytest.raises(StackUnderflowError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(StackUnderflowError):
        Stack().peek()


def test_underflow_is_an_index_error():
    with pytest.raises(IndexError):
        Stack().pop()


def test_default_capacity_is_one_hundred():
    stack = _filled(range(100))
    with pytest.raises(StackOverflowError):
        stack.push(100)
    assert len(stack) == 100


def test_small_capacity_overflow():
    stack = Stack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert list(stack) == [2, 1]


def test_unbounded_stack():
    stack = _filled(range(500), capacity=None)
    assert len(stack) == 500
    assert stack.peek() == 499


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(capacity=-1)


def test_clear_empties_stack():
    stack = _filled([10, 20, 30])
    stack.clear()
    assert len(stack) == 0
    assert list(stack) == []


def test_transfer_odd_splits_values():
    source = _filled(range(1, 9))
    target = Stack()
    transfer_odd(source, target)
    assert list(reversed(list(source))) == [2, 4, 6, 8]
    assert list(reversed(list(target))) == [1, 3, 5, 7]
    assert len(source) + len(target) == 8


def test_transfer_odd_appends_onto_existing_target():
    source = _filled([3, 4])
    target = _filled([9])
    transfer_odd(source, target)
    assert list(target) == [3, 9]
    assert list(source) == [4]


def test_transfer_odd_overflow_leaves_source():
    source = _filled([1, 3])
    target = Stack(capacity=1)
    with pytest.raises(StackOverflowError):
        transfer_odd(source, target)
    assert list(source) == [3, 1]


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("", True),
        ("()", True),
        ("([]{})", True),
        ("a(b[c]{d})e", True),
        ("(]", False),
        ("((", False),
        (")", False),
        ("([)]", False),
        ("{[}", False),
    ],
)
def test_is_balanced(expression, expected):
    assert is_balanced(expression) is expected


def test_is_balanced_long_input():
    assert is_balanced("(" * 300 + ")" * 300) is True