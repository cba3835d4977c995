import pytest

from dsakit.circular import CircularDoublyLinkedList, CircularLinkedList


def _check_ring(ring):
    assert list(reversed(ring)) == list(ring)[::-1]
    assert len(ring) == len(list(ring))


def test_doubly_source_example():
    ring = CircularDoublyLinkedList()
    ring.push_front(10)
    ring.push_front(20)
    ring.push_back(5)
    ring.push_back(1)
    assert list(ring) == [20, 10, 5, 1]
    _check_ring(ring)


def test_doubly_round_trip():
    values = [9, 2, 7]
    ring = CircularDoublyLinkedList(values)
    assert list(ring) == values
    assert len(ring) == len(values)
    _check_ring(ring)


def test_doubly_empty():
    ring = CircularDoublyLinkedList()
    assert list(ring) == []
    assert list(reversed(ring)) == []
    assert len(ring) == 0


def test_doubly_insert_after():
    values = [20, 10, 5, 1]
    ring = CircularDoublyLinkedList(values)
    ring.insert_after(10, 15)
    expected = values.copy()
    expected.insert(values.index(10) + 1, 15)
    assert list(ring) == expected
    _check_ring(ring)


def test_doubly_insert_after_tail_keeps_head():
    ring = CircularDoublyLinkedList([1, 2])
    ring.insert_after(2, 3)
    assert next(iter(ring)) == 1
    assert next(reversed(ring)) == 3
    _check_ring(ring)


def test_doubly_insert_after_missing_raises():
    ring = CircularDoublyLinkedList([1])
    with pytest.raises(ValueError):
        ring.insert_after(4, 5)


def test_doubly_pop_front():
    values = [3, 4, 5]
    ring = CircularDoublyLinkedList(values)
    assert ring.pop_front() == values[0]
    assert list(ring) == values[1:]
    _check_ring(ring)


def test_doubly_pop_front_until_empty():
    values = [8, 9]
    ring = CircularDoublyLinkedList(values)
    popped = [ring.pop_front() for _ in values]
    assert popped == values
    assert list(ring) == []
    with pytest.raises(IndexError):
        ring.pop_front()


@pytest.mark.parametrize("victim", [20, 5, 1])
def test_doubly_remove(victim):
    values = [20, 10, 5, 1]
    ring = CircularDoublyLinkedList(values)
    ring.remove(victim)
    expected = values.copy()
    expected.remove(victim)
    assert list(ring) == expected
    _check_ring(ring)


def test_doubly_remove_only_node():
    ring = CircularDoublyLinkedList([6])
    ring.remove(6)
    assert list(ring) == []
    assert len(ring) == 0


def test_doubly_remove_missing_and_empty_raise():
    ring = CircularDoublyLinkedList([1, 2])
    with pytest.raises(ValueError):
        ring.remove(100)
    assert list(ring) == [1, 2]
    with pytest.raises(ValueError):
        CircularDoublyLinkedList().remove(1)


def test_singly_append_source_example():
    values = [10, 20, 30, 40]
    ring = CircularLinkedList()
    for value in values:
        ring.append(value)
    assert list(ring) == values
    assert len(ring) == len(values)


def test_singly_prepend_source_example():
    values = [1, 2, 3, 0]
    ring = CircularLinkedList()
    for value in values:
        ring.prepend(value)
    assert list(ring) == values[::-1]
    assert len(ring) == len(values)


def test_singly_mixed():
    ring = CircularLinkedList([5])
    ring.prepend(4)
    ring.append(6)
    assert list(ring) == [4, 5, 6]


def test_singly_empty():
    ring = CircularLinkedList()
    assert list(ring) == []
    assert len(ring) == 0