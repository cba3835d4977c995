# dsakit

A small collection of classic data structures and algorithms written in plain Python:

- **Arrays** (`dsakit.arrays`): `max_profit`, `majority_element`, `max_subarray_sum`,
  `find_pair_sorted`, `pair_sum`, `product_except_self`, `max_water_area`,
  `reverse_in_place` and `floor_search`.
- **Sorting** (`dsakit.sorting`): `insertion_sort` (in place) and `bucket_sort` for values
  in `[0, 1)`.
- **Sparse matrices** (`dsakit.sparse`): `SparseTerm` triplets, `to_triplets`,
  `multiply_sparse` and `format_triplets`.
- **Linked lists**: `LinkedList` with `merge_sorted` and `add_numbers`
  (`dsakit.singly_linked`), `DoublyLinkedList` with `merge_sorted_doubly`
  (`dsakit.doubly_linked`), `CircularLinkedList` and `CircularDoublyLinkedList`
  (`dsakit.circular`), and `ArrayLinkedList`, a fixed-capacity list backed by arrays that
  raises `ListFullError` when full (`dsakit.array_list`).
- **Stacks and queues** (`dsakit.stacks`, `dsakit.priority_queue`): a `Stack` with a
  capacity of 100 by default (`None` for no limit), `transfer_odd`, `is_balanced`, and a
  `PriorityQueue` ordered from highest priority to lowest.
- **Number systems** (`dsakit.number_systems`): `binary_to_decimal` and
  `decimal_to_binary`, with binary numbers written as decimal integers (5 <-> 101).
- **Recursion** (`dsakit.hanoi`): `tower_of_hanoi` yields the moves for the Tower of Hanoi.
- **Text patterns** (`dsakit.patterns`): `letter_square`, `number_pyramid` and
  `hollow_diamond`, each returned as a string.

The package needs nothing outside the standard library and runs on Python 3.10 and later.

## Installation

```
pip install .
```

To install the test tools too:

```
pip install ".[test]"
```

## Examples

```python
from dsakit.arrays import max_profit, product_except_self
from dsakit.singly_linked import LinkedList, merge_sorted
from dsakit.stacks import is_balanced

max_profit([7, 1, 5, 3, 6, 4])          # 5
product_except_self([1, 2, 3, 4])       # [24, 12, 8, 6]

merged = merge_sorted(LinkedList([10, 20, 30]), LinkedList([4, 5, 6]))
list(merged)                            # [4, 5, 6, 10, 20, 30]

is_balanced("{[()]}")                   # True
is_balanced("([)]")                     # False
```

A `LinkedList` is iterable, has a length and supports the usual edits:

```python
from dsakit.singly_linked import LinkedList

items = LinkedList([10, 20, 20, 40, 40, 40])
items.remove_duplicates()
list(items)                             # [10, 20, 40]
items.reverse()
list(items)                             # [40, 20, 10]
```

Stacks report a full or empty state with exceptions (`StackOverflowError`,
`StackUnderflowError`):

```python
from dsakit.stacks import Stack, StackUnderflowError

stack = Stack(2)
stack.push(5)
stack.push(10)
stack.pop()                             # 10

try:
    Stack(1).pop()
except StackUnderflowError:
    ...
```

## Commands

Installing the package provides two commands:

- `dsakit-hanoi [DISKS]` prints the moves that solve the Tower of Hanoi for a number of
  disks, asking for the number when it is not given.
- `dsakit-patterns {diamond,pyramid,square} [N]` prints one of the text patterns. The
  diamond defaults to 8 rows and the pyramid to 4; the square asks for its size when none
  is given.

## Running the tests

```
pytest
```