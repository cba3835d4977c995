"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "array_list",
    "arrays",
    "circular",
    "doubly_linked",
    "hanoi",
    "number_systems",
    "patterns",
    "priority_queue",
    "singly_linked",
    "sorting",
    "sparse",
    "stacks",
]