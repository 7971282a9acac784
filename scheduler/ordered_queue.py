"""
Generic ordered queue driven by a pluggable comparator.

Unlike heapq (which only gives you the minimum), this keeps EVERY element in
sorted position so the engine can look at, or pull out, any position:

    index:   0      1      2      3
           ┌────┬──────┬──────┬──────┐
           │ j4 │  j2  │  j7  │  j1  │   ← front is index 0
           └────┴──────┴──────┴──────┘

Data structure: plain Python list
- insert:     linear scan for the slot, list.insert → O(n)
- poll:       list.pop(0)                          → O(n)
- remove_at:  list.pop(index)                      → O(n)
- at / peek:  list index                           → O(1)

The comparator follows the classic cmp contract:
    comparator(a, b) < 0   → a belongs before b
    comparator(a, b) == 0  → equal rank
    comparator(a, b) > 0   → a belongs after b

It is only consulted at insertion time. A new item goes immediately before
the first element it compares strictly less than, so equal-ranked items keep
their insertion order (stable FIFO among equals). A comparator that always
returns 0 therefore turns the queue into a plain FIFO; that is how FCFS and
Round Robin get arrival order for free.
"""

from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], int]


class OrderedQueue(Generic[T]):

    def __init__(self, comparator: Comparator):
        self._comparator = comparator
        self._items: list[T] = []

    def insert(self, item: T) -> int:
        """Insert `item` in comparator order and return the zero-based index it landed at."""
        for index, existing in enumerate(self._items):
            if self._comparator(item, existing) < 0:
                self._items.insert(index, item)
                return index
        self._items.append(item)
        return len(self._items) - 1

    def peek(self) -> Optional[T]:
        """Front item without removing it, or None if empty."""
        return self._items[0] if self._items else None

    def poll(self) -> Optional[T]:
        """Remove and return the front item, or None if empty."""
        return self._items.pop(0) if self._items else None

    def at(self, index: int) -> Optional[T]:
        """Item at `index`, or None if index is outside [0, size)."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def remove(self, item: T) -> int:
        """
        Remove every entry that IS `item` (identity, not comparator equality).

        Two distinct jobs with the same priority compare equal but are not the
        same job; only the exact object passed in gets removed.
        """
        kept = [existing for existing in self._items if existing is not item]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def remove_at(self, index: int) -> Optional[T]:
        """Remove and return the item at `index`, shifting later items forward. None if invalid."""
        if 0 <= index < len(self._items):
            return self._items.pop(index)
        return None

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        # Iterate over a copy so callers can remove while walking
        return iter(list(self._items))
