"""
Sorted-list priority queue with a caller-supplied comparator.

Usage:
    from graphkit.structures import PriorityQueue

    queue = PriorityQueue(lambda a, b: a.cost - b.cost)
    queue.add(item)
    best = queue.pop()
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from graphkit.exceptions import EmptyQueueError

Comparator = Callable[[Any, Any], float]


def default_comparator(a: Any, b: Any) -> int:
    """Three-way comparison using the items' own ordering."""
    return (a > b) - (a < b)


class PriorityQueue:
    """
    Priority queue backed by a list kept in sorted order.

    The comparator returns a negative number when its first argument ranks
    ahead of the second, zero when they tie and a positive number otherwise.
    pop() always returns the item ranked first; among tied items the one
    added earliest comes out first.

    Internally the list is held worst-first so the best item sits at the end
    and can be removed without shifting.
    """

    def __init__(self, comparator: Comparator | None = None) -> None:
        self._items: list[Any] = []
        self._compare = comparator or default_comparator
        self._length = 0

    @property
    def length(self) -> int:
        """Number of items currently queued."""
        return self._length

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def __contains__(self, item: Any) -> bool:
        return self._locate(item) is not None

    def __iter__(self) -> Iterator[Any]:
        """Iterate best-first without removing anything."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"PriorityQueue({list(self)!r})"

    def add(self, item: Any) -> None:
        """Insert item at its sorted position."""
        self._items.insert(self._insertion_index(item), item)
        self._length += 1

    def pop(self) -> Any:
        """Remove and return the best item."""
        if self._length <= 0:
            raise EmptyQueueError("The queue is empty.")
        self._length -= 1
        return self._items.pop()

    def peek(self) -> Any:
        """Return the best item without removing it."""
        if self._length <= 0:
            raise EmptyQueueError("The queue is empty.")
        return self._items[-1]

    best = peek

    def change(self, item: Any) -> bool:
        """
        Re-position an item whose priority has changed.

        The item is found by identity (or equality), removed and added back,
        so any mutation made to it beforehand is reflected in its new rank.

        Returns:
            True if the item was queued, False if it was not (nothing changes).
        """
        index = self._locate(item)
        if index is None:
            return False
        del self._items[index]
        self._items.insert(self._insertion_index(item), item)
        return True

    def _insertion_index(self, item: Any) -> int:
        """Binary search for the leftmost slot where item can be inserted."""
        lower = 0
        upper = len(self._items)
        while lower < upper:
            mid = lower + ((upper - lower) >> 1)
            result = self._compare(self._items[mid], item)
            if result > 0:
                lower = mid + 1
            else:
                upper = mid
        return lower

    def _locate(self, item: Any) -> int | None:
        """Index of item in the list, or None if it is not queued."""
        # Fast path: the run of comparator-equal items around the search point
        index = self._insertion_index(item)
        while index < len(self._items) and self._compare(self._items[index], item) == 0:
            if self._items[index] is item or self._items[index] == item:
                return index
            index += 1

        # The item's priority may have been mutated since it was added
        for index, candidate in enumerate(self._items):
            if candidate is item or candidate == item:
                return index
        return None
