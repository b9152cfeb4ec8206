"""
Binary-heap priority queue used to pick the next hypothesis to work on.
"""

import heapq
from itertools import count
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar('T')


def _identity(item):
    return item


class PriorityFrontier(Generic[T]):
    """
    A min-heap that returns the item with the smallest key first.

    Items with equal keys come out in insertion order, so the same sequence of
    inserts always pops in the same order.

    Args:
        key: Maps an item to its sort key (default: the item itself). Keys are
            computed once, on insert, so items should be immutable.
        items: Initial contents
    """

    def __init__(self, key: Optional[Callable[[T], Any]] = None, items: Iterable[T] = ()):
        self._key = key if key is not None else _identity
        self._heap: List[Tuple[Any, int, T]] = []
        self._sequence = count()
        for item in items:
            self.insert(item)

    def insert(self, item: T) -> None:
        """Add an item. O(log n)"""
        heapq.heappush(self._heap, (self._key(item), next(self._sequence), item))

    def peek_best(self) -> Optional[T]:
        """The smallest item, or None if empty. Does not modify the queue."""
        if not self._heap:
            return None
        return self._heap[0][2]

    def pop_best(self) -> Optional[T]:
        """Remove and return the smallest item, or None if empty"""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[T]:
        """Items in pop order, without removing them"""
        for _, _, item in sorted(self._heap):
            yield item
