"""PriorityQueue - min-heap with O(1) membership and priority updates."""
from __future__ import annotations

import heapq
import itertools
from typing import Any, Generic, Hashable, Iterator, TypeVar

from tick_navgraph.types import EmptyQueueError

T = TypeVar("T", bound=Hashable)

# Heap entry layout: [priority, insertion order, item, live]
_PRIORITY, _ORDER, _ITEM, _LIVE = range(4)


class PriorityQueue(Generic[T]):
    """Min-priority queue over hashable items with mutable priorities.

    Priorities are sort keys: floats or tuples of floats. Items with equal
    keys come out in insertion order, and an updated item counts as newly
    inserted. Updates mark the old heap entry dead instead of searching the
    heap for it; dead entries are skipped on dequeue.
    """

    def __init__(self) -> None:
        self._heap: list[list[Any]] = []
        self._entries: dict[T, list[Any]] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, item: object) -> bool:
        return item in self._entries

    def __iter__(self) -> Iterator[T]:
        """Yield queued items in dequeue order without modifying the queue."""
        for entry in sorted(self._entries.values()):
            yield entry[_ITEM]

    def contains(self, item: T) -> bool:
        return item in self._entries

    def enqueue(self, item: T, priority: Any) -> None:
        """Insert ``item``. A queued item is replaced rather than duplicated."""
        old = self._entries.pop(item, None)
        if old is not None:
            old[_LIVE] = False
        entry = [priority, next(self._counter), item, True]
        self._entries[item] = entry
        heapq.heappush(self._heap, entry)

    def enqueue_or_update(self, item: T, priority: Any) -> None:
        """Set the priority of a queued item, or insert it if absent."""
        entry = self._entries.get(item)
        if entry is not None and entry[_PRIORITY] == priority:
            return
        self.enqueue(item, priority)

    def dequeue(self) -> T:
        """Remove and return the item with the lowest priority."""
        while self._heap:
            entry = heapq.heappop(self._heap)
            if entry[_LIVE]:
                del self._entries[entry[_ITEM]]
                return entry[_ITEM]
        raise EmptyQueueError("dequeue from an empty PriorityQueue")

    def peek(self) -> T:
        """Return the lowest-priority item without removing it."""
        while self._heap and not self._heap[0][_LIVE]:
            heapq.heappop(self._heap)
        if not self._heap:
            raise EmptyQueueError("peek into an empty PriorityQueue")
        return self._heap[0][_ITEM]

    def priority_of(self, item: T) -> Any:
        """Return the current priority of a queued item. Raises KeyError if absent."""
        return self._entries[item][_PRIORITY]

    def clear(self) -> None:
        self._heap.clear()
        self._entries.clear()
