"""Binary min-heap with in-place key decrease."""
from typing import Dict, Hashable, Iterable, List, Tuple
import itertools

from .types import Number


class MinHeap:
    """Min-heap of keys ordered by priority.

    Each key is present at most once. A key -> position map keeps
    ``decrease_key`` logarithmic instead of scanning the array. Ties on
    priority are broken by insertion order.
    """

    def __init__(self, items: Iterable[Tuple[Hashable, Number]] = ()):
        # entries are [priority, sequence, key]
        self._data: List[list] = []
        self._index: Dict[Hashable, int] = {}
        self._counter = itertools.count()
        for key, priority in items:
            if key in self._index:
                raise ValueError(f"Duplicate heap key: {key!r}")
            self._index[key] = len(self._data)
            self._data.append([priority, next(self._counter), key])
        for pos in reversed(range(len(self._data) // 2)):
            self._sift_down(pos)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._index

    def insert(self, key: Hashable, priority: Number) -> None:
        """Add a new key."""
        if key in self._index:
            raise ValueError(f"Duplicate heap key: {key!r}")
        self._data.append([priority, next(self._counter), key])
        self._index[key] = len(self._data) - 1
        self._sift_up(len(self._data) - 1)

    def peek(self) -> Tuple[Hashable, Number]:
        """Return the minimum (key, priority) without removing it."""
        if not self._data:
            raise IndexError("peek from empty heap")
        priority, _, key = self._data[0]
        return key, priority

    def pop(self) -> Hashable:
        """Remove and return the key with the lowest priority."""
        if not self._data:
            raise IndexError("pop from empty heap")
        last = self._data.pop()
        if not self._data:
            del self._index[last[2]]
            return last[2]
        top = self._data[0]
        self._data[0] = last
        self._index[last[2]] = 0
        del self._index[top[2]]
        self._sift_down(0)
        return top[2]

    def priority(self, key: Hashable) -> Number:
        return self._data[self._index[key]][0]

    def decrease_key(self, key: Hashable, priority: Number) -> None:
        """Lower the priority of an existing key and restore heap order."""
        pos = self._index[key]
        entry = self._data[pos]
        if priority > entry[0]:
            raise ValueError(
                f"Cannot increase priority of {key!r} from {entry[0]} to {priority}"
            )
        entry[0] = priority
        self._sift_up(pos)

    def _less(self, i: int, j: int) -> bool:
        left, right = self._data[i], self._data[j]
        return (left[0], left[1]) < (right[0], right[1])

    def _swap(self, i: int, j: int) -> None:
        data = self._data
        data[i], data[j] = data[j], data[i]
        self._index[data[i][2]] = i
        self._index[data[j][2]] = j

    def _sift_up(self, pos: int) -> None:
        while pos > 0:
            parent = (pos - 1) // 2
            if not self._less(pos, parent):
                return
            self._swap(pos, parent)
            pos = parent

    def _sift_down(self, pos: int) -> None:
        size = len(self._data)
        while True:
            child = 2 * pos + 1
            if child >= size:
                return
            right = child + 1
            if right < size and self._less(right, child):
                child = right
            if not self._less(child, pos):
                return
            self._swap(child, pos)
            pos = child
