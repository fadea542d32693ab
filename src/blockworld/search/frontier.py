"""Open set for A*: a binary min-heap with a side index from node key to heap slot.

Entries are ordered by (f, seq) where seq is a counter stamped whenever an entry
enters the heap, so ties on f go to the entry that was inserted (or last
replaced) earliest. Membership, lookup, insert, pop and replace are all O(1) or
O(log n), and each node key has at most one live entry.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class SearchNode:
    node: Any
    key: Hashable
    parent: SearchNode | None
    g: float
    f: float
    seq: int = field(default=-1)

    def path(self) -> list[Any]:
        out: list[Any] = []
        cur: SearchNode | None = self
        while cur is not None:
            out.append(cur.node)
            cur = cur.parent
        out.reverse()
        return out


class Frontier:
    def __init__(self) -> None:
        self._heap: list[SearchNode] = []
        self._slot: dict[Hashable, int] = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._slot

    def get(self, key: Hashable) -> SearchNode | None:
        i = self._slot.get(key)
        return None if i is None else self._heap[i]

    def push(self, entry: SearchNode) -> None:
        if entry.key in self._slot:
            raise KeyError(f"Node already in frontier: {entry.key!r}")
        self._stamp(entry)
        self._heap.append(entry)
        i = len(self._heap) - 1
        self._slot[entry.key] = i
        self._sift_up(i)

    def replace(self, entry: SearchNode) -> None:
        """Swap the live entry for ``entry.key`` with ``entry``."""
        i = self._slot[entry.key]
        self._stamp(entry)
        self._heap[i] = entry
        self._sift_up(i)
        self._sift_down(self._slot[entry.key])

    def pop(self) -> SearchNode:
        if not self._heap:
            raise IndexError("pop from empty frontier")
        top = self._heap[0]
        self._remove_at(0)
        return top

    def remove(self, key: Hashable) -> SearchNode:
        i = self._slot[key]
        entry = self._heap[i]
        self._remove_at(i)
        return entry

    # ------------------------------------------------------------------
    # heap internals

    def _stamp(self, entry: SearchNode) -> None:
        entry.seq = self._counter
        self._counter += 1

    @staticmethod
    def _less(a: SearchNode, b: SearchNode) -> bool:
        return (a.f, a.seq) < (b.f, b.seq)

    def _swap(self, i: int, j: int) -> None:
        h = self._heap
        h[i], h[j] = h[j], h[i]
        self._slot[h[i].key] = i
        self._slot[h[j].key] = j

    def _remove_at(self, i: int) -> None:
        h = self._heap
        last = len(h) - 1
        if i != last:
            self._swap(i, last)
        removed = h.pop()
        del self._slot[removed.key]
        if i < len(h):
            moved = h[i]
            self._sift_up(i)
            self._sift_down(self._slot[moved.key])

    def _sift_up(self, i: int) -> None:
        h = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(h[i], h[parent]):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        h = self._heap
        n = len(h)
        while True:
            left = 2 * i + 1
            right = left + 1
            smallest = i
            if left < n and self._less(h[left], h[smallest]):
                smallest = left
            if right < n and self._less(h[right], h[smallest]):
                smallest = right
            if smallest == i:
                break
            self._swap(i, smallest)
            i = smallest
