# search/priority_queue.py
import heapq
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """
    Binary min-heap of (priority, value) pairs.

    There is no decrease-key: callers push the same value again with a
    better priority and drop stale entries when they pop them. That keeps
    the heap index-free at the price of extra entries, which is fine for
    city-sized graphs but grows with E rather than V on large ones.
    Equal priorities pop in an unspecified order.
    """

    def __init__(self):
        self._q: list[tuple[float, int, T]] = []
        self._seq = 0

    def insert(self, value: T, priority: float) -> None:
        self._seq += 1
        heapq.heappush(self._q, (priority, self._seq, value))

    def extract_min(self) -> tuple[T, float]:
        if not self._q:
            raise IndexError("extract_min from an empty PriorityQueue")
        priority, _, value = heapq.heappop(self._q)
        return value, priority

    def is_empty(self) -> bool:
        return not self._q

    def __len__(self) -> int:
        return len(self._q)

    def __bool__(self) -> bool:
        return bool(self._q)
