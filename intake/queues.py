"""
Dispatch queues. Both hold complaint IDs, never complaint objects.

PriorityQueue is a max-heap on (severity, age): higher severity first, and
among equal severity the older complaint first. FallbackQueue is plain
arrival order.
"""

import heapq
from collections import deque
from datetime import datetime
from typing import Deque, List, Optional, Tuple

# heapq is a min-heap, so entries are (-severity, timestamp, id):
# higher severity, then earlier timestamp, then lower id comes out first.
_HeapEntry = Tuple[int, datetime, int]


class PriorityQueue:
    def __init__(self):
        self._heap: List[_HeapEntry] = []

    def insert(self, complaint_id: int, severity: int, timestamp: datetime) -> None:
        heapq.heappush(self._heap, (-severity, timestamp, complaint_id))

    def extract_max(self) -> Optional[int]:
        if not self._heap:
            return None
        _, _, complaint_id = heapq.heappop(self._heap)
        return complaint_id

    def peek(self) -> Optional[int]:
        return self._heap[0][2] if self._heap else None

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def clear(self) -> None:
        self._heap.clear()

    def ids(self) -> List[int]:
        """IDs currently queued, in no particular order."""
        return [entry[2] for entry in self._heap]

    def __len__(self) -> int:
        return len(self._heap)


class FallbackQueue:
    def __init__(self):
        self._items: Deque[int] = deque()

    def enqueue(self, complaint_id: int) -> None:
        self._items.append(complaint_id)

    def dequeue(self) -> Optional[int]:
        if not self._items:
            return None
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def ids(self) -> List[int]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)
