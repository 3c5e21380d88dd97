"""
Utility structures shared by the graph algorithms.
"""

from heapq import heappop, heappush
from typing import Any, Dict, List, Optional, Tuple


class PriorityQueue:
    """
    Priority queue with decrease-key.

    Entries are ordered by priority, then by a caller supplied ``order`` key
    so that equal priorities resolve deterministically (for instance by the
    position of a node in the graph).
    """

    def __init__(self):
        self._queue: List[Tuple[Any, int, str]] = []
        self._entry_finder: Dict[str, Tuple[Any, int]] = {}

    def add_or_update(self, item: str, priority: Any, order: int) -> None:
        """Insert ``item``, or lower its priority if it is already queued."""
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            if not priority < old_priority:
                return

        self._entry_finder[item] = (priority, order)
        heappush(self._queue, (priority, order, item))

    def pop(self) -> Optional[Tuple[Any, str]]:
        """Remove and return the item with the lowest priority."""
        while self._queue:
            priority, order, item = heappop(self._queue)
            if self._entry_finder.get(item) == (priority, order):
                del self._entry_finder[item]
                return (priority, item)
        return None

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)
