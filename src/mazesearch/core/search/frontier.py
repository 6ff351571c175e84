"""
Frontier implementations for the search engine.

The frontier holds handles of discovered nodes that have not been expanded.
Its discipline decides the search strategy:

- FifoFrontier: insert at the tail, remove from the head (breadth-first)
- LifoFrontier: insert at the head, remove from the head (depth-first)
- PriorityFrontier: kept sorted by ascending priority, remove from the head (A*)
"""

from abc import ABC, abstractmethod
from bisect import bisect_right
from collections import deque
from typing import Deque, Dict, Iterator, List, Optional, Type

from ..enums import Strategy
from .nodes import NodeHandle


class Frontier(ABC):
    """Abstract ordered collection of pending node handles."""

    @abstractmethod
    def push(self, handle: NodeHandle, priority: int = 0) -> None:
        """Add a node handle; ``priority`` is ignored by unordered disciplines."""
        pass

    @abstractmethod
    def pop(self) -> Optional[NodeHandle]:
        """Remove and return the next handle, or None when empty."""
        pass

    @abstractmethod
    def peek(self) -> Optional[NodeHandle]:
        """Return the next handle without removing it, or None when empty."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[NodeHandle]:
        """Iterate over handles in pop order without consuming them."""
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    def empty(self) -> bool:
        """Return True if no handles are pending."""
        return len(self) == 0


class _DequeFrontier(Frontier):
    """Shared storage for the FIFO and LIFO disciplines."""

    def __init__(self):
        self._queue: Deque[NodeHandle] = deque()

    def pop(self) -> Optional[NodeHandle]:
        return self._queue.popleft() if self._queue else None

    def peek(self) -> Optional[NodeHandle]:
        return self._queue[0] if self._queue else None

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[NodeHandle]:
        return iter(list(self._queue))

    def clear(self) -> None:
        self._queue.clear()


class FifoFrontier(_DequeFrontier):
    """Queue discipline for breadth-first search."""

    def push(self, handle: NodeHandle, priority: int = 0) -> None:
        self._queue.append(handle)


class LifoFrontier(_DequeFrontier):
    """Stack discipline for depth-first search."""

    def push(self, handle: NodeHandle, priority: int = 0) -> None:
        self._queue.appendleft(handle)


class PriorityFrontier(Frontier):
    """
    Sorted list ordered by ascending priority.

    A new handle goes before the first entry with a strictly greater priority,
    so entries of equal priority leave in insertion order.
    """

    def __init__(self):
        self._priorities: List[int] = []
        self._handles: List[NodeHandle] = []

    def push(self, handle: NodeHandle, priority: int = 0) -> None:
        index = bisect_right(self._priorities, priority)
        self._priorities.insert(index, priority)
        self._handles.insert(index, handle)

    def pop(self) -> Optional[NodeHandle]:
        if not self._handles:
            return None
        self._priorities.pop(0)
        return self._handles.pop(0)

    def peek(self) -> Optional[NodeHandle]:
        return self._handles[0] if self._handles else None

    def peek_priority(self) -> Optional[int]:
        """Priority of the next handle, or None when empty."""
        return self._priorities[0] if self._priorities else None

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[NodeHandle]:
        return iter(list(self._handles))

    def clear(self) -> None:
        self._priorities.clear()
        self._handles.clear()


FRONTIER_TYPES: Dict[Strategy, Type[Frontier]] = {
    Strategy.BFS: FifoFrontier,
    Strategy.DFS: LifoFrontier,
    Strategy.ASTAR: PriorityFrontier,
}


def create_frontier(strategy: Strategy) -> Frontier:
    """
    Create the frontier matching a search strategy.

    Raises:
        TypeError: If strategy is not a Strategy member
    """
    if not isinstance(strategy, Strategy):
        raise TypeError("strategy must be a Strategy enum")
    return FRONTIER_TYPES[strategy]()
