"""
Search nodes and the arena that owns them.

Every node discovered during a run is appended to a single ``NodeArena`` and
addressed by its integer handle. A node refers to its predecessor by handle, so
the parent links form a tree inside the arena and the whole run is discarded by
clearing the arena once.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from ..exceptions import SearchStateError
from ..grid import Position

NodeHandle = int


@dataclass(frozen=True, slots=True)
class SearchNode:
    """
    A discovered grid position.

    Attributes:
        position: (row, col) of the cell
        depth: Steps from the start node
        priority: f = g + h in priority mode, 0 otherwise
        parent: Handle of the discovering node, None for the start node
    """

    position: Position
    depth: int
    priority: int = 0
    parent: Optional[NodeHandle] = None

    def __post_init__(self):
        """Validate initialization parameters."""
        if self.depth < 0:
            raise ValueError("depth cannot be negative")
        if (self.parent is None) != (self.depth == 0):
            raise ValueError("only the start node (depth 0) may have no parent")


class NodeArena:
    """Growable store of search nodes addressed by handle."""

    def __init__(self):
        self._nodes: List[SearchNode] = []

    def add(self, position: Position, depth: int, priority: int = 0,
            parent: Optional[NodeHandle] = None) -> NodeHandle:
        """
        Store a new node and return its handle.

        Raises:
            SearchStateError: If the parent handle is unknown or not shallower
        """
        if parent is not None:
            parent_node = self.get(parent)
            if depth != parent_node.depth + 1:
                raise SearchStateError(
                    f"Node at {position} has depth {depth}; parent depth is {parent_node.depth}"
                )
        self._nodes.append(SearchNode(position, depth, priority, parent))
        return len(self._nodes) - 1

    def get(self, handle: NodeHandle) -> SearchNode:
        """Look up a node by handle."""
        if not 0 <= handle < len(self._nodes):
            raise SearchStateError(f"Unknown node handle {handle}")
        return self._nodes[handle]

    def __getitem__(self, handle: NodeHandle) -> SearchNode:
        return self.get(handle)

    def __len__(self) -> int:
        return len(self._nodes)

    def ancestry(self, handle: NodeHandle) -> Iterator[SearchNode]:
        """Yield a node and each of its predecessors up to the start node."""
        current: Optional[NodeHandle] = handle
        while current is not None:
            node = self.get(current)
            yield node
            current = node.parent

    def clear(self) -> None:
        """Discard every node of the run."""
        self._nodes.clear()
