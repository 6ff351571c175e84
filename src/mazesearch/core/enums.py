"""
Enumerations shared across the maze search system.

Cell status values double as the integer codes used in maze files, so a
parsed token can be converted with ``CellStatus(token)`` directly.
"""

from enum import Enum, IntEnum


class CellStatus(IntEnum):
    """Status of a single grid cell, static or per-run."""

    FREE = 1
    START = 4
    WALL = 5
    OPEN = 6  # Discovered and waiting in the frontier
    CLOSED = 7  # Expanded
    EXIT_A = 8
    EXIT_B = 9

    @classmethod
    def layout_codes(cls) -> frozenset:
        """Codes allowed in a maze file."""
        return frozenset({cls.FREE, cls.START, cls.WALL, cls.EXIT_A, cls.EXIT_B})


class Strategy(Enum):
    """Search strategy, selecting the frontier discipline."""

    BFS = "bfs"  # FIFO
    DFS = "dfs"  # LIFO
    ASTAR = "astar"  # Priority by f = g + h

    @property
    def label(self) -> str:
        """Heading used in text reports."""
        return {
            Strategy.BFS: "BREADTH FIRST SEARCH",
            Strategy.DFS: "DEPTH FIRST SEARCH",
            Strategy.ASTAR: "ASTAR SEARCH",
        }[self]


class Target(Enum):
    """Goal a run searches for."""

    EXIT_A = "exit_a"
    EXIT_B = "exit_b"
    CORNER = "corner"  # Bottom-left to top-right corner

    @property
    def label(self) -> str:
        """Heading used in text reports."""
        return {
            Target.EXIT_A: "Search for E1",
            Target.EXIT_B: "Search for E2",
            Target.CORNER: "Search for Corner Exit",
        }[self]


class SearchState(Enum):
    """Lifecycle of a single search run."""

    IDLE = "idle"
    READY = "ready"
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return self in (SearchState.SOLVED, SearchState.EXHAUSTED)
