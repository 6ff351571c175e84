"""Search engine shared by the breadth-first, depth-first and A* strategies."""

import logging
from typing import List, Optional

from ..enums import SearchState, Strategy
from ..exceptions import SearchStateError
from ..grid import Grid, Position
from .frontier import Frontier, create_frontier
from .nodes import NodeArena, NodeHandle
from .models import SearchStatistics
from .utils import manhattan_distance

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Graph search over a grid with a strategy-selected frontier.

    One engine runs one search at a time against its grid. ``start`` resets
    the previous run (including the grid overlay) and seeds the frontier with
    the start node; ``step`` performs one pop/test/expand iteration until the
    run is SOLVED or EXHAUSTED.

    Attributes:
        grid: Grid being searched; its overlay is mutated by the run
        strategy: Strategy selecting the frontier discipline
        arena: Every node discovered by the current run
        expanded: Handles of expanded nodes in expansion order
    """

    def __init__(self, grid: Grid, strategy: Strategy):
        if not isinstance(strategy, Strategy):
            raise TypeError("strategy must be a Strategy enum")
        self.grid = grid
        self.strategy = strategy
        self.arena = NodeArena()
        self.frontier: Frontier = create_frontier(strategy)
        self.expanded: List[NodeHandle] = []
        self.start_position: Optional[Position] = None
        self.goal_position: Optional[Position] = None
        self.expanded_count = 0
        self.max_frontier_size = 0
        self._goal_handle: Optional[NodeHandle] = None
        self._state = SearchState.IDLE

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def goal_handle(self) -> NodeHandle:
        """
        Handle of the node that reached the goal.

        Raises:
            SearchStateError: If the run is not SOLVED
        """
        if self._state is not SearchState.SOLVED or self._goal_handle is None:
            raise SearchStateError(f"No goal node: search is {self._state.value}")
        return self._goal_handle

    def reset(self) -> None:
        """Discard the current run and restore the grid overlay."""
        if self._state is not SearchState.IDLE:
            logger.debug("Resetting %s search (%s)", self.strategy.value, self._state.value)
        self.arena.clear()
        self.frontier.clear()
        self.expanded.clear()
        self.grid.reset_overlay()
        self.start_position = None
        self.goal_position = None
        self.expanded_count = 0
        self.max_frontier_size = 0
        self._goal_handle = None
        self._state = SearchState.IDLE

    def _priority(self, position: Position, depth: int, goal: Position) -> int:
        """f = g + h in priority mode, 0 otherwise."""
        if self.strategy is not Strategy.ASTAR:
            return 0
        return depth + manhattan_distance(position, goal)

    def start(self, start: Position, goal: Position) -> None:
        """
        Reset and seed a new run.

        Raises:
            IndexError: If start or goal lies outside the grid
            SearchStateError: If the start cell is a wall
        """
        self.reset()
        if not self.grid.in_bounds(goal):
            raise IndexError(f"Goal {goal} outside {self.grid.size}x{self.grid.size} grid")
        self.grid.mark_open(start)

        self.start_position = start
        self.goal_position = goal
        handle = self.arena.add(start, depth=0, priority=self._priority(start, 0, goal))
        self.frontier.push(handle, self.arena[handle].priority)
        self.max_frontier_size = 1
        self._state = SearchState.READY
        logger.debug("Seeded %s search from %s to %s", self.strategy.value, start, goal)

    def step(self) -> SearchState:
        """
        Perform one search iteration.

        Returns:
            The state after the iteration

        Raises:
            SearchStateError: If the engine has not been started
        """
        goal = self.goal_position
        if self._state is SearchState.IDLE or goal is None:
            raise SearchStateError("Search must be started before stepping")
        if self._state.is_terminal:
            return self._state
        self._state = SearchState.RUNNING

        handle = self.frontier.pop()
        if handle is None:
            self._state = SearchState.EXHAUSTED
            logger.debug("%s search exhausted after %d expansions",
                         self.strategy.value, self.expanded_count)
            return self._state

        node = self.arena[handle]
        self.grid.mark_closed(node.position)
        self.expanded_count += 1
        self.expanded.append(handle)

        if node.position == goal:
            self._goal_handle = handle
            self._state = SearchState.SOLVED
            logger.debug("%s search solved at depth %d after %d expansions",
                         self.strategy.value, node.depth, self.expanded_count)
            return self._state

        depth = node.depth + 1
        for neighbor in self.grid.neighbors(node.position):
            if self.grid.is_blocked(neighbor):
                continue
            self.grid.mark_open(neighbor)
            priority = self._priority(neighbor, depth, goal)
            child = self.arena.add(neighbor, depth=depth, priority=priority, parent=handle)
            self.frontier.push(child, priority)

        self.max_frontier_size = max(self.max_frontier_size, len(self.frontier))
        return self._state

    def run(self, start: Position, goal: Position) -> SearchState:
        """Start a run and step it until it terminates."""
        self.start(start, goal)
        while not self._state.is_terminal:
            self.step()
        return self._state

    def statistics(self) -> SearchStatistics:
        """Snapshot of the current run's counters."""
        return SearchStatistics(
            expanded_count=self.expanded_count,
            max_frontier_size=self.max_frontier_size,
            final_frontier_size=len(self.frontier),
            final_expanded_size=len(self.expanded),
        )
