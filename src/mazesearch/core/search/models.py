"""
Data models for maze search results.

This module provides the data structures handed from the search engine to its
callers:
- SearchStatistics: Counters describing how much work a run did
- PathResult: The route found by a run (or its absence) plus statistics

Example:
    >>> result = PathReporter.report(engine)
    >>> result.validate(grid)  # Ensures the route is a legal walk
    >>> result.coordinates(grid.size)
    [(0, 2), (1, 2), (1, 1)]
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..enums import Strategy
from ..exceptions import PathValidationError
from ..grid import Grid, Position


@dataclass(frozen=True)
class SearchStatistics:
    """
    Counters collected over one search run.

    Attributes:
        expanded_count: Nodes popped from the frontier and expanded
        max_frontier_size: Largest frontier size sampled during the run
        final_frontier_size: Nodes still pending when the run stopped
        final_expanded_size: Size of the expanded set when the run stopped
    """

    expanded_count: int
    max_frontier_size: int
    final_frontier_size: int
    final_expanded_size: int

    def __post_init__(self):
        """Validate counters."""
        for name in ("expanded_count", "max_frontier_size",
                     "final_frontier_size", "final_expanded_size"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")

    @property
    def total_cost(self) -> int:
        """Expansions excluding the initial state (0 when nothing was expanded)."""
        return max(self.expanded_count - 1, 0)

    @property
    def total_explored(self) -> int:
        """Every node discovered, expanded or not."""
        return self.final_frontier_size + self.final_expanded_size

    def to_dict(self) -> Dict[str, int]:
        return {
            "expanded_count": self.expanded_count,
            "total_cost": self.total_cost,
            "max_frontier_size": self.max_frontier_size,
            "final_frontier_size": self.final_frontier_size,
            "final_expanded_size": self.final_expanded_size,
            "total_explored": self.total_explored,
        }


@dataclass
class PathResult:
    """
    Outcome of a single search run.

    An unsolved run is represented explicitly with ``solved=False`` and an
    empty route rather than by a missing result.

    Attributes:
        strategy: Strategy used for the run
        start: Start position of the run
        goal: Goal position of the run
        solved: Whether the goal was reached
        route: Positions from start to goal inclusive (empty if unsolved)
        statistics: Search counters
    """

    strategy: Strategy
    start: Position
    goal: Position
    solved: bool
    statistics: SearchStatistics
    route: List[Position] = field(default_factory=list)

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.strategy, Strategy):
            raise TypeError("strategy must be a Strategy enum")
        if self.solved and not self.route:
            raise PathValidationError("solved result must carry a route")
        if not self.solved and self.route:
            raise PathValidationError("unsolved result cannot carry a route")

    def __len__(self) -> int:
        """Number of positions on the route."""
        return len(self.route)

    def __iter__(self):
        return iter(self.route)

    @property
    def path_length(self) -> int:
        """Node count of the route, start and goal included."""
        return len(self.route)

    def coordinates(self, size: int) -> List[Tuple[int, int]]:
        """Route as (column, row-from-bottom) pairs for a grid of ``size`` rows."""
        return [(col, size - row - 1) for row, col in self.route]

    def validate(self, grid: Grid) -> None:
        """
        Validate the route against a grid.

        Checks:
        - The route begins at ``start`` and ends at ``goal``
        - Every position is inside the grid and not a wall
        - Consecutive positions differ by one orthogonal step
        - No position repeats

        Raises:
            PathValidationError: If any check fails
        """
        if not self.solved:
            return

        if self.route[0] != self.start:
            raise PathValidationError(f"Route starts at {self.route[0]}, expected {self.start}")
        if self.route[-1] != self.goal:
            raise PathValidationError(f"Route ends at {self.route[-1]}, expected {self.goal}")

        for pos in self.route:
            if not grid.in_bounds(pos):
                raise PathValidationError(f"Position {pos} outside grid")
            if grid.is_wall(pos):
                raise PathValidationError(f"Route crosses wall at {pos}")

        for i in range(len(self.route) - 1):
            (r1, c1), (r2, c2) = self.route[i], self.route[i + 1]
            if abs(r1 - r2) + abs(c1 - c2) != 1:
                raise PathValidationError(
                    f"Route discontinuity between steps {i} and {i+1}: "
                    f"{self.route[i]} -> {self.route[i + 1]}"
                )

        if len(set(self.route)) != len(self.route):
            raise PathValidationError("Route visits a position twice")

    def to_dict(self, size: Optional[int] = None) -> Dict[str, Any]:
        """
        Convert the result to dictionary format.

        Args:
            size: Grid size; when given, display coordinates are included
        """
        data: Dict[str, Any] = {
            "strategy": self.strategy.value,
            "start": list(self.start),
            "goal": list(self.goal),
            "solved": self.solved,
            "path_length": self.path_length,
            "route": [list(pos) for pos in self.route],
            "statistics": self.statistics.to_dict(),
        }
        if size is not None:
            data["coordinates"] = [list(pair) for pair in self.coordinates(size)]
        return data
