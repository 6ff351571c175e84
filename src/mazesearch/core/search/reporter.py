"""
Path reconstruction and result reporting.

The route is rebuilt by walking parent handles from the goal node back to the
start node and reversing the walk.
"""

from typing import List

from ..enums import SearchState
from ..exceptions import SearchStateError
from ..grid import Position
from .engine import SearchEngine
from .models import PathResult
from .nodes import NodeArena, NodeHandle


def reconstruct_path(arena: NodeArena, handle: NodeHandle) -> List[Position]:
    """
    Rebuild the route ending at a node.

    Args:
        arena: Arena holding the run's nodes
        handle: Handle of the final node

    Returns:
        Positions from the start node to ``handle`` inclusive
    """
    path = [node.position for node in arena.ancestry(handle)]
    path.reverse()
    return path


class PathReporter:
    """Builds PathResult objects from finished search runs."""

    @staticmethod
    def report(engine: SearchEngine) -> PathResult:
        """
        Summarize a finished run.

        An EXHAUSTED run yields a result with ``solved=False`` and no route.

        Raises:
            SearchStateError: If the run has not terminated
        """
        state = engine.state
        if not state.is_terminal:
            raise SearchStateError(f"Cannot report on a search that is {state.value}")

        assert engine.start_position is not None and engine.goal_position is not None
        route: List[Position] = []
        if state is SearchState.SOLVED:
            route = reconstruct_path(engine.arena, engine.goal_handle)

        return PathResult(
            strategy=engine.strategy,
            start=engine.start_position,
            goal=engine.goal_position,
            solved=state is SearchState.SOLVED,
            statistics=engine.statistics(),
            route=route,
        )
