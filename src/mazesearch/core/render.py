"""
Text rendering of grids and search results.
"""

from typing import Dict, Iterable, List, Optional, Set

from .enums import CellStatus
from .grid import Grid, Position
from .search.models import PathResult

# Symbols for static layout cells
LAYOUT_SYMBOLS: Dict[CellStatus, str] = {
    CellStatus.WALL: "#",
    CellStatus.START: "S",
    CellStatus.EXIT_A: "E",
    CellStatus.EXIT_B: "F",
    CellStatus.FREE: " ",
}

PATH_SYMBOL = "."
OPEN_SYMBOL = "o"
CLOSED_SYMBOL = "x"

NO_SOLUTION_MESSAGE = "This maze has no solution!"


def render_grid(grid: Grid, path: Optional[Iterable[Position]] = None,
                show_overlay: bool = False) -> str:
    """
    Render a grid as text, one line per row.

    Layout symbols (walls, start, exits) always win over path marks. With
    ``show_overlay`` the current run's Open and Closed cells are drawn too.

    Args:
        grid: Grid to draw
        path: Positions to mark as the route
        show_overlay: Whether to mark Open/Closed cells off the route
    """
    on_path: Set[Position] = set(path or ())
    lines: List[str] = []
    for r in range(grid.size):
        chars = []
        for c in range(grid.size):
            pos = (r, c)
            layout = grid.layout_at(pos)
            if layout is not CellStatus.FREE:
                chars.append(LAYOUT_SYMBOLS[layout])
            elif pos in on_path:
                chars.append(PATH_SYMBOL)
            elif show_overlay and grid.status_at(pos) is CellStatus.OPEN:
                chars.append(OPEN_SYMBOL)
            elif show_overlay and grid.status_at(pos) is CellStatus.CLOSED:
                chars.append(CLOSED_SYMBOL)
            else:
                chars.append(LAYOUT_SYMBOLS[CellStatus.FREE])
        lines.append("".join(chars))
    return "\n".join(lines)


def format_coordinates(result: PathResult, size: int) -> str:
    """Route as ``(col,row)`` pairs counted from the bottom-left, joined by arrows."""
    return " -> ".join(f"({col},{row})" for col, row in result.coordinates(size))


def format_statistics(result: PathResult) -> str:
    """Statistics block for a search result."""
    stats = result.statistics
    return "\n".join([
        f"Path Cost: {result.path_length}",
        f"Total Cost: {stats.total_cost}",
        f"Maximum Size of Open Queue (fringe): {stats.max_frontier_size}",
        f"Final Size of Open Queue: {stats.final_frontier_size}",
        f"Final Size of Closed Queue (expanded states): {stats.final_expanded_size}",
        f"Total number of explored states (whether expanded or not): {stats.total_explored}",
    ])


def format_report(grid: Grid, result: PathResult) -> str:
    """Full text report: rendered route, coordinates and statistics."""
    if not result.solved:
        return "\n".join([NO_SOLUTION_MESSAGE, "", format_statistics(result)])

    return "\n".join([
        "Path Taken",
        render_grid(grid, result.route),
        "",
        "Complete path: ",
        format_coordinates(result, grid.size),
        "",
        format_statistics(result),
    ])
