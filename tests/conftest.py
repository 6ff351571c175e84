"""Shared test fixtures."""

import random
from collections import deque
from typing import Dict, List, Optional

import pytest

from mazesearch.core.grid import Grid, Position

# S # .
# . # .
# . . E
CORRIDOR_ROWS = [
    [4, 5, 1],
    [1, 5, 1],
    [1, 1, 8],
]

# Goal region cut off from the start region by walls
ISOLATED_ROWS = [
    [4, 1, 5],
    [1, 5, 8],
    [5, 1, 1],
]

OPEN_ROWS = [
    [4, 1, 1],
    [1, 1, 1],
    [1, 1, 8],
]

# Start (2,2), exit A (1,4), exit B (4,2); both corners free
SAMPLE_MAZE = """\
1 1 1 5 1
1 5 1 5 8
1 5 4 1 1
1 5 5 5 1
1 1 9 1 1
"""

# Walled border: start (1,1), exit A (1,3), exit B (3,3); both corners are walls
BORDERED_MAZE = """\
5 5 5 5 5
5 4 1 8 5
5 1 5 1 5
5 1 1 9 5
5 5 5 5 5
"""


@pytest.fixture
def corridor_grid() -> Grid:
    """3x3 grid whose only route runs down the left side and along the bottom."""
    return Grid.from_rows(CORRIDOR_ROWS)


@pytest.fixture
def isolated_grid() -> Grid:
    """3x3 grid where exit A cannot be reached from the start."""
    return Grid.from_rows(ISOLATED_ROWS)


@pytest.fixture
def open_grid() -> Grid:
    """3x3 grid without walls, start top-left and exit A bottom-right."""
    return Grid.from_rows(OPEN_ROWS)


@pytest.fixture
def sample_grid() -> Grid:
    """5x5 grid with both exits and free corners."""
    return Grid.loads(SAMPLE_MAZE)


@pytest.fixture
def sample_maze_file(tmp_path):
    """SAMPLE_MAZE written to disk."""
    path = tmp_path / "map.txt"
    path.write_text(SAMPLE_MAZE)
    return path


@pytest.fixture
def bordered_grid() -> Grid:
    """5x5 grid enclosed by walls, so corner runs cannot start."""
    return Grid.loads(BORDERED_MAZE)


@pytest.fixture
def bordered_maze_file(tmp_path):
    """BORDERED_MAZE written to disk."""
    path = tmp_path / "bordered.txt"
    path.write_text(BORDERED_MAZE)
    return path


def make_random_rows(seed: int, size: int = 8, wall_chance: float = 0.3) -> List[List[int]]:
    """Random layout with the start top-left and exit A bottom-right."""
    rng = random.Random(seed)
    rows = [[5 if rng.random() < wall_chance else 1 for _ in range(size)] for _ in range(size)]
    rows[0][0] = 4
    rows[size - 1][size - 1] = 8
    return rows


def shortest_distance(grid: Grid, start: Position, goal: Position) -> Optional[int]:
    """Independent breadth-first step count, or None when unreachable."""
    distances: Dict[Position, int] = {start: 0}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        if pos == goal:
            return distances[pos]
        for neighbor in grid.neighbors(pos):
            if neighbor not in distances and not grid.is_wall(neighbor):
                distances[neighbor] = distances[pos] + 1
                queue.append(neighbor)
    return None


@pytest.fixture
def random_grids() -> List[Grid]:
    """A batch of seeded random 8x8 grids."""
    return [Grid.from_rows(make_random_rows(seed)) for seed in range(20)]


@pytest.fixture
def bfs_distance():
    """Reference shortest-distance function."""
    return shortest_distance
