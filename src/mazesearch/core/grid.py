"""
Grid model for maze search.

The grid keeps two layers: the static layout parsed from the maze file, which
never changes, and a visitation overlay that a search run mutates as cells are
discovered (Open) and expanded (Closed). The overlay is restored from the layout
by ``reset_overlay`` between runs.
"""

import io
import logging
import math
import os
from typing import Dict, Iterator, List, Optional, Sequence, TextIO, Tuple, Union

from .enums import CellStatus
from .exceptions import ConfigurationError, SearchStateError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]  # (row, col)

# Neighbor offsets in expansion order: left, up, right, down
NEIGHBOR_OFFSETS: Tuple[Position, ...] = ((0, -1), (-1, 0), (0, 1), (1, 0))

EXIT_STATUSES = (CellStatus.EXIT_A, CellStatus.EXIT_B)


class Grid:
    """
    Square maze layout with a mutable visitation overlay.

    Attributes:
        size (int): Number of rows (and columns)
        start (Position): Coordinates of the Start cell
        exits (Dict[CellStatus, Position]): Coordinates of each exit present
    """

    def __init__(self, layout: Sequence[Sequence[CellStatus]], start: Position,
                 exits: Dict[CellStatus, Position]):
        """
        Initialize a grid from an already validated layout.

        Use ``Grid.load`` or ``Grid.from_rows`` to build a grid from raw input.
        """
        self._layout: Tuple[Tuple[CellStatus, ...], ...] = tuple(tuple(row) for row in layout)
        self._overlay: List[List[CellStatus]] = [list(row) for row in self._layout]
        self.size = len(self._layout)
        self.start = start
        self.exits = dict(exits)

    @classmethod
    def load(cls, source: Union[str, os.PathLike, TextIO],
             expected_size: Optional[int] = None) -> "Grid":
        """
        Load a grid from a maze file or text stream.

        Args:
            source: Path to a maze file, or an open text stream
            expected_size: Required grid dimension, if any

        Returns:
            Parsed and validated Grid

        Raises:
            OSError: If the file cannot be read
            ConfigurationError: If the text is not UTF-8 or the layout is malformed
        """
        try:
            if isinstance(source, (str, os.PathLike)):
                name = os.fspath(source)
                with open(source, "r", encoding="utf-8") as f:
                    text = f.read()
            else:
                name = getattr(source, "name", "<stream>")
                text = source.read()
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"{name} is not valid UTF-8 text") from e

        rows = cls._parse_text(text, name)
        grid = cls.from_rows(rows, expected_size=expected_size)
        logger.debug("Loaded %dx%d grid from %s", grid.size, grid.size, name)
        return grid

    @classmethod
    def loads(cls, text: str, expected_size: Optional[int] = None) -> "Grid":
        """Load a grid from maze text."""
        return cls.load(io.StringIO(text), expected_size=expected_size)

    @staticmethod
    def _parse_text(text: str, name: str) -> List[List[int]]:
        """Split maze text into rows of integer codes."""
        lines = [line.split() for line in text.splitlines() if line.strip()]
        tokens = [token for line in lines for token in line]
        if not tokens:
            raise ConfigurationError(f"Maze source {name} is empty")

        values: List[int] = []
        for token in tokens:
            try:
                values.append(int(token))
            except ValueError:
                raise ConfigurationError(f"Invalid cell value {token!r} in {name}") from None

        # Line-structured files must be square row by row; a single stream of
        # tokens is folded into rows once the count is known to be square.
        if len(lines) > 1:
            width = len(lines[0])
            for index, line in enumerate(lines):
                if len(line) != width:
                    raise ConfigurationError(
                        f"Row {index} of {name} has {len(line)} cells, expected {width}"
                    )
            return [values[i:i + width] for i in range(0, len(values), width)]

        side = math.isqrt(len(values))
        if side * side != len(values):
            raise ConfigurationError(
                f"{name} holds {len(values)} cells, which does not form a square grid"
            )
        return [values[i:i + side] for i in range(0, len(values), side)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]],
                  expected_size: Optional[int] = None) -> "Grid":
        """
        Build a grid from nested rows of cell codes.

        Records the Start cell and each exit in the same pass that validates
        the codes.

        Raises:
            ConfigurationError: If the layout is malformed
        """
        if not rows:
            raise ConfigurationError("Maze layout has no rows")

        size = len(rows)
        if expected_size is not None and size != expected_size:
            raise ConfigurationError(f"Maze is {size} rows high, expected {expected_size}")

        allowed = CellStatus.layout_codes()
        layout: List[List[CellStatus]] = []
        start: Optional[Position] = None
        exits: Dict[CellStatus, Position] = {}

        for r, row in enumerate(rows):
            if len(row) != size:
                raise ConfigurationError(
                    f"Row {r} has {len(row)} cells; a {size}x{size} maze needs {size}"
                )
            parsed: List[CellStatus] = []
            for c, value in enumerate(row):
                if value not in allowed:
                    raise ConfigurationError(f"Unknown cell code {value} at ({r}, {c})")
                status = CellStatus(value)
                if status is CellStatus.START:
                    if start is not None:
                        raise ConfigurationError(
                            f"Second Start cell at ({r}, {c}); first at {start}"
                        )
                    start = (r, c)
                elif status in EXIT_STATUSES:
                    if status in exits:
                        raise ConfigurationError(
                            f"Second {status.name} cell at ({r}, {c}); first at {exits[status]}"
                        )
                    exits[status] = (r, c)
                parsed.append(status)
            layout.append(parsed)

        if start is None:
            raise ConfigurationError("Maze layout has no Start cell")

        return cls(layout, start, exits)

    def in_bounds(self, pos: Position) -> bool:
        """Check whether a position lies inside the grid."""
        row, col = pos
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise IndexError(f"Position {pos} outside {self.size}x{self.size} grid")

    def layout_at(self, pos: Position) -> CellStatus:
        """Static layout status of a cell."""
        self._check(pos)
        return self._layout[pos[0]][pos[1]]

    def status_at(self, pos: Position) -> CellStatus:
        """Current overlay status of a cell."""
        self._check(pos)
        return self._overlay[pos[0]][pos[1]]

    def is_wall(self, pos: Position) -> bool:
        return self.layout_at(pos) is CellStatus.WALL

    def is_blocked(self, pos: Position) -> bool:
        """True if a search may not enter the cell: wall, open or closed."""
        return self.status_at(pos) in (CellStatus.WALL, CellStatus.OPEN, CellStatus.CLOSED)

    def _mark(self, pos: Position, status: CellStatus) -> None:
        if self.is_wall(pos):
            raise SearchStateError(f"Cannot mark wall cell {pos} as {status.name}")
        self._overlay[pos[0]][pos[1]] = status

    def mark_open(self, pos: Position) -> None:
        """Mark a cell as discovered and waiting in the frontier."""
        self._mark(pos, CellStatus.OPEN)

    def mark_closed(self, pos: Position) -> None:
        """Mark a cell as expanded."""
        self._mark(pos, CellStatus.CLOSED)

    def reset_overlay(self) -> None:
        """Restore every cell's overlay status to its layout value."""
        for r, row in enumerate(self._layout):
            self._overlay[r][:] = row

    def neighbors(self, pos: Position) -> Iterator[Position]:
        """
        Yield in-bounds orthogonal neighbors of a position.

        The order is fixed (left, up, right, down) and decides tie-breaking
        in every search strategy.
        """
        row, col = pos
        for dr, dc in NEIGHBOR_OFFSETS:
            candidate = (row + dr, col + dc)
            if self.in_bounds(candidate):
                yield candidate

    def exit_position(self, status: CellStatus) -> Position:
        """
        Get the coordinates of an exit.

        Raises:
            ConfigurationError: If the maze has no such exit
        """
        if status not in self.exits:
            raise ConfigurationError(f"Maze has no {status.name} cell")
        return self.exits[status]

    def cells(self, overlay: bool = False) -> Iterator[Tuple[Position, CellStatus]]:
        """Iterate over all cells in row-major order."""
        source = self._overlay if overlay else self._layout
        for r, row in enumerate(source):
            for c, status in enumerate(row):
                yield (r, c), status

    def count(self, status: CellStatus) -> int:
        """Count overlay cells with a given status."""
        return sum(1 for _, value in self.cells(overlay=True) if value is status)

    def to_rows(self) -> List[List[int]]:
        """Static layout as nested lists of integer codes."""
        return [[int(status) for status in row] for row in self._layout]

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, start={self.start}, exits={len(self.exits)})"
