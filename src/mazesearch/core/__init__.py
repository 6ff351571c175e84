"""Core maze search functionality."""

from .enums import CellStatus, SearchState, Strategy, Target
from .exceptions import (
    ConfigurationError,
    MazeError,
    PathValidationError,
    SearchStateError,
)
from .grid import Grid, Position
from .search import PathReporter, PathResult, SearchEngine, SearchStatistics
from .render import format_report, render_grid
from .plan import PlanRunner, RunPlan, RunRecord, RunSpec, resolve_target

__all__ = [
    "CellStatus",
    "ConfigurationError",
    "Grid",
    "MazeError",
    "PathReporter",
    "PathResult",
    "PathValidationError",
    "PlanRunner",
    "Position",
    "RunPlan",
    "RunRecord",
    "RunSpec",
    "SearchEngine",
    "SearchState",
    "SearchStateError",
    "SearchStatistics",
    "Strategy",
    "Target",
    "format_report",
    "render_grid",
    "resolve_target",
]
