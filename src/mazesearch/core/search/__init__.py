"""
Graph search over maze grids.
"""

from .engine import SearchEngine
from .frontier import (
    FifoFrontier,
    Frontier,
    LifoFrontier,
    PriorityFrontier,
    create_frontier,
)
from .models import PathResult, SearchStatistics
from .nodes import NodeArena, NodeHandle, SearchNode
from .reporter import PathReporter, reconstruct_path
from .utils import PerformanceMetrics, manhattan_distance, measure

__all__ = [
    "FifoFrontier",
    "Frontier",
    "LifoFrontier",
    "NodeArena",
    "NodeHandle",
    "PathReporter",
    "PathResult",
    "PerformanceMetrics",
    "PriorityFrontier",
    "SearchEngine",
    "SearchNode",
    "SearchStatistics",
    "create_frontier",
    "manhattan_distance",
    "measure",
    "reconstruct_path",
]
