"""
mazesearch - Grid Maze Search Framework

This package searches square grid mazes for designated exits using
interchangeable search strategies and reports the discovered path together
with search statistics. It includes:

- Grid loading, validation and a per-run visitation overlay
- A shared search engine with FIFO, LIFO and priority frontiers
- Path reconstruction and reporting
- Run plans and a command line driver

Run ``python -m mazesearch --help`` for command line usage.
"""

__version__ = "0.1.0"
__author__ = "mazesearch Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("mazesearch requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.enums import CellStatus, SearchState, Strategy, Target
from .core.grid import Grid
from .core.search import PathReporter, PathResult, SearchEngine

__all__ = [
    "CellStatus",
    "Grid",
    "PathReporter",
    "PathResult",
    "SearchEngine",
    "SearchState",
    "Strategy",
    "Target",
]
