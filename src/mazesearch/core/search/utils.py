"""
Utility functions for maze search operations.
"""

import logging
import os
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Generator, Optional, Union

import psutil  # type: ignore # Missing stubs

from ..grid import Position

logger = logging.getLogger(__name__)


def manhattan_distance(a: Position, b: Position) -> int:
    """Manhattan distance between two grid positions."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    mem_info = process.memory_info()
    return int(mem_info.rss)  # Explicitly convert to int for type safety


@dataclass
class PerformanceMetrics:
    """
    Container for search performance metrics.

    Attributes:
        operation: Name of the search operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        nodes_explored: Number of nodes expanded during the search
        max_memory_used: Process memory at the end of the operation (bytes)

    Example:
        >>> metrics = PerformanceMetrics(operation="bfs:exit_a", start_time=time.perf_counter())
        >>> # ... run search ...
        >>> metrics.end_time = time.perf_counter()
        >>> print(f"Search took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: Optional[int] = None
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if self.end_time < 0:
            raise ValueError("end_time cannot be negative")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

        if self.nodes_explored is not None and self.nodes_explored < 0:
            raise ValueError("nodes_explored cannot be negative")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }


@contextmanager
def measure(operation: str) -> Generator[PerformanceMetrics, None, None]:
    """
    Context manager recording timing and memory for an operation.

    The yielded metrics object is completed when the block exits; callers
    fill in ``nodes_explored`` themselves.
    """
    metrics = PerformanceMetrics(operation=operation, start_time=time.perf_counter())
    try:
        yield metrics
    finally:
        metrics.end_time = time.perf_counter()
        metrics.max_memory_used = get_memory_usage()
        logger.debug("%s finished in %.2fms", operation, metrics.duration)
