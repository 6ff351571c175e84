"""
Tests for the heuristic and performance metrics helpers.
"""

import time

import pytest

from mazesearch.core.search.utils import PerformanceMetrics, manhattan_distance, measure


def test_manhattan_distance():
    """Test Manhattan distance is symmetric and ignores diagonals."""
    assert manhattan_distance((0, 0), (2, 3)) == 5
    assert manhattan_distance((2, 3), (0, 0)) == 5
    assert manhattan_distance((4, 4), (4, 4)) == 0


def test_metrics_validation():
    """Test metrics reject inconsistent values."""
    with pytest.raises(ValueError, match="operation must be a non-empty string"):
        PerformanceMetrics(operation=" ", start_time=0.0)
    with pytest.raises(ValueError, match="end_time cannot be before start_time"):
        PerformanceMetrics(operation="bfs", start_time=2.0, end_time=1.0)
    with pytest.raises(ValueError, match="nodes_explored cannot be negative"):
        PerformanceMetrics(operation="bfs", start_time=0.0, nodes_explored=-1)


def test_metrics_duration():
    """Test duration is reported in milliseconds once finished."""
    metrics = PerformanceMetrics(operation="bfs", start_time=1.0)
    assert metrics.duration == 0.0
    metrics.end_time = 1.5
    assert metrics.duration == pytest.approx(500.0)
    assert metrics.to_dict()["duration_ms"] == pytest.approx(500.0)


def test_measure_fills_timing_and_memory():
    """Test the measure context completes the metrics on exit."""
    with measure("dfs:corner") as metrics:
        time.sleep(0.001)
    assert metrics.end_time >= metrics.start_time
    assert metrics.duration > 0
    assert metrics.max_memory_used is not None and metrics.max_memory_used > 0
