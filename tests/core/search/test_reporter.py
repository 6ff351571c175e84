"""
Tests for path reconstruction, result models and reporting.
"""

import pytest

from mazesearch.core.enums import SearchState, Strategy
from mazesearch.core.exceptions import PathValidationError, SearchStateError
from mazesearch.core.search.engine import SearchEngine
from mazesearch.core.search.models import PathResult, SearchStatistics
from mazesearch.core.search.reporter import PathReporter


@pytest.fixture
def stats() -> SearchStatistics:
    return SearchStatistics(
        expanded_count=5, max_frontier_size=3, final_frontier_size=2, final_expanded_size=5
    )


def test_report_solved_run(corridor_grid):
    """Test a solved run reports its route and counters."""
    engine = SearchEngine(corridor_grid, Strategy.BFS)
    engine.run((0, 0), (2, 2))
    result = PathReporter.report(engine)

    assert result.solved
    assert result.route == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]
    assert result.path_length == 5
    assert result.statistics.total_cost == 4
    assert result.statistics.max_frontier_size == 1
    assert result.statistics.final_frontier_size == 0
    assert result.statistics.final_expanded_size == 5
    assert result.statistics.total_explored == 5
    result.validate(corridor_grid)


def test_report_exhausted_run(isolated_grid):
    """Test an exhausted run reports an explicit no-path result."""
    engine = SearchEngine(isolated_grid, Strategy.ASTAR)
    engine.run((0, 0), (1, 2))
    result = PathReporter.report(engine)

    assert not result.solved
    assert result.route == []
    assert result.path_length == 0
    assert result.statistics.expanded_count == 3
    assert result.goal == (1, 2)


def test_report_requires_terminated_run(open_grid):
    """Test reporting before the run ends fails loudly."""
    engine = SearchEngine(open_grid, Strategy.BFS)
    with pytest.raises(SearchStateError, match="search that is idle"):
        PathReporter.report(engine)
    engine.start((0, 0), (2, 2))
    engine.step()
    assert engine.state is SearchState.RUNNING
    with pytest.raises(SearchStateError, match="search that is running"):
        PathReporter.report(engine)


def test_report_survives_engine_reset(open_grid):
    """Test results are snapshots independent of later resets."""
    engine = SearchEngine(open_grid, Strategy.DFS)
    engine.run((0, 0), (2, 2))
    result = PathReporter.report(engine)
    engine.reset()
    assert result.path_length == 5
    assert result.statistics.final_frontier_size == 2


def test_statistics_derived_values(stats):
    """Test total cost and total explored are derived from the counters."""
    assert stats.total_cost == 4
    assert stats.total_explored == 7
    assert stats.to_dict()["total_explored"] == 7


def test_statistics_reject_negative():
    """Test counters cannot be negative."""
    with pytest.raises(ValueError, match="expanded_count cannot be negative"):
        SearchStatistics(-1, 0, 0, 0)


def test_path_result_consistency(stats):
    """Test solved results need a route and unsolved results must not have one."""
    with pytest.raises(PathValidationError, match="must carry a route"):
        PathResult(Strategy.BFS, (0, 0), (1, 1), solved=True, statistics=stats)
    with pytest.raises(PathValidationError, match="cannot carry a route"):
        PathResult(Strategy.BFS, (0, 0), (1, 1), solved=False, statistics=stats,
                   route=[(0, 0)])
    with pytest.raises(TypeError, match="Strategy enum"):
        PathResult("bfs", (0, 0), (1, 1), solved=False, statistics=stats)


@pytest.mark.parametrize(
    "route, message",
    [
        ([(0, 0), (1, 0)], "ends at"),
        ([(1, 0), (2, 0), (2, 1), (2, 2)], "starts at"),
        ([(0, 0), (0, 1), (1, 1), (2, 1), (2, 2)], "crosses wall"),
        ([(0, 0), (1, 0), (2, 1), (2, 2)], "discontinuity"),
        ([(0, 0), (1, 0), (0, 0), (1, 0), (2, 0), (2, 1), (2, 2)], "twice"),
    ],
)
def test_validate_rejects_bad_routes(corridor_grid, stats, route, message):
    """Test route validation catches illegal walks."""
    result = PathResult(Strategy.DFS, (0, 0), (2, 2), solved=True, statistics=stats, route=route)
    with pytest.raises(PathValidationError, match=message):
        result.validate(corridor_grid)


def test_coordinates_count_rows_from_bottom(corridor_grid):
    """Test display coordinates are (column, row-from-bottom)."""
    engine = SearchEngine(corridor_grid, Strategy.BFS)
    engine.run((0, 0), (2, 2))
    result = PathReporter.report(engine)
    assert result.coordinates(corridor_grid.size) == [(0, 2), (0, 1), (0, 0), (1, 0), (2, 0)]

    data = result.to_dict(corridor_grid.size)
    assert data["strategy"] == "bfs"
    assert data["solved"] is True
    assert data["coordinates"][0] == [0, 2]
    assert data["statistics"]["total_cost"] == 4
