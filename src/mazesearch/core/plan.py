"""
Run plans and the plan runner.

A run plan is an ordered list of (strategy, target) pairs executed against one
grid. Plans can be written as JSON documents, which are checked against
``RUN_PLAN_SCHEMA`` before use:

    {
        "expected_size": 25,
        "runs": [
            {"strategy": "bfs", "target": "exit_a"},
            {"strategy": "astar", "target": "corner"}
        ]
    }

The runner resets the grid overlay after every run so each search starts from
the static layout.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .enums import CellStatus, Strategy, Target
from .exceptions import ConfigurationError
from .grid import Grid, Position
from .search import (
    PathReporter,
    PathResult,
    PerformanceMetrics,
    SearchEngine,
    SearchStatistics,
    measure,
)

logger = logging.getLogger(__name__)

RUN_PLAN_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "expected_size": {"type": "integer", "minimum": 1},
        "runs": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "properties": {
                    "strategy": {"enum": [s.value for s in Strategy]},
                    "target": {"enum": [t.value for t in Target]},
                },
                "required": ["strategy", "target"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["runs"],
    "additionalProperties": False,
}

TARGET_EXITS: Dict[Target, CellStatus] = {
    Target.EXIT_A: CellStatus.EXIT_A,
    Target.EXIT_B: CellStatus.EXIT_B,
}


@dataclass(frozen=True)
class RunSpec:
    """One (strategy, target) pair of a plan."""

    strategy: Strategy
    target: Target

    @property
    def name(self) -> str:
        return f"{self.strategy.value}:{self.target.value}"


@dataclass
class RunPlan:
    """
    Ordered sequence of search runs.

    Attributes:
        runs: Runs in execution order
        expected_size: Required grid dimension, if any
    """

    runs: List[RunSpec] = field(default_factory=list)
    expected_size: Optional[int] = None

    def __iter__(self) -> Iterator[RunSpec]:
        return iter(self.runs)

    def __len__(self) -> int:
        return len(self.runs)

    @classmethod
    def default(cls) -> "RunPlan":
        """Every strategy (BFS, DFS, A*) against every target (exit A, exit B, corner)."""
        return cls(runs=[RunSpec(s, t) for s in Strategy for t in Target])

    @classmethod
    def from_dict(cls, data: Any) -> "RunPlan":
        """
        Build a plan from parsed JSON data.

        Raises:
            ConfigurationError: If the data does not match RUN_PLAN_SCHEMA
        """
        try:
            json_validate(instance=data, schema=RUN_PLAN_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid run plan: {e.message}") from e

        runs = [RunSpec(Strategy(run["strategy"]), Target(run["target"])) for run in data["runs"]]
        return cls(runs=runs, expected_size=data.get("expected_size"))

    @classmethod
    def from_json(cls, json_str: str) -> "RunPlan":
        """
        Build a plan from a JSON string or a file path prefixed with '@'.

        Raises:
            ConfigurationError: If the JSON is invalid or the file is missing
        """
        if json_str.startswith("@"):
            file_path = json_str[1:]
            if not os.path.isabs(file_path):
                file_path = os.path.join(os.getcwd(), file_path)
            if not os.path.exists(file_path):
                raise ConfigurationError(f"Plan file not found: {file_path}")
            with open(file_path, "r", encoding="utf-8") as f:
                json_str = f.read()

        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON input: {e}") from e
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "runs": [{"strategy": r.strategy.value, "target": r.target.value} for r in self.runs]
        }
        if self.expected_size is not None:
            data["expected_size"] = self.expected_size
        return data


def resolve_target(grid: Grid, target: Target) -> Tuple[Position, Position]:
    """
    Work out the start and goal positions for a target.

    Exit targets start from the grid's Start cell. The corner target starts at
    the bottom-left corner and seeks the top-right corner; either corner may
    be a wall, which leaves the run without a solution.

    Raises:
        ConfigurationError: If the maze has no such exit
    """
    if target is Target.CORNER:
        return (grid.size - 1, 0), (0, grid.size - 1)
    return grid.start, grid.exit_position(TARGET_EXITS[target])


@dataclass
class RunRecord:
    """Result of executing one RunSpec."""

    spec: RunSpec
    result: PathResult
    metrics: PerformanceMetrics

    def to_dict(self, size: Optional[int] = None) -> Dict[str, Any]:
        data = self.result.to_dict(size)
        data["target"] = self.spec.target.value
        data["metrics"] = self.metrics.to_dict()
        return data


class PlanRunner:
    """Executes run plans against a single grid."""

    def __init__(self, grid: Grid):
        self.grid = grid

    def run_one(self, spec: RunSpec) -> RunRecord:
        """
        Execute one run and reset the grid overlay afterwards.

        Raises:
            ConfigurationError: If the maze lacks the targeted exit
        """
        start, goal = resolve_target(self.grid, spec.target)
        if self.grid.is_wall(start):
            # Nothing can be seeded from a wall; report the run as unsolved
            logger.warning("%s cannot start on wall cell %s", spec.name, start)
            with measure(spec.name) as metrics:
                result = PathResult(
                    strategy=spec.strategy,
                    start=start,
                    goal=goal,
                    solved=False,
                    statistics=SearchStatistics(0, 0, 0, 0),
                )
            metrics.nodes_explored = 0
            return RunRecord(spec=spec, result=result, metrics=metrics)

        engine = SearchEngine(self.grid, spec.strategy)
        try:
            with measure(spec.name) as metrics:
                engine.run(start, goal)
            metrics.nodes_explored = engine.expanded_count
            result = PathReporter.report(engine)
        finally:
            engine.reset()

        if result.solved:
            logger.info("%s solved: path length %d, %d expansions",
                        spec.name, result.path_length, result.statistics.expanded_count)
        else:
            logger.warning("%s found no path from %s to %s", spec.name, start, goal)
        return RunRecord(spec=spec, result=result, metrics=metrics)

    def run(self, plan: RunPlan) -> List[RunRecord]:
        """
        Execute every run of a plan in order.

        Raises:
            ConfigurationError: If the grid size does not match the plan
        """
        if plan.expected_size is not None and plan.expected_size != self.grid.size:
            raise ConfigurationError(
                f"Plan expects a {plan.expected_size}x{plan.expected_size} maze, "
                f"got {self.grid.size}x{self.grid.size}"
            )
        logger.info("Running %d searches on %r", len(plan), self.grid)
        return [self.run_one(spec) for spec in plan]
