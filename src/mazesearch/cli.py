"""Command Line Interface for the maze search system.

This module provides a CLI for searching maze files. It supports:
    - run: Execute a run plan (by default every strategy against every target)
    - solve: Execute a single strategy against a single target
    - show: Render a maze without searching it

Run plans can be provided either as a direct JSON string or as a file path
prefixed with '@'.

Example Usage:
    python -m mazesearch run map.txt
    python -m mazesearch run map.txt --plan @plans/astar_only.json --format json
    python -m mazesearch solve map.txt --strategy astar --target corner
    python -m mazesearch show map.txt
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, TextIO

from mazesearch.core.enums import Strategy, Target
from mazesearch.core.exceptions import ConfigurationError
from mazesearch.core.grid import Grid
from mazesearch.core.plan import PlanRunner, RunPlan, RunRecord, RunSpec
from mazesearch.core.render import format_report, render_grid

SEPARATOR = "\n---------------------------------------------------------\n"


def configure_logging(verbose: int, quiet: bool) -> None:
    """Configure root logging from the verbosity flags."""
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def write_text(grid: Grid, records: List[RunRecord], out: TextIO) -> None:
    """Write records as text reports, with a heading whenever the strategy changes."""
    current: Optional[Strategy] = None
    for record in records:
        strategy = record.spec.strategy
        if strategy is not current:
            print(strategy.label, file=out)
            print(SEPARATOR, file=out)
            current = strategy
        print(record.spec.target.label, file=out)
        print(file=out)
        print(format_report(grid, record.result), file=out)
        print(SEPARATOR, file=out)


def write_json(grid: Grid, records: List[RunRecord], out: TextIO) -> None:
    """Write records as a JSON document."""
    data = {
        "size": grid.size,
        "runs": [record.to_dict(grid.size) for record in records],
    }
    json.dump(data, out, indent=2)
    print(file=out)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="mazesearch", description="Grid maze search")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log output (repeat for debug)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    run = subparsers.add_parser("run", help="Execute a run plan against a maze")
    run.add_argument("grid", help="Maze file")
    run.add_argument("--plan", help="JSON string or @filename with the run plan")
    run.add_argument("--format", choices=["text", "json"], default="text")

    solve = subparsers.add_parser("solve", help="Search a maze with one strategy")
    solve.add_argument("grid", help="Maze file")
    solve.add_argument("--strategy", choices=[s.value for s in Strategy], default="bfs")
    solve.add_argument("--target", choices=[t.value for t in Target], default="exit_a")
    solve.add_argument("--format", choices=["text", "json"], default="text")

    show = subparsers.add_parser("show", help="Render a maze")
    show.add_argument("grid", help="Maze file")

    return parser


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit status (0 success, 2 for bad input).
    """
    out = out or sys.stdout
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help(out)
        return 1

    configure_logging(args.verbose, args.quiet)

    try:
        if args.command == "show":
            grid = Grid.load(args.grid)
            print(render_grid(grid), file=out)
            return 0

        if args.command == "run":
            plan = RunPlan.from_json(args.plan) if args.plan else RunPlan.default()
            grid = Grid.load(args.grid, expected_size=plan.expected_size)
            records = PlanRunner(grid).run(plan)
        else:
            grid = Grid.load(args.grid)
            spec = RunSpec(Strategy(args.strategy), Target(args.target))
            records = [PlanRunner(grid).run_one(spec)]

    except (ConfigurationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.format == "json":
        write_json(grid, records, out)
    else:
        write_text(grid, records, out)
    return 0
