"""CLI entrypoint for the fill-in puzzle solver."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from fillin.core.exceptions import FillInError
from fillin.engine.grid import FillInGrid
from fillin.engine.solver import STRATEGIES, FillInSolver, SolverConfig
from fillin.io.parser import load_puzzle
from fillin.utils.logger import configure_logging, get_logger
from fillin.utils.pretty import print_solutions

LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve fill-in word puzzles and print every solution",
    )
    parser.add_argument("--board", type=Path, required=True, help="Board file, one row of markers per line")
    parser.add_argument("--words", type=Path, required=True, help="Word list, separated by whitespace")
    parser.add_argument("--open-marker", type=str, default="1", help="Symbol for open cells (default 1)")
    parser.add_argument("--wall-marker", type=str, default="0", help="Symbol for wall cells (default 0)")
    parser.add_argument(
        "--strategy",
        type=str,
        choices=list(STRATEGIES),
        default="clone",
        help="Branch isolation: copy the grid per branch, or write and undo in place",
    )
    parser.add_argument(
        "--backend",
        type=str,
        choices=["backtrack", "cpsat"],
        default="backtrack",
        help="Search backend (cpsat uses OR-Tools and ignores --strategy)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Time limit in seconds for the cpsat backend",
    )
    parser.add_argument(
        "--log-steps",
        action="store_true",
        help="Log every board, candidate list and trial placement (implies DEBUG)",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def run(args: argparse.Namespace) -> List[FillInGrid]:
    grid, words = load_puzzle(
        args.board,
        args.words,
        open_marker=args.open_marker,
        wall_marker=args.wall_marker,
    )
    if args.backend == "cpsat":
        from fillin.engine.cp_solver import enumerate_solutions_cpsat

        return enumerate_solutions_cpsat(grid, words, timeout=args.timeout)

    config = SolverConfig(strategy=args.strategy, log_steps=args.log_steps)
    return FillInSolver(grid, words, config).solve()


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.DEBUG if args.log_steps else getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    try:
        solutions = run(args)
    except (FillInError, ValueError, OSError) as exc:
        LOGGER.error("Cannot solve puzzle: %s", exc)
        parser.exit(2, f"{parser.prog}: error: {exc}\n")

    print_solutions(solutions)

    if args.output:
        payload: Dict[str, Any] = {
            "solution_count": len(solutions),
            "solutions": [solution.to_jsonable() for solution in solutions],
        }
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Wrote %d solution(s) to %s", len(solutions), args.output)


if __name__ == "__main__":  # pragma: no cover
    main()
