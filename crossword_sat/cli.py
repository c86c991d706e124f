"""CLI entrypoint for the SAT-backed crossword solver."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.exceptions import MalformedGrid, UnknownBackend, WordListLoadError
from .data.wordlist import WordListConfig, load_word_list
from .engine.backends import BackendName, available_backends
from .engine.solver import CrosswordSolver, SolverConfig
from .utils.logger import configure_logging
from .utils.pretty import pretty_print_grid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve crossword grids with a SAT solver",
    )
    parser.add_argument(
        "grid",
        type=str,
        help="The grid; each line is a row, '.' is a blank, '#' is a block, A-Z are prefilled letters",
    )
    parser.add_argument(
        "-w",
        "--wordlist",
        type=Path,
        required=True,
        help="Path to the word list (one word per line)",
    )
    parser.add_argument(
        "-s",
        "--solver",
        type=str,
        default=BackendName.CADICAL.value,
        help=f"SAT engine to use ({', '.join(available_backends())})",
    )
    parser.add_argument(
        "-c",
        "--count",
        type=int,
        default=1,
        help="Desired number of solutions",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print solutions with row/column headers",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.count < 1:
        parser.error("--count must be at least 1")
    # Accept literal "\n" row separators from the shell.
    grid_text = args.grid.replace("\\n", "\n")

    try:
        solver = CrosswordSolver(SolverConfig(backend=args.solver, solution_count=args.count))
    except UnknownBackend as exc:
        parser.error(str(exc))

    try:
        words = load_word_list(WordListConfig(path=args.wordlist))
        result = solver.solve(grid_text, words)
    except (MalformedGrid, WordListLoadError) as exc:
        parser.error(str(exc))

    for number, grid in enumerate(result.grids, start=1):
        if number > 1:
            print()
        if args.pretty:
            pretty_print_grid(grid, label=f"Solution #{number}")
        else:
            print(grid)

    if result.failed:
        print(f"Solving failed: {result.error}", file=sys.stderr)
        return 1
    if len(result.grids) < args.count:
        print("No solution found." if not result.grids else "No more solution.")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
