"""Solver for clue-less fill-in word puzzles.

This package exposes the public API surface via:

- ``fillin.engine.grid.FillInGrid``: the board of walls, open cells and letters.
- ``fillin.engine.solver.FillInSolver``: enumerates every complete placement.
- ``fillin.io.parser`` helpers: turn board and word-list text into inputs.
"""

from .engine.grid import FillInGrid
from .engine.solver import FillInSolver, SolverConfig, fits, solve_puzzle
from .io.parser import load_puzzle, parse_board, parse_words

__all__ = [
    "FillInGrid",
    "FillInSolver",
    "SolverConfig",
    "fits",
    "solve_puzzle",
    "load_puzzle",
    "parse_board",
    "parse_words",
]

__version__ = "0.1.0"
