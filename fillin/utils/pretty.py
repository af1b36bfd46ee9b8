"""Pretty-print helpers for fill-in boards."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Sequence

from ..core.constants import OPEN_SYMBOL, UNSOLVED_WALL_SYMBOL

if TYPE_CHECKING:
    from ..engine.grid import FillInGrid


NO_SOLUTION_MESSAGE = "No solution found."


def format_board(grid: FillInGrid, solved: bool = False) -> str:
    """Render a board between ``=`` dividers, one space between cells.

    Walls render as ``+`` while solving and as blanks once solved.
    """

    wall = OPEN_SYMBOL if solved else UNSOLVED_WALL_SYMBOL
    divider = "=" * (2 * grid.bounds.cols - 1)
    lines = [divider]
    for row in grid.to_rows(wall_symbol=wall, open_symbol=OPEN_SYMBOL):
        lines.append(" ".join(row))
    lines.append(divider)
    return "\n".join(lines)


def print_solutions(solutions: Sequence[FillInGrid], *, stream=None) -> None:
    """Print every solved board, or a notice when there are none."""

    stream = stream or sys.stdout
    if not solutions:
        print(NO_SOLUTION_MESSAGE, file=stream)
        return
    print(f"Solutions ({len(solutions)}):", file=stream)
    for solution in solutions:
        print(format_board(solution, solved=True), file=stream)
        print(file=stream)
