"""Grid representation and helper utilities."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..core.constants import (
    Bounds,
    CellType,
    DEFAULT_OPEN_MARKER,
    DEFAULT_WALL_MARKER,
    OPEN_SYMBOL,
    UNSOLVED_WALL_SYMBOL,
)
from ..core.exceptions import PuzzleParseError
from ..core.models import Cell, Slot
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class BoardConfig:
    """Markers used to describe open and wall cells in board text."""

    open_marker: str = DEFAULT_OPEN_MARKER
    wall_marker: str = DEFAULT_WALL_MARKER

    def __post_init__(self) -> None:
        if len(self.open_marker) != 1 or len(self.wall_marker) != 1:
            raise ValueError("Board markers must be single characters")
        if self.open_marker == self.wall_marker:
            raise ValueError("Open and wall markers must differ")


class FillInGrid:
    """Rectangular matrix of walls, open cells and placed letters."""

    def __init__(self, cells: List[List[Cell]]) -> None:
        self.cells = cells
        rows = len(cells)
        cols = len(cells[0]) if rows else 0
        self.bounds = Bounds(rows=rows, cols=cols)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        open_marker: str = DEFAULT_OPEN_MARKER,
        wall_marker: str = DEFAULT_WALL_MARKER,
    ) -> "FillInGrid":
        """Build a grid from marker rows such as ``["1101", "1111"]``."""

        config = BoardConfig(open_marker=open_marker, wall_marker=wall_marker)
        if not rows:
            raise PuzzleParseError("Board has no rows")
        width = len(rows[0])
        cells: List[List[Cell]] = []
        for r, row in enumerate(rows):
            if len(row) != width:
                raise PuzzleParseError(
                    f"Row {r} has {len(row)} cells, expected {width}"
                )
            parsed: List[Cell] = []
            for c, symbol in enumerate(row):
                if symbol == config.open_marker:
                    parsed.append(Cell(CellType.OPEN))
                elif symbol == config.wall_marker:
                    parsed.append(Cell(CellType.WALL))
                else:
                    raise PuzzleParseError(f"Unknown symbol {symbol!r} at ({r},{c})")
            cells.append(parsed)
        grid = cls(cells)
        LOGGER.debug("Built %dx%d grid", grid.bounds.rows, grid.bounds.cols)
        return grid

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def set_letter(self, row: int, col: int, letter: str) -> None:
        cell = self.cells[row][col]
        cell.type = CellType.LETTER
        cell.letter = letter

    def clear_letter(self, row: int, col: int) -> None:
        cell = self.cells[row][col]
        cell.type = CellType.OPEN
        cell.letter = None

    # ------------------------------------------------------------------
    # Whole-grid helpers
    # ------------------------------------------------------------------
    def clone(self) -> "FillInGrid":
        return FillInGrid(copy.deepcopy(self.cells))

    def transpose(self) -> "FillInGrid":
        """Return a new grid with rows and columns swapped."""

        flipped = [
            [copy.copy(self.cells[r][c]) for r in range(self.bounds.rows)]
            for c in range(self.bounds.cols)
        ]
        return FillInGrid(flipped)

    def iter_cells(self) -> Iterable[Cell]:
        for row in self.cells:
            yield from row

    def open_count(self) -> int:
        return sum(1 for cell in self.iter_cells() if cell.is_open())

    def is_complete(self) -> bool:
        return self.open_count() == 0

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def place_word(self, slot: Slot, word: str) -> None:
        """Write ``word`` into the cells of ``slot``.

        Callers check :func:`fits` first; placement does not re-validate.
        """

        for offset, letter in enumerate(word):
            row, col = slot.cell_at(offset)
            self.set_letter(row, col, letter)

    def place_word_undoable(self, slot: Slot, word: str):
        """Place a word and return an undo callable for in-place backtracking.

        Only cells that were open before the call are recorded, so undoing
        leaves letters contributed by crossing slots untouched.
        """

        written: List[tuple] = []
        for offset, letter in enumerate(word):
            row, col = slot.cell_at(offset)
            if self.cells[row][col].is_open():
                written.append((row, col))
                self.set_letter(row, col, letter)

        def undo():
            for row, col in written:
                self.clear_letter(row, col)

        return undo

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_rows(
        self,
        wall_symbol: str = UNSOLVED_WALL_SYMBOL,
        open_symbol: str = OPEN_SYMBOL,
    ) -> List[str]:
        return ["".join(self._symbol(cell, wall_symbol, open_symbol) for cell in row) for row in self.cells]

    def to_jsonable(self) -> List[str]:
        # solved rendering: walls become blanks
        return self.to_rows(wall_symbol=OPEN_SYMBOL)

    @staticmethod
    def _symbol(cell: Cell, wall_symbol: str, open_symbol: str) -> str:
        if cell.type == CellType.LETTER:
            return cell.letter or "?"
        if cell.type == CellType.WALL:
            return wall_symbol
        return open_symbol

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FillInGrid):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"FillInGrid({self.to_rows()!r})"
