"""Data models supporting the fill-in solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import CellType, Direction


@dataclass
class Cell:
    """Represents a grid cell: a wall, an open square, or a placed letter."""

    type: CellType = CellType.OPEN
    letter: Optional[str] = None

    def is_wall(self) -> bool:
        return self.type == CellType.WALL

    def is_open(self) -> bool:
        return self.type == CellType.OPEN

    def has_letter(self) -> bool:
        return self.type == CellType.LETTER


@dataclass(frozen=True)
class Slot:
    """A maximal run of open cells that receives exactly one word."""

    direction: Direction
    row: int
    col: int
    length: int

    @property
    def id(self) -> str:
        prefix = "AC" if self.direction == Direction.ACROSS else "DN"
        return f"{prefix}_{self.row}_{self.col}"

    @property
    def cells(self) -> List[Tuple[int, int]]:
        if self.direction == Direction.ACROSS:
            return [(self.row, self.col + i) for i in range(self.length)]
        return [(self.row + i, self.col) for i in range(self.length)]

    def cell_at(self, offset: int) -> Tuple[int, int]:
        if self.direction == Direction.DOWN:
            return self.row + offset, self.col
        return self.row, self.col + offset

    def intersects(self, other: "Slot") -> bool:
        """True when the two slots cross at a shared cell."""

        if self.direction == other.direction:
            return False
        across, down = (self, other) if self.direction == Direction.ACROSS else (other, self)
        if across.col > down.col or across.col + across.length - 1 < down.col:
            return False
        if down.row > across.row or down.row + down.length - 1 < across.row:
            return False
        return True

    def crossing(self, other: "Slot") -> Optional[Tuple[int, int]]:
        """Return the shared ``(row, col)`` if the slots intersect."""

        if not self.intersects(other):
            return None
        across, down = (self, other) if self.direction == Direction.ACROSS else (other, self)
        return across.row, down.col

    def describe(self) -> str:
        # 1-based (col, row)
        word = "across" if self.direction == Direction.ACROSS else "down"
        return f"({self.col + 1}, {self.row + 1}) {word}"
