"""Slot extraction: find every maximal run of open cells."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..core.constants import Direction, MIN_SLOT_LENGTH
from ..core.models import Cell, Slot
from ..utils.logger import get_logger
from .grid import FillInGrid


LOGGER = get_logger(__name__)


def find_runs(row: Sequence[Cell], min_len: int = MIN_SLOT_LENGTH) -> List[Tuple[int, int]]:
    """Return ``(start, length)`` for each maximal open run of at least ``min_len``.

    Runs never overlap; a run ends at a wall or at the end of the row.
    """

    runs: List[Tuple[int, int]] = []
    start = None
    for index, cell in enumerate(row):
        if cell.is_open():
            if start is None:
                start = index
            continue
        if start is not None:
            if index - start >= min_len:
                runs.append((start, index - start))
            start = None
    if start is not None and len(row) - start >= min_len:
        runs.append((start, len(row) - start))
    return runs


def _horizontal_slots(grid: FillInGrid) -> List[Slot]:
    slots: List[Slot] = []
    for r, row in enumerate(grid.cells):
        for start, length in find_runs(row):
            slots.append(Slot(direction=Direction.ACROSS, row=r, col=start, length=length))
    return slots


def extract_slots(grid: FillInGrid) -> List[Slot]:
    """Derive across slots, then down slots, in row-major discovery order.

    Down slots come from the same scan over the transposed grid, with their
    coordinates swapped back. Single open cells produce no slot.
    """

    across = _horizontal_slots(grid)
    down = [
        Slot(direction=Direction.DOWN, row=slot.col, col=slot.row, length=slot.length)
        for slot in _horizontal_slots(grid.transpose())
    ]
    LOGGER.debug("Extracted %d across and %d down slots", len(across), len(down))
    return across + down
