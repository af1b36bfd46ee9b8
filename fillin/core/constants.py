"""Shared constants and enumerations for the fill-in solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CellType(str, Enum):
    """All supported cell states in the grid."""

    WALL = "WALL"
    OPEN = "OPEN"
    LETTER = "LETTER"


class Direction(str, Enum):
    """Slot orientations supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"


DEFAULT_OPEN_MARKER = "1"
DEFAULT_WALL_MARKER = "0"

# Rendering symbols used by the pretty printer.
UNSOLVED_WALL_SYMBOL = "+"
OPEN_SYMBOL = " "

MIN_SLOT_LENGTH = 2


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int
