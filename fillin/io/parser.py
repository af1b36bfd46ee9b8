"""Parsing of board and word-list text blocks."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from ..core.constants import DEFAULT_OPEN_MARKER, DEFAULT_WALL_MARKER
from ..core.exceptions import DuplicateWordError, PuzzleParseError
from ..engine.grid import FillInGrid
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


def parse_board(
    text: str,
    open_marker: str = DEFAULT_OPEN_MARKER,
    wall_marker: str = DEFAULT_WALL_MARKER,
) -> FillInGrid:
    """Parse a board where each non-blank line is one row of markers.

    Surrounding whitespace on every line is ignored.
    """

    rows: List[str] = [line.strip() for line in text.splitlines()]
    rows = [row for row in rows if row]
    if not rows:
        raise PuzzleParseError("Board text contains no rows")
    return FillInGrid.from_rows(rows, open_marker=open_marker, wall_marker=wall_marker)


def parse_words(text: str) -> Tuple[str, ...]:
    """Split a word list on any whitespace, keeping input order.

    Raises:
        DuplicateWordError: if a token appears twice.
    """

    words: List[str] = []
    seen = set()
    for token in text.split():
        if token in seen:
            raise DuplicateWordError(token)
        seen.add(token)
        words.append(token)
    return tuple(words)


def load_puzzle(
    board_path: Path,
    words_path: Path,
    open_marker: str = DEFAULT_OPEN_MARKER,
    wall_marker: str = DEFAULT_WALL_MARKER,
) -> Tuple[FillInGrid, Tuple[str, ...]]:
    """Read a board file and a word-list file."""

    grid = parse_board(
        Path(board_path).read_text(encoding="utf-8"),
        open_marker=open_marker,
        wall_marker=wall_marker,
    )
    words = parse_words(Path(words_path).read_text(encoding="utf-8"))
    LOGGER.info(
        "Loaded %dx%d board from %s and %d words from %s",
        grid.bounds.rows,
        grid.bounds.cols,
        board_path,
        len(words),
        words_path,
    )
    return grid, words
