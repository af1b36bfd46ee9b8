"""Exhaustive backtracking solver for fill-in puzzles."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.exceptions import DuplicateWordError, SlotCountMismatchError
from ..core.models import Slot
from ..utils.logger import get_logger
from ..utils.pretty import format_board
from .grid import FillInGrid
from .sequencer import sequence_slots
from .slots import extract_slots

LOGGER = get_logger(__name__)

STRATEGIES = ("clone", "undo")


def fits(word: str, slot: Slot, grid: FillInGrid) -> bool:
    """Return True if ``word`` can go in ``slot`` given the letters already on ``grid``."""

    if len(word) != slot.length:
        return False
    for offset in range(slot.length):
        row, col = slot.cell_at(offset)
        cell = grid.cell(row, col)
        if cell.has_letter() and cell.letter != word[offset]:
            return False
    return True


@dataclass
class SolverConfig:
    """Configuration values driving the backtracking search.

    Attributes:
        strategy: ``"clone"`` gives every branch its own copy of the grid;
            ``"undo"`` writes in place and reverts the candidate's cells after
            the branch returns.
        log_steps: Log the board, the remaining words and each trial placement
            at DEBUG level.
    """

    strategy: str = "clone"
    log_steps: bool = False

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy '{self.strategy}', expected one of {STRATEGIES}")


@dataclass
class SolverStats:
    nodes: int = 0
    dead_ends: int = 0
    solutions: int = 0


@dataclass
class _SearchState:
    results: List[FillInGrid] = field(default_factory=list)
    stats: SolverStats = field(default_factory=SolverStats)


class FillInSolver:
    """Enumerates every complete assignment of words to slots."""

    def __init__(
        self,
        grid: FillInGrid,
        words: Iterable[str],
        config: Optional[SolverConfig] = None,
    ) -> None:
        self.grid = grid
        self.words: Tuple[str, ...] = unique_words(words)
        self.config = config or SolverConfig()
        self.slots: List[Slot] = sequence_slots(extract_slots(grid))
        if len(self.slots) != len(self.words):
            error = SlotCountMismatchError(len(self.slots), len(self.words))
            LOGGER.error("%s", error)
            raise error
        self.stats = SolverStats()

    def solve(self) -> List[FillInGrid]:
        """Run the full search and return every solution in discovery order."""

        state = _SearchState()
        LOGGER.info(
            "Solving %dx%d board: %d slots, strategy=%s",
            self.grid.bounds.rows,
            self.grid.bounds.cols,
            len(self.slots),
            self.config.strategy,
        )

        previous_limit = sys.getrecursionlimit()
        needed = len(self.slots) + 100
        if previous_limit < needed:
            sys.setrecursionlimit(needed)
        try:
            if self.config.strategy == "undo":
                self._solve_in_place(self.grid.clone(), list(self.words), state)
            else:
                self._solve_cloning(self.grid.clone(), list(self.words), state)
        finally:
            sys.setrecursionlimit(previous_limit)

        state.stats.solutions = len(state.results)
        self.stats = state.stats
        LOGGER.info(
            "Search finished: %d solution(s), %d nodes, %d dead ends",
            state.stats.solutions,
            state.stats.nodes,
            state.stats.dead_ends,
        )
        return state.results

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def _next_slot(self, remaining: Sequence[str]) -> Slot:
        return self.slots[len(self.slots) - len(remaining)]

    def _candidates(self, slot: Slot, grid: FillInGrid, remaining: Sequence[str]) -> List[str]:
        candidates = [word for word in remaining if fits(word, slot, grid)]
        if self.config.log_steps:
            LOGGER.debug("Board:\n%s", format_board(grid))
            LOGGER.debug("Remaining words: %s", list(remaining))
            LOGGER.debug(
                "Slot %s crosses filled cells %s",
                slot.describe(),
                self._filled_crossings(slot, remaining),
            )
            LOGGER.debug("Candidates for slot %s: %s", slot.describe(), candidates)
        return candidates

    def _filled_crossings(self, slot: Slot, remaining: Sequence[str]) -> List[Tuple[int, int]]:
        """Cells of ``slot`` already lettered by crossing slots earlier in the order."""

        filled = self.slots[: len(self.slots) - len(remaining)]
        cells = [slot.crossing(other) for other in filled]
        return [cell for cell in cells if cell is not None]

    def _solve_cloning(self, grid: FillInGrid, remaining: List[str], state: _SearchState) -> None:
        state.stats.nodes += 1
        if not remaining:
            state.results.append(grid)
            return

        slot = self._next_slot(remaining)
        candidates = self._candidates(slot, grid, remaining)
        if not candidates:
            state.stats.dead_ends += 1
            return

        for word in candidates:
            if self.config.log_steps:
                LOGGER.debug("Trying %s in slot %s", word, slot.describe())
            branch = grid.clone()
            branch.place_word(slot, word)
            self._solve_cloning(branch, [w for w in remaining if w != word], state)

    def _solve_in_place(self, grid: FillInGrid, remaining: List[str], state: _SearchState) -> None:
        state.stats.nodes += 1
        if not remaining:
            state.results.append(grid.clone())
            return

        slot = self._next_slot(remaining)
        candidates = self._candidates(slot, grid, remaining)
        if not candidates:
            state.stats.dead_ends += 1
            return

        for word in candidates:
            if self.config.log_steps:
                LOGGER.debug("Trying %s in slot %s", word, slot.describe())
            undo = grid.place_word_undoable(slot, word)
            try:
                self._solve_in_place(grid, [w for w in remaining if w != word], state)
            finally:
                undo()


def unique_words(words: Iterable[str]) -> Tuple[str, ...]:
    seen = set()
    ordered: List[str] = []
    for word in words:
        if word in seen:
            raise DuplicateWordError(word)
        seen.add(word)
        ordered.append(word)
    return tuple(ordered)


def solve_puzzle(
    grid: FillInGrid,
    words: Iterable[str],
    config: Optional[SolverConfig] = None,
) -> List[FillInGrid]:
    """Convenience wrapper: validate, sequence and enumerate all solutions."""

    return FillInSolver(grid, words, config).solve()
