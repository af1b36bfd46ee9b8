"""CP-SAT enumeration of fill-in solutions using OR-Tools.

Independent of the backtracking search, so the two can cross-check each
other. Solutions come back in whatever order CP-SAT finds them.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Sequence, Tuple

from ortools.sat.python import cp_model

from ..core.exceptions import SearchTimeoutError, SlotCountMismatchError
from ..core.models import Slot
from ..utils.logger import get_logger
from .grid import FillInGrid
from .slots import extract_slots
from .solver import unique_words

LOGGER = get_logger(__name__)


class _SolutionCollector(cp_model.CpSolverSolutionCallback):
    """Turns every CP-SAT solution into a lettered grid."""

    def __init__(
        self,
        grid: FillInGrid,
        slots: Sequence[Slot],
        choices: Dict[Tuple[int, str], cp_model.IntVar],
    ) -> None:
        super().__init__()
        self._grid = grid
        self._slots = slots
        self._choices = choices
        self.solutions: List[FillInGrid] = []

    def on_solution_callback(self) -> None:
        solution = self._grid.clone()
        for (index, word), var in self._choices.items():
            if self.value(var):
                solution.place_word(self._slots[index], word)
        self.solutions.append(solution)


def enumerate_solutions_cpsat(
    grid: FillInGrid,
    words: Iterable[str],
    timeout: float = 30.0,
) -> List[FillInGrid]:
    """Enumerate all solutions with CP-SAT.

    Args:
        grid: Unfilled board.
        words: Word pool; must be unique and match the slot count.
        timeout: Solver time limit in seconds.

    Returns:
        Every solution, as lettered grids.

    Raises:
        SearchTimeoutError: if the time limit stops the enumeration early.
    """
    pool = unique_words(words)
    slots = extract_slots(grid)
    if len(slots) != len(pool):
        error = SlotCountMismatchError(len(slots), len(pool))
        LOGGER.error("%s", error)
        raise error
    if not slots:
        return [grid.clone()]

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: one boolean per (slot, same-length word)
    # ------------------------------------------------------------------
    choices: Dict[Tuple[int, str], cp_model.IntVar] = {}
    by_slot: Dict[int, List[cp_model.IntVar]] = defaultdict(list)
    by_word: Dict[str, List[cp_model.IntVar]] = defaultdict(list)
    for index, slot in enumerate(slots):
        for word in pool:
            if len(word) != slot.length:
                continue
            var = model.new_bool_var(f"x_{slot.id}_{word}")
            choices[(index, word)] = var
            by_slot[index].append(var)
            by_word[word].append(var)

    for index, slot in enumerate(slots):
        if not by_slot[index]:
            LOGGER.info("CP-SAT: no word of length %d for slot %s", slot.length, slot.id)
            return []
        model.add_exactly_one(by_slot[index])
    for word in pool:
        if not by_word[word]:
            LOGGER.info("CP-SAT: no slot of length %d for word %s", len(word), word)
            return []
        model.add_exactly_one(by_word[word])

    # ------------------------------------------------------------------
    # Step 2: cell letter variables tied to the chosen words
    # ------------------------------------------------------------------
    alphabet = sorted({ch for word in pool for ch in word})
    codes = {ch: code for code, ch in enumerate(alphabet)}
    cell_vars: Dict[Tuple[int, int], cp_model.IntVar] = {}
    for index, slot in enumerate(slots):
        for offset, (r, c) in enumerate(slot.cells):
            if (r, c) not in cell_vars:
                cell_vars[(r, c)] = model.new_int_var(0, len(alphabet) - 1, f"L_{r}_{c}")
            for word in pool:
                var = choices.get((index, word))
                if var is not None:
                    model.add(cell_vars[(r, c)] == codes[word[offset]]).only_enforce_if(var)

    # ------------------------------------------------------------------
    # Step 3: enumerate
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.enumerate_all_solutions = True
    solver.parameters.num_workers = 1

    LOGGER.info(
        "CP-SAT: %d slots, %d choice vars, %d cell vars, enumerating (timeout=%0.1fs)...",
        len(slots),
        len(choices),
        len(cell_vars),
        timeout,
    )
    collector = _SolutionCollector(grid, slots, choices)
    status = solver.solve(model, collector)
    LOGGER.info(
        "CP-SAT: %d solution(s), status=%s, %.2fs",
        len(collector.solutions),
        solver.status_name(status),
        solver.wall_time,
    )
    # with enumerate_all_solutions, only these two statuses mean the search finished
    if status not in (cp_model.OPTIMAL, cp_model.INFEASIBLE):
        error = SearchTimeoutError(timeout, len(collector.solutions))
        LOGGER.error("CP-SAT: %s", error)
        raise error
    return collector.solutions
