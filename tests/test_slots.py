import re
import unittest
from typing import List

from fillin.core.constants import CellType, Direction
from fillin.core.models import Cell, Slot
from fillin.engine.grid import FillInGrid
from fillin.engine.sequencer import build_intersections, sequence_slots
from fillin.engine.slots import extract_slots, find_runs


def reference_slot_count(rows: List[str]) -> int:
    """Count open runs of length >= 2 with a regex, independently of the scanner."""

    columns = ["".join(row[c] for row in rows) for c in range(len(rows[0]))]
    return sum(len(re.findall(r"11+", line)) for line in rows + columns)


class FindRunsTests(unittest.TestCase):
    def _row(self, markers: str) -> List[Cell]:
        return [Cell(CellType.OPEN if m == "1" else CellType.WALL) for m in markers]

    def test_runs_are_maximal_and_non_overlapping(self) -> None:
        self.assertEqual(find_runs(self._row("1101110111")), [(0, 2), (3, 3), (7, 3)])

    def test_single_cells_are_skipped(self) -> None:
        self.assertEqual(find_runs(self._row("10101")), [])

    def test_run_reaching_row_end(self) -> None:
        self.assertEqual(find_runs(self._row("0011")), [(2, 2)])

    def test_full_row(self) -> None:
        self.assertEqual(find_runs(self._row("1111")), [(0, 4)])


class ExtractSlotsTests(unittest.TestCase):
    def test_two_by_two_block(self) -> None:
        slots = extract_slots(FillInGrid.from_rows(["11", "11"]))
        self.assertEqual(
            slots,
            [
                Slot(Direction.ACROSS, 0, 0, 2),
                Slot(Direction.ACROSS, 1, 0, 2),
                Slot(Direction.DOWN, 0, 0, 2),
                Slot(Direction.DOWN, 0, 1, 2),
            ],
        )

    def test_walled_rows_have_no_down_slots(self) -> None:
        slots = extract_slots(FillInGrid.from_rows(["111", "000", "111"]))
        self.assertEqual(
            slots,
            [Slot(Direction.ACROSS, 0, 0, 3), Slot(Direction.ACROSS, 2, 0, 3)],
        )

    def test_down_coordinates_map_back(self) -> None:
        slots = extract_slots(FillInGrid.from_rows(["010", "011", "010"]))
        self.assertIn(Slot(Direction.DOWN, 0, 1, 3), slots)
        self.assertIn(Slot(Direction.ACROSS, 1, 1, 2), slots)
        self.assertEqual(len(slots), 2)

    def test_isolated_open_cell_yields_no_slot(self) -> None:
        slots = extract_slots(FillInGrid.from_rows(["110", "001"]))
        self.assertEqual(slots, [Slot(Direction.ACROSS, 0, 0, 2)])

    def test_counts_match_reference_scanner(self) -> None:
        boards = [
            ["11", "11"],
            ["111", "000", "111"],
            ["11011", "11011"],
            ["1111", "1001", "1111", "1011"],
            ["10101", "11111", "10101"],
        ]
        for rows in boards:
            with self.subTest(rows=rows):
                slots = extract_slots(FillInGrid.from_rows(rows))
                self.assertEqual(len(slots), reference_slot_count(rows))
                self.assertTrue(all(slot.length >= 2 for slot in slots))


class SequenceSlotsTests(unittest.TestCase):
    def test_breadth_first_from_first_slot(self) -> None:
        slots = extract_slots(FillInGrid.from_rows(["11", "11"]))
        ordered = sequence_slots(slots)
        self.assertEqual(
            ordered,
            [
                Slot(Direction.ACROSS, 0, 0, 2),
                Slot(Direction.DOWN, 0, 0, 2),
                Slot(Direction.DOWN, 0, 1, 2),
                Slot(Direction.ACROSS, 1, 0, 2),
            ],
        )

    def test_disconnected_regions_restart_from_next_unvisited(self) -> None:
        slots = extract_slots(FillInGrid.from_rows(["11011", "11011"]))
        ordered = sequence_slots(slots)
        expected_indices = [0, 4, 5, 2, 1, 6, 7, 3]
        self.assertEqual(ordered, [slots[i] for i in expected_indices])

    def test_order_is_a_permutation_with_connected_prefixes(self) -> None:
        rows = ["1111", "1001", "1111", "1011"]
        slots = extract_slots(FillInGrid.from_rows(rows))
        ordered = sequence_slots(slots)
        self.assertEqual(len(ordered), len(slots))
        self.assertEqual(set(ordered), set(slots))
        for position, slot in enumerate(ordered[1:], start=1):
            earlier = ordered[:position]
            self.assertTrue(any(slot.intersects(prev) for prev in earlier), slot)

    def test_no_intersections_keeps_extraction_order(self) -> None:
        slots = extract_slots(FillInGrid.from_rows(["111", "000", "111"]))
        self.assertEqual(sequence_slots(slots), slots)

    def test_empty_input(self) -> None:
        self.assertEqual(sequence_slots([]), [])

    def test_adjacency_is_symmetric(self) -> None:
        slots = extract_slots(FillInGrid.from_rows(["11", "11"]))
        adjacency = build_intersections(slots)
        self.assertEqual(adjacency[0], [2, 3])
        self.assertEqual(adjacency[2], [0, 1])
        for node, neighbours in adjacency.items():
            for other in neighbours:
                self.assertIn(node, adjacency[other])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
