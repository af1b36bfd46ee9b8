"""Slot ordering that surfaces crossing constraints as early as possible."""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Sequence, Set

from ..core.models import Slot
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def build_intersections(slots: Sequence[Slot]) -> Dict[int, List[int]]:
    """Map each slot index to the indices of slots crossing it, in input order."""

    adjacency: Dict[int, List[int]] = {index: [] for index in range(len(slots))}
    for i, first in enumerate(slots):
        for j in range(i + 1, len(slots)):
            if first.intersects(slots[j]):
                adjacency[i].append(j)
                adjacency[j].append(i)
    for neighbours in adjacency.values():
        neighbours.sort()
    return adjacency


def sequence_slots(slots: Sequence[Slot]) -> List[Slot]:
    """Order slots breadth-first over the intersection graph.

    The first slot seeds the traversal. Once a connected component is
    exhausted, the earliest unvisited slot seeds the next one, so every slot
    appears exactly once.
    """

    if not slots:
        return []

    adjacency = build_intersections(slots)
    visited: Set[int] = set()
    order: List[int] = []
    components = 0

    for seed in range(len(slots)):
        if seed in visited:
            continue
        components += 1
        visited.add(seed)
        queue = deque([seed])
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in adjacency[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)

    if components > 1:
        LOGGER.info("Puzzle has %d disconnected regions", components)
    return [slots[index] for index in order]
