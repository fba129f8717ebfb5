"""Breadth-first search over the grid (shortest path in steps)."""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Sequence, Tuple

from ..grid.cells import CellType
from .reachability import Offset, reachable_neighbors

Coord = Tuple[int, int]


def bfs_search(
    start: Coord,
    end: Coord,
    view: Sequence[Sequence[CellType]],
    offsets: Sequence[Offset],
) -> Optional[List[Coord]]:
    """Return a minimum-step path from start to end, or None if unreachable.

    Each cell is queued at most once. Parents are recorded when a cell is
    queued and replayed from ``end`` back to ``start`` once ``end`` is
    dequeued. The start cell is searched from even if it is blocking.
    """

    visited = {start}
    # Start is its own parent so reconstruction stops there
    parent: Dict[Coord, Coord] = {start: start}
    queue: deque[Coord] = deque([start])

    while queue:
        # FIFO order: the first time end is dequeued it is at minimum depth
        current = queue.popleft()
        if current == end:
            return _reconstruct(start, end, parent)

        for neighbor in reachable_neighbors(current, view, offsets):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            parent[neighbor] = current
            queue.append(neighbor)

    # Frontier exhausted without reaching end
    return None


def _reconstruct(start: Coord, end: Coord, parent: Dict[Coord, Coord]) -> List[Coord]:
    path = [end]
    current = end
    while current != start:
        current = parent[current]
        path.append(current)
    path.reverse()
    return path
