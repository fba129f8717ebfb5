"""Depth-first search over the grid, recursive and iterative.

Both disciplines visit cells in the same order and therefore return the
same path: a cell is marked visited and appended to the path when it is
entered, its neighbours are tried in policy order, and it is popped from
the path again once every neighbour is exhausted. The iterative version
keeps one neighbour iterator per path cell in place of Python stack frames.

Neither guarantees a shortest path, only some path when one exists.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from ..grid.cells import CellType
from .reachability import Offset, reachable_neighbors

Coord = Tuple[int, int]

# Frames needed beyond the caller's stack and the deepest path (generators, context manager)
_RECURSION_HEADROOM = 200


def _stack_depth() -> int:
    """Number of frames currently on the interpreter stack."""
    depth = 0
    frame = sys._getframe()
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


@contextmanager
def _recursion_limit(depth: int) -> Iterator[None]:
    """Temporarily raise the recursion limit so ``depth`` more frames fit on the current stack."""
    previous = sys.getrecursionlimit()
    required = _stack_depth() + depth + _RECURSION_HEADROOM
    if required > previous:
        sys.setrecursionlimit(required)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class _RecursiveWalk:
    """Per-call state for the recursive search; one instance per ``search`` call."""

    def __init__(self, end: Coord, view: Sequence[Sequence[CellType]], offsets: Sequence[Offset]):
        self.end = end
        self.view = view
        self.offsets = offsets
        self.visited: Set[Coord] = set()
        self.path: List[Coord] = []

    def visit(self, current: Coord) -> bool:
        """Enter ``current``; return True once ``end`` has been reached."""
        self.visited.add(current)
        self.path.append(current)
        if current == self.end:
            return True

        for neighbor in reachable_neighbors(current, self.view, self.offsets):
            if neighbor in self.visited:
                continue
            if self.visit(neighbor):
                return True

        # Dead end: backtrack
        self.path.pop()
        return False


def dfs_recursive_search(
    start: Coord,
    end: Coord,
    view: Sequence[Sequence[CellType]],
    offsets: Sequence[Offset],
) -> Optional[List[Coord]]:
    """Depth-first search using the call stack. Returns None if unreachable."""
    walk = _RecursiveWalk(end, view, offsets)
    cell_count = sum(len(row) for row in view)
    with _recursion_limit(cell_count):
        found = walk.visit(start)
    return walk.path if found else None


def dfs_iterative_search(
    start: Coord,
    end: Coord,
    view: Sequence[Sequence[CellType]],
    offsets: Sequence[Offset],
) -> Optional[List[Coord]]:
    """Depth-first search using an explicit stack. Returns None if unreachable."""
    if start == end:
        return [start]

    visited = {start}
    path = [start]
    # stack[i] yields the untried neighbours of path[i]
    stack = [reachable_neighbors(start, view, offsets)]

    while stack:
        advanced = False
        for neighbor in stack[-1]:
            if neighbor in visited:
                continue
            visited.add(neighbor)
            path.append(neighbor)
            if neighbor == end:
                return path
            stack.append(reachable_neighbors(neighbor, view, offsets))
            advanced = True
            break

        if not advanced:
            # Every neighbour of path[-1] tried: backtrack
            stack.pop()
            path.pop()

    return None
