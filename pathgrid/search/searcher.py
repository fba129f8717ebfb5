"""Strategy dispatcher for grid searches.

Every strategy is a plain function ``(start, end, view, offsets) -> path | None``.
``search`` picks one by ``SearchType``, snapshots its inputs, and calls it.

Snapshotting:
- The grid view is copied into an immutable tuple-of-tuples of ``CellType``,
  so edits made while a search runs are never observed.
- The reachability policy is reduced to its ordered offset tuple once, at
  call start.

Outcomes:
- A list of cells from start to end inclusive.
- ``None`` when no traversable route exists (unreachable, a normal result).
- ``StrategyNotImplementedError`` for declared strategies without an
  implementation (A*), so "could not run" is never confused with "no path".
"""

from __future__ import annotations

import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from ..config import Config
from ..errors import GridIndexError, StrategyNotImplementedError
from ..grid.cells import CellType
from ..grid.grid import Grid, GridView
from .bfs import bfs_search
from .dfs import dfs_iterative_search, dfs_recursive_search
from .reachability import Offset, ReachabilityPolicy
from .schemas import SearchReport
from .types import SearchType

Coord = Tuple[int, int]
StrategyFn = Callable[[Coord, Coord, GridView, Sequence[Offset]], Optional[List[Coord]]]

_STRATEGIES: Dict[SearchType, StrategyFn] = {
    SearchType.DFS_RECURSIVE: dfs_recursive_search,
    SearchType.DFS_ITERATIVE: dfs_iterative_search,
    SearchType.BFS: bfs_search,
}


def _snapshot_view(grid_view: Union[Grid, Sequence[Sequence[CellType]]]) -> GridView:
    if isinstance(grid_view, Grid):
        return grid_view.interior()
    return tuple(tuple(CellType(cell) for cell in row) for row in grid_view)


def _check_endpoint(cell: Coord, view: GridView) -> Coord:
    # Rows may differ in length; the column bound is the endpoint's own row
    row, col = cell
    rows = len(view)
    if not 0 <= row < rows:
        raise GridIndexError(row, col, (rows, len(view[0]) if rows else 0))
    cols = len(view[row])
    if not 0 <= col < cols:
        raise GridIndexError(row, col, (rows, cols))
    return row, col


def search(
    strategy: Union[SearchType, str],
    start: Coord,
    end: Coord,
    grid_view: Union[Grid, Sequence[Sequence[CellType]]],
    policy: Optional[ReachabilityPolicy] = None,
) -> Optional[List[Coord]]:
    """Find a path from ``start`` to ``end`` with the chosen strategy.

    Args:
        strategy: SearchType member or its name (``"bfs"``, ``"dfs_iterative"``...)
        start: Interior ``(row, col)`` to start from; searched from even if blocking
        end: Interior ``(row, col)`` to reach; a blocking end is never reached
        grid_view: Interior cells (no border) or a Grid, whose interior is used
        policy: Allowed moves; defaults to the configured preset

    Returns:
        Path from start to end inclusive, or None if the end is unreachable

    Raises:
        GridIndexError: start or end lies outside the view
        StrategyNotImplementedError: the strategy is declared but not built
    """
    if isinstance(strategy, str) and not isinstance(strategy, SearchType):
        strategy = SearchType.from_name(strategy)

    if policy is None:
        policy = ReachabilityPolicy.from_name(Config.REACHABILITY)
    offsets = policy.offsets()

    view = _snapshot_view(grid_view)
    start = _check_endpoint(start, view)
    end = _check_endpoint(end, view)

    strategy_fn = _STRATEGIES.get(strategy)
    if strategy_fn is None:
        raise StrategyNotImplementedError(strategy)
    return strategy_fn(start, end, view, offsets)


def timed_search(
    strategy: Union[SearchType, str],
    start: Coord,
    end: Coord,
    grid_view: Union[Grid, Sequence[Sequence[CellType]]],
    policy: Optional[ReachabilityPolicy] = None,
) -> SearchReport:
    """Run ``search`` and report the path together with wall-clock duration."""
    if isinstance(strategy, str) and not isinstance(strategy, SearchType):
        strategy = SearchType.from_name(strategy)

    started = time.perf_counter()
    path = search(strategy, start, end, grid_view, policy)
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    return SearchReport(
        strategy=strategy,
        start=tuple(start),
        end=tuple(end),
        path=path,
        elapsed_ms=elapsed_ms,
    )


def implemented_strategies() -> Tuple[SearchType, ...]:
    """Strategies that ``search`` can run without raising."""
    return tuple(strategy for strategy in SearchType if strategy in _STRATEGIES)
