"""Exception taxonomy for grid and search contract violations.

Bounds and size violations are raised at the call that caused them and are
never recovered internally. An unreachable target is not an error: searches
return ``None`` instead of a path.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .search.types import SearchType


class PathgridError(Exception):
    """Base class for all pathgrid errors."""


class InvalidSizeError(PathgridError, ValueError):
    """Raised when a grid is created or resized with an unusable dimension."""

    def __init__(self, width: int, height: int, *, limit: Optional[int] = None) -> None:
        self.width = width
        self.height = height
        self.limit = limit
        if limit is None:
            message = (
                f"Grid size {width}x{height} is invalid: both dimensions must be greater than 0"
            )
        else:
            message = (
                f"Grid size {width}x{height} is invalid: dimensions must be between 1 and {limit}\n"
                "Remediation tips:\n"
                "  - Raise PATHGRID_MAX_GRID_SIZE to allow larger grids"
            )
        super().__init__(message)


class GridIndexError(PathgridError, IndexError):
    """Raised when a logical coordinate falls outside the addressable grid."""

    def __init__(self, row: int, col: int, size: Tuple[int, int]) -> None:
        self.row = row
        self.col = col
        self.size = size
        width, height = size
        super().__init__(
            f"Cell ({row}, {col}) is outside the grid: "
            f"row must be in [0, {width}), col must be in [0, {height})"
        )


class StrategyNotImplementedError(PathgridError, NotImplementedError):
    """Raised when a declared search strategy has no implementation."""

    def __init__(self, strategy: "SearchType") -> None:
        self.strategy = strategy
        super().__init__(
            f"Search strategy '{strategy.value}' is declared but not implemented\n"
            "Remediation tips:\n"
            "  - Use 'bfs' for shortest paths or 'dfs_recursive'/'dfs_iterative'"
        )


class MissingEndpointError(PathgridError, LookupError):
    """Raised when a search is requested on a grid without a Start or End cell."""

    def __init__(self, missing: str) -> None:
        self.missing = missing
        super().__init__(
            f"Cannot search: the grid has no {missing} cell\n"
            "Remediation tips:\n"
            "  - Paint a Start and an End cell before requesting a path"
        )
