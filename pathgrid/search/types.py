"""Strategy selector shared by the dispatcher and result models."""

from __future__ import annotations

from enum import Enum


class SearchType(str, Enum):
    """Closed set of pathfinding strategies."""

    DFS_RECURSIVE = "dfs_recursive"
    DFS_ITERATIVE = "dfs_iterative"
    BFS = "bfs"
    ASTAR = "astar"

    @classmethod
    def from_name(cls, name: str) -> "SearchType":
        """Parse a strategy name case-insensitively (``"BFS"``, ``"dfs-iterative"``)."""
        key = name.strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown search strategy '{name}'; expected one of {choices}") from None
