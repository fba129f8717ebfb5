"""Search engine: pluggable pathfinding strategies over a grid view."""

from .bfs import bfs_search
from .dfs import dfs_iterative_search, dfs_recursive_search
from .reachability import (
    DIAGONAL,
    ORTHOGONAL,
    Direction,
    ReachabilityPolicy,
    reachable_neighbors,
)
from .schemas import SearchReport
from .searcher import implemented_strategies, search, timed_search
from .types import SearchType

__all__ = [
    "Direction",
    "ORTHOGONAL",
    "DIAGONAL",
    "ReachabilityPolicy",
    "reachable_neighbors",
    "SearchType",
    "SearchReport",
    "search",
    "timed_search",
    "implemented_strategies",
    "bfs_search",
    "dfs_recursive_search",
    "dfs_iterative_search",
]
