"""
Pathgrid - editable typed grids with pluggable pathfinding.

Paint floor, obstacle, start and end cells on a bordered grid, then search
for a route with BFS or depth-first search and draw it back onto the grid.

No rendering, no file I/O, no global state: renderers subscribe to grid
listeners and every search takes its reachability policy explicitly.
"""

__version__ = "0.1.0"

from .config import Config
from .errors import (
    PathgridError,
    InvalidSizeError,
    GridIndexError,
    StrategyNotImplementedError,
    MissingEndpointError,
)

# Grid state model
from .grid import (
    CellType,
    DEFAULT_CELL,
    PATH_TYPES,
    Grid,
    GridSizeChange,
    brush_size_for_layers,
    parse_ascii,
    render_ascii,
)

# Search engine
from .search import (
    Direction,
    ReachabilityPolicy,
    SearchType,
    SearchReport,
    search,
    timed_search,
)

# Editing session
from .editor import GridEditor

__all__ = [
    "Config",
    # Errors
    "PathgridError",
    "InvalidSizeError",
    "GridIndexError",
    "StrategyNotImplementedError",
    "MissingEndpointError",
    # Grid
    "CellType",
    "DEFAULT_CELL",
    "PATH_TYPES",
    "Grid",
    "GridSizeChange",
    "brush_size_for_layers",
    "parse_ascii",
    "render_ascii",
    # Search
    "Direction",
    "ReachabilityPolicy",
    "SearchType",
    "SearchReport",
    "search",
    "timed_search",
    # Editor
    "GridEditor",
]
