"""
GridEditor: the editing session that drives a Grid and the search engine.

The editor owns one Grid and one ReachabilityPolicy and applies the rules an
interactive front end needs on top of the raw grid operations:

- Paint requests outside the editable area are ignored, not errors
- Brush sizes come from a layer count (side = 2 * layers - 1), clamped to
  the configured maximum
- Start and End are single cells: painting one clears the previous
  occurrence and forces a one-cell brush
- Resize requests are limited to PATHGRID_MAX_GRID_SIZE per side
- Path searches clear the previous path, locate Start/End, run the chosen
  strategy, and write the resulting path back as PATH1/PATH2 cells

Usage:
    editor = GridEditor(10, 10)
    editor.paint(0, 0, CellType.START)
    editor.paint(9, 9, CellType.END)
    editor.paint(5, 5, CellType.BLOCK, layers=2)
    report = editor.find_path(SearchType.BFS)
"""

from __future__ import annotations

from typing import List, Optional, Union

from .config import Config
from .errors import InvalidSizeError, MissingEndpointError
from .grid import PATH_TYPES, CellType, Grid, brush_size_for_layers
from .logging_utils import log_error, log_info, log_search, log_success
from .search import ReachabilityPolicy, SearchReport, SearchType, timed_search
from .search.reachability import Direction

# Types a user can paint; NONE belongs to the border and paths are written by searches
PAINTABLE_TYPES = (CellType.FLOOR, CellType.BLOCK, CellType.START, CellType.END)
_SINGLE_CELL_TYPES = (CellType.START, CellType.END)


class GridEditor:
    """Editing session around a single Grid.

    Fully self-contained: every dependency is either passed in or read from
    Config at construction time.
    """

    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        *,
        policy: Optional[ReachabilityPolicy] = None,
        strategy: Optional[Union[SearchType, str]] = None,
    ):
        """Create the session.

        Args:
            width: Initial width; defaults to Config.DEFAULT_WIDTH
            height: Initial height; defaults to Config.DEFAULT_HEIGHT
            policy: Allowed moves; defaults to the Config.REACHABILITY preset
            strategy: Default strategy for find_path; defaults to Config.STRATEGY
        """
        width = Config.DEFAULT_WIDTH if width is None else width
        height = Config.DEFAULT_HEIGHT if height is None else height
        self._check_size(width, height)

        self.grid = Grid(width, height)
        self.policy = policy if policy is not None else ReachabilityPolicy.from_name(Config.REACHABILITY)
        if strategy is None:
            strategy = Config.STRATEGY
        self.strategy = strategy if isinstance(strategy, SearchType) else SearchType.from_name(strategy)
        self.last_report: Optional[SearchReport] = None

    # ------------------------------------------------------------------
    # Size

    @staticmethod
    def _check_size(width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise InvalidSizeError(width, height)
        if width > Config.MAX_GRID_SIZE or height > Config.MAX_GRID_SIZE:
            raise InvalidSizeError(width, height, limit=Config.MAX_GRID_SIZE)

    def resize(self, width: int, height: int) -> None:
        """Resize the grid, keeping the overlapping region."""
        try:
            self._check_size(width, height)
        except InvalidSizeError as exc:
            log_error(str(exc).splitlines()[0])
            raise
        self.grid.resize(width, height)

    def reset(self) -> None:
        """Restore the configured default size."""
        self.resize(Config.DEFAULT_WIDTH, Config.DEFAULT_HEIGHT)

    # ------------------------------------------------------------------
    # Painting

    def _brush_size(self, cell_type: CellType, layers: int) -> int:
        if cell_type in _SINGLE_CELL_TYPES:
            return 1
        layers = max(1, min(layers, Config.MAX_BRUSH_LAYERS))
        return brush_size_for_layers(layers)

    def paint(self, row: int, col: int, cell_type: CellType, layers: int = 1) -> int:
        """Paint a brush stroke centred on ``(row, col)``.

        Returns the number of changed cells; 0 when the centre is outside
        the grid (the click is discarded).
        """
        if cell_type not in PAINTABLE_TYPES:
            raise ValueError(
                f"Cannot paint {cell_type.name}; paintable types are "
                + ", ".join(t.name for t in PAINTABLE_TYPES)
            )
        if not self.grid.in_bounds(row, col):
            return 0

        changed = 0
        if cell_type in _SINGLE_CELL_TYPES and self.grid.get(row, col) != cell_type:
            changed += self.grid.clear_type(cell_type, CellType.FLOOR)

        changed += self.grid.set_brush(row, col, self._brush_size(cell_type, layers), cell_type)
        return changed

    def erase(self, row: int, col: int, layers: int = 1) -> int:
        """Paint FLOOR, the eraser of the editor."""
        return self.paint(row, col, CellType.FLOOR, layers)

    def highlight(self, row: int, col: int, cell_type: CellType = CellType.FLOOR, layers: int = 1) -> List[bool]:
        """Brush preview mask over the bordered grid; all False outside bounds."""
        if not self.grid.in_bounds(row, col):
            bordered_width, bordered_height = self.grid.bordered_size
            return [False] * (bordered_width * bordered_height)
        return self.grid.brush_mask(row, col, self._brush_size(cell_type, layers))

    # ------------------------------------------------------------------
    # Reachability

    def toggle_direction(self, direction: Direction) -> bool:
        """Flip one direction of the policy and return its new state."""
        return self.policy.toggle(direction)

    # ------------------------------------------------------------------
    # Search

    def clear_path(self) -> int:
        """Turn cells marked by a previous search back into FLOOR."""
        return sum(self.grid.clear_type(path_type, CellType.FLOOR) for path_type in PATH_TYPES)

    def find_path(
        self,
        strategy: Optional[Union[SearchType, str]] = None,
        *,
        mark: CellType = CellType.PATH1,
    ) -> SearchReport:
        """Search from Start to End and draw the result onto the grid.

        Start and End keep their types; only the cells in between are
        overwritten with ``mark``. An unreachable End leaves the grid without
        path cells and returns a report with ``path=None``.

        Raises:
            MissingEndpointError: the grid has no Start or no End cell
            StrategyNotImplementedError: the strategy is declared but not built
        """
        if mark not in PATH_TYPES:
            raise ValueError(f"Paths are marked with PATH1 or PATH2, got {mark.name}")
        if strategy is None:
            strategy = self.strategy
        elif not isinstance(strategy, SearchType):
            strategy = SearchType.from_name(strategy)

        self.clear_path()

        start = self.grid.find_first(CellType.START)
        if start is None:
            raise MissingEndpointError("Start")
        end = self.grid.find_first(CellType.END)
        if end is None:
            raise MissingEndpointError("End")

        log_search(f"Running {strategy.value} from {start} to {end}...")
        report = timed_search(strategy, start, end, self.grid, self.policy)
        self.last_report = report

        if report.path is None:
            log_info(report.summary())
            return report

        self.grid.set_many((row, col, mark) for row, col in report.path[1:-1])
        log_success(report.summary())
        return report
