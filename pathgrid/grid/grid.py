"""Editable rectangular grid of typed cells with a sentinel border.

Storage is a ``(width + 2) x (height + 2)`` array. The one-cell frame around
the interior always holds ``CellType.NONE`` so neighbour lookups at
``row ± 1, col ± 1`` never leave the buffer. Every public accessor takes
logical coordinates and shifts them by one before touching storage.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from ..config import Config
from ..errors import GridIndexError, InvalidSizeError
from ..logging_utils import log_grid
from .cells import DEFAULT_CELL, CellType
from .schemas import GridSizeChange

Coord = Tuple[int, int]
CellChange = Tuple[int, int, CellType]
GridView = Tuple[Tuple[CellType, ...], ...]

SizeListener = Callable[[GridSizeChange], None]
UpdateListener = Callable[["Grid"], None]


def brush_size_for_layers(layers: int) -> int:
    """Return the side length of a square brush with ``layers`` rings (2n - 1)."""
    if layers < 1:
        raise ValueError(f"Brush layers must be at least 1, got {layers}")
    return layers * 2 - 1


def _allocate(width: int, height: int) -> List[List[CellType]]:
    """Build a bordered buffer: NONE on the frame, the default type inside."""
    cells = [[DEFAULT_CELL] * (height + 2) for _ in range(width + 2)]
    for j in range(height + 2):
        cells[0][j] = CellType.NONE
        cells[width + 1][j] = CellType.NONE
    for i in range(width + 2):
        cells[i][0] = CellType.NONE
        cells[i][height + 1] = CellType.NONE
    return cells


class Grid:
    """Bounded, resizable, brush-editable 2D grid of ``CellType`` values.

    Interior cells start as ``CellType.FLOOR``; newly exposed cells after a
    grow are FLOOR as well. Coordinates are ``(row, col)`` with
    ``0 <= row < width`` and ``0 <= col < height``.

    Listeners are called synchronously on the mutating call's stack:
    update listeners receive the grid after any content change, size
    listeners receive a ``GridSizeChange`` after a resize.

    The grid does not enforce a single Start/End; the editor clears the
    previous occurrence before placing a new one.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidSizeError(width, height)
        self._width = width
        self._height = height
        self._cells = _allocate(width, height)
        self._size_listeners: List[SizeListener] = []
        self._update_listeners: List[UpdateListener] = []

    @classmethod
    def new(cls, width: int, height: int) -> "Grid":
        return cls(width, height)

    # ------------------------------------------------------------------
    # Dimensions

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    @property
    def bordered_size(self) -> Tuple[int, int]:
        """Storage dimensions including the sentinel frame."""
        return self._width + 2, self._height + 2

    def in_bounds(self, row: int, col: int) -> bool:
        """Return True when ``(row, col)`` is an interior cell."""
        return 0 <= row < self._width and 0 <= col < self._height

    def _check_index(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise GridIndexError(row, col, self.size)

    # ------------------------------------------------------------------
    # Listeners

    def add_size_listener(self, listener: SizeListener) -> None:
        self._size_listeners.append(listener)

    def remove_size_listener(self, listener: SizeListener) -> None:
        if listener in self._size_listeners:
            self._size_listeners.remove(listener)

    def add_update_listener(self, listener: UpdateListener) -> None:
        self._update_listeners.append(listener)

    def remove_update_listener(self, listener: UpdateListener) -> None:
        if listener in self._update_listeners:
            self._update_listeners.remove(listener)

    def _notify_update(self) -> None:
        for listener in list(self._update_listeners):
            listener(self)

    def _notify_size_change(self) -> None:
        bordered_width, bordered_height = self.bordered_size
        event = GridSizeChange(
            width=self._width,
            height=self._height,
            bordered_width=bordered_width,
            bordered_height=bordered_height,
        )
        for listener in list(self._size_listeners):
            listener(event)

    # ------------------------------------------------------------------
    # Resize

    def resize(self, width: int, height: int) -> None:
        """Resize in place, keeping the overlapping interior rectangle.

        Shrinking truncates, growing fills new cells with FLOOR. The border
        is rebuilt from scratch. No-op (and no notification) when the size
        is unchanged.
        """
        if width <= 0 or height <= 0:
            raise InvalidSizeError(width, height)
        if (width, height) == self.size:
            return

        new_cells = _allocate(width, height)
        copy_rows = min(width, self._width)
        copy_cols = min(height, self._height)
        for i in range(1, copy_rows + 1):
            new_cells[i][1 : copy_cols + 1] = self._cells[i][1 : copy_cols + 1]

        old_size = self.size
        self._cells = new_cells
        self._width = width
        self._height = height

        log_grid(f"Resized grid {old_size[0]}x{old_size[1]} -> {width}x{height}")
        self._notify_update()
        self._notify_size_change()

    # ------------------------------------------------------------------
    # Single-cell access

    def get(self, row: int, col: int) -> CellType:
        self._check_index(row, col)
        return self._cells[row + 1][col + 1]

    def set(self, row: int, col: int, cell_type: CellType) -> bool:
        """Write one cell. Returns False (and stays silent) if nothing changed.

        Plain ints are accepted and stored as ``CellType``; values outside the
        enum raise ``ValueError``.
        """
        self._check_index(row, col)
        cell_type = CellType(cell_type)
        if self._cells[row + 1][col + 1] == cell_type:
            return False
        self._cells[row + 1][col + 1] = cell_type
        self._notify_update()
        return True

    # ------------------------------------------------------------------
    # Batch mutation

    def _brush_cells(self, center_row: int, center_col: int, brush_size: int) -> Iterator[Coord]:
        """Yield interior cells covered by a square brush, clipped to bounds."""
        if brush_size < 1 or brush_size % 2 == 0:
            raise ValueError(f"Brush size must be a positive odd number, got {brush_size}")
        half = brush_size // 2
        for row in range(max(center_row - half, 0), min(center_row + half, self._width - 1) + 1):
            for col in range(max(center_col - half, 0), min(center_col + half, self._height - 1) + 1):
                yield row, col

    def set_brush(self, center_row: int, center_col: int, brush_size: int, cell_type: CellType) -> int:
        """Paint every interior cell inside the centred square brush.

        Cells of the square that fall outside the grid are skipped, including
        when the centre itself is outside. Returns the number of changed
        cells; listeners are notified once if that number is non-zero.
        """
        cell_type = CellType(cell_type)
        changed = 0
        for row, col in self._brush_cells(center_row, center_col, brush_size):
            if self._cells[row + 1][col + 1] != cell_type:
                self._cells[row + 1][col + 1] = cell_type
                changed += 1

        if changed:
            if Config.VERBOSE:
                log_grid(
                    f"Brush {brush_size}x{brush_size} at ({center_row}, {center_col}) "
                    f"painted {changed} cell(s) {cell_type.name}"
                )
            self._notify_update()
        return changed

    def brush_mask(self, center_row: int, center_col: int, brush_size: int) -> List[bool]:
        """Return a row-major mask over the bordered grid marking brushed cells.

        Same clipping rule as ``set_brush``; the grid is not modified. Index
        ``i * bordered_height + j`` addresses storage cell ``(i, j)``.
        """
        bordered_width, bordered_height = self.bordered_size
        mask = [False] * (bordered_width * bordered_height)
        for row, col in self._brush_cells(center_row, center_col, brush_size):
            mask[(row + 1) * bordered_height + (col + 1)] = True
        return mask

    def set_many(self, changes: Iterable[CellChange]) -> int:
        """Apply discrete ``(row, col, type)`` writes, skipping out-of-range entries."""
        changed = 0
        for row, col, cell_type in changes:
            if not self.in_bounds(row, col):
                continue
            cell_type = CellType(cell_type)
            if self._cells[row + 1][col + 1] != cell_type:
                self._cells[row + 1][col + 1] = cell_type
                changed += 1

        if changed:
            if Config.VERBOSE:
                log_grid(f"Batch write changed {changed} cell(s)")
            self._notify_update()
        return changed

    def clear_type(self, from_type: CellType, to_type: CellType) -> int:
        """Rewrite every interior cell equal to ``from_type`` as ``to_type``."""
        from_type = CellType(from_type)
        to_type = CellType(to_type)
        changed = 0
        for i in range(1, self._width + 1):
            row = self._cells[i]
            for j in range(1, self._height + 1):
                if row[j] == from_type:
                    row[j] = to_type
                    changed += 1

        if changed:
            if Config.VERBOSE:
                log_grid(f"Cleared {changed} {from_type.name} cell(s) to {to_type.name}")
            self._notify_update()
        return changed

    # ------------------------------------------------------------------
    # Queries

    def find_first(self, cell_type: CellType) -> Optional[Coord]:
        """Return the first cell of ``cell_type`` in row-major order, or None."""
        for i in range(1, self._width + 1):
            row = self._cells[i]
            for j in range(1, self._height + 1):
                if row[j] == cell_type:
                    return i - 1, j - 1
        return None

    def count(self, cell_type: CellType) -> int:
        return sum(row[1 : self._height + 1].count(cell_type) for row in self._cells[1 : self._width + 1])

    def interior(self) -> GridView:
        """Return an immutable snapshot of the interior cells (no border).

        This is the read-only view handed to search strategies; later edits
        to the grid do not show through it.
        """
        return tuple(tuple(row[1 : self._height + 1]) for row in self._cells[1 : self._width + 1])

    def bordered(self) -> GridView:
        """Return an immutable snapshot of the full storage, frame included."""
        return tuple(tuple(row) for row in self._cells)

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"
