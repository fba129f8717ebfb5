"""Cell type tags stored in the grid.

Numeric values matter only to renderers (they index colour tables). The
engine itself relies on two predicates: traversable and blocking.
"""

from __future__ import annotations

from enum import IntEnum


class CellType(IntEnum):
    """Closed set of cell tags. ``NONE`` is reserved for the sentinel border."""

    NONE = -1
    FLOOR = 0
    BLOCK = 1
    START = 2
    END = 3
    PATH1 = 4
    PATH2 = 5

    @property
    def traversable(self) -> bool:
        return self not in _BLOCKING

    @property
    def blocking(self) -> bool:
        return self in _BLOCKING


_BLOCKING = frozenset({CellType.NONE, CellType.BLOCK})

# Interior cells hold this value until something is painted over them.
DEFAULT_CELL = CellType.FLOOR

PATH_TYPES = (CellType.PATH1, CellType.PATH2)
