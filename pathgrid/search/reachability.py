"""Reachability policy: which relative moves a search may take from a cell.

Directions follow the 3x3 toggle panel of the editor, read left to right and
top to bottom. Offsets are ``(d_row, d_col)``; in the top-down view rows run
west to east and columns run south to north.

A policy is an ordinary mutable object owned by its caller (usually the
editor). Searches call ``offsets()`` once at start, so toggling directions
while a search runs cannot change its tie-break order.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from ..grid.cells import CellType

Offset = Tuple[int, int]


class Direction(Enum):
    """Relative move from a cell. Definition order is the neighbour tie-break order."""

    NORTH_WEST = (-1, 1)
    NORTH = (0, 1)
    NORTH_EAST = (1, 1)
    WEST = (-1, 0)
    CENTER = (0, 0)
    EAST = (1, 0)
    SOUTH_WEST = (-1, -1)
    SOUTH = (0, -1)
    SOUTH_EAST = (1, -1)

    @property
    def offset(self) -> Offset:
        return self.value

    @property
    def diagonal(self) -> bool:
        d_row, d_col = self.value
        return d_row != 0 and d_col != 0


ORTHOGONAL = (Direction.NORTH, Direction.WEST, Direction.EAST, Direction.SOUTH)
DIAGONAL = (Direction.NORTH_WEST, Direction.NORTH_EAST, Direction.SOUTH_WEST, Direction.SOUTH_EAST)


class ReachabilityPolicy:
    """Set of enabled directions.

    Enabling ``CENTER`` is allowed (the panel has a centre toggle) but it
    never yields a move: the target is the current cell, which a search has
    already visited.
    """

    def __init__(self, directions: Optional[Iterable[Direction]] = None):
        self._enabled = set(directions or ())

    @classmethod
    def four_way(cls) -> "ReachabilityPolicy":
        return cls(ORTHOGONAL)

    @classmethod
    def eight_way(cls) -> "ReachabilityPolicy":
        return cls(ORTHOGONAL + DIAGONAL)

    @classmethod
    def from_name(cls, name: str) -> "ReachabilityPolicy":
        """Build a preset policy from ``"four"`` or ``"eight"``."""
        presets = {"four": cls.four_way, "eight": cls.eight_way}
        key = name.strip().lower()
        if key not in presets:
            raise ValueError(f"Unknown reachability preset '{name}'; expected 'four' or 'eight'")
        return presets[key]()

    def enable(self, direction: Direction) -> None:
        self._enabled.add(direction)

    def disable(self, direction: Direction) -> None:
        self._enabled.discard(direction)

    def toggle(self, direction: Direction) -> bool:
        """Flip ``direction`` and return its new state."""
        if direction in self._enabled:
            self._enabled.discard(direction)
            return False
        self._enabled.add(direction)
        return True

    def is_enabled(self, direction: Direction) -> bool:
        return direction in self._enabled

    @property
    def directions(self) -> Tuple[Direction, ...]:
        """Enabled directions in panel order."""
        return tuple(direction for direction in Direction if direction in self._enabled)

    def offsets(self) -> Tuple[Offset, ...]:
        """Snapshot of enabled offsets in panel order (the tie-break order)."""
        return tuple(direction.offset for direction in self.directions)

    def copy(self) -> "ReachabilityPolicy":
        return ReachabilityPolicy(self._enabled)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReachabilityPolicy):
            return NotImplemented
        return self._enabled == other._enabled

    def __repr__(self) -> str:
        names = ", ".join(direction.name for direction in self.directions)
        return f"ReachabilityPolicy([{names}])"


def reachable_neighbors(
    cell: Tuple[int, int],
    view: Sequence[Sequence[CellType]],
    offsets: Sequence[Offset],
) -> Iterator[Tuple[int, int]]:
    """Yield traversable neighbours of ``cell`` in ``offsets`` order.

    ``view`` holds interior cells only, so moves that leave it are dropped
    here; blocking cells (BLOCK, NONE) are never yielded.
    """
    rows = len(view)
    row, col = cell
    for d_row, d_col in offsets:
        n_row, n_col = row + d_row, col + d_col
        if not 0 <= n_row < rows:
            continue
        line = view[n_row]
        if not 0 <= n_col < len(line):
            continue
        if line[n_col].traversable:
            yield n_row, n_col
