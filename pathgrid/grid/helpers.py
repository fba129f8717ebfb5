"""Text helpers for grids: compact ASCII rendering and parsing.

Each text line is one grid row (first coordinate), each character one column.
Handy for debug output and for building fixtures in tests.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .cells import CellType
from .grid import Grid

_DEFAULT_CELL_SYMBOLS: Dict[CellType, str] = {
    CellType.NONE: " ",
    CellType.FLOOR: ".",
    CellType.BLOCK: "#",
    CellType.START: "S",
    CellType.END: "E",
    CellType.PATH1: "*",
    CellType.PATH2: "+",
}


def render_ascii(
    grid: Grid,
    *,
    symbols: Optional[Dict[CellType, str]] = None,
    include_border: bool = False,
) -> str:
    """Render the grid as text, one line per row.

    ``symbols`` overrides entries of the default mapping. With
    ``include_border`` the sentinel frame is drawn too (as spaces unless
    overridden).
    """
    mapping = {**_DEFAULT_CELL_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    view = grid.bordered() if include_border else grid.interior()
    return "\n".join("".join(mapping.get(cell, "?") for cell in row) for row in view)


def parse_ascii(text: str, *, symbols: Optional[Dict[str, CellType]] = None) -> Grid:
    """Build a grid from text produced by ``render_ascii`` (interior only).

    Blank leading/trailing lines and surrounding whitespace are ignored.
    Raises ValueError for ragged rows or unknown characters.
    """
    mapping = {symbol: cell for cell, symbol in _DEFAULT_CELL_SYMBOLS.items() if cell is not CellType.NONE}
    if symbols:
        mapping.update(symbols)

    lines = [line.strip() for line in text.strip().splitlines()]
    if not lines or not lines[0]:
        raise ValueError("ASCII grid is empty")

    width = len(lines[0])
    for index, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(f"Row {index} has {len(line)} cells, expected {width}")

    grid = Grid(len(lines), width)
    changes: List[tuple] = []
    for row, line in enumerate(lines):
        for col, symbol in enumerate(line):
            if symbol not in mapping:
                raise ValueError(f"Unknown cell symbol {symbol!r} at ({row}, {col})")
            changes.append((row, col, mapping[symbol]))
    grid.set_many(changes)
    return grid

