"""Grid state model: typed cells, sentinel border, brush editing."""

from .cells import DEFAULT_CELL, PATH_TYPES, CellType
from .grid import Coord, Grid, GridView, brush_size_for_layers
from .helpers import parse_ascii, render_ascii
from .schemas import GridSizeChange

__all__ = [
    "CellType",
    "DEFAULT_CELL",
    "PATH_TYPES",
    "Coord",
    "Grid",
    "GridView",
    "GridSizeChange",
    "brush_size_for_layers",
    "parse_ascii",
    "render_ascii",
]
