"""Tests for the GridEditor session (painting rules and path drawing)."""

import pytest

from pathgrid.config import Config
from pathgrid.editor import GridEditor
from pathgrid.errors import InvalidSizeError, MissingEndpointError, StrategyNotImplementedError
from pathgrid.grid import CellType, render_ascii
from pathgrid.search import Direction, ReachabilityPolicy, SearchType


def _editor_with_endpoints(width: int = 5, height: int = 5) -> GridEditor:
    editor = GridEditor(width, height, policy=ReachabilityPolicy.four_way(), strategy=SearchType.BFS)
    editor.paint(0, 0, CellType.START)
    editor.paint(width - 1, height - 1, CellType.END)
    return editor


def test_defaults_come_from_config(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_WIDTH", 7)
    monkeypatch.setattr(Config, "DEFAULT_HEIGHT", 3)
    monkeypatch.setattr(Config, "REACHABILITY", "eight")
    monkeypatch.setattr(Config, "STRATEGY", "dfs_iterative")

    editor = GridEditor()

    assert editor.grid.size == (7, 3)
    assert editor.policy == ReachabilityPolicy.eight_way()
    assert editor.strategy is SearchType.DFS_ITERATIVE


def test_resize_respects_max_size(monkeypatch, capsys):
    monkeypatch.setattr(Config, "MAX_GRID_SIZE", 10)
    editor = GridEditor(5, 5)

    editor.resize(10, 8)
    assert editor.grid.size == (10, 8)

    with pytest.raises(InvalidSizeError) as excinfo:
        editor.resize(11, 4)
    assert excinfo.value.limit == 10
    assert editor.grid.size == (10, 8)
    assert "[!]" in capsys.readouterr().out

    with pytest.raises(InvalidSizeError):
        editor.resize(0, 4)


def test_reset_restores_default_size(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_WIDTH", 6)
    monkeypatch.setattr(Config, "DEFAULT_HEIGHT", 4)
    editor = GridEditor(9, 9)
    editor.paint(1, 1, CellType.BLOCK)

    editor.reset()

    assert editor.grid.size == (6, 4)
    assert editor.grid.get(1, 1) is CellType.BLOCK


def test_painting_start_moves_the_single_start_cell():
    editor = GridEditor(4, 4)

    editor.paint(0, 0, CellType.START)
    editor.paint(3, 2, CellType.START, layers=3)

    assert editor.grid.count(CellType.START) == 1
    assert editor.grid.get(3, 2) is CellType.START
    assert editor.grid.get(0, 0) is CellType.FLOOR
    # Start/End always use a one-cell brush
    assert editor.grid.get(2, 2) is CellType.FLOOR


def test_repainting_start_in_place_changes_nothing():
    editor = GridEditor(3, 3)
    editor.paint(1, 1, CellType.START)

    assert editor.paint(1, 1, CellType.START) == 0
    assert editor.grid.find_first(CellType.START) == (1, 1)


def test_block_brush_layers_and_clamp(monkeypatch):
    monkeypatch.setattr(Config, "MAX_BRUSH_LAYERS", 2)
    editor = GridEditor(9, 9)

    assert editor.paint(4, 4, CellType.BLOCK, layers=2) == 9
    editor.erase(4, 4, layers=2)
    # 10 layers clamp to 2 -> 3x3 brush
    assert editor.paint(4, 4, CellType.BLOCK, layers=10) == 9
    assert editor.paint(0, 0, CellType.FLOOR, layers=0) == 0


def test_paint_outside_grid_is_ignored():
    editor = GridEditor(3, 3)

    assert editor.paint(3, 0, CellType.BLOCK, layers=2) == 0
    assert editor.paint(-1, -1, CellType.BLOCK, layers=2) == 0
    assert editor.grid.count(CellType.BLOCK) == 0


@pytest.mark.parametrize("cell_type", [CellType.NONE, CellType.PATH1, CellType.PATH2])
def test_reserved_types_cannot_be_painted(cell_type):
    editor = GridEditor(3, 3)
    with pytest.raises(ValueError):
        editor.paint(1, 1, cell_type)


def test_highlight_matches_brush_and_is_empty_outside():
    editor = GridEditor(3, 3)

    mask = editor.highlight(1, 1, CellType.BLOCK, layers=2)
    assert sum(mask) == 9
    assert len(mask) == 25

    assert sum(editor.highlight(1, 1, CellType.END, layers=2)) == 1
    outside = editor.highlight(5, 5, layers=2)
    assert len(outside) == 25 and not any(outside)


def test_find_path_draws_path_between_endpoints(capsys):
    editor = _editor_with_endpoints()

    report = editor.find_path()

    assert report.reachable and report.steps == 8
    assert editor.grid.get(0, 0) is CellType.START
    assert editor.grid.get(4, 4) is CellType.END
    assert editor.grid.count(CellType.PATH1) == 7
    for row, col in report.path[1:-1]:
        assert editor.grid.get(row, col) is CellType.PATH1
    assert editor.last_report is report

    out = capsys.readouterr().out
    assert "[search] Running bfs" in out
    assert "[✓]" in out


def test_find_path_clears_previous_path_first():
    editor = _editor_with_endpoints()
    editor.find_path(SearchType.DFS_RECURSIVE, mark=CellType.PATH2)
    assert editor.grid.count(CellType.PATH2) == 7

    editor.paint(2, 2, CellType.BLOCK)
    report = editor.find_path("bfs")

    assert editor.grid.count(CellType.PATH2) == 0
    assert editor.grid.count(CellType.PATH1) == report.steps - 1


def test_find_path_unreachable_leaves_no_path_cells(capsys):
    editor = _editor_with_endpoints(3, 3)
    editor.find_path()
    assert editor.grid.count(CellType.PATH1) > 0

    editor.paint(1, 0, CellType.BLOCK)
    editor.paint(1, 1, CellType.BLOCK)
    editor.paint(1, 2, CellType.BLOCK)
    report = editor.find_path()

    assert report.path is None
    assert editor.grid.count(CellType.PATH1) == 0
    assert "no path" in capsys.readouterr().out
    assert render_ascii(editor.grid) == "S..\n###\n..E"


def test_find_path_requires_start_and_end():
    editor = GridEditor(3, 3)

    with pytest.raises(MissingEndpointError) as excinfo:
        editor.find_path()
    assert excinfo.value.missing == "Start"

    editor.paint(0, 0, CellType.START)
    with pytest.raises(MissingEndpointError) as excinfo:
        editor.find_path()
    assert excinfo.value.missing == "End"


def test_find_path_astar_raises_not_implemented():
    editor = _editor_with_endpoints()

    with pytest.raises(StrategyNotImplementedError):
        editor.find_path(SearchType.ASTAR)


def test_find_path_rejects_non_path_mark():
    editor = _editor_with_endpoints()
    with pytest.raises(ValueError):
        editor.find_path(mark=CellType.BLOCK)


def test_toggle_direction_changes_next_search():
    editor = _editor_with_endpoints()
    assert editor.find_path().steps == 8

    for direction in (Direction.NORTH_WEST, Direction.NORTH_EAST, Direction.SOUTH_WEST, Direction.SOUTH_EAST):
        assert editor.toggle_direction(direction) is True

    assert editor.find_path().steps == 4


def test_clear_path_restores_floor():
    editor = _editor_with_endpoints()
    editor.find_path()

    assert editor.clear_path() == 7
    assert editor.grid.count(CellType.PATH1) == 0
    assert editor.grid.count(CellType.FLOOR) == 23
