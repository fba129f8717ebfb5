"""Tests for reachability policies and neighbour expansion."""

import pytest

from pathgrid.grid import CellType, parse_ascii
from pathgrid.search import DIAGONAL, ORTHOGONAL, Direction, ReachabilityPolicy, reachable_neighbors


def test_presets_list_offsets_in_panel_order():
    assert ReachabilityPolicy.four_way().offsets() == ((0, 1), (-1, 0), (1, 0), (0, -1))
    assert ReachabilityPolicy.eight_way().offsets() == (
        (-1, 1), (0, 1), (1, 1),
        (-1, 0), (1, 0),
        (-1, -1), (0, -1), (1, -1),
    )


def test_offsets_order_ignores_enable_order():
    policy = ReachabilityPolicy()
    policy.enable(Direction.SOUTH)
    policy.enable(Direction.NORTH)

    assert policy.offsets() == ((0, 1), (0, -1))


def test_from_name_accepts_presets_only():
    assert ReachabilityPolicy.from_name("Four") == ReachabilityPolicy.four_way()
    assert ReachabilityPolicy.from_name("eight") == ReachabilityPolicy.eight_way()
    with pytest.raises(ValueError):
        ReachabilityPolicy.from_name("six")


def test_toggle_enable_disable():
    policy = ReachabilityPolicy.four_way()

    assert policy.toggle(Direction.NORTH_EAST) is True
    assert policy.is_enabled(Direction.NORTH_EAST)
    assert policy.toggle(Direction.NORTH_EAST) is False
    assert not policy.is_enabled(Direction.NORTH_EAST)

    policy.disable(Direction.NORTH)
    policy.disable(Direction.NORTH)  # idempotent
    assert Direction.NORTH not in policy.directions


def test_offsets_snapshot_is_detached_from_policy():
    policy = ReachabilityPolicy.four_way()
    snapshot = policy.offsets()

    policy.enable(Direction.NORTH_WEST)

    assert (-1, 1) not in snapshot
    assert (-1, 1) in policy.offsets()


def test_copy_is_independent():
    policy = ReachabilityPolicy.four_way()
    clone = policy.copy()

    clone.disable(Direction.WEST)

    assert policy.is_enabled(Direction.WEST)
    assert clone != policy


def test_direction_groups():
    assert all(not direction.diagonal for direction in ORTHOGONAL)
    assert all(direction.diagonal for direction in DIAGONAL)
    assert Direction.CENTER.offset == (0, 0)
    assert len(list(Direction)) == 9


def test_neighbors_skip_out_of_view_and_blocking_cells():
    view = parse_ascii(
        """
        .#.
        ...
        #..
        """
    ).interior()

    corner = list(reachable_neighbors((0, 0), view, ReachabilityPolicy.eight_way().offsets()))
    assert corner == [(1, 1), (1, 0)]

    center = list(reachable_neighbors((1, 1), view, ReachabilityPolicy.four_way().offsets()))
    # NORTH, (WEST is blocked), EAST, SOUTH
    assert center == [(1, 2), (2, 1), (1, 0)]


def test_center_direction_only_yields_the_cell_itself():
    view = ((CellType.FLOOR,),)
    policy = ReachabilityPolicy([Direction.CENTER])

    assert list(reachable_neighbors((0, 0), view, policy.offsets())) == [(0, 0)]
