"""Tests for GridTileChecker.

Critical Invariants:
- Out-of-bounds cells read as EMPTY
- Open holes are never solid, and standable only while a guard is inside
- Closing a hole restores the original tile semantics
"""

import pytest

from holetrap import ClimbValidation, GridTileChecker, TileType

LEVEL = [
    "......",
    "H..-..",
    "####X#",
    "@@@@@@",
]


@pytest.fixture
def grid():
    return GridTileChecker.from_rows(LEVEL)


def test_dimensions(grid):
    assert (grid.width, grid.height) == (6, 4)


def test_tile_types_follow_legend(grid):
    assert grid.get_tile_type(0, 0) == TileType.EMPTY
    assert grid.get_tile_type(0, 1) == TileType.LADDER
    assert grid.get_tile_type(3, 1) == TileType.ROPE
    assert grid.get_tile_type(0, 2) == TileType.BRICK
    assert grid.get_tile_type(4, 2) == TileType.CONCRETE
    assert grid.get_tile_type(0, 3) == TileType.SOLID


@pytest.mark.parametrize(("x", "y"), [(-1, 0), (0, -1), (6, 0), (0, 4), (100, 100)])
def test_out_of_bounds_is_empty(grid, x, y):
    assert grid.get_tile_type(x, y) == TileType.EMPTY
    assert grid.is_tile_standable(x, y) is False
    assert grid.is_tile_solid(x, y) is False


@pytest.mark.parametrize(
    ("tile", "standable", "solid"),
    [
        (TileType.EMPTY, False, False),
        (TileType.BRICK, True, True),
        (TileType.SOLID, True, True),
        (TileType.LADDER, True, False),
        (TileType.ROPE, True, False),
        (TileType.CONCRETE, True, True),
    ],
)
def test_tile_semantics(tile, standable, solid):
    grid = GridTileChecker([[int(tile)]])

    assert grid.is_tile_standable(0, 0) is standable
    assert grid.is_tile_solid(0, 0) is solid


def test_open_hole_is_neither_solid_nor_standable(grid):
    grid.open_hole(0, 2)

    assert grid.is_hole(0, 2)
    assert grid.get_tile_type(0, 2) == TileType.BRICK
    assert grid.is_tile_solid(0, 2) is False
    assert grid.is_tile_standable(0, 2) is False


def test_occupied_hole_is_standable(grid):
    """A trapped guard is a platform for whoever walks over the hole."""
    grid.open_hole(0, 2)
    grid.set_occupied(0, 2, True)
    assert grid.is_tile_standable(0, 2) is True

    grid.set_occupied(0, 2, False)
    assert grid.is_tile_standable(0, 2) is False


def test_set_occupied_without_hole_is_noop(grid):
    grid.set_occupied(0, 0, True)

    assert grid.is_hole(0, 0) is False
    assert grid.is_tile_standable(0, 0) is False


def test_close_hole_restores_tile(grid):
    grid.open_hole(0, 2)

    assert grid.close_hole(0, 2) is True
    assert grid.close_hole(0, 2) is False
    assert grid.is_tile_solid(0, 2) is True
    assert grid.is_tile_standable(0, 2) is True


def test_only_undug_bricks_are_diggable(grid):
    assert grid.is_diggable(0, 2) is True
    assert grid.is_diggable(4, 2) is False  # concrete
    assert grid.is_diggable(0, 3) is False  # solid
    assert grid.is_diggable(0, 0) is False  # empty
    assert grid.is_diggable(-1, 2) is False

    grid.open_hole(0, 2)
    assert grid.is_diggable(0, 2) is False


def test_set_tile(grid):
    grid.set_tile(0, 0, TileType.LADDER)
    assert grid.get_tile_type(0, 0) == TileType.LADDER

    with pytest.raises(IndexError):
        grid.set_tile(10, 0, TileType.LADDER)


def test_unknown_legend_character():
    with pytest.raises(ValueError, match="Unknown tile"):
        GridTileChecker.from_rows(["..?"])


def test_ragged_rows_rejected():
    with pytest.raises(ValueError, match="Ragged"):
        GridTileChecker([[0, 0], [0]])


def test_empty_grid():
    grid = GridTileChecker([])

    assert (grid.width, grid.height) == (0, 0)
    assert grid.get_tile_type(0, 0) == TileType.EMPTY


def test_climb_out_of_dug_hole(grid):
    """Hole at (2,2): left exit (1,1) is empty air, right exit (3,1) is a rope over brick."""
    grid.open_hole(2, 2)
    validation = ClimbValidation(grid)

    left, right = validation.get_valid_climb_exits(2, 2)

    assert left.is_valid is False
    assert right.is_valid is True
    assert validation.has_climb_path(2, 2, right) is False  # brick (3,2) beside the hole


def test_neighbouring_hole_clears_climb_path(grid):
    grid.open_hole(2, 2)
    grid.open_hole(3, 2)
    grid.set_occupied(3, 2, True)
    validation = ClimbValidation(grid)

    best = validation.get_best_climb_exit(2, 2)

    assert best is not None
    assert validation.has_climb_path(2, 2, best) is True
