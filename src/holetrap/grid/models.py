"""Tile codes and the text legend used to build grids from strings."""

from enum import IntEnum


class TileType(IntEnum):
    """Integer tile codes returned by TileChecker.get_tile_type()."""

    EMPTY = 0
    BRICK = 1  # Diggable
    SOLID = 2
    LADDER = 3
    ROPE = 4
    CONCRETE = 5


STANDABLE_TYPES = frozenset(
    {TileType.BRICK, TileType.SOLID, TileType.CONCRETE, TileType.LADDER, TileType.ROPE}
)
SOLID_TYPES = frozenset({TileType.BRICK, TileType.SOLID, TileType.CONCRETE})

LEGEND: dict[str, TileType] = {
    ".": TileType.EMPTY,
    " ": TileType.EMPTY,
    "#": TileType.BRICK,
    "@": TileType.SOLID,
    "H": TileType.LADDER,
    "-": TileType.ROPE,
    "X": TileType.CONCRETE,
}
