"""Local in-memory tile grid.

Simple list-of-rows grid suitable for single-process use and testing.
Cells are indexed [y][x]; y grows downward.

Dug holes are tracked separately from tile codes so the original tile type
survives until the hole closes. An open hole is never solid, and is standable
only while a guard is trapped in it (the guard acts as a platform).

Usage:
    grid = GridTileChecker.from_rows([
        "......",
        "H.....",
        "##.###",
        "@@@@@@",
    ])
    grid.open_hole(2, 2)
    validation = ClimbValidation(grid)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from holetrap.grid.models import LEGEND, SOLID_TYPES, STANDABLE_TYPES, TileType


class GridTileChecker:
    """Dense tile grid with hole bookkeeping.

    Args:
        tiles: Rows of tile codes, all of the same length.

    Raises:
        ValueError: If rows have different lengths.
    """

    def __init__(self, tiles: Sequence[Sequence[int]]):
        widths = {len(row) for row in tiles}
        if len(widths) > 1:
            raise ValueError(f"Ragged tile grid: row widths {sorted(widths)}")
        self._tiles: list[list[int]] = [list(row) for row in tiles]
        self._width = widths.pop() if widths else 0
        self._height = len(self._tiles)
        self._holes: dict[tuple[int, int], bool] = {}
        """Open holes: (x, y) -> True while a guard is trapped inside."""

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> GridTileChecker:
        """Build a grid from text rows using LEGEND.

        Raises:
            ValueError: On an unknown legend character or ragged rows.
        """
        tiles: list[list[int]] = []
        for y, row in enumerate(rows):
            line: list[int] = []
            for x, char in enumerate(row):
                if char not in LEGEND:
                    raise ValueError(f"Unknown tile {char!r} at ({x}, {y})")
                line.append(int(LEGEND[char]))
            tiles.append(line)
        return cls(tiles)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, grid_x: int, grid_y: int) -> bool:
        return 0 <= grid_x < self._width and 0 <= grid_y < self._height

    # --- TileChecker ---

    def get_tile_type(self, grid_x: int, grid_y: int) -> int:
        """Get tile code, EMPTY outside the grid."""
        if not self.in_bounds(grid_x, grid_y):
            return int(TileType.EMPTY)
        return self._tiles[grid_y][grid_x]

    def is_tile_standable(self, grid_x: int, grid_y: int) -> bool:
        """Bricks, solid blocks, ladders and ropes can be stood on.

        An open hole is standable only while occupied by a trapped guard.
        """
        occupied = self._holes.get((grid_x, grid_y))
        if occupied is not None:
            return occupied
        return self.get_tile_type(grid_x, grid_y) in STANDABLE_TYPES

    def is_tile_solid(self, grid_x: int, grid_y: int) -> bool:
        """Bricks, solid blocks and concrete block movement. Open holes never do."""
        if (grid_x, grid_y) in self._holes:
            return False
        return self.get_tile_type(grid_x, grid_y) in SOLID_TYPES

    # --- Host bookkeeping ---

    def set_tile(self, grid_x: int, grid_y: int, tile_type: int) -> None:
        """Overwrite a tile code.

        Raises:
            IndexError: If the cell is outside the grid.
        """
        if not self.in_bounds(grid_x, grid_y):
            raise IndexError(f"Cell ({grid_x}, {grid_y}) outside {self._width}x{self._height} grid")
        self._tiles[grid_y][grid_x] = int(tile_type)

    def is_diggable(self, grid_x: int, grid_y: int) -> bool:
        """Only in-bounds bricks that are not already dug can be dug."""
        return (
            self.in_bounds(grid_x, grid_y)
            and (grid_x, grid_y) not in self._holes
            and self.get_tile_type(grid_x, grid_y) == TileType.BRICK
        )

    def is_hole(self, grid_x: int, grid_y: int) -> bool:
        return (grid_x, grid_y) in self._holes

    def open_hole(self, grid_x: int, grid_y: int) -> None:
        """Mark a cell as dug. The underlying tile code is kept for restoring."""
        self._holes[(grid_x, grid_y)] = False

    def close_hole(self, grid_x: int, grid_y: int) -> bool:
        """Restore a dug cell. Returns True if a hole was open there."""
        return self._holes.pop((grid_x, grid_y), None) is not None

    def set_occupied(self, grid_x: int, grid_y: int, occupied: bool) -> None:
        """Record whether a guard is trapped in an open hole. No-op if no hole."""
        if (grid_x, grid_y) in self._holes:
            self._holes[(grid_x, grid_y)] = occupied
