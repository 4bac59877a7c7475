"""Tile grid protocol consumed by climb validation.

Any host representation (2-D list, sparse dict, chunked map) satisfies it
structurally; ClimbValidation only ever reads through these three queries.

Usage:
    grid = GridTileChecker.from_rows([...])
    validation = ClimbValidation(grid)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TileChecker(Protocol):
    """Read-only tile queries by grid coordinate. Must not mutate the grid."""

    def is_tile_standable(self, grid_x: int, grid_y: int) -> bool:
        """Check if an entity can stand at (or be supported by) this cell."""
        ...

    def is_tile_solid(self, grid_x: int, grid_y: int) -> bool:
        """Check if the cell blocks movement."""
        ...

    def get_tile_type(self, grid_x: int, grid_y: int) -> int:
        """Get the integer tile code at this cell."""
        ...
