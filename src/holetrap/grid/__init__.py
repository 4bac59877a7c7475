"""In-memory tile grid implementing the TileChecker protocol."""

from holetrap.grid.local import GridTileChecker
from holetrap.grid.models import LEGEND, SOLID_TYPES, STANDABLE_TYPES, TileType

__all__ = [
    "GridTileChecker",
    "TileType",
    "LEGEND",
    "SOLID_TYPES",
    "STANDABLE_TYPES",
]
