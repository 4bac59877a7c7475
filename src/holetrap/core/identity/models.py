"""Hole identity models.

Usage:
    key = hole_key(5, 3)          # "5,3"
    x, y = parse_hole_key(key)    # (5, 3)
    ClimbDirection.RIGHT.value    # "right"
"""

from enum import Enum


class ClimbDirection(str, Enum):
    """Side of the hole an exit sits on."""

    LEFT = "left"
    RIGHT = "right"


def hole_key(grid_x: int, grid_y: int) -> str:
    """Encode a hole's grid position as a stable string key.

    Args:
        grid_x: Hole column.
        grid_y: Hole row.

    Returns:
        Key of the form "x,y".
    """
    return f"{grid_x},{grid_y}"


def parse_hole_key(key: str) -> tuple[int, int]:
    """Decode a key produced by hole_key().

    Args:
        key: Key of the form "x,y".

    Returns:
        (grid_x, grid_y) tuple.

    Raises:
        ValueError: If key is not exactly what hole_key() would produce
            (two comma-separated integers, no spaces or '+' signs).
    """
    parts = key.split(",")
    if len(parts) != 2:
        raise ValueError(f"Malformed hole key {key!r}: expected 'x,y'")
    try:
        grid_x, grid_y = int(parts[0]), int(parts[1])
    except ValueError as e:
        raise ValueError(f"Malformed hole key {key!r}: coordinates must be integers") from e
    if hole_key(grid_x, grid_y) != key:
        raise ValueError(f"Malformed hole key {key!r}: not in canonical 'x,y' form")
    return grid_x, grid_y
