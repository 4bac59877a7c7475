"""Climb exit values. Derived on every query, never stored."""

from __future__ import annotations

from dataclasses import dataclass

from holetrap.core.identity import ClimbDirection


@dataclass(frozen=True, slots=True)
class ClimbExitPoint:
    """One diagonal-upward neighbour of a hole.

    Attributes:
        x: Exit column.
        y: Exit row (always hole row - 1 for computed exits).
        direction: Side of the hole.
        is_valid: Whether a guard may climb out onto this cell.
    """

    x: int
    y: int
    direction: ClimbDirection
    is_valid: bool = False
