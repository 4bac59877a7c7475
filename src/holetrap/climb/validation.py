"""Climb-out validation for guards trapped in holes.

A guard in the hole at (X, Y) can climb up if (X - 1, Y - 1) or (X + 1, Y - 1)
can be stood on, and that cell is itself supported from below.

    (x-1,y-1)  .  (x+1,y-1)      <- exits
    (x-1,y)  [hole]  (x+1,y)     <- intermediate cells checked by has_climb_path
    (x-1,y+1)  .  (x+1,y+1)

Stateless apart from the injected TileChecker; safe to share between callers.
"""

from __future__ import annotations

from holetrap.climb.models import ClimbExitPoint
from holetrap.climb.protocol import TileChecker
from holetrap.core.identity import ClimbDirection


class ClimbValidation:
    """Computes which exits of a hole a guard may climb out through.

    Args:
        tile_checker: Tile grid to query.
    """

    def __init__(self, tile_checker: TileChecker):
        self._tiles = tile_checker

    @property
    def tile_checker(self) -> TileChecker:
        return self._tiles

    def _is_supported(self, grid_x: int, grid_y: int) -> bool:
        """Something to land on directly below the cell."""
        return self._tiles.is_tile_standable(grid_x, grid_y + 1) or self._tiles.is_tile_solid(
            grid_x, grid_y + 1
        )

    def _validate_exit(self, grid_x: int, grid_y: int, direction: ClimbDirection) -> ClimbExitPoint:
        is_valid = self._tiles.is_tile_standable(grid_x, grid_y) and self._is_supported(
            grid_x, grid_y
        )
        return ClimbExitPoint(x=grid_x, y=grid_y, direction=direction, is_valid=is_valid)

    def get_valid_climb_exits(self, hole_x: int, hole_y: int) -> list[ClimbExitPoint]:
        """Evaluate both exits of a hole.

        Args:
            hole_x: Hole column.
            hole_y: Hole row.

        Returns:
            Exactly two exits, [left, right], at (x-1, y-1) and (x+1, y-1),
            each flagged valid or not.
        """
        return [
            self._validate_exit(hole_x - 1, hole_y - 1, ClimbDirection.LEFT),
            self._validate_exit(hole_x + 1, hole_y - 1, ClimbDirection.RIGHT),
        ]

    def can_climb_out(self, hole_x: int, hole_y: int) -> bool:
        """Check if at least one exit is valid."""
        return any(exit_.is_valid for exit_ in self.get_valid_climb_exits(hole_x, hole_y))

    def get_best_climb_exit(self, hole_x: int, hole_y: int) -> ClimbExitPoint | None:
        """Pick the exit to climb through: right first, then left.

        Returns:
            The preferred valid exit, or None if both are blocked.
        """
        left, right = self.get_valid_climb_exits(hole_x, hole_y)
        if right.is_valid:
            return right
        if left.is_valid:
            return left
        return None

    def has_climb_path(self, hole_x: int, hole_y: int, exit_point: ClimbExitPoint) -> bool:
        """Check that the guard can physically move from the hole to the exit.

        The exit must be valid, exactly one row up and one column over, and the
        cell beside the hole on the side of travel must not be solid.

        Args:
            hole_x: Hole column.
            hole_y: Hole row.
            exit_point: Exit to check, usually from get_valid_climb_exits().

        Returns:
            True if the climb path is clear.
        """
        if not exit_point.is_valid:
            return False

        delta_x = exit_point.x - hole_x
        delta_y = exit_point.y - hole_y
        if delta_y != -1 or abs(delta_x) != 1:
            return False

        return not self._tiles.is_tile_solid(hole_x + delta_x, hole_y)

    def can_multiple_guards_climb(self, hole_x: int, hole_y: int, guard_count: int) -> bool:
        """Check if a hole holding guard_count guards lets them out.

        Guards leave one after another through any valid exit; per-exit
        contention is not limited here.
        """
        if guard_count <= 1:
            return self.can_climb_out(hole_x, hole_y)
        valid_exits = [e for e in self.get_valid_climb_exits(hole_x, hole_y) if e.is_valid]
        return len(valid_exits) > 0

    def get_climb_debug_info(self, hole_x: int, hole_y: int) -> list[str]:
        """Human-readable breakdown of both exits and the overall verdict."""
        exits = self.get_valid_climb_exits(hole_x, hole_y)
        info = [f"Climb validation for hole at ({hole_x}, {hole_y}):"]

        for exit_ in exits:
            status = "VALID" if exit_.is_valid else "BLOCKED"
            info.append(
                f"  {exit_.direction.value.upper()} exit ({exit_.x}, {exit_.y}): {status}"
            )
            if not exit_.is_valid:
                standable = self._tiles.is_tile_standable(exit_.x, exit_.y)
                below_solid = self._tiles.is_tile_solid(exit_.x, exit_.y + 1)
                info.append(f"    - Standable: {standable}, Below solid: {below_solid}")

        can_climb = any(e.is_valid for e in exits)
        info.append(f"  Overall climb possible: {'YES' if can_climb else 'NO'}")
        return info
