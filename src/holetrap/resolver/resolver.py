"""Hole resolver: the driver between HoleTimeline and ClimbValidation.

The two components never call each other. The resolver applies the game's
sequencing on top of them:

    climb attempt:  (closed hole and should_guard_die -> refuse) -> can_guard_climb
                    -> get_best_climb_exit -> has_climb_path -> remove_guard_from_hole
    hole closing:   should_guard_die per remaining guard; survivors get one
                    last climb attempt, everyone else is removed as dead.

Usage:
    resolver = HoleResolver(HoleTimeline(), ClimbValidation(grid))
    resolver.dig(5, 3, now=1000)
    resolver.trap_guard(5, 3, "g1", now=1000)
    resolver.tick(3000)
    resolver.attempt_climb(5, 3, "g1")
"""

from __future__ import annotations

import logging

from holetrap.climb import ClimbExitPoint, ClimbValidation
from holetrap.config import MechanicsSettings
from holetrap.core.identity import hole_key
from holetrap.resolver.models import GuardFate
from holetrap.timeline import HoleTimeline, HoleTimelineData

logger = logging.getLogger(__name__)


class HoleResolver:
    """Per-frame driver for dug holes and the guards trapped in them.

    Args:
        timeline: Timing state for holes and guards.
        climb_validation: Exit geometry over the level's tile grid.
        settings: Timing rules. Defaults to MechanicsSettings() (env-configurable).
    """

    def __init__(
        self,
        timeline: HoleTimeline,
        climb_validation: ClimbValidation,
        settings: MechanicsSettings | None = None,
    ):
        self.timeline = timeline
        self.climb_validation = climb_validation
        self.settings = settings if settings is not None else MechanicsSettings()

    def dig(self, grid_x: int, grid_y: int, now: int) -> HoleTimelineData:
        """Start the timeline of a freshly dug hole."""
        return self.timeline.create_hole_timeline(
            hole_key(grid_x, grid_y), now, self.settings.hole_duration_ms
        )

    def trap_guard(self, grid_x: int, grid_y: int, guard_id: str, now: int) -> bool:
        """Register a guard that fell into the hole at (grid_x, grid_y)."""
        return self.timeline.add_guard_to_hole(
            hole_key(grid_x, grid_y), guard_id, now, self.settings.guard_stun_duration_ms
        )

    def tick(self, now: int) -> None:
        """Advance timing state to now."""
        self.timeline.update(now)

    def _find_exit(
        self, grid_x: int, grid_y: int, guard_id: str
    ) -> tuple[ClimbExitPoint | None, str]:
        """Exit a guard may take right now, or None with the reason it cannot."""
        key = hole_key(grid_x, grid_y)
        if not self.timeline.is_hole_active(key) and self.timeline.should_guard_die(
            key, guard_id, self.settings.guard_stun_duration_ms
        ):
            return None, "hole closed before recovery"
        if not self.timeline.can_guard_climb(key, guard_id):
            return None, "still stunned"

        exit_point = self.climb_validation.get_best_climb_exit(grid_x, grid_y)
        if exit_point is None:
            return None, "no exit"
        if not self.climb_validation.has_climb_path(grid_x, grid_y, exit_point):
            return None, "path blocked"
        return exit_point, ""

    def attempt_climb(self, grid_x: int, grid_y: int, guard_id: str) -> ClimbExitPoint | None:
        """Try to get a guard out of its hole.

        A guard that lost the race against the hole's close time is left in
        place once the hole has closed; close_hole() resolves it.

        Returns:
            The exit used if the guard escaped (and was removed from the hole),
            None if it is still stunned, doomed, has no exit, or the path is blocked.
        """
        exit_point, _ = self._find_exit(grid_x, grid_y, guard_id)
        if exit_point is None:
            return None

        key = hole_key(grid_x, grid_y)
        self.timeline.remove_guard_from_hole(key, guard_id)
        logger.debug(
            "Guard %s climbed out of hole %s to the %s (%s, %s)",
            guard_id,
            key,
            exit_point.direction.value,
            exit_point.x,
            exit_point.y,
        )
        return exit_point

    def close_hole(self, grid_x: int, grid_y: int) -> dict[str, GuardFate]:
        """Resolve every guard still inside a hole that is filling.

        Returns:
            Fate per guard id, in fall order. Empty if the hole is unknown or empty.
        """
        key = hole_key(grid_x, grid_y)
        stun = self.settings.guard_stun_duration_ms
        fates: dict[str, GuardFate] = {}

        for entry in self.timeline.get_guards_in_hole(key):
            guard_id = entry.guard_id
            if self.timeline.should_guard_die(key, guard_id, stun):
                reason = "recovery at or after close"
            else:
                exit_point, reason = self._find_exit(grid_x, grid_y, guard_id)
                if exit_point is not None:
                    self.attempt_climb(grid_x, grid_y, guard_id)
                    fates[guard_id] = GuardFate.ESCAPED
                    continue

            self.timeline.remove_guard_from_hole(key, guard_id)
            fates[guard_id] = GuardFate.DIED
            logger.debug("Guard %s died in closing hole %s: %s", guard_id, key, reason)

        return fates

    def respawn_time(self, death_time: int) -> int:
        """When a guard that died at death_time comes back."""
        return death_time + self.settings.guard_respawn_delay_ms
