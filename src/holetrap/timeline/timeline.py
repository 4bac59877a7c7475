"""Time-keyed state for open holes and trapped guards.

HoleTimeline owns the lifecycle of every open hole and of the guard entries
inside it. It holds no geometry and never reads a clock: time only moves when
the caller passes `now` to update().

Rules:
    - A hole closes at t2 = t1 + n.
    - A guard is stunned from tg1 until tg1 + m, then may climb.
    - A guard dies when tg1 + m >= t2 (recovery at or after the close).
    - An expired hole is reclaimed HOLE_REMOVAL_GRACE_MS after t2, but only
      once every trapped guard has been resolved and removed.

Usage:
    timeline = HoleTimeline()
    timeline.create_hole_timeline("5,3", creation_time=1000, duration=5000)
    timeline.add_guard_to_hole("5,3", "g1", fall_time=1000, stun_duration=2000)
    timeline.update(3000)
    timeline.can_guard_climb("5,3", "g1")  # True
"""

from __future__ import annotations

import logging

from holetrap.timeline.models import GuardTimelineEntry, HoleTimelineData

logger = logging.getLogger(__name__)

HOLE_REMOVAL_GRACE_MS = 100
"""Delay after t2 before an empty hole is reclaimed, so in-flight death checks still see it."""


class HoleTimeline:
    """Authoritative timing state for all open holes.

    Lookup misses are expected outcomes and are reported as False/None/0/empty,
    never raised.
    """

    def __init__(self) -> None:
        self._timelines: dict[str, HoleTimelineData] = {}
        self._current_time = 0

    @property
    def current_time(self) -> int:
        """Last time passed to update() (0 before the first update)."""
        return self._current_time

    def __len__(self) -> int:
        return len(self._timelines)

    def __contains__(self, hole_key: object) -> bool:
        return hole_key in self._timelines

    def _find_guard(self, hole_key: str, guard_id: str) -> GuardTimelineEntry | None:
        timeline = self._timelines.get(hole_key)
        if timeline is None:
            return None
        return timeline.find_guard(guard_id)

    # --- Registration ---

    def create_hole_timeline(
        self, hole_key: str, creation_time: int, duration: int
    ) -> HoleTimelineData:
        """Register a newly dug hole.

        An existing timeline under the same key is replaced without warning;
        callers keep at most one hole per key.

        Args:
            hole_key: Hole identifier.
            creation_time: Dig time (t1).
            duration: Open duration (n).

        Returns:
            The new timeline record.
        """
        timeline = HoleTimelineData(hole_key=hole_key, t1=creation_time, n=duration)
        self._timelines[hole_key] = timeline
        logger.debug(
            "Hole %s created: t1=%s n=%s t2=%s", hole_key, timeline.t1, timeline.n, timeline.t2
        )
        return timeline

    def add_guard_to_hole(
        self, hole_key: str, guard_id: str, fall_time: int, stun_duration: int
    ) -> bool:
        """Register a guard that fell into a hole.

        Args:
            hole_key: Hole identifier.
            guard_id: Guard identifier, unique within the hole.
            fall_time: Fall time (tg1).
            stun_duration: Stun duration (m).

        Returns:
            True if registered, False if the hole is unknown or the guard is
            already in it (state is left untouched).
        """
        timeline = self._timelines.get(hole_key)
        if timeline is None:
            logger.debug("Guard %s not added: no hole %s", guard_id, hole_key)
            return False
        if timeline.find_guard(guard_id) is not None:
            logger.debug("Guard %s already in hole %s", guard_id, hole_key)
            return False

        timeline.guards_in_hole.append(
            GuardTimelineEntry(
                guard_id=guard_id,
                tg1=fall_time,
                stun_end_time=fall_time + stun_duration,
            )
        )
        logger.debug(
            "Guard %s fell into hole %s at %s, stunned until %s",
            guard_id,
            hole_key,
            fall_time,
            fall_time + stun_duration,
        )
        return True

    def remove_guard_from_hole(self, hole_key: str, guard_id: str) -> bool:
        """Remove a guard after escape or death.

        Returns:
            True if an entry was removed, False if hole or guard was not found.
        """
        timeline = self._timelines.get(hole_key)
        if timeline is None:
            return False
        entry = timeline.find_guard(guard_id)
        if entry is None:
            return False
        timeline.guards_in_hole.remove(entry)
        logger.debug("Guard %s removed from hole %s", guard_id, hole_key)
        return True

    # --- Time advancement ---

    def update(self, now: int) -> None:
        """Advance stun state and reclaim expired empty holes.

        Args:
            now: Current time. Expected to be non-decreasing across calls.
        """
        self._current_time = now

        expired: list[str] = []
        for hole_key, timeline in self._timelines.items():
            for entry in timeline.guards_in_hole:
                if entry.is_stunned and now >= entry.stun_end_time:
                    entry.recover()
                    logger.debug("Guard %s in hole %s recovered", entry.guard_id, hole_key)

            if now >= timeline.t2 + HOLE_REMOVAL_GRACE_MS and not timeline.guards_in_hole:
                expired.append(hole_key)

        for hole_key in expired:
            del self._timelines[hole_key]
            logger.debug("Hole %s reclaimed at %s", hole_key, now)

    def cleanup(self) -> list[str]:
        """Drop every hole whose close time has passed, trapped guards included.

        Unlike update(), this does not wait for guards to be resolved. Meant for
        teardown (level end, reset), not for per-tick use.

        Returns:
            Keys of the removed holes.
        """
        closed = [key for key, tl in self._timelines.items() if self._current_time >= tl.t2]
        for hole_key in closed:
            del self._timelines[hole_key]
        if closed:
            logger.debug("Cleaned up %d closed hole(s): %s", len(closed), closed)
        return closed

    # --- Verdicts ---

    def should_guard_die(self, hole_key: str, guard_id: str, stun_duration: int) -> bool:
        """Decide the escape/death race for a trapped guard.

        The guard dies when its earliest climb-ready moment (tg1 + stun_duration)
        is at or after the hole's close time t2. The stun_duration argument is
        used as given, even if it differs from the value used at registration.

        Returns:
            True if the guard dies. Also True when the hole or the guard entry
            is missing: an untracked guard is never granted an escape.
        """
        timeline = self._timelines.get(hole_key)
        if timeline is None:
            return True
        entry = timeline.find_guard(guard_id)
        if entry is None:
            return True
        return entry.tg1 + stun_duration >= timeline.t2

    def can_guard_climb(self, hole_key: str, guard_id: str) -> bool:
        """Check whether a guard has recovered and may attempt to climb."""
        entry = self._find_guard(hole_key, guard_id)
        if entry is None:
            return False
        return entry.can_climb and not entry.is_stunned

    def is_hole_active(self, hole_key: str) -> bool:
        """Check whether the hole exists and has not reached its close time."""
        timeline = self._timelines.get(hole_key)
        if timeline is None:
            return False
        return self._current_time < timeline.t2

    def get_remaining_hole_time(self, hole_key: str) -> int:
        """Time left until the hole closes, clamped at zero."""
        timeline = self._timelines.get(hole_key)
        if timeline is None:
            return 0
        return max(0, timeline.t2 - self._current_time)

    def get_remaining_stun_time(self, hole_key: str, guard_id: str) -> int:
        """Time left until the guard recovers, clamped at zero."""
        entry = self._find_guard(hole_key, guard_id)
        if entry is None:
            return 0
        return max(0, entry.stun_end_time - self._current_time)

    # --- Snapshots ---

    def get_guards_in_hole(self, hole_key: str) -> list[GuardTimelineEntry]:
        """Copies of the guard entries in fall order (empty if hole unknown)."""
        timeline = self._timelines.get(hole_key)
        if timeline is None:
            return []
        return timeline.snapshot().guards_in_hole

    def get_hole_timeline(self, hole_key: str) -> HoleTimelineData | None:
        """Copy of the hole's timeline record, or None."""
        timeline = self._timelines.get(hole_key)
        return timeline.snapshot() if timeline is not None else None

    def get_all_active_timelines(self) -> dict[str, HoleTimelineData]:
        """Copies of all tracked timelines keyed by hole key."""
        return {key: timeline.snapshot() for key, timeline in self._timelines.items()}

    def get_debug_info(self) -> list[str]:
        """Human-readable per-hole and per-guard status lines."""
        info: list[str] = []
        for hole_key, timeline in self._timelines.items():
            remaining = (timeline.t2 - self._current_time) / 1000
            info.append(f"Hole {hole_key}: {remaining:.1f}s remaining")
            for entry in timeline.guards_in_hole:
                if entry.is_stunned:
                    stun_left = max(0, entry.stun_end_time - self._current_time) / 1000
                    status = f"stunned ({stun_left:.1f}s)"
                else:
                    status = "can climb"
                info.append(f"  Guard {entry.guard_id}: {status}")
        return info
