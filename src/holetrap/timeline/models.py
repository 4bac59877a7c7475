"""Timeline records for open holes and the guards trapped in them.

Naming follows the game design notation:
    t1  - hole creation time
    n   - hole open duration
    t2  - hole close time (t1 + n)
    tg1 - guard fall time
    m   - guard stun duration (stun_end_time = tg1 + m)

All times are milliseconds on the caller's clock.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(slots=True)
class GuardTimelineEntry:
    """One trapped guard inside one hole.

    Attributes:
        guard_id: Caller-supplied identifier, unique within its hole.
        tg1: Fall timestamp.
        stun_end_time: tg1 + stun duration; climbing is possible from here on.
        is_stunned: True until an update reaches stun_end_time.
        can_climb: Flips to True together with is_stunned flipping to False. Never reverts.
    """

    guard_id: str
    tg1: int
    stun_end_time: int
    is_stunned: bool = True
    can_climb: bool = False

    def recover(self) -> None:
        """Move from Stunned to Climbable. One-way."""
        self.is_stunned = False
        self.can_climb = True


@dataclass(slots=True)
class HoleTimelineData:
    """Lifecycle record of one open hole.

    t2 is derived once at construction and never recomputed.

    Attributes:
        hole_key: Hole identifier, by convention "x,y".
        t1: Creation timestamp.
        n: Open duration.
        t2: Close timestamp (t1 + n).
        guards_in_hole: Trapped guards in fall order.
    """

    hole_key: str
    t1: int
    n: int
    t2: int = field(init=False)
    guards_in_hole: list[GuardTimelineEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.t2 = self.t1 + self.n

    def find_guard(self, guard_id: str) -> GuardTimelineEntry | None:
        """Get the entry for guard_id, or None if the guard is not in this hole."""
        for entry in self.guards_in_hole:
            if entry.guard_id == guard_id:
                return entry
        return None

    def snapshot(self) -> HoleTimelineData:
        """Detached copy: mutating it or its entries leaves this record untouched."""
        return replace(self, guards_in_hole=[replace(g) for g in self.guards_in_hole])
