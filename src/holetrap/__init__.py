"""holetrap: timed hole hazards for grid platformers.

Usage:
    from holetrap import ClimbValidation, GridTileChecker, HoleTimeline

    grid = GridTileChecker.from_rows([
        "H.....",
        "##.###",
        "@@@@@@",
    ])
    timeline = HoleTimeline()
    validation = ClimbValidation(grid)

    timeline.create_hole_timeline("2,1", creation_time=1000, duration=5000)
    timeline.add_guard_to_hole("2,1", "g1", fall_time=1200, stun_duration=2000)
    timeline.update(3200)
    if timeline.can_guard_climb("2,1", "g1"):
        exit_point = validation.get_best_climb_exit(2, 1)
"""

__version__ = "0.1.0"

# Core primitives
from holetrap.core import ClimbDirection, hole_key, parse_hole_key

# Climb geometry
from holetrap.climb import ClimbExitPoint, ClimbValidation, TileChecker

# Configuration
from holetrap.config import MechanicsSettings

# Grid
from holetrap.grid import GridTileChecker, TileType

# Driver
from holetrap.resolver import GuardFate, HoleResolver

# Timing
from holetrap.timeline import (
    HOLE_REMOVAL_GRACE_MS,
    GuardTimelineEntry,
    HoleTimeline,
    HoleTimelineData,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "ClimbDirection",
    "hole_key",
    "parse_hole_key",
    # Timing
    "HoleTimeline",
    "HoleTimelineData",
    "GuardTimelineEntry",
    "HOLE_REMOVAL_GRACE_MS",
    # Climb
    "ClimbValidation",
    "ClimbExitPoint",
    "TileChecker",
    # Grid
    "GridTileChecker",
    "TileType",
    # Config
    "MechanicsSettings",
    # Driver
    "HoleResolver",
    "GuardFate",
]
