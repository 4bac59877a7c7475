"""Hole and trapped-guard timing."""

from holetrap.timeline.models import GuardTimelineEntry, HoleTimelineData
from holetrap.timeline.timeline import HOLE_REMOVAL_GRACE_MS, HoleTimeline

__all__ = [
    "HoleTimeline",
    "HoleTimelineData",
    "GuardTimelineEntry",
    "HOLE_REMOVAL_GRACE_MS",
]
