"""Geometric climb-out rules for trapped guards."""

from holetrap.climb.models import ClimbExitPoint
from holetrap.climb.protocol import TileChecker
from holetrap.climb.validation import ClimbValidation

__all__ = [
    "ClimbExitPoint",
    "ClimbValidation",
    "TileChecker",
]
