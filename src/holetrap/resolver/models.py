"""Resolver verdict types."""

from enum import Enum, auto


class GuardFate(Enum):
    """Outcome for a guard still inside a hole when it closes."""

    ESCAPED = auto()
    """Climbed out through a valid exit before the hole filled."""

    DIED = auto()
    """Recovered too late, or had no exit; removed from the hole as dead."""
