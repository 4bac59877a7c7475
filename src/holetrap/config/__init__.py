"""Configuration module using Pydantic Settings.

Usage:
    from holetrap.config import MechanicsSettings

    settings = MechanicsSettings(guard_stun_duration_ms=1500)
"""

from holetrap.config.settings import MechanicsSettings

__all__ = [
    "MechanicsSettings",
]
