"""Mechanics settings using Pydantic Settings.

Provides typed timing configuration with environment variable support.

Usage:
    from holetrap.config import MechanicsSettings

    # Load from environment variables (HOLETRAP_*)
    settings = MechanicsSettings()

    # Or override with explicit values
    settings = MechanicsSettings(hole_duration_ms=4000)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MechanicsSettings(BaseSettings):  # type: ignore[misc]
    """Timing rules for holes and trapped guards, in milliseconds.

    Attributes:
        hole_duration_ms: How long a dug hole stays open (n; t2 = t1 + n).
        guard_stun_duration_ms: How long a guard is stunned after falling in (m).
        guard_respawn_delay_ms: Delay before a dead guard respawns (h).

    Environment Variables:
        HOLETRAP_HOLE_DURATION_MS
        HOLETRAP_GUARD_STUN_DURATION_MS
        HOLETRAP_GUARD_RESPAWN_DELAY_MS
    """

    model_config = SettingsConfigDict(
        env_prefix="HOLETRAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    hole_duration_ms: int = Field(default=5000, gt=0)
    guard_stun_duration_ms: int = Field(default=2000, gt=0)
    guard_respawn_delay_ms: int = Field(default=3000, gt=0)
