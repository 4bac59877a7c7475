"""Tests for MechanicsSettings."""

import pytest
from pydantic import ValidationError

from holetrap import MechanicsSettings


def test_defaults(monkeypatch):
    for name in ("HOLE_DURATION_MS", "GUARD_STUN_DURATION_MS", "GUARD_RESPAWN_DELAY_MS"):
        monkeypatch.delenv(f"HOLETRAP_{name}", raising=False)

    settings = MechanicsSettings(_env_file=None)

    assert settings.hole_duration_ms == 5000
    assert settings.guard_stun_duration_ms == 2000
    assert settings.guard_respawn_delay_ms == 3000


def test_environment_override(monkeypatch):
    monkeypatch.setenv("HOLETRAP_HOLE_DURATION_MS", "4000")
    monkeypatch.setenv("HOLETRAP_GUARD_STUN_DURATION_MS", "1500")

    settings = MechanicsSettings(_env_file=None)

    assert settings.hole_duration_ms == 4000
    assert settings.guard_stun_duration_ms == 1500


def test_explicit_values_win_over_environment(monkeypatch):
    monkeypatch.setenv("HOLETRAP_HOLE_DURATION_MS", "4000")

    settings = MechanicsSettings(_env_file=None, hole_duration_ms=7000)

    assert settings.hole_duration_ms == 7000


@pytest.mark.parametrize("field", ["hole_duration_ms", "guard_stun_duration_ms"])
@pytest.mark.parametrize("value", [0, -100])
def test_non_positive_durations_rejected(field, value):
    with pytest.raises(ValidationError):
        MechanicsSettings(_env_file=None, **{field: value})
