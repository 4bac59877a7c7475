"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from holetrap import HoleTimeline


@pytest.fixture
def timeline():
    """Fresh HoleTimeline instance."""
    return HoleTimeline()
