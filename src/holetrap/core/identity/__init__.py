"""Hole identity: grid keys and exit directions."""

from holetrap.core.identity.models import ClimbDirection, hole_key, parse_hole_key

__all__ = [
    "ClimbDirection",
    "hole_key",
    "parse_hole_key",
]
