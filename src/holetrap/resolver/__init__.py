"""Reference driver sequencing timeline and climb checks."""

from holetrap.resolver.models import GuardFate
from holetrap.resolver.resolver import HoleResolver

__all__ = [
    "GuardFate",
    "HoleResolver",
]
