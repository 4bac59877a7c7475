"""Core primitives: stateless helpers shared by timeline, climb and grid.

Architecture Note:
    core/ holds pure values and functions with no runtime state.
    For stateful services, see timeline/ and resolver/.
"""

from holetrap.core.identity import ClimbDirection, hole_key, parse_hole_key

__all__ = [
    "ClimbDirection",
    "hole_key",
    "parse_hole_key",
]
