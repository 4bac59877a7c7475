"""Tests for hole keys and climb directions."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from holetrap import ClimbDirection, hole_key, parse_hole_key


def test_hole_key_format():
    assert hole_key(5, 3) == "5,3"
    assert hole_key(-1, 0) == "-1,0"


@given(x=st.integers(), y=st.integers())
def test_parse_inverts_hole_key(x, y):
    assert parse_hole_key(hole_key(x, y)) == (x, y)


@pytest.mark.parametrize("key", ["", "5", "5,3,1", "a,b", "5;3", "5.5,3"])
def test_parse_rejects_malformed_keys(key):
    with pytest.raises(ValueError, match="Malformed hole key"):
        parse_hole_key(key)


def test_climb_direction_values():
    assert ClimbDirection.LEFT.value == "left"
    assert ClimbDirection.RIGHT == "right"


@pytest.mark.parametrize("key", [" 5 , 3 ", "+5,3", "5, 3", "05,3", "-0,3", "5,3\n"])
def test_parse_rejects_non_canonical_keys(key):
    """A key that parses must be the exact key hole_key() would build, or lookups miss."""
    with pytest.raises(ValueError, match="canonical"):
        parse_hole_key(key)
