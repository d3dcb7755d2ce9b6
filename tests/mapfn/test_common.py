"""Tests for the shared sentinel and error types."""

import pytest

from mapfn.common import NOT_FOUND, EmptyCollection, NotFound


def test_not_found_singleton():
    """NotFound.instance() always returns the module constant"""
    assert NotFound.instance() is NOT_FOUND
    assert NotFound.instance() is NotFound.instance()


def test_not_found_is_falsy():
    """NOT_FOUND is falsy so it can be tested directly"""
    assert not NOT_FOUND
    assert bool(NOT_FOUND) is False


def test_not_found_distinct_from_key_like_values():
    """NOT_FOUND never equals a value that could be a key"""
    for value in [None, 0, False, "", (), "NOT_FOUND"]:
        assert NOT_FOUND != value


def test_not_found_equality_and_hash():
    """NotFound values compare and hash as a single value"""
    assert NotFound() == NOT_FOUND
    assert hash(NotFound()) == hash(NOT_FOUND)
    assert repr(NOT_FOUND) == "NOT_FOUND"


def test_empty_collection_is_exception():
    """EmptyCollection carries its message"""
    with pytest.raises(EmptyCollection, match="empty"):
        raise EmptyCollection("random_key on an empty mapping")
