"""Tests for full-key construction."""

import pytest

from redis_map._internal.keys import check_value, full_key, key_pattern, logical_key


def test_full_key():
    assert full_key("users", "42") == "users:42"


def test_full_key_does_not_escape_separator():
    assert full_key("a:b", "c:d") == "a:b:c:d"


def test_full_key_rejects_non_strings():
    with pytest.raises(TypeError, match="keys must be str, not int"):
        full_key("ns", 42)


def test_logical_key_strips_prefix():
    assert logical_key("users", "users:42") == "42"
    assert logical_key("a:b", "a:b:c:d") == "c:d"


def test_empty_namespace():
    assert full_key("", "k") == ":k"
    assert logical_key("", ":k") == "k"
    assert key_pattern("") == ":*"


@pytest.mark.parametrize(
    ("namespace", "expected"),
    [
        ("users", "users:*"),
        ("a*b", "a\\*b:*"),
        ("q?", "q\\?:*"),
        ("[x]", "\\[x\\]:*"),
        ("back\\slash", "back\\\\slash:*"),
    ],
)
def test_key_pattern_escapes_glob_characters(namespace, expected):
    assert key_pattern(namespace) == expected


def test_check_value():
    assert check_value("v") == "v"
    with pytest.raises(TypeError, match="values must be str, not bytes"):
        check_value(b"v")
