from __future__ import annotations

import typing as t

import pytest

from flask_gql import NavigationError
from flask_gql import place_value
from flask_gql import resolve_path


def test_nested_path() -> None:
    """Objects and lists are walked to the position, other data is unchanged."""
    root: dict[str, t.Any] = {
        "a": {"b": [{"c": 1}, {"c": 2}, {"c": None, "d": 4}], "e": 5},
        "f": "g",
    }
    place_value("x", root, resolve_path("variables.a.b.2.c"))
    assert root == {
        "a": {"b": [{"c": 1}, {"c": 2}, {"c": "x", "d": 4}], "e": 5},
        "f": "g",
    }


def test_top_level() -> None:
    root = {"file": None}
    place_value("x", root, ["file"])
    assert root == {"file": "x"}


def test_list_item() -> None:
    root = {"files": [None, None]}
    place_value("x", root, ["files", 1])
    assert root == {"files": [None, "x"]}


def test_idempotent() -> None:
    value = object()
    root: dict[str, t.Any] = {"files": [None]}
    place_value(value, root, ["files", 0])
    place_value(value, root, ["files", 0])
    assert root == {"files": [value]}


def test_overwrite_value() -> None:
    """A value other than the null placeholder is replaced without an error."""
    root = {"value": 10}
    place_value("7", root, ["value"])
    assert root == {"value": "7"}


def test_add_key() -> None:
    """The last segment may add a key that wasn't in the object."""
    root = {"input": {}}
    place_value("x", root, ["input", "file"])
    assert root == {"input": {"file": "x"}}


@pytest.mark.parametrize(
    ("root", "path", "message"),
    [
        ({"a": {"b": None}}, "variables.a.0", "expected a list at index 0"),
        ({"a": [None]}, "variables.a.b", "expected an object at 'b'"),
        ({"a": None}, "variables.a.b", "found null"),
        ({"a": "text"}, "variables.a.0", "found a str value"),
        ({"a": [{}]}, "variables.a.0.b.c", "'b' of 'variables.a.0.b.c' is not in"),
        ({}, "variables.a.b", "'a' of 'variables.a.b' is not in"),
        ({"a": [None]}, "variables.a.1", "index 1 of 'variables.a.1' is out of range"),
        ({"a": [[None]]}, "variables.a.3.0", "out of range for a list of length 1"),
    ],
)
def test_invalid_path(root: dict[str, t.Any], path: str, message: str) -> None:
    with pytest.raises(NavigationError, match="could not set variable") as info:
        place_value("x", root, resolve_path(path))

    assert message in str(info.value.__cause__)


def test_numeric_object_key() -> None:
    """An object with a numeric key can't be addressed, the segment is an index."""
    root = {"map": {"1": None}}

    with pytest.raises(NavigationError):
        place_value("x", root, resolve_path("variables.map.1"))

    assert root == {"map": {"1": None}}
