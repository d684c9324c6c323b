"""Tests for the shared path model."""

import pytest

from json_analyzer.common import join_index, join_key, parse_path, resolve_path, type_name


def test_join_helpers() -> None:
    assert join_key("", "a") == "a"
    assert join_key("a", "b") == "a.b"
    assert join_index("", 0) == "[0]"
    assert join_index("a.b", 3) == "a.b[3]"


@pytest.mark.parametrize(
    "path, tokens",
    [
        ("", []),
        ("(root)", []),
        ("a", ["a"]),
        ("a.b[2].c", ["a", "b", 2, "c"]),
        ("[0][1]", [0, 1]),
    ],
)
def test_parse_path(path, tokens) -> None:
    assert parse_path(path) == tokens


def test_resolve_path() -> None:
    doc = {"a": [{"b": None}, 5]}
    assert resolve_path(doc, "(root)") == (True, doc)
    assert resolve_path(doc, "a[0].b") == (True, None)
    assert resolve_path(doc, "a[1]") == (True, 5)
    assert resolve_path(doc, "a[2]") == (False, None)
    assert resolve_path(doc, "a.b") == (False, None)
    assert resolve_path(doc, "a[1].x") == (False, None)


@pytest.mark.parametrize(
    "value, name",
    [(None, "null"), (True, "bool"), (1, "int"), (1.5, "float"), ("s", "string"), ([], "array"), ({}, "object")],
)
def test_type_name(value, name) -> None:
    assert type_name(value) == name
