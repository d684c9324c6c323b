"""Tests for depth analysis."""

import pytest

from json_analyzer.common import resolve_path
from json_analyzer.depth import analyze_depth


@pytest.mark.parametrize("value", [42, "s", None, False, {}, []])
def test_leaf_roots_have_depth_zero(value) -> None:
    result = analyze_depth(value)
    assert result.max_depth == 0
    assert result.path == "(root)"
    assert result.value_at_path == value


def test_flat_object_has_depth_one() -> None:
    result = analyze_depth({"a": 1, "b": 2})
    assert result.max_depth == 1
    assert result.path == "a"
    assert result.value_at_path == 1


def test_deeply_nested_object() -> None:
    result = analyze_depth({"a": {"b": {"c": {"d": 1}}}})
    assert result.max_depth == 4
    assert result.path == "a.b.c.d"
    assert result.value_at_path == 1


def test_arrays_add_a_level() -> None:
    result = analyze_depth({"items": [{"nested": True}]})
    assert result.max_depth == 3
    assert result.path == "items[0].nested"
    assert result.value_at_path is True


def test_root_array_paths() -> None:
    result = analyze_depth([1, [2, [3]]])
    assert result.max_depth == 3
    assert result.path == "[1][1][0]"
    assert result.value_at_path == 3


def test_empty_containers_are_leaves() -> None:
    result = analyze_depth({"a": {}, "b": []})
    assert result.max_depth == 1
    assert result.path == "a"
    assert result.value_at_path == {}


def test_first_deepest_node_wins() -> None:
    result = analyze_depth({"x": {"first": 1, "second": 2}, "y": {"third": 3}})
    assert result.max_depth == 2
    assert result.path == "x.first"


def test_value_at_path_resolves_from_root() -> None:
    doc = {"a": [{"b": 1}, {"c": {"d": [None, {"e": "deep"}]}}]}
    result = analyze_depth(doc)
    assert result.path == "a[1].c.d[1].e"
    assert resolve_path(doc, result.path) == (True, result.value_at_path)


def test_handles_hundreds_of_levels() -> None:
    doc: object = "bottom"
    for _ in range(300):
        doc = {"k": doc}
    result = analyze_depth(doc)
    assert result.max_depth == 300
    assert result.value_at_path == "bottom"
