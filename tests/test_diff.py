"""Tests for pretty-printing, comparison and line diffs."""

import math
import re
from dataclasses import dataclass

import pytest

from encore.diff import (
    ANY,
    build_matching_expected,
    build_property_expected,
    contains,
    deep_equal,
    format_diff,
    format_value,
    get_child,
    inspect_value,
    is_primitive,
    key_path_label,
    matches_subset,
    resolve_key_path,
    same_value,
    split_key_path,
    stringify_for_diff,
)
from encore.theme import color_theme, no_color_theme, remove_colors
from encore.utils import UNDEFINED


@dataclass
class User:
    id: int
    name: str


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self._cache = None


# ─────────────────────────────────────────────────────────────────────────────
# inspect_value / format_value
# ─────────────────────────────────────────────────────────────────────────────

def test_inspect_value_is_multiline_with_trailing_commas():
    value = {"id": 1, "tags": ["a"], "content-type": "json"}
    assert inspect_value(value) == "\n".join([
        "{",
        "  id: 1,",
        "  tags: [",
        "    'a',",
        "  ],",
        "  'content-type': 'json',",
        "}",
    ])


def test_inspect_value_scalars():
    assert inspect_value(None) == "None"
    assert inspect_value(UNDEFINED) == "undefined"
    assert inspect_value(math.nan) == "nan"
    assert inspect_value("x") == "'x'"
    assert inspect_value(ANY) == "[Any]"


def test_inspect_value_guards_cycles():
    value = {"name": "root"}
    value["self"] = value
    assert inspect_value(value) == "{\n  name: 'root',\n  self: [Circular],\n}"


def test_inspect_value_repeated_reference_is_not_circular():
    shared = [1]
    assert "[Circular]" not in inspect_value({"a": shared, "b": shared})


def test_inspect_value_objects():
    assert inspect_value(User(1, "ann")) == "User {\n  id: 1,\n  name: 'ann',\n}"
    assert inspect_value(Point(1, 2)) == "Point {\n  x: 1,\n  y: 2,\n}"


def test_inspect_value_sets_are_sorted():
    assert inspect_value({3, 1, 2}) == "set {\n  1,\n  2,\n  3,\n}"


def test_inspect_value_tuples_and_empty_containers():
    assert inspect_value((1,)) == "(\n  1,\n)"
    assert inspect_value([]) == "[]"
    assert inspect_value({}) == "{}"


def test_inspect_value_uses_bytes_renderer():
    rendered = inspect_value({"body": b"hi"}, bytes_renderer=lambda b: f"<{len(b)} bytes>")
    assert rendered == "{\n  body: <2 bytes>,\n}"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("plain text", "plain text"),
        (90, "90"),
        (None, "None"),
        ([1, 2], "[1, 2]"),
        ([1, [2]], "[1, [...]]"),
        ({"a": 1}, "{ a: 1 }"),
        ({"a": {"b": 1}}, "{ a: {...} }"),
        ({}, "{}"),
        (User(1, "ann"), "User { id: 1, name: 'ann' }"),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_format_value_truncates():
    text = format_value("x" * 100)
    assert len(text) == 80
    assert text.endswith("...")
    assert format_value("x" * 100, max_length=10) == "xxxxxxx..."


# ─────────────────────────────────────────────────────────────────────────────
# Comparison
# ─────────────────────────────────────────────────────────────────────────────

def test_is_primitive():
    assert is_primitive(None)
    assert is_primitive(UNDEFINED)
    assert is_primitive(1.5)
    assert is_primitive("s")
    assert not is_primitive([])
    assert not is_primitive({})
    assert not is_primitive(User(1, "a"))


def test_same_value():
    assert same_value(1, 1)
    assert same_value("a", "a")
    assert same_value(math.nan, math.nan)
    assert not same_value(True, 1)
    assert not same_value([1], [1])
    items = [1]
    assert same_value(items, items)


def test_deep_equal_ignores_key_order_and_undefined_keys():
    assert deep_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})
    assert deep_equal({"a": 1, "b": UNDEFINED}, {"a": 1})
    assert deep_equal([1, 2], (1, 2))
    assert not deep_equal([1, 2], [2, 1])
    assert not deep_equal({"a": 1}, {"a": 1, "b": None})


def test_deep_equal_strict():
    assert not deep_equal({"a": 1, "b": UNDEFINED}, {"a": 1}, strict=True)
    assert not deep_equal([1, 2], (1, 2), strict=True)
    assert deep_equal({"a": [1]}, {"a": [1]}, strict=True)


def test_deep_equal_numbers_and_objects():
    assert deep_equal(1, 1.0)
    assert not deep_equal(1, True)
    assert deep_equal({"v": math.nan}, {"v": math.nan})
    assert deep_equal(Point(1, 2), Point(1, 2))
    assert not deep_equal(Point(1, 2), Point(1, 3))
    assert deep_equal(User(1, "a"), User(1, "a"))


def test_deep_equal_handles_cycles():
    a = [1]
    a.append(a)
    b = [1]
    b.append(b)
    assert deep_equal(a, b)


def test_matches_subset():
    actual = {"id": 1, "user": {"name": "ann", "age": 30}, "tags": ["a", "b"]}
    assert matches_subset(actual, {"user": {"name": "ann"}})
    assert matches_subset(actual, {"tags": ["a", "b"]})
    assert not matches_subset(actual, {"tags": ["a"]})
    assert not matches_subset(actual, {"user": {"name": "bob"}})
    assert not matches_subset(actual, {"missing": 1})
    assert matches_subset(Point(1, 2), {"x": 1})


def test_contains():
    assert contains("hello", "ell")
    assert contains([1, 2], 2)
    assert not contains([[1]], [1])
    with pytest.raises(TypeError):
        contains(5, 5)


# ─────────────────────────────────────────────────────────────────────────────
# Key paths
# ─────────────────────────────────────────────────────────────────────────────

def test_split_key_path():
    assert split_key_path("a.b.0") == ["a", "b", "0"]
    assert split_key_path(["a.b"]) == ["a.b"]
    assert key_path_label(["a", "b"]) == "a.b"


def test_resolve_key_path():
    data = {"user": {"tags": ["x", "y"]}, "a.b": 1, "point": Point(3, 4)}
    assert resolve_key_path(data, "user.tags.1") == (True, "y")
    assert resolve_key_path(data, ["a.b"]) == (True, 1)
    assert resolve_key_path(data, "point.y") == (True, 4)
    assert resolve_key_path(data, "a.b") == (False, UNDEFINED)
    assert resolve_key_path(data, "user.tags.5") == (False, UNDEFINED)


def test_get_child_distinguishes_missing_from_none():
    assert get_child({"a": None}, "a") == (True, None)
    assert get_child({}, "a") == (False, UNDEFINED)
    assert get_child(5, "real") == (False, UNDEFINED)


# ─────────────────────────────────────────────────────────────────────────────
# Expected-value builders
# ─────────────────────────────────────────────────────────────────────────────

def test_build_matching_expected_overlays_pattern():
    actual = {"id": 1, "status": "active", "name": "ann"}
    expected = build_matching_expected(actual, {"status": "inactive", "extra": True})
    assert expected == {"id": 1, "status": "inactive", "name": "ann", "extra": True}
    assert list(expected) == ["id", "status", "name", "extra"]


def test_build_property_expected_creates_missing_containers():
    actual = {"user": {"name": "ann"}}
    expected = build_property_expected(actual, "user.tags.0", "admin")
    assert expected == {"user": {"name": "ann", "tags": ["admin"]}}
    assert actual == {"user": {"name": "ann"}}


def test_build_property_expected_uses_any_marker():
    expected = build_property_expected({"a": 1}, "b")
    assert expected["b"] is ANY


# ─────────────────────────────────────────────────────────────────────────────
# format_diff
# ─────────────────────────────────────────────────────────────────────────────

def test_format_diff_of_primitives_is_none():
    assert format_diff(42, 43) is None
    assert format_diff(None, "x") is None


def test_format_diff_of_equal_values_is_none():
    assert format_diff({"a": 1}, {"a": 1}) is None


def test_format_diff_marks_removed_and_added_lines():
    diff = format_diff({"a": 1}, {"a": 2}, theme=no_color_theme)
    lines = diff.split("\n")
    assert lines == ["    {", "  -   a: 1,", "  +   a: 2,", "    }"]
    assert any(line.startswith("  -") and "a: 1" in line for line in lines)
    assert any(line.startswith("  +") and "a: 2" in line for line in lines)


def test_format_diff_empty_container_adds_single_line():
    assert stringify_for_diff({}) == "{\n}"
    assert stringify_for_diff([]) == "[\n]"
    diff = format_diff({}, {"a": 1}, theme=no_color_theme)
    assert diff.split("\n") == ["    {", "  +   a: 1,", "    }"]


def test_format_diff_primitive_against_container():
    diff = format_diff(None, {"a": 1}, theme=no_color_theme)
    assert "  - None" in diff.split("\n")


def test_format_diff_colours_lines():
    diff = format_diff({"a": 1}, {"a": 2}, theme=color_theme)
    assert re.search(r"\x1b\[", diff)
    assert remove_colors(diff) == format_diff({"a": 1}, {"a": 2}, theme=no_color_theme)
