"""
Diff Rendering

Serializes values into a canonical multi-line form, compares them, and
renders line-level diffs for failure messages.

Usage:
    from encore.diff import format_diff, format_value, deep_equal

    format_diff({"a": 1}, {"a": 2})
    #       {
    #     -   a: 1,
    #     +   a: 2,
    #       }

    format_value([1, {"a": 1}])  # "[1, {...}]"
"""

from .compare import (
    contains,
    deep_equal,
    get_child,
    is_primitive,
    is_sequence,
    key_path_label,
    matches_subset,
    resolve_key_path,
    same_value,
    split_key_path,
)
from .expected import build_matching_expected, build_property_expected
from .format_diff import format_diff, should_show_diff, stringify_for_diff
from .inspect import ANY, format_value, inspect_value

__all__ = [
    # Rendering
    "inspect_value",
    "format_value",
    "format_diff",
    "should_show_diff",
    "stringify_for_diff",
    "ANY",
    # Comparison
    "same_value",
    "deep_equal",
    "matches_subset",
    "contains",
    "is_primitive",
    "is_sequence",
    # Key paths
    "split_key_path",
    "resolve_key_path",
    "get_child",
    "key_path_label",
    # Expected-value builders
    "build_matching_expected",
    "build_property_expected",
]
