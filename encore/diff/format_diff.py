"""
Line-level diff of two values.

Both values are serialized with ``inspect_value`` and compared line by line.
Removed lines belong to the actual value, added lines to the expected one:

      {
    -   a: 1,
    +   a: 2,
      }
"""

from __future__ import annotations

import difflib
from typing import Any

from ..theme import Theme, default_theme
from .compare import is_primitive
from .inspect import inspect_value


def should_show_diff(value: Any) -> bool:
    """Only containers and objects are worth diffing."""
    return not is_primitive(value)


def stringify_for_diff(value: Any) -> str:
    """
    Serialize a value for diffing.

    An empty top-level container is split over two lines so that
    ``{}`` vs ``{a: 1}`` diffs as one added line rather than a replacement.
    """
    text = inspect_value(value)
    if text == "{}":
        return "{\n}"
    if text == "[]":
        return "[\n]"
    return text


def format_diff(actual: Any, expected: Any, theme: Theme | None = None) -> str | None:
    """
    Render the difference between actual and expected.

    Args:
        actual: The value that was observed
        expected: The value the check wanted
        theme: Styling; defaults to the environment's theme

    Returns:
        Rendered diff, or None when both values are scalars or the
        serializations are identical
    """
    if not should_show_diff(actual) and not should_show_diff(expected):
        return None

    theme = theme or default_theme()

    actual_lines = stringify_for_diff(actual).split("\n")
    expected_lines = stringify_for_diff(expected).split("\n")

    matcher = difflib.SequenceMatcher(a=actual_lines, b=expected_lines, autojunk=False)
    lines: list[str] = []
    changed = False

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            lines.extend(theme.dim(f"    {line}") for line in actual_lines[i1:i2])
            continue
        changed = True
        lines.extend(theme.failure(f"  - {line}") for line in actual_lines[i1:i2])
        lines.extend(theme.success(f"  + {line}") for line in expected_lines[j1:j2])

    if not changed:
        return None
    return "\n".join(lines)
