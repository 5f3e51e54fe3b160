"""
Expected-value builders for diffs.

When a partial check fails, diffing the actual value against the bare
pattern would mark every unrelated key as removed. These helpers build an
"expected" value that keeps the actual data and only overlays what the
check asked for, so the diff highlights just the mismatch.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .compare import split_key_path
from .inspect import ANY


def build_matching_expected(actual: Mapping, pattern: Mapping) -> dict:
    """
    Overlay a subset pattern onto the actual mapping.

    Keys of ``actual`` keep their position and take the pattern value when
    the pattern has one; pattern keys missing from ``actual`` are appended.
    """
    result = {}
    for key, value in actual.items():
        result[key] = pattern[key] if key in pattern else value
    for key, value in pattern.items():
        if key not in actual:
            result[key] = value
    return result


def build_property_expected(
    actual: Any,
    key_path: str | Sequence[str],
    expected_value: Any = ANY,
) -> Any:
    """
    Copy ``actual`` and set ``expected_value`` at ``key_path``.

    Missing intermediate containers are created (a list when the next
    segment is an index, a dict otherwise). ``ANY`` marks "some value".
    """
    segments = [str(s) for s in split_key_path(key_path)]
    result = _clone(actual)
    if not isinstance(result, (dict, list)):
        result = {}

    current = result
    for segment, next_segment in zip(segments, segments[1:]):
        child = _get(current, segment)
        if not isinstance(child, (dict, list)):
            child = [] if next_segment.isdigit() else {}
            _set(current, segment, child)
        current = child
    _set(current, segments[-1], expected_value)
    return result


def _clone(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _clone(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_clone(v) for v in value]
    return value


def _get(container: dict | list, segment: str) -> Any:
    if isinstance(container, list):
        index = int(segment) if segment.isdigit() else None
        if index is not None and index < len(container):
            return container[index]
        return None
    return container.get(segment)


def _set(container: dict | list, segment: str, value: Any) -> None:
    if isinstance(container, list):
        if not segment.isdigit():
            return
        index = int(segment)
        while len(container) <= index:
            container.append(None)
        container[index] = value
        return
    container[segment] = value
