"""
Value comparison semantics shared by the mixins.

Three notions of equality are used:

- ``same_value``: identity. Primitives compare by value (NaN equals NaN,
  booleans never equal integers); containers and objects by identity.
- ``deep_equal``: structural equality. Key order is irrelevant and keys
  whose value is UNDEFINED count as absent. With ``strict=True`` such keys
  are significant and container types must match.
- ``matches_subset``: partial structural match. Every key of a mapping
  subset must be present and match; sequences match element-wise.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any

from ..utils import UNDEFINED


def is_primitive(value: Any) -> bool:
    """Whether a value is a scalar (no diff is shown between two scalars)."""
    return (
        value is None
        or value is UNDEFINED
        or isinstance(value, (str, bytes, bytearray, numbers.Number, Enum))
    )


def is_sequence(value: Any) -> bool:
    """Sequences that are compared element-wise (not strings or bytes)."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def same_value(a: Any, b: Any) -> bool:
    """Identity comparison with value semantics for scalars."""
    if a is b:
        return True
    if not (is_primitive(a) and is_primitive(b)):
        return False
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    if _is_nan(a) and _is_nan(b):
        return True
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        return False


def deep_equal(a: Any, b: Any, strict: bool = False) -> bool:
    """Structural equality; see module docstring for the rules."""
    return _equal(a, b, strict, set())


def _visible_keys(mapping: Mapping, strict: bool) -> set:
    if strict:
        return set(mapping.keys())
    return {k for k, v in mapping.items() if v is not UNDEFINED}


def _fields(value: Any) -> dict[str, Any] | None:
    if is_primitive(value) or isinstance(value, type) or callable(value):
        return None
    if type(value).__eq__ is not object.__eq__:
        return None
    if hasattr(value, "__dict__"):
        return vars(value)
    return None


def _equal(a: Any, b: Any, strict: bool, seen: set[tuple[int, int]]) -> bool:
    if a is b:
        return True
    if _is_nan(a) and _is_nan(b):
        return True

    if is_primitive(a) or is_primitive(b):
        if isinstance(a, bool) != isinstance(b, bool):
            return False
        try:
            return bool(a == b)
        except (TypeError, ValueError):
            return False

    if strict and type(a) is not type(b):
        return False

    pair = (id(a), id(b))
    if pair in seen:
        return True
    seen.add(pair)

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        keys = _visible_keys(a, strict)
        if keys != _visible_keys(b, strict):
            return False
        return all(_equal(a[k], b[k], strict, seen) for k in keys)

    if is_sequence(a) and is_sequence(b):
        if len(a) != len(b):
            return False
        return all(_equal(x, y, strict, seen) for x, y in zip(a, b))

    if isinstance(a, Set) and isinstance(b, Set):
        return a == b

    fields_a, fields_b = _fields(a), _fields(b)
    if fields_a is not None and fields_b is not None:
        return _equal(fields_a, fields_b, strict, seen)

    try:
        return bool(a == b)
    except (TypeError, ValueError):
        return False


def matches_subset(actual: Any, subset: Any) -> bool:
    """Whether ``actual`` contains everything described by ``subset``."""
    if isinstance(subset, Mapping):
        for key, expected in subset.items():
            found, value = get_child(actual, key)
            if not found or not matches_subset(value, expected):
                return False
        return True

    if is_sequence(subset):
        if not is_sequence(actual) or len(actual) != len(subset):
            return False
        return all(matches_subset(x, y) for x, y in zip(actual, subset))

    return deep_equal(actual, subset)


def contains(container: Any, item: Any) -> bool:
    """
    Substring check for strings, identity membership for collections.

    Raises:
        TypeError: If container is neither a string nor a collection
    """
    if isinstance(container, str):
        return isinstance(item, str) and item in container
    if is_sequence(container) or isinstance(container, Set):
        return any(same_value(x, item) for x in container)
    raise TypeError(f"{type(container).__name__} is not a string or collection")


def get_child(container: Any, key: Any) -> tuple[bool, Any]:
    """
    Look up one key path segment.

    Mapping keys come first; digit strings (or ints) index sequences; any
    other non-scalar falls back to attribute access.

    Returns:
        Tuple of (found, value). value is UNDEFINED when not found.
    """
    if isinstance(container, Mapping):
        if key in container:
            return True, container[key]
        return False, UNDEFINED

    if is_primitive(container):
        return False, UNDEFINED

    if is_sequence(container):
        index = _as_index(key)
        if index is not None and index < len(container):
            return True, container[index]
        return False, UNDEFINED

    if isinstance(key, str):
        value = getattr(container, key, UNDEFINED)
        if value is not UNDEFINED:
            return True, value
    return False, UNDEFINED


def _as_index(key: Any) -> int | None:
    if isinstance(key, int) and not isinstance(key, bool):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isdigit():
        return int(key)
    return None


def split_key_path(key_path: str | Sequence[str]) -> list[str]:
    """
    Split a key path into segments.

    A string is split on ``.`` (so it cannot address a key containing a
    dot); a list or tuple is taken as-is, one exact key per element.
    """
    if isinstance(key_path, str):
        return key_path.split(".")
    return list(key_path)


def resolve_key_path(obj: Any, key_path: str | Sequence[str]) -> tuple[bool, Any]:
    """
    Walk a key path through nested data.

    Returns:
        Tuple of (found, value). value is UNDEFINED when any segment is missing.
    """
    current = obj
    for key in split_key_path(key_path):
        found, current = get_child(current, key)
        if not found:
            return False, UNDEFINED
    return True, current


def key_path_label(key_path: str | Sequence[str]) -> str:
    """Human-readable form of a key path for messages."""
    if isinstance(key_path, str):
        return key_path
    return ".".join(str(k) for k in key_path)
