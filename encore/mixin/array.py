"""
Array mixin: membership, element matching and emptiness.

Failures of ``ContainingEqual`` and ``Matching`` diff the actual list
against the list with the wanted item appended, so the diff shows exactly
the element that was expected.
"""

from __future__ import annotations

from typing import Any

from ..diff import contains, deep_equal, is_sequence, matches_subset
from ..error import DiffInfo
from ..utils import holds, xor
from .types import Getter, Mixin, MixinConfig, Negate


def _length(value: Any) -> int | None:
    try:
        return len(value)
    except TypeError:
        return None


def _appended(value: Any, item: Any) -> list:
    return [*value, item] if is_sequence(value) else [item]


def create_array_value_mixin(getter: Getter, negate: Negate, config: MixinConfig) -> Mixin:
    """Create the array mixin for one field."""
    name = config.value_name
    show = config.show

    def to_have_containing(this, item: Any):
        is_negated = negate()
        value = getter()
        if not xor(is_negated, holds(lambda: contains(value, item))):
            raise config.error(
                f"Expected {name} to not contain {show(item)}, but got {show(value)}"
                if is_negated
                else f"Expected {name} to contain {show(item)}, but got {show(value)}"
            )
        return this

    def to_have_containing_equal(this, item: Any):
        is_negated = negate()
        value = getter()
        found = holds(lambda: any(deep_equal(x, item) for x in value))
        if not xor(is_negated, found):
            raise config.error(
                f"Expected {name} to not contain equal {show(item)}, but it did"
                if is_negated
                else f"Expected {name} to contain equal {show(item)}, but got {show(value)}",
                diff=DiffInfo(value, _appended(value, item), is_negated),
            )
        return this

    def to_have_matching(this, subset: Any):
        is_negated = negate()
        value = getter()
        found = holds(lambda: any(matches_subset(x, subset) for x in value))
        if not xor(is_negated, found):
            raise config.error(
                f"Expected {name} to not contain item matching {show(subset)}, but it did"
                if is_negated
                else f"Expected {name} to contain item matching {show(subset)}, but got {show(value)}",
                diff=DiffInfo(value, _appended(value, subset), is_negated),
            )
        return this

    def to_have_empty(this):
        is_negated = negate()
        value = getter()
        length = _length(value)
        if not xor(is_negated, length == 0):
            raise config.error(
                f"Expected {name} to not be empty, but it is"
                if is_negated
                else f"Expected {name} to be empty, but got length {length}"
            )
        return this

    def mixin(base):
        return {
            **base,
            config.method("Containing"): to_have_containing,
            config.method("ContainingEqual"): to_have_containing_equal,
            config.method("Matching"): to_have_matching,
            config.method("Empty"): to_have_empty,
        }

    return mixin
