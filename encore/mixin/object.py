"""
Object mixin: partial matching and key path properties.

Key paths address nested data. A string splits on ``.``; a list or tuple
gives one exact key per element, so ``["a.b"]`` reaches a key that itself
contains a dot:

    exp.toHaveDataProperty("user.tags.0", "admin")
    exp.toHaveDataProperty(["a.b"])
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable

from ..diff import (
    ANY,
    build_matching_expected,
    build_property_expected,
    contains,
    deep_equal,
    is_sequence,
    key_path_label,
    matches_subset,
    resolve_key_path,
)
from ..error import DiffInfo
from ..utils import UNDEFINED, describe_error, ensure_non_nullish, holds, xor
from .types import Getter, Mixin, MixinConfig, Negate


def _matching_expected(value: Any, subset: Any) -> Any:
    if is_sequence(subset) or is_sequence(value):
        return subset
    if isinstance(value, Mapping) and isinstance(subset, Mapping):
        return build_matching_expected(value, subset)
    return subset


def create_object_value_mixin(getter: Getter, negate: Negate, config: MixinConfig) -> Mixin:
    """
    Create the object mixin for one field.

    Adds ``toHave{Base}Matching``, ``Property``, ``PropertyContaining``,
    ``PropertyMatching`` and ``PropertySatisfying``.
    """
    name = config.value_name
    show = config.show

    def to_have_matching(this, subset: Any):
        is_negated = negate()
        value = getter()
        if not xor(is_negated, holds(lambda: matches_subset(value, subset))):
            raise config.error(
                f"Expected {name} to not match {show(subset)}, but it did"
                if is_negated
                else f"Expected {name} to match {show(subset)}, but got {show(value)}",
                diff=DiffInfo(value, _matching_expected(value, subset), is_negated),
            )
        return this

    def to_have_property(this, key_path: str | Sequence[str], expected: Any = UNDEFINED):
        is_negated = negate()
        obj = getter()
        found, actual = resolve_key_path(obj, key_path)
        passes = found and (expected is UNDEFINED or deep_equal(actual, expected))

        if not xor(is_negated, passes):
            label = key_path_label(key_path)
            diff = DiffInfo(
                obj,
                build_property_expected(obj, key_path, ANY if expected is UNDEFINED else expected),
                is_negated,
            )
            if expected is UNDEFINED:
                raise config.error(
                    f'Expected {name} to not have property "{label}", but it did'
                    if is_negated
                    else f'Expected {name} to have property "{label}"',
                    diff=diff,
                )
            raise config.error(
                f'Expected {name} to not have property "{label}" with value {show(expected)}, but it did'
                if is_negated
                else f'Expected {name} to have property "{label}" with value {show(expected)}',
                diff=diff,
            )
        return this

    def to_have_property_containing(this, key_path: str | Sequence[str], expected: Any):
        is_negated = negate()
        found, actual = resolve_key_path(getter(), key_path)
        passes = found and holds(lambda: contains(actual, expected))

        if not xor(is_negated, passes):
            label = key_path_label(key_path)
            raise config.error(
                f'Expected {name} property "{label}" to not contain {show(expected)}, but it did'
                if is_negated
                else f'Expected {name} property "{label}" to contain {show(expected)}'
            )
        return this

    def to_have_property_matching(this, key_path: str | Sequence[str], subset: Any):
        is_negated = negate()
        found, actual = resolve_key_path(getter(), key_path)
        passes = found and holds(lambda: matches_subset(actual, subset))

        if not xor(is_negated, passes):
            label = key_path_label(key_path)
            raise config.error(
                f'Expected {name} property "{label}" to not match {show(subset)}, but it did'
                if is_negated
                else f'Expected {name} property "{label}" to match {show(subset)}'
            )
        return this

    def to_have_property_satisfying(
        this,
        key_path: str | Sequence[str],
        matcher: Callable[[Any], Any],
    ):
        is_negated = negate()
        found, actual = resolve_key_path(getter(), key_path)
        label = key_path_label(key_path)

        matcher_error: Exception | None = None
        if found:
            try:
                matcher(ensure_non_nullish(actual, label))
            except Exception as e:
                matcher_error = e

        passes = found and matcher_error is None
        if not xor(is_negated, passes):
            if not found:
                raise config.error(
                    f'Expected {name} property "{label}" to exist and satisfy the matcher, '
                    f"but it does not exist"
                )
            if is_negated:
                raise config.error(
                    f'Expected {name} property "{label}" to not satisfy the matcher, but it did'
                )
            raise config.error(
                f'Expected {name} property "{label}" to satisfy the matcher, '
                f"but it failed: {describe_error(matcher_error)}"
            ) from matcher_error
        return this

    def mixin(base):
        return {
            **base,
            config.method("Matching"): to_have_matching,
            config.method("Property"): to_have_property,
            config.method("PropertyContaining"): to_have_property_containing,
            config.method("PropertyMatching"): to_have_property_matching,
            config.method("PropertySatisfying"): to_have_property_satisfying,
        }

    return mixin
