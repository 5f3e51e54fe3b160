"""
Value mixin: identity, deep equality and custom matchers.

Adds ``toHave{Base}``, ``toHave{Base}Equal``, ``toHave{Base}StrictEqual``
and ``toHave{Base}Satisfying``.
"""

from __future__ import annotations

from typing import Any, Callable

from ..diff import deep_equal, same_value
from ..error import DiffInfo
from ..utils import describe_error, xor
from .types import Getter, Mixin, MixinConfig, Negate


def create_value_mixin(getter: Getter, negate: Negate, config: MixinConfig) -> Mixin:
    """
    Create the value mixin for one field.

    Example:
        create_value_mixin(lambda: res.status, negate, MixinConfig("status"))
        # exp.toHaveStatus(200), exp.toHaveStatusEqual({...}), ...
    """
    name = config.value_name
    show = config.show

    def to_have(this, expected: Any):
        is_negated = negate()
        value = getter()
        if not xor(is_negated, same_value(value, expected)):
            raise config.error(
                f"Expected {name} to not be {show(expected)}, but got {show(value)}"
                if is_negated
                else f"Expected {name} to be {show(expected)}, but got {show(value)}"
            )
        return this

    def to_have_equal(this, expected: Any):
        is_negated = negate()
        value = getter()
        if not xor(is_negated, deep_equal(value, expected)):
            raise config.error(
                f"Expected {name} to not equal {show(expected)}, but it did"
                if is_negated
                else f"Expected {name} to equal {show(expected)}, but got {show(value)}",
                diff=DiffInfo(value, expected, is_negated),
            )
        return this

    def to_have_strict_equal(this, expected: Any):
        is_negated = negate()
        value = getter()
        if not xor(is_negated, deep_equal(value, expected, strict=True)):
            raise config.error(
                f"Expected {name} to not strictly equal {show(expected)}, but it did"
                if is_negated
                else f"Expected {name} to strictly equal {show(expected)}, but got {show(value)}",
                diff=DiffInfo(value, expected, is_negated),
            )
        return this

    def to_have_satisfying(this, matcher: Callable[[Any], Any]):
        is_negated = negate()
        value = getter()

        matcher_error: Exception | None = None
        try:
            matcher(value)
        except Exception as e:
            matcher_error = e

        if not xor(is_negated, matcher_error is None):
            if is_negated:
                raise config.error(f"Expected {name} to not satisfy the matcher, but it did")
            raise config.error(
                f"Expected {name} to satisfy the matcher, but it failed: {describe_error(matcher_error)}"
            ) from matcher_error
        return this

    def mixin(base):
        return {
            **base,
            config.method(): to_have,
            config.method("Equal"): to_have_equal,
            config.method("StrictEqual"): to_have_strict_equal,
            config.method("Satisfying"): to_have_satisfying,
        }

    return mixin
