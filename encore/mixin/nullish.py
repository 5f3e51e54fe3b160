"""
Nullish mixin: None / UNDEFINED checks.

``None`` is an explicit null; ``UNDEFINED`` marks a value that was never
set. ``Nullish`` accepts either, ``Present`` neither.
"""

from __future__ import annotations

from typing import Any, Callable

from ..utils import UNDEFINED, xor
from .types import Getter, Mixin, MixinConfig, Negate


def _is_nullish(value: Any) -> bool:
    return value is None or value is UNDEFINED


def create_nullish_value_mixin(getter: Getter, negate: Negate, config: MixinConfig) -> Mixin:
    """Create the nullish mixin for one field."""
    name = config.value_name
    show = config.show

    def check(positive: str, negative: str, predicate: Callable[[Any], bool]):
        def method(this):
            is_negated = negate()
            value = getter()
            if not xor(is_negated, predicate(value)):
                raise config.error(
                    f"Expected {name} {negative}, but got {show(value)}"
                    if is_negated
                    else f"Expected {name} {positive}, but got {show(value)}"
                )
            return this

        return method

    def mixin(base):
        return {
            **base,
            config.method("Null"): check(
                "to be None", "to not be None", lambda v: v is None
            ),
            config.method("Undefined"): check(
                "to be undefined", "to not be undefined", lambda v: v is UNDEFINED
            ),
            config.method("Nullish"): check(
                "to be None or undefined", "to not be None nor undefined", _is_nullish
            ),
            config.method("Present"): check(
                "to be present", "to not be present", lambda v: not _is_nullish(v)
            ),
        }

    return mixin
