"""
One-of mixin: ``toHave{Base}OneOf(values)``.
"""

from __future__ import annotations

from typing import Any, Iterable

from ..diff import same_value
from ..utils import xor
from .types import Getter, Mixin, MixinConfig, Negate


def create_one_of_value_mixin(getter: Getter, negate: Negate, config: MixinConfig) -> Mixin:
    """
    Create the one-of mixin; membership uses identity semantics.

    Example:
        exp.toHaveRoleOneOf(["admin", "user", "guest"])
    """
    name = config.value_name
    show = config.show

    def format_choices(values: list[Any]) -> str:
        if not values:
            return "(no values)"
        return ", ".join(show(v) for v in values)

    def to_have_one_of(this, values: Iterable[Any]):
        is_negated = negate()
        value = getter()
        values = list(values)
        if not xor(is_negated, any(same_value(value, v) for v in values)):
            raise config.error(
                f"Expected {name} to not be one of {format_choices(values)}, but got {show(value)}"
                if is_negated
                else f"Expected {name} to be one of {format_choices(values)}, but got {show(value)}"
            )
        return this

    def mixin(base):
        return {**base, config.method("OneOf"): to_have_one_of}

    return mixin
