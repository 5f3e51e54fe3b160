"""
String mixin: ``toHave{Base}Containing`` and ``toHave{Base}Matching``.
"""

from __future__ import annotations

import re

from ..diff import contains
from ..utils import holds, xor
from .types import Getter, Mixin, MixinConfig, Negate


def create_string_value_mixin(getter: Getter, negate: Negate, config: MixinConfig) -> Mixin:
    """
    Create the string mixin for one field.

    ``Matching`` accepts a pattern string or a compiled ``re.Pattern`` and
    searches anywhere in the value.
    """
    name = config.value_name
    show = config.show

    def to_have_containing(this, substr: str):
        is_negated = negate()
        value = getter()
        if not xor(is_negated, holds(lambda: contains(value, substr))):
            raise config.error(
                f"Expected {name} to not contain {show(substr)}, but got {show(value)}"
                if is_negated
                else f"Expected {name} to contain {show(substr)}, but got {show(value)}"
            )
        return this

    def to_have_matching(this, pattern: str | re.Pattern[str]):
        is_negated = negate()
        value = getter()
        if not xor(is_negated, holds(lambda: re.search(pattern, value) is not None)):
            raise config.error(
                f"Expected {name} to not match {show(pattern)}, but got {show(value)}"
                if is_negated
                else f"Expected {name} to match {show(pattern)}, but got {show(value)}"
            )
        return this

    def mixin(base):
        return {
            **base,
            config.method("Containing"): to_have_containing,
            config.method("Matching"): to_have_matching,
        }

    return mixin
