"""
Boolean mixin: ``toHave{Base}Truthy`` and ``toHave{Base}Falsy``.
"""

from __future__ import annotations

from ..utils import holds, xor
from .types import Getter, Mixin, MixinConfig, Negate


def create_boolean_value_mixin(getter: Getter, negate: Negate, config: MixinConfig) -> Mixin:
    """Create the boolean mixin; truthiness follows Python's ``bool()``."""
    name = config.value_name
    show = config.show

    def to_have_truthy(this):
        is_negated = negate()
        value = getter()
        if not xor(is_negated, holds(lambda: bool(value))):
            raise config.error(
                f"Expected {name} to not be truthy, but got {show(value)}"
                if is_negated
                else f"Expected {name} to be truthy, but got {show(value)}"
            )
        return this

    def to_have_falsy(this):
        is_negated = negate()
        value = getter()
        if not xor(is_negated, holds(lambda: not value)):
            raise config.error(
                f"Expected {name} to not be falsy, but got {show(value)}"
                if is_negated
                else f"Expected {name} to be falsy, but got {show(value)}"
            )
        return this

    def mixin(base):
        return {
            **base,
            config.method("Truthy"): to_have_truthy,
            config.method("Falsy"): to_have_falsy,
        }

    return mixin
