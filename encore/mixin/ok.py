"""
Ok mixin: ``toBeOk()`` over a success flag.
"""

from __future__ import annotations

from ..utils import xor
from .types import Getter, Mixin, MixinConfig, Negate


def create_ok_mixin(getter: Getter, negate: Negate, config: MixinConfig) -> Mixin:
    """Create the ok mixin; the method name is fixed regardless of ``method_base``."""
    name = config.value_name

    def to_be_ok(this):
        is_negated = negate()
        is_ok = bool(getter())
        if not xor(is_negated, is_ok):
            raise config.error(
                f"Expected {name} to not be ok, but it succeeded"
                if is_negated
                else f"Expected {name} to be ok, but it failed"
            )
        return this

    def mixin(base):
        return {**base, "toBeOk": to_be_ok}

    return mixin
