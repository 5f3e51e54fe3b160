"""
Number mixin: NaN checks, ordering and approximate equality.
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any

from ..utils import holds, xor
from .types import Getter, Mixin, MixinConfig, Negate


def is_nan(value: Any) -> bool:
    """Whether value is a NaN of any numeric type (float, complex, Decimal)."""
    if isinstance(value, Decimal):
        return value.is_nan()
    if not isinstance(value, numbers.Number) or isinstance(value, bool):
        return False
    # NaN is the only value not equal to itself
    return value != value


def is_close_to(value: Any, expected: Any, digits: int = 2) -> bool:
    """
    Whether value rounds to expected at ``digits`` decimal places.

    Equal infinities are close; NaN is never close to anything.
    """
    if value == expected:
        return True
    return abs(value - expected) < 10 ** -digits / 2


def create_number_value_mixin(getter: Getter, negate: Negate, config: MixinConfig) -> Mixin:
    """
    Create the number mixin for one field.

    Adds ``toHave{Base}NaN``, ``GreaterThan``, ``GreaterThanOrEqual``,
    ``LessThan``, ``LessThanOrEqual`` and ``CloseTo``. Comparing against a
    non-number (e.g. a string) fails the check rather than raising TypeError.
    """
    name = config.value_name
    show = config.show

    def comparison(verb: str, predicate):
        def check(this, expected: Any):
            is_negated = negate()
            value = getter()
            if not xor(is_negated, holds(lambda: predicate(value, expected))):
                raise config.error(
                    f"Expected {name} to not be {verb} {show(expected)}, but got {show(value)}"
                    if is_negated
                    else f"Expected {name} to be {verb} {show(expected)}, but got {show(value)}"
                )
            return this

        return check

    def to_have_nan(this):
        is_negated = negate()
        value = getter()
        if not xor(is_negated, holds(lambda: is_nan(value))):
            raise config.error(
                f"Expected {name} to not be NaN, but got {show(value)}"
                if is_negated
                else f"Expected {name} to be NaN, but got {show(value)}"
            )
        return this

    def to_have_close_to(this, expected: Any, digits: int = 2):
        is_negated = negate()
        value = getter()
        if not xor(is_negated, holds(lambda: is_close_to(value, expected, digits))):
            raise config.error(
                f"Expected {name} to not be close to {show(expected)} (within {digits} digits), but got {show(value)}"
                if is_negated
                else f"Expected {name} to be close to {show(expected)} (within {digits} digits), but got {show(value)}"
            )
        return this

    def mixin(base):
        return {
            **base,
            config.method("NaN"): to_have_nan,
            config.method("GreaterThan"): comparison("greater than", lambda a, b: a > b),
            config.method("GreaterThanOrEqual"): comparison(
                "greater than or equal to", lambda a, b: a >= b
            ),
            config.method("LessThan"): comparison("less than", lambda a, b: a < b),
            config.method("LessThanOrEqual"): comparison(
                "less than or equal to", lambda a, b: a <= b
            ),
            config.method("CloseTo"): to_have_close_to,
        }

    return mixin
