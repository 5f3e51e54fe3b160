"""
Generic expectations for plain Python values.

``expect(value)`` picks mixin families by the runtime type of value:

    value type              families (besides value, nullish, boolean, one-of)
    ─────────────────────   ──────────────────────────────────────────────────
    str                     string
    int / float / Decimal   number
    list / tuple / set      array
    mapping / object        object

Methods are named after ``value_name``; the default gives ``toHaveValue``,
``toHaveValueEqual``, ``toHaveValueGreaterThan`` and so on:

    expect(0.1 + 0.2).toHaveValueCloseTo(0.3)
    expect({"user": {"id": 1}}, "body").toHaveBodyProperty("user.id", 1)
    expect([1, 2]).not_.toHaveValueEmpty()
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Set
from typing import Any

from .config import EngineConfig
from .diff import is_primitive, is_sequence
from .mixin import (
    Expectation,
    MixinConfig,
    create_array_value_mixin,
    create_boolean_value_mixin,
    create_nullish_value_mixin,
    create_number_value_mixin,
    create_object_value_mixin,
    create_one_of_value_mixin,
    create_string_value_mixin,
    create_value_mixin,
    define_expectation,
)
from .theme import Theme
from .utils import UNDEFINED


def _families(value: Any) -> list:
    families = [
        create_value_mixin,
        create_nullish_value_mixin,
        create_boolean_value_mixin,
        create_one_of_value_mixin,
    ]
    if isinstance(value, str):
        families.append(create_string_value_mixin)
    elif isinstance(value, numbers.Number) and not isinstance(value, bool):
        families.append(create_number_value_mixin)
    elif is_sequence(value) or isinstance(value, Set):
        families.append(create_array_value_mixin)
    elif isinstance(value, Mapping) or not is_primitive(value):
        families.append(create_object_value_mixin)
    return families


def expect(
    value: Any,
    value_name: str = "value",
    *,
    method_base: str | None = None,
    subject: Any = UNDEFINED,
    theme: Theme | None = None,
    settings: EngineConfig | None = None,
) -> Expectation:
    """
    Create an expectation for any value.

    Args:
        value: The value under test
        value_name: Name used in messages and method names
        method_base: Override for the method name fragment
        subject: Value dumped in failure messages (nothing by default)
        theme: Styling; defaults to settings or the environment
        settings: Rendering settings

    Returns:
        Expectation with the families matching value's type
    """
    def factory(negate, origin):
        config = MixinConfig(
            value_name=value_name,
            method_base=method_base,
            expect_origin=origin,
            theme=theme,
            subject=subject,
            settings=settings,
        )
        return [create(lambda: value, negate, config) for create in _families(value)]

    return define_expectation(factory)
