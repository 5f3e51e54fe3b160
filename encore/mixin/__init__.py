"""
Capability Mixins

Each factory adds a family of assertion methods for one field of a value.
``define_expectation`` folds them into a chainable Expectation.

Usage:
    from encore.mixin import (
        MixinConfig,
        create_number_value_mixin,
        create_ok_mixin,
        define_expectation,
    )

    def expect_result(result):
        def factory(negate, origin):
            return [
                create_ok_mixin(lambda: result.ok, negate,
                                MixinConfig("result", expect_origin=origin, subject=result)),
                create_number_value_mixin(lambda: result.score, negate,
                                          MixinConfig("score", expect_origin=origin, subject=result)),
            ]
        return define_expectation(factory)

    expect_result(result).toBeOk().toHaveScoreGreaterThan(90)
"""

from .array import create_array_value_mixin
from .boolean import create_boolean_value_mixin
from .define import Expectation, NegationState, define_expectation
from .nullish import create_nullish_value_mixin
from .number import create_number_value_mixin, is_close_to
from .object import create_object_value_mixin
from .ok import create_ok_mixin
from .one_of import create_one_of_value_mixin
from .string import create_string_value_mixin
from .types import Getter, Methods, Mixin, MixinConfig, Negate
from .value import create_value_mixin

__all__ = [
    # Builder
    "define_expectation",
    "Expectation",
    "NegationState",
    # Types
    "MixinConfig",
    "Mixin",
    "Methods",
    "Getter",
    "Negate",
    # Families
    "create_value_mixin",
    "create_string_value_mixin",
    "create_number_value_mixin",
    "create_array_value_mixin",
    "create_object_value_mixin",
    "create_boolean_value_mixin",
    "create_nullish_value_mixin",
    "create_one_of_value_mixin",
    "create_ok_mixin",
    # Helpers
    "is_close_to",
]
