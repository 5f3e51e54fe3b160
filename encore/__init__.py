"""
Encore - Fluent Expectations with Readable Failures

This package builds chainable assertion objects from capability mixins and
renders failures with diffs, subject dumps and source context.

Subpackages:
    - mixin: Capability mixins and the expectation builder
    - diff: Pretty-printing, comparison and line diffs
    - context: Call-site capture and source context
    - scenarios: Scenario file loading

Usage:
    from encore import expect

    expect(0.1 + 0.2).toHaveValueCloseTo(0.3)
    expect({"id": 1, "tags": ["a"]}, "user").toHaveUserMatching({"id": 1})
    expect("hello").not_.toHaveValueContaining("bye")

    # Field-aware expectations for your own result types
    from encore import MixinConfig, define_expectation, create_ok_mixin

    def expect_job(job):
        return define_expectation(lambda negate, origin: [
            create_ok_mixin(lambda: job.ok, negate,
                            MixinConfig("job", expect_origin=origin, subject=job)),
        ])
"""

__version__ = "0.1.0"

# Theme
from .theme import Theme, color_theme, default_theme, no_color_theme, remove_colors

# Errors
from .error import (
    DiffInfo,
    ExpectationError,
    create_expectation_error,
    format_failure,
    is_expectation_error,
)

# Config
from .config import (
    EngineConfig,
    ValidationError,
    ValidationResult,
    config_from_env,
    load_config,
    resolve_theme,
)

# Mixins
from .mixin import (
    Expectation,
    MixinConfig,
    create_array_value_mixin,
    create_boolean_value_mixin,
    create_nullish_value_mixin,
    create_number_value_mixin,
    create_object_value_mixin,
    create_ok_mixin,
    create_one_of_value_mixin,
    create_string_value_mixin,
    create_value_mixin,
    define_expectation,
)

# Front door
from .expect import expect

# Diff
from .diff import ANY, format_diff, format_value, inspect_value

# Scenarios
from .scenarios import load_scenarios

# Utilities
from .utils import UNDEFINED, catch_error, ensure_non_nullish

__all__ = [
    # Package info
    "__version__",
    # Front door
    "expect",
    # Builder
    "define_expectation",
    "Expectation",
    "MixinConfig",
    # Mixin factories
    "create_value_mixin",
    "create_string_value_mixin",
    "create_number_value_mixin",
    "create_array_value_mixin",
    "create_object_value_mixin",
    "create_boolean_value_mixin",
    "create_nullish_value_mixin",
    "create_one_of_value_mixin",
    "create_ok_mixin",
    # Errors
    "ExpectationError",
    "DiffInfo",
    "create_expectation_error",
    "is_expectation_error",
    "format_failure",
    # Theme
    "Theme",
    "color_theme",
    "no_color_theme",
    "default_theme",
    "remove_colors",
    # Config
    "EngineConfig",
    "ValidationResult",
    "ValidationError",
    "load_config",
    "config_from_env",
    "resolve_theme",
    # Diff
    "ANY",
    "format_diff",
    "format_value",
    "inspect_value",
    # Scenarios
    "load_scenarios",
    # Utilities
    "UNDEFINED",
    "catch_error",
    "ensure_non_nullish",
]
