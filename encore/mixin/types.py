"""
Shared types for capability mixins.

A mixin takes the methods accumulated so far and returns them extended
with its own; the builder folds a list of mixins into one method table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping

from ..config import EngineConfig, resolve_theme
from ..diff.inspect import MAX_LENGTH, format_value
from ..error import DiffInfo, ExpectationError, create_expectation_error
from ..utils import UNDEFINED, to_pascal_case

if TYPE_CHECKING:
    from ..context import Origin
    from ..theme import Theme

Getter = Callable[[], Any]
Negate = Callable[[], bool]
Methods = Dict[str, Callable[..., Any]]
Mixin = Callable[[Mapping[str, Callable[..., Any]]], Methods]


@dataclass(frozen=True)
class MixinConfig:
    """
    Per-field configuration passed to every mixin factory.

    Attributes:
        value_name: Field name used in messages ("status", "row count")
        method_base: PascalCase fragment of method names; derived from
            value_name when None
        expect_origin: Call site of the enclosing expect(), for source context
        theme: Styling; None resolves from settings or the environment
        subject: Whole value under test, dumped in failure messages
        settings: Rendering settings (value truncation, context window)
    """
    value_name: str
    method_base: str | None = None
    expect_origin: Origin | None = None
    theme: Theme | None = None
    subject: Any = UNDEFINED
    settings: EngineConfig | None = None

    @property
    def base(self) -> str:
        if self.method_base is not None:
            return self.method_base
        return to_pascal_case(self.value_name)

    def method(self, suffix: str = "") -> str:
        """Generated method name, e.g. ``toHaveStatusGreaterThan``."""
        return f"toHave{self.base}{suffix}"

    def show(self, value: Any) -> str:
        """Render a value for a message."""
        max_length = self.settings.max_value_length if self.settings else MAX_LENGTH
        return format_value(value, max_length)

    def error(self, message: str, diff: DiffInfo | None = None) -> ExpectationError:
        """Build the failure for this field."""
        settings = self.settings or EngineConfig()
        return create_expectation_error(
            message,
            expect_origin=self.expect_origin,
            theme=self.theme or resolve_theme(self.settings),
            diff=diff,
            subject=self.subject,
            context_lines=settings.context_lines,
            ellipsis_threshold=settings.ellipsis_threshold,
        )
