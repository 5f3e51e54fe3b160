"""
Expectation builder.

``define_expectation`` folds capability mixins into one chainable object
and owns its negation flag:

    exp = define_expectation(lambda negate, origin: [
        create_number_value_mixin(lambda: 95, negate, MixinConfig("score")),
    ])
    exp.toHaveScoreGreaterThan(90)
    exp.not_.toHaveScoreLessThan(50)

Every generated camelCase method is also reachable under its snake_case
alias (``exp.to_have_score_greater_than(90)``).
"""

from __future__ import annotations

import logging
import types
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Sequence

from ..context import capture_origin
from ..utils import to_snake_case
from .types import Methods, Mixin, Negate

if TYPE_CHECKING:
    from ..context import Origin

logger = logging.getLogger(__name__)

MixinFactory = Callable[[Negate, "Origin | None"], Sequence[Mixin]]


@dataclass
class NegationState:
    """Whether the next assertion call is negated."""
    next_negate: bool = False


class Expectation:
    """
    Chainable assertion object.

    Methods come from a name -> function table; each function takes the
    expectation as its first argument and returns it on success.

    ``not_`` flips negation for the next call and returns the same object,
    so ``exp.not_.not_.toBeOk()`` is a plain ``toBeOk()``.
    A ``.not_`` with no call after it stays armed for the next call.
    ``getattr(exp, "not")`` and ``hasattr(exp, "not")`` go through the same
    toggle, so looking up ``not`` by name arms negation too.
    """

    __slots__ = ("_methods", "_state")

    def __init__(self, methods: Methods, state: NegationState):
        self._methods = methods
        self._state = state

    @property
    def not_(self) -> Expectation:
        self._state.next_negate = not self._state.next_negate
        return self

    @property
    def method_names(self) -> list[str]:
        """Names of all available assertion methods, aliases included."""
        return sorted(self._methods)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        if name == "not":
            return self.not_
        try:
            fn = self._methods[name]
        except KeyError:
            raise AttributeError(f"Expectation has no method '{name}'") from None
        return types.MethodType(fn, self)

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *self._methods})

    def __repr__(self) -> str:
        return f"<Expectation methods={len(self._methods)}>"


def define_expectation(factory: MixinFactory) -> Expectation:
    """
    Build an Expectation from mixins.

    Args:
        factory: Called with the shared negation getter and the caller's
            origin; returns the mixins to apply, in order. A later mixin
            overrides an earlier one's method of the same name.

    Returns:
        The assembled Expectation
    """
    expect_origin = capture_origin()
    state = NegationState()

    def negate() -> bool:
        result = state.next_negate
        state.next_negate = False
        return result

    mixins = list(factory(negate, expect_origin))
    applied: Methods = {}
    for mixin in mixins:
        applied = mixin(applied)

    methods = dict(applied)
    for name, fn in applied.items():
        methods.setdefault(to_snake_case(name), fn)

    logger.debug(f"Defined expectation with {len(mixins)} mixins and {len(applied)} methods")
    return Expectation(methods, state)
