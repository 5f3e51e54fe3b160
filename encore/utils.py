"""
Small helpers shared by the mixins and the wiring modules.
"""

from __future__ import annotations

import re
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class _Undefined:
    """Marker for an absent value, distinct from None."""

    __slots__ = ()

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


def xor(a: bool, b: bool) -> bool:
    """Exclusive or of two booleans."""
    return a != b


def holds(predicate: Callable[[], Any]) -> bool:
    """Evaluate a predicate; TypeError and ValueError mean it does not hold."""
    try:
        return bool(predicate())
    except (TypeError, ValueError):
        return False


def describe_error(err: BaseException) -> str:
    """Text of an exception, falling back to its type name when empty."""
    return str(err) or type(err).__name__


_WORD_SEPARATORS = re.compile(r"[_\-\s]+")


def to_pascal_case(value: str) -> str:
    """
    Convert a value name into the PascalCase fragment of method names.

    Examples:
        >>> to_pascal_case("status")
        'Status'
        >>> to_pascal_case("status text")
        'StatusText'
        >>> to_pascal_case("row_COUNT")
        'RowCount'
        >>> to_pascal_case("rowCount")
        'RowCount'
    """
    if not value:
        return value

    words = _WORD_SEPARATORS.split(value)
    if len(words) == 1:
        return value[0].upper() + value[1:]

    return "".join(word[:1].upper() + word[1:].lower() for word in words)


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_snake_case(name: str) -> str:
    """
    Convert a generated camelCase method name into its snake_case alias.

    Examples:
        >>> to_snake_case("toHaveStatusTextContaining")
        'to_have_status_text_containing'
        >>> to_snake_case("toHaveValueNaN")
        'to_have_value_nan'
    """
    name = name.replace("NaN", "Nan")
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def ensure_non_nullish(value: T | None, value_name: str) -> T:
    """
    Return value, or fail naming the missing field.

    Wiring modules wrap getters with this so that a field missing on a
    particular result variant fails with a readable message.

    Raises:
        ValueError: If value is None or UNDEFINED
    """
    if value is None or value is UNDEFINED:
        raise ValueError(f"Expected {value_name} to exist, but got {value!r}")
    return value


def catch_error(fn: Callable[[], Any]) -> BaseException:
    """
    Run fn and return the exception it raises.

    Raises:
        AssertionError: If fn returns normally
    """
    try:
        fn()
    except Exception as e:
        return e
    raise AssertionError("Expected function to throw an error, but it did not throw")
