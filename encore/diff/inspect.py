"""
Canonical pretty-printing of arbitrary values.

``inspect_value`` produces the deep, multi-line, insertion-ordered form used
by diffs and subject dumps. ``format_value`` produces the short one-line
form embedded in failure messages.

The multi-line form puts every element on its own line with a trailing
comma so that adding a key to a mapping only touches one line of a diff:

    {
      id: 1,
      tags: [
        'a',
      ],
      'content-type': 'json',
    }
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping, Set
from enum import Enum
from typing import Any, Callable

from ..utils import UNDEFINED

INDENT = "  "
MAX_LENGTH = 80

BytesRenderer = Callable[[bytes], str]


class _DiffAny:
    """Placeholder shown in an expected value where any value is accepted."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "[Any]"


ANY = _DiffAny()


def inspect_value(value: Any, bytes_renderer: BytesRenderer | None = None) -> str:
    """
    Render a value at unlimited depth, one element per line.

    Args:
        value: Any Python value
        bytes_renderer: Optional renderer for bytes-like values; defaults to repr

    Returns:
        Multi-line text. Cycles are shown as ``[Circular]``.
    """
    return _Printer(bytes_renderer).render(value, 0, set())


def format_value(value: Any, max_length: int = MAX_LENGTH) -> str:
    """
    Render a value on one line for use inside a sentence.

    Strings are shown without quotes; nested containers are abbreviated as
    ``[...]`` and ``{...}``; the result is truncated to ``max_length``.
    """
    if isinstance(value, str):
        text = value
    else:
        text = _compact(value, top=True)
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def _is_binary(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))


def _format_key(key: Any) -> str:
    if isinstance(key, str) and key.isidentifier():
        return key
    return repr(key)


def _format_scalar(value: Any) -> str:
    if value is None:
        return "None"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, float) and math.isnan(value):
        return "nan"
    return repr(value)


def _object_fields(value: Any) -> dict[str, Any] | None:
    """Public attributes of a plain object, or None for opaque values."""
    if isinstance(value, (Enum, BaseException)):
        return None
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if hasattr(value, "__dict__") and not isinstance(value, type) and not callable(value):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    return None


class _Printer:
    def __init__(self, bytes_renderer: BytesRenderer | None):
        self.bytes_renderer = bytes_renderer

    def render(self, value: Any, level: int, seen: set[int]) -> str:
        if _is_binary(value):
            if self.bytes_renderer is not None:
                return self.bytes_renderer(bytes(value))
            return repr(bytes(value)) if isinstance(value, memoryview) else repr(value)

        if isinstance(value, Mapping):
            opener = "{" if type(value) is dict else f"{type(value).__name__} {{"
            return self._block(
                value,
                opener,
                "}",
                [(f"{_format_key(k)}: ", v) for k, v in value.items()],
                level,
                seen,
            )

        if isinstance(value, (list, tuple)):
            if type(value) is list:
                opener, closer = "[", "]"
            elif type(value) is tuple:
                opener, closer = "(", ")"
            else:
                opener, closer = f"{type(value).__name__} [", "]"
            return self._block(value, opener, closer, [("", v) for v in value], level, seen)

        if isinstance(value, Set):
            items = sorted(value, key=_compact)
            opener = f"{type(value).__name__} {{"
            return self._block(value, opener, "}", [("", v) for v in items], level, seen)

        fields = _object_fields(value)
        if fields is not None:
            opener = f"{type(value).__name__} {{"
            return self._block(
                value,
                opener,
                "}",
                [(f"{_format_key(k)}: ", v) for k, v in fields.items()],
                level,
                seen,
            )

        return _format_scalar(value)

    def _block(
        self,
        container: Any,
        opener: str,
        closer: str,
        entries: list[tuple[str, Any]],
        level: int,
        seen: set[int],
    ) -> str:
        if id(container) in seen:
            return "[Circular]"
        if not entries:
            return opener + closer

        seen.add(id(container))
        pad = INDENT * (level + 1)
        lines = [opener]
        for prefix, item in entries:
            lines.append(f"{pad}{prefix}{self.render(item, level + 1, seen)},")
        lines.append(INDENT * level + closer)
        seen.discard(id(container))
        return "\n".join(lines)


def _compact(value: Any, top: bool = False) -> str:
    """One-line rendering; containers are only expanded at the top level."""
    if isinstance(value, str):
        return repr(value)

    if isinstance(value, Mapping):
        if not top:
            return "{...}" if value else "{}"
        if not value:
            return "{}"
        inner = ", ".join(f"{_format_key(k)}: {_compact(v)}" for k, v in value.items())
        return f"{{ {inner} }}"

    if isinstance(value, (list, tuple, Set)) and not _is_binary(value):
        if isinstance(value, Set):
            value = sorted(value, key=_compact)
        if not top:
            return "[...]" if value else "[]"
        return "[" + ", ".join(_compact(v) for v in value) + "]"

    if _is_binary(value):
        return repr(bytes(value))

    fields = _object_fields(value)
    if fields is not None:
        if not top:
            return f"{type(value).__name__} {{...}}"
        inner = ", ".join(f"{k}: {_compact(v)}" for k, v in fields.items())
        return f"{type(value).__name__} {{ {inner} }}" if inner else f"{type(value).__name__} {{}}"

    return _format_scalar(value)
