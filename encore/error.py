"""
Expectation failures.

``create_expectation_error`` assembles the full failure message:

    Expected status to be 200, but got 404        <- bold, failure colour

    Diff (-Actual / +Expected):                   <- when a diff applies

    Subject                                       <- when a subject is known

      {
        status: 404,
      }

    Context (tests/test_api.py:10:5)              <- when both call sites
                                                     are in one readable file
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .context import capture_origin, format_source_context, get_source_context
from .context.source import CONTEXT_LINES, ELLIPSIS_THRESHOLD
from .diff import format_diff, inspect_value, is_primitive
from .theme import Theme, default_theme
from .utils import UNDEFINED

if TYPE_CHECKING:
    from .context import Origin

ERROR_NAME = "ExpectationError"


class ExpectationError(AssertionError):
    """
    Raised when an expectation does not hold.

    Subclasses AssertionError so test runners report it as a failure rather
    than an error. ``name`` identifies the kind after the exception has been
    reduced to plain ``name``/``message`` strings (e.g. across processes).
    """

    name = ERROR_NAME

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        """Reduce to the strings that survive serialization."""
        return {"name": self.name, "message": self.message}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ExpectationError:
        """Rebuild from ``to_dict`` output."""
        return cls(str(data.get("message", "")))


def is_expectation_error(err: Any) -> bool:
    """
    Check whether err is an expectation failure.

    Accepts ExpectationError instances, any exception whose ``name``
    attribute or class name is "ExpectationError", and serialized errors
    (mappings with a "name" key).
    """
    if isinstance(err, ExpectationError):
        return True
    if isinstance(err, Mapping):
        return err.get("name") == ERROR_NAME
    if isinstance(err, BaseException):
        return getattr(err, "name", None) == ERROR_NAME or type(err).__name__ == ERROR_NAME
    return False


def format_failure(err: Any) -> str:
    """
    Render an error for a report.

    Expectation failures already carry a complete message, so it is shown
    as-is; other errors are prefixed with their type name.
    """
    if isinstance(err, Mapping):
        message = str(err.get("message", ""))
        return message if is_expectation_error(err) else f"{err.get('name', 'Error')}: {message}"
    if is_expectation_error(err):
        return str(err)
    return f"{type(err).__name__}: {err}"


@dataclass(frozen=True)
class DiffInfo:
    """Values to diff in a failure message."""
    actual: Any
    expected: Any
    negated: bool = False


def render_binary(data: bytes) -> str:
    """
    Render bytes for a subject dump.

    Valid UTF-8 is shown as escaped text, anything else as hex bytes:
    ``[Utf8: Hello]`` or ``[Uint8Array: ff fe 00 01]``.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return f"[Uint8Array: {' '.join(f'{b:02x}' for b in data)}]"

    escaped = (
        text.replace("\\", "\\\\")
        .replace("[", "\\[")
        .replace("]", "\\]")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f"[Utf8: {escaped}]"


def create_expectation_error(
    message: str,
    expect_origin: Origin | None = None,
    theme: Theme | None = None,
    diff: DiffInfo | None = None,
    subject: Any = UNDEFINED,
    context_lines: int = CONTEXT_LINES,
    ellipsis_threshold: int = ELLIPSIS_THRESHOLD,
) -> ExpectationError:
    """
    Build an ExpectationError with all applicable message sections.

    Args:
        message: One-sentence description of the failure
        expect_origin: Where expect() was called, for the source context
        theme: Styling; defaults to the environment's theme
        diff: Actual/expected values to diff
        subject: The whole value under test, dumped when not UNDEFINED
        context_lines: Source lines shown around each call site
        ellipsis_threshold: Distance beyond which the context is split

    Returns:
        The error, ready to raise
    """
    theme = theme or default_theme()
    parts = [theme.title(theme.failure(message))]

    if diff is not None:
        section = build_diff_section(diff, theme)
        if section:
            parts.append(section)

    if subject is not UNDEFINED:
        parts.append(build_subject_section(subject, theme))

    matcher_origin = capture_origin()
    if expect_origin is not None and matcher_origin is not None:
        ctx = get_source_context(
            expect_origin,
            matcher_origin,
            ellipsis_threshold=ellipsis_threshold,
            context_lines=context_lines,
        )
        if ctx is not None:
            parts.append(format_source_context(ctx, cwd=os.getcwd(), theme=theme))

    return ExpectationError("\n\n".join(parts))


def build_diff_section(diff: DiffInfo, theme: Theme) -> str | None:
    """
    Render the diff section.

    A negated check has no meaningful "expected" value, so only the actual
    value is shown (and nothing at all for scalars, which the message
    already states).
    """
    if diff.negated:
        if is_primitive(diff.actual):
            return None
        lines = [theme.dim(f"    {line}") for line in inspect_value(diff.actual).split("\n")]
        return f"{theme.title('Actual:')}\n" + "\n".join(lines)

    rendered = format_diff(diff.actual, diff.expected, theme=theme)
    if not rendered:
        return None
    header = f"Diff ({theme.failure('-Actual')} / {theme.success('+Expected')}):"
    return f"{theme.title(header)}\n\n{rendered}"


def build_subject_section(subject: Any, theme: Theme) -> str:
    """Render the full subject, one element per line, dimmed and indented."""
    text = inspect_value(subject, bytes_renderer=render_binary)
    lines = [theme.dim(f"  {line}") for line in text.split("\n")]
    return f"{theme.title('Subject')}\n\n" + "\n".join(lines)
