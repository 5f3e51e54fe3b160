"""
Call stack capture and parsing.

Frames come either from the live interpreter stack (``capture_stack``) or
from stack trace text (``parse_stack``). Text parsing understands two
shapes:

    at someFunction (/path/to/file.ts:12:5)
    at /path/to/file.ts:12
    File "/path/to/file.py", line 12, in some_function

Frames whose path belongs to a runtime or remote scheme are flagged as
non-user code.
"""

from __future__ import annotations

import itertools
import re
import sys
from dataclasses import dataclass
from types import FrameType
from urllib.parse import unquote, urlparse

AT_FRAME_PATTERN = re.compile(r"^\s*at\s+(?:(.+?)\s+\()?(.+?):(\d+)(?::(\d+))?\)?$")
PYTHON_FRAME_PATTERN = re.compile(r'^\s*File "(.+?)", line (\d+)(?:, in (.+))?$')

NON_USER_PREFIXES = (
    "ext:",
    "deno:",
    "node:",
    "npm:",
    "bun:",
    "cloudflare:",
    "http://",
    "https://",
    # Python pseudo-files: <frozen importlib._bootstrap>, <string>, <stdin>
    "<",
)


@dataclass(frozen=True)
class StackFrame:
    """One parsed stack frame."""
    context: str
    path: str
    line: int | None = None
    column: int | None = None
    is_user_code: bool = True


def is_user_path(path: str) -> bool:
    """Whether a frame path points at user code rather than a runtime."""
    return not path.startswith(NON_USER_PREFIXES)


def normalize_path(path: str) -> str:
    """Turn ``file://`` URLs of user frames into filesystem paths."""
    if is_user_path(path) and path.startswith("file://"):
        return unquote(urlparse(path).path)
    return path


def parse_stack_frame(text: str) -> StackFrame | None:
    """Parse a single stack trace line, or return None if it is not a frame."""
    m = AT_FRAME_PATTERN.match(text)
    if m:
        context, path, line, column = m.groups()
        return _make_frame(context, path, int(line), int(column) if column else None)

    m = PYTHON_FRAME_PATTERN.match(text)
    if m:
        path, line, context = m.groups()
        return _make_frame(context, path, int(line), None)

    return None


def parse_stack(stack: str) -> list[StackFrame]:
    """Parse stack trace text into frames, skipping lines that are not frames."""
    frames = []
    for text in stack.splitlines():
        frame = parse_stack_frame(text)
        if frame is not None:
            frames.append(frame)
    return frames


def capture_stack() -> list[StackFrame]:
    """
    Capture the current call stack, innermost frame first.

    The frame of ``capture_stack`` itself is not included. Columns are
    1-based and point at the start of the executing call; interpreters
    without instruction positions (before 3.11) leave them unset.
    """
    frames = []
    frame = sys._getframe(1)
    while frame is not None:
        code = frame.f_code
        frames.append(_make_frame(
            code.co_name,
            code.co_filename,
            frame.f_lineno,
            _frame_column(frame),
        ))
        frame = frame.f_back
    return frames


def _frame_column(frame: FrameType) -> int | None:
    positions = getattr(frame.f_code, "co_positions", None)
    if positions is None or frame.f_lasti < 0:
        return None
    position = next(itertools.islice(positions(), frame.f_lasti // 2, None), None)
    if position is None or position[2] is None:
        return None
    return position[2] + 1


def _make_frame(
    context: str | None,
    path: str,
    line: int | None,
    column: int | None,
) -> StackFrame:
    return StackFrame(
        context=context or "<anonymous>",
        path=normalize_path(path),
        line=line,
        column=column,
        is_user_code=is_user_path(path),
    )
