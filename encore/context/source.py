"""
Source context for failure messages.

Locates the user's call sites on the stack and renders a numbered window of
source lines around them:

    Context (tests/test_api.py:12:5)

      11│     response = fetch()
      12│     expect(response)
      13│         .toHaveStatus(200)
        │         ^
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .origin import Origin, format_origin
from .stack import capture_stack

if TYPE_CHECKING:
    from ..theme import Theme

logger = logging.getLogger(__name__)

CONTEXT_LINES = 1
ELLIPSIS_THRESHOLD = 5
SEPARATOR = "│"
ELLIPSIS_SEPARATOR = "┆"

# Frames under these directories are the engine's own, not the caller's.
_internal_roots: list[str] = [str(Path(__file__).resolve().parent.parent)]

_file_cache: dict[str, list[str]] = {}


@dataclass(frozen=True)
class SourceContext:
    """
    A rendered window of source lines between two call sites.

    Attributes:
        start: Origin of the expect() call
        end: Origin of the failing matcher call
        content: Formatted lines (numbered lines, caret marker, ellipsis)
        has_ellipsis: Whether lines between the two sites were elided
        marker_row: Index in content of the caret row under the matcher line
    """
    start: Origin
    end: Origin
    content: tuple[str, ...]
    has_ellipsis: bool
    marker_row: int | None = None


def register_internal_path(path: str | os.PathLike[str]) -> None:
    """
    Treat frames under ``path`` as library code when locating call sites.

    Wiring modules that build expectations on top of the engine register
    their package directory so failures point at the test, not at them.
    """
    root = str(Path(path).resolve())
    if root not in _internal_roots:
        _internal_roots.append(root)


def is_internal_path(path: str) -> bool:
    """Whether a frame path lies inside the engine (or a registered library)."""
    name = os.path.basename(path)
    if name.startswith("test_") or name.endswith("_test.py"):
        return False
    return any(
        path == root or path.startswith(root + os.sep)
        for root in _internal_roots
    )


def capture_origin() -> Origin | None:
    """
    Return the innermost user call site on the current stack.

    Returns:
        Origin of the first user frame outside the engine, or None
    """
    for frame in capture_stack():
        if frame.is_user_code and not is_internal_path(frame.path):
            return Origin(path=frame.path, line=frame.line, column=frame.column)
    return None


def read_source_lines(path: str) -> list[str] | None:
    """Read a source file as lines, caching successful reads."""
    if path in _file_cache:
        return _file_cache[path]
    try:
        lines = Path(path).read_text(encoding="utf-8").split("\n")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Source context unavailable for {path}: {e}")
        return None
    _file_cache[path] = lines
    return lines


def clear_source_cache() -> None:
    """Forget cached source files."""
    _file_cache.clear()


def get_source_context(
    start: Origin,
    end: Origin,
    ellipsis_threshold: int = ELLIPSIS_THRESHOLD,
    context_lines: int = CONTEXT_LINES,
) -> SourceContext | None:
    """
    Build the source window spanning two call sites in the same file.

    Args:
        start: Origin of the expect() call
        end: Origin of the matcher call (gets the caret marker)
        ellipsis_threshold: Sites further apart than this many lines are
            shown as two separate windows joined by an ellipsis
        context_lines: Lines shown before and after each site

    Returns:
        SourceContext, or None when the sites are in different files, lack
        line numbers, or the file cannot be read
    """
    if start.path != end.path:
        return None
    if start.line is None or end.line is None:
        return None

    lines = read_source_lines(start.path)
    if lines is None:
        return None

    start_line = start.line
    end_line = end.line
    has_ellipsis = end_line - start_line > ellipsis_threshold

    start_range_begin = max(1, start_line - context_lines)
    start_range_end = start_line + context_lines
    end_range_begin = end_line - context_lines
    end_range_end = min(len(lines), end_line + context_lines)

    width = len(str(end_range_end))
    content: list[str] = []
    marker_row: int | None = None

    def append_lines(first: int, last: int) -> None:
        nonlocal marker_row
        for number in range(first, min(last, len(lines)) + 1):
            content.append(_format_line(number, lines[number - 1], width))
            if number == end_line:
                marker_row = len(content)
                content.append(_format_marker(end.column, width))

    if has_ellipsis:
        append_lines(start_range_begin, start_range_end)
        content.append(" " * width + ELLIPSIS_SEPARATOR)
        append_lines(max(end_range_begin, start_range_end + 1), end_range_end)
    else:
        append_lines(start_range_begin, end_range_end)

    return SourceContext(
        start=start,
        end=end,
        content=tuple(content),
        has_ellipsis=has_ellipsis,
        marker_row=marker_row,
    )


def format_source_context(
    ctx: SourceContext,
    cwd: str | None = None,
    theme: Theme | None = None,
) -> str:
    """
    Render a SourceContext with a header naming the expect() location.

    Without a theme the output is plain text; with one, the header is bold
    and dim, line text is dim and the caret uses the failure style.
    """
    location = format_origin(ctx.start, cwd=cwd)

    if theme is None:
        header = f"Context ({location})"
        body = "\n".join(f"  {line}" for line in ctx.content)
        return f"{header}\n\n{body}"

    header = f"{theme.title('Context')} {theme.dim(f'({location})')}"
    rendered = []
    for row, line in enumerate(ctx.content):
        if row == ctx.marker_row:
            caret = line.rindex("^")
            rendered.append(f"  {theme.dim(line[:caret])}{theme.failure('^')}")
        else:
            rendered.append(f"  {theme.dim(line)}")
    return f"{header}\n\n" + "\n".join(rendered)


def _format_line(number: int, text: str, width: int) -> str:
    return f"{str(number).rjust(width)}{SEPARATOR} {text}"


def _format_marker(column: int | None, width: int) -> str:
    offset = column - 1 if column is not None else 0
    return f"{' ' * width}{SEPARATOR} {' ' * offset}^"
