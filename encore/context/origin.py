"""
Source locations.

An Origin points at a place in a source file. Expectations record the origin
of the ``expect(...)`` call; the error factory records the origin of the
failing matcher call and renders the lines between the two.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Origin:
    """A source location: file path with optional 1-based line and column."""
    path: str
    line: int | None = None
    column: int | None = None


def format_origin(
    origin: Origin | None,
    prefix: str = "",
    suffix: str = "",
    cwd: str | None = None,
) -> str:
    """
    Render an origin as ``path:line:column``.

    Args:
        origin: The location to render; None renders as an empty string
        prefix: Text placed before the location
        suffix: Text placed after the location
        cwd: When the path lives under this directory it is shown relative

    Returns:
        Formatted location string
    """
    if origin is None:
        return ""

    path = origin.path
    if cwd and _is_within(path, cwd):
        path = os.path.relpath(path, cwd)

    if origin.line is not None and origin.column is not None:
        return f"{prefix}{path}:{origin.line}:{origin.column}{suffix}"
    if origin.line is not None:
        return f"{prefix}{path}:{origin.line}{suffix}"
    return f"{prefix}{path}{suffix}"


def _is_within(path: str, directory: str) -> bool:
    """Whether path lies under directory, comparing whole path components."""
    try:
        common = os.path.commonpath([os.path.abspath(path), os.path.abspath(directory)])
    except ValueError:
        return False
    return common == os.path.abspath(directory)
