"""
Source Context Resolution

Finds the user's call sites on the stack and renders the surrounding
source lines for failure messages.

Usage:
    from encore.context import capture_origin, get_source_context, format_source_context

    expect_origin = capture_origin()
    ...
    matcher_origin = capture_origin()
    ctx = get_source_context(expect_origin, matcher_origin)
    if ctx:
        print(format_source_context(ctx))
"""

from .origin import Origin, format_origin
from .source import (
    SourceContext,
    capture_origin,
    clear_source_cache,
    format_source_context,
    get_source_context,
    is_internal_path,
    register_internal_path,
)
from .stack import StackFrame, capture_stack, is_user_path, parse_stack, parse_stack_frame

__all__ = [
    # Origin
    "Origin",
    "format_origin",
    # Stack
    "StackFrame",
    "capture_stack",
    "parse_stack",
    "parse_stack_frame",
    "is_user_path",
    # Source context
    "SourceContext",
    "capture_origin",
    "get_source_context",
    "format_source_context",
    "clear_source_cache",
    "is_internal_path",
    "register_internal_path",
]
