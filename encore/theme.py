"""
Styling functions for failure messages.

A Theme is a bag of pure ``str -> str`` functions. The engine itself only
calls ``title``, ``failure``, ``success`` and ``dim``; the rest exist for
reporters built on top of it.

ANSI codes are produced by rich's Style renderer so the escape sequences
match what rich prints to a terminal.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Callable

from rich.color import ColorSystem
from rich.style import Style

ThemeFunction = Callable[[str], str]


@dataclass(frozen=True)
class Theme:
    """
    Style functions used when rendering messages.

    Attributes:
        success: Passing / expected values (green)
        failure: Failing / actual values (red)
        skip: Skipped items (yellow)
        dim: Secondary text such as context lines (gray)
        title: Headers (bold)
        info: Informational text (cyan)
        warning: Warnings (yellow)
        light_gray: Subdued emphasis
    """
    success: ThemeFunction
    failure: ThemeFunction
    skip: ThemeFunction
    dim: ThemeFunction
    title: ThemeFunction
    info: ThemeFunction
    warning: ThemeFunction
    light_gray: ThemeFunction


def _styler(definition: str) -> ThemeFunction:
    style = Style.parse(definition)

    def apply(text: str) -> str:
        return style.render(text, color_system=ColorSystem.EIGHT_BIT)

    return apply


def _identity(text: str) -> str:
    return text


color_theme = Theme(
    success=_styler("green"),
    failure=_styler("red"),
    skip=_styler("yellow"),
    dim=_styler("bright_black"),
    title=_styler("bold"),
    info=_styler("cyan"),
    warning=_styler("yellow"),
    light_gray=_styler("color(243)"),
)

no_color_theme = Theme(
    success=_identity,
    failure=_identity,
    skip=_identity,
    dim=_identity,
    title=_identity,
    info=_identity,
    warning=_identity,
    light_gray=_identity,
)

THEMES: dict[str, Theme] = {
    "color": color_theme,
    "none": no_color_theme,
}


def default_theme() -> Theme:
    """
    Pick the theme for the current environment.

    ``ENCORE_THEME`` ("color" or "none") wins; otherwise a non-empty
    ``NO_COLOR`` disables styling (https://no-color.org).
    """
    name = os.environ.get("ENCORE_THEME", "").strip().lower()
    if name in THEMES:
        return THEMES[name]
    if os.environ.get("NO_COLOR"):
        return no_color_theme
    return color_theme


ANSI_ESCAPE_SEQUENCE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def remove_colors(text: str) -> str:
    """Strip SGR escape sequences from text."""
    return ANSI_ESCAPE_SEQUENCE_PATTERN.sub("", text)
