"""
Engine configuration.

Settings can come from a YAML file:

    theme: none            # auto | color | none
    context_lines: 2
    ellipsis_threshold: 5
    max_value_length: 120

or from the environment (``ENCORE_THEME``, ``NO_COLOR``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .context.source import CONTEXT_LINES, ELLIPSIS_THRESHOLD
from .diff.inspect import MAX_LENGTH
from .theme import THEMES, Theme, default_theme, no_color_theme


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "context_lines"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {self.value!r}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of config validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Config validation passed"
        lines = [f"Config validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Config Model
# ─────────────────────────────────────────────────────────────────────────────

THEME_CHOICES = ("auto", *sorted(THEMES))


@dataclass
class EngineConfig:
    """
    Rendering settings for failure messages.

    Attributes:
        theme: "auto" (environment decides), "color" or "none"
        context_lines: Source lines shown around each call site
        ellipsis_threshold: Line distance beyond which the context window is split
        max_value_length: Truncation length of values inside messages
    """
    theme: str = "auto"
    context_lines: int = CONTEXT_LINES
    ellipsis_threshold: int = ELLIPSIS_THRESHOLD
    max_value_length: int = MAX_LENGTH


_INT_FIELDS = {
    "context_lines": 0,
    "ellipsis_threshold": 0,
    "max_value_length": 4,
}
KNOWN_FIELDS = {"theme", *_INT_FIELDS}


def validate_config(data: dict[str, Any]) -> ValidationResult:
    """Check field names, types and ranges of a raw config mapping."""
    result = ValidationResult()

    for key in sorted(set(data) - KNOWN_FIELDS, key=str):
        result.add_error(
            str(key),
            f"Unknown config field '{key}'",
            suggestion=f"Valid fields are: {', '.join(sorted(KNOWN_FIELDS))}"
        )

    if "theme" in data and data["theme"] not in THEME_CHOICES:
        result.add_error(
            "theme",
            "Invalid theme",
            value=data["theme"],
            suggestion=f"Use one of: {', '.join(THEME_CHOICES)}"
        )

    for name, minimum in _INT_FIELDS.items():
        if name not in data:
            continue
        value = data[name]
        # bool is an int subclass; reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool):
            result.add_error(name, "Must be an integer", value=value)
        elif value < minimum:
            result.add_error(name, f"Must be >= {minimum}", value=value)

    return result


def load_config(path: str | Path) -> tuple[EngineConfig | None, ValidationResult]:
    """
    Load and validate engine settings from a YAML file.

    Args:
        path: Path to the YAML config file

    Returns:
        Tuple of (EngineConfig or None, ValidationResult)
        If validation fails, EngineConfig will be None.

    Example:
        config, result = load_config("encore.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
    """
    path = Path(path)

    if not path.exists():
        result = ValidationResult()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            str(path),
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    # An empty file means "all defaults"
    if data is None:
        data = {}

    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            str(path),
            "File must contain a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    result = validate_config(data)
    if not result.is_valid:
        return None, result

    return EngineConfig(**data), result


def config_from_env() -> EngineConfig:
    """Build settings from ``ENCORE_THEME`` and ``NO_COLOR``."""
    name = os.environ.get("ENCORE_THEME", "").strip().lower()
    if name in THEME_CHOICES:
        return EngineConfig(theme=name)
    if os.environ.get("NO_COLOR"):
        return EngineConfig(theme="none")
    return EngineConfig()


def resolve_theme(config: EngineConfig | None) -> Theme:
    """Map a config's theme name to a Theme ("auto" asks the environment)."""
    if config is None or config.theme == "auto":
        return default_theme()
    return THEMES.get(config.theme, no_color_theme)
