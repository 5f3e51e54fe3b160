"""Tests for engine config loading and validation."""

import pytest

from encore.config import (
    EngineConfig,
    config_from_env,
    load_config,
    resolve_theme,
    validate_config,
)
from encore.theme import color_theme, no_color_theme


def test_load_config(write_file):
    path = write_file("encore.yaml", """\
        theme: none
        context_lines: 2
        max_value_length: 120
    """)
    config, result = load_config(path)
    assert result.is_valid
    assert config == EngineConfig(theme="none", context_lines=2, max_value_length=120)
    assert config.ellipsis_threshold == 5


def test_load_empty_config_gives_defaults(write_file):
    config, result = load_config(write_file("encore.yaml", ""))
    assert result.is_valid
    assert config == EngineConfig()


def test_missing_file(tmp_path):
    config, result = load_config(tmp_path / "nope.yaml")
    assert config is None
    assert not result.is_valid
    assert "File not found" in str(result)


def test_invalid_yaml(write_file):
    config, result = load_config(write_file("encore.yaml", "theme: [unclosed\n"))
    assert config is None
    assert "Invalid YAML syntax" in result.errors[0].message


def test_top_level_must_be_a_mapping(write_file):
    config, result = load_config(write_file("encore.yaml", "- theme\n"))
    assert config is None
    assert result.errors[0].value == "list"


@pytest.mark.parametrize(
    "data, path",
    [
        ({"theme": "sepia"}, "theme"),
        ({"context_lines": "2"}, "context_lines"),
        ({"context_lines": True}, "context_lines"),
        ({"context_lines": -1}, "context_lines"),
        ({"max_value_length": 2}, "max_value_length"),
        ({"colour": "none"}, "colour"),
    ],
)
def test_validation_errors(data, path):
    result = validate_config(data)
    assert not result.is_valid
    assert [e.path for e in result.errors] == [path]


def test_validation_result_str():
    result = validate_config({"theme": "sepia", "extra": 1})
    text = str(result)
    assert text.startswith("Config validation failed with 2 error(s)")
    assert "💡" in text
    assert str(validate_config({})) == "✅ Config validation passed"


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("ENCORE_THEME", "color")
    assert config_from_env().theme == "color"

    monkeypatch.delenv("ENCORE_THEME")
    monkeypatch.setenv("NO_COLOR", "1")
    assert config_from_env().theme == "none"

    monkeypatch.delenv("NO_COLOR")
    assert config_from_env() == EngineConfig()


def test_resolve_theme(monkeypatch):
    assert resolve_theme(EngineConfig(theme="color")) is color_theme
    assert resolve_theme(EngineConfig(theme="none")) is no_color_theme
    # "auto" and None defer to the environment (ENCORE_THEME=none here)
    assert resolve_theme(EngineConfig()) is no_color_theme
    assert resolve_theme(None) is no_color_theme
    monkeypatch.delenv("ENCORE_THEME")
    assert resolve_theme(None) is color_theme
