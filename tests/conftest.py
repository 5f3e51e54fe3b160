"""Pytest configuration and fixtures."""

import logging
import textwrap
from pathlib import Path

import pytest

from encore.context import clear_source_cache
from encore.mixin import MixinConfig, define_expectation


@pytest.fixture(autouse=True)
def plain_theme(monkeypatch):
    """Render failures without ANSI codes unless a test asks for colour."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("ENCORE_THEME", "none")


@pytest.fixture(autouse=True)
def fresh_source_cache():
    """Source files written by one test must not leak into another."""
    clear_source_cache()
    yield
    clear_source_cache()


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Drop handlers tests attach to encore loggers."""
    yield
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("encore"):
            logging.getLogger(name).handlers.clear()


@pytest.fixture()
def build():
    """
    Build an expectation from a single mixin family.

    Usage:
        exp = build(create_number_value_mixin, 95, "score")
        exp.toHaveScoreGreaterThan(90)
    """

    def _build(create, value, value_name="value", **config):
        def factory(negate, origin):
            cfg = MixinConfig(value_name, expect_origin=origin, **config)
            return [create(lambda: value, negate, cfg)]

        return define_expectation(factory)

    return _build


@pytest.fixture()
def write_file(tmp_path):
    """Write dedented text to a file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        p = tmp_path / name
        p.write_text(textwrap.dedent(content), encoding="utf-8")
        return p

    return _write
