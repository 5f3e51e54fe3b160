"""
Scenario file loader.

Scenario files are YAML documents or Python modules. A YAML file holds a
mapping (one scenario) or a list of mappings; a Python module exposes the
same shapes as its ``default`` attribute.
"""

from __future__ import annotations

import hashlib
import importlib.util
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Iterable

import yaml

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}
PYTHON_SUFFIXES = {".py"}

ImportErrorHandler = Callable[[Path, Exception], None]


class ScenarioFileError(Exception):
    """Raised when a scenario file cannot be read."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


def load_scenarios(
    files: Iterable[str | Path],
    on_import_error: ImportErrorHandler | None = None,
) -> list[Mapping[str, Any]]:
    """
    Load scenario definitions from files.

    Args:
        files: Scenario files, loaded in order
        on_import_error: Called with (path, error) for each file that fails
            to load; loading continues with the next file

    Returns:
        Scenarios in file order, then in list order within a file

    Example:
        scenarios = load_scenarios(
            ["smoke.yaml", "api.py"],
            on_import_error=lambda path, err: print(f"skipped {path}: {err}"),
        )
    """
    files = [Path(f) for f in files]
    logger.debug(f"Loading scenarios from {len(files)} file(s)")

    scenarios: list[Mapping[str, Any]] = []
    for path in files:
        try:
            exported = _read_export(path)
        except Exception as e:
            logger.warning(f"Failed to load scenario file {path}: {e}")
            if on_import_error is not None:
                on_import_error(path, e)
            continue

        if isinstance(exported, list):
            items = [item for item in exported if isinstance(item, Mapping)]
            if len(items) != len(exported):
                logger.debug(f"Skipped {len(exported) - len(items)} non-mapping item(s) in {path}")
            logger.debug(f"Loaded {len(items)} scenario(s) from {path}")
            scenarios.extend(items)
        elif isinstance(exported, Mapping):
            logger.debug(f"Loaded scenario '{exported.get('name', '?')}' from {path}")
            scenarios.append(exported)
        else:
            logger.debug(f"No scenarios in {path} (got {type(exported).__name__})")

    logger.debug(f"Loaded {len(scenarios)} scenario(s) in total")
    return scenarios


def _read_export(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        return _read_yaml(path)
    if suffix in PYTHON_SUFFIXES:
        return _read_module(path)
    raise ScenarioFileError(path, f"Unsupported scenario file type '{suffix or path.name}'")


def _read_yaml(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except OSError as e:
        raise ScenarioFileError(path, f"Cannot read file: {e}") from e
    except yaml.YAMLError as e:
        raise ScenarioFileError(path, f"Invalid YAML syntax: {e}") from e


def _read_module(path: Path) -> Any:
    if not path.is_file():
        raise ScenarioFileError(path, "File not found")

    digest = hashlib.sha1(str(path.resolve()).encode()).hexdigest()[:12]
    module_name = f"_encore_scenario_{path.stem}_{digest}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ScenarioFileError(path, "Cannot import module")

    module = importlib.util.module_from_spec(spec)
    # Registered before execution so dataclasses and pickling can find it
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        del sys.modules[module_name]
        raise

    return getattr(module, "default", None)
