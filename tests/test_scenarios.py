"""Tests for scenario file loading."""

import logging

from encore.scenarios import ScenarioFileError, load_scenarios


def test_file_order_then_list_order(write_file):
    single = write_file("single.yaml", """\
        name: first
        steps: [a]
    """)
    many = write_file("many.yaml", """\
        - name: second
        - name: third
    """)
    scenarios = load_scenarios([single, many])
    assert [s["name"] for s in scenarios] == ["first", "second", "third"]


def test_python_module_default_export(write_file):
    module = write_file("checkout_scenarios.py", """\
        from dataclasses import dataclass


        @dataclass
        class Step:
            name: str


        default = [
            {"name": "add to cart", "steps": [Step("add")]},
            {"name": "pay"},
        ]
    """)
    single = write_file("smoke.yml", "name: smoke\n")
    scenarios = load_scenarios([module, single])
    assert [s["name"] for s in scenarios] == ["add to cart", "pay", "smoke"]
    assert scenarios[0]["steps"][0].name == "add"


def test_module_without_default_yields_nothing(write_file):
    module = write_file("empty_scenarios.py", "x = 1\n")
    assert load_scenarios([module]) == []


def test_non_mapping_items_are_skipped(write_file):
    path = write_file("mixed.yaml", """\
        - name: kept
        - just a string
        - 42
    """)
    assert load_scenarios([path]) == [{"name": "kept"}]


def test_scalar_file_yields_nothing(write_file):
    assert load_scenarios([write_file("scalar.yaml", "hello\n")]) == []


def test_import_errors_are_reported_and_skipped(write_file, caplog):
    broken_yaml = write_file("broken.yaml", "name: [unclosed\n")
    broken_py = write_file("broken.py", "raise RuntimeError('bad module')\n")
    unsupported = write_file("notes.txt", "name: x\n")
    good = write_file("good.yaml", "name: good\n")

    errors = []
    with caplog.at_level(logging.WARNING, logger="encore.scenarios.loader"):
        scenarios = load_scenarios(
            [broken_yaml, broken_py, unsupported, good],
            on_import_error=lambda path, err: errors.append((path.name, err)),
        )

    assert [s["name"] for s in scenarios] == ["good"]
    assert [name for name, _ in errors] == ["broken.yaml", "broken.py", "notes.txt"]
    assert isinstance(errors[0][1], ScenarioFileError)
    assert isinstance(errors[1][1], RuntimeError)
    assert "Unsupported scenario file type" in str(errors[2][1])
    assert "Failed to load scenario file" in caplog.text


def test_missing_files_are_reported(tmp_path):
    errors = []
    load_scenarios(
        [tmp_path / "gone.yaml", tmp_path / "gone.py"],
        on_import_error=lambda path, err: errors.append(err),
    )
    assert len(errors) == 2


def test_errors_without_handler_do_not_stop_loading(write_file):
    broken = write_file("broken.yaml", ": :\n  - [")
    good = write_file("good.yaml", "name: good\n")
    assert load_scenarios([broken, good]) == [{"name": "good"}]
