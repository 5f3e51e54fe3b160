from typer.testing import CliRunner

from encore import __version__
from encore.cli import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"Encore v{__version__}" in result.output


def test_scenarios_lists_scenarios_in_order(write_file):
    single = write_file("single.yaml", "name: login\ntags: [smoke]\nsteps: [a, b]\n")
    many = write_file("many.yaml", "- name: search\n- name: logout\n")
    result = runner.invoke(app, ["scenarios", str(single), str(many)])
    assert result.exit_code == 0
    output = result.output
    assert output.index("login") < output.index("search") < output.index("logout")
    assert "3 scenario(s) from 2 file(s)" in output


def test_scenarios_reports_failures(write_file):
    broken = write_file("broken.yaml", "name: [unclosed\n")
    result = runner.invoke(app, ["scenarios", str(broken)])
    assert result.exit_code == 1
    assert "Failed to load" in result.output


def test_config_valid(write_file):
    path = write_file("encore.yaml", "theme: none\ncontext_lines: 3\n")
    result = runner.invoke(app, ["config", str(path)])
    assert result.exit_code == 0
    assert "Valid config" in result.output
    assert "context_lines" in result.output


def test_config_invalid(write_file):
    path = write_file("encore.yaml", "theme: sepia\n")
    result = runner.invoke(app, ["config", str(path)])
    assert result.exit_code == 1
    assert "Invalid theme" in result.output


def test_config_missing_file(tmp_path):
    result = runner.invoke(app, ["config", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 1
    assert "File not found" in result.output


def test_config_missing_file_with_long_path(tmp_path):
    deep = tmp_path.joinpath(*["nested-directory"] * 8)
    result = runner.invoke(app, ["config", str(deep / "nope.yaml")])
    assert result.exit_code == 1
    assert "File not found" in result.output
    assert str(deep / "nope.yaml") in result.output


def test_scenarios_failure_with_long_path(tmp_path):
    deep = tmp_path.joinpath(*["nested-directory"] * 8)
    deep.mkdir(parents=True)
    broken = deep / "broken.yaml"
    broken.write_text("name: [unclosed\n", encoding="utf-8")
    result = runner.invoke(app, ["scenarios", str(broken)])
    assert result.exit_code == 1
    assert f"Failed to load {broken}" in result.output


def test_info_renders_example_failure():
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "Encore" in result.output
    assert "Expected response to match" in result.output
    assert "[Utf8: Not Found]" in result.output


def test_verbose_flag_is_accepted():
    result = runner.invoke(app, ["--verbose", "info"])
    assert result.exit_code == 0
