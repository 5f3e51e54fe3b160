#!/usr/bin/env python3
"""
Encore CLI - Expectation Engine Tooling

Usage:
    encore scenarios <file>... [--verbose]
    encore config <encore.yaml>
    encore info
    encore --version
"""

import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from . import __version__
from .config import EngineConfig, config_from_env, load_config
from .error import ExpectationError
from .mixin import MixinConfig, create_object_value_mixin, define_expectation
from .scenarios import load_scenarios

app = typer.Typer(
    name="encore",
    help="🎯 Encore - Fluent expectations with readable failures",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"🎯 Encore v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
):
    """
    🎯 Encore - Fluent expectations with readable failures
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _describe_steps(scenario) -> str:
    steps = scenario.get("steps")
    if isinstance(steps, list):
        return str(len(steps))
    return "-"


@app.command()
def scenarios(
    files: List[Path] = typer.Argument(
        ...,
        help="Scenario files (.yaml, .yml or .py)",
    ),
):
    """
    List the scenarios defined in the given files.

    Files that fail to load are reported and skipped.
    """
    failures: list[tuple[Path, Exception]] = []
    table = Table(title="Scenarios")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("File", style="magenta")
    table.add_column("Tags")
    table.add_column("Steps", justify="right")

    count = 0
    for path in files:
        loaded = load_scenarios([path], on_import_error=lambda p, e: failures.append((p, e)))
        for scenario in loaded:
            count += 1
            tags = scenario.get("tags") or []
            table.add_row(
                str(count),
                str(scenario.get("name", "(unnamed)")),
                path.name,
                ", ".join(str(t) for t in tags) if isinstance(tags, list) else str(tags),
                _describe_steps(scenario),
            )

    console.print()
    console.print(table)

    for path, err in failures:
        console.print(
            f"[red]❌ Failed to load[/red] {escape(str(path))}: {escape(str(err))}",
            soft_wrap=True,
        )

    console.print(f"\n{count} scenario(s) from {len(files) - len(failures)} file(s)")
    raise typer.Exit(code=1 if failures else 0)


@app.command()
def config(
    config_file: Path = typer.Argument(
        ...,
        help="Path to the engine config YAML file",
    ),
):
    """
    Validate an engine config file and show the effective settings.
    """
    console.print(f"\n📄 Validating: {config_file}", soft_wrap=True)

    settings, validation = load_config(config_file)

    if not validation.is_valid:
        console.print("\n[red]❌ Validation failed:[/red]")
        console.print(str(validation), markup=False, soft_wrap=True)
        raise typer.Exit(code=1)

    table = Table(title="Settings")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_column("Default", style="dim")

    defaults = EngineConfig()
    for field_name in ("theme", "context_lines", "ellipsis_threshold", "max_value_length"):
        table.add_row(
            field_name,
            str(getattr(settings, field_name)),
            str(getattr(defaults, field_name)),
        )

    console.print("\n[green]✅ Valid config[/green]")
    console.print()
    console.print(table)


def _demo_failure() -> str:
    response = {"status": 404, "body": b"Not Found", "headers": {"content-type": "text/plain"}}
    settings = config_from_env()

    # Without an expect_origin the message carries no source context
    def factory(negate, origin):
        config = MixinConfig("response", subject=response, settings=settings)
        return [create_object_value_mixin(lambda: response, negate, config)]

    try:
        define_expectation(factory).toHaveResponseMatching({"status": 200})
    except ExpectationError as e:
        return str(e)
    return ""


@app.command()
def info():
    """
    Show information about Encore.
    """
    console.print(f"""
🎯 [bold]Encore[/bold] v{__version__}

Fluent expectations with readable failures

[bold]Features:[/bold]
  • Chainable expectations composed from capability mixins
  • Call-site aware negation with [cyan].not_[/cyan]
  • Line diffs, subject dumps and source context in failures
  • YAML and Python scenario files

[bold]Quick Start:[/bold]
  from encore import expect
  expect(response, "response").toHaveResponseProperty("status", 200)

[bold]Example failure:[/bold]
""")
    console.print(Text.from_ansi(_demo_failure()))


if __name__ == "__main__":
    app()
