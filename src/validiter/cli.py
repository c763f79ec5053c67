"""CLI interface for validiter using Typer framework."""

import json as jsonlib
import math
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from validiter import __description__, __version__
from validiter.config import configure_logging, load_config
from validiter.consume import Tally
from validiter.grid import parse_lines
from validiter.outcome import Outcome

app = typer.Typer(
    name="validiter",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

VALID_FORMATS = ["table", "json"]


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"validiter version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """validiter - Lazy, composable validation for Python iterators."""


def _json_safe(value):
    """Replace non-finite floats, which JSON cannot represent, by their names."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_json_safe(item) for item in value]
    return value


def _describe(outcome: Outcome) -> str:
    if outcome.is_success:
        return ", ".join(f"{cell:g}" for cell in outcome.value)
    details = ", ".join(f"{name}={value!r}" for name, value in vars(outcome.kind).items())
    return escape(details)


def _print_table(rows: list[tuple[str, Outcome]], tally: Tally) -> None:
    table = Table()
    table.add_column("Row", style="cyan", justify="right")
    table.add_column("Status", style="white")
    table.add_column("Detail", style="white")

    for label, outcome in rows:
        if outcome.is_success:
            status = "[green]OK[/green]"
        else:
            status = f"[red]{outcome.code.value.upper()}[/red]"
        table.add_row(label, status, _describe(outcome))

    console.print(table)

    status_color = "green" if tally.passed else "red"
    console.print(f"[{status_color}]Grid Status: {'PASS' if tally.passed else 'FAIL'}[/{status_color}]")
    console.print(f"Rows: {tally.successes} valid, {tally.total_failures} failed")


@app.command()
def check(
    path: Annotated[
        Path,
        typer.Argument(help="Path to a delimited numeric grid file")
    ],
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .validiter.json)")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    fail_fast: Annotated[
        bool,
        typer.Option("--fail-fast", help="Stop at the first failing row")
    ] = False,
) -> None:
    """Validate a numeric grid file row by row."""
    if format not in VALID_FORMATS:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(VALID_FORMATS)}")
        raise typer.Exit(1)

    try:
        validiter_config = load_config(config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    configure_logging(validiter_config.logging)

    grid_config = validiter_config.grid
    line_numbers: list[int] = []

    def numbered(lines):
        # records the source line number of every line handed to the parser
        for number, line in enumerate(lines, start=1):
            if grid_config.skip_blank_lines and not line.strip():
                continue
            line_numbers.append(number)
            yield line.rstrip("\n")

    tally = Tally()
    rows: list[tuple[str, Outcome]] = []
    try:
        with open(path, encoding="utf-8") as f:
            for index, outcome in enumerate(parse_lines(numbered(f), grid_config)):
                # the trailing TooFew failure is not tied to a line
                label = str(line_numbers[index]) if index < len(line_numbers) else "end"
                rows.append((label, outcome))
                tally.add(outcome)
                if fail_fast and outcome.is_failure:
                    break
    except FileNotFoundError:
        console.print(f"[red]Error:[/red] File not found: {escape(str(path))}")
        raise typer.Exit(1)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] Cannot read {escape(str(path))}: {escape(str(e))}")
        raise typer.Exit(1)

    if format == "json":
        report = tally.to_dict()
        report["rows"] = [
            {"row": label, "ok": outcome.is_success, "value": outcome.value}
            if outcome.is_success
            else {"row": label, "ok": False, "failure": outcome.kind.to_dict()}
            for label, outcome in rows
        ]
        console.print(jsonlib.dumps(_json_safe(report), indent=2, allow_nan=False), markup=False, soft_wrap=True)
    else:
        _print_table(rows, tally)

    raise typer.Exit(tally.exit_code)


@app.command("config")
def show_config(
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .validiter.json)")
    ] = None,
) -> None:
    """Show the effective configuration."""
    try:
        validiter_config = load_config(config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(jsonlib.dumps(validiter_config.model_dump(mode="json", by_alias=True), indent=2), soft_wrap=True)


if __name__ == "__main__":
    app()
