"""CLI entry point using typer."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Iterator

import typer
from rich.console import Console
from rich.table import Table

from histscope import __version__
from histscope.config import (
    CONFIG_FILE,
    AppConfig,
    get_config,
    load_config,
    save_config,
    set_config_value,
)
from histscope.environment import Environment
from histscope.items import HistoryItem
from histscope.render import render_label
from histscope.scope import Scope
from histscope.storage.models import HistoryRecord
from histscope.title import generate_title

app = typer.Typer(
    name="histscope",
    help="Render shell history for fuzzy pickers.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def setup_logging(config: AppConfig) -> None:
    """Log to the configured file; stdout belongs to the picker."""
    log_path = Path(config.logging.file).expanduser()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(str(log_path))
    except OSError:
        handler = logging.NullHandler()
    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[handler],
    )


@app.callback()
def main() -> None:
    """Render shell history for fuzzy pickers."""
    setup_logging(get_config())


def escape_newlines(text: str) -> str:
    return text.replace("\r", "\\r").replace("\n", "\\n")


def _read_records(lines: Iterator[str]) -> Iterator[HistoryRecord]:
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            yield HistoryRecord.from_dict(json.loads(line))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Bad history record on line %d: %s", lineno, e)
            err_console.print(f"[red]Invalid history record on line {lineno}: {e}[/red]")
            raise typer.Exit(1)


@app.command()
def label(
    full: bool = typer.Option(False, "--full", "-f", help="Always show date and time"),
    print0: bool = typer.Option(False, "--print0", "-0", help="End labels with NUL instead of newline (fzf --read0)"),
) -> None:
    """Print one label per JSON history record read from stdin.

    Newlines inside multi-line commands are shown as ``\\n`` unless
    ``--print0`` is given, so every record stays a single picker entry.
    """
    env = Environment(get_config())
    for record in _read_records(iter(sys.stdin)):
        text = render_label(record, full=full, env=env)
        if print0:
            typer.echo(text + "\0", nl=False)
        else:
            typer.echo(escape_newlines(text))


@app.command()
def preview() -> None:
    """Print the detail preview of the JSON history record read from stdin."""
    records = list(_read_records(iter(sys.stdin)))
    if len(records) != 1:
        err_console.print(f"[red]Expected exactly one record, got {len(records)}.[/red]")
        raise typer.Exit(1)

    item = HistoryItem(records[0], Environment(get_config()))
    typer.echo(item.preview().text, color=True)


@app.command()
def title(
    scope: str = typer.Option("session", "--scope", "-s", help="session, directory, machine or everywhere"),
) -> None:
    """Print the header for a search scope."""
    try:
        selected = Scope.parse(scope)
    except ValueError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    typer.echo(generate_title(selected, Environment(get_config())), nl=False)


@app.command()
def config(
    key: str = typer.Argument(None, help="Config key (e.g., display.date_format)"),
    value: str = typer.Argument(None, help="New value"),
) -> None:
    """View or modify configuration."""
    cfg = load_config()

    if key is None:
        table = Table(title="Configuration")
        table.add_column("Key", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("display.date_format", cfg.display.date_format)
        table.add_row("display.highlighter", cfg.display.highlighter or "(disabled)")
        table.add_row("display.highlight_timeout", str(cfg.display.highlight_timeout))
        table.add_row("logging.level", cfg.logging.level)
        table.add_row("logging.file", cfg.logging.file)

        console.print(table)
        return

    if value is None:
        console.print("[red]Usage: histscope config <key> <value>[/red]")
        raise typer.Exit(1)

    try:
        typed_value = set_config_value(cfg, key, value)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    save_config(cfg)
    console.print(f"[green]{key} = {typed_value}[/green]")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"histscope v{__version__}")
    console.print(f"Python: {sys.version.split()[0]}")
    console.print(f"Config: {CONFIG_FILE}")


if __name__ == "__main__":
    app()
