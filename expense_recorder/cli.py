"""CLI for the ``expense_recorder`` package.

Typer-based console interface around the extraction API and the reference
list store. Environment variables (``EXPENSE_RECORDER_CONFIG_DIR``,
``EXPENSE_RECORDER_LOG_LEVEL``) may be provided via a local ``.env`` which is
loaded with ``python-dotenv`` before any command runs. Business logic lives in
``expense_recorder.api`` and ``expense_recorder.reference_lists``.
"""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .api import build_expense_record_from_transcript
from .logging_setup import configure_logging, get_logger, parse_level
from .models import ExpenseRecord
from .reference_lists import ReferenceListStore, load_reference_lists

LOG_LEVEL_ENV_VAR = "EXPENSE_RECORDER_LOG_LEVEL"

console = Console()
_logger = get_logger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Turn spoken expense transcripts into structured records and manage the "
        "account/category lists they are matched against."
    ),
)
accounts_app = typer.Typer(no_args_is_help=True, help="View and edit stored account names.")
categories_app = typer.Typer(no_args_is_help=True, help="View and edit stored expense categories.")
app.add_typer(accounts_app, name="accounts")
app.add_typer(categories_app, name="categories")


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(1)


def _parse_today(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise _fail(f"--today must be YYYY-MM-DD, got {value!r}") from None


def _render_record(record: ExpenseRecord) -> Table:
    table = Table(title="Expense record", show_header=True, header_style="bold cyan")
    table.add_column("Field")
    table.add_column("Value")
    for name, value in record.as_dict().items():
        table.add_row(name, escape(value) if value else "[dim]-[/dim]")
    return table


@app.command("parse")
def parse_cmd(
    transcript: Annotated[str, typer.Argument(help="Transcript text, or '-' to read stdin.")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the record as JSON.")] = False,
    row: Annotated[
        bool, typer.Option("--row", help="Print the tab-separated spreadsheet row.")
    ] = False,
    today: Annotated[
        str | None, typer.Option(help="Reference date (YYYY-MM-DD) instead of the current date.")
    ] = None,
) -> None:
    """Extract an expense record from a transcript."""

    text = sys.stdin.read() if transcript == "-" else transcript
    if not text.strip():
        raise _fail("transcript is empty")

    lists = load_reference_lists()
    record = build_expense_record_from_transcript(text, lists, today=_parse_today(today))

    if as_json:
        typer.echo(json.dumps(record.as_dict(), ensure_ascii=False))
    elif row:
        typer.echo("\t".join(record.sheet_row()))
    else:
        console.print(_render_record(record))


# ---- Reference list editing ------------------------------------------------------


def _list_entries(entries: list[str]) -> None:
    for entry in entries:
        typer.echo(entry)


def _add_entry(
    label: str,
    name: str,
    get: Callable[[], list[str]],
    save: Callable[[list[str]], None],
) -> None:
    entry = name.strip()
    if not entry:
        raise _fail(f"{label} cannot be empty")
    current = get()
    existing = next((e for e in current if e.casefold() == entry.casefold()), None)
    if existing is not None:
        raise _fail(f"{label} already present: {existing!r}")
    save([*current, entry])
    console.print(f"[green]Added[/green] {label} {escape(repr(entry))}")


def _remove_entry(
    label: str,
    name: str,
    get: Callable[[], list[str]],
    save: Callable[[list[str]], None],
) -> None:
    target = name.strip().casefold()
    current = get()
    remaining = [e for e in current if e.casefold() != target]
    if len(remaining) == len(current):
        raise _fail(f"{label} not found: {name!r}")
    save(remaining)
    console.print(f"[green]Removed[/green] {label} {escape(repr(name.strip()))}")


@accounts_app.command("list")
def accounts_list_cmd() -> None:
    """Print the stored account names, one per line."""

    _list_entries(ReferenceListStore().get_account_names())


@accounts_app.command("add")
def accounts_add_cmd(name: Annotated[str, typer.Argument(help="Account name to add.")]) -> None:
    store = ReferenceListStore()
    _add_entry("account", name, store.get_account_names, store.save_account_names)


@accounts_app.command("remove")
def accounts_remove_cmd(
    name: Annotated[str, typer.Argument(help="Account name to remove (case-insensitive).")],
) -> None:
    store = ReferenceListStore()
    _remove_entry("account", name, store.get_account_names, store.save_account_names)


@categories_app.command("list")
def categories_list_cmd() -> None:
    """Print the stored expense categories, one per line."""

    _list_entries(ReferenceListStore().get_expense_categories())


@categories_app.command("add")
def categories_add_cmd(name: Annotated[str, typer.Argument(help="Category to add.")]) -> None:
    store = ReferenceListStore()
    _add_entry("category", name, store.get_expense_categories, store.save_expense_categories)


@categories_app.command("remove")
def categories_remove_cmd(
    name: Annotated[str, typer.Argument(help="Category to remove (case-insensitive).")],
) -> None:
    store = ReferenceListStore()
    _remove_entry("category", name, store.get_expense_categories, store.save_expense_categories)


@app.command("reset-defaults")
def reset_defaults_cmd() -> None:
    """Restore both lists to the built-in defaults."""

    store = ReferenceListStore()
    store.reset_to_defaults()
    console.print(f"[green]Reset[/green] reference lists at {escape(str(store.path))}")


@app.callback()
def _root(
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help=f"Log level name or number (default: ${LOG_LEVEL_ENV_VAR}, else INFO).",
        ),
    ] = None,
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables), configures package logging and seeds
    the reference list file with defaults on first use.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(parse_level(log_level or os.getenv(LOG_LEVEL_ENV_VAR)))

    store = ReferenceListStore()
    try:
        store.initialize_defaults()
    except OSError as e:
        # Reads still fall back to defaults; only persisting them failed.
        _logger.warning("reference_lists:seed_failed path=%s error=%s", os.fspath(store.path), e)


if __name__ == "__main__":  # pragma: no cover
    # Running as a module: `python -m expense_recorder.cli`
    app()
