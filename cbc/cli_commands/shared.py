"""
Helpers shared by the tracker commands: settings, the gate check, and the
controller wired to the on-disk store.
"""
from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console

from cbc.auth import SessionStore
from cbc.config import Settings, load_settings
from cbc.ledger.controller import STATUS_LOAD_FAILED, STATUS_SAVE_FAILED, TrackerController
from cbc.ledger.store import JsonFileStore

console = Console()


def fail(message: str) -> NoReturn:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


def require_login(settings: Settings) -> str:
    name = SessionStore(settings.data_dir).current()
    if not name:
        fail("Not logged in. Run: cbc login")
    return name


def open_tracker() -> tuple[TrackerController, str]:
    """Check the gate, then load the ledger from the data directory."""
    settings = load_settings()
    name = require_login(settings)
    ctl = TrackerController(JsonFileStore(settings.data_dir), rate=settings.management_fee_rate)
    ctl.load()
    if ctl.status == STATUS_LOAD_FAILED:
        console.print("[yellow]Saved data could not be loaded; starting from defaults.[/yellow]")
    return ctl, name


def print_status(ctl: TrackerController) -> None:
    if not ctl.status:
        return
    style = "yellow" if ctl.status == STATUS_SAVE_FAILED else "dim"
    console.print(f"[{style}]{ctl.status}[/{style}]")
