from __future__ import annotations

import typer
from rich.panel import Panel

from cbc.auth import LOGIN_NAMES, LoginError, SessionStore, check_login
from cbc.cli_commands.shared import console, fail
from cbc.config import load_settings


def register(app: typer.Typer) -> None:
    @app.command("login")
    def login_cmd(
        name: str = typer.Option(
            "",
            "--name",
            "-n",
            help="Your name as listed by `cbc names`.",
        ),
        password: str = typer.Option(..., "--password", "-p", prompt="Password", hide_input=True),
    ):
        """Select your name and enter the partnership password."""
        settings = load_settings()
        try:
            selected = check_login(name, password, expected_password=settings.gate_password)
        except LoginError as e:
            fail(str(e))
        SessionStore(settings.data_dir).login(selected)
        console.print(Panel(f"Welcome, {selected}!", title="Covered Bridge Capital", expand=False))

    @app.command("logout")
    def logout_cmd():
        """End the current session."""
        settings = load_settings()
        if SessionStore(settings.data_dir).logout():
            console.print("Logged out.")
        else:
            console.print("[dim]No active session.[/dim]")

    @app.command("whoami")
    def whoami_cmd():
        """Show who is logged in."""
        settings = load_settings()
        name = SessionStore(settings.data_dir).current()
        if not name:
            fail("Not logged in. Run: cbc login")
        console.print(f"Logged in as [bold]{name}[/bold]")

    @app.command("names")
    def names_cmd():
        """List the names accepted by `cbc login`."""
        for n in LOGIN_NAMES:
            console.print(n)
