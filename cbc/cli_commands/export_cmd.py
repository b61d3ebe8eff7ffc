from __future__ import annotations

import typer
from rich.panel import Panel

from cbc.cli_commands.shared import console, open_tracker
from cbc.config import load_settings
from cbc.ledger.export import write_csv
from cbc.utils.clipboard import ClipboardError, copy_text


def register(export_app: typer.Typer) -> None:
    @export_app.command("csv")
    def export_csv(
        out: str = typer.Option("", "--out", "-o", help="Directory for the CSV file (overrides CBC_EXPORT_DIR)."),
    ):
        """Write the period history to covered-bridge-capital-<date>.csv."""
        ctl, _ = open_tracker()
        out_dir = out or str(load_settings().export_dir)
        path = write_csv(ctl.periods, out_dir)
        console.print(Panel(f"Exported {len(ctl.periods)} period(s)\nfile: {path}", title="CSV export", expand=False))

    @export_app.command("copy")
    def export_copy():
        """Copy the CSV text to the clipboard (prints it if no clipboard is available)."""
        ctl, _ = open_tracker()
        text = ctl.csv_text()
        try:
            copy_text(text)
        except ClipboardError as e:
            console.print(f"[yellow]Could not copy to clipboard ({e}). Copy the CSV below manually:[/yellow]")
            typer.echo(text)
            return
        console.print("Copied CSV to clipboard.")
