from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table

from cbc.cli_commands.shared import console, fail, open_tracker, print_status
from cbc.ledger.errors import LedgerValidationError
from cbc.utils.formatting import fmt_pct, fmt_usd, parse_money


def partner_table(summary) -> Table:
    tbl = Table(title="Partners", header_style="bold dim")
    tbl.add_column("ID", justify="right")
    tbl.add_column("Partner", style="bold cyan")
    tbl.add_column("Contribution", justify="right")
    tbl.add_column("Ownership %", justify="right")
    for p in summary.partners:
        tbl.add_row(str(p.id), escape(p.name), fmt_usd(p.contribution), fmt_pct(p.ownership))
    tbl.add_row("", "[bold]Total[/bold]", f"[bold]{fmt_usd(summary.total_capital)}[/bold]", "")
    return tbl


def register(partners_app: typer.Typer) -> None:
    @partners_app.command("list")
    def partners_list():
        """Show partner contributions and live ownership."""
        ctl, _ = open_tracker()
        console.print(partner_table(ctl.summary()))

    @partners_app.command("set-contribution")
    def partners_set_contribution(
        partner_id: int = typer.Argument(..., help="Partner id (see `cbc partners list`)."),
        amount: str = typer.Argument(..., help="Capital contributed, e.g. 25000 or $25,000."),
    ):
        """Set a partner's current capital contribution."""
        ctl, _ = open_tracker()
        try:
            value = parse_money(amount)
        except ValueError:
            fail(f"Bad amount '{amount}'.")
        try:
            partner = ctl.update_partner(partner_id, contribution=value)
        except LedgerValidationError as e:
            fail(str(e))
        console.print(f"{escape(partner.name)}: {fmt_usd(partner.contribution)}")
        print_status(ctl)

    @partners_app.command("rename")
    def partners_rename(
        partner_id: int = typer.Argument(..., help="Partner id (see `cbc partners list`)."),
        name: str = typer.Argument(..., help="New display name."),
    ):
        """Change a partner's display name."""
        ctl, _ = open_tracker()
        try:
            partner = ctl.update_partner(partner_id, name=name)
        except LedgerValidationError as e:
            fail(str(e))
        console.print(f"Partner {partner.id} is now {escape(partner.name)}")
        print_status(ctl)
