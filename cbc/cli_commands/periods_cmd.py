from __future__ import annotations

import typer
from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cbc.cli_commands.shared import console, fail, open_tracker, print_status
from cbc.ledger.errors import LedgerValidationError
from cbc.ledger.models import Period
from cbc.utils.dates import normalize_period_date
from cbc.utils.formatting import fmt_pct, fmt_signed_usd, fmt_usd, pnl_style
from cbc.utils.logging import log_event


def period_panel(period: Period, number: int | None = None) -> Panel:
    ps = pnl_style(period.profit_loss)
    head = (
        f"Date: {period.date}  |  Account value: {fmt_usd(period.total_value)}  |  "
        f"Contributions: {fmt_usd(period.total_contributions)}\n"
        f"Management fee: {fmt_usd(period.management_fee)}  |  Net value: {fmt_usd(period.net_value)}  |  "
        f"P&L: [{ps}]{fmt_signed_usd(period.profit_loss)}[/{ps}]"
    )
    if period.notes:
        head += f"\nNotes: {escape(period.notes)}"

    tbl = Table(header_style="bold dim", box=None, padding=(0, 1))
    tbl.add_column("Partner", style="bold cyan")
    tbl.add_column("Contribution", justify="right")
    tbl.add_column("Own%", justify="right")
    tbl.add_column("P&L Allocation", justify="right")
    tbl.add_column("Balance", justify="right")
    for p in period.partners:
        s = pnl_style(p.allocation)
        tbl.add_row(
            escape(p.name),
            fmt_usd(p.contribution),
            fmt_pct(p.ownership),
            f"[{s}]{fmt_signed_usd(p.allocation)}[/{s}]",
            fmt_usd(p.balance),
        )

    title = f"Period {number}" if number is not None else "Period"
    return Panel(Group(head, "", tbl), title=f"{title} (id {period.id})", expand=False)


def register(periods_app: typer.Typer) -> None:
    @periods_app.command("record")
    def periods_record(
        value: str = typer.Option(..., "--value", "-v", help="Total account value reported for the period."),
        date: str = typer.Option("", "--date", "-d", help="Period date YYYY-MM-DD (defaults to today)."),
        notes: str = typer.Option("", "--notes", "-n", help="Free-text notes."),
    ):
        """Record a period: fee, net value, P&L and per-partner allocation."""
        ctl, name = open_tracker()
        try:
            period_date = normalize_period_date(date)
        except ValueError:
            raise typer.BadParameter(f"Bad date '{date}'. Expected YYYY-MM-DD.", param_hint="--date")
        try:
            period = ctl.record_period(value, date=period_date, notes=notes)
        except LedgerValidationError as e:
            fail(str(e))
        console.print(period_panel(period, number=len(ctl.periods)))
        log_event("period_recorded", {"by": name, "id": period.id, "date": period.date, "profit_loss": period.profit_loss})
        print_status(ctl)

    @periods_app.command("list")
    def periods_list():
        """Show the period history."""
        ctl, _ = open_tracker()
        if not ctl.periods:
            console.print(Panel("No periods recorded yet.\nRecord one with: cbc periods record --value 5500", title="Periods", expand=False))
            return
        tbl = Table(title="Period History", header_style="bold dim")
        tbl.add_column("#", justify="right")
        tbl.add_column("ID", justify="right", style="dim")
        tbl.add_column("Date")
        tbl.add_column("Account Value", justify="right")
        tbl.add_column("Mgmt Fee", justify="right")
        tbl.add_column("Net Value", justify="right")
        tbl.add_column("P&L", justify="right")
        tbl.add_column("Notes")
        for idx, p in enumerate(ctl.periods, start=1):
            ps = pnl_style(p.profit_loss)
            tbl.add_row(
                str(idx),
                str(p.id),
                p.date,
                fmt_usd(p.total_value),
                fmt_usd(p.management_fee),
                fmt_usd(p.net_value),
                f"[{ps}]{fmt_signed_usd(p.profit_loss)}[/{ps}]",
                escape(p.notes),
            )
        console.print(tbl)

    @periods_app.command("show")
    def periods_show(period_id: int = typer.Argument(..., help="Period id (see `cbc periods list`).")):
        """Show one period with its partner allocations."""
        ctl, _ = open_tracker()
        for idx, p in enumerate(ctl.periods, start=1):
            if p.id == period_id:
                console.print(period_panel(p, number=idx))
                return
        fail(f"Unknown period id {period_id}")

    @periods_app.command("delete")
    def periods_delete(
        period_id: int = typer.Argument(..., help="Period id (see `cbc periods list`)."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation."),
    ):
        """Delete one period. Partner contributions are not touched."""
        ctl, name = open_tracker()
        if ctl.find_period(period_id) is None:
            fail(f"Unknown period id {period_id}")
        if not yes and not typer.confirm(f"Delete period {period_id}?"):
            raise typer.Exit()
        try:
            ctl.delete_period(period_id)
        except LedgerValidationError as e:
            fail(str(e))
        console.print(f"Deleted period {period_id}.")
        log_event("period_deleted", {"by": name, "id": period_id})
        print_status(ctl)
