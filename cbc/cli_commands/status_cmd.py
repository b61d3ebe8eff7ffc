from __future__ import annotations

import typer
from rich.panel import Panel
from rich.table import Table

from cbc.cli_commands.partners_cmd import partner_table
from cbc.cli_commands.shared import console, open_tracker
from cbc.utils.formatting import fmt_signed_usd, fmt_usd, pnl_style


def register(app: typer.Typer) -> None:
    @app.command("status")
    def status_cmd():
        """Total capital, active partners, latest P&L and the partner table."""
        ctl, name = open_tracker()
        s = ctl.summary()
        ps = pnl_style(s.latest_profit_loss)

        console.print()
        console.print("[bold cyan]  COVERED BRIDGE CAPITAL[/bold cyan]  [dim]Partnership Tracking & P&L[/dim]")
        console.print(f"[dim]  Logged in as {name}[/dim]")
        console.print()

        hero = Table(show_header=False, box=None, padding=(0, 3), expand=True)
        hero.add_column(justify="center")
        hero.add_column(justify="center")
        hero.add_column(justify="center")
        hero.add_row("[dim]TOTAL CAPITAL[/dim]", "[dim]ACTIVE PARTNERS[/dim]", "[dim]TOTAL P&L[/dim]")
        hero.add_row(
            f"[bold]{fmt_usd(s.total_capital)}[/bold]",
            f"[bold]{s.active_partners}[/bold]",
            f"[bold {ps}]{fmt_signed_usd(s.latest_profit_loss)}[/bold {ps}]",
        )
        latest = f"latest period {s.latest_period.date}" if s.latest_period else "no periods yet"
        hero.add_row("", f"[dim]of {len(s.partners)}[/dim]", f"[dim]{latest}[/dim]")
        console.print(Panel(hero, border_style="blue", padding=(1, 2)))
        console.print(partner_table(s))
