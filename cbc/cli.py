"""
Covered Bridge Capital CLI

Primary commands:
- cbc login / logout
- cbc status
- cbc partners / periods
- cbc export
"""
from __future__ import annotations

import typer

app = typer.Typer(
    add_completion=False,
    help="""Covered Bridge Capital - Partnership Tracking & P&L Calculator

\b
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
SESSION
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  cbc login -n "Juanny Smit"     Log in with the shared password
  cbc logout                     End the session

\b
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
LEDGER
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  cbc status                     Capital, partners, latest P&L
  cbc partners set-contribution 1 25000
  cbc periods record -v 5500     Fee, P&L and allocations

\b
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
EXPORT
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  cbc export csv                 Write covered-bridge-capital-<date>.csv
  cbc export copy                Copy CSV to the clipboard

\b
Run 'cbc <command> --help' for details.
""",
)


@app.callback()
def _main():
    from cbc.config import load_settings
    from cbc.utils.logging import setup_logging

    setup_logging(load_settings().log_level)


# ---------------------------------------------------------------------------
# SUBGROUPS
# ---------------------------------------------------------------------------

partners_app = typer.Typer(add_completion=False, help="Partner roster and contributions")
app.add_typer(partners_app, name="partners")

periods_app = typer.Typer(add_completion=False, help="Recorded periods and allocations")
app.add_typer(periods_app, name="periods")

export_app = typer.Typer(add_completion=False, help="CSV export")
app.add_typer(export_app, name="export")


# ---------------------------------------------------------------------------
# COMMAND REGISTRATION
# ---------------------------------------------------------------------------

_COMMANDS_REGISTERED = False


def _register_commands() -> None:
    global _COMMANDS_REGISTERED
    if _COMMANDS_REGISTERED:
        return

    from cbc.cli_commands.export_cmd import register as register_export
    from cbc.cli_commands.partners_cmd import register as register_partners
    from cbc.cli_commands.periods_cmd import register as register_periods
    from cbc.cli_commands.session_cmd import register as register_session
    from cbc.cli_commands.status_cmd import register as register_status

    register_session(app)
    register_status(app)
    register_partners(partners_app)
    register_periods(periods_app)
    register_export(export_app)

    _COMMANDS_REGISTERED = True


def main():
    _register_commands()
    app()


# Register on import
_register_commands()


if __name__ == "__main__":
    main()
