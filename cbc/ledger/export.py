from __future__ import annotations

import csv
import io
from datetime import date
from pathlib import Path
from typing import Sequence

from cbc.ledger.models import Period
from cbc.utils.dates import utc_today

PERIOD_HEADER = [
    "Period",
    "Date",
    "Total Account Value",
    "Total Contributions",
    "Management Fee",
    "Net Value",
    "Profit/Loss",
    "Notes",
]
ALLOCATION_TITLE = "Partner Allocations by Period"
ALLOCATION_HEADER = [
    "Period",
    "Date",
    "Partner",
    "Contribution",
    "Ownership %",
    "P&L Allocation",
    "Account Balance",
]

EXPORT_PREFIX = "covered-bridge-capital"


def _money(x: float) -> str:
    return f"{float(x):.2f}"


def generate_csv_text(periods: Sequence[Period]) -> str:
    """
    Render the period history as two tables: a per-period summary, then the
    partner-by-period allocation detail. Periods are numbered 1..n in order.
    """
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    w.writerow(PERIOD_HEADER)
    for idx, period in enumerate(periods, start=1):
        w.writerow(
            [
                idx,
                period.date,
                _money(period.total_value),
                _money(period.total_contributions),
                _money(period.management_fee),
                _money(period.net_value),
                _money(period.profit_loss),
                period.notes,
            ]
        )

    w.writerow([])
    w.writerow([])
    w.writerow([ALLOCATION_TITLE])
    w.writerow(ALLOCATION_HEADER)
    for idx, period in enumerate(periods, start=1):
        for p in period.partners:
            w.writerow(
                [
                    idx,
                    period.date,
                    p.name,
                    _money(p.contribution),
                    f"{float(p.ownership):.2f}%",
                    _money(p.allocation),
                    _money(p.balance),
                ]
            )
    return buf.getvalue()


def export_filename(on: date | None = None) -> str:
    return f"{EXPORT_PREFIX}-{(on or utc_today()).isoformat()}.csv"


def write_csv(periods: Sequence[Period], out_dir: str | Path, *, on: date | None = None) -> Path:
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    path = out / export_filename(on)
    with open(path, "w", newline="", encoding="utf-8") as f:
        f.write(generate_csv_text(periods))
    return path
