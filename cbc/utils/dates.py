"""
Date helpers shared by the ledger and the CLI.
"""
from __future__ import annotations

from datetime import date, datetime, timezone


def today_iso() -> str:
    """Return today's local date as YYYY-MM-DD."""
    return date.today().isoformat()


def parse_ymd(s: str) -> date:
    """Parse YYYY-MM-DD string to date. Raises ValueError on failure."""
    return date.fromisoformat(s.strip())


def normalize_period_date(s: str | None) -> str:
    """Validate an optional period date; empty means today."""
    if s is None or not s.strip():
        return today_iso()
    return parse_ymd(s).isoformat()


def utc_now_iso() -> str:
    """Return current UTC time as ISO string."""
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def utc_today() -> date:
    """Return the current UTC calendar date."""
    return datetime.now(timezone.utc).date()
