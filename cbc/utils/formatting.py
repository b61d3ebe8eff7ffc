"""
Display formatting utilities for ledger output.

Provides consistent formatting for:
- Currency values (with and without sign)
- Ownership percentages
- User-entered money strings
"""
from __future__ import annotations

from typing import Optional


def fmt_usd(x: Optional[float], show_cents: bool = True) -> str:
    """Format as USD currency."""
    if x is None or not isinstance(x, (int, float)):
        return "n/a"
    if show_cents:
        return f"${float(x):,.2f}"
    return f"${float(x):,.0f}"


def fmt_signed_usd(x: Optional[float]) -> str:
    """Profit/loss style: +$1,234.56 / -$1,234.56."""
    if x is None or not isinstance(x, (int, float)):
        return "n/a"
    sign = "+" if float(x) >= 0 else "-"
    return f"{sign}${abs(float(x)):,.2f}"


def fmt_pct(x: Optional[float], decimals: int = 2) -> str:
    """Format a value that is already in percent (20.0 -> '20.00%')."""
    if x is None or not isinstance(x, (int, float)):
        return "n/a"
    return f"{float(x):.{decimals}f}%"


def pnl_style(x: float) -> str:
    return "green" if x >= 0 else "red"


def parse_money(x: object) -> float:
    """Parse '$1,234.50' style input. Raises ValueError on empty/garbage."""
    s = str(x if x is not None else "").strip()
    if not s:
        raise ValueError("empty amount")
    s = s.replace("$", "").replace(",", "").strip()
    return float(s)
