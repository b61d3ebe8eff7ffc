from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from cbc.ledger.engine import MANAGEMENT_FEE_RATE, compute_ownership, record_period, total_contributions
from cbc.ledger.errors import PartnerValidationError, PeriodValidationError
from cbc.ledger.models import Partner, Period, default_partners


@dataclass(frozen=True)
class AppState:
    partners: tuple[Partner, ...] = field(default_factory=lambda: tuple(default_partners()))
    periods: tuple[Period, ...] = ()


@dataclass(frozen=True)
class PartnerStanding:
    id: int
    name: str
    contribution: float
    ownership: float


@dataclass(frozen=True)
class TrackerSummary:
    total_capital: float
    active_partners: int
    latest_profit_loss: float
    latest_period: Period | None
    partners: tuple[PartnerStanding, ...]


def find_partner(state: AppState, partner_id: int) -> Partner:
    for p in state.partners:
        if p.id == partner_id:
            return p
    raise PartnerValidationError(f"Unknown partner id {partner_id}")


def update_partner(
    state: AppState,
    partner_id: int,
    *,
    name: str | None = None,
    contribution: float | None = None,
) -> AppState:
    """Return a new state with one partner's name and/or contribution changed."""
    current = find_partner(state, partner_id)
    changes: dict[str, object] = {}
    if name is not None:
        if not name.strip():
            raise PartnerValidationError("Partner name cannot be empty")
        changes["name"] = name.strip()
    if contribution is not None:
        amount = float(contribution)
        if not math.isfinite(amount) or amount < 0:
            raise PartnerValidationError("Contribution must be a non-negative amount")
        changes["contribution"] = amount
    if not changes:
        return state
    updated = current.model_copy(update=changes)
    return replace(state, partners=tuple(updated if p.id == partner_id else p for p in state.partners))


def add_period(
    state: AppState,
    total_value: object,
    *,
    date: str | None = None,
    notes: str = "",
    rate: float = MANAGEMENT_FEE_RATE,
    now_ms: int | None = None,
) -> AppState:
    period_id = None
    if now_ms is not None:
        # Ids double as creation order; never reuse or go backwards.
        last_id = max((p.id for p in state.periods), default=0)
        period_id = max(int(now_ms), last_id + 1)
    period = record_period(state.partners, total_value, rate=rate, date=date, notes=notes, period_id=period_id)
    return replace(state, periods=state.periods + (period,))


def delete_period(state: AppState, period_id: int) -> AppState:
    remaining = tuple(p for p in state.periods if p.id != period_id)
    if len(remaining) == len(state.periods):
        raise PeriodValidationError(f"Unknown period id {period_id}")
    return replace(state, periods=remaining)


def latest_period(state: AppState) -> Period | None:
    return state.periods[-1] if state.periods else None


def summarize(state: AppState) -> TrackerSummary:
    total = total_contributions(state.partners)
    latest = latest_period(state)
    return TrackerSummary(
        total_capital=total,
        active_partners=sum(1 for p in state.partners if p.contribution > 0),
        latest_profit_loss=latest.profit_loss if latest else 0.0,
        latest_period=latest,
        partners=tuple(
            PartnerStanding(
                id=p.id,
                name=p.name,
                contribution=float(p.contribution),
                ownership=compute_ownership(p.contribution, total),
            )
            for p in state.partners
        ),
    )
