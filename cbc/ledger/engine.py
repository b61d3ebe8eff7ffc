from __future__ import annotations

import math
import time
from typing import Iterable, Sequence

from cbc.ledger.errors import PeriodValidationError
from cbc.ledger.models import Partner, PartnerAllocation, Period
from cbc.utils.dates import today_iso
from cbc.utils.formatting import parse_money

MANAGEMENT_FEE_RATE = 0.02  # 2% annual

MISSING_INPUTS_MESSAGE = "Please enter partner contributions and total account value"


def total_contributions(partners: Iterable[Partner]) -> float:
    return float(sum(float(p.contribution or 0.0) for p in partners))


def compute_ownership(contribution: float, total: float) -> float:
    """Ownership in percent (0-100). Zero when there is no capital yet."""
    if total == 0:
        return 0.0
    return float(contribution) / float(total) * 100.0


def _coerce_total_value(value: object) -> float:
    try:
        v = parse_money(value) if isinstance(value, str) else float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise PeriodValidationError(MISSING_INPUTS_MESSAGE) from None
    if not math.isfinite(v) or v <= 0:
        raise PeriodValidationError(MISSING_INPUTS_MESSAGE)
    return v


def record_period(
    partners: Sequence[Partner],
    total_value: object,
    *,
    rate: float = MANAGEMENT_FEE_RATE,
    date: str | None = None,
    notes: str = "",
    period_id: int | None = None,
) -> Period:
    """
    Snapshot the partner roster against a reported account value.

    - management_fee = total_value * rate / 12   (monthly slice of an annual rate)
    - net_value      = total_value - management_fee
    - profit_loss    = net_value - total_contributions
    - each partner gets profit_loss * ownership / 100 on top of their contribution

    Raises PeriodValidationError when the value is missing/zero or no capital
    has been contributed. The partner sequence is never modified.
    """
    v = _coerce_total_value(total_value)
    total = total_contributions(partners)
    if total == 0:
        raise PeriodValidationError(MISSING_INPUTS_MESSAGE)

    management_fee = (v * float(rate)) / 12
    net_value = v - management_fee
    profit_loss = net_value - total

    allocations = []
    for p in partners:
        contribution = float(p.contribution)
        ownership = compute_ownership(contribution, total)
        allocation = (profit_loss * ownership) / 100
        allocations.append(
            PartnerAllocation(
                name=p.name,
                contribution=contribution,
                ownership=ownership,
                allocation=allocation,
                balance=contribution + allocation,
            )
        )

    return Period(
        id=int(period_id) if period_id is not None else int(time.time() * 1000),
        date=date or today_iso(),
        total_value=v,
        total_contributions=total,
        management_fee=management_fee,
        net_value=net_value,
        profit_loss=profit_loss,
        notes=notes,
        partners=tuple(allocations),
    )
