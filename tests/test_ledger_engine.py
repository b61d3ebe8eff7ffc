from __future__ import annotations

import pytest

from cbc.ledger.engine import (
    MANAGEMENT_FEE_RATE,
    MISSING_INPUTS_MESSAGE,
    compute_ownership,
    record_period,
    total_contributions,
)
from cbc.ledger.errors import PeriodValidationError
from cbc.ledger.models import Partner


def _partners(*amounts: float) -> list[Partner]:
    return [Partner(id=i, name=f"P{i}", contribution=a) for i, a in enumerate(amounts, start=1)]


def test_worked_example(funded_partners):
    p = record_period(funded_partners, 5500, rate=0.02, date="2026-01-31", notes="jan", period_id=1)

    assert p.total_contributions == 5000.0
    assert abs(p.management_fee - 9.1667) < 1e-4
    assert abs(p.net_value - 5490.8333) < 1e-4
    assert abs(p.profit_loss - 490.8333) < 1e-4

    assert [round(a.ownership, 6) for a in p.partners] == [20.0, 40.0, 40.0]
    for got, want in zip([a.allocation for a in p.partners], [98.1667, 196.3333, 196.3333]):
        assert abs(got - want) < 1e-4
    for got, want in zip([a.balance for a in p.partners], [1098.1667, 2196.3333, 2196.3333]):
        assert abs(got - want) < 1e-4

    assert p.date == "2026-01-31"
    assert p.notes == "jan"
    assert [a.name for a in p.partners] == ["George Bierwirth", "Desmond Leahy", "Byron Smith"]


def test_fee_net_and_pnl_formulas_are_exact():
    partners = _partners(1234.56, 789.01)
    v, r = 3100.0, 0.025
    p = record_period(partners, v, rate=r, period_id=1)
    fee = (v * r) / 12
    assert p.management_fee == fee
    assert p.net_value == v - fee
    assert p.profit_loss == (v - fee) - total_contributions(partners)


def test_default_rate_is_two_percent_annual(funded_partners):
    assert MANAGEMENT_FEE_RATE == 0.02
    p = record_period(funded_partners, 1200, period_id=1)
    assert abs(p.management_fee - 2.0) < 1e-12


def test_ownership_zero_when_no_capital():
    assert compute_ownership(0.0, 0.0) == 0.0
    assert compute_ownership(500.0, 0) == 0.0


@pytest.mark.parametrize(
    "amounts",
    [
        (1000.0, 2000.0, 2000.0),
        (1.0, 1.0, 1.0),
        (0.0, 0.0, 7.5),
        (333.33, 0.01, 99999.99, 12.5, 40.0),
    ],
)
def test_ownership_sums_to_100_and_allocations_sum_to_pnl(amounts):
    partners = _partners(*amounts)
    total = total_contributions(partners)
    assert abs(sum(compute_ownership(p.contribution, total) for p in partners) - 100.0) < 1e-9

    period = record_period(partners, total * 0.93, period_id=1)
    assert abs(sum(a.ownership for a in period.partners) - 100.0) < 1e-9
    assert abs(sum(a.allocation for a in period.partners) - period.profit_loss) < 1e-6
    for a in period.partners:
        assert abs(a.balance - (a.contribution + a.allocation)) < 1e-9


@pytest.mark.parametrize("value", [0, 0.0, "", "  ", None, "abc", -100.0, float("nan"), float("inf")])
def test_rejects_missing_or_invalid_total_value(funded_partners, value):
    with pytest.raises(PeriodValidationError) as exc:
        record_period(funded_partners, value)
    assert str(exc.value) == MISSING_INPUTS_MESSAGE


def test_rejects_when_no_contributions():
    with pytest.raises(PeriodValidationError):
        record_period(_partners(0.0, 0.0), 5500)


def test_accepts_money_strings(funded_partners):
    p = record_period(funded_partners, "$5,500.00", period_id=1)
    assert p.total_value == 5500.0


def test_deterministic_apart_from_id(funded_partners):
    a = record_period(funded_partners, 6100, date="2026-02-28", notes="x", period_id=1)
    b = record_period(funded_partners, 6100, date="2026-02-28", notes="x", period_id=2)
    assert a.model_dump(exclude={"id"}) == b.model_dump(exclude={"id"})


def test_does_not_mutate_partners(funded_partners):
    before = [p.model_dump() for p in funded_partners]
    record_period(funded_partners, 4000, period_id=1)
    assert [p.model_dump() for p in funded_partners] == before


def test_loss_is_split_by_ownership():
    p = record_period(_partners(3000.0, 1000.0), 3000.0, rate=0.0, period_id=1)
    assert p.profit_loss == -1000.0
    assert [a.allocation for a in p.partners] == [-750.0, -250.0]
    assert [a.balance for a in p.partners] == [2250.0, 750.0]


def test_zero_contribution_partner_gets_nothing():
    p = record_period(_partners(0.0, 1000.0), 1100.0, rate=0.0, period_id=1)
    idle = p.partners[0]
    assert idle.ownership == 0.0
    assert idle.allocation == 0.0
    assert idle.balance == 0.0


def test_id_defaults_to_epoch_millis(funded_partners, monkeypatch):
    monkeypatch.setattr("cbc.ledger.engine.time.time", lambda: 1767225600.5)
    p = record_period(funded_partners, 5500)
    assert p.id == 1767225600500
