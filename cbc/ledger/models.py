from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    # camelCase on the wire so blobs saved by the browser tracker still load.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, allow_inf_nan=False)


class Partner(_Record):
    id: int
    name: str
    contribution: float = Field(default=0.0, ge=0.0)


class PartnerAllocation(_Record):
    name: str
    contribution: float
    ownership: float  # percent, 0-100
    allocation: float
    balance: float


class Period(_Record):
    id: int  # creation timestamp (epoch ms)
    date: str  # YYYY-MM-DD
    total_value: float
    total_contributions: float
    management_fee: float
    net_value: float
    profit_loss: float
    notes: str = ""
    partners: tuple[PartnerAllocation, ...] = ()


DEFAULT_PARTNER_NAMES = (
    "George Bierwirth",
    "Desmond Leahy",
    "Byron Smith",
    "Richard Starick",
    "James Warner",
)


def default_partners() -> list[Partner]:
    return [Partner(id=i, name=name, contribution=0.0) for i, name in enumerate(DEFAULT_PARTNER_NAMES, start=1)]
