from __future__ import annotations

import logging
import time

from cbc.ledger import state as reducers
from cbc.ledger.engine import MANAGEMENT_FEE_RATE
from cbc.ledger.errors import StorageError
from cbc.ledger.export import generate_csv_text
from cbc.ledger.models import Partner, Period
from cbc.ledger.state import AppState, TrackerSummary
from cbc.ledger.store import StoragePort, load_state, save_state

logger = logging.getLogger(__name__)

STATUS_LOADED = "Data loaded"
STATUS_LOAD_FAILED = "Load failed"
STATUS_SAVED = "Saved"
STATUS_SAVE_FAILED = "Save failed"


class TrackerController:
    """
    Owns the tracker state and the storage port.

    Every action runs a pure reducer and then persists both blobs. Validation
    errors propagate before anything changes; a failed save is logged and
    reported through `status` but the in-memory state is kept.
    """

    def __init__(self, store: StoragePort, *, rate: float = MANAGEMENT_FEE_RATE, clock=time.time):
        self.store = store
        self.rate = float(rate)
        self._clock = clock
        self.state = AppState()
        self.status = ""

    @property
    def partners(self) -> tuple[Partner, ...]:
        return self.state.partners

    @property
    def periods(self) -> tuple[Period, ...]:
        return self.state.periods

    def load(self) -> AppState:
        try:
            self.state = load_state(self.store)
        except StorageError as e:
            logger.error("Error loading ledger data, using defaults: %s", e)
            self.state = AppState()
            self.status = STATUS_LOAD_FAILED
        else:
            self.status = STATUS_LOADED
        return self.state

    def save(self) -> bool:
        try:
            save_state(self.store, self.state)
        except StorageError as e:
            logger.error("Error saving ledger data: %s", e)
            self.status = STATUS_SAVE_FAILED
            return False
        self.status = STATUS_SAVED
        return True

    def _apply(self, new_state: AppState) -> AppState:
        self.state = new_state
        self.save()
        return self.state

    def update_partner(self, partner_id: int, *, name: str | None = None, contribution: float | None = None) -> Partner:
        self._apply(reducers.update_partner(self.state, partner_id, name=name, contribution=contribution))
        return reducers.find_partner(self.state, partner_id)

    def record_period(self, total_value: object, *, date: str | None = None, notes: str = "") -> Period:
        now_ms = int(self._clock() * 1000)
        self._apply(reducers.add_period(self.state, total_value, date=date, notes=notes, rate=self.rate, now_ms=now_ms))
        return self.state.periods[-1]

    def delete_period(self, period_id: int) -> None:
        self._apply(reducers.delete_period(self.state, period_id))

    def find_period(self, period_id: int) -> Period | None:
        return next((p for p in self.state.periods if p.id == period_id), None)

    def summary(self) -> TrackerSummary:
        return reducers.summarize(self.state)

    def csv_text(self) -> str:
        return generate_csv_text(self.state.periods)
