from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from cbc.ledger.errors import StorageError
from cbc.ledger.models import Partner, Period, default_partners
from cbc.ledger.state import AppState

logger = logging.getLogger(__name__)

PARTNERS_KEY = "cbc-partners"
PERIODS_KEY = "cbc-periods"

_partners_adapter = TypeAdapter(list[Partner])
_periods_adapter = TypeAdapter(list[Period])


class StoragePort(Protocol):
    def load(self, key: str) -> str | None: ...

    def save(self, key: str, text: str) -> None: ...


class JsonFileStore:
    """One `<key>.json` file per key under a data directory."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def load(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {path}: {e}") from e

    def save(self, key: str, text: str) -> None:
        path = self.path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(".json.tmp")
            tmp.write_text(text, encoding="utf-8")
            tmp.replace(path)
        except OSError as e:
            raise StorageError(f"Could not write {path}: {e}") from e


class MemoryStore:
    def __init__(self, blobs: dict[str, str] | None = None):
        self.blobs: dict[str, str] = dict(blobs or {})

    def load(self, key: str) -> str | None:
        return self.blobs.get(key)

    def save(self, key: str, text: str) -> None:
        self.blobs[key] = text


def load_state(store: StoragePort) -> AppState:
    """
    Read both blobs. A missing blob falls back to its default (roster / empty
    history); a blob that is present but unreadable raises StorageError.
    """
    raw_partners = store.load(PARTNERS_KEY)
    raw_periods = store.load(PERIODS_KEY)
    try:
        partners = _partners_adapter.validate_json(raw_partners) if raw_partners else default_partners()
        periods = _periods_adapter.validate_json(raw_periods) if raw_periods else []
    except ValidationError as e:
        raise StorageError(f"Saved ledger data is corrupt: {e.error_count()} error(s)") from e
    logger.debug("Loaded %d partner(s), %d period(s)", len(partners), len(periods))
    return AppState(partners=tuple(partners), periods=tuple(periods))


def dump_state(state: AppState) -> dict[str, str]:
    return {
        PARTNERS_KEY: json.dumps([p.model_dump(by_alias=True) for p in state.partners]),
        PERIODS_KEY: json.dumps([p.model_dump(by_alias=True, mode="json") for p in state.periods]),
    }


def save_state(store: StoragePort, state: AppState) -> None:
    for key, text in dump_state(state).items():
        store.save(key, text)
