"""
Login gate for the tracker.

A partner picks their name and enters the shared password. This is a UI gate,
not authentication: there is one plaintext password for everybody and the
chosen name is not bound to any identity.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from cbc.utils.dates import utc_now_iso

logger = logging.getLogger(__name__)

LOGIN_NAMES = (
    "Juanny Smit",
    "Lezmond Dayhee",
    "RickDa Stick",
    "HoganHoss Bierwirth",
    "Buff Wocket Warner",
)

SESSION_KEY = "cbc-logged-in-partner"


class LoginError(ValueError):
    pass


def check_login(name: str | None, password: str | None, *, expected_password: str) -> str:
    """Validate a login attempt and return the selected name."""
    selected = (name or "").strip()
    if not selected or selected not in LOGIN_NAMES:
        raise LoginError("Please select your name")
    if not password:
        raise LoginError("Please enter your password")
    if password != expected_password:
        raise LoginError("Incorrect password. Please try again.")
    return selected


class SessionStore:
    """Holds the logged-in name between CLI invocations until logout."""

    def __init__(self, data_dir: str | Path):
        self.path = Path(data_dir) / f".{SESSION_KEY}.json"

    def current(self) -> str | None:
        if not self.path.exists():
            return None
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, e)
            return None
        name = raw.get("partner") if isinstance(raw, dict) else None
        return name if name in LOGIN_NAMES else None

    def login(self, name: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"partner": name, "since": utc_now_iso()}), encoding="utf-8")

    def logout(self) -> bool:
        if not self.path.exists():
            return False
        self.path.unlink()
        return True
