"""
Pytest configuration and shared fixtures for cbc tests.

Usage:
    @pytest.fixture functions are automatically available to all tests.
"""
import sys
from pathlib import Path

import pytest


def pytest_configure():
    """
    Ensure the repo root is on sys.path for the flat-layout package import (`cbc`).
    This keeps tests runnable without requiring an editable install.
    """
    root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(root))


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def funded_partners() -> list:
    """Three funded partners: 1000 / 2000 / 2000 (total 5000)."""
    from cbc.ledger.models import Partner

    return [
        Partner(id=1, name="George Bierwirth", contribution=1000.0),
        Partner(id=2, name="Desmond Leahy", contribution=2000.0),
        Partner(id=3, name="Byron Smith", contribution=2000.0),
    ]


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch) -> dict[str, str]:
    """Point the CLI at an empty data dir and run from tmp_path (no stray .env)."""
    data = tmp_path / "data"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CBC_DATA_DIR", str(data))
    monkeypatch.setenv("CBC_EXPORT_DIR", str(tmp_path / "exports"))
    monkeypatch.delenv("CBC_GATE_PASSWORD", raising=False)
    monkeypatch.delenv("CBC_MANAGEMENT_FEE_RATE", raising=False)
    return {"CBC_DATA_DIR": str(data), "CBC_EXPORT_DIR": str(tmp_path / "exports")}
