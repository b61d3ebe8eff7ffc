from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Where the partner/period blobs and the login session live.
    CBC_DATA_DIR: str = "data"
    # Annual rate, prorated monthly when a period is recorded.
    CBC_MANAGEMENT_FEE_RATE: float = 0.02
    # Shared password for the login gate (not real authentication).
    CBC_GATE_PASSWORD: str = "wheaton"
    CBC_EXPORT_DIR: str = "."
    CBC_LOG_LEVEL: str = "WARNING"

    @property
    def data_dir(self) -> Path:
        return Path(self.CBC_DATA_DIR)

    @property
    def management_fee_rate(self) -> float:
        return float(self.CBC_MANAGEMENT_FEE_RATE)

    @property
    def gate_password(self) -> str:
        return self.CBC_GATE_PASSWORD

    @property
    def export_dir(self) -> Path:
        return Path(self.CBC_EXPORT_DIR)

    @property
    def log_level(self) -> str:
        return (self.CBC_LOG_LEVEL or "WARNING").strip().upper()


def load_settings() -> Settings:
    return Settings()
