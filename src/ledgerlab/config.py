"""Environment-driven configuration helpers for the LedgerLab dashboard."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or .env files."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ledger_api_url: str = Field(default="http://localhost:8000", validation_alias="LEDGER_API_URL")
    refresh_interval_seconds: int = Field(
        default=60, ge=1, validation_alias="LEDGER_REFRESH_INTERVAL_SECONDS"
    )
    fetch_attempts: int = Field(default=1, ge=1, le=10, validation_alias="LEDGER_FETCH_ATTEMPTS")
    request_timeout: float | None = Field(default=None, gt=0, validation_alias="LEDGER_REQUEST_TIMEOUT")

    snapshot_path: Path = Field(
        default=Path("data/sample_ledger.json"), validation_alias="LEDGER_SNAPSHOT_PATH"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()  # type: ignore[call-arg]
