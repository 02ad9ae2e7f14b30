from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    App settings.

    Notes:
    - Defaults are local (SQLite file next to the repo) so the service runs without setup.
    - Every field can be overridden with an `APP_`-prefixed env var.
    """

    model_config = SettingsConfigDict(env_prefix="APP_", extra="ignore")

    db_url: str | None = None
    log_level: str = "INFO"
    seed_demo_data: bool = False

    def resolved_db_url(self) -> str:
        if self.db_url:
            return self.db_url

        repo_root = Path(__file__).resolve().parents[1]
        db_path = repo_root / "app.db"
        return f"sqlite:///{db_path}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
