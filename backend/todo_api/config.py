"""Application configuration."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_BACKEND_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables.

    ``database_url`` and ``allowed_origin`` have no defaults: a process started
    without them fails while loading settings.
    """

    app_name: str = "Todo API"
    database_url: str
    allowed_origin: str
    store_backend: Literal["database", "memory"] = "database"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8078

    model_config = SettingsConfigDict(
        env_file=str(_BACKEND_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()
