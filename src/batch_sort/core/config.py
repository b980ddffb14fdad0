# src/batch_sort/core/config.py
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from batch_sort.version import get_version


class Settings(BaseSettings):
    """
    App settings (12-factor). Override via env vars, e.g.
      BATCH_SORT_PORT=9000  BATCH_SORT_SORT_WORKERS=8
    """

    # App
    VERSION: str = Field(default_factory=get_version)
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = Field(8000, ge=1, le=65535)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Concurrent strategy pool size; None = derive from CPU count
    SORT_WORKERS: int | None = Field(None, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="BATCH_SORT_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    FastAPI-friendly cached getter. Use Depends(get_settings) where needed.
    """
    return Settings()
