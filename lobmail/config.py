from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


API_VERSION = "2019-06-01"
LOB_API_BASE = "https://api.lob.com/v1"


class Settings(BaseSettings):
    lob_api_key: str | None = None
    lob_api_base: str = LOB_API_BASE
    lob_api_version: str = API_VERSION
    lob_timeout_seconds: float | None = None  # None: no internal timeout

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        frozen=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
