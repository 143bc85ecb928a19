from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from shopify_returns.constants.graphql_queries import SCHEMA_VERSION


class Settings(BaseSettings):
    log_level: str = "INFO"

    shopify_api_version: str = Field(SCHEMA_VERSION, min_length=1)
    shopify_timeout_seconds: float = Field(20.0, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def reset_settings_cache() -> None:
    get_settings.cache_clear()
