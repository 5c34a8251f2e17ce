# app/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "FreshFruits Export Platform"
    APP_DESC: str = "Carrier rates, shipping documents and support queries"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # Query storage: "sql" uses DATABASE_URL, "memory" keeps records in-process
    DATABASE_URL: str = Field(default="sqlite:///./queries.db")
    QUERY_BACKEND: Literal["sql", "memory"] = "sql"

    # Carrier rate API
    RATES_API_URL: str = "https://api.shipping.com/rates"
    RATES_API_KEY: str | None = None
    # None waits for the carrier indefinitely
    RATES_TIMEOUT_SECONDS: float | None = None

    # Document storage
    STORAGE_BACKEND: Literal["gcs", "memory"] = "memory"
    STORAGE_BUCKET: str = "export-documents"

    # Comma separated, "*" allows every origin
    CORS_ORIGINS: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
