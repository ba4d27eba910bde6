from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./ranchcalc.db"
    farm_header: str = "X-Farm-ID"
    log_level: str = "INFO"
    # CORS
    cors_allow_origins: str = "*"
    # Arroba conventions (kg per arroba)
    live_arroba_kg: Decimal = Decimal("30")  # live-weight purchase/sale pricing
    carcass_arroba_kg: Decimal = Decimal("15")  # carcass-yield revenue
    # Farm-wide daily cost used before any farm config has been saved
    default_global_daily_cost: Decimal = Decimal("0")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_async_scheme(cls, value: str) -> str:
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql+asyncpg://", 1)
        if value.startswith("postgresql://") and "+" not in value.split("://", 1)[0]:
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
