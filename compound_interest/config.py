"""Environment-driven settings via pydantic-settings."""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings read from ``CALC_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CALC_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # Form state persistence
    state_db_path: str = "calculator_state.db"
    state_key: str = "compoundInterestState"

    # Presentation
    currency_symbol: str = "$"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
