# app/core/config.py

import os
from functools import lru_cache
from typing import List, Optional
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


def _parse_origin_list(value: str) -> List[str]:
    return [origin.strip() for origin in (value or "").split(",") if origin.strip()]


class Settings(BaseSettings):
    """
    Application settings.
    Loads values from environment variables (.env file)
    """
    # Seed data
    SEED_PRODUCT_COUNT: int = 10000
    SEED_SALES_DAYS: int = 30
    RANDOM_SEED: Optional[int] = None  # None = unseeded, non-reproducible runs

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # HTTP
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: str = "*"  # comma separated

    model_config = ConfigDict(
        env_file=os.environ.get('ENV_FILE', '.env') if os.path.exists('.env') else None,
        case_sensitive=True,
        extra="ignore"
    )

    @property
    def cors_origin_list(self) -> List[str]:
        return _parse_origin_list(self.CORS_ORIGINS)


@lru_cache()
def get_settings():
    """Cached settings to avoid loading .env file for every request"""
    return Settings()

def clear_settings_cache():
    """Clear the settings cache - useful when switching between environments"""
    get_settings.cache_clear()
