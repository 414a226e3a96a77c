from __future__ import annotations
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment and an optional .env file."""

    PROJECT_NAME: str = "Staff Availability"

    DATABASE_URL: str = "sqlite:///./staff_availability.db"

    BACKEND_CORS_ORIGINS: List[str] = []

    # auth
    SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    LOG_LEVEL: str = "INFO"

    # upper bound for /availability/range queries
    MAX_RESOLVE_RANGE_DAYS: int = 366

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
