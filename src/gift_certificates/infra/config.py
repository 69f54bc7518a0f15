from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration read from the environment."""

    database_url: str
    default_tag_name: str = "Main"
    log_level: str = "INFO"
    pool_size: int = 10
    max_overflow: int = 20
    pool_recycle: int = 3600


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def load_settings() -> Settings:
    """
    Build Settings from environment variables.

    Required:
        DATABASE_URL

    Optional:
        DEFAULT_TAG_NAME, LOG_LEVEL, DB_POOL_SIZE, DB_MAX_OVERFLOW, DB_POOL_RECYCLE
    """
    return Settings(
        database_url=database_url(),
        default_tag_name=os.getenv("DEFAULT_TAG_NAME", "Main"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        pool_size=int(os.getenv("DB_POOL_SIZE", "10")),
        max_overflow=int(os.getenv("DB_MAX_OVERFLOW", "20")),
        pool_recycle=int(os.getenv("DB_POOL_RECYCLE", "3600")),
    )
