"""Environment-backed settings for the data-access layer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

_POSTGRES_VARS = (
    "POSTGRES_USER",
    "POSTGRES_PASSWORD",
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_DB",
)


@dataclass(frozen=True)
class Settings:
    sql_echo: bool = False
    pool_size: Optional[int] = None
    page_size_default: int = 10
    page_size_max: int = 100


def _normalize_bool(value: str | None, default: bool = False) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def get_database_url() -> str:
    """Resolve the store URL; raise ValueError naming any missing variables."""
    # Test override wins, then an explicit DATABASE_URL
    if os.getenv("BLOG_TEST_DB"):
        return os.getenv("BLOG_TEST_DB")
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    missing = [name for name in _POSTGRES_VARS if not os.getenv(name)]
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return "postgresql://{}:{}@{}:{}/{}".format(*(os.getenv(name) for name in _POSTGRES_VARS))


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings sourced from the environment."""
    return Settings(
        sql_echo=_normalize_bool(os.getenv("SQL_ECHO"), default=False),
        pool_size=_int_env("DB_POOL_SIZE", None),
        page_size_default=_int_env("PAGE_SIZE_DEFAULT", 10),
        page_size_max=_int_env("PAGE_SIZE_MAX", 100),
    )


def refresh_settings_cache() -> None:
    """Clear the cached settings so subsequent calls re-read the environment."""
    get_settings.cache_clear()
