"""Runtime settings sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

DEFAULT_DATABASE_URL = "sqlite:///squads.db"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


def _normalize_bool(value: str | None, default: bool = True) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _parse_port(value: str | None) -> int:
    if not value:
        return DEFAULT_PORT
    try:
        port = int(value)
    except ValueError:
        raise ValueError(f"SQUADS_PORT must be an integer, got {value!r}")
    if not 0 < port < 65536:
        raise ValueError(f"SQUADS_PORT out of range: {port}")
    return port


def _split_csv(value: str | None) -> Tuple[str, ...]:
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    database_url: str
    host: str
    port: int
    log_level: str
    auto_migrate: bool
    cors_allow_origins: Tuple[str, ...]


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings for this process."""
    return Settings(
        database_url=os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
        host=os.getenv("SQUADS_HOST") or DEFAULT_HOST,
        port=_parse_port(os.getenv("SQUADS_PORT")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        auto_migrate=_normalize_bool(os.getenv("AUTO_MIGRATE"), default=True),
        cors_allow_origins=_split_csv(os.getenv("CORS_ALLOW_ORIGINS")),
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
