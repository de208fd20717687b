"""
Configuration helpers for the Delfis backend.

Routers, services and repositories read settings through ``get_settings()``
instead of fetching os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    sudoku_store_path: str
    security_enabled: bool
    log_level: str
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _list(value: str | None) -> tuple[str, ...]:
        return tuple(item.strip().rstrip("/") for item in (value or "").split(",") if item.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./delfis.db"),
        sudoku_store_path=os.getenv("SUDOKU_STORE_PATH", "./data/sudoku.json"),
        # Autenticação fica fora desta API; a flag existe só para deixar isso explícito.
        security_enabled=_bool(os.getenv("SECURITY_ENABLED"), False),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=_list(os.getenv("CORS_ORIGINS")),
    )
