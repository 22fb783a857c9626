"""Centralized configuration management for the Hoopdex backend."""

from __future__ import annotations

import logging
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load a local .env before the settings singleton is built so scripts that only
# import :mod:`hoopdex.settings` observe the same environment as the API.
load_dotenv()

# -- Application-wide constants -------------------------------------------------

DEFAULT_SQLITE_DATABASE_URL = "sqlite+aiosqlite:///./hoopdex.db"
SQLITE_PREFIX = "sqlite"
POSTGRES_ASYNC_PREFIX = "postgresql+psycopg://"
POSTGRES_SYNC_PREFIXES = ("postgres://", "postgresql://")
DEFAULT_UPSTREAM_BASE_URL = "https://api.balldontlie.io/v1"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_STATIC_DIR = "public"


class AppSettings(BaseSettings):
    """Typed configuration surface built on top of ``pydantic-settings``.

    Every option can be supplied through the process environment or a ``.env``
    file. Derived values such as the async database URL live in properties so
    callers never re-implement the parsing rules.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    database_url: str | None = Field(
        default=None,
        alias="DATABASE_URL",
        description=(
            "SQLAlchemy-compatible database URL. Postgres URLs supplied in sync"
            " format (postgres:// or postgresql://) are coerced into the async"
            " psycopg driver string. Unset falls back to a local SQLite file."
        ),
    )
    upstream_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "BALLDONTLIE_API_KEY",
            # Spelling used by deployments configured for the first release.
            "BALLLDONTLIE_API_KEY",
        ),
        description=(
            "Optional balldontlie API key sent verbatim in the Authorization"
            " header. When unset the upstream is called unauthenticated."
        ),
    )
    upstream_base_url: str = Field(
        default=DEFAULT_UPSTREAM_BASE_URL,
        alias="BALLDONTLIE_BASE_URL",
        description="Base URL of the upstream basketball data API.",
    )
    host: str = Field(
        default=DEFAULT_HOST,
        alias="HOST",
        description="Interface the HTTP server binds to.",
    )
    port: int = Field(
        default=DEFAULT_PORT,
        alias="PORT",
        description="TCP port the HTTP server listens on.",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        alias="LOG_LEVEL",
        description="Root logging level (e.g. INFO, DEBUG, WARNING).",
    )
    static_dir: str = Field(
        default=DEFAULT_STATIC_DIR,
        alias="STATIC_DIR",
        description="Directory served under /static when it exists.",
    )

    @property
    def resolved_database_url(self) -> str:
        """Return the async-compatible database URL after applying fallbacks."""

        if not self.database_url or not self.database_url.strip():
            return DEFAULT_SQLITE_DATABASE_URL

        url = self.database_url.strip()

        for prefix in POSTGRES_SYNC_PREFIXES:
            if url.startswith(prefix):
                return url.replace(prefix, POSTGRES_ASYNC_PREFIX, 1)

        if url.startswith(POSTGRES_ASYNC_PREFIX) or url.startswith(SQLITE_PREFIX):
            return url

        raise RuntimeError(
            f"Expected a PostgreSQL or SQLite connection string, received: {url}"
        )

    @property
    def database_type(self) -> str:
        """Return ``sqlite`` when using SQLite otherwise ``postgresql``."""

        if self.resolved_database_url.startswith(SQLITE_PREFIX):
            return "sqlite"
        return "postgresql"

    @property
    def upstream_authenticated(self) -> bool:
        return bool(self.upstream_api_key)

    @property
    def log_level_numeric(self) -> int:
        """Translate ``log_level`` into the numeric constant expected by logging."""

        candidate = logging.getLevelName(self.log_level.upper())
        if isinstance(candidate, int):
            return candidate
        return logging.INFO

    def optional_config_warnings(self) -> list[str]:
        """Return human-readable warnings for unset optional configuration."""

        warnings: list[str] = []

        if not self.upstream_authenticated:
            warnings.append(
                "BALLDONTLIE_API_KEY is not set - upstream searches are sent "
                "unauthenticated and may be rejected or rate limited"
            )

        if not self.database_url:
            warnings.append(
                "DATABASE_URL is not set - favorites are stored in a local "
                f"SQLite file ({DEFAULT_SQLITE_DATABASE_URL})"
            )

        return warnings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return a cached instance of :class:`AppSettings`."""

    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_HOST",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_PORT",
    "DEFAULT_SQLITE_DATABASE_URL",
    "DEFAULT_STATIC_DIR",
    "DEFAULT_UPSTREAM_BASE_URL",
    "POSTGRES_ASYNC_PREFIX",
    "POSTGRES_SYNC_PREFIXES",
    "get_settings",
]
