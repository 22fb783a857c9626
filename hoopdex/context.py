"""Application context shared by every request handler.

The context is built once per application (normally inside the FastAPI
lifespan hook) and stored on ``app.state``. Tests construct their own context
around an in-memory database and a mocked HTTP transport.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from hoopdex.db.connection import (
    create_engine,
    create_schema,
    create_session_factory,
    sanitize_database_url,
)
from hoopdex.settings import AppSettings

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: AppSettings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    http_client: httpx.AsyncClient

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> AppContext:
        """Build the engine, session factory and HTTP client described by ``settings``."""

        database_url = settings.resolved_database_url
        logger.info("Database Type: %s", settings.database_type.upper())
        logger.info("Database URL: %s", sanitize_database_url(database_url))

        engine = create_engine(database_url)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=create_session_factory(engine),
            http_client=http_client or httpx.AsyncClient(follow_redirects=True),
        )

    async def create_schema(self) -> None:
        await create_schema(self.engine)

    async def aclose(self) -> None:
        """Release the HTTP connection pool and the database engine."""

        await self.http_client.aclose()
        await self.engine.dispose()


__all__ = ["AppContext"]
