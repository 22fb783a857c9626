"""FastAPI dependency wiring for backend services.

Every dependency resolves its infrastructure from the :class:`AppContext`
stored on ``app.state``, so a test can swap the database or the upstream
transport by installing a different context.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from hoopdex.context import AppContext
from hoopdex.services.favorites import FavoritesPersistence
from hoopdex.services.favorites_service import FavoritesService
from hoopdex.services.search_service import SearchService


def get_context(request: Request) -> AppContext:
    return request.app.state.context


async def get_db(context: AppContext = Depends(get_context)) -> AsyncIterator[AsyncSession]:
    """
    Dependency to provide database session.

    Yields async session and ensures proper cleanup even on errors.
    """
    async with context.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_favorites_service(session: AsyncSession = Depends(get_db)) -> FavoritesService:
    return FavoritesService(persistence=FavoritesPersistence(session))


def get_search_service(context: AppContext = Depends(get_context)) -> SearchService:
    """Wire the shared HTTP client and upstream settings into a :class:`SearchService`."""

    return SearchService(
        context.http_client,
        base_url=context.settings.upstream_base_url,
        api_key=context.settings.upstream_api_key,
    )


__all__ = [
    "get_context",
    "get_db",
    "get_favorites_service",
    "get_search_service",
]
