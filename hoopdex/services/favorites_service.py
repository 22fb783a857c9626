"""Business logic powering the favorites API endpoints.

Persistence-oriented operations are delegated to :class:`FavoritesPersistence`:

* ``add`` – inserts a record, raising ``DuplicateFavorite`` on a uniqueness
  violation and ``StoreError`` for anything else.
* ``list_all`` – returns every stored record.
* ``remove`` – deletes by record id and reports whether anything was removed.

The service converts ORM rows into :class:`FavoriteRead` schemas and turns a
missing delete target into :class:`FavoriteNotFound` so routers only deal with
the shared exception taxonomy.
"""

from __future__ import annotations

import logging

from hoopdex.db.models import Favorite
from hoopdex.errors import FavoriteNotFound
from hoopdex.schemas.favorites import FavoriteCreate, FavoriteRead, SubjectType
from hoopdex.services.favorites import FavoritesPersistence

logger = logging.getLogger(__name__)


class FavoritesService:
    """Coordinates favorites persistence for the HTTP layer."""

    def __init__(self, *, persistence: FavoritesPersistence) -> None:
        self._persistence = persistence

    async def add_favorite(self, payload: FavoriteCreate) -> str:
        record_id = await self._persistence.add(
            subject_id=payload.id,
            subject_type=payload.type.value,
            display_name=payload.name,
        )
        logger.info(
            "Saved favorite %s (%s %s) as %s",
            payload.name,
            payload.type.value,
            payload.id,
            record_id,
        )
        return record_id

    async def list_favorites(self) -> list[FavoriteRead]:
        favorites = await self._persistence.list_all()
        return [self.to_schema(favorite) for favorite in favorites]

    async def remove_favorite(self, record_id: str) -> None:
        removed = await self._persistence.remove(record_id)
        if not removed:
            raise FavoriteNotFound(f"No favorite with id {record_id!r}")
        logger.info("Deleted favorite %s", record_id)

    @staticmethod
    def to_schema(favorite: Favorite) -> FavoriteRead:
        """Convert an ORM row into its API representation."""

        return FavoriteRead(
            record_id=favorite.id,
            subject_id=favorite.subject_id,
            subject_type=SubjectType(favorite.subject_type),
            display_name=favorite.display_name,
        )


__all__ = ["FavoritesService"]
