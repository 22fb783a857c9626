"""Database-oriented helpers for saved favorites."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hoopdex.db.models import Favorite, new_record_id
from hoopdex.errors import DuplicateFavorite, StoreError
from hoopdex.schemas.favorites import SubjectType

logger = logging.getLogger(__name__)


def _normalize_record_id(record_id: str) -> str | None:
    """Return the canonical UUID string, or ``None`` when ``record_id`` is malformed."""

    try:
        return str(uuid.UUID(str(record_id)))
    except ValueError:
        return None


class FavoritesPersistence:
    """Encapsulates SQLAlchemy operations required by the favorites domain.

    Writes commit immediately so every add or delete is durable by the time
    the call returns, independent of the surrounding request session.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, subject_id: int, subject_type: str, display_name: str) -> str:
        """Persist a favorite and return its freshly assigned record id."""

        if subject_id is None or not subject_type or not display_name:
            raise StoreError("subject_id, subject_type and display_name are required")
        try:
            kind = SubjectType(subject_type)
        except ValueError as exc:
            raise StoreError(f"Unsupported subject type: {subject_type!r}") from exc

        favorite = Favorite(
            id=new_record_id(),
            subject_id=subject_id,
            subject_type=kind.value,
            display_name=display_name,
        )
        self._session.add(favorite)
        try:
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            # Presence and enum are checked above, which leaves the unique
            # constraint as the only one an insert can trip.
            raise DuplicateFavorite(
                f"{kind.value} {subject_id} ({display_name}) is already saved"
            ) from exc
        except (SQLAlchemyError, OverflowError) as exc:
            # OverflowError: the driver cannot bind an integer this wide.
            await self._session.rollback()
            raise StoreError(str(exc)) from exc
        return favorite.id

    async def list_all(self) -> list[Favorite]:
        """Return every favorite in insertion order."""

        query = select(Favorite).order_by(Favorite.created_at, Favorite.id)
        try:
            result = await self._session.execute(query)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc
        return list(result.scalars().all())

    async def remove(self, record_id: str) -> bool:
        """Delete a favorite, returning ``False`` when no such record exists.

        Identifiers that are not UUIDs cannot name a stored record and are
        reported as missing without touching the database.
        """

        key = _normalize_record_id(record_id)
        if key is None:
            logger.debug("Ignoring malformed favorite id %r", record_id)
            return False

        try:
            favorite = await self._session.get(Favorite, key)
            if favorite is None:
                return False
            await self._session.delete(favorite)
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise StoreError(str(exc)) from exc
        return True


__all__ = ["FavoritesPersistence"]
