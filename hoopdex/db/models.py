"""SQLAlchemy ORM models for saved players and teams.

A favorite is a copy of the few upstream fields the pages need to render the
favorites list. Rows are inserted and deleted, never updated in place.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


def utcnow():
    """Return current UTC datetime."""
    return datetime.now(timezone.utc)


def new_record_id() -> str:
    return str(uuid.uuid4())


class Favorite(Base):
    """A player or team the user marked as saved."""

    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint(
            "subject_id",
            "subject_type",
            "display_name",
            name="uq_favorites_subject",
        ),
        CheckConstraint(
            "subject_type IN ('player', 'team')",
            name="ck_favorites_subject_type",
        ),
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_record_id,
        doc=(
            "UUID4 string assigned at creation. Identifiers are random so a"
            " deleted record's id is never handed out again."
        ),
    )
    subject_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        doc="Player or team identifier from the upstream API.",
    )
    subject_type: Mapped[str] = mapped_column(String(16), nullable=False)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )


__all__ = ["Base", "Favorite", "new_record_id", "utcnow"]
