"""Pydantic schemas that power the favorites API surface."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class SubjectType(str, Enum):
    """Kinds of upstream records a favorite (or a search) can refer to."""

    PLAYER = "player"
    TEAM = "team"


class FavoriteCreate(BaseModel):
    """Payload posted by the search pages when the user saves a result.

    Field names follow the upstream record shape the pages already hold
    (``id``/``type``/``name``) rather than the stored column names.
    """

    id: int = Field(..., description="Player or team id from the upstream API")
    type: SubjectType = Field(..., description="Whether ``id`` names a player or a team")
    name: str = Field(..., min_length=1, max_length=255, description="Label shown in lists")

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Name must not be blank once whitespace is removed")
        return cleaned


class FavoriteRead(BaseModel):
    """A stored favorite serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    record_id: str
    subject_id: int
    subject_type: SubjectType
    display_name: str


class FavoriteMutationResponse(BaseModel):
    """Acknowledgement returned by add and delete."""

    success: bool = True
    message: str


__all__ = [
    "FavoriteCreate",
    "FavoriteMutationResponse",
    "FavoriteRead",
    "SubjectType",
]
