"""FastAPI router exposing add, list and delete for saved players and teams."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from hoopdex.errors import DuplicateFavorite, FavoriteNotFound, StoreError
from hoopdex.schemas.error import ErrorResponse, FailureResponse
from hoopdex.schemas.favorites import (
    FavoriteCreate,
    FavoriteMutationResponse,
    FavoriteRead,
)
from hoopdex.services.dependencies import get_favorites_service
from hoopdex.services.favorites_service import FavoritesService
from hoopdex.utils.error_responses import (
    build_error_response,
    build_failure_response,
    error_json,
)
from hoopdex.utils.request_context import get_request_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=FavoriteMutationResponse,
    responses={
        409: {"model": FailureResponse, "description": "Already saved"},
        500: {"model": FailureResponse, "description": "Persistence failure"},
    },
)
async def add_favorite(
    payload: FavoriteCreate,
    service: FavoritesService = Depends(get_favorites_service),
) -> FavoriteMutationResponse | JSONResponse:
    """Save a player or team returned by a search."""

    try:
        await service.add_favorite(payload)
    except DuplicateFavorite as exc:
        logger.info("Duplicate favorite for request %s: %s", get_request_id(), exc)
        return error_json(
            exc.status_code, build_failure_response("Item already in favorites!")
        )
    except StoreError as exc:
        logger.exception("Error saving favorite for request %s", get_request_id())
        return error_json(
            exc.status_code,
            build_failure_response("Failed to save favorite"),
        )
    return FavoriteMutationResponse(message=f"{payload.name} added to favorites!")


@router.get(
    "",
    response_model=list[FavoriteRead],
    responses={500: {"model": ErrorResponse, "description": "Persistence failure"}},
)
async def list_favorites(
    service: FavoritesService = Depends(get_favorites_service),
) -> list[FavoriteRead] | JSONResponse:
    """Return every saved favorite."""

    try:
        return await service.list_favorites()
    except StoreError as exc:
        logger.exception("Error fetching favorites for request %s", get_request_id())
        return error_json(
            exc.status_code,
            build_error_response("Failed to fetch favorites"),
        )


@router.delete(
    "/{record_id}",
    response_model=FavoriteMutationResponse,
    responses={
        404: {"model": FailureResponse, "description": "No such favorite"},
        500: {"model": FailureResponse, "description": "Persistence failure"},
    },
)
async def delete_favorite(
    record_id: str,
    service: FavoritesService = Depends(get_favorites_service),
) -> FavoriteMutationResponse | JSONResponse:
    """Remove a favorite by its record id."""

    try:
        await service.remove_favorite(record_id)
    except FavoriteNotFound as exc:
        return error_json(
            exc.status_code, build_failure_response("Favorite not found.")
        )
    except StoreError as exc:
        logger.exception("Error deleting favorite for request %s", get_request_id())
        return error_json(
            exc.status_code,
            build_failure_response("Failed to delete favorite."),
        )
    return FavoriteMutationResponse(message="Favorite deleted successfully!")
