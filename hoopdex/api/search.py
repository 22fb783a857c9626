import logging
from typing import Any

import httpx
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from hoopdex.errors import InvalidRequest, UpstreamError, UpstreamFormatError
from hoopdex.schemas.error import ErrorResponse
from hoopdex.services.dependencies import get_search_service
from hoopdex.services.search_service import SearchService
from hoopdex.utils.error_responses import build_error_response, error_json
from hoopdex.utils.request_context import get_request_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[Any],
    responses={
        400: {"model": ErrorResponse, "description": "Unsupported search type"},
        500: {"model": ErrorResponse, "description": "Upstream or transport failure"},
    },
)
async def search(
    kind: str | None = Query(
        None, alias="type", description="What to search for: 'player' or 'team'."
    ),
    term: str | None = Query(
        None,
        description="Free-text player query. Ignored for teams, which are filtered client-side.",
    ),
    service: SearchService = Depends(get_search_service),
) -> list[Any] | JSONResponse:
    """Relay a player or team search to the upstream API.

    Examples:
        /api/search?type=player&term=lebron   # Players matching "lebron"
        /api/search?type=team                 # Every team, unfiltered
    """

    try:
        return await service.search(kind, term)
    except InvalidRequest as exc:
        logger.warning("Rejected search request %s: %s", get_request_id(), exc)
        return error_json(exc.status_code, build_error_response(str(exc)))
    except UpstreamError as exc:
        # Status and body were logged by the service; only the reason goes out.
        return error_json(
            exc.status_code,
            build_error_response(f"Failed to fetch data from API: {exc.reason}"),
        )
    except UpstreamFormatError as exc:
        return error_json(
            exc.status_code,
            build_error_response("Unexpected API response format."),
        )
    except httpx.HTTPError:
        logger.exception("Error fetching data from upstream for request %s", get_request_id())
        return error_json(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            build_error_response("Failed to fetch data"),
        )
