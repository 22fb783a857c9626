"""Proxy for the upstream basketball data API.

Player searches forward the term to ``/players?search=``. Team searches
always fetch the full ``/teams`` listing; the teams page narrows it down in
the browser.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from hoopdex.errors import InvalidRequest, UpstreamError, UpstreamFormatError
from hoopdex.schemas.favorites import SubjectType

logger = logging.getLogger(__name__)

_ENDPOINTS: dict[SubjectType, str] = {
    SubjectType.PLAYER: "players",
    SubjectType.TEAM: "teams",
}


class SearchService:
    """Forwards one search to the upstream API and relays its ``data`` array."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        base_url: str,
        api_key: str | None = None,
    ) -> None:
        self._client = http_client
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key

    def _headers(self) -> dict[str, str]:
        if self._api_key:
            return {"Authorization": self._api_key}
        return {}

    def build_request(self, kind: str | None, term: str | None) -> httpx.Request:
        """Validate the search inputs and build the upstream request.

        Raises :class:`InvalidRequest` for an unsupported kind or a player
        search without a term, so invalid input never reaches the network.
        """

        try:
            subject = SubjectType(kind)
        except ValueError as exc:
            raise InvalidRequest("Invalid search type specified.") from exc

        params: dict[str, str] = {}
        if subject is SubjectType.PLAYER:
            if term is None or not term.strip():
                raise InvalidRequest("A search term is required for player searches.")
            params["search"] = term.strip()

        url = f"{self._base_url}/{_ENDPOINTS[subject]}"
        return self._client.build_request(
            "GET", url, params=params or None, headers=self._headers()
        )

    async def search(self, kind: str | None, term: str | None = None) -> list[Any]:
        request = self.build_request(kind, term)
        response = await self._client.send(request)

        if not response.is_success:
            logger.error(
                "API Error %s from %s: %s",
                response.status_code,
                request.url,
                response.text,
            )
            raise UpstreamError(
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=response.text,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("Upstream %s returned a non-JSON body: %s", request.url, response.text)
            raise UpstreamFormatError("Upstream body is not JSON") from exc

        records = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(records, list):
            logger.error("Unexpected API response structure or no 'data' array: %s", payload)
            raise UpstreamFormatError("Upstream payload has no 'data' array")

        logger.debug("Upstream %s returned %d records", request.url, len(records))
        return records


__all__ = ["SearchService"]
