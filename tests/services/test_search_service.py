"""Unit tests for the upstream search proxy."""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from hoopdex.errors import InvalidRequest, UpstreamError, UpstreamFormatError
from hoopdex.services.search_service import SearchService
from tests.support.fake_upstream import UPSTREAM_BASE_URL, FakeUpstream

PLAYERS = [
    {"id": 237, "first_name": "LeBron", "last_name": "James"},
    {"id": 115, "first_name": "Stephen", "last_name": "Curry"},
    {"id": 140, "first_name": "Kevin", "last_name": "Durant"},
]


@pytest_asyncio.fixture
async def http_client(upstream: FakeUpstream) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(upstream)) as client:
        yield client


def _service(http_client: httpx.AsyncClient, api_key: str | None = None) -> SearchService:
    return SearchService(http_client, base_url=UPSTREAM_BASE_URL, api_key=api_key)


@pytest.mark.asyncio
@pytest.mark.parametrize("kind", [None, "", "coach", "PLAYER", "players"])
async def test_unsupported_kind_is_rejected_without_network_call(
    http_client: httpx.AsyncClient, upstream: FakeUpstream, kind: str | None
) -> None:
    with pytest.raises(InvalidRequest, match="Invalid search type specified."):
        await _service(http_client).search(kind, "james")

    assert upstream.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("term", [None, "", "   "])
async def test_player_search_requires_a_term(
    http_client: httpx.AsyncClient, upstream: FakeUpstream, term: str | None
) -> None:
    with pytest.raises(InvalidRequest):
        await _service(http_client).search("player", term)

    assert upstream.requests == []


@pytest.mark.asyncio
async def test_player_search_forwards_term_and_relays_data_verbatim(
    http_client: httpx.AsyncClient, upstream: FakeUpstream
) -> None:
    upstream.respond("/v1/players", json={"data": PLAYERS, "meta": {"per_page": 25}})

    results = await _service(http_client).search("player", "le bron&co")

    assert results == PLAYERS
    assert len(upstream.requests) == 1
    sent = upstream.requests[0]
    assert sent.method == "GET"
    assert sent.url.path == "/v1/players"
    assert sent.url.params["search"] == "le bron&co"


@pytest.mark.asyncio
async def test_team_search_ignores_term_and_fetches_full_listing(
    http_client: httpx.AsyncClient, upstream: FakeUpstream
) -> None:
    teams = [{"id": 14, "name": "Lakers"}, {"id": 10, "name": "Warriors"}]
    upstream.respond("/v1/teams", json={"data": teams})

    results = await _service(http_client).search("team", "lakers")

    assert results == teams
    assert len(upstream.requests) == 1
    assert upstream.requests[0].url.path == "/v1/teams"
    assert upstream.requests[0].url.query == b""


@pytest.mark.asyncio
async def test_authorization_header_only_sent_when_key_configured(
    http_client: httpx.AsyncClient, upstream: FakeUpstream
) -> None:
    upstream.respond("/v1/teams", json={"data": []})

    await _service(http_client).search("team", None)
    await _service(http_client, api_key="secret-key").search("team", None)

    anonymous, authenticated = upstream.requests
    assert "Authorization" not in anonymous.headers
    assert authenticated.headers["Authorization"] == "secret-key"


@pytest.mark.asyncio
async def test_non_success_status_raises_upstream_error(
    http_client: httpx.AsyncClient, upstream: FakeUpstream
) -> None:
    upstream.respond("/v1/players", status_code=401, text="Unauthorized: bad key")

    with pytest.raises(UpstreamError) as exc_info:
        await _service(http_client).search("player", "curry")

    assert exc_info.value.status_code == 401
    assert exc_info.value.reason == "Unauthorized"
    assert exc_info.value.body == "Unauthorized: bad key"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response_kwargs",
    [
        {"json": {"meta": {}}},
        {"json": {"data": {"id": 1}}},
        {"json": [{"id": 1}]},
        {"text": "<html>maintenance</html>"},
    ],
)
async def test_malformed_payload_raises_format_error(
    http_client: httpx.AsyncClient, upstream: FakeUpstream, response_kwargs: dict
) -> None:
    upstream.respond("/v1/teams", **response_kwargs)

    with pytest.raises(UpstreamFormatError):
        await _service(http_client).search("team", None)


@pytest.mark.asyncio
async def test_transport_errors_propagate(
    http_client: httpx.AsyncClient, upstream: FakeUpstream
) -> None:
    upstream.fail("/v1/players")

    with pytest.raises(httpx.ConnectError):
        await _service(http_client).search("player", "durant")

    assert len(upstream.requests) == 1
