"""Exception taxonomy shared by the services and the HTTP layer.

Services raise these typed errors; routers translate them into status codes
and short client-facing messages. Diagnostic detail stays on the exception
(and in the logs) and is never serialized to the client.
"""

from __future__ import annotations

from fastapi import status


class HoopdexError(Exception):
    """Base class for every error the API knows how to translate."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR


class InvalidRequest(HoopdexError):
    """Client input the API cannot act on, such as an unsupported search type."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateFavorite(HoopdexError):
    """The favorite already exists under the store's uniqueness constraint."""

    status_code = status.HTTP_409_CONFLICT


class FavoriteNotFound(HoopdexError):
    """No favorite exists for the supplied record identifier."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreError(HoopdexError):
    """Any persistence failure other than a uniqueness violation."""


class UpstreamError(HoopdexError):
    """The upstream data API answered with a non-success status."""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        super().__init__(f"Upstream responded with {status_code} {reason}")
        self.status_code = status_code
        self.reason = reason
        self.body = body


class UpstreamFormatError(HoopdexError):
    """The upstream payload did not contain a ``data`` array."""


__all__ = [
    "DuplicateFavorite",
    "FavoriteNotFound",
    "HoopdexError",
    "InvalidRequest",
    "StoreError",
    "UpstreamError",
    "UpstreamFormatError",
]
