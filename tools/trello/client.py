"""
Trello API client - async httpx wrapper with auth and rate-limit capture.

Shared by all Trello operations. Uses query-param auth (?key=...&token=...).
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

# Trello API base URL
API_BASE = "https://api.trello.com/1"

REQUEST_TIMEOUT = 30.0

# Response headers carrying the per-token rate limit window
RATE_LIMIT_HEADERS = {
    "limit": "x-rate-limit-api-token-max",
    "remaining": "x-rate-limit-api-token-remaining",
    "intervalMs": "x-rate-limit-api-token-interval-ms",
}


class TrelloAPIError(Exception):
    """A Trello call failed: bad status, transport failure, or unreadable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class TrelloRequest:
    """One logical Trello call."""

    method: str
    path: str
    description: str
    params: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] | None = None


@dataclass(frozen=True)
class TrelloResponse:
    """Decoded Trello payload plus the rate-limit headers that came with it."""

    data: Any
    rate_limit: dict[str, int] | None = None


def parse_rate_limit(headers: httpx.Headers) -> dict[str, int] | None:
    """Extract rate-limit metadata from response headers, or None if absent."""
    rate_limit = {}
    for key, header in RATE_LIMIT_HEADERS.items():
        value = headers.get(header)
        if value is None:
            continue
        try:
            rate_limit[key] = int(value)
        except ValueError:
            continue
    return rate_limit or None


class TrelloClient:
    """
    Authenticated Trello client bound to one API key / token pair.

    Use as an async context manager; one httpx connection pool per instance.
    """

    def __init__(self, api_key: str, token: str, base_url: str = API_BASE,
                 timeout: float = REQUEST_TIMEOUT):
        self._auth = {"key": api_key, "token": token}
        self._base_url = base_url
        self._timeout = timeout
        self._http: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "TrelloClient":
        self._http = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def call(self, request: TrelloRequest) -> TrelloResponse:
        """
        Perform a Trello request.

        Args:
            request: Method, path, query params and JSON body of the call.

        Returns:
            TrelloResponse with the parsed JSON body ({} for empty bodies).

        Raises:
            TrelloAPIError: On non-2xx status, connection errors, timeouts,
                or a body that is not JSON.
        """
        if self._http is None:
            raise RuntimeError("TrelloClient must be used as an async context manager")

        # Merge auth params into query params
        params = dict(request.params)
        params.update(self._auth)

        kwargs: dict[str, Any] = {"params": params}
        if request.body is not None:
            kwargs["json"] = request.body

        logger.debug("Trello %s %s", request.method, request.path)

        try:
            resp = await self._http.request(request.method, request.path, **kwargs)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            detail = e.response.text.strip() or e.response.reason_phrase
            raise TrelloAPIError(
                f"Trello API returned {status} while trying to {request.description}: {detail}",
                status_code=status,
            ) from e
        except httpx.TimeoutException as e:
            raise TrelloAPIError(
                f"Trello API timed out while trying to {request.description}"
            ) from e
        except httpx.RequestError as e:
            raise TrelloAPIError(
                f"Error connecting to Trello while trying to {request.description}: {e}"
            ) from e

        rate_limit = parse_rate_limit(resp.headers)

        if resp.status_code == 204 or not resp.content:
            return TrelloResponse(data={}, rate_limit=rate_limit)

        try:
            data = resp.json()
        except ValueError as e:
            raise TrelloAPIError(
                f"Trello API returned a malformed response while trying to {request.description}"
            ) from e

        return TrelloResponse(data=data, rate_limit=rate_limit)
