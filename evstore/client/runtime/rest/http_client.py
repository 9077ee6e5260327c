"""aiohttp-backed transport."""

from __future__ import annotations

import asyncio
import logging

import aiohttp

from ...core.exceptions import ConnectionClosedError, TransportError
from ...core.settings import UserCredentials
from .transport import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client implementing the ``Transport`` protocol.

    One ``aiohttp.ClientSession`` is opened lazily and reused for every
    request. Basic authentication is attached when credentials are given and
    ``timeout`` (seconds) bounds each whole request/response cycle.
    """

    def __init__(
        self,
        *,
        credentials: UserCredentials | None = None,
        timeout: float | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._auth = (
            aiohttp.BasicAuth(credentials.username, credentials.password)
            if credentials is not None
            else None
        )
        self._session: aiohttp.ClientSession | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._closed:
            raise ConnectionClosedError("HTTP client is closed")
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, auth=self._auth)
        return self._session

    async def send(self, request: HttpRequest) -> HttpResponse:
        """Send ``request`` and return the response whatever its status."""
        session = self.session
        try:
            async with session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body,
            ) as response:
                body = await response.read()
                result = HttpResponse(
                    status=response.status,
                    reason=response.reason or "",
                    headers=dict(response.headers),
                    body=body,
                )
        except asyncio.TimeoutError as exc:
            raise TransportError(f"{request.method} {request.url} timed out") from exc
        except aiohttp.ClientError as exc:
            raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc

        logger.debug(
            "HTTP round trip completed",
            extra={"method": request.method, "url": request.url, "status": result.status},
        )
        return result

    async def close(self) -> None:
        """Close session."""
        self._closed = True
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
