"""aiohttp implementation of the HTTP client."""

import typing as t

import aiohttp

from ...domain.exceptions import ClientNotInitialisedError
from .base import BaseHttpClient
from .factories import create_secure_connector

# Replaces aiohttp's implicit total=300s default; fetch deadlines come from
# the caller
NO_TIMEOUT = aiohttp.ClientTimeout(total=None, sock_connect=None)


class AiohttpClient(BaseHttpClient):
    """HTTP client backed by an aiohttp ClientSession.

    When no session is provided, one is created on open() with a
    certifi-backed connector and closed on close(). A provided session is
    used as-is and left open, its owner is responsible for closing it.

    Usage:
        async with AiohttpClient() as client:
            async with client.get(url) as response:
                ...
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        timeout: aiohttp.ClientTimeout | None = None,
    ) -> None:
        self._session = session
        self._owns_session = session is None
        self._timeout = timeout or NO_TIMEOUT

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    async def open(self) -> None:
        """Create the session if needed. Calling open() twice is a no-op."""
        if self._session is not None:
            return
        connector = create_secure_connector()
        self._session = aiohttp.ClientSession(
            connector=connector, timeout=self._timeout
        )
        self._owns_session = True

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()

    def get(self, url: str, **kwargs: t.Any) -> t.Any:
        """Start a GET request on the underlying session.

        Raises:
            ClientNotInitialisedError: If the client has not been opened
        """
        if self._session is None:
            raise ClientNotInitialisedError(
                "HTTP client not initialised, use it as an async context manager "
                "or call open() first"
            )
        return self._session.get(url, **kwargs)
