"""Base interface for HTTP clients."""

import typing as t
from abc import ABC, abstractmethod


class BaseHttpClient(ABC):
    """Abstract HTTP client with an explicit open/close lifecycle.

    Implementations must be usable as async context managers; get() is only
    valid between open() and close().
    """

    @property
    @abstractmethod
    def closed(self) -> bool:
        """True when the client has no open session."""
        pass

    @abstractmethod
    async def open(self) -> None:
        pass

    @abstractmethod
    async def close(self) -> None:
        pass

    @abstractmethod
    def get(self, url: str, **kwargs: t.Any) -> t.Any:
        """Start a GET request.

        Returns an object that can be awaited for the response or used as an
        async context manager.
        """
        pass

    async def __aenter__(self) -> t.Self:
        await self.open()
        return self

    async def __aexit__(self, *args: t.Any) -> None:
        await self.close()

