"""Factories for SSL contexts and aiohttp connectors."""

import ssl
import typing as t

import aiohttp
import certifi


def create_ssl_context() -> ssl.SSLContext:
    """Create an SSL context that verifies against certifi's CA bundle.

    System certificate stores are not reliably found on every platform, so
    the bundled certifi roots are always used.
    """
    return ssl.create_default_context(cafile=certifi.where())


def create_secure_connector(
    ssl: ssl.SSLContext | None = None, **kwargs: t.Any
) -> aiohttp.TCPConnector:
    """Create a TCPConnector using the given or a certifi-backed SSL context.

    Must be called with a running event loop.
    """
    return aiohttp.TCPConnector(ssl=ssl or create_ssl_context(), **kwargs)
