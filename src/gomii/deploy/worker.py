"""HTTP fetch worker that streams a package archive to disk.

This module provides a DownloadWorker class that performs the single GET and
stream-copy of a deploy, translating each failing phase into a classified
DeployError.
"""

import asyncio
import typing as t
from pathlib import Path

import aiofiles
import aiohttp
from aiofiles.threadpool.binary import AsyncBufferedIOBase

from ..domain.exceptions import (
    PackageDownloadError,
    PackageSaveError,
    PackageWriteError,
)
from ..infrastructure.http import BaseHttpClient
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru

# Errors raised by aiohttp and the filesystem in any of the three phases
FetchException = (
    aiohttp.ClientError
    | aiohttp.ClientConnectorError
    | aiohttp.ClientResponseError
    | aiohttp.ClientPayloadError
    | TimeoutError
    | FileNotFoundError
    | PermissionError
    | OSError
)


class DownloadWorker:
    """Fetches one URL into one file.

    The three phases fail independently:
    - request: connection, DNS, timeout or non-2xx status -> PackageDownloadError
      (a timeout while reading the body is also a PackageDownloadError)
    - create: destination file cannot be opened -> PackageSaveError
    - copy: reading the body or writing a chunk fails -> PackageWriteError

    The response and the file handle are released whichever phase fails. The
    destination directory is never created, and a partially written file is
    left on disk.
    """

    def __init__(
        self,
        client: BaseHttpClient,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialize the worker.

        Args:
            client: Opened HTTP client used for the GET request
            logger: Logger instance for recording fetch progress and errors
        """
        self.client = client
        self.logger = logger

    async def _write_chunk_to_file(
        self, chunk: bytes, file_handle: AsyncBufferedIOBase
    ) -> None:
        await file_handle.write(chunk)

    def _log_and_categorize_error(self, exception: FetchException, url: str) -> None:
        """Log a fetch error with a category derived from its type."""
        match exception:
            # SSL errors subclass connector errors, so they are matched first
            case aiohttp.ClientSSLError():
                error_category = "SSL/TLS error connecting to"
            case aiohttp.ClientConnectorError():
                error_category = "Failed to connect to"
            case aiohttp.ClientResponseError():
                error_category = f"HTTP {exception.status} error from"
            case aiohttp.ClientPayloadError():
                error_category = "Invalid response payload from"
            case TimeoutError():
                error_category = "Timeout downloading from"
            case aiohttp.ClientError():
                error_category = "Network error downloading from"

            case FileNotFoundError():
                error_category = "Install directory missing for"
            case PermissionError():
                error_category = "Permission denied saving package from"
            case OSError():
                error_category = "File system error saving package from"

            case _:
                error_category = "Unexpected error downloading from"
                self.logger.debug(
                    f"Uncaught exception of type {type(exception).__name__}: {exception}"
                )

        self.logger.error(f"{error_category} {url}: {exception}")

    async def fetch(
        self,
        url: str,
        destination_path: Path,
        *,
        chunk_size: int = 1024,
        timeout: float | None = None,
    ) -> int:
        """Download url into destination_path and return the bytes written.

        Args:
            url: HTTP/HTTPS URL to download from
            destination_path: File to create or truncate
            chunk_size: Size of chunks read from the response body
            timeout: Upper bound in seconds for the whole fetch (None = no limit)

        Raises:
            PackageDownloadError: Request failed or timed out
            PackageSaveError: Destination file could not be created
            PackageWriteError: Copying the body into the file failed
        """
        self.logger.debug(f"Starting download: {url} -> {destination_path}")

        try:
            async with asyncio.timeout(timeout):
                response = await self._request(url)
                async with response:
                    bytes_written = await self._save_body(
                        url, response, destination_path, chunk_size
                    )
        except TimeoutError as timeout_error:
            self._log_and_categorize_error(timeout_error, url)
            raise PackageDownloadError(url=url, cause=timeout_error) from timeout_error

        self.logger.debug(
            f"Download completed successfully: {destination_path} "
            f"({bytes_written} bytes)"
        )
        return bytes_written

    async def _request(self, url: str) -> aiohttp.ClientResponse:
        try:
            response = await self.client.get(url)
        except (aiohttp.ClientError, OSError) as request_error:
            self._log_and_categorize_error(request_error, url)
            raise PackageDownloadError(url=url, cause=request_error) from request_error

        try:
            # Raises ClientResponseError for 4xx/5xx and releases the response
            response.raise_for_status()
        except aiohttp.ClientResponseError as status_error:
            response.release()
            self._log_and_categorize_error(status_error, url)
            raise PackageDownloadError(url=url, cause=status_error) from status_error

        return response

    async def _save_body(
        self,
        url: str,
        response: aiohttp.ClientResponse,
        destination_path: Path,
        chunk_size: int,
    ) -> int:
        file_opened = False
        bytes_written = 0
        try:
            async with aiofiles.open(destination_path, "wb") as file_handle:
                file_opened = True
                async for chunk in response.content.iter_chunked(chunk_size):
                    await self._write_chunk_to_file(chunk, file_handle)
                    bytes_written += len(chunk)
        except TimeoutError as read_timeout:
            # aiohttp read timeouts subclass both ClientError and TimeoutError
            self._log_and_categorize_error(read_timeout, url)
            raise PackageDownloadError(url=url, cause=read_timeout) from read_timeout
        except (aiohttp.ClientError, OSError) as copy_error:
            self._log_and_categorize_error(copy_error, url)
            if not file_opened:
                raise PackageSaveError(
                    destination_path=destination_path, cause=copy_error
                ) from copy_error
            raise PackageWriteError(
                destination_path=destination_path,
                bytes_written=bytes_written,
                cause=copy_error,
            ) from copy_error

        return bytes_written
