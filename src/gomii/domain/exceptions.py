"""Custom exceptions for gomii."""

from pathlib import Path


class GomiiError(Exception):
    """Base exception for gomii errors."""

    pass


class ClientNotInitialisedError(GomiiError):
    """Raised when an HTTP client is used before it has been opened.

    This typically occurs when calling get() on a client that was not entered
    as a context manager, or accessing a deployer's client outside its
    context.
    """

    pass


class DeployError(GomiiError):
    """Base exception for package deploy failures.

    Every subclass wraps the underlying exception as ``cause`` and prefixes
    its message with the phase that failed.
    """

    prefix = "Deploy failed"

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"{self.prefix}: {cause}")


class PackageDownloadError(DeployError):
    """Raised when the package could not be fetched from the remote host.

    Covers connection and DNS failures, timeouts and non-2xx responses.
    """

    prefix = "Failed to download package"

    def __init__(self, *, url: str, cause: BaseException) -> None:
        self.url = url
        super().__init__(cause)


class PackageSaveError(DeployError):
    """Raised when the destination file could not be created."""

    prefix = "Failed to save package"

    def __init__(self, *, destination_path: Path, cause: BaseException) -> None:
        self.destination_path = destination_path
        super().__init__(cause)


class PackageWriteError(DeployError):
    """Raised when streaming the response body into the destination fails.

    The partially written file is left on disk.
    """

    prefix = "Error writing package data"

    def __init__(
        self,
        *,
        destination_path: Path,
        bytes_written: int,
        cause: BaseException,
    ) -> None:
        self.destination_path = destination_path
        self.bytes_written = bytes_written
        super().__init__(cause)
