"""Package deployer tying package references to the fetch worker.

This module provides the PackageDeployer class, which owns the HTTP client
lifecycle and turns a package name into one download into the install
directory.
"""

import typing as t
from pathlib import Path

from ..config.settings import DEFAULT_BASE_URL, DEFAULT_INSTALL_DIR, Settings
from ..domain.exceptions import ClientNotInitialisedError
from ..domain.package import DeployResult, PackageRef
from ..infrastructure.http import AiohttpClient, BaseHttpClient
from ..infrastructure.logging import get_logger
from .worker import DownloadWorker

if t.TYPE_CHECKING:
    import loguru

# Factory signature: creates worker given client and logger
WorkerFactory = t.Callable[[BaseHttpClient, "loguru.Logger"], DownloadWorker]


class PackageDeployer:
    """Downloads package archives from a base URL into an install directory.

    Uses the context manager pattern for the HTTP client: if no client is
    provided, an AiohttpClient is created on entry and closed on exit.

    Usage:
        async with PackageDeployer() as deployer:
            result = await deployer.deploy("mypackage")

    Or from application settings:
        async with PackageDeployer.from_settings(settings) as deployer:
            ...
    """

    def __init__(
        self,
        client: BaseHttpClient | None = None,
        worker_factory: WorkerFactory | None = None,
        base_url: str = DEFAULT_BASE_URL,
        install_dir: Path = DEFAULT_INSTALL_DIR,
        chunk_size: int = 1024,
        timeout: float | None = None,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialise the deployer.

        Args:
            client: HTTP client for downloads. If None, one is created on entry.
            worker_factory: Factory for the fetch worker. If None, defaults to
                           the DownloadWorker constructor.
            base_url: Remote root; archives live under <base_url>/packages/.
            install_dir: Existing directory archives are written into.
            chunk_size: Size of chunks streamed from the response body.
            timeout: Upper bound in seconds for one fetch (None = no limit).
            logger: Logger instance for recording deploy events.
        """
        self._client = client
        self._owns_client = False
        self._worker_factory = worker_factory or DownloadWorker
        self._worker: DownloadWorker | None = None
        self.base_url = base_url
        self.install_dir = Path(install_dir)
        self.chunk_size = chunk_size
        self.timeout = timeout
        self._logger = logger

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: t.Any) -> "PackageDeployer":
        """Create a deployer configured from application settings."""
        return cls(
            base_url=settings.base_url,
            install_dir=settings.install_dir,
            chunk_size=settings.chunk_size,
            timeout=settings.timeout,
            **kwargs,
        )

    async def __aenter__(self) -> "PackageDeployer":
        if self._client is None:
            self._client = AiohttpClient()
            self._owns_client = True
        await self._client.open()
        return self

    async def __aexit__(self, *args: t.Any) -> None:
        if self._owns_client and self._client is not None:
            await self._client.close()
            self._client = None
            self._owns_client = False
        self._worker = None

    @property
    def client(self) -> BaseHttpClient:
        """Get the HTTP client.

        Raises:
            ClientNotInitialisedError: If accessed before entering the context
                manager without providing a client.
        """
        if self._client is None:
            raise ClientNotInitialisedError(
                "PackageDeployer must be used as a context manager or "
                "initialised with a client"
            )
        return self._client

    @property
    def worker(self) -> DownloadWorker:
        if self._worker is None:
            self._worker = self._worker_factory(self.client, self._logger)
        return self._worker

    def resolve(self, package: PackageRef | str) -> tuple[str, Path]:
        """Return the (source URL, destination path) pair for a package."""
        if isinstance(package, str):
            package = PackageRef(name=package)
        return (
            package.source_url(self.base_url),
            package.destination_path(self.install_dir),
        )

    async def deploy(self, package: PackageRef | str) -> DeployResult:
        """Download a package archive into the install directory.

        Args:
            package: Package reference or bare package name.

        Returns:
            DeployResult describing where the archive was written.

        Raises:
            pydantic.ValidationError: If a bare name is not a valid package name
            PackageDownloadError: If the archive could not be fetched
            PackageSaveError: If the destination file could not be created
            PackageWriteError: If streaming the archive to disk failed
        """
        if isinstance(package, str):
            package = PackageRef(name=package)
        source_url, destination_path = self.resolve(package)

        self._logger.info(f"Deploying package {package.name} from {source_url}")
        bytes_written = await self.worker.fetch(
            source_url,
            destination_path,
            chunk_size=self.chunk_size,
            timeout=self.timeout,
        )
        self._logger.info(
            f"Package {package.name} saved to {destination_path} "
            f"({bytes_written} bytes)"
        )

        return DeployResult(
            package=package.name,
            source_url=source_url,
            destination_path=destination_path,
            bytes_written=bytes_written,
        )
