"""Deploy operations - deployer, fetch worker and install inventory."""

from .deployer import PackageDeployer, WorkerFactory
from .inventory import list_installed_packages
from .worker import DownloadWorker

__all__ = [
    "PackageDeployer",
    "DownloadWorker",
    "WorkerFactory",
    "list_installed_packages",
]
