"""gomii - download package archives into the local install directory."""

__version__ = "0.1.0"

from .app import App, create_app
from .config.settings import Settings
from .deploy import DownloadWorker, PackageDeployer, list_installed_packages
from .domain import (
    DeployError,
    DeployResult,
    PackageDownloadError,
    PackageRef,
    PackageSaveError,
    PackageWriteError,
)

__all__ = [
    "__version__",
    "App",
    "create_app",
    "Settings",
    "PackageDeployer",
    "DownloadWorker",
    "list_installed_packages",
    "PackageRef",
    "DeployResult",
    "DeployError",
    "PackageDownloadError",
    "PackageSaveError",
    "PackageWriteError",
]
