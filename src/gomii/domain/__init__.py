"""Domain layer - package models and exceptions."""

from .exceptions import (
    ClientNotInitialisedError,
    DeployError,
    GomiiError,
    PackageDownloadError,
    PackageSaveError,
    PackageWriteError,
)
from .package import PACKAGE_SUFFIX, DeployResult, PackageRef

__all__ = [
    # Models
    "PACKAGE_SUFFIX",
    "PackageRef",
    "DeployResult",
    # Exceptions
    "GomiiError",
    "ClientNotInitialisedError",
    "DeployError",
    "PackageDownloadError",
    "PackageSaveError",
    "PackageWriteError",
]
