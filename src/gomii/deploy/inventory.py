"""Listing of package archives present in the install directory."""

from pathlib import Path

from ..domain.package import PACKAGE_SUFFIX


def list_installed_packages(install_dir: Path) -> list[str]:
    """Return the sorted names of package archives in install_dir.

    Only regular files ending in the package suffix are counted; the suffix is
    stripped from the returned names. A missing directory yields an empty list.
    """
    install_dir = Path(install_dir)
    if not install_dir.is_dir():
        return []
    return sorted(
        entry.name.removesuffix(PACKAGE_SUFFIX)
        for entry in install_dir.iterdir()
        if entry.is_file()
        and entry.name.endswith(PACKAGE_SUFFIX)
        and entry.name != PACKAGE_SUFFIX
    )
