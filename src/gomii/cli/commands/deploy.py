"""Deploy command implementation."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from ... import __version__
from ...app import create_app
from ...config.settings import LogLevel, build_settings
from ...deploy import PackageDeployer, list_installed_packages
from ...domain.package import DeployResult, PackageRef
from ..output.progress import (
    display_deploy_complete,
    display_deploy_failed,
    display_deploy_start,
    display_installed_packages,
    display_invalid_package,
    display_list_failed,
    display_package_saved,
    display_usage,
)
from ..state import CLIState


def show_version(value: bool) -> None:
    if value:
        typer.echo(f"gomii-deploy {__version__}")
        raise typer.Exit()


def validate_package(name: str) -> PackageRef:
    """Validate a package name and convert it to a PackageRef.

    Raises:
        typer.Exit: If the name is empty or contains path components
    """
    try:
        return PackageRef(name=name)
    except ValidationError as e:
        display_invalid_package(name, e)
        raise typer.Exit(code=1)


async def deploy_package(
    package: PackageRef, deployer: PackageDeployer
) -> DeployResult:
    """Core deploy logic with an injected deployer.

    Args:
        package: Pre-validated package reference
        deployer: PackageDeployer instance (not yet entered)
    """
    async with deployer:
        return await deployer.deploy(package)


def deploy(
    ctx: typer.Context,
    package_name: Optional[str] = typer.Argument(
        None,
        metavar="<package-name>",
        help="Name of the package archive to download",
        show_default=False,
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Remote root serving /packages/<name>.zip"
    ),
    install_dir: Optional[Path] = typer.Option(
        None,
        "--install-dir",
        "-d",
        help="Existing directory to save the archive into",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Give up after this many seconds", min=0
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output (DEBUG logging)"
    ),
    list_packages: bool = typer.Option(
        False, "--list", help="List archives present in the install directory"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=show_version,
        is_eager=True,
    ),
) -> None:
    """Download <package-name>.zip into the install directory.

    Examples:
        gomii-deploy mypackage
        gomii-deploy mypackage -d ./packages
        gomii-deploy --list

    Arguments after the package name are ignored. Use "--" before a name that
    collides with an option, e.g. "gomii-deploy -- -v2".
    """
    state: CLIState = ctx.obj

    settings = build_settings(
        state.settings,
        base_url=base_url,
        install_dir=install_dir,
        timeout=timeout,
        log_level=LogLevel.DEBUG if verbose else None,
    )
    create_app(settings)

    if list_packages:
        try:
            packages = list_installed_packages(settings.install_dir)
        except OSError as e:
            display_list_failed(settings.install_dir, e)
            raise typer.Exit(code=1)
        display_installed_packages(settings.install_dir, packages)
        return

    if package_name is None:
        display_usage()
        raise typer.Exit(code=1)

    # Validate input early at CLI boundary
    package = validate_package(package_name)
    display_deploy_start(package.source_url(settings.base_url))

    deployer = state.create_deployer(settings)

    try:
        result = asyncio.run(deploy_package(package, deployer))
    except Exception as e:
        display_deploy_failed(e)
        raise typer.Exit(code=1)

    display_package_saved(result.destination_path)
    display_deploy_complete()
