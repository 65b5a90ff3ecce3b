"""Display functions for CLI.

All messages go to stdout, including failures.
"""

from pathlib import Path

import typer

USAGE = "Usage: gomii-deploy <package-name>"


def display_usage() -> None:
    typer.echo(USAGE)


def display_invalid_package(name: str, error: Exception) -> None:
    typer.secho(f"✗ Invalid package name: {name}", fg=typer.colors.RED)
    typer.secho(f"  {error}", fg=typer.colors.RED)


def display_deploy_start(url: str) -> None:
    """Display download started message."""
    typer.echo(f"Downloading: {url}")


def display_package_saved(destination_path: Path) -> None:
    typer.secho(
        f"Package downloaded successfully: {destination_path}", fg=typer.colors.GREEN
    )


def display_deploy_complete() -> None:
    typer.secho("Deployment complete!", fg=typer.colors.GREEN)


def display_deploy_failed(error: Exception) -> None:
    """Display error message."""
    typer.secho(f"Deployment failed: {error}", fg=typer.colors.RED)


def display_installed_packages(install_dir: Path, packages: list[str]) -> None:
    """Display archives found in the install directory."""
    if not packages:
        typer.echo(f"No packages installed in {install_dir}")
        return

    typer.echo(f"Packages installed in {install_dir}:")
    for name in packages:
        typer.echo(f"  - {name}")


def display_list_failed(install_dir: Path, error: Exception) -> None:
    typer.secho(
        f"Failed to list packages in {install_dir}: {error}", fg=typer.colors.RED
    )
