"""CLI application factory."""

import typer

from ..config.settings import Settings
from .commands.deploy import deploy
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None,
    state: CLIState | None = None,
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional base Settings, e.g. for testing
        state: Optional fully built CLIState; takes precedence over settings

    Returns:
        Configured Typer application. It has a single command, so it is
        invoked as ``gomii-deploy <package-name>`` without a subcommand.
    """
    resolved_state = state or CLIState(settings or Settings())

    app = typer.Typer(
        name="gomii-deploy",
        help="Download a gomii package archive into the install directory",
        add_completion=False,
    )
    app.command(
        context_settings={
            "obj": resolved_state,
            # Names such as "-beta" reach the command; trailing args are ignored
            "ignore_unknown_options": True,
            "allow_extra_args": True,
        }
    )(deploy)
    return app
