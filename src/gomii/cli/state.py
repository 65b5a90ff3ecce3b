"""CLI state container."""

import typing as t

from ..config.settings import Settings
from ..deploy import PackageDeployer

# Factory signature: creates a deployer configured from settings
DeployerFactory = t.Callable[[Settings], PackageDeployer]


class CLIState:
    """Application state container for CLI commands.

    Holds the base Settings and the factory used to build a PackageDeployer,
    so tests can inject a mocked deployer.
    """

    def __init__(
        self,
        settings: Settings,
        deployer_factory: DeployerFactory | None = None,
    ) -> None:
        self.settings = settings
        self._deployer_factory = deployer_factory or PackageDeployer.from_settings

    def create_deployer(self, settings: Settings | None = None) -> PackageDeployer:
        """Create a deployer from the given settings or the base settings."""
        return self._deployer_factory(settings or self.settings)
