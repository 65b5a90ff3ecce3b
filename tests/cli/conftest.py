"""Shared fixtures for CLI tests."""

import pytest

from gomii.cli.app import create_cli_app
from gomii.cli.state import CLIState
from gomii.deploy import PackageDeployer
from gomii.domain.package import DeployResult


@pytest.fixture
def deploy_result(install_dir):
    return DeployResult(
        package="toolkit",
        source_url="https://gomii.example.com/packages/toolkit.zip",
        destination_path=install_dir / "toolkit.zip",
        bytes_written=42,
    )


@pytest.fixture
def mock_deployer(mocker, deploy_result):
    """Provide fully mocked PackageDeployer with spec for type safety."""
    mock = mocker.AsyncMock(spec=PackageDeployer)
    # Configure context manager behavior
    mock.__aenter__.return_value = mock
    mock.__aexit__.return_value = None
    mock.deploy.return_value = deploy_result
    return mock


@pytest.fixture
def deployer_factory(mocker, mock_deployer):
    """Deployer factory recording the settings it was called with."""
    return mocker.Mock(return_value=mock_deployer)


@pytest.fixture
def cli_state_with_mock_deployer(test_settings, deployer_factory):
    """CLIState that returns the mocked deployer."""
    return CLIState(test_settings, deployer_factory=deployer_factory)


@pytest.fixture
def app_with_mock_deployer(cli_state_with_mock_deployer):
    """CLI app with mocked deployer factory for testing."""
    return create_cli_app(state=cli_state_with_mock_deployer)
