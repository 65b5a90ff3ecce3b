"""Pytest configuration and fixtures for gomii tests."""

import typing as t

import loguru
import pytest
import pytest_asyncio
from blockbuster import BlockBuster, blockbuster_ctx
from typer.testing import CliRunner

from gomii.app import create_app
from gomii.cli.app import create_cli_app
from gomii.config.settings import Environment, LogLevel, Settings
from gomii.infrastructure.http import AiohttpClient
from gomii.infrastructure.logging import reset_logging


@pytest.fixture(autouse=True)
def blockbuster() -> t.Iterator[BlockBuster]:
    """Detect blocking calls in async event loop during tests.

    Raises a BlockingError if gomii code performs blocking I/O (like a
    synchronous file write) inside the event loop.
    """
    with blockbuster_ctx(
        scanned_modules=["gomii"],
    ) as bb:
        # Third party modules use these functions, so we deactivate them
        # for now
        bb.functions["os.path.abspath"].deactivate()

        yield bb


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def install_dir(tmp_path):
    """Provide an existing, empty install directory."""
    directory = tmp_path / "gomii"
    directory.mkdir()
    return directory


@pytest.fixture
def test_settings(install_dir):
    """Provide test-specific settings pointing at a temporary install dir."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
        install_dir=install_dir,
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest_asyncio.fixture
async def http_client():
    """Provide an opened AiohttpClient for integration testing."""
    async with AiohttpClient() as client:
        yield client


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()


@pytest.fixture
def test_cli_app(test_settings):
    """Provide CLI app with test settings injected."""
    return create_cli_app(settings=test_settings)
