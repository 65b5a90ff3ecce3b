import typing as t
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

DEFAULT_BASE_URL = "https://gomii.example.com"
DEFAULT_INSTALL_DIR = Path("/opt/gomii")


class Environment(Enum):
    """Runtime environment for the application.

    Selects the logging format; nothing else branches on it.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class Settings:
    """Settings container used to bootstrap the app.

    Defaults reproduce the fixed URL template and install directory of the
    deploy tool; the CLI layer decides which values are overridden.
    """

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel | str = LogLevel.INFO
    base_url: str = DEFAULT_BASE_URL
    install_dir: Path = DEFAULT_INSTALL_DIR
    chunk_size: int = 1024
    # None blocks for as long as the server keeps the connection open
    timeout: float | None = None


def build_settings(base: Settings | None = None, **overrides: t.Any) -> Settings:
    """Build Settings from a base instance, ignoring None overrides.

    CLI options that were not passed arrive as None, so only explicitly
    provided values replace the base (or default) settings.
    """
    filtered = {key: value for key, value in overrides.items() if value is not None}
    return replace(base or Settings(), **filtered)
