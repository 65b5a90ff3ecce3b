"""Logging setup built on loguru.

Modules call get_logger(__name__) and receive the shared loguru logger bound
with their module name. Configuration is applied once, either explicitly via
setup_logging(settings) or lazily with defaults on first get_logger call.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)
_PLAIN_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]} - {message}"

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace all loguru sinks with a single stderr sink.

    stdout is reserved for user-facing CLI messages, so every environment logs
    to stderr. Production emits serialized JSON records.
    """
    global _configured

    level_name = LogLevel(level).value
    logger.remove()
    logger.configure(extra={"name": "gomii"})

    match environment:
        case Environment.PRODUCTION:
            logger.add(sys.stderr, level=level_name, serialize=True)
        case Environment.TESTING:
            logger.add(sys.stderr, level=level_name, format=_PLAIN_FORMAT)
        case _:
            logger.add(
                sys.stderr,
                level=level_name,
                format=_DEVELOPMENT_FORMAT,
                colorize=True,
                backtrace=True,
                diagnose=True,
            )

    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return the shared logger bound to a module name.

    Auto-configures with defaults if logging has not been set up yet.
    """
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Remove all sinks and mark logging as unconfigured."""
    global _configured
    logger.remove()
    _configured = False
