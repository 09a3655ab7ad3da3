"""
fanlog's own diagnostic logger: console (and optional file) for the ``fanlog``
stdlib logging namespace.

Usage:
    from fanlog.core.logger import configure, LoggerConfig

    # Surface receiver registration and sink write failures
    configure(LoggerConfig(level="DEBUG"))

    # Or from env: FANLOG_LOG_LEVEL, FANLOG_LOG_FILE, FANLOG_LOG_CONSOLE
    configure()

Library modules use ``logging.getLogger(__name__)``; nothing is printed until
configure() (or get_logger()) attaches handlers.
"""
from fanlog.core.logger.config import LoggerConfig
from fanlog.core.logger.formatters import PlainConsoleFormatter
from fanlog.core.logger.setup import (
    build_console_handler,
    configure,
    get_logger,
    reset,
)

__all__ = [
    "LoggerConfig",
    "PlainConsoleFormatter",
    "configure",
    "get_logger",
    "reset",
    "build_console_handler",
]
