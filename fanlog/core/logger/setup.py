"""
Diagnostic logger setup: attach console and file handlers from config.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from fanlog.core.logger.config import LoggerConfig
from fanlog.core.logger.formatters import PlainConsoleFormatter

# Module-level config; set by configure(), consulted by get_logger()
_default_config: Optional[LoggerConfig] = None


def configure(config: Optional[LoggerConfig] = None) -> logging.Logger:
    """
    Configure the ``fanlog`` logger namespace with the given config.
    If config is None, uses LoggerConfig.from_env().
    Returns the configured namespace logger.
    """
    global _default_config
    if config is None:
        config = LoggerConfig.from_env()
    _default_config = config

    level = getattr(logging, config.level.upper(), logging.WARNING)
    root = logging.getLogger(config.root_name)
    root.setLevel(level)

    # Avoid duplicate handlers when reconfigured (e.g. in tests)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if config.console:
        root.addHandler(build_console_handler(config.level, fmt=config.fmt))

    if config.log_file and config.log_file.strip():
        directory = os.path.dirname(config.log_file)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
        except OSError:
            root.warning("Could not create log dir %s, skipping file handler", directory)
        else:
            file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(PlainConsoleFormatter(fmt=config.fmt))
            root.addHandler(file_handler)

    root.propagate = False
    return root


def get_logger(name: str, config: Optional[LoggerConfig] = None) -> logging.Logger:
    """
    Return a logger for the given name. If configure() was never called,
    calls configure(config or from_env()) so the namespace has handlers.
    """
    if _default_config is None:
        configure(config)
    return logging.getLogger(name)


def reset() -> None:
    """Forget the active config; the next get_logger() reconfigures."""
    global _default_config
    _default_config = None


def build_console_handler(
    level: str = "WARNING",
    fmt: Optional[str] = None,
) -> logging.StreamHandler:
    """Build a standalone console handler with plain formatter (for custom use)."""
    handler = logging.StreamHandler()
    handler.setLevel(getattr(logging, level.upper(), logging.WARNING))
    handler.setFormatter(PlainConsoleFormatter(fmt=fmt))
    return handler
