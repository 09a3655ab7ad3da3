"""
Configuration for the package's own diagnostic logger (the ``fanlog``
namespace of stdlib logging), via code or env.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoggerConfig:
    """
    Where fanlog reports its own diagnostics (receiver registration, sink
    write failures). This is not the Relay/Collector output.

    Use LoggerConfig.from_env() for env-based config, or build explicitly.
    """

    # Level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    level: str = "WARNING"
    # Plain-text log file (if None, file handler is skipped)
    log_file: Optional[str] = None
    # Logger namespace handlers are attached to; module loggers inherit
    root_name: str = "fanlog"
    # Enable console handler
    console: bool = True
    # Console format; None uses PlainConsoleFormatter's default
    fmt: Optional[str] = None

    @classmethod
    def from_env(
        cls,
        *,
        level_var: str = "FANLOG_LOG_LEVEL",
        log_file_var: str = "FANLOG_LOG_FILE",
        console_var: str = "FANLOG_LOG_CONSOLE",
    ) -> "LoggerConfig":
        """Build config from environment variables."""
        level = os.environ.get(level_var, "WARNING").upper()
        log_file = os.environ.get(log_file_var) or None
        console = os.environ.get(console_var, "true").lower() in ("1", "true", "yes")
        return cls(level=level, log_file=log_file, console=console)

    def with_overrides(
        self,
        *,
        level: Optional[str] = None,
        log_file: Optional[str] = None,
        root_name: Optional[str] = None,
        console: Optional[bool] = None,
        fmt: Optional[str] = None,
    ) -> "LoggerConfig":
        """Return a new config with the given overrides (for immutability)."""
        return LoggerConfig(
            level=level if level is not None else self.level,
            log_file=log_file if log_file is not None else self.log_file,
            root_name=root_name or self.root_name,
            console=console if console is not None else self.console,
            fmt=fmt or self.fmt,
        )
