"""
Concrete exception types.
"""
from __future__ import annotations

from fanlog.core.exceptions.base import FanlogError


class ConfigurationError(FanlogError):
    """Invalid environment value or receiver tree configuration."""

    default_code = "CONFIGURATION_ERROR"


class SinkWriteError(FanlogError):
    """A Collector's sink rejected or failed a write."""

    default_code = "SINK_WRITE_ERROR"


class RelayPanic(FanlogError):
    """
    Raised by the panic family after the message has been logged.

    ``str(exc)`` is the formatted, prefixed message.
    """

    default_code = "PANIC"
