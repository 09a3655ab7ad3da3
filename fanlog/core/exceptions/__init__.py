"""
Package exception system.

Usage:
    from fanlog.core.exceptions import FanlogError, ConfigurationError, RelayPanic

    try:
        relay.panicf("disk %s gone", "/dev/sda")
    except RelayPanic as exc:
        print(exc)  # "disk /dev/sda gone"
"""
from fanlog.core.exceptions.base import FanlogError
from fanlog.core.exceptions.errors import (
    ConfigurationError,
    RelayPanic,
    SinkWriteError,
)

__all__ = [
    "FanlogError",
    "ConfigurationError",
    "SinkWriteError",
    "RelayPanic",
]
