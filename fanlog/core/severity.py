"""
Message priorities, most urgent first (RFC 3164 numbering).

A receiver emits a message when ``verbosity >= severity``: a lower value is
more urgent and passes every looser threshold.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Union

from fanlog.core.exceptions import ConfigurationError


class Severity(IntEnum):
    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @classmethod
    def parse(cls, value: Union["Severity", int, str]) -> "Severity":
        """
        Resolve a severity from config input: member, int, numeric string,
        display name or short alias ("warn", "crit"). Case insensitive.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ConfigurationError(f"Invalid severity: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as exc:
                raise ConfigurationError(f"Severity out of range: {value!r}", cause=exc) from exc
        key = str(value).strip().upper()
        if key.isdigit():
            return cls.parse(int(key))
        key = _ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError as exc:
            raise ConfigurationError(
                f"Unknown severity: {value!r}. Known: {list(SEVERITY_NAMES)}",
                cause=exc,
            ) from exc


_ALIASES = {
    "EMERG": "EMERGENCY",
    "CRIT": "CRITICAL",
    "ERR": "ERROR",
    "WARN": "WARNING",
}

SEVERITY_NAMES: tuple[str, ...] = tuple(s.name for s in Severity)


def severity_name(severity: int) -> str:
    # No range check: callers own the precondition.
    return SEVERITY_NAMES[severity]
