"""
fanlog.config.default – settings for the process-wide default Relay.

Env vars: FANLOG_VERBOSITY, FANLOG_COLLECTOR_VERBOSITY, FANLOG_FLAGS, FANLOG_PREFIX.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from fanlog.core.exceptions import ConfigurationError
from fanlog.core.flags import Flag, parse_flags
from fanlog.core.severity import Severity


@dataclass(frozen=True)
class DefaultRelayConfig:
    """
    Default Relay and its stderr Collector.

    All fields are validated on construction. Use load_default_relay_config()
    to build from environment variables.
    """

    verbosity: Severity = Severity.DEBUG
    """Relay gate."""

    collector_verbosity: Severity = Severity.DEBUG
    """Gate of the stderr Collector."""

    flags: Flag = field(default=Flag.SHORTFILE | Flag.STD)
    """Format flags of the stderr Collector. The Relay itself starts at 0."""

    prefix: str = ""
    """Relay prefix."""

    def __post_init__(self) -> None:
        if not isinstance(self.verbosity, Severity):
            raise ConfigurationError(f"verbosity must be a Severity, got {self.verbosity!r}")
        if not isinstance(self.collector_verbosity, Severity):
            raise ConfigurationError(
                f"collector_verbosity must be a Severity, got {self.collector_verbosity!r}"
            )
        if not isinstance(self.flags, int) or self.flags < 0:
            raise ConfigurationError(f"flags must be a non-negative int, got {self.flags!r}")
        if not isinstance(self.prefix, str):
            raise ConfigurationError("prefix must be a string")

    @classmethod
    def from_env(cls, **overrides: object) -> DefaultRelayConfig:
        """
        Build config from environment variables.

        Env:
            FANLOG_VERBOSITY            – severity name or number, default DEBUG
            FANLOG_COLLECTOR_VERBOSITY  – severity name or number, default DEBUG
            FANLOG_FLAGS                – e.g. "std|shortfile" or 19, default std|shortfile
            FANLOG_PREFIX               – default ""

        Overrides (keyword args) take precedence over env.
        """

        def _severity(attr: str, var: str) -> Severity:
            v = overrides.get(attr)
            if v is None:
                v = os.environ.get(var, "").strip() or Severity.DEBUG
            return Severity.parse(v)  # type: ignore[arg-type]

        raw_flags = overrides.get("flags")
        if raw_flags is None:
            raw_flags = os.environ.get("FANLOG_FLAGS", "").strip() or (Flag.SHORTFILE | Flag.STD)
        prefix = overrides.get("prefix")
        if prefix is None:
            prefix = os.environ.get("FANLOG_PREFIX", "")
        return cls(
            verbosity=_severity("verbosity", "FANLOG_VERBOSITY"),
            collector_verbosity=_severity("collector_verbosity", "FANLOG_COLLECTOR_VERBOSITY"),
            flags=parse_flags(raw_flags),  # type: ignore[arg-type]
            prefix=str(prefix),
        )


def load_default_relay_config(**overrides: object) -> DefaultRelayConfig:
    """
    Load and validate default Relay config from environment (with optional overrides).

    Returns:
        Validated DefaultRelayConfig. Raises ConfigurationError on invalid env/values.
    """
    return DefaultRelayConfig.from_env(**overrides)
