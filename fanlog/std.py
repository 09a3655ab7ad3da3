"""
Process-wide default Relay and the top-level calls that delegate to it.

The default is built lazily on first use from DefaultRelayConfig.from_env():
a DEBUG Relay with one stderr Collector (DEBUG, SHORTFILE|STD). Tests and
applications swap it with set_default_relay(); reset_default_relay() makes
the next call rebuild it.

    import fanlog

    fanlog.warnf("disk at %d%%", 91)
    fanlog.get_default_relay().add_writer(open("app.log", "a"), fanlog.Severity.INFO)
"""
from __future__ import annotations

import sys
from typing import Any, Optional

from fanlog.config.default import DefaultRelayConfig, load_default_relay_config
from fanlog.core.exceptions import ConfigurationError
from fanlog.core.flags import Flag, MaskOp
from fanlog.core.severity import Severity
from fanlog.receivers.base import Receiver
from fanlog.receivers.collector import Collector
from fanlog.receivers.location import CallDepth, next_depth
from fanlog.receivers.relay import Relay

# One frame deeper than Relay's own default: module function -> Relay method.
STD_CALL_DEPTH = 3

_default_relay: Optional[Relay] = None


def build_default_relay(config: Optional[DefaultRelayConfig] = None) -> Relay:
    if config is None:
        config = load_default_relay_config()
    relay = Relay(config.verbosity, config.prefix, 0, call_depth=STD_CALL_DEPTH)
    relay.add_writer(sys.stderr, config.collector_verbosity, "", config.flags)
    return relay


def get_default_relay() -> Relay:
    global _default_relay
    if _default_relay is None:
        _default_relay = build_default_relay()
    return _default_relay


def set_default_relay(relay: Relay) -> None:
    """
    Replace the default Relay. Give it ``call_depth=STD_CALL_DEPTH`` so the
    file/line header of top-level calls names their caller.
    """
    global _default_relay
    _default_relay = relay


def reset_default_relay() -> None:
    global _default_relay
    _default_relay = None


# Configuration


def set_output(sink: Any) -> None:
    """
    Redirect the default Relay's first receiver (the stderr Collector).

    Raises:
        ConfigurationError: the default Relay has no receivers.
    """
    receivers = get_default_relay().receivers
    if not receivers:
        raise ConfigurationError(
            "Default relay has no receivers to redirect; add one with add_writer()"
        )
    receivers[0].set_output(sink)


def set_flags(flag: int) -> None:
    get_default_relay().set_flags(flag, MaskOp.NONE)


def flags() -> Flag:
    return get_default_relay().flags


def set_prefix(prefix: str) -> None:
    get_default_relay().set_prefix(prefix)


def prefix() -> str:
    return get_default_relay().prefix


def set_verbosity(verbosity: int) -> None:
    get_default_relay().set_verbosity(verbosity)


def verbosity() -> Severity:
    return get_default_relay().verbosity


def add_writer(sink: Any, verbosity: int, prefix: str = "", flags: int = 0) -> Collector:
    return get_default_relay().add_writer(sink, verbosity, prefix, flags)


def add_receiver(receiver: Receiver) -> None:
    get_default_relay().add_receiver(receiver)


# Raw calls; call_depth 1 names the caller of these functions.


def output(call_depth: CallDepth, s: str) -> None:
    get_default_relay().output(next_depth(call_depth), s)


def log(severity: int, call_depth: CallDepth, *args: Any) -> None:
    get_default_relay().log(severity, next_depth(call_depth), *args)


def logf(severity: int, call_depth: CallDepth, fmt: str, *args: Any) -> None:
    get_default_relay().logf(severity, next_depth(call_depth), fmt, *args)


def logln(severity: int, call_depth: CallDepth, *args: Any) -> None:
    get_default_relay().logln(severity, next_depth(call_depth), *args)


# Level-named calls


def fatal(*args: Any) -> None:
    get_default_relay().fatal(*args)


def fatalf(fmt: str, *args: Any) -> None:
    get_default_relay().fatalf(fmt, *args)


def fatalln(*args: Any) -> None:
    get_default_relay().fatalln(*args)


def panic(*args: Any) -> None:
    get_default_relay().panic(*args)


def panicf(fmt: str, *args: Any) -> None:
    get_default_relay().panicf(fmt, *args)


def panicln(*args: Any) -> None:
    get_default_relay().panicln(*args)


def print(*args: Any) -> None:  # noqa: A001
    get_default_relay().print(*args)


def printf(fmt: str, *args: Any) -> None:
    get_default_relay().printf(fmt, *args)


def println(*args: Any) -> None:
    get_default_relay().println(*args)


def emerg(*args: Any) -> None:
    get_default_relay().emerg(*args)


def emergf(fmt: str, *args: Any) -> None:
    get_default_relay().emergf(fmt, *args)


def emergln(*args: Any) -> None:
    get_default_relay().emergln(*args)


def alert(*args: Any) -> None:
    get_default_relay().alert(*args)


def alertf(fmt: str, *args: Any) -> None:
    get_default_relay().alertf(fmt, *args)


def alertln(*args: Any) -> None:
    get_default_relay().alertln(*args)


def critical(*args: Any) -> None:
    get_default_relay().critical(*args)


def criticalf(fmt: str, *args: Any) -> None:
    get_default_relay().criticalf(fmt, *args)


def criticalln(*args: Any) -> None:
    get_default_relay().criticalln(*args)


def error(*args: Any) -> None:
    get_default_relay().error(*args)


def errorf(fmt: str, *args: Any) -> None:
    get_default_relay().errorf(fmt, *args)


def errorln(*args: Any) -> None:
    get_default_relay().errorln(*args)


def warn(*args: Any) -> None:
    get_default_relay().warn(*args)


def warnf(fmt: str, *args: Any) -> None:
    get_default_relay().warnf(fmt, *args)


def warnln(*args: Any) -> None:
    get_default_relay().warnln(*args)


def notice(*args: Any) -> None:
    get_default_relay().notice(*args)


def noticef(fmt: str, *args: Any) -> None:
    get_default_relay().noticef(fmt, *args)


def noticeln(*args: Any) -> None:
    get_default_relay().noticeln(*args)


def info(*args: Any) -> None:
    get_default_relay().info(*args)


def infof(fmt: str, *args: Any) -> None:
    get_default_relay().infof(fmt, *args)


def infoln(*args: Any) -> None:
    get_default_relay().infoln(*args)


def debug(*args: Any) -> None:
    get_default_relay().debug(*args)


def debugf(fmt: str, *args: Any) -> None:
    get_default_relay().debugf(fmt, *args)


def debugln(*args: Any) -> None:
    get_default_relay().debugln(*args)
