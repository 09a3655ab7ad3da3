"""
fanlog: severity-levelled logging that fans one call out to many sinks.

Usage:
    import sys
    from fanlog import Flag, Relay, Severity

    relay = Relay(Severity.INFO, prefix="api")
    relay.add_writer(sys.stderr, Severity.WARNING, flags=Flag.STD | Flag.SHORTFILE)
    relay.add_writer(open("api.log", "a"), Severity.DEBUG)

    relay.errorf("upstream %s returned %d", "billing", 502)  # both sinks
    relay.info("cache warmed")                             # api.log only

    # Or the process-wide default Relay (stderr, DEBUG)
    import fanlog
    fanlog.warnln("disk at", 91, "percent")
"""
from fanlog.core.exceptions import (
    ConfigurationError,
    FanlogError,
    RelayPanic,
    SinkWriteError,
)
from fanlog.core.flags import Flag, MaskOp, combine_flags, parse_flags
from fanlog.core.severity import SEVERITY_NAMES, Severity, severity_name
from fanlog.receivers import (
    CallerLocation,
    Collector,
    Receiver,
    Relay,
    RelayHandler,
)
from fanlog.std import (
    STD_CALL_DEPTH,
    add_receiver,
    add_writer,
    alert,
    alertf,
    alertln,
    build_default_relay,
    critical,
    criticalf,
    criticalln,
    debug,
    debugf,
    debugln,
    emerg,
    emergf,
    emergln,
    error,
    errorf,
    errorln,
    fatal,
    fatalf,
    fatalln,
    flags,
    get_default_relay,
    info,
    infof,
    infoln,
    log,
    logf,
    logln,
    notice,
    noticef,
    noticeln,
    output,
    panic,
    panicf,
    panicln,
    prefix,
    print,
    printf,
    println,
    reset_default_relay,
    set_default_relay,
    set_flags,
    set_output,
    set_prefix,
    set_verbosity,
    verbosity,
    warn,
    warnf,
    warnln,
)

# print is left out so that a star import cannot shadow the builtin.
__all__ = [
    "Severity",
    "SEVERITY_NAMES",
    "severity_name",
    "Flag",
    "MaskOp",
    "combine_flags",
    "parse_flags",
    "Receiver",
    "Relay",
    "Collector",
    "RelayHandler",
    "CallerLocation",
    "FanlogError",
    "ConfigurationError",
    "SinkWriteError",
    "RelayPanic",
    "STD_CALL_DEPTH",
    "build_default_relay",
    "get_default_relay",
    "set_default_relay",
    "reset_default_relay",
    "set_output",
    "set_flags",
    "flags",
    "set_prefix",
    "prefix",
    "set_verbosity",
    "verbosity",
    "add_writer",
    "add_receiver",
    "output",
    "log",
    "logf",
    "logln",
    "fatal",
    "fatalf",
    "fatalln",
    "panic",
    "panicf",
    "panicln",
    "printf",
    "println",
    "emerg",
    "emergf",
    "emergln",
    "alert",
    "alertf",
    "alertln",
    "critical",
    "criticalf",
    "criticalln",
    "error",
    "errorf",
    "errorln",
    "warn",
    "warnf",
    "warnln",
    "notice",
    "noticef",
    "noticeln",
    "info",
    "infof",
    "infoln",
    "debug",
    "debugf",
    "debugln",
]
