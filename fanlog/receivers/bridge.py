"""
Route stdlib ``logging`` records into a Relay or Collector.

    import logging
    from fanlog import Flag, Relay
    from fanlog.receivers import RelayHandler

    relay = Relay.with_stderr(flags=Flag.SHORTFILE)
    logging.getLogger().addHandler(RelayHandler(relay))
"""
from __future__ import annotations

import logging

from fanlog.core.severity import Severity
from fanlog.receivers.base import Receiver
from fanlog.receivers.location import CallerLocation

_OWN_NAMESPACE = "fanlog"


def severity_for_level(levelno: int) -> Severity:
    """Map a stdlib level number to the nearest severity at or below it."""
    if levelno >= logging.CRITICAL:
        return Severity.CRITICAL
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARNING
    if levelno >= logging.INFO:
        return Severity.INFO
    return Severity.DEBUG


class RelayHandler(logging.Handler):
    """
    logging.Handler that forwards each record to ``receiver.logf``.

    The record's own pathname/lineno is passed down as the caller location.
    Records from fanlog's diagnostic loggers are skipped, since a failing
    sink would otherwise report itself back into the same sink.
    """

    def __init__(self, receiver: Receiver, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.receiver = receiver

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == _OWN_NAMESPACE or name.startswith(_OWN_NAMESPACE + "."):
            return False
        return bool(super().filter(record))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            location = CallerLocation(record.pathname, record.lineno)
            self.receiver.logf(severity_for_level(record.levelno), location, "%s", message)
        except Exception:
            self.handleError(record)
