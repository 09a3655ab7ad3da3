"""
Receivers: Relay (fan-out) and Collector (terminal writer), plus the stdlib
logging bridge.
"""
from fanlog.receivers.base import Receiver
from fanlog.receivers.bridge import RelayHandler, severity_for_level
from fanlog.receivers.collector import Collector
from fanlog.receivers.location import (
    UNKNOWN_LOCATION,
    CallDepth,
    CallerLocation,
    caller_location,
    next_depth,
)
from fanlog.receivers.relay import DEFAULT_CALL_DEPTH, Relay

__all__ = [
    "Receiver",
    "Relay",
    "Collector",
    "RelayHandler",
    "severity_for_level",
    "CallDepth",
    "CallerLocation",
    "UNKNOWN_LOCATION",
    "caller_location",
    "next_depth",
    "DEFAULT_CALL_DEPTH",
]
