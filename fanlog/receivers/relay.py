"""
Relay: fan-out router. Gates on its own verbosity, adds its prefix, then
forwards to every registered receiver in registration order. Receivers gate
again on their own verbosity.

Fatal and panic calls are forwarded as EMERGENCY messages; the Relay alone
terminates or raises, so one call never exits or raises once per receiver.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Optional, Union

from fanlog.core.exceptions import RelayPanic, SinkWriteError
from fanlog.core.flags import Flag, MaskOp, combine_flags
from fanlog.core.formatting import sprint, sprintf, sprintln
from fanlog.core.severity import Severity
from fanlog.receivers.base import Receiver
from fanlog.receivers.collector import Collector
from fanlog.receivers.location import CallDepth, next_depth

logger = logging.getLogger(__name__)

# Frames between a level-named method's caller and Relay.log.
DEFAULT_CALL_DEPTH = 2


class Relay(Receiver):
    """
    Ordered list of receivers behind one verbosity gate.

    Duplicates and self-registration are not guarded against. ``exit_fn`` is
    the termination hook for the fatal family (``sys.exit`` when None).
    """

    def __init__(
        self,
        verbosity: int = Severity.DEBUG,
        prefix: str = "",
        flags: int = 0,
        *,
        call_depth: int = DEFAULT_CALL_DEPTH,
        exit_fn: Optional[Callable[[int], Any]] = None,
    ) -> None:
        self._receivers: list[Receiver] = []
        self._verbosity = Severity(verbosity)
        self._prefix = prefix
        self._flags = Flag(flags)
        self._call_depth = call_depth
        self.exit_fn = exit_fn

    @classmethod
    def with_stderr(cls, verbosity: int = Severity.DEBUG, prefix: str = "", flags: int = 0) -> "Relay":
        """Relay pre-seeded with one stderr Collector at the same verbosity and flags."""
        relay = cls(verbosity, prefix, flags)
        relay.add_writer(sys.stderr, verbosity, "", flags)
        return relay

    def __repr__(self) -> str:
        return (
            f"Relay(verbosity={self._verbosity.name}, prefix={self._prefix!r}, "
            f"flags={int(self._flags)}, receivers={len(self._receivers)})"
        )

    @property
    def receivers(self) -> tuple[Receiver, ...]:
        return tuple(self._receivers)

    @property
    def flags(self) -> Flag:
        return self._flags

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def verbosity(self) -> Severity:
        return self._verbosity

    @property
    def call_depth(self) -> int:
        return self._call_depth

    def add_writer(self, sink: Any, verbosity: int, prefix: str = "", flags: int = 0) -> Collector:
        """Wrap ``sink`` in a new Collector and register it. Returns the Collector."""
        collector = Collector(sink, verbosity, prefix, flags)
        self.add_receiver(collector)
        return collector

    def add_receiver(self, receiver: Receiver) -> None:
        self._receivers.append(receiver)
        logger.debug("Registered %r on %r", receiver, self)

    def set_flags(self, flag: int, mask_op: Union[MaskOp, int] = MaskOp.NONE) -> None:
        """
        Combine ``flag`` into this Relay's flags, then pass the same flag and
        op to every receiver; each combines with its own current value.
        """
        self._flags = combine_flags(self._flags, flag, mask_op)
        for receiver in self._receivers:
            receiver.set_flags(flag, mask_op)

    def set_prefix(self, prefix: str) -> None:
        self._prefix = prefix

    def set_verbosity(self, verbosity: int) -> None:
        self._verbosity = Severity(verbosity)

    def set_output(self, sink: Any) -> None:
        """No-op: a Relay has no sink. Redirect a specific Collector instead."""

    def output(self, call_depth: CallDepth, s: str) -> None:
        """
        Write ``s`` to every receiver. A failing receiver does not stop the
        loop; the first SinkWriteError is raised once all have been tried.
        """
        call_depth = next_depth(call_depth)
        first_error: Optional[SinkWriteError] = None
        for receiver in self._receivers:
            try:
                receiver.output(call_depth, s)
            except SinkWriteError as exc:
                if first_error is None:
                    first_error = exc
                else:
                    logger.warning("Receiver %r failed: %s", receiver, exc)
        if first_error is not None:
            raise first_error

    # Receivers are called inline below (not through a helper) so that
    # call_depth stays exact for the file/line header.

    def log(self, severity: int, call_depth: CallDepth, *args: Any) -> None:
        if self._verbosity < severity:
            return
        args = (self._prefix,) + args
        call_depth = next_depth(call_depth)
        for receiver in self._receivers:
            receiver.log(severity, call_depth, *args)

    def logf(self, severity: int, call_depth: CallDepth, fmt: str, *args: Any) -> None:
        if self._verbosity < severity:
            return
        if self._prefix:
            fmt = "%s " + fmt
            args = (self._prefix,) + args
        call_depth = next_depth(call_depth)
        for receiver in self._receivers:
            receiver.logf(severity, call_depth, fmt, *args)

    def logln(self, severity: int, call_depth: CallDepth, *args: Any) -> None:
        if self._verbosity < severity:
            return
        if self._prefix:
            args = (self._prefix,) + args
        call_depth = next_depth(call_depth)
        for receiver in self._receivers:
            receiver.logln(severity, call_depth, *args)

    def fatal(self, *args: Any) -> None:
        """EMERGENCY message, then exit(1) even if logging failed."""
        try:
            self.log(Severity.EMERGENCY, self._call_depth, *args)
        finally:
            self._exit(1)

    def fatalf(self, fmt: str, *args: Any) -> None:
        try:
            self.logf(Severity.EMERGENCY, self._call_depth, fmt, *args)
        finally:
            self._exit(1)

    def fatalln(self, *args: Any) -> None:
        try:
            self.logln(Severity.EMERGENCY, self._call_depth, *args)
        finally:
            self._exit(1)

    def _exit(self, code: int) -> None:
        (self.exit_fn or sys.exit)(code)

    def panic(self, *args: Any) -> None:
        """EMERGENCY message, then raise RelayPanic carrying the prefixed message."""
        try:
            self.log(Severity.EMERGENCY, self._call_depth, *args)
        finally:
            raise RelayPanic(sprint((self._prefix,) + args))

    def panicf(self, fmt: str, *args: Any) -> None:
        try:
            self.logf(Severity.EMERGENCY, self._call_depth, fmt, *args)
        finally:
            if self._prefix:
                msg = sprintf("%s " + fmt, (self._prefix,) + args)
            else:
                msg = sprintf(fmt, args)
            raise RelayPanic(msg)

    def panicln(self, *args: Any) -> None:
        try:
            self.logln(Severity.EMERGENCY, self._call_depth, *args)
        finally:
            raise RelayPanic(sprintln((self._prefix,) + args if self._prefix else args))

    def print(self, *args: Any) -> None:
        """Same as notice()."""
        self.log(Severity.NOTICE, self._call_depth, *args)

    def printf(self, fmt: str, *args: Any) -> None:
        self.logf(Severity.NOTICE, self._call_depth, fmt, *args)

    def println(self, *args: Any) -> None:
        self.logln(Severity.NOTICE, self._call_depth, *args)

    def emerg(self, *args: Any) -> None:
        self.log(Severity.EMERGENCY, self._call_depth, *args)

    def emergf(self, fmt: str, *args: Any) -> None:
        self.logf(Severity.EMERGENCY, self._call_depth, fmt, *args)

    def emergln(self, *args: Any) -> None:
        self.logln(Severity.EMERGENCY, self._call_depth, *args)

    def alert(self, *args: Any) -> None:
        self.log(Severity.ALERT, self._call_depth, *args)

    def alertf(self, fmt: str, *args: Any) -> None:
        self.logf(Severity.ALERT, self._call_depth, fmt, *args)

    def alertln(self, *args: Any) -> None:
        self.logln(Severity.ALERT, self._call_depth, *args)

    def critical(self, *args: Any) -> None:
        self.log(Severity.CRITICAL, self._call_depth, *args)

    def criticalf(self, fmt: str, *args: Any) -> None:
        self.logf(Severity.CRITICAL, self._call_depth, fmt, *args)

    def criticalln(self, *args: Any) -> None:
        self.logln(Severity.CRITICAL, self._call_depth, *args)

    def error(self, *args: Any) -> None:
        self.log(Severity.ERROR, self._call_depth, *args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self.logf(Severity.ERROR, self._call_depth, fmt, *args)

    def errorln(self, *args: Any) -> None:
        self.logln(Severity.ERROR, self._call_depth, *args)

    def warn(self, *args: Any) -> None:
        self.log(Severity.WARNING, self._call_depth, *args)

    def warnf(self, fmt: str, *args: Any) -> None:
        self.logf(Severity.WARNING, self._call_depth, fmt, *args)

    def warnln(self, *args: Any) -> None:
        self.logln(Severity.WARNING, self._call_depth, *args)

    def notice(self, *args: Any) -> None:
        self.log(Severity.NOTICE, self._call_depth, *args)

    def noticef(self, fmt: str, *args: Any) -> None:
        self.logf(Severity.NOTICE, self._call_depth, fmt, *args)

    def noticeln(self, *args: Any) -> None:
        self.logln(Severity.NOTICE, self._call_depth, *args)

    def info(self, *args: Any) -> None:
        self.log(Severity.INFO, self._call_depth, *args)

    def infof(self, fmt: str, *args: Any) -> None:
        self.logf(Severity.INFO, self._call_depth, fmt, *args)

    def infoln(self, *args: Any) -> None:
        self.logln(Severity.INFO, self._call_depth, *args)

    def debug(self, *args: Any) -> None:
        self.log(Severity.DEBUG, self._call_depth, *args)

    def debugf(self, fmt: str, *args: Any) -> None:
        self.logf(Severity.DEBUG, self._call_depth, fmt, *args)

    def debugln(self, *args: Any) -> None:
        self.logln(Severity.DEBUG, self._call_depth, *args)
