"""
Collector: the terminal receiver. Renders a severity-labelled line and writes
it synchronously to its single sink.
"""
from __future__ import annotations

import io
import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Union

from fanlog.core.exceptions import SinkWriteError
from fanlog.core.flags import Flag, MaskOp, combine_flags
from fanlog.core.formatting import sprint, sprintf, sprintln
from fanlog.core.severity import Severity, severity_name
from fanlog.receivers.base import Receiver
from fanlog.receivers.location import CallDepth, CallerLocation, caller_location, next_depth

logger = logging.getLogger(__name__)

_TIMESTAMP_FLAGS = Flag.DATE | Flag.TIME | Flag.MICROSECONDS
_FILE_FLAGS = Flag.SHORTFILE | Flag.LONGFILE


class Collector(Receiver):
    """
    Wraps one sink with a verbosity threshold, format flags and a prefix.

    Output line layout::

        <prefix><date> <time> <file>:<line>: [<SEVERITY>] <message>

    Header parts appear only when their flag is set; with ``Flag.MSGPREFIX``
    the prefix moves to just before the message. Text streams receive str,
    any other sink receives UTF-8 bytes.
    """

    def __init__(
        self,
        sink: Any,
        verbosity: int = Severity.DEBUG,
        prefix: str = "",
        flags: int = 0,
        *,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._sink = sink
        self._verbosity = Severity(verbosity)
        self._prefix = prefix
        self._flags = Flag(flags)
        self._clock = clock or time.time

    def __repr__(self) -> str:
        return (
            f"Collector(sink={self._sink!r}, verbosity={self._verbosity.name}, "
            f"prefix={self._prefix!r}, flags={int(self._flags)})"
        )

    @property
    def sink(self) -> Any:
        return self._sink

    @property
    def flags(self) -> Flag:
        return self._flags

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def verbosity(self) -> Severity:
        return self._verbosity

    def set_output(self, sink: Any) -> None:
        self._sink = sink

    def set_flags(self, flag: int, mask_op: Union[MaskOp, int] = MaskOp.NONE) -> None:
        self._flags = combine_flags(self._flags, flag, mask_op)

    def set_prefix(self, prefix: str) -> None:
        self._prefix = prefix

    def set_verbosity(self, verbosity: int) -> None:
        self._verbosity = Severity(verbosity)

    # Write failures stop at this layer: reported to the diagnostic logger,
    # never raised to the code that asked for the message.

    def log(self, severity: int, call_depth: CallDepth, *args: Any) -> None:
        if self._verbosity < severity:
            return
        try:
            self.output(next_depth(call_depth), "[" + severity_name(severity) + "] " + sprint(args))
        except SinkWriteError as exc:
            logger.warning("Dropped %s message: %s", severity_name(severity), exc)

    def logf(self, severity: int, call_depth: CallDepth, fmt: str, *args: Any) -> None:
        if self._verbosity < severity:
            return
        try:
            self.output(next_depth(call_depth), "[" + severity_name(severity) + "] " + sprintf(fmt, args))
        except SinkWriteError as exc:
            logger.warning("Dropped %s message: %s", severity_name(severity), exc)

    def logln(self, severity: int, call_depth: CallDepth, *args: Any) -> None:
        if self._verbosity < severity:
            return
        try:
            self.output(next_depth(call_depth), "[" + severity_name(severity) + "] " + sprintln(args))
        except SinkWriteError as exc:
            logger.warning("Dropped %s message: %s", severity_name(severity), exc)

    def output(self, call_depth: CallDepth, s: str) -> None:
        """
        Write ``s`` with the configured header. ``call_depth`` 1 names the
        caller of output(); a CallerLocation is used as-is.

        Raises:
            SinkWriteError: the sink failed; nothing is retried.
        """
        location: Optional[CallerLocation] = None
        if self._flags & _FILE_FLAGS:
            if isinstance(call_depth, CallerLocation):
                location = call_depth
            else:
                location = caller_location(call_depth)
        now = self._clock() if self._flags & _TIMESTAMP_FLAGS else None

        line = self._format_header(now, location) + s
        if not s.endswith("\n"):
            line += "\n"
        data = line if isinstance(self._sink, io.TextIOBase) else line.encode("utf-8")
        try:
            self._sink.write(data)
            flush = getattr(self._sink, "flush", None)
            if flush is not None:
                flush()
        except (OSError, ValueError) as exc:
            raise SinkWriteError(
                f"Write to {self._sink!r} failed: {exc}",
                details={"sink": repr(self._sink)},
                cause=exc,
            ) from exc

    def _format_header(self, now: Optional[float], location: Optional[CallerLocation]) -> str:
        flags = self._flags
        parts: list[str] = []
        if not flags & Flag.MSGPREFIX:
            parts.append(self._prefix)
        if now is not None:
            tz = timezone.utc if flags & Flag.UTC else None
            stamp = datetime.fromtimestamp(now, tz=tz)
            if flags & Flag.DATE:
                parts.append(stamp.strftime("%Y/%m/%d "))
            if flags & (Flag.TIME | Flag.MICROSECONDS):
                clock = stamp.strftime("%H:%M:%S")
                if flags & Flag.MICROSECONDS:
                    clock += f".{stamp.microsecond:06d}"
                parts.append(clock + " ")
        if location is not None:
            file = location.short_file if flags & Flag.SHORTFILE else location.file
            parts.append(f"{file}:{location.line}: ")
        if flags & Flag.MSGPREFIX:
            parts.append(self._prefix)
        return "".join(parts)
