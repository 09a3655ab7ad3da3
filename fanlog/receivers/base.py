"""Receiver interface: anything a Relay can forward to."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Union

from fanlog.core.flags import Flag, MaskOp
from fanlog.core.severity import Severity
from fanlog.receivers.location import CallDepth


class Receiver(ABC):
    """
    Relays forward, Collectors write. Both gate on their own verbosity:
    a call whose severity is less urgent than ``verbosity`` is a no-op.
    """

    @abstractmethod
    def log(self, severity: int, call_depth: CallDepth, *args: Any) -> None:
        """Render args like ``print`` without separators between strings."""

    @abstractmethod
    def logf(self, severity: int, call_depth: CallDepth, fmt: str, *args: Any) -> None:
        """Render ``fmt % args``."""

    @abstractmethod
    def logln(self, severity: int, call_depth: CallDepth, *args: Any) -> None:
        """Render space-joined args plus a newline."""

    @abstractmethod
    def output(self, call_depth: CallDepth, s: str) -> None:
        """Write an already rendered string, adding the configured header."""

    @abstractmethod
    def set_output(self, sink: Any) -> None:
        ...

    @abstractmethod
    def set_flags(self, flag: int, mask_op: Union[MaskOp, int] = MaskOp.NONE) -> None:
        ...

    @abstractmethod
    def set_prefix(self, prefix: str) -> None:
        ...

    @abstractmethod
    def set_verbosity(self, verbosity: int) -> None:
        ...

    @property
    @abstractmethod
    def flags(self) -> Flag:
        ...

    @property
    @abstractmethod
    def prefix(self) -> str:
        ...

    @property
    @abstractmethod
    def verbosity(self) -> Severity:
        ...
