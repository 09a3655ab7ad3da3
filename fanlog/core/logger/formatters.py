"""
Formatter for fanlog's diagnostic records.
"""
from __future__ import annotations

import logging
from typing import Optional


class PlainConsoleFormatter(logging.Formatter):
    """Human-readable format for console and file."""

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
    ) -> None:
        if fmt is None:
            fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        if datefmt is None:
            datefmt = "%Y-%m-%d %H:%M:%S"
        super().__init__(fmt=fmt, datefmt=datefmt)
