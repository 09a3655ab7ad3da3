"""
Output format flags and the masking operations used to update them.

Bit values follow the classic logger layout, so integer flag values written
against it keep their meaning.
"""
from __future__ import annotations

import re
from enum import IntEnum, IntFlag
from typing import Union

from fanlog.core.exceptions import ConfigurationError


class Flag(IntFlag):
    DATE = 1  # 2009/01/23
    TIME = 2  # 01:23:23
    MICROSECONDS = 4  # 01:23:23.123123, implies TIME
    LONGFILE = 8  # /a/b/c/d.py:23
    SHORTFILE = 16  # d.py:23, overrides LONGFILE
    UTC = 32  # render date/time in UTC
    MSGPREFIX = 64  # prefix goes after the header instead of line start
    STD = DATE | TIME


class MaskOp(IntEnum):
    """How ``set_flags`` combines the incoming flag with the current value."""

    NONE = 0
    REPLACE = 0
    AND = 1
    OR = 2
    XOR = 3
    ANDNOT = 4


def combine_flags(old: int, flag: int, op: Union[MaskOp, int]) -> Flag:
    op = MaskOp(op)
    old, flag = int(old), int(flag)
    if op is MaskOp.NONE:
        result = flag
    elif op is MaskOp.AND:
        result = old & flag
    elif op is MaskOp.OR:
        result = old | flag
    elif op is MaskOp.XOR:
        result = old ^ flag
    else:
        result = old & ~flag
    return Flag(result)


_SPLIT_RE = re.compile(r"[|,+\s]+")


def parse_flags(value: Union[int, str, None]) -> Flag:
    """Parse config input: an int, or names joined by '|' or ',' ("std|shortfile")."""
    if value is None:
        return Flag(0)
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid flags: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ConfigurationError(f"Flags must be non-negative, got {value!r}")
        return Flag(value)
    text = str(value).strip()
    if not text:
        return Flag(0)
    if text.isdigit():
        return Flag(int(text))
    result = Flag(0)
    for name in _SPLIT_RE.split(text):
        if not name:
            continue
        try:
            result |= Flag[name.upper()]
        except KeyError as exc:
            raise ConfigurationError(
                f"Unknown format flag: {name!r}. Known: {[f.name for f in Flag]}",
                cause=exc,
            ) from exc
    return result
