"""
Source locations for the file/line header.

A call depth counts frames above the function that receives it: depth 1 is
that function's immediate caller. Each forwarding layer adds one. A bridge
that already knows the origin passes a CallerLocation instead, which
forwarding layers hand down untouched.
"""
from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CallerLocation:
    file: str
    line: int

    @property
    def short_file(self) -> str:
        return os.path.basename(self.file)


UNKNOWN_LOCATION = CallerLocation("???", 0)

CallDepth = Union[int, CallerLocation]


def caller_location(depth: int) -> CallerLocation:
    """Location ``depth`` frames above the function calling this one."""
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return UNKNOWN_LOCATION
    return CallerLocation(frame.f_code.co_filename, frame.f_lineno)


def next_depth(call_depth: CallDepth) -> CallDepth:
    if isinstance(call_depth, CallerLocation):
        return call_depth
    return call_depth + 1
