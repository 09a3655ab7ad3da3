"""Render a message body from positional arguments."""
from __future__ import annotations

from typing import Any, Sequence


def sprint(args: Sequence[Any]) -> str:
    """Concatenate args; a space separates two neighbours only when neither is a str."""
    parts: list[str] = []
    prev_is_str = True
    for i, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if i > 0 and not is_str and not prev_is_str:
            parts.append(" ")
        parts.append(str(arg))
        prev_is_str = is_str
    return "".join(parts)


def sprintf(fmt: str, args: Sequence[Any]) -> str:
    """
    ``fmt % args``. A mismatched format never raises: the raw format is
    kept and the args are appended in brackets.
    """
    try:
        return fmt % tuple(args)
    except (TypeError, ValueError, KeyError):
        if not args:
            return fmt
        return f"{fmt} {list(args)!r}"


def sprintln(args: Sequence[Any]) -> str:
    return " ".join(str(arg) for arg in args) + "\n"
