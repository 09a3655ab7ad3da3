"""
Pydantic v2 schemas for declaring a receiver tree, and builders that turn a
validated tree into live Relay/Collector objects.

Example (dict or JSON string)::

    {
      "verbosity": "info",
      "prefix": "api",
      "receivers": [
        {"sink": "stderr", "verbosity": "warning", "flags": "std|shortfile"},
        {"sink": "/var/log/api.log"},
        {"type": "relay", "verbosity": "error", "receivers": [{"sink": "stdout"}]}
      ]
    }

A receiver without ``type`` is a relay when it has ``receivers``, otherwise a
collector.
"""
from __future__ import annotations

import json
import sys
from typing import Annotated, Any, List, Literal, Mapping, TextIO, Union

from pydantic import BaseModel, Field, field_validator

from fanlog.core.exceptions import ConfigurationError
from fanlog.core.flags import parse_flags
from fanlog.core.severity import Severity
from fanlog.receivers.base import Receiver
from fanlog.receivers.collector import Collector
from fanlog.receivers.relay import DEFAULT_CALL_DEPTH, Relay


class _ReceiverSpec(BaseModel):
    verbosity: Severity = Severity.DEBUG
    prefix: str = ""
    flags: int = Field(default=0, ge=0)

    @field_validator("verbosity", mode="before")
    @classmethod
    def _parse_verbosity(cls, v: Any) -> Severity:
        try:
            return Severity.parse(v)
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("flags", mode="before")
    @classmethod
    def _parse_flags(cls, v: Any) -> int:
        try:
            return int(parse_flags(v))
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from exc


class CollectorSpec(_ReceiverSpec):
    type: Literal["collector"] = "collector"
    sink: str = Field(default="stderr", min_length=1)
    """Sink: "stderr", "stdout", or a file path opened for append."""


class RelaySpec(_ReceiverSpec):
    type: Literal["relay"] = "relay"
    receivers: List[ReceiverSpec] = Field(default_factory=list)

    @field_validator("receivers", mode="before")
    @classmethod
    def _infer_types(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return v
        out = []
        for item in v:
            if isinstance(item, Mapping) and "type" not in item:
                item = {**item, "type": "relay" if "receivers" in item else "collector"}
            out.append(item)
        return out


ReceiverSpec = Annotated[Union[CollectorSpec, RelaySpec], Field(discriminator="type")]

RelaySpec.model_rebuild()


def open_sink(target: str) -> TextIO:
    """Resolve a sink name: the process streams by name, anything else a file path."""
    key = target.strip().lower()
    if key == "stderr":
        return sys.stderr
    if key == "stdout":
        return sys.stdout
    try:
        return open(target, "a", encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot open log sink {target!r}: {exc}",
            details={"sink": target},
            cause=exc,
        ) from exc


def build_receiver(spec: Union[CollectorSpec, RelaySpec]) -> Receiver:
    if isinstance(spec, CollectorSpec):
        return Collector(open_sink(spec.sink), spec.verbosity, spec.prefix, spec.flags)
    return build_relay(spec)


def build_relay(spec: RelaySpec, *, call_depth: int = DEFAULT_CALL_DEPTH) -> Relay:
    """Build a Relay and, depth first, every receiver below it in declared order."""
    relay = Relay(spec.verbosity, spec.prefix, spec.flags, call_depth=call_depth)
    for child in spec.receivers:
        relay.add_receiver(build_receiver(child))
    return relay


def load_relay_tree(data: Union[str, Mapping[str, Any]]) -> RelaySpec:
    """
    Validate a tree given as a dict or a JSON string.

    Raises:
        ConfigurationError: malformed JSON or a schema violation.
    """
    try:
        if isinstance(data, str):
            data = json.loads(data)
        return RelaySpec.model_validate(data)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid relay tree: {exc}", cause=exc) from exc
