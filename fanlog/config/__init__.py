"""
fanlog config: the default Relay from env, and declarative receiver trees.

Load from env: load_default_relay_config(). Trees: load_relay_tree() + build_relay().
"""
from fanlog.config.default import DefaultRelayConfig, load_default_relay_config
from fanlog.config.tree import (
    CollectorSpec,
    ReceiverSpec,
    RelaySpec,
    build_receiver,
    build_relay,
    load_relay_tree,
    open_sink,
)

__all__ = [
    "DefaultRelayConfig",
    "load_default_relay_config",
    "CollectorSpec",
    "RelaySpec",
    "ReceiverSpec",
    "build_receiver",
    "build_relay",
    "load_relay_tree",
    "open_sink",
]
