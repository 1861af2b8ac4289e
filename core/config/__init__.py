"""
Runtime Configuration Module

Provides configuration loading and management for the shielded-transfer client.
"""

from .runtime import (
    HttpConfig,
    ProverConfig,
    RuntimeConfig,
    TransferConfig,
    get_default_config,
    load_config,
    set_default_config,
)

__all__ = [
    "RuntimeConfig",
    "ProverConfig",
    "HttpConfig",
    "TransferConfig",
    "load_config",
    "get_default_config",
    "set_default_config",
]
