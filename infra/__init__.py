"""
Infrastructure module exports.

Configuration and bootstrap for the client core.
"""

from .config import ClientConfig, get_config, TransportBackendType
from .bootstrap import ClientBootstrap, bootstrap_client

__all__ = [
    "ClientConfig",
    "get_config",
    "TransportBackendType",
    "ClientBootstrap",
    "bootstrap_client",
]
