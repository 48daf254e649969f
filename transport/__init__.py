"""
Transport Adapter exports.

The core consumes the network only through TransportAdapter.perform().
"""

from .base import TransportAdapter
from .httpx_adapter import HttpxTransportAdapter
from .stub import StubTransportAdapter
from .types import RequestDescriptor, RequestOutcome, TransportReadError

__all__ = [
    "TransportAdapter",
    "HttpxTransportAdapter",
    "StubTransportAdapter",
    "RequestDescriptor",
    "RequestOutcome",
    "TransportReadError",
]
