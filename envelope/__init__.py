"""
Envelope Normalizer exports.

Uniform success/error contract over heterogeneous backend responses.
"""

from .normalize import EnvelopeNormalizer
from .notifier import NotificationSink, Notifier, default_sink, set_notifier
from .schemas import (
    SERVER_ERROR_MESSAGE,
    ApiError,
    Failure,
    NormalizedResult,
    Success,
)

__all__ = [
    # Normalizer
    "EnvelopeNormalizer",
    # Result contract
    "ApiError",
    "Success",
    "Failure",
    "NormalizedResult",
    "SERVER_ERROR_MESSAGE",
    # Notification Sink
    "NotificationSink",
    "Notifier",
    "default_sink",
    "set_notifier",
]
