"""
Notification Sink.

The single user-visible error channel, owned by the hosting shell.

Rules:
- One writer: set_notifier(), expected once at startup
- Many readers: every normalizer failure path
- Never raises: an unregistered or failing callback is a visibility loss,
  never a crash of the normalization call
"""

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


class NotificationSink:
    """Holds the registered notifier callback."""

    def __init__(self, callback: Optional[Notifier] = None):
        self._callback = callback

    @property
    def is_registered(self) -> bool:
        return self._callback is not None

    def set_notifier(self, callback: Notifier) -> None:
        """Register the callback. A later call replaces the previous one."""
        if self._callback is not None:
            logger.info("Notifier replaced")
        self._callback = callback

    def notify(self, message: str) -> None:
        """Surface a message to the user. Safe before registration."""
        if self._callback is None:
            logger.warning(
                "Notification dropped: no notifier registered",
                extra={"notification": message},
            )
            return
        try:
            self._callback(message)
        except Exception as e:
            logger.error(
                f"Notifier raised {type(e).__name__}; notification dropped",
                exc_info=True,
            )


default_sink = NotificationSink()


def set_notifier(callback: Notifier) -> None:
    """Register the process-wide notifier on the default sink."""
    default_sink.set_notifier(callback)
