"""
Envelope Normalizer

SINGLE CLASSIFICATION BOUNDARY - CALLERS NEVER PARSE RESPONSES

Converts raw transport outcomes into Success or a raised ApiError.
- normalize():        best-effort contract (text first, JSON if possible, 200 == success)
- normalize_strict(): JSON-always contract (status >= 400 == failure, message in "error")

A 3xx is a failure on the best-effort path and a success on the strict one.

At most one notification per call. No retries. No per-call state is kept
on the normalizer instance.
"""

import json
import logging
from typing import Any, Awaitable, Optional

from transport.types import RequestOutcome, TransportReadError

from .notifier import NotificationSink, default_sink
from .schemas import SERVER_ERROR_MESSAGE, ApiError, Failure, NormalizedResult, Success

logger = logging.getLogger(__name__)


class EnvelopeNormalizer:
    """
    Wraps pending transport calls and classifies their outcome.

    Usage:
        normalizer = EnvelopeNormalizer(sink)
        body = (await normalizer.normalize(transport.perform(request))).payload
    """

    def __init__(self, sink: Optional[NotificationSink] = None):
        """
        Args:
            sink: Notification Sink for user-visible failures (default: process-wide sink)
        """
        self.sink = sink if sink is not None else default_sink

    # ──────────────────────────────────────────────────────────
    # BEST-EFFORT CONTRACT
    # ──────────────────────────────────────────────────────────

    async def normalize(
        self,
        call: Awaitable[RequestOutcome],
        suppress_notify: bool = False,
    ) -> Success:
        """
        Classify a best-effort response.

        Args:
            call:            Pending transport call
            suppress_notify: Never touch the Notification Sink when True

        Returns:
            Success(payload) when the status code is exactly 200

        Raises:
            ApiError: transport failure or any non-200 status
        """
        outcome: Optional[RequestOutcome] = None
        try:
            outcome = await call
            text = outcome.read_text()
        except TransportReadError:
            logger.error("Transport failure while reading response", exc_info=True)
            if not suppress_notify:
                self.sink.notify(SERVER_ERROR_MESSAGE)
                raise ApiError(SERVER_ERROR_MESSAGE, None, None)
            # Only the status survives an unreadable body; a failed call has nothing
            status = outcome.status_code if outcome is not None else None
            raise ApiError(None, status, status)

        status_code = outcome.status_code
        try:
            parsed = json.loads(text)
        except ValueError:
            parsed = {
                "message": text,
                "status": status_code,
                "code": status_code,
            }

        if status_code == 200:
            return Success(payload=parsed)

        error = _error_from_body(parsed, status_code)
        logger.warning(
            f"API request failed with status {status_code}",
            extra={"status_code": status_code, "suppress_notify": suppress_notify},
        )
        if not suppress_notify and error.message:
            self.sink.notify(error.message)
        raise error

    # ──────────────────────────────────────────────────────────
    # STRICT JSON CONTRACT
    # ──────────────────────────────────────────────────────────

    async def normalize_strict(self, call: Awaitable[RequestOutcome]) -> Success:
        """
        Classify a response from an endpoint that always answers JSON.

        Returns:
            Success(payload) for any status below 400

        Raises:
            ApiError: status >= 400 (message from the body's "error" field),
                      transport failure, or a body that is not JSON
        """
        try:
            outcome = await call
            parsed = json.loads(outcome.read_text())
        except (TransportReadError, ValueError):
            logger.error("Strict response could not be read as JSON", exc_info=True)
            self.sink.notify(SERVER_ERROR_MESSAGE)
            raise ApiError(SERVER_ERROR_MESSAGE, None, None)

        status_code = outcome.status_code
        if status_code < 400:
            return Success(payload=parsed)

        message = parsed.get("error") if isinstance(parsed, dict) else None
        if message is not None and not isinstance(message, str):
            message = str(message)

        logger.warning(
            f"API request failed with status {status_code}",
            extra={"status_code": status_code, "strict": True},
        )
        if message:
            self.sink.notify(message)
        raise ApiError(message, status_code, status_code)

    # ──────────────────────────────────────────────────────────
    # TAGGED-VARIANT WRAPPERS
    # ──────────────────────────────────────────────────────────

    async def normalize_result(
        self,
        call: Awaitable[RequestOutcome],
        suppress_notify: bool = False,
    ) -> NormalizedResult:
        """Same as normalize(), but failures come back as Failure instead of raising."""
        try:
            return await self.normalize(call, suppress_notify=suppress_notify)
        except ApiError as e:
            return Failure(error=e)

    async def normalize_strict_result(self, call: Awaitable[RequestOutcome]) -> NormalizedResult:
        """Same as normalize_strict(), but failures come back as Failure."""
        try:
            return await self.normalize_strict(call)
        except ApiError as e:
            return Failure(error=e)


def _error_from_body(parsed: Any, status_code: int) -> ApiError:
    """
    Build the ApiError for a non-200 best-effort response.

    message comes from the body only. status/code come from the body when
    present and fall back to the HTTP status.
    """
    if not isinstance(parsed, dict):
        return ApiError(None, status_code, status_code)

    message = parsed.get("message")
    if message is not None and not isinstance(message, str):
        message = str(message)

    status = parsed.get("status")
    if not isinstance(status, int) or isinstance(status, bool):
        status = status_code

    code = parsed.get("code")
    if not isinstance(code, int) or isinstance(code, bool):
        code = status

    return ApiError(message, status, code)
