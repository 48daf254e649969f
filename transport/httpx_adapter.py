"""
httpx-backed Transport Adapter.

Pure I/O: sends the request, hands back status code and raw bytes.
No parsing, no classification, no retries.
"""

import logging
from typing import Optional

import httpx

from .base import TransportAdapter
from .types import RequestDescriptor, RequestOutcome, TransportReadError

logger = logging.getLogger(__name__)


class HttpxTransportAdapter(TransportAdapter):
    """
    Transport adapter over httpx.AsyncClient.

    Usage:
        adapter = HttpxTransportAdapter(base_url="http://localhost")
        outcome = await adapter.perform(RequestDescriptor("POST", "/cosmos/api/sudo"))

    Timeouts belong to the httpx client configuration; a timed-out request
    surfaces as TransportReadError like any other network failure.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            base_url: Server base URL (e.g. "http://localhost")
            timeout:  Request timeout in seconds
            client:   Optional shared client (tests inject one with MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def perform(self, request: RequestDescriptor) -> RequestOutcome:
        url = f"{self.base_url}{request.path}"
        logger.debug(f"{request.method} {request.path}")

        try:
            if self._client is not None:
                response = await self._send(self._client, request, url)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._send(client, request, url)
        except httpx.RequestError as e:
            logger.error(
                f"HTTP request failed: {type(e).__name__}",
                exc_info=True,
                extra={"method": request.method, "path": request.path},
            )
            raise TransportReadError(f"HTTP request failed: {e}") from e

        return RequestOutcome(status_code=response.status_code, body=response.content)

    @staticmethod
    async def _send(
        client: httpx.AsyncClient,
        request: RequestDescriptor,
        url: str,
    ) -> httpx.Response:
        return await client.request(
            request.method,
            url,
            json=request.json_body,
            headers=request.headers,
        )
