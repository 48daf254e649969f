"""
tests/transport/test_httpx_adapter.py

Verifies:
✔ status code and raw bytes are passed through untouched
✔ method, path, headers and JSON body reach the server
✔ network errors surface as TransportReadError
✔ end-to-end through the normalizer
"""

import json
from unittest.mock import Mock

import httpx
import pytest

from envelope import ApiError, EnvelopeNormalizer, NotificationSink
from transport import HttpxTransportAdapter, RequestDescriptor, TransportReadError


def make_adapter(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpxTransportAdapter(base_url="http://cosmos.test/", client=client)


class TestHttpxTransportAdapter:
    @pytest.mark.asyncio
    async def test_passes_status_and_raw_body(self):
        adapter = make_adapter(lambda request: httpx.Response(418, content=b"teapot"))

        outcome = await adapter.perform(RequestDescriptor("GET", "/cosmos/api/status"))

        assert outcome.status_code == 418
        assert outcome.body == b"teapot"
        assert outcome.read_text() == "teapot"

    @pytest.mark.asyncio
    async def test_request_shape(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["content_type"] = request.headers.get("content-type")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"status": "OK"})

        adapter = make_adapter(handler)
        await adapter.perform(
            RequestDescriptor("POST", "/cosmos/api/sudo", json_body={"password": "pw"})
        )

        assert seen == {
            "method": "POST",
            "url": "http://cosmos.test/cosmos/api/sudo",
            "content_type": "application/json",
            "body": {"password": "pw"},
        }

    @pytest.mark.asyncio
    async def test_network_error_becomes_transport_read_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        adapter = make_adapter(handler)

        with pytest.raises(TransportReadError):
            await adapter.perform(RequestDescriptor("GET", "/cosmos/api/status"))

    @pytest.mark.asyncio
    async def test_timeout_becomes_transport_read_error(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        adapter = make_adapter(handler)

        with pytest.raises(TransportReadError):
            await adapter.perform(RequestDescriptor("GET", "/cosmos/api/status"))


class TestHttpxThroughNormalizer:
    @pytest.mark.asyncio
    async def test_connection_failure_is_server_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        callback = Mock()
        normalizer = EnvelopeNormalizer(NotificationSink(callback))
        adapter = make_adapter(handler)

        with pytest.raises(ApiError) as exc_info:
            await normalizer.normalize(adapter.perform(RequestDescriptor("GET", "/x")))

        assert exc_info.value.message == "Server error"
        callback.assert_called_once_with("Server error")

    @pytest.mark.asyncio
    async def test_plain_text_error_page(self):
        adapter = make_adapter(lambda request: httpx.Response(503, text="Service Unavailable"))
        callback = Mock()
        normalizer = EnvelopeNormalizer(NotificationSink(callback))

        with pytest.raises(ApiError) as exc_info:
            await normalizer.normalize(adapter.perform(RequestDescriptor("GET", "/x")))

        assert exc_info.value.message == "Service Unavailable"
        assert exc_info.value.code == 503
        callback.assert_called_once_with("Service Unavailable")
