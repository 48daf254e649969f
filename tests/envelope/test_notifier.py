"""
Notification Sink Tests

Core principle: the sink is a visibility channel. An unregistered or
failing notifier must never break a normalization call.
"""

import json
import logging
from unittest.mock import Mock

import pytest

import envelope.notifier as notifier_module
from envelope import ApiError, EnvelopeNormalizer, NotificationSink, set_notifier
from transport import RequestOutcome


async def respond(status_code, body):
    return RequestOutcome(status_code=status_code, body=json.dumps(body))


@pytest.fixture
def fresh_default_sink(monkeypatch):
    sink = NotificationSink()
    monkeypatch.setattr(notifier_module, "default_sink", sink)
    return sink


class TestNotificationSink:
    def test_unregistered_notify_is_noop(self, caplog):
        sink = NotificationSink()

        with caplog.at_level(logging.WARNING, logger="envelope.notifier"):
            sink.notify("lost")

        assert not sink.is_registered
        assert "no notifier registered" in caplog.text

    def test_registered_notify_calls_callback(self):
        callback = Mock()
        sink = NotificationSink()
        sink.set_notifier(callback)

        sink.notify("hello")

        assert sink.is_registered
        callback.assert_called_once_with("hello")

    def test_later_registration_replaces(self):
        first, second = Mock(), Mock()
        sink = NotificationSink()
        sink.set_notifier(first)
        sink.set_notifier(second)

        sink.notify("msg")

        first.assert_not_called()
        second.assert_called_once_with("msg")

    def test_failing_callback_is_swallowed(self):
        sink = NotificationSink(Mock(side_effect=RuntimeError("UI gone")))

        sink.notify("msg")  # Should NOT raise

    def test_module_set_notifier_targets_default_sink(self, fresh_default_sink):
        callback = Mock()

        set_notifier(callback)

        assert fresh_default_sink.is_registered
        fresh_default_sink.notify("x")
        callback.assert_called_once_with("x")


class TestNormalizerWithoutNotifier:
    @pytest.mark.asyncio
    async def test_failure_before_registration_still_raises_api_error(self):
        normalizer = EnvelopeNormalizer(NotificationSink())

        with pytest.raises(ApiError) as exc_info:
            await normalizer.normalize(respond(500, {"message": "boom"}))

        assert exc_info.value.message == "boom"

    @pytest.mark.asyncio
    async def test_failing_notifier_does_not_replace_api_error(self):
        normalizer = EnvelopeNormalizer(NotificationSink(Mock(side_effect=ValueError("x"))))

        with pytest.raises(ApiError) as exc_info:
            await normalizer.normalize(respond(403, {"message": "forbidden"}))

        assert exc_info.value.status_code == 403

    def test_default_sink_is_used_when_none_injected(self):
        normalizer = EnvelopeNormalizer()

        assert normalizer.sink is notifier_module.default_sink
