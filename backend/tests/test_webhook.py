import pytest
from dateutil.parser import isoparse
from fastapi import FastAPI
from fastapi.testclient import TestClient

from clio_adapter.routers import webhook as webhook_router
from clio_adapter.services.webhook import handle_webhook, trigger_description


def _make_app() -> FastAPI:
    app = FastAPI()
    app.include_router(webhook_router.router)
    return app


class TestHandleWebhook:
    def test_verification_echoes_challenge(self):
        result = handle_webhook({"type": "webhook.verification", "challenge": "abc123"}, {})

        assert result.status_code == 200
        assert result.response_body == {"challenge": "abc123"}
        assert result.events == []

    def test_event_envelope(self):
        body = {"type": "matter.create", "data": {"id": 5}}

        result = handle_webhook(body, {"X-Clio-Timestamp": "2024-06-01T12:00:00Z"})

        assert result.response_body is None
        [event] = result.events
        assert event.event == "matter.create"
        assert event.data == {"id": 5}
        assert event.timestamp == "2024-06-01T12:00:00Z"
        assert event.raw == body

    def test_event_key_and_whole_body_fallbacks(self):
        body = {"event": "task.complete", "id": 9}

        [event] = handle_webhook(body, {}).events

        assert event.event == "task.complete"
        assert event.data == body
        assert isoparse(event.timestamp).tzinfo is not None

    @pytest.mark.parametrize("data", [{}, []])
    def test_empty_data_container_is_kept(self, data):
        [event] = handle_webhook({"type": "matter.delete", "data": data}, {}).events
        assert event.data == data

    @pytest.mark.parametrize("data", [None, "", 0, False])
    def test_falsy_scalar_data_falls_back_to_body(self, data):
        body = {"type": "matter.delete", "data": data}
        [event] = handle_webhook(body, {}).events
        assert event.data == body


def test_trigger_description():
    desc = trigger_description()

    assert desc.name == "clioTrigger"
    assert desc.group == ["trigger"]
    assert desc.webhooks[0].http_method == "POST"
    assert desc.webhooks[0].path == "webhook"
    events = desc.properties[0]
    assert events.type == "multiOptions"
    assert len(events.options) == 22
    assert desc.properties[1].sub_fields[0].name == "fields"


class TestWebhookRoute:
    def test_verification(self):
        client = TestClient(_make_app())
        resp = client.post("/webhook", json={"type": "webhook.verification", "challenge": "xyz"})
        assert resp.status_code == 200
        assert resp.json() == {"challenge": "xyz"}

    def test_events_reach_registered_handler(self):
        received = []

        async def collect(event):
            received.append(event)

        webhook_router.set_event_handler(collect)
        try:
            client = TestClient(_make_app())
            resp = client.post(
                "/webhook",
                json={"type": "contact.update", "data": {"id": 3}},
                headers={"x-clio-timestamp": "2024-06-01T00:00:00Z"},
            )
        finally:
            webhook_router.set_event_handler(None)

        assert resp.status_code == 200
        assert resp.json() == {"received": 1}
        assert received[0].event == "contact.update"
        assert received[0].timestamp == "2024-06-01T00:00:00Z"

    def test_rejects_non_object_body(self):
        client = TestClient(_make_app())
        resp = client.post("/webhook", json=[1, 2])
        assert resp.status_code == 400
