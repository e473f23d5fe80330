"""Shared fixtures: a Clio client wired to an in-process httpx mock transport."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from clio_adapter.services.clio_client import ClioClient
from clio_adapter.services.credentials import ClioCredentials

API_BASE = "https://app.clio.com/api/v4"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def ok(data: Any = None, **kwargs: Any) -> httpx.Response:
    """A 200 response carrying the ``{data, meta}`` envelope."""
    body: dict[str, Any] = {"data": data if data is not None else {}}
    if "next_url" in kwargs:
        body["meta"] = {"paging": {"next": kwargs.pop("next_url")}}
    return httpx.Response(200, json=body, **kwargs)


@pytest.fixture
def credentials() -> ClioCredentials:
    return ClioCredentials(
        region="us",
        access_token="access-1",
        refresh_token="refresh-1",
        client_id="client-id",
        client_secret="client-secret",
    )


@pytest.fixture
def make_client(credentials):
    """Build a ClioClient whose requests are answered by ``handler``."""

    def factory(handler, **kwargs) -> tuple[ClioClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = ClioClient(kwargs.pop("creds", credentials), transport=transport, **kwargs)
        return client, transport

    return factory


@pytest.fixture
def echo_client(make_client):
    """Client that answers every request with ``{"data": {"id": 1}}``."""
    return make_client(lambda request: ok({"id": 1}))
