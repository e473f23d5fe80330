from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ClioPaging(BaseModel):
    """Cursor links returned under ``meta.paging``."""

    next: str | None = None
    previous: str | None = None


class ClioMeta(BaseModel):
    paging: ClioPaging | None = None
    records: int | None = None


class ClioApiResponse(BaseModel):
    """The ``{data, meta}`` envelope every Clio v4 endpoint returns."""

    data: Any = None
    meta: ClioMeta | None = None

    model_config = {"extra": "allow"}

    @property
    def next_page(self) -> str | None:
        if self.meta and self.meta.paging:
            return self.meta.paging.next
        return None


class WebhookEvent(BaseModel):
    """Normalized envelope emitted for each inbound Clio webhook."""

    event: str | None = None
    data: Any = None
    timestamp: str
    raw: dict[str, Any]


class WebhookResult(BaseModel):
    """What the receiver answers to Clio and which events it emits."""

    status_code: int = 200
    response_body: dict[str, Any] | None = None
    events: list[WebhookEvent] = []
