"""Inbound Clio webhook handling.

Clio first sends a verification request whose challenge must be echoed
back; every later delivery is normalized into a ``WebhookEvent``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping

from loguru import logger

from clio_adapter.constants import CREDENTIAL_NAME, TIMESTAMP_HEADER, WEBHOOK_EVENTS, WEBHOOK_VERIFICATION_TYPE
from clio_adapter.models import FieldDescriptor, NodeDescription, WebhookDescription, WebhookEvent, WebhookResult

TRIGGER_NAME = "clioTrigger"


def trigger_description() -> NodeDescription:
    return NodeDescription(
        name=TRIGGER_NAME,
        display_name="Clio Trigger",
        description="Receive webhook notifications from Clio",
        group=["trigger"],
        credentials=[{"name": CREDENTIAL_NAME, "required": True}],
        webhooks=[WebhookDescription()],
        properties=[
            FieldDescriptor(
                display_name="Events",
                name="events",
                type="multiOptions",
                required=True,
                options=WEBHOOK_EVENTS,
                default=[],
                description="The events to listen to",
            ),
            FieldDescriptor(
                display_name="Options",
                name="options",
                type="collection",
                placeholder="Add Option",
                default={},
                sub_fields=[
                    FieldDescriptor(
                        display_name="Fields",
                        name="fields",
                        default="",
                        description="Comma-separated list of fields to include in webhook payload",
                    ),
                ],
            ),
        ],
    )


def _header(headers: Mapping[str, str], name: str) -> str | None:
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def handle_webhook(body: dict[str, Any], headers: Mapping[str, str]) -> WebhookResult:
    """Turn one inbound delivery into the response and the events to emit."""
    if body.get("type") == WEBHOOK_VERIFICATION_TYPE:
        logger.info("Answering Clio webhook verification challenge")
        return WebhookResult(response_body={"challenge": body.get("challenge")})

    data = body.get("data")
    # An empty object or list is still a payload
    if not data and not isinstance(data, (dict, list)):
        data = body

    event = WebhookEvent(
        event=body.get("type") or body.get("event"),
        data=data,
        timestamp=_header(headers, TIMESTAMP_HEADER) or _now(),
        raw=body,
    )
    logger.debug("Received Clio webhook event {}", event.event)
    return WebhookResult(events=[event])
