"""Webhook subscriptions registered with Clio."""

from __future__ import annotations

from clio_adapter.constants import WEBHOOK_EVENTS
from clio_adapter.models.execution import ExecutionItem, OutputItem
from clio_adapter.resources.base import (
    collection,
    collection_parameter,
    deleted,
    dispatch,
    field,
    id_field,
    list_records,
    operation,
    option,
    pagination_fields,
    require_id,
)
from clio_adapter.services.clio_client import ClioClient

RESOURCE = "webhooks"
DISPLAY_NAME = "Webhook"
DESCRIPTION = "Manage webhook subscriptions"
DEFAULT_OPERATION = "listWebhooks"

OPERATIONS = [
    operation("Create", "createWebhook", "Create a webhook subscription", "Create a webhook"),
    operation("Delete", "deleteWebhook", "Delete a webhook subscription", "Delete a webhook"),
    operation("Get Events", "getWebhookEvents", "Get available webhook events", "Get webhook events"),
    operation("List", "listWebhooks", "List all webhook subscriptions", "List webhooks"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listWebhooks"]),
    id_field(
        "Webhook ID",
        "webhookId",
        resource=RESOURCE,
        operations=["deleteWebhook"],
        description="The ID of the webhook",
    ),
    field("URL", "url", resource=RESOURCE, operations=["createWebhook"], required=True, default="", description="URL to receive webhook notifications"),
    field(
        "Events",
        "events",
        "multiOptions",
        resource=RESOURCE,
        operations=["createWebhook"],
        required=True,
        default=[],
        options=WEBHOOK_EVENTS,
        description="Events to subscribe to",
    ),
    collection(
        "Additional Fields",
        "additionalFields",
        resource=RESOURCE,
        operations=["createWebhook"],
        placeholder="Add Field",
        sub_fields=[option("Fields", "fields", "string", "", "Comma-separated list of fields to include in webhook payload")],
    ),
]


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/webhooks.json", with_filters=False)


async def _create(client: ClioClient, item: ExecutionItem):
    additional = collection_parameter(item, "additionalFields")
    data = {"url": item.get_parameter("url"), "events": list(item.get_parameter("events") or [])}
    if additional.get("fields"):
        data["fields"] = additional["fields"]

    return await client.request("POST", "/webhooks.json", {"data": data})


async def _delete(client: ClioClient, item: ExecutionItem):
    webhook_id = require_id(item, "webhookId")
    await client.request("DELETE", f"/webhooks/{webhook_id}.json")
    return deleted("webhookId", webhook_id)


async def _events(client: ClioClient, item: ExecutionItem):
    return [{"name": event["name"], "value": event["value"]} for event in WEBHOOK_EVENTS]


_HANDLERS = {
    "listWebhooks": _list,
    "createWebhook": _create,
    "deleteWebhook": _delete,
    "getWebhookEvents": _events,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
