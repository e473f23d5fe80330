"""Firm users and their billing rates. Read-only."""

from __future__ import annotations

from clio_adapter.models.execution import ExecutionItem, OutputItem
from clio_adapter.resources.base import (
    collection,
    dispatch,
    id_field,
    list_records,
    operation,
    option,
    pagination_fields,
    require_id,
)
from clio_adapter.services.clio_client import ClioClient

RESOURCE = "users"
DISPLAY_NAME = "User"
DESCRIPTION = "Get firm users and their rates"
DEFAULT_OPERATION = "listUsers"

USER_ROLES = [
    {"name": "Owner", "value": "Owner"},
    {"name": "Admin", "value": "Admin"},
    {"name": "Attorney", "value": "Attorney"},
    {"name": "Paralegal", "value": "Paralegal"},
    {"name": "Staff", "value": "Staff"},
]

OPERATIONS = [
    operation("Get", "getUser", "Get a user by ID", "Get a user"),
    operation("Get Current User", "getCurrentUser", "Get authenticated user", "Get current user"),
    operation("Get Rates", "getUserRates", "Get billing rates for user", "Get user rates"),
    operation("List", "listUsers", "List all users"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listUsers"]),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=["listUsers"],
        sub_fields=[
            option("Enabled", "enabled", "boolean", True, "Filter by enabled status"),
            option("Role", "role", "options", "", "Filter by role", options=USER_ROLES),
        ],
    ),
    id_field(
        "User ID",
        "userId",
        resource=RESOURCE,
        operations=["getUser", "getUserRates"],
        description="The ID of the user",
    ),
]


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/users.json")


async def _get(client: ClioClient, item: ExecutionItem):
    user_id = require_id(item, "userId")
    return await client.request("GET", f"/users/{user_id}.json")


async def _current(client: ClioClient, item: ExecutionItem):
    return await client.who_am_i()


async def _rates(client: ClioClient, item: ExecutionItem):
    user_id = require_id(item, "userId")
    return await client.request("GET", f"/users/{user_id}/rates.json")


_HANDLERS = {
    "listUsers": _list,
    "getUser": _get,
    "getCurrentUser": _current,
    "getUserRates": _rates,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
