"""Matters: the legal cases everything else in Clio hangs off."""

from __future__ import annotations

from clio_adapter.constants import MATTER_STATUSES
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
    reference,
    require_id,
)
from clio_adapter.services.clio_client import ClioClient

RESOURCE = "matters"
DISPLAY_NAME = "Matter"
DESCRIPTION = "Manage legal matters/cases"
DEFAULT_OPERATION = "listMatters"

OPERATIONS = [
    operation("Close Matter", "closeMatter", "Close a matter"),
    operation("Create", "createMatter", "Create a new matter", "Create a matter"),
    operation("Delete", "deleteMatter", "Delete a matter"),
    operation("Get", "getMatter", "Get a matter by ID", "Get a matter"),
    operation("List", "listMatters", "List all matters"),
    operation("Reopen Matter", "reopenMatter", "Reopen a closed matter", "Reopen a matter"),
    operation("Update", "updateMatter", "Update a matter"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listMatters"]),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=["listMatters"],
        sub_fields=[
            option("Client ID", "client_id", "number", 0, "Filter by client ID"),
            option("Status", "status", "options", "", "Filter by status", options=MATTER_STATUSES),
            option("Practice Area ID", "practice_area_id", "number", 0, "Filter by practice area"),
            option("Responsible Attorney ID", "responsible_attorney_id", "number", 0, "Filter by responsible attorney"),
            option("Query", "query", "string", "", "Search query"),
            option("Created Since", "created_since", "dateTime", "", "Filter by creation date"),
            option("Updated Since", "updated_since", "dateTime", "", "Filter by update date"),
        ],
    ),
    id_field(
        "Matter ID",
        "matterId",
        resource=RESOURCE,
        operations=["getMatter", "updateMatter", "deleteMatter", "closeMatter", "reopenMatter"],
        description="The ID of the matter",
    ),
    field("Display Number", "displayNumber", resource=RESOURCE, operations=["createMatter"], required=True, default="", description="Unique matter number"),
    field("Description", "description", resource=RESOURCE, operations=["createMatter"], required=True, default="", description="Matter description"),
    id_field("Client ID", "clientId", resource=RESOURCE, operations=["createMatter"], description="ID of the client contact"),
    collection(
        "Additional Fields",
        "additionalFields",
        resource=RESOURCE,
        operations=["createMatter"],
        placeholder="Add Field",
        sub_fields=[
            option("Practice Area ID", "practice_area_id", "number", 0, "ID of the practice area"),
            option("Responsible Attorney ID", "responsible_attorney_id", "number", 0, "ID of the responsible attorney"),
            option("Open Date", "open_date", "dateTime", "", "Date the matter was opened"),
            option("Status", "status", "options", "Open", "Status of the matter", options=MATTER_STATUSES),
        ],
    ),
    collection(
        "Update Fields",
        "updateFields",
        resource=RESOURCE,
        operations=["updateMatter"],
        placeholder="Add Field",
        sub_fields=[
            option("Display Number", "display_number", "string", "", "Unique identifier"),
            option("Description", "description", "string", "", "Description"),
            option("Status", "status", "options", "", "Status", options=MATTER_STATUSES),
            option("Practice Area ID", "practice_area_id", "number", 0, "Practice area ID"),
        ],
    ),
]


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/matters.json")


async def _get(client: ClioClient, item: ExecutionItem):
    matter_id = require_id(item, "matterId")
    return await client.request("GET", f"/matters/{matter_id}.json")


async def _create(client: ClioClient, item: ExecutionItem):
    additional = collection_parameter(item, "additionalFields")
    data = {
        "display_number": item.get_parameter("displayNumber"),
        "description": item.get_parameter("description"),
        "client": reference(require_id(item, "clientId")),
    }
    if additional.get("practice_area_id"):
        data["practice_area"] = reference(additional["practice_area_id"])
    if additional.get("responsible_attorney_id"):
        data["responsible_attorney"] = reference(additional["responsible_attorney_id"])
    if additional.get("open_date"):
        data["open_date"] = additional["open_date"]
    if additional.get("status"):
        data["status"] = additional["status"]

    return await client.request("POST", "/matters.json", {"data": data})


async def _update(client: ClioClient, item: ExecutionItem):
    matter_id = require_id(item, "matterId")
    update = collection_parameter(item, "updateFields")

    data = {}
    for key in ("display_number", "description", "status"):
        if update.get(key):
            data[key] = update[key]
    if update.get("practice_area_id"):
        data["practice_area"] = reference(update["practice_area_id"])

    return await client.request("PATCH", f"/matters/{matter_id}.json", {"data": data})


async def _delete(client: ClioClient, item: ExecutionItem):
    matter_id = require_id(item, "matterId")
    await client.request("DELETE", f"/matters/{matter_id}.json")
    return deleted("matterId", matter_id)


async def _set_status(client: ClioClient, item: ExecutionItem, status: str):
    matter_id = require_id(item, "matterId")
    return await client.request("PATCH", f"/matters/{matter_id}.json", {"data": {"status": status}})


async def _close(client: ClioClient, item: ExecutionItem):
    return await _set_status(client, item, "Closed")


async def _reopen(client: ClioClient, item: ExecutionItem):
    return await _set_status(client, item, "Open")


_HANDLERS = {
    "listMatters": _list,
    "getMatter": _get,
    "createMatter": _create,
    "updateMatter": _update,
    "deleteMatter": _delete,
    "closeMatter": _close,
    "reopenMatter": _reopen,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
