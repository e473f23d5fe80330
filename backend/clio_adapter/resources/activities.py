"""Activities: billable time entries logged against matters."""

from __future__ import annotations

from clio_adapter.helpers import decimal_to_cents
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

RESOURCE = "activities"
DISPLAY_NAME = "Activity"
DESCRIPTION = "Manage time entries and activities"
DEFAULT_OPERATION = "listActivities"

OPERATIONS = [
    operation("Create", "createActivity", "Create a time entry", "Create an activity"),
    operation("Delete", "deleteActivity", "Delete an activity"),
    operation("Get", "getActivity", "Get an activity by ID", "Get an activity"),
    operation("List", "listActivities", "List all activities"),
    operation("Update", "updateActivity", "Update an activity"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listActivities"]),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=["listActivities"],
        sub_fields=[
            option("Matter ID", "matter_id", "number", 0, "Filter by matter"),
            option("User ID", "user_id", "number", 0, "Filter by user"),
            option("Billable", "billed", "boolean", False, "Filter by billed status"),
            option("Created Since", "created_since", "dateTime", "", "Filter by creation date"),
        ],
    ),
    id_field(
        "Activity ID",
        "activityId",
        resource=RESOURCE,
        operations=["getActivity", "updateActivity", "deleteActivity"],
        description="The ID of the activity",
    ),
    id_field("Matter ID", "matterId", resource=RESOURCE, operations=["createActivity"], description="ID of the matter"),
    field("Quantity (Hours)", "quantity", "number", resource=RESOURCE, operations=["createActivity"], required=True, default=0, description="Time in hours"),
    field("Rate ($/Hour)", "price", "number", resource=RESOURCE, operations=["createActivity"], required=True, default=0, description="Billing rate in dollars"),
    collection(
        "Additional Fields",
        "additionalFields",
        resource=RESOURCE,
        operations=["createActivity"],
        placeholder="Add Field",
        sub_fields=[
            option("Date", "date", "dateTime", "", "Date of the activity"),
            option("Note", "note", "string", "", "Description of work performed"),
            option("Activity Description ID", "activity_description_id", "number", 0, "ID of activity description template"),
            option("Non-Billable", "non_billable", "boolean", False, "Whether this is non-billable time"),
        ],
    ),
    collection(
        "Update Fields",
        "updateFields",
        resource=RESOURCE,
        operations=["updateActivity"],
        placeholder="Add Field",
        sub_fields=[
            option("Quantity (Hours)", "quantity", "number", 0, "Time in hours"),
            option("Rate ($/Hour)", "price", "number", 0, "Billing rate"),
            option("Note", "note", "string", "", "Description"),
            option("Date", "date", "dateTime", "", "Date of activity"),
        ],
    ),
]


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/activities.json")


async def _get(client: ClioClient, item: ExecutionItem):
    activity_id = require_id(item, "activityId")
    return await client.request("GET", f"/activities/{activity_id}.json")


async def _create(client: ClioClient, item: ExecutionItem):
    additional = collection_parameter(item, "additionalFields")
    data = {
        "type": "TimeEntry",
        "matter": reference(require_id(item, "matterId")),
        "quantity": item.get_parameter("quantity"),
        "price": decimal_to_cents(item.get_parameter("price")),
    }
    if additional.get("date"):
        data["date"] = additional["date"]
    if additional.get("note"):
        data["note"] = additional["note"]
    if additional.get("activity_description_id"):
        data["activity_description"] = reference(additional["activity_description_id"])
    if additional.get("non_billable"):
        data["non_billable"] = additional["non_billable"]

    return await client.request("POST", "/activities.json", {"data": data})


async def _update(client: ClioClient, item: ExecutionItem):
    activity_id = require_id(item, "activityId")
    update = collection_parameter(item, "updateFields")

    data = {}
    if update.get("quantity"):
        data["quantity"] = update["quantity"]
    if update.get("price"):
        data["price"] = decimal_to_cents(update["price"])
    if update.get("note"):
        data["note"] = update["note"]
    if update.get("date"):
        data["date"] = update["date"]

    return await client.request("PATCH", f"/activities/{activity_id}.json", {"data": data})


async def _delete(client: ClioClient, item: ExecutionItem):
    activity_id = require_id(item, "activityId")
    await client.request("DELETE", f"/activities/{activity_id}.json")
    return deleted("activityId", activity_id)


_HANDLERS = {
    "listActivities": _list,
    "getActivity": _get,
    "createActivity": _create,
    "updateActivity": _update,
    "deleteActivity": _delete,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
