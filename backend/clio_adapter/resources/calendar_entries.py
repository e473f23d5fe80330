"""Calendar entries: appointments, court dates and deadlines."""

from __future__ import annotations

from clio_adapter.helpers import clean_object
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

RESOURCE = "calendarEntries"
DISPLAY_NAME = "Calendar Entry"
DESCRIPTION = "Manage calendar events"
DEFAULT_OPERATION = "listCalendarEntries"

OPERATIONS = [
    operation("Create", "createCalendarEntry", "Create a calendar entry"),
    operation("Delete", "deleteCalendarEntry", "Delete a calendar entry"),
    operation("Get", "getCalendarEntry", "Get a calendar entry by ID", "Get a calendar entry"),
    operation("List", "listCalendarEntries", "List all calendar entries"),
    operation("Update", "updateCalendarEntry", "Update a calendar entry"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listCalendarEntries"]),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=["listCalendarEntries"],
        sub_fields=[
            option("Matter ID", "matter_id", "number", 0, "Filter by matter"),
            option("Start Date", "from", "dateTime", "", "Filter from this date"),
            option("End Date", "to", "dateTime", "", "Filter to this date"),
        ],
    ),
    id_field(
        "Calendar Entry ID",
        "calendarEntryId",
        resource=RESOURCE,
        operations=["getCalendarEntry", "updateCalendarEntry", "deleteCalendarEntry"],
        description="The ID of the calendar entry",
    ),
    field("Summary", "summary", resource=RESOURCE, operations=["createCalendarEntry"], required=True, default="", description="Event title/summary"),
    field("Start Time", "startAt", "dateTime", resource=RESOURCE, operations=["createCalendarEntry"], required=True, default="", description="Event start time"),
    field("End Time", "endAt", "dateTime", resource=RESOURCE, operations=["createCalendarEntry"], required=True, default="", description="Event end time"),
    collection(
        "Additional Fields",
        "additionalFields",
        resource=RESOURCE,
        operations=["createCalendarEntry"],
        placeholder="Add Field",
        sub_fields=[
            option("Description", "description", "string", "", "Event description"),
            option("Location", "location", "string", "", "Event location"),
            option("Matter ID", "matter_id", "number", 0, "Associated matter"),
            option("All Day", "all_day", "boolean", False, "Whether this is an all-day event"),
        ],
    ),
    collection(
        "Update Fields",
        "updateFields",
        resource=RESOURCE,
        operations=["updateCalendarEntry"],
        placeholder="Add Field",
        sub_fields=[
            option("Summary", "summary", "string", "", "Event title"),
            option("Start Time", "start_at", "dateTime", "", "Start time"),
            option("End Time", "end_at", "dateTime", "", "End time"),
            option("Description", "description", "string", "", "Description"),
            option("Location", "location", "string", "", "Location"),
        ],
    ),
]


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/calendar_entries.json")


async def _get(client: ClioClient, item: ExecutionItem):
    entry_id = require_id(item, "calendarEntryId")
    return await client.request("GET", f"/calendar_entries/{entry_id}.json")


async def _create(client: ClioClient, item: ExecutionItem):
    additional = collection_parameter(item, "additionalFields")
    data = {
        "summary": item.get_parameter("summary"),
        "start_at": item.get_parameter("startAt"),
        "end_at": item.get_parameter("endAt"),
    }
    if additional.get("description"):
        data["description"] = additional["description"]
    if additional.get("location"):
        data["location"] = additional["location"]
    if additional.get("matter_id"):
        data["matter"] = reference(additional["matter_id"])
    if additional.get("all_day"):
        data["all_day"] = additional["all_day"]

    return await client.request("POST", "/calendar_entries.json", {"data": data})


async def _update(client: ClioClient, item: ExecutionItem):
    entry_id = require_id(item, "calendarEntryId")
    data = clean_object(collection_parameter(item, "updateFields"))
    return await client.request("PATCH", f"/calendar_entries/{entry_id}.json", {"data": data})


async def _delete(client: ClioClient, item: ExecutionItem):
    entry_id = require_id(item, "calendarEntryId")
    await client.request("DELETE", f"/calendar_entries/{entry_id}.json")
    return deleted("calendarEntryId", entry_id)


_HANDLERS = {
    "listCalendarEntries": _list,
    "getCalendarEntry": _get,
    "createCalendarEntry": _create,
    "updateCalendarEntry": _update,
    "deleteCalendarEntry": _delete,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
