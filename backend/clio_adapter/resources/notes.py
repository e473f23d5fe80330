"""Notes attached to matters or contacts."""

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

RESOURCE = "notes"
DISPLAY_NAME = "Note"
DESCRIPTION = "Add notes to matters and contacts"
DEFAULT_OPERATION = "listNotes"

OPERATIONS = [
    operation("Create", "createNote", "Create a note"),
    operation("Delete", "deleteNote", "Delete a note"),
    operation("Get", "getNote", "Get a note by ID", "Get a note"),
    operation("List", "listNotes", "List all notes"),
    operation("Update", "updateNote", "Update a note"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listNotes"]),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=["listNotes"],
        sub_fields=[
            option("Matter ID", "matter_id", "number", 0, "Filter by matter"),
            option("Contact ID", "contact_id", "number", 0, "Filter by contact"),
        ],
    ),
    id_field(
        "Note ID",
        "noteId",
        resource=RESOURCE,
        operations=["getNote", "updateNote", "deleteNote"],
        description="The ID of the note",
    ),
    field("Subject", "subject", resource=RESOURCE, operations=["createNote"], required=True, default="", description="Note subject"),
    field("Detail", "detail", resource=RESOURCE, operations=["createNote"], default="", description="Note content"),
    collection(
        "Additional Fields",
        "additionalFields",
        resource=RESOURCE,
        operations=["createNote"],
        placeholder="Add Field",
        sub_fields=[
            option("Matter ID", "matter_id", "number", 0, "Associated matter"),
            option("Contact ID", "contact_id", "number", 0, "Associated contact"),
            option("Date", "date", "dateTime", "", "Note date"),
        ],
    ),
    collection(
        "Update Fields",
        "updateFields",
        resource=RESOURCE,
        operations=["updateNote"],
        placeholder="Add Field",
        sub_fields=[
            option("Subject", "subject", "string", "", "Note subject"),
            option("Detail", "detail", "string", "", "Note content"),
        ],
    ),
]


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/notes.json")


async def _get(client: ClioClient, item: ExecutionItem):
    note_id = require_id(item, "noteId")
    return await client.request("GET", f"/notes/{note_id}.json")


async def _create(client: ClioClient, item: ExecutionItem):
    additional = collection_parameter(item, "additionalFields")
    data = {
        "subject": item.get_parameter("subject"),
        "detail": item.get_parameter("detail", ""),
    }
    if additional.get("matter_id"):
        data["matter"] = reference(additional["matter_id"])
    if additional.get("contact_id"):
        data["contact"] = reference(additional["contact_id"])
    if additional.get("date"):
        data["date"] = additional["date"]

    return await client.request("POST", "/notes.json", {"data": data})


async def _update(client: ClioClient, item: ExecutionItem):
    note_id = require_id(item, "noteId")
    data = clean_object(collection_parameter(item, "updateFields"))
    return await client.request("PATCH", f"/notes/{note_id}.json", {"data": data})


async def _delete(client: ClioClient, item: ExecutionItem):
    note_id = require_id(item, "noteId")
    await client.request("DELETE", f"/notes/{note_id}.json")
    return deleted("noteId", note_id)


_HANDLERS = {
    "listNotes": _list,
    "getNote": _get,
    "createNote": _create,
    "updateNote": _update,
    "deleteNote": _delete,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
