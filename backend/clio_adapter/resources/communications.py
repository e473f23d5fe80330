"""Communications: logged emails, calls, letters and meetings."""

from __future__ import annotations

from clio_adapter.constants import COMMUNICATION_TYPES
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

RESOURCE = "communications"
DISPLAY_NAME = "Communication"
DESCRIPTION = "Log emails, calls, and messages"
DEFAULT_OPERATION = "listCommunications"

OPERATIONS = [
    operation("Create", "createCommunication", "Log a communication", "Create a communication"),
    operation("Delete", "deleteCommunication", "Delete a communication"),
    operation("Get", "getCommunication", "Get a communication by ID", "Get a communication"),
    operation("List", "listCommunications", "List all communications"),
    operation("Update", "updateCommunication", "Update a communication"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listCommunications"]),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=["listCommunications"],
        sub_fields=[
            option("Matter ID", "matter_id", "number", 0, "Filter by matter"),
            option("Type", "type", "options", "", "Filter by type", options=COMMUNICATION_TYPES),
        ],
    ),
    id_field(
        "Communication ID",
        "communicationId",
        resource=RESOURCE,
        operations=["getCommunication", "updateCommunication", "deleteCommunication"],
        description="The ID of the communication",
    ),
    field(
        "Type",
        "type",
        "options",
        resource=RESOURCE,
        operations=["createCommunication"],
        required=True,
        default="Email",
        options=COMMUNICATION_TYPES,
        description="Communication type",
    ),
    field("Subject", "subject", resource=RESOURCE, operations=["createCommunication"], required=True, default="", description="Subject/title"),
    collection(
        "Additional Fields",
        "additionalFields",
        resource=RESOURCE,
        operations=["createCommunication"],
        placeholder="Add Field",
        sub_fields=[
            option("Body", "body", "string", "", "Communication body"),
            option("Matter ID", "matter_id", "number", 0, "Associated matter"),
            option("Date", "date", "dateTime", "", "Communication date"),
        ],
    ),
    collection(
        "Update Fields",
        "updateFields",
        resource=RESOURCE,
        operations=["updateCommunication"],
        placeholder="Add Field",
        sub_fields=[
            option("Subject", "subject", "string", "", "Subject"),
            option("Body", "body", "string", "", "Body"),
        ],
    ),
]


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/communications.json")


async def _get(client: ClioClient, item: ExecutionItem):
    communication_id = require_id(item, "communicationId")
    return await client.request("GET", f"/communications/{communication_id}.json")


async def _create(client: ClioClient, item: ExecutionItem):
    additional = collection_parameter(item, "additionalFields")
    data = {
        "type": item.get_parameter("type"),
        "subject": item.get_parameter("subject"),
    }
    if additional.get("body"):
        data["body"] = additional["body"]
    if additional.get("matter_id"):
        data["matter"] = reference(additional["matter_id"])
    if additional.get("date"):
        data["date"] = additional["date"]

    return await client.request("POST", "/communications.json", {"data": data})


async def _update(client: ClioClient, item: ExecutionItem):
    communication_id = require_id(item, "communicationId")
    data = clean_object(collection_parameter(item, "updateFields"))
    return await client.request("PATCH", f"/communications/{communication_id}.json", {"data": data})


async def _delete(client: ClioClient, item: ExecutionItem):
    communication_id = require_id(item, "communicationId")
    await client.request("DELETE", f"/communications/{communication_id}.json")
    return deleted("communicationId", communication_id)


_HANDLERS = {
    "listCommunications": _list,
    "getCommunication": _get,
    "createCommunication": _create,
    "updateCommunication": _update,
    "deleteCommunication": _delete,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
