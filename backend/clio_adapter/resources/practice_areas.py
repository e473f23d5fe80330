"""Practice areas (Personal Injury, Family Law, ...)."""

from __future__ import annotations

from clio_adapter.helpers import clean_object
from clio_adapter.models.execution import ExecutionItem, OutputItem
from clio_adapter.resources.base import (
    collection,
    collection_parameter,
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

RESOURCE = "practiceAreas"
DISPLAY_NAME = "Practice Area"
DESCRIPTION = "Manage practice area categories"
DEFAULT_OPERATION = "listPracticeAreas"

OPERATIONS = [
    operation("Create", "createPracticeArea", "Create a practice area"),
    operation("Get", "getPracticeArea", "Get a practice area by ID", "Get a practice area"),
    operation("List", "listPracticeAreas", "List all practice areas"),
    operation("Update", "updatePracticeArea", "Update a practice area"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listPracticeAreas"]),
    id_field(
        "Practice Area ID",
        "practiceAreaId",
        resource=RESOURCE,
        operations=["getPracticeArea", "updatePracticeArea"],
        description="The ID of the practice area",
    ),
    field("Name", "name", resource=RESOURCE, operations=["createPracticeArea"], required=True, default="", description="Practice area name"),
    collection(
        "Additional Fields",
        "additionalFields",
        resource=RESOURCE,
        operations=["createPracticeArea"],
        placeholder="Add Field",
        sub_fields=[
            option("Code", "code", "string", "", "Practice area code"),
            option("Category", "category", "string", "", "Practice area category"),
        ],
    ),
    collection(
        "Update Fields",
        "updateFields",
        resource=RESOURCE,
        operations=["updatePracticeArea"],
        placeholder="Add Field",
        sub_fields=[
            option("Name", "name", "string", "", "Practice area name"),
            option("Code", "code", "string", "", "Practice area code"),
        ],
    ),
]


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/practice_areas.json", with_filters=False)


async def _get(client: ClioClient, item: ExecutionItem):
    practice_area_id = require_id(item, "practiceAreaId")
    return await client.request("GET", f"/practice_areas/{practice_area_id}.json")


async def _create(client: ClioClient, item: ExecutionItem):
    data = {"name": item.get_parameter("name"), **clean_object(collection_parameter(item, "additionalFields"))}
    return await client.request("POST", "/practice_areas.json", {"data": data})


async def _update(client: ClioClient, item: ExecutionItem):
    practice_area_id = require_id(item, "practiceAreaId")
    data = clean_object(collection_parameter(item, "updateFields"))
    return await client.request("PATCH", f"/practice_areas/{practice_area_id}.json", {"data": data})


_HANDLERS = {
    "listPracticeAreas": _list,
    "getPracticeArea": _get,
    "createPracticeArea": _create,
    "updatePracticeArea": _update,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
