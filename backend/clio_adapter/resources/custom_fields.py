"""Custom field definitions and the values stored on matters and contacts."""

from __future__ import annotations

from clio_adapter.exceptions import ParameterError
from clio_adapter.models.execution import ExecutionItem, OutputItem
from clio_adapter.resources.base import (
    collection,
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

RESOURCE = "customFields"
DISPLAY_NAME = "Custom Field"
DESCRIPTION = "Manage custom field definitions and values"
DEFAULT_OPERATION = "listCustomFields"

PARENT_TYPES = [
    {"name": "Matter", "value": "Matter"},
    {"name": "Contact", "value": "Contact"},
]

_PARENT_ENDPOINTS = {"Matter": "matters", "Contact": "contacts"}

OPERATIONS = [
    operation("Get", "getCustomField", "Get a custom field definition", "Get a custom field"),
    operation("Get Values", "getCustomFieldValues", "Get custom field values for a record", "Get custom field values"),
    operation("List", "listCustomFields", "List custom field definitions", "List custom fields"),
    operation("Set Values", "setCustomFieldValues", "Set custom field values for a record", "Set custom field values"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listCustomFields"]),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=["listCustomFields"],
        sub_fields=[option("Parent Type", "parent_type", "options", "", "Filter by parent type", options=PARENT_TYPES)],
    ),
    id_field(
        "Custom Field ID",
        "customFieldId",
        resource=RESOURCE,
        operations=["getCustomField"],
        description="The ID of the custom field",
    ),
    field(
        "Parent Type",
        "parentType",
        "options",
        resource=RESOURCE,
        operations=["getCustomFieldValues", "setCustomFieldValues"],
        required=True,
        default="Matter",
        options=PARENT_TYPES,
        description="Type of the parent record",
    ),
    id_field(
        "Parent ID",
        "parentId",
        resource=RESOURCE,
        operations=["getCustomFieldValues", "setCustomFieldValues"],
        description="ID of the parent record (matter or contact)",
    ),
    field(
        "Field Values",
        "fieldValues",
        "fixedCollection",
        resource=RESOURCE,
        operations=["setCustomFieldValues"],
        default={},
        description="Custom field values to set",
        sub_fields=[
            option("Custom Field ID", "custom_field_id", "number", 0, "ID of the custom field"),
            option("Value", "value", "string", "", "Value to set"),
        ],
    ),
]


def _parent_endpoint(item: ExecutionItem) -> str:
    parent_type = item.get_parameter("parentType", "Matter")
    if parent_type not in _PARENT_ENDPOINTS:
        raise ParameterError("parentType", f"Unsupported parent type: {parent_type}")
    parent_id = require_id(item, "parentId")
    return f"/{_PARENT_ENDPOINTS[parent_type]}/{parent_id}.json"


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/custom_fields.json")


async def _get(client: ClioClient, item: ExecutionItem):
    custom_field_id = require_id(item, "customFieldId")
    return await client.request("GET", f"/custom_fields/{custom_field_id}.json")


async def _get_values(client: ClioClient, item: ExecutionItem):
    record = await client.request("GET", _parent_endpoint(item), qs={"fields": "id,custom_field_values"})
    return (record or {}).get("custom_field_values") or []


async def _set_values(client: ClioClient, item: ExecutionItem):
    endpoint = _parent_endpoint(item)
    field_values = item.get_parameter("fieldValues", {}) or {}
    values = [
        {"custom_field": reference(v.get("custom_field_id")), "value": v.get("value")}
        for v in field_values.get("values") or []
    ]
    return await client.request("PATCH", endpoint, {"data": {"custom_field_values": values}})


_HANDLERS = {
    "listCustomFields": _list,
    "getCustomField": _get,
    "getCustomFieldValues": _get_values,
    "setCustomFieldValues": _set_values,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
