"""Contacts: people and companies, clients included."""

from __future__ import annotations

from clio_adapter.constants import CONTACT_TYPES
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
    require_id,
)
from clio_adapter.services.clio_client import ClioClient

RESOURCE = "contacts"
DISPLAY_NAME = "Contact"
DESCRIPTION = "Manage clients and contacts"
DEFAULT_OPERATION = "listContacts"

OPERATIONS = [
    operation("Create", "createContact", "Create a new contact", "Create a contact"),
    operation("Delete", "deleteContact", "Delete a contact"),
    operation("Get", "getContact", "Get a contact by ID", "Get a contact"),
    operation("List", "listContacts", "List all contacts"),
    operation("Update", "updateContact", "Update a contact"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listContacts"]),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=["listContacts"],
        sub_fields=[
            option("Type", "type", "options", "", "Filter by type", options=CONTACT_TYPES),
            option("Query", "query", "string", "", "Search query"),
            option("Created Since", "created_since", "dateTime", "", "Filter by creation date"),
            option("Updated Since", "updated_since", "dateTime", "", "Filter by update date"),
        ],
    ),
    id_field(
        "Contact ID",
        "contactId",
        resource=RESOURCE,
        operations=["getContact", "updateContact", "deleteContact"],
        description="The ID of the contact",
    ),
    field(
        "Type",
        "type",
        "options",
        resource=RESOURCE,
        operations=["createContact"],
        required=True,
        default="Person",
        options=CONTACT_TYPES,
        description="Whether the contact is a person or a company",
    ),
    field("First Name", "firstName", resource=RESOURCE, operations=["createContact"], show_when={"type": ["Person"]}, default="", description="First name"),
    field("Last Name", "lastName", resource=RESOURCE, operations=["createContact"], show_when={"type": ["Person"]}, default="", description="Last name"),
    field("Company Name", "companyName", resource=RESOURCE, operations=["createContact"], show_when={"type": ["Company"]}, default="", description="Company name"),
    collection(
        "Additional Fields",
        "additionalFields",
        resource=RESOURCE,
        operations=["createContact"],
        placeholder="Add Field",
        sub_fields=[
            option("Email", "email", "string", "", "Primary email address"),
            option("Phone", "phone", "string", "", "Primary phone number"),
        ],
    ),
    collection(
        "Update Fields",
        "updateFields",
        resource=RESOURCE,
        operations=["updateContact"],
        placeholder="Add Field",
        sub_fields=[
            option("First Name", "first_name", "string", "", "First name"),
            option("Last Name", "last_name", "string", "", "Last name"),
            option("Name", "name", "string", "", "Full name or company name"),
        ],
    ),
]


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/contacts.json")


async def _get(client: ClioClient, item: ExecutionItem):
    contact_id = require_id(item, "contactId")
    return await client.request("GET", f"/contacts/{contact_id}.json")


async def _create(client: ClioClient, item: ExecutionItem):
    contact_type = item.get_parameter("type")
    additional = collection_parameter(item, "additionalFields")

    data: dict = {"type": contact_type}
    if contact_type == "Person":
        data["first_name"] = item.get_parameter("firstName", "")
        data["last_name"] = item.get_parameter("lastName", "")
    else:
        data["name"] = item.get_parameter("companyName", "")

    if additional.get("email"):
        data["email_addresses"] = [{"name": "Primary", "address": additional["email"], "default_email": True}]
    if additional.get("phone"):
        data["phone_numbers"] = [{"name": "Primary", "number": additional["phone"], "default_number": True}]

    return await client.request("POST", "/contacts.json", {"data": data})


async def _update(client: ClioClient, item: ExecutionItem):
    contact_id = require_id(item, "contactId")
    data = clean_object(collection_parameter(item, "updateFields"))
    return await client.request("PATCH", f"/contacts/{contact_id}.json", {"data": data})


async def _delete(client: ClioClient, item: ExecutionItem):
    contact_id = require_id(item, "contactId")
    await client.request("DELETE", f"/contacts/{contact_id}.json")
    return deleted("contactId", contact_id)


_HANDLERS = {
    "listContacts": _list,
    "getContact": _get,
    "createContact": _create,
    "updateContact": _update,
    "deleteContact": _delete,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
