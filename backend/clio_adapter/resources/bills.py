"""Bills: invoices raised against matters, plus recording payments on them."""

from __future__ import annotations

from clio_adapter.constants import BILL_STATES
from clio_adapter.helpers import clean_object, decimal_to_cents
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

RESOURCE = "bills"
DISPLAY_NAME = "Bill"
DESCRIPTION = "Manage invoices and billing"
DEFAULT_OPERATION = "listBills"

OPERATIONS = [
    operation("Create", "createBill", "Create a bill"),
    operation("Delete", "deleteBill", "Delete a bill"),
    operation("Get", "getBill", "Get a bill by ID", "Get a bill"),
    operation("List", "listBills", "List all bills"),
    operation("Record Payment", "recordPayment", "Record a payment"),
    operation("Update", "updateBill", "Update a bill"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listBills"]),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=["listBills"],
        sub_fields=[
            option("Matter ID", "matter_id", "number", 0, "Filter by matter"),
            option("State", "state", "options", "", "Filter by bill state", options=BILL_STATES),
            option("Client ID", "client_id", "number", 0, "Filter by client"),
        ],
    ),
    id_field(
        "Bill ID",
        "billId",
        resource=RESOURCE,
        operations=["getBill", "updateBill", "deleteBill", "recordPayment"],
        description="The ID of the bill",
    ),
    id_field("Matter ID", "matterId", resource=RESOURCE, operations=["createBill"], description="ID of the matter to bill"),
    collection(
        "Additional Fields",
        "additionalFields",
        resource=RESOURCE,
        operations=["createBill"],
        placeholder="Add Field",
        sub_fields=[
            option("Due Date", "due_at", "dateTime", "", "Due date for the bill"),
            option("Issue Date", "issued_at", "dateTime", "", "Issue date"),
        ],
    ),
    collection(
        "Update Fields",
        "updateFields",
        resource=RESOURCE,
        operations=["updateBill"],
        placeholder="Add Field",
        sub_fields=[
            option("State", "state", "options", "", "Bill state", options=BILL_STATES),
            option("Due Date", "due_at", "dateTime", "", "Due date"),
        ],
    ),
    field("Payment Amount", "paymentAmount", "number", resource=RESOURCE, operations=["recordPayment"], required=True, default=0, description="Payment amount in dollars"),
    field("Payment Date", "paymentDate", "dateTime", resource=RESOURCE, operations=["recordPayment"], required=True, default="", description="Date the payment was received"),
]


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/bills.json")


async def _get(client: ClioClient, item: ExecutionItem):
    bill_id = require_id(item, "billId")
    return await client.request("GET", f"/bills/{bill_id}.json")


async def _create(client: ClioClient, item: ExecutionItem):
    additional = collection_parameter(item, "additionalFields")
    data = {"matter": reference(require_id(item, "matterId"))}
    if additional.get("due_at"):
        data["due_at"] = additional["due_at"]
    if additional.get("issued_at"):
        data["issued_at"] = additional["issued_at"]

    return await client.request("POST", "/bills.json", {"data": data})


async def _update(client: ClioClient, item: ExecutionItem):
    bill_id = require_id(item, "billId")
    data = clean_object(collection_parameter(item, "updateFields"))
    return await client.request("PATCH", f"/bills/{bill_id}.json", {"data": data})


async def _delete(client: ClioClient, item: ExecutionItem):
    bill_id = require_id(item, "billId")
    await client.request("DELETE", f"/bills/{bill_id}.json")
    return deleted("billId", bill_id)


async def _record_payment(client: ClioClient, item: ExecutionItem):
    bill_id = require_id(item, "billId")
    data = {
        "bill": reference(bill_id),
        "amount": decimal_to_cents(item.get_parameter("paymentAmount")),
        "date": item.get_parameter("paymentDate"),
    }
    return await client.request("POST", "/payments.json", {"data": data})


_HANDLERS = {
    "listBills": _list,
    "getBill": _get,
    "createBill": _create,
    "updateBill": _update,
    "deleteBill": _delete,
    "recordPayment": _record_payment,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
