"""Expenses: hard costs recorded against matters."""

from __future__ import annotations

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

RESOURCE = "expenses"
DISPLAY_NAME = "Expense"
DESCRIPTION = "Track expenses"
DEFAULT_OPERATION = "listExpenses"

OPERATIONS = [
    operation("Create", "createExpense", "Create an expense"),
    operation("Delete", "deleteExpense", "Delete an expense"),
    operation("Get", "getExpense", "Get an expense by ID", "Get an expense"),
    operation("List", "listExpenses", "List all expenses"),
    operation("Update", "updateExpense", "Update an expense"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listExpenses"]),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=["listExpenses"],
        sub_fields=[option("Matter ID", "matter_id", "number", 0, "Filter by matter")],
    ),
    id_field(
        "Expense ID",
        "expenseId",
        resource=RESOURCE,
        operations=["getExpense", "updateExpense", "deleteExpense"],
        description="The ID of the expense",
    ),
    id_field("Matter ID", "matterId", resource=RESOURCE, operations=["createExpense"], description="ID of the matter"),
    field("Amount", "amount", "number", resource=RESOURCE, operations=["createExpense"], required=True, default=0, description="Expense amount in dollars"),
    collection(
        "Additional Fields",
        "additionalFields",
        resource=RESOURCE,
        operations=["createExpense"],
        placeholder="Add Field",
        sub_fields=[
            option("Date", "date", "dateTime", "", "Date of expense"),
            option("Note", "note", "string", "", "Description"),
        ],
    ),
    collection(
        "Update Fields",
        "updateFields",
        resource=RESOURCE,
        operations=["updateExpense"],
        placeholder="Add Field",
        sub_fields=[
            option("Amount", "total", "number", 0, "Amount in dollars"),
            option("Note", "note", "string", "", "Description"),
        ],
    ),
]


async def _list(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/expenses.json")


async def _get(client: ClioClient, item: ExecutionItem):
    expense_id = require_id(item, "expenseId")
    return await client.request("GET", f"/expenses/{expense_id}.json")


async def _create(client: ClioClient, item: ExecutionItem):
    additional = collection_parameter(item, "additionalFields")
    data = {
        "matter": reference(require_id(item, "matterId")),
        "total": decimal_to_cents(item.get_parameter("amount")),
        "type": "ExpenseEntry",
    }
    if additional.get("date"):
        data["date"] = additional["date"]
    if additional.get("note"):
        data["note"] = additional["note"]

    return await client.request("POST", "/expenses.json", {"data": data})


async def _update(client: ClioClient, item: ExecutionItem):
    expense_id = require_id(item, "expenseId")
    data = clean_object(collection_parameter(item, "updateFields"))
    if data.get("total"):
        data["total"] = decimal_to_cents(data["total"])
    return await client.request("PATCH", f"/expenses/{expense_id}.json", {"data": data})


async def _delete(client: ClioClient, item: ExecutionItem):
    expense_id = require_id(item, "expenseId")
    await client.request("DELETE", f"/expenses/{expense_id}.json")
    return deleted("expenseId", expense_id)


_HANDLERS = {
    "listExpenses": _list,
    "getExpense": _get,
    "createExpense": _create,
    "updateExpense": _update,
    "deleteExpense": _delete,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
