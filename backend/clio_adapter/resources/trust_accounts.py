"""Trust accounts, matter trust balances and trust line items."""

from __future__ import annotations

from clio_adapter.constants import TRUST_TRANSACTION_TYPES
from clio_adapter.helpers import decimal_to_cents
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
    reference,
    require_id,
)
from clio_adapter.services.clio_client import ClioClient

RESOURCE = "trustAccounts"
DISPLAY_NAME = "Trust Account"
DESCRIPTION = "Manage trust/IOLTA accounts"
DEFAULT_OPERATION = "listTrustAccounts"

OPERATIONS = [
    operation("Create Transaction", "createTrustTransaction", "Create a trust transaction"),
    operation("Get Account", "getTrustAccount", "Get a trust account by ID", "Get a trust account"),
    operation("Get Balance", "getTrustBalance", "Get trust balance for matter", "Get trust balance"),
    operation("List Accounts", "listTrustAccounts", "List all trust accounts"),
    operation("List Transactions", "listTrustTransactions", "List trust transactions"),
]

FIELDS = [
    *pagination_fields(RESOURCE, ["listTrustAccounts", "listTrustTransactions"]),
    id_field(
        "Trust Account ID",
        "trustAccountId",
        resource=RESOURCE,
        operations=["getTrustAccount", "createTrustTransaction"],
        description="The ID of the trust account",
    ),
    id_field(
        "Matter ID",
        "matterId",
        resource=RESOURCE,
        operations=["getTrustBalance", "createTrustTransaction"],
        description="The ID of the matter",
    ),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=["listTrustTransactions"],
        sub_fields=[
            option("Matter ID", "matter_id", "number", 0, "Filter by matter"),
            option("Trust Account ID", "trust_account_id", "number", 0, "Filter by trust account"),
        ],
    ),
    field(
        "Transaction Type",
        "transactionType",
        "options",
        resource=RESOURCE,
        operations=["createTrustTransaction"],
        required=True,
        default="deposit",
        options=TRUST_TRANSACTION_TYPES,
        description="Type of transaction",
    ),
    field(
        "Amount",
        "amount",
        "number",
        resource=RESOURCE,
        operations=["createTrustTransaction"],
        required=True,
        default=0,
        description="Transaction amount in dollars",
    ),
    collection(
        "Additional Fields",
        "additionalFields",
        resource=RESOURCE,
        operations=["createTrustTransaction"],
        placeholder="Add Field",
        sub_fields=[
            option("Date", "date", "dateTime", "", "Transaction date"),
            option("Description", "description", "string", "", "Transaction description"),
            option("Check Number", "check_number", "string", "", "Check number if applicable"),
        ],
    ),
]


async def _list_accounts(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/trust_accounts.json", with_filters=False)


async def _get_account(client: ClioClient, item: ExecutionItem):
    account_id = require_id(item, "trustAccountId")
    return await client.request("GET", f"/trust_accounts/{account_id}.json")


async def _get_balance(client: ClioClient, item: ExecutionItem):
    matter_id = require_id(item, "matterId")
    return await client.request("GET", f"/matters/{matter_id}/trust_balance.json")


async def _list_transactions(client: ClioClient, item: ExecutionItem):
    return await list_records(client, item, "/trust_line_items.json")


async def _create_transaction(client: ClioClient, item: ExecutionItem):
    additional = collection_parameter(item, "additionalFields")
    data = {
        "type": item.get_parameter("transactionType"),
        "trust_account": reference(require_id(item, "trustAccountId")),
        "matter": reference(require_id(item, "matterId")),
        "amount": decimal_to_cents(item.get_parameter("amount")),
    }
    for key in ("date", "description", "check_number"):
        if additional.get(key):
            data[key] = additional[key]

    return await client.request("POST", "/trust_line_items.json", {"data": data})


_HANDLERS = {
    "listTrustAccounts": _list_accounts,
    "getTrustAccount": _get_account,
    "getTrustBalance": _get_balance,
    "listTrustTransactions": _list_transactions,
    "createTrustTransaction": _create_transaction,
}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
