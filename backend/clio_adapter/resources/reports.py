"""Date-ranged firm reports. Every operation shares the same query shape."""

from __future__ import annotations

from clio_adapter.models.execution import ExecutionItem, OutputItem
from clio_adapter.resources.base import collection, collection_parameter, dispatch, field, operation, option
from clio_adapter.services.clio_client import ClioClient

RESOURCE = "reports"
DISPLAY_NAME = "Report"
DESCRIPTION = "Generate productivity and billing reports"
DEFAULT_OPERATION = "getProductivityReport"

REPORT_ENDPOINTS = {
    "getProductivityReport": "/reports/productivity.json",
    "getBillingReport": "/reports/billing.json",
    "getCollectionsReport": "/reports/collections.json",
    "getTimekeeperReport": "/reports/timekeeper.json",
    "getMatterReport": "/reports/matter.json",
}

_REPORT_FILTERS = ("user_id", "matter_id", "client_id", "practice_area_id")

OPERATIONS = [
    operation("Billing Report", "getBillingReport", "Get billing report"),
    operation("Collections Report", "getCollectionsReport", "Get collections report"),
    operation("Matter Report", "getMatterReport", "Get matter report"),
    operation("Productivity Report", "getProductivityReport", "Get productivity report"),
    operation("Timekeeper Report", "getTimekeeperReport", "Get timekeeper report"),
]

_ALL = list(REPORT_ENDPOINTS)

FIELDS = [
    field("Start Date", "startDate", "dateTime", resource=RESOURCE, operations=_ALL, required=True, default="", description="Report start date"),
    field("End Date", "endDate", "dateTime", resource=RESOURCE, operations=_ALL, required=True, default="", description="Report end date"),
    collection(
        "Filters",
        "filters",
        resource=RESOURCE,
        operations=_ALL,
        sub_fields=[
            option("User ID", "user_id", "number", 0, "Filter by user"),
            option("Matter ID", "matter_id", "number", 0, "Filter by matter"),
            option("Client ID", "client_id", "number", 0, "Filter by client"),
            option("Practice Area ID", "practice_area_id", "number", 0, "Filter by practice area"),
        ],
    ),
]


def _report_query(item: ExecutionItem) -> dict:
    filters = collection_parameter(item, "filters")
    qs = {"from": item.get_parameter("startDate"), "to": item.get_parameter("endDate")}
    for key in _REPORT_FILTERS:
        if filters.get(key):
            qs[key] = filters[key]
    return qs


def _report(operation_name: str):
    async def handler(client: ClioClient, item: ExecutionItem):
        return await client.request("GET", REPORT_ENDPOINTS[operation_name], qs=_report_query(item))

    return handler


_HANDLERS = {name: _report(name) for name in REPORT_ENDPOINTS}


async def execute(client: ClioClient, operation_name: str, item: ExecutionItem) -> list[OutputItem]:
    return await dispatch(RESOURCE, _HANDLERS, client, operation_name, item)
