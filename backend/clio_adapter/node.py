"""The Clio action node: static description plus per-item dispatch."""

from __future__ import annotations

from types import ModuleType

from loguru import logger

from clio_adapter.constants import CREDENTIAL_NAME
from clio_adapter.exceptions import UnknownResourceError
from clio_adapter.models import ExecutionItem, FieldDescriptor, NodeDescription, OutputItem, ResourceDescription
from clio_adapter.resources import (
    activities,
    bills,
    calendar_entries,
    communications,
    contacts,
    custom_fields,
    documents,
    expenses,
    matters,
    notes,
    practice_areas,
    reports,
    tasks,
    trust_accounts,
    users,
    webhooks,
)
from clio_adapter.services.clio_client import ClioClient

NODE_NAME = "clio"

RESOURCES: dict[str, ModuleType] = {
    module.RESOURCE: module
    for module in (
        matters,
        contacts,
        activities,
        bills,
        expenses,
        tasks,
        calendar_entries,
        documents,
        notes,
        communications,
        trust_accounts,
        users,
        practice_areas,
        custom_fields,
        reports,
        webhooks,
    )
}

DEFAULT_RESOURCE = matters.RESOURCE


def _resource_selector() -> FieldDescriptor:
    options = sorted(
        ({"name": m.DISPLAY_NAME, "value": m.RESOURCE, "description": m.DESCRIPTION} for m in RESOURCES.values()),
        key=lambda o: o["name"],
    )
    return FieldDescriptor(
        display_name="Resource",
        name="resource",
        type="options",
        default=DEFAULT_RESOURCE,
        options=options,
    )


def _resource_description(module: ModuleType) -> ResourceDescription:
    return ResourceDescription(
        name=module.DISPLAY_NAME,
        value=module.RESOURCE,
        description=module.DESCRIPTION,
        default_operation=module.DEFAULT_OPERATION,
        operations=module.OPERATIONS,
        fields=module.FIELDS,
    )


def describe() -> NodeDescription:
    return NodeDescription(
        name=NODE_NAME,
        display_name="Clio",
        description="Interact with Clio legal practice management API",
        group=["transform"],
        credentials=[{"name": CREDENTIAL_NAME, "required": True}],
        properties=[_resource_selector()],
        resources=[_resource_description(m) for m in RESOURCES.values()],
    )


async def execute(
    client: ClioClient,
    resource: str,
    operation: str,
    items: list[ExecutionItem],
    continue_on_fail: bool = False,
) -> list[OutputItem]:
    """Run one operation over every input item, in order.

    With ``continue_on_fail`` a failing item yields ``{"error": message}``
    paired to its index instead of aborting the run.
    """
    module = RESOURCES.get(resource)
    if module is None:
        raise UnknownResourceError(resource)

    logger.info("Executing {}.{} for {} item(s)", resource, operation, len(items))
    results: list[OutputItem] = []
    for index, item in enumerate(items):
        try:
            outputs = await module.execute(client, operation, item)
        except Exception as e:
            if not continue_on_fail:
                raise
            logger.warning("Item {} of {}.{} failed: {}", index, resource, operation, e)
            results.append(OutputItem(json_data={"error": str(e)}, paired_item=index))
            continue

        for output in outputs:
            if output.paired_item is None:
                output.paired_item = index
            results.append(output)

    return results
