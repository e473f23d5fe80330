"""Building blocks shared by every resource module.

Each resource module exposes ``OPERATIONS``, ``FIELDS`` and an async
``execute(client, operation, item)``. The helpers here keep those modules
down to the parts that actually differ: endpoints, payload shapes and field
lists.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable

from loguru import logger

from clio_adapter.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from clio_adapter.exceptions import ParameterError, UnknownOperationError
from clio_adapter.helpers import build_query_params, extract_id, is_valid_id, prepare_output
from clio_adapter.models.description import FieldDescriptor, OperationOption
from clio_adapter.models.execution import ExecutionItem, OutputItem
from clio_adapter.services.clio_client import ClioClient

Handler = Callable[[ClioClient, ExecutionItem], Awaitable[Any]]


# -- Metadata builders -----------------------------------------------------


def operation(name: str, value: str, description: str, action: str | None = None) -> OperationOption:
    return OperationOption(name=name, value=value, description=description, action=action or description)


def field(
    display_name: str,
    name: str,
    type: str = "string",
    *,
    resource: str,
    operations: list[str],
    required: bool = False,
    default: Any = None,
    description: str | None = None,
    options: list[dict] | None = None,
    sub_fields: list[FieldDescriptor] | None = None,
    show_when: dict[str, list[Any]] | None = None,
    **extra: Any,
) -> FieldDescriptor:
    return FieldDescriptor(
        display_name=display_name,
        name=name,
        type=type,
        required=required,
        default=default,
        description=description,
        resource=resource,
        operations=operations,
        show_when=show_when or {},
        options=options or [],
        sub_fields=sub_fields or [],
        **extra,
    )


def option(display_name: str, name: str, type: str = "string", default: Any = None, description: str | None = None, **extra: Any) -> FieldDescriptor:
    """A sub-field of a filters / additional fields / update fields collection."""
    return FieldDescriptor(
        display_name=display_name,
        name=name,
        type=type,
        default=default,
        description=description,
        **extra,
    )


def pagination_fields(resource: str, operations: list[str]) -> list[FieldDescriptor]:
    """``returnAll`` / ``limit`` pair every list operation carries."""
    return [
        field(
            "Return All",
            "returnAll",
            "boolean",
            resource=resource,
            operations=operations,
            default=False,
            description="Whether to return all results or only up to a given limit",
        ),
        field(
            "Limit",
            "limit",
            "number",
            resource=resource,
            operations=operations,
            show_when={"returnAll": [False]},
            default=DEFAULT_PAGE_SIZE,
            min_value=1,
            max_value=MAX_PAGE_SIZE,
            description="Max number of results to return",
        ),
    ]


def collection(
    display_name: str,
    name: str,
    *,
    resource: str,
    operations: list[str],
    sub_fields: list[FieldDescriptor],
    placeholder: str | None = None,
) -> FieldDescriptor:
    return field(
        display_name,
        name,
        "collection",
        resource=resource,
        operations=operations,
        default={},
        placeholder=placeholder or f"Add {display_name.rstrip('s')}",
        sub_fields=sub_fields,
    )


def id_field(display_name: str, name: str, *, resource: str, operations: list[str], description: str) -> FieldDescriptor:
    return field(
        display_name,
        name,
        "number",
        resource=resource,
        operations=operations,
        required=True,
        default=0,
        description=description,
    )


# -- Parameter access ------------------------------------------------------


def require_id(item: ExecutionItem, name: str) -> int:
    """Read an ID parameter and make sure it is a positive integer."""
    value = extract_id(item.get_parameter(name))
    if value is None or not is_valid_id(value):
        raise ParameterError(name, f"Parameter '{name}' must be a positive integer ID")
    return value


def collection_parameter(item: ExecutionItem, name: str) -> dict[str, Any]:
    """Collections the user left untouched arrive missing or empty."""
    value = item.get_parameter(name, {})
    return dict(value or {})


def reference(record_id: Any) -> dict[str, Any]:
    """Clio links records with ``{"id": ...}`` objects."""
    return {"id": record_id}


def deleted(id_name: str, record_id: int) -> dict[str, Any]:
    return {"success": True, id_name: record_id}


# -- Request patterns ------------------------------------------------------


async def list_records(
    client: ClioClient,
    item: ExecutionItem,
    endpoint: str,
    *,
    with_filters: bool = True,
) -> Any:
    """Shared list behaviour: walk every page, or fetch one page of ``limit`` items."""
    qs = build_query_params(collection_parameter(item, "filters")) if with_filters else {}
    if item.get_parameter("returnAll", False):
        return await client.request_all_items("GET", endpoint, qs=qs)

    qs["page[size]"] = item.get_parameter("limit", DEFAULT_PAGE_SIZE)
    return await client.request("GET", endpoint, qs=qs)


async def dispatch(
    resource: str,
    handlers: dict[str, Handler],
    client: ClioClient,
    operation_name: str,
    item: ExecutionItem,
) -> list[OutputItem]:
    handler = handlers.get(operation_name)
    if handler is None:
        raise UnknownOperationError(resource, operation_name)

    logger.debug("Running {}.{}", resource, operation_name)
    result = await handler(client, item)
    if isinstance(result, OutputItem):
        return [result]
    return prepare_output(result)
