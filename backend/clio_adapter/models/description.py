from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel

FieldType = Literal[
    "string",
    "number",
    "boolean",
    "dateTime",
    "options",
    "multiOptions",
    "collection",
    "fixedCollection",
    "json",
]


class OperationOption(BaseModel):
    """One selectable operation of a resource."""

    name: str
    value: str
    description: str
    action: str


class FieldDescriptor(BaseModel):
    """An input field the host renders and collects for an operation."""

    display_name: str
    name: str
    type: FieldType = "string"
    required: bool = False
    default: Any = None
    description: str | None = None
    resource: str | None = None
    operations: list[str] = []
    show_when: dict[str, list[Any]] = {}
    options: list[dict[str, Any]] = []
    sub_fields: list[FieldDescriptor] = []
    placeholder: str | None = None
    min_value: float | None = None
    max_value: float | None = None


class ResourceDescription(BaseModel):
    name: str
    value: str
    description: str
    default_operation: str
    operations: list[OperationOption]
    fields: list[FieldDescriptor]


class WebhookDescription(BaseModel):
    name: str = "default"
    http_method: str = "POST"
    response_mode: str = "onReceived"
    path: str = "webhook"


class NodeDescription(BaseModel):
    """Full static description of a node as the host consumes it."""

    name: str
    display_name: str
    description: str
    group: list[str]
    version: int = 1
    credentials: list[dict[str, Any]]
    resources: list[ResourceDescription] = []
    properties: list[FieldDescriptor] = []
    webhooks: list[WebhookDescription] = []
