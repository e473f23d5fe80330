from .clio import ClioApiResponse, ClioMeta, ClioPaging, WebhookEvent, WebhookResult
from .description import (
    FieldDescriptor,
    NodeDescription,
    OperationOption,
    ResourceDescription,
    WebhookDescription,
)
from .execution import BinaryData, ExecutionItem, OutputItem

__all__ = [
    "ClioApiResponse",
    "ClioMeta",
    "ClioPaging",
    "WebhookEvent",
    "WebhookResult",
    "FieldDescriptor",
    "NodeDescription",
    "OperationOption",
    "ResourceDescription",
    "WebhookDescription",
    "BinaryData",
    "ExecutionItem",
    "OutputItem",
]
