from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from clio_adapter.exceptions import ParameterError

_MISSING: Any = object()


class BinaryData(BaseModel):
    """A file handed over by (or back to) the host."""

    data: bytes
    file_name: str | None = None
    mime_type: str = "application/octet-stream"

    model_config = {"ser_json_bytes": "base64", "val_json_bytes": "base64"}


class ExecutionItem(BaseModel):
    """One input item with the node parameters the host collected for it."""

    parameters: dict[str, Any] = {}
    binary: dict[str, BinaryData] = {}

    def get_parameter(self, name: str, default: Any = _MISSING) -> Any:
        """Return a parameter value, the default, or raise ParameterError."""
        if name in self.parameters:
            return self.parameters[name]
        if default is not _MISSING:
            return default
        raise ParameterError(name)

    def get_binary(self, property_name: str) -> BinaryData:
        """Return the binary property, failing the same way a missing parameter does."""
        try:
            return self.binary[property_name]
        except KeyError:
            raise ParameterError(
                property_name,
                f"No binary data exists on item for property '{property_name}'",
            ) from None


class OutputItem(BaseModel):
    """One result item handed back to the host.

    Serialized with ``by_alias=True`` the payload appears under ``json``,
    which is the key workflow hosts read.
    """

    json_data: dict[str, Any] = Field(alias="json")
    binary: dict[str, BinaryData] | None = None
    paired_item: int | None = None

    model_config = {"populate_by_name": True}
