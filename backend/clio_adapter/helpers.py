"""Small conversions shared by the resource modules."""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from typing import Any, TypeVar

from dateutil import parser as date_parser

from clio_adapter.exceptions import ParameterError
from clio_adapter.models.execution import OutputItem

T = TypeVar("T")


def cents_to_amount(cents: int | float) -> float:
    """Clio stores money in cents; hosts work in dollars."""
    return cents / 100


cents_to_decimal = cents_to_amount


def amount_to_cents(amount: int | float) -> int:
    """Dollars → cents, rounding half up (1.999 → 200)."""
    return int(math.floor(float(amount) * 100 + 0.5))


decimal_to_cents = amount_to_cents


def seconds_to_hours(seconds: int | float) -> float:
    return seconds / 3600


def hours_to_seconds(hours: int | float) -> int:
    return int(math.floor(float(hours) * 3600 + 0.5))


def build_fields_param(resource: str, fields: list[str]) -> str:
    """Build a nested ``fields`` selector, e.g. ``client{id,name}``."""
    return f"{resource}{{{','.join(fields)}}}"


def parse_date(value: str) -> datetime:
    return date_parser.isoparse(value)


def format_date(value: date | datetime | str | None) -> str:
    """Format a date, datetime or ISO string as ``YYYY-MM-DD``; empty input gives ``""``."""
    if value is None or value == "":
        return ""
    if isinstance(value, str):
        value = parse_date(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        value = value.date()
    return value.isoformat()


def extract_id(value: Any) -> int | None:
    """Pull an integer ID out of an int, a numeric string or an ``{"id": ...}`` dict."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        match = re.match(r"\s*[-+]?\d+", value)
        return int(match.group()) if match else None
    if isinstance(value, dict) and "id" in value:
        return extract_id(value["id"])
    return None


def is_valid_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def clean_object(obj: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None or an empty string."""
    return {key: value for key, value in obj.items() if not _is_empty(value)}


def prepare_output(data: dict | list[dict] | None) -> list[OutputItem]:
    """Wrap a response (one object or a list) into host output items."""
    if data is None:
        data = {}
    rows = data if isinstance(data, list) else [data]
    return [OutputItem(json_data=row if isinstance(row, dict) else {"value": row}) for row in rows]


prepare_output_data = prepare_output


def build_query_params(
    filters: dict[str, Any] | None,
    additional_fields: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Turn a filters collection into query parameters.

    Empty values are skipped and a ``filter_`` key prefix is stripped.
    """
    qs: dict[str, Any] = {}
    for key, value in (filters or {}).items():
        if _is_empty(value):
            continue
        if key.startswith("filter_"):
            key = key[len("filter_"):]
        qs[key] = value

    for key, value in (additional_fields or {}).items():
        if not _is_empty(value):
            qs[key] = value
    return qs


def chunk_array(items: list[T], size: int) -> list[list[T]]:
    if size < 1:
        raise ValueError("chunk size must be positive")
    return [items[i : i + size] for i in range(0, len(items), size)]


def validate_required_fields(data: dict[str, Any], required_fields: list[str]) -> None:
    for field in required_fields:
        if _is_empty(data.get(field)):
            raise ParameterError(field)


def format_phone_number(phone: str) -> str:
    """Keep only digits and ``+``."""
    return re.sub(r"[^\d+]", "", phone)


def simplify_response(data: dict[str, Any]) -> dict[str, Any]:
    """Collapse small ``{id, ...}`` references (three keys or fewer) to their id."""
    simplified: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict) and value:
            if "id" in value and len(value) <= 3:
                simplified[key] = value["id"]
            else:
                simplified[key] = simplify_response(value)
        else:
            simplified[key] = value
    return simplified
