"""Conversion of query parameters and request bodies to wire values.

Every date that leaves the client goes through :func:`format_datetime`, so
resources never decide on a date format themselves.
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

Payload = Union[BaseModel, Mapping[str, Any]]


def format_datetime(value: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with millisecond precision.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def to_wire(value: Any) -> Any:
    """Recursively convert a value into its JSON / query representation."""
    if isinstance(value, BaseModel):
        return to_wire(value.model_dump(by_alias=True, exclude_none=True))
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(k): to_wire(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_wire(v) for v in value]
    return value


def serialize_payload(payload: Optional[Payload]) -> Optional[Dict[str, Any]]:
    """Serialize a parameter bag (pydantic model or mapping), dropping None values."""
    if payload is None:
        return None
    wire = to_wire(payload)
    if not isinstance(wire, dict):
        raise TypeError(f"Expected a mapping payload, got {type(payload).__name__}")
    return wire
