"""Helpers for turning request records into query parameters."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

# Ordered (name, value) pairs; requests sends repeated names as-is.
QueryParams = list[tuple[str, str]]


def encode_value(value: Any) -> str:
    """Encode a scalar as a query parameter value.

    Dates become ``YYYY-MM-DD``. Datetimes are truncated to their calendar
    date, in UTC when timezone-aware. Booleans are lowercased to match the
    JSON spelling the API expects.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def encode_query(fields: Mapping[str, Any], params: QueryParams | None = None) -> QueryParams:
    """Append ``fields`` to ``params`` using the query encoding rules.

    None values are skipped. Lists and tuples become one parameter per
    element, in order.

    Args:
        fields: Field names and values to encode
        params: Existing parameters to extend; a new list is used if omitted

    Returns:
        The extended parameter list
    """
    if params is None:
        params = []

    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params.extend((key, encode_value(item)) for item in value)
            continue
        params.append((key, encode_value(value)))

    return params


def set_param(params: QueryParams, key: str, value: Any) -> QueryParams:
    """Set a single-valued parameter, replacing any existing entries for ``key``."""
    params[:] = [(name, existing) for name, existing in params if name != key]
    params.append((key, encode_value(value)))
    return params
