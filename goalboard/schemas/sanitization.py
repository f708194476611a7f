from __future__ import annotations

from typing import Any


def sanitize_text(value: str) -> str:
    stripped = value.strip()
    return "".join(ch for ch in stripped if ch.isprintable() or ch in {"\n", "\t"})


def sanitize_string_fields(
    data: Any,
    field_names: set[str],
    *,
    blank_as_none: set[str] | None = None,
) -> Any:
    """Strip and clean string fields; optional fields sent blank become None."""
    if not isinstance(data, dict):
        return data
    nullable = blank_as_none or set()
    sanitized = dict(data)
    for field_name in field_names:
        current = sanitized.get(field_name)
        if not isinstance(current, str):
            continue
        cleaned = sanitize_text(current)
        if not cleaned and field_name in nullable:
            sanitized[field_name] = None
        else:
            sanitized[field_name] = cleaned
    return sanitized
