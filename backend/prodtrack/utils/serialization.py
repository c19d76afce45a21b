from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

from sqlalchemy import inspect

from pydantic.alias_generators import to_camel


def iso(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    if dt.tzinfo is None:
        # SQLite hands back naive values for timezone-aware columns; they are stored as UTC
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


def json_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return iso(value)
    if isinstance(value, dict):
        return {k: json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_value(v) for v in value]
    return value


def json_key(attr: str) -> str:
    return to_camel(attr.rstrip('_'))


def record_json(obj, exclude: Iterable[str] = ()) -> Dict[str, Any]:
    """Column attributes of ``obj`` as a camelCase JSON-safe dict."""
    skip = set(exclude)
    out = {}
    for attr in inspect(obj).mapper.column_attrs:
        if attr.key in skip:
            continue
        out[json_key(attr.key)] = json_value(getattr(obj, attr.key))
    return out


def snapshot(obj, fields: Iterable[str]) -> Dict[str, Any]:
    return {json_key(f): json_value(getattr(obj, f)) for f in fields}


__all__ = ['iso', 'json_value', 'json_key', 'record_json', 'snapshot']
