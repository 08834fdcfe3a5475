"""Payload redaction for commit tracing.

Commit payloads are arbitrary application data and may carry credentials.
Traced commits render their payload through :func:`redact_for_log`, which
masks credential-like keys and bounds the size of what reaches the log.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

_MASK = "***"
_MAX_TEXT = 120
_MAX_ITEMS = 20
_MAX_NESTING = 6

# Compared after lower-casing and dropping "_" and "-".
_CREDENTIAL_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "passwd",
        "secret",
        "token",
        "accesstoken",
        "refreshtoken",
        "apikey",
        "authorization",
        "cookie",
        "session",
    }
)


def _is_credential(key: Any) -> bool:
    return str(key).lower().replace("_", "").replace("-", "") in _CREDENTIAL_KEYS


def _clip_text(text: str) -> str:
    if len(text) <= _MAX_TEXT:
        return text
    return f"{text[:_MAX_TEXT]}... ({len(text)} chars)"


def _as_fields(value: Any) -> Mapping[str, Any] | None:
    """Field view of record-like payloads (models, dataclasses, mappings)."""
    if isinstance(value, BaseModel):
        return value.model_dump()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        return value
    return None


def redact_for_log(payload: Any, *, _level: int = 0) -> Any:
    """Return a log-safe rendering of a commit *payload*.

    Scalars pass through (long strings are clipped); records are rendered
    as dicts with credential fields masked; lists, tuples and sets keep at
    most ``_MAX_ITEMS`` entries. Anything else is shown by type name only.
    """
    if payload is None or isinstance(payload, (bool, int, float)):
        return payload
    if isinstance(payload, str):
        return _clip_text(payload)
    if _level >= _MAX_NESTING:
        return "..."

    fields = _as_fields(payload)
    if fields is not None:
        return {
            str(key): _MASK if _is_credential(key) else redact_for_log(value, _level=_level + 1)
            for key, value in fields.items()
        }

    if isinstance(payload, (list, tuple, set, frozenset)):
        items = [redact_for_log(item, _level=_level + 1) for item in list(payload)[:_MAX_ITEMS]]
        if len(payload) > _MAX_ITEMS:
            items.append(f"... (+{len(payload) - _MAX_ITEMS} more)")
        return items

    return f"<{type(payload).__name__}>"
